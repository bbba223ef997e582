"""
Knowledge Rules Engine (KR1-KR5) — Symbolic Burnout Reasoning

Five explicit, interpretable rules over one day's readings plus the
fused CHI. No machine learning: every rule is a pure predicate with a
regenerable explanation that embeds the numbers it looked at.

Rules follow the pattern:
    IF <condition> THEN <consequence> WITH <explanation>

Rules are table entries, not a branching chain: each one can be
evaluated, tested and replaced on its own.
"""

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Callable, List, Optional, Sequence, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator

from cognitive_health.generator import (
    BiometricData,
    FacialScan,
    SleepRecord,
    TextSentiment,
    VoiceSession,
)
from cognitive_health.scoring import CHIResult


# ============================================================================
# RULE THRESHOLDS — Explicit, Named, No Magic Numbers
# ============================================================================

FACIAL_FATIGUE_HIGH = 60          # facial fatigue score
VOICE_STRESS_HIGH = 65            # voice stress level
BIOMETRIC_STRESS_HIGH = 70        # wearable stress level
SLEEP_HOURS_SHORT = 6.0           # hours
SLEEP_QUALITY_POOR = 60           # KR2 sleep quality
SLEEP_QUALITY_VERY_POOR = 50      # KR4 sleep quality
SENTIMENT_NEGATIVE = -30          # text sentiment score
TEXT_STRESS_CRISIS = 75           # KR2 / KR5 text stress indicators
TEXT_STRESS_FATIGUE = 70          # KR3 / KR4 / KR5 text stress indicators
SYSTEMIC_MODALITY_COUNT = 2       # KR4 stressed-modality count


# ============================================================================
# Schemas
# ============================================================================

class RuleContext(BaseModel):
    """
    Everything a rule may look at for one day.

    history holds prior nights' sleep for trend-aware rules; no current
    rule reads it.
    """
    model_config = ConfigDict(frozen=True)

    sleep: Optional[SleepRecord] = None
    voice: Optional[VoiceSession] = None
    facial: Optional[FacialScan] = None
    biometrics: BiometricData
    chi_result: CHIResult
    text_sentiment: Optional[TextSentiment] = None
    history: List[SleepRecord] = Field(default_factory=list)


class RuleExecution(BaseModel):
    """One rule's verdict for one context."""
    model_config = ConfigDict(frozen=True)

    rule_id: str
    rule_name: str
    fired: bool
    explanation: str
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    @field_validator('timestamp')
    @classmethod
    def ensure_utc(cls, v: datetime) -> datetime:
        if v.tzinfo is None:
            return v.replace(tzinfo=timezone.utc)
        return v


@dataclass(frozen=True)
class KnowledgeRule:
    """A symbolic rule: id, name, predicate and explanation builder."""
    rule_id: str
    name: str
    predicate: Callable[[RuleContext], bool]
    explain: Callable[[RuleContext, bool], str]

    def evaluate(
        self,
        context: RuleContext,
        timestamp: Optional[datetime] = None,
    ) -> RuleExecution:
        """Evaluate this rule alone against a context."""
        fired = bool(self.predicate(context))
        return RuleExecution(
            rule_id=self.rule_id,
            rule_name=self.name,
            fired=fired,
            explanation=self.explain(context, fired),
            timestamp=timestamp or datetime.now(timezone.utc),
        )


# ============================================================================
# Shared conditions
# ============================================================================

def _facial_fatigued(ctx: RuleContext) -> bool:
    return ctx.facial is not None and ctx.facial.fatigue_score > FACIAL_FATIGUE_HIGH


def _voice_stressed(ctx: RuleContext) -> bool:
    return ctx.voice is not None and ctx.voice.stress_level > VOICE_STRESS_HIGH


def _sentiment_negative(ctx: RuleContext) -> bool:
    return ctx.text_sentiment is not None and ctx.text_sentiment.sentiment_score < SENTIMENT_NEGATIVE


def _text_stress_above(ctx: RuleContext, threshold: int) -> bool:
    return ctx.text_sentiment is not None and ctx.text_sentiment.stress_indicators > threshold


# ============================================================================
# KR1: Facial Fatigue + Voice Stress -> Emotional Overload
# ============================================================================

def _kr1_predicate(ctx: RuleContext) -> bool:
    return _facial_fatigued(ctx) and _voice_stressed(ctx)


def _kr1_explain(ctx: RuleContext, fired: bool) -> str:
    if fired:
        return (
            f"High facial fatigue ({ctx.facial.fatigue_score}%) combined with high voice "
            f"stress ({ctx.voice.stress_level}%) indicates significant emotional strain."
        )
    if ctx.facial is None or ctx.voice is None:
        missing = [name for name, reading in (("facial scan", ctx.facial), ("voice session", ctx.voice)) if reading is None]
        return f"Not evaluated in full: no {' or '.join(missing)} recorded today."
    return (
        f"Facial fatigue ({ctx.facial.fatigue_score}%) and voice stress "
        f"({ctx.voice.stress_level}%) are within acceptable ranges."
    )


# ============================================================================
# KR2: Poor Sleep + Negative Mood or Text Stress -> Sleep & Mood Crisis
# ============================================================================

def _kr2_poor_sleep(ctx: RuleContext) -> bool:
    return (
        ctx.sleep is not None
        and ctx.sleep.hours < SLEEP_HOURS_SHORT
        and ctx.sleep.quality < SLEEP_QUALITY_POOR
    )


def _kr2_predicate(ctx: RuleContext) -> bool:
    mood_crisis = _sentiment_negative(ctx) or _text_stress_above(ctx, TEXT_STRESS_CRISIS)
    return _kr2_poor_sleep(ctx) and mood_crisis


def _kr2_explain(ctx: RuleContext, fired: bool) -> str:
    if not fired:
        return "Sleep and mood indicators are within acceptable ranges."

    details = [f"sleep: {ctx.sleep.hours:g}h, {ctx.sleep.quality}% quality"]
    if _sentiment_negative(ctx):
        details.append(f"negative sentiment: {ctx.text_sentiment.sentiment_score}")
    if _text_stress_above(ctx, TEXT_STRESS_CRISIS):
        details.append(f"text stress: {ctx.text_sentiment.stress_indicators}%")
    return (
        f"CRITICAL: Combined physiological and psychological crisis detected "
        f"({', '.join(details)}). User lacks adequate rest while experiencing "
        f"negative mood. Immediate support needed."
    )


# ============================================================================
# KR3: Text Stress Indicators -> Cognitive Fatigue
# ============================================================================

def _kr3_predicate(ctx: RuleContext) -> bool:
    return _text_stress_above(ctx, TEXT_STRESS_FATIGUE)


def _kr3_explain(ctx: RuleContext, fired: bool) -> str:
    if fired:
        return (
            f"Cognitive fatigue detected: Text analysis shows elevated stress indicators "
            f"({ctx.text_sentiment.stress_indicators}%). Word choice and typing patterns "
            f"suggest mental exhaustion."
        )
    if ctx.text_sentiment is None:
        return "No text analysis available today."
    return (
        f"Text stress indicators are at normal levels ({ctx.text_sentiment.stress_indicators}%). "
        f"Cognitive state appears healthy."
    )


# ============================================================================
# KR4: Stress in >= 2 of 5 Modalities -> Systemic Overload
# ============================================================================

def stressed_modalities(ctx: RuleContext) -> List[str]:
    """
    Describe every modality that exceeds its own stress threshold.

    Order: facial, voice, biometric, sleep, text.
    """
    details: List[str] = []

    if _facial_fatigued(ctx):
        details.append(f"facial (fatigue: {ctx.facial.fatigue_score}%)")

    if _voice_stressed(ctx):
        details.append(f"voice (stress: {ctx.voice.stress_level}%)")

    if ctx.biometrics.stress_level > BIOMETRIC_STRESS_HIGH:
        details.append(f"biometric (stress: {ctx.biometrics.stress_level}%)")

    sleep = ctx.sleep
    if sleep is not None and (sleep.hours < SLEEP_HOURS_SHORT or sleep.quality < SLEEP_QUALITY_VERY_POOR):
        details.append(f"sleep ({sleep.hours:g}h, {sleep.quality}% quality)")

    text = ctx.text_sentiment
    if text is not None and (_sentiment_negative(ctx) or _text_stress_above(ctx, TEXT_STRESS_FATIGUE)):
        details.append(f"text (sentiment: {text.sentiment_score}, stress: {text.stress_indicators}%)")

    return details


def _kr4_predicate(ctx: RuleContext) -> bool:
    return len(stressed_modalities(ctx)) >= SYSTEMIC_MODALITY_COUNT


def _kr4_explain(ctx: RuleContext, fired: bool) -> str:
    details = stressed_modalities(ctx)
    count = len(details)
    if fired:
        return (
            f"ALERT: {count} stressed modalities detected ({', '.join(details)}). "
            f"Systemic overload indicated. Intervention needed."
        )
    listed = f" ({details[0]})" if details else ""
    return f"Only {count} stressed modality/ies{listed}. Current stress is localized or manageable."


# ============================================================================
# KR5: All Burnout Indicators Present -> Critical Burnout Alert
# ============================================================================

def _kr5_conditions(ctx: RuleContext) -> Tuple[bool, bool, bool, bool]:
    emotional_negative = _facial_fatigued(ctx) or _sentiment_negative(ctx)
    return (
        emotional_negative,
        _voice_stressed(ctx),
        _text_stress_above(ctx, TEXT_STRESS_CRISIS),
        _text_stress_above(ctx, TEXT_STRESS_FATIGUE),
    )


def _kr5_predicate(ctx: RuleContext) -> bool:
    return all(_kr5_conditions(ctx))


def _kr5_explain(ctx: RuleContext, fired: bool) -> str:
    emotional, voice, text_high, cognitive = _kr5_conditions(ctx)

    if fired:
        conditions = []
        if _facial_fatigued(ctx):
            conditions.append(f"facial fatigue: {ctx.facial.fatigue_score}%")
        if _sentiment_negative(ctx):
            conditions.append(f"text sentiment: {ctx.text_sentiment.sentiment_score}")
        conditions.append(f"voice stress: {ctx.voice.stress_level}%")
        conditions.append(f"text stress: {ctx.text_sentiment.stress_indicators}%")
        return (
            f"CRITICAL: All four burnout indicators present ({', '.join(conditions)}). "
            f"User is in severe psychological distress. IMMEDIATE intervention required: "
            f"breathing exercise, rest, professional support."
        )

    def mark(flag: bool) -> str:
        return "✓" if flag else "✗"

    return (
        f"Burnout risk assessment: {mark(emotional)} Negative emotion, "
        f"{mark(voice)} Stressed voice, {mark(text_high)} High text stress, "
        f"{mark(cognitive)} Cognitive fatigue. Not all conditions present."
    )


# ============================================================================
# Rule table (fixed order KR1..KR5)
# ============================================================================

KR1_EMOTIONAL_OVERLOAD = KnowledgeRule("KR1", "Emotional Overload", _kr1_predicate, _kr1_explain)
KR2_SLEEP_AND_MOOD_CRISIS = KnowledgeRule("KR2", "Sleep & Mood Crisis", _kr2_predicate, _kr2_explain)
KR3_COGNITIVE_FATIGUE = KnowledgeRule("KR3", "Cognitive Fatigue Detection", _kr3_predicate, _kr3_explain)
KR4_SYSTEMIC_OVERLOAD = KnowledgeRule("KR4", "Systemic Overload (5 Modalities)", _kr4_predicate, _kr4_explain)
KR5_CRITICAL_BURNOUT = KnowledgeRule("KR5", "Critical Burnout Alert", _kr5_predicate, _kr5_explain)

KNOWLEDGE_RULES: Tuple[KnowledgeRule, ...] = (
    KR1_EMOTIONAL_OVERLOAD,
    KR2_SLEEP_AND_MOOD_CRISIS,
    KR3_COGNITIVE_FATIGUE,
    KR4_SYSTEMIC_OVERLOAD,
    KR5_CRITICAL_BURNOUT,
)


def execute_all_rules(
    context: RuleContext,
    history: Optional[Sequence[SleepRecord]] = None,
    timestamp: Optional[datetime] = None,
) -> List[RuleExecution]:
    """
    Run every knowledge rule and return the executions in KR1..KR5 order.

    Args:
        context: Current-day readings and fused CHI
        history: Prior nights' sleep, attached to the context for
            trend-aware rules (none of KR1-KR5 reads it)
        timestamp: Evaluation timestamp shared by all executions
            (defaults to now, UTC)

    Returns:
        One RuleExecution per rule
    """
    if history is not None:
        context = context.model_copy(update={"history": list(history)})

    stamp = timestamp or datetime.now(timezone.utc)
    return [rule.evaluate(context, timestamp=stamp) for rule in KNOWLEDGE_RULES]


def get_fired_rules(executions: Sequence[RuleExecution]) -> List[RuleExecution]:
    """Filter executions down to the rules that fired."""
    return [execution for execution in executions if execution.fired]


def get_rule_summary(executions: Sequence[RuleExecution]) -> str:
    """One-line human-readable summary of a rule run."""
    fired = get_fired_rules(executions)

    if not fired:
        return "No concerning patterns detected. Keep up your current healthy habits."

    names = ", ".join(execution.rule_name for execution in fired)
    return f"{len(fired)} rule(s) triggered: {names}. See rule log for details."
