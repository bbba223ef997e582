"""
System State — Full Daily Snapshot

state_for_date() is the single entry point combining synthesis, scoring,
fusion and rule evaluation for one calendar date. The snapshot is never
persisted: it is recomputed on demand and is a pure function of the date
(every timestamp inside it is anchored to the date, not the clock).
"""

import logging
from datetime import date as Date
from datetime import datetime, time, timedelta, timezone
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict

from cognitive_health.generator import (
    BiometricData,
    DateLike,
    DeterministicSensorSynthesizer,
    FacialScan,
    SeedIndex,
    SleepRecord,
    TextSentiment,
    VoiceSession,
    normalize_date,
    seeded_random,
)
from cognitive_health.rules import RuleContext, RuleExecution, execute_all_rules
from cognitive_health.scoring import CHIFusionEngine, CHIResult, RiskLevel

logger = logging.getLogger(__name__)


# Evaluation time stamped on every derived result of a day
EVALUATION_TIME_UTC = time(12, 0, tzinfo=timezone.utc)

# Intervention selection cutoffs on the intervention draw
BREATHING_CUTOFF = 0.30
REST_CUTOFF = 0.50


class InterventionType(str, Enum):
    BREATHING = "breathing"
    REST = "rest"


class InterventionLog(BaseModel):
    """An intervention the system triggered during the day."""
    model_config = ConfigDict(frozen=True)

    id: str
    type: InterventionType
    title: str
    description: str
    timestamp: datetime
    completed: bool = True


class SensorSnapshot(BaseModel):
    """All readings synthesized for a date."""
    model_config = ConfigDict(frozen=True)

    sleep: SleepRecord
    voice: Optional[VoiceSession] = None
    facial: Optional[FacialScan] = None
    biometrics: BiometricData
    text_sentiment: TextSentiment


class SystemState(BaseModel):
    """Complete daily snapshot: readings, CHI, rule verdicts, interventions."""
    model_config = ConfigDict(frozen=True)

    id: str
    date: str
    timestamp: datetime
    chi_score: int
    risk_level: RiskLevel
    sensor_snapshot: SensorSnapshot
    chi_result: CHIResult
    rule_executions: List[RuleExecution]
    interventions: List[InterventionLog]

    @property
    def fired_rules(self) -> List[RuleExecution]:
        return [execution for execution in self.rule_executions if execution.fired]


def evaluation_timestamp(value: DateLike) -> datetime:
    """Noon UTC on the given date."""
    return datetime.combine(Date.fromisoformat(normalize_date(value)), EVALUATION_TIME_UTC)


def generate_interventions_for_date(value: DateLike) -> List[InterventionLog]:
    """
    Interventions triggered on a date.

    Breathing exercise below BREATHING_CUTOFF, rest reminder in
    [BREATHING_CUTOFF, REST_CUTOFF), nothing otherwise.
    """
    day = normalize_date(value)
    draw = seeded_random(day, SeedIndex.INTERVENTION)
    midnight = datetime.combine(Date.fromisoformat(day), time(0, 0, tzinfo=timezone.utc))

    if draw < BREATHING_CUTOFF:
        return [InterventionLog(
            id=f"int_breathing_{day}",
            type=InterventionType.BREATHING,
            title="Breathing Exercise (4-7-8)",
            description="Slow breathing technique to calm the nervous system",
            timestamp=midnight + timedelta(hours=14, minutes=30),
        )]
    if draw < REST_CUTOFF:
        return [InterventionLog(
            id=f"int_rest_{day}",
            type=InterventionType.REST,
            title="Rest Reminder",
            description="Take a 15-minute break away from screens",
            timestamp=midnight + timedelta(hours=16),
        )]
    return []


_SYNTHESIZER = DeterministicSensorSynthesizer()
_ENGINE = CHIFusionEngine()


def state_for_date(
    value: DateLike,
    engine: Optional[CHIFusionEngine] = None,
) -> SystemState:
    """
    Build the complete system state for one date.

    Args:
        value: ISO-8601 date string (or date)
        engine: Fusion engine override (e.g. a different weight table)

    Returns:
        SystemState, identical for identical inputs

    Raises:
        ValueError: If value is not a valid ISO date
    """
    day = normalize_date(value)
    engine = engine or _ENGINE
    stamp = evaluation_timestamp(day)

    sleep = _SYNTHESIZER.sleep_for(day)
    voice = _SYNTHESIZER.voice_for(day)
    facial = _SYNTHESIZER.facial_for(day)
    biometrics = _SYNTHESIZER.biometrics_for(day)
    text_sentiment = _SYNTHESIZER.text_sentiment_for(day)

    chi_result = engine.calculate(sleep, voice, facial, biometrics, timestamp=stamp)

    context = RuleContext(
        sleep=sleep,
        voice=voice,
        facial=facial,
        biometrics=biometrics,
        chi_result=chi_result,
        text_sentiment=text_sentiment,
    )
    rule_executions = execute_all_rules(context, history=[sleep], timestamp=stamp)

    logger.debug(
        f"[State] {day}: chi={chi_result.chi_score} risk={chi_result.risk_level.value} "
        f"fired={[r.rule_id for r in rule_executions if r.fired]}"
    )

    return SystemState(
        id=f"state_{day}",
        date=day,
        timestamp=stamp,
        chi_score=chi_result.chi_score,
        risk_level=chi_result.risk_level,
        sensor_snapshot=SensorSnapshot(
            sleep=sleep,
            voice=voice,
            facial=facial,
            biometrics=biometrics,
            text_sentiment=text_sentiment,
        ),
        chi_result=chi_result,
        rule_executions=rule_executions,
        interventions=generate_interventions_for_date(day),
    )


def date_range_ending(end: DateLike, days: int) -> List[str]:
    """ISO dates of the `days`-long window ending on `end`, oldest first."""
    last = Date.fromisoformat(normalize_date(end))
    return [(last - timedelta(days=offset)).isoformat() for offset in range(days - 1, -1, -1)]


def generate_historical_states(days: int = 30, end: Optional[DateLike] = None) -> List[SystemState]:
    """Consecutive daily states ending on `end` (default today), oldest first."""
    anchor = end if end is not None else Date.today()
    return [state_for_date(day) for day in date_range_ending(anchor, days)]


def generate_sleep_history(days: int = 30, end: Optional[DateLike] = None) -> List[SleepRecord]:
    """Consecutive nights of sleep ending on `end` (default today), oldest first."""
    anchor = end if end is not None else Date.today()
    return [_SYNTHESIZER.sleep_for(day) for day in date_range_ending(anchor, days)]


def generate_voice_history(days: int = 30, end: Optional[DateLike] = None) -> List[VoiceSession]:
    """Voice sessions within the window ending on `end`; days without one are skipped."""
    anchor = end if end is not None else Date.today()
    sessions = (_SYNTHESIZER.voice_for(day) for day in date_range_ending(anchor, days))
    return [session for session in sessions if session is not None]
