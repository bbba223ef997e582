"""
Knowledge Rule Tests (KR1-KR5)

Tests verify:
- Each rule fires exactly on its documented condition
- Rule independence: inputs satisfying only KR3 fire KR3 alone
- Absent voice/facial readings never fire rules that need them
- Explanations embed the values that drove the verdict
- execute_all_rules returns KR1..KR5 in order; history is accepted but inert
"""

from cognitive_health.rules import (
    KNOWLEDGE_RULES,
    KR1_EMOTIONAL_OVERLOAD,
    KR2_SLEEP_AND_MOOD_CRISIS,
    KR3_COGNITIVE_FATIGUE,
    KR4_SYSTEMIC_OVERLOAD,
    KR5_CRITICAL_BURNOUT,
    RuleExecution,
    execute_all_rules,
    get_fired_rules,
    get_rule_summary,
    stressed_modalities,
)

from conftest import (
    FIXED_TIMESTAMP,
    make_biometrics,
    make_context,
    make_facial,
    make_sleep,
    make_text,
    make_voice,
)


def fired_ids(context):
    return [e.rule_id for e in execute_all_rules(context, timestamp=FIXED_TIMESTAMP) if e.fired]


class TestRuleTable:
    """Fixed, stable order."""

    def test_order_is_kr1_to_kr5(self):
        assert [r.rule_id for r in KNOWLEDGE_RULES] == ["KR1", "KR2", "KR3", "KR4", "KR5"]

    def test_execute_all_returns_five_in_order(self, nominal_context):
        executions = execute_all_rules(nominal_context, timestamp=FIXED_TIMESTAMP)
        assert [e.rule_id for e in executions] == ["KR1", "KR2", "KR3", "KR4", "KR5"]
        assert all(e.timestamp == FIXED_TIMESTAMP for e in executions)

    def test_nominal_context_fires_nothing(self, nominal_context):
        assert fired_ids(nominal_context) == []

    def test_history_is_accepted_and_inert(self, nominal_context):
        history = [make_sleep(hours=4.5, quality=35) for _ in range(7)]
        without = execute_all_rules(nominal_context, timestamp=FIXED_TIMESTAMP)
        with_history = execute_all_rules(nominal_context, history=history, timestamp=FIXED_TIMESTAMP)
        assert without == with_history

    def test_explanations_are_regenerated(self, nominal_context):
        first = execute_all_rules(nominal_context, timestamp=FIXED_TIMESTAMP)
        second = execute_all_rules(nominal_context, timestamp=FIXED_TIMESTAMP)
        assert [e.explanation for e in first] == [e.explanation for e in second]


class TestKR1EmotionalOverload:

    def test_fires_on_fatigue_and_voice_stress(self):
        ctx = make_context(facial=make_facial(fatigue=70), voice=make_voice(stress=70))
        execution = KR1_EMOTIONAL_OVERLOAD.evaluate(ctx)
        assert execution.fired
        assert "70%" in execution.explanation

    def test_thresholds_are_strict(self):
        ctx = make_context(facial=make_facial(fatigue=60), voice=make_voice(stress=65))
        assert not KR1_EMOTIONAL_OVERLOAD.evaluate(ctx).fired

    def test_absent_voice_never_fires(self):
        ctx = make_context(facial=make_facial(fatigue=80), voice=None)
        execution = KR1_EMOTIONAL_OVERLOAD.evaluate(ctx)
        assert not execution.fired
        assert "no voice session" in execution.explanation


class TestKR2SleepAndMoodCrisis:

    def test_fires_on_poor_sleep_and_negative_sentiment(self):
        ctx = make_context(sleep=make_sleep(hours=5.0, quality=50), text=make_text(sentiment=-40, stress=60))
        execution = KR2_SLEEP_AND_MOOD_CRISIS.evaluate(ctx)
        assert execution.fired
        assert "sleep: 5h, 50% quality" in execution.explanation
        assert "negative sentiment: -40" in execution.explanation

    def test_fires_on_poor_sleep_and_text_stress(self):
        ctx = make_context(sleep=make_sleep(hours=5.5, quality=55), text=make_text(sentiment=10, stress=80))
        assert KR2_SLEEP_AND_MOOD_CRISIS.evaluate(ctx).fired

    def test_short_but_good_sleep_does_not_fire(self):
        ctx = make_context(sleep=make_sleep(hours=5.5, quality=70), text=make_text(sentiment=-40))
        assert not KR2_SLEEP_AND_MOOD_CRISIS.evaluate(ctx).fired

    def test_poor_sleep_with_good_mood_does_not_fire(self):
        ctx = make_context(sleep=make_sleep(hours=5.0, quality=40), text=make_text(sentiment=20, stress=50))
        assert not KR2_SLEEP_AND_MOOD_CRISIS.evaluate(ctx).fired


class TestKR3CognitiveFatigue:

    def test_only_kr3_fires_on_text_stress_72(self):
        """Rule independence: only the KR3 condition is satisfied."""
        ctx = make_context(text=make_text(sentiment=40, stress=72))
        assert fired_ids(ctx) == ["KR3"]

    def test_explanation_embeds_value(self):
        ctx = make_context(text=make_text(stress=72))
        assert "(72%)" in KR3_COGNITIVE_FATIGUE.evaluate(ctx).explanation

    def test_threshold_is_strict(self):
        ctx = make_context(text=make_text(stress=70))
        assert not KR3_COGNITIVE_FATIGUE.evaluate(ctx).fired

    def test_absent_text_does_not_fire(self):
        ctx = make_context(text=None)
        execution = KR3_COGNITIVE_FATIGUE.evaluate(ctx)
        assert not execution.fired
        assert "No text analysis" in execution.explanation


class TestKR4SystemicOverload:

    def test_single_stressed_modality_does_not_fire(self):
        ctx = make_context(biometrics=make_biometrics(stress=75))
        execution = KR4_SYSTEMIC_OVERLOAD.evaluate(ctx)
        assert not execution.fired
        assert execution.explanation.startswith("Only 1 stressed modality/ies")
        assert "biometric (stress: 75%)" in execution.explanation

    def test_reports_count_and_modalities(self):
        ctx = make_context(
            facial=make_facial(fatigue=65),
            biometrics=make_biometrics(stress=75),
            sleep=make_sleep(hours=7.5, quality=45),
        )
        execution = KR4_SYSTEMIC_OVERLOAD.evaluate(ctx)
        assert execution.fired
        assert "3 stressed modalities" in execution.explanation
        assert "facial (fatigue: 65%)" in execution.explanation
        assert "biometric (stress: 75%)" in execution.explanation
        assert "sleep (7.5h, 45% quality)" in execution.explanation

    def test_modality_order(self):
        ctx = make_context(
            facial=make_facial(fatigue=65),
            voice=make_voice(stress=70),
            biometrics=make_biometrics(stress=75),
            sleep=make_sleep(hours=5.0, quality=80),
            text=make_text(sentiment=-35, stress=50),
        )
        labels = [d.split(" ")[0] for d in stressed_modalities(ctx)]
        assert labels == ["facial", "voice", "biometric", "sleep", "text"]

    def test_absent_readings_are_not_stressed(self):
        ctx = make_context(facial=None, voice=None)
        assert stressed_modalities(ctx) == []


class TestKR5CriticalBurnout:

    def test_fires_when_all_conditions_hold(self):
        ctx = make_context(
            facial=make_facial(fatigue=70),
            voice=make_voice(stress=70),
            text=make_text(sentiment=10, stress=80),
        )
        execution = KR5_CRITICAL_BURNOUT.evaluate(ctx)
        assert execution.fired
        assert "facial fatigue: 70%" in execution.explanation
        assert "voice stress: 70%" in execution.explanation
        assert "text stress: 80%" in execution.explanation

    def test_negative_sentiment_substitutes_for_facial_fatigue(self):
        ctx = make_context(
            facial=None,
            voice=make_voice(stress=70),
            text=make_text(sentiment=-40, stress=80),
        )
        assert KR5_CRITICAL_BURNOUT.evaluate(ctx).fired

    def test_text_stress_between_70_and_75_does_not_fire(self):
        ctx = make_context(
            facial=make_facial(fatigue=70),
            voice=make_voice(stress=70),
            text=make_text(sentiment=10, stress=73),
        )
        execution = KR5_CRITICAL_BURNOUT.evaluate(ctx)
        assert not execution.fired
        assert "✗ High text stress" in execution.explanation
        assert "✓ Cognitive fatigue" in execution.explanation

    def test_absent_voice_never_fires(self):
        ctx = make_context(
            facial=make_facial(fatigue=70),
            voice=None,
            text=make_text(sentiment=-40, stress=90),
        )
        assert not KR5_CRITICAL_BURNOUT.evaluate(ctx).fired


class TestRuleHelpers:

    def test_get_fired_rules(self):
        ctx = make_context(text=make_text(stress=72))
        executions = execute_all_rules(ctx, timestamp=FIXED_TIMESTAMP)
        fired = get_fired_rules(executions)
        assert [e.rule_id for e in fired] == ["KR3"]

    def test_summary_when_nothing_fires(self, nominal_context):
        executions = execute_all_rules(nominal_context, timestamp=FIXED_TIMESTAMP)
        assert get_rule_summary(executions).startswith("No concerning patterns detected")

    def test_summary_lists_fired_names(self):
        executions = [
            RuleExecution(rule_id="KR1", rule_name="Emotional Overload", fired=True, explanation="x"),
            RuleExecution(rule_id="KR3", rule_name="Cognitive Fatigue Detection", fired=True, explanation="y"),
            RuleExecution(rule_id="KR4", rule_name="Systemic Overload (5 Modalities)", fired=False, explanation="z"),
        ]
        assert get_rule_summary(executions) == (
            "2 rule(s) triggered: Emotional Overload, Cognitive Fatigue Detection. "
            "See rule log for details."
        )
