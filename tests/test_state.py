"""
System State Tests

Tests verify:
1. state_for_date is a pure function of the date (deep JSON equality)
2. Every timestamp is anchored to the date (noon UTC)
3. CHI and risk tier are consistent across the snapshot
4. Absent voice sessions produce an exactly-neutral voice contribution
5. Intervention and history helpers follow the same seeded draws
"""

from datetime import date, datetime, timezone

import pytest

from cognitive_health import state_for_date
from cognitive_health.generator import SeedIndex, seeded_random
from cognitive_health.scoring import Modality, classify_risk_level
from cognitive_health.state import (
    BREATHING_CUTOFF,
    REST_CUTOFF,
    InterventionType,
    date_range_ending,
    evaluation_timestamp,
    generate_historical_states,
    generate_interventions_for_date,
    generate_sleep_history,
    generate_voice_history,
)

from conftest import dates_from


MARCH_2024 = dates_from("2024-03-01", 31)


class TestDeterminism:
    """Same date -> byte-identical state."""

    def test_example_date(self):
        first = state_for_date("2024-03-10")
        second = state_for_date("2024-03-10")
        assert first.model_dump_json() == second.model_dump_json()

    def test_date_object_matches_string(self):
        assert state_for_date(date(2024, 3, 10)).model_dump_json() == \
            state_for_date("2024-03-10").model_dump_json()

    def test_every_date_in_month(self):
        for day in MARCH_2024:
            assert state_for_date(day) == state_for_date(day)

    def test_invalid_date_raises(self):
        with pytest.raises(ValueError):
            state_for_date("not-a-date")


class TestTimestamps:

    def test_noon_utc(self):
        assert evaluation_timestamp("2024-03-10") == datetime(2024, 3, 10, 12, 0, tzinfo=timezone.utc)

    def test_results_share_date_timestamp(self):
        state = state_for_date("2024-03-10")
        expected = evaluation_timestamp("2024-03-10")
        assert state.timestamp == expected
        assert state.chi_result.timestamp == expected
        assert all(e.timestamp == expected for e in state.rule_executions)


class TestSnapshotConsistency:

    def test_identity_fields(self):
        state = state_for_date("2024-03-10")
        assert state.id == "state_2024-03-10"
        assert state.date == "2024-03-10"
        assert state.sensor_snapshot.sleep.date == "2024-03-10"

    def test_chi_and_risk_agree(self):
        for day in MARCH_2024:
            state = state_for_date(day)
            assert 0 <= state.chi_score <= 100
            assert state.chi_score == state.chi_result.chi_score
            assert state.risk_level == classify_risk_level(state.chi_score)

    def test_five_contributions_and_five_rules(self):
        state = state_for_date("2024-03-10")
        assert [c.modality for c in state.chi_result.contributions] == list(Modality)
        assert [e.rule_id for e in state.rule_executions] == ["KR1", "KR2", "KR3", "KR4", "KR5"]

    def test_fired_rules_property(self):
        for day in MARCH_2024:
            state = state_for_date(day)
            assert state.fired_rules == [e for e in state.rule_executions if e.fired]

    def test_absent_voice_is_exactly_neutral(self):
        absent = [d for d in MARCH_2024 if state_for_date(d).sensor_snapshot.voice is None]
        assert absent, "expected at least one date without a voice session"

        for day in absent:
            voice = next(
                c for c in state_for_date(day).chi_result.contributions
                if c.modality == Modality.VOICE
            )
            assert voice.score == 50
            assert voice.explanation == "No voice session data available"

    def test_absent_facial_never_fires_kr1(self):
        for day in MARCH_2024:
            state = state_for_date(day)
            if state.sensor_snapshot.facial is None:
                kr1 = state.rule_executions[0]
                assert not kr1.fired


class TestInterventions:

    def test_follow_seeded_draw(self):
        for day in MARCH_2024:
            draw = seeded_random(day, SeedIndex.INTERVENTION)
            interventions = generate_interventions_for_date(day)
            if draw < BREATHING_CUTOFF:
                assert [i.type for i in interventions] == [InterventionType.BREATHING]
            elif draw < REST_CUTOFF:
                assert [i.type for i in interventions] == [InterventionType.REST]
            else:
                assert interventions == []

    def test_timestamps_fall_on_the_date(self):
        for day in MARCH_2024:
            for intervention in generate_interventions_for_date(day):
                assert intervention.timestamp.date().isoformat() == day
                assert intervention.id.endswith(day)

    def test_state_carries_interventions(self):
        state = state_for_date("2024-03-10")
        assert state.interventions == generate_interventions_for_date("2024-03-10")


class TestHistory:

    def test_date_range_ending(self):
        assert date_range_ending("2024-03-02", 3) == ["2024-02-29", "2024-03-01", "2024-03-02"]

    def test_historical_states_oldest_first(self):
        states = generate_historical_states(days=5, end="2024-03-10")
        assert [s.date for s in states] == date_range_ending("2024-03-10", 5)
        assert states[-1] == state_for_date("2024-03-10")

    def test_sleep_history(self):
        nights = generate_sleep_history(days=7, end="2024-03-10")
        assert len(nights) == 7
        assert nights[-1] == state_for_date("2024-03-10").sensor_snapshot.sleep

    def test_voice_history_skips_absent_days(self):
        sessions = generate_voice_history(days=31, end="2024-03-31")
        present = [d for d in MARCH_2024 if state_for_date(d).sensor_snapshot.voice is not None]
        assert [s.date for s in sessions] == present
