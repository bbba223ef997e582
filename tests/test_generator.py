"""
Unit Tests — Deterministic Sensor Synthesizer

Tests verify:
1. Output is deterministic per date (deep JSON equality)
2. Draws lie in [0, 1) and seed indices are unique
3. Readings stay inside their physiological ranges
4. Optional check-ins are absent (None) on some dates, never zeroed
5. Presence rates roughly match the configured cutoffs
"""

from datetime import date

import pytest

from cognitive_health.generator import (
    DeterministicSensorSynthesizer,
    SeedIndex,
    SensorChannel,
    date_to_int,
    generate_facial_for_date,
    generate_sleep_for_date,
    generate_voice_for_date,
    normalize_date,
    seeded_random,
)
from cognitive_health.generator.config import FACIAL_PRESENCE_CUTOFF, VOICE_PRESENCE_CUTOFF

from conftest import dates_from


YEAR_2024 = dates_from("2024-01-01", 366)


class TestSeeding:
    """Test the (date, seed) hash."""

    def test_date_to_int_drops_dashes(self):
        assert date_to_int("2024-03-10") == 20240310

    def test_accepts_date_objects(self):
        assert normalize_date(date(2024, 3, 10)) == "2024-03-10"
        assert seeded_random(date(2024, 3, 10), SeedIndex.SLEEP_HOURS) == \
            seeded_random("2024-03-10", SeedIndex.SLEEP_HOURS)

    def test_invalid_date_raises(self):
        with pytest.raises(ValueError):
            normalize_date("2024-13-40")

    def test_draws_in_unit_interval(self):
        for day in YEAR_2024:
            for seed in SeedIndex:
                value = seeded_random(day, seed)
                assert 0.0 <= value < 1.0

    def test_same_input_same_output(self):
        first = seeded_random("2024-03-10", SeedIndex.TEXT_STRESS)
        for _ in range(10):
            assert seeded_random("2024-03-10", SeedIndex.TEXT_STRESS) == first

    def test_seed_indices_are_unique(self):
        values = [seed.value for seed in SeedIndex]
        assert len(values) == len(set(values))

    def test_distinct_seeds_give_distinct_draws(self):
        draws = {seeded_random("2024-03-10", seed) for seed in SeedIndex}
        assert len(draws) == len(SeedIndex)


class TestDeterminism:
    """Same date -> identical readings."""

    def test_example_date_is_reproducible(self):
        first = generate_sleep_for_date("2024-03-10")
        second = generate_sleep_for_date("2024-03-10")

        assert 4 <= first.hours <= 10
        assert 30 <= first.quality <= 100
        assert first.hours == second.hours
        assert first.quality == second.quality

    def test_all_channels_deep_equal(self):
        a = DeterministicSensorSynthesizer()
        b = DeterministicSensorSynthesizer()

        for day in YEAR_2024[:30]:
            for channel in SensorChannel:
                ra = a.reading_for(day, channel)
                rb = b.reading_for(day, channel)
                if ra is None:
                    assert rb is None
                else:
                    assert ra.model_dump_json() == rb.model_dump_json()

    def test_dispatch_matches_methods(self):
        synth = DeterministicSensorSynthesizer()
        assert synth.reading_for("2024-03-10", SensorChannel.SLEEP) == synth.sleep_for("2024-03-10")
        assert synth.reading_for("2024-03-10", "text") == synth.text_sentiment_for("2024-03-10")


class TestRanges:
    """Readings stay within plausible ranges for a whole year."""

    def test_sleep_ranges(self):
        synth = DeterministicSensorSynthesizer()
        for day in YEAR_2024:
            sleep = synth.sleep_for(day)
            assert 4.0 <= sleep.hours <= 10.0
            assert 30 <= sleep.quality <= 100
            assert sleep.id == f"sleep_{day}"
            assert sleep.date == day

    def test_biometric_ranges(self):
        synth = DeterministicSensorSynthesizer()
        for day in YEAR_2024:
            bio = synth.biometrics_for(day)
            assert 60 <= bio.heart_rate <= 100
            assert 25 <= bio.hrv <= 100
            assert 0 <= bio.stress_level <= 100
            assert 2000 <= bio.steps <= 15000

    def test_text_ranges(self):
        synth = DeterministicSensorSynthesizer()
        for day in YEAR_2024:
            text = synth.text_sentiment_for(day)
            assert -100 <= text.sentiment_score <= 100
            assert 0 <= text.stress_indicators <= 100
            assert 100 <= text.word_count <= 500
            assert text.emotional_words >= 0

    def test_optional_ranges_when_present(self):
        synth = DeterministicSensorSynthesizer()
        for day in YEAR_2024:
            voice = synth.voice_for(day)
            if voice is not None:
                assert 10 <= voice.stress_level <= 80
                assert 50 <= voice.pitch_stability <= 90
                assert 30 <= voice.volume_energy <= 80
            facial = synth.facial_for(day)
            if facial is not None:
                assert 10 <= facial.fatigue_score <= 80
                assert 8 <= facial.eye_blink_rate <= 30
                assert 0 <= facial.asymmetry_score <= 25


class TestPresence:
    """Optional check-ins are absent on some dates."""

    def test_voice_absent_on_some_dates(self):
        sessions = [generate_voice_for_date(day) for day in YEAR_2024]
        assert any(s is None for s in sessions)
        assert any(s is not None for s in sessions)

    def test_facial_absent_on_some_dates(self):
        scans = [generate_facial_for_date(day) for day in YEAR_2024]
        assert any(s is None for s in scans)
        assert any(s is not None for s in scans)

    def test_presence_follows_cutoff(self):
        for day in YEAR_2024[:60]:
            voice_draw = seeded_random(day, SeedIndex.VOICE_PRESENCE)
            facial_draw = seeded_random(day, SeedIndex.FACIAL_PRESENCE)
            assert (generate_voice_for_date(day) is not None) == (voice_draw < VOICE_PRESENCE_CUTOFF)
            assert (generate_facial_for_date(day) is not None) == (facial_draw < FACIAL_PRESENCE_CUTOFF)

    def test_presence_rates(self):
        days = dates_from("2023-01-01", 730)
        voice_rate = sum(generate_voice_for_date(d) is not None for d in days) / len(days)
        facial_rate = sum(generate_facial_for_date(d) is not None for d in days) / len(days)

        assert 0.25 < voice_rate < 0.55
        assert 0.45 < facial_rate < 0.75
