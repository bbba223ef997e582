"""
Deterministic Sensor Synthesizer — Date-Keyed Reading Simulator

Produces the readings a multi-modal health tracker would have observed on
a given calendar date. Every value is a pure function of (date, seed index):
there is no generator state, no real entropy source and no clock involved,
so the same date always yields the same readings.

CRITICAL: This is a SIMULATOR. No real sensor is attached.
"""

import math
from datetime import date as Date
from typing import Optional, Union

from cognitive_health.numeric import clamp, round_half_up, round_to_tenth

from .config import (
    BIOMETRIC_STRESS_BASE,
    BIOMETRIC_STRESS_JITTER,
    DEFAULT_LAST_SYNC,
    FACIAL_ASYMMETRY_SPREAD,
    FACIAL_BLINK_BASE,
    FACIAL_BLINK_SPREAD,
    FACIAL_FATIGUE_BASE,
    FACIAL_FATIGUE_SPREAD,
    FACIAL_PRESENCE_CUTOFF,
    HASH_SCALE,
    HEART_RATE_BASE,
    HEART_RATE_SPREAD,
    HRV_BASE,
    HRV_SPREAD,
    SENTIMENT_BASELINE,
    SENTIMENT_SPREAD,
    SLEEP_HOURS_CENTER,
    SLEEP_HOURS_MAX,
    SLEEP_HOURS_MIN,
    SLEEP_HOURS_SPREAD,
    SLEEP_QUALITY_BASE,
    SLEEP_QUALITY_DEFICIT_PENALTY,
    SLEEP_QUALITY_MAX,
    SLEEP_QUALITY_MIN,
    SLEEP_QUALITY_REFERENCE_HOURS,
    SLEEP_QUALITY_SPREAD,
    STEPS_BASE,
    STEPS_SPREAD,
    TEXT_STRESS_BASE,
    TEXT_STRESS_SENTIMENT_FACTOR,
    TEXT_STRESS_SPREAD,
    VOICE_PITCH_BASE,
    VOICE_PITCH_SPREAD,
    VOICE_PRESENCE_CUTOFF,
    VOICE_STRESS_BASE,
    VOICE_STRESS_SPREAD,
    VOICE_VOLUME_BASE,
    VOICE_VOLUME_SPREAD,
    WORD_COUNT_BASE,
    WORD_COUNT_SPREAD,
    SeedIndex,
)
from .schemas import (
    BiometricData,
    FacialScan,
    Reading,
    SensorChannel,
    SleepRecord,
    TextSentiment,
    VoiceSession,
)


DateLike = Union[str, Date]


def normalize_date(value: DateLike) -> str:
    """
    Normalize a date argument to its ISO-8601 'YYYY-MM-DD' form.

    Raises:
        ValueError: If the string is not a valid ISO date
    """
    if isinstance(value, Date):
        return value.isoformat()
    return Date.fromisoformat(value).isoformat()


def date_to_int(value: DateLike) -> int:
    """Map an ISO date to an integer by dropping the dashes (2024-03-10 -> 20240310)."""
    return int(normalize_date(value).replace("-", ""))


def seeded_random(value: DateLike, seed: SeedIndex) -> float:
    """
    Deterministic draw in [0, 1) for a (date, seed index) pair.

    Fractional part of a scaled sine: cheap, stateless and well spread
    across neighbouring dates.

    Args:
        value: ISO date string or date
        seed: Seed index allocated for the quantity being drawn

    Returns:
        Pseudo-random value in [0, 1)
    """
    hashed = math.sin(date_to_int(value) * int(seed)) * HASH_SCALE
    return hashed - math.floor(hashed)


class DeterministicSensorSynthesizer:
    """
    Date-keyed synthesizer for all five sensor channels.

    Stateless: instances hold no RNG and can be shared freely. Optional
    check-ins (voice, facial) return None when absent for a date; absence
    is never encoded as a zero reading.

    Usage:
        synth = DeterministicSensorSynthesizer()
        sleep = synth.sleep_for("2024-03-10")
        voice = synth.reading_for("2024-03-10", SensorChannel.VOICE)
    """

    def _draw(self, value: DateLike, seed: SeedIndex) -> float:
        return seeded_random(value, seed)

    def sleep_for(self, value: DateLike) -> SleepRecord:
        """
        Synthesize one night's sleep.

        Quality is nudged down by the hours deficit against 9h, so short
        nights tend to be poor nights.
        """
        day = normalize_date(value)
        hours = SLEEP_HOURS_CENTER + (self._draw(day, SeedIndex.SLEEP_HOURS) - 0.5) * SLEEP_HOURS_SPREAD
        quality = (
            SLEEP_QUALITY_BASE
            + self._draw(day, SeedIndex.SLEEP_QUALITY) * SLEEP_QUALITY_SPREAD
            - (SLEEP_QUALITY_REFERENCE_HOURS - hours) * SLEEP_QUALITY_DEFICIT_PENALTY
        )

        hours = clamp(hours, SLEEP_HOURS_MIN, SLEEP_HOURS_MAX)
        quality = clamp(quality, SLEEP_QUALITY_MIN, SLEEP_QUALITY_MAX)

        return SleepRecord(
            id=f"sleep_{day}",
            date=day,
            hours=round_to_tenth(hours),
            quality=round_half_up(quality),
        )

    def voice_for(self, value: DateLike) -> Optional[VoiceSession]:
        """Synthesize the voice check-in, or None on days without one."""
        day = normalize_date(value)
        if self._draw(day, SeedIndex.VOICE_PRESENCE) >= VOICE_PRESENCE_CUTOFF:
            return None

        stress = VOICE_STRESS_BASE + self._draw(day, SeedIndex.VOICE_STRESS) * VOICE_STRESS_SPREAD
        pitch = VOICE_PITCH_BASE + (1 - self._draw(day, SeedIndex.VOICE_PITCH)) * VOICE_PITCH_SPREAD
        volume = VOICE_VOLUME_BASE + self._draw(day, SeedIndex.VOICE_VOLUME) * VOICE_VOLUME_SPREAD

        return VoiceSession(
            id=f"voice_{day}",
            date=day,
            stress_level=round_half_up(stress),
            pitch_stability=round_half_up(pitch),
            volume_energy=round_half_up(volume),
        )

    def facial_for(self, value: DateLike) -> Optional[FacialScan]:
        """Synthesize the facial scan, or None on days without one."""
        day = normalize_date(value)
        if self._draw(day, SeedIndex.FACIAL_PRESENCE) >= FACIAL_PRESENCE_CUTOFF:
            return None

        fatigue = FACIAL_FATIGUE_BASE + self._draw(day, SeedIndex.FACIAL_FATIGUE) * FACIAL_FATIGUE_SPREAD
        blink_rate = FACIAL_BLINK_BASE + self._draw(day, SeedIndex.FACIAL_BLINK) * FACIAL_BLINK_SPREAD
        asymmetry = self._draw(day, SeedIndex.FACIAL_ASYMMETRY) * FACIAL_ASYMMETRY_SPREAD

        return FacialScan(
            id=f"facial_{day}",
            date=day,
            fatigue_score=round_half_up(fatigue),
            eye_blink_rate=round_half_up(blink_rate),
            asymmetry_score=round_half_up(asymmetry),
        )

    def biometrics_for(self, value: DateLike) -> BiometricData:
        """
        Synthesize the wearable snapshot.

        Stress is pulled down by HRV (stress ~ 80 - HRV/2 with jitter).
        """
        day = normalize_date(value)
        heart_rate = HEART_RATE_BASE + self._draw(day, SeedIndex.BIOMETRIC_HEART_RATE) * HEART_RATE_SPREAD
        hrv = round_half_up(HRV_BASE + self._draw(day, SeedIndex.BIOMETRIC_HRV) * HRV_SPREAD)
        stress = round_half_up(
            BIOMETRIC_STRESS_BASE
            - hrv / 2
            + (self._draw(day, SeedIndex.BIOMETRIC_STRESS) - 0.5) * BIOMETRIC_STRESS_JITTER
        )
        steps = STEPS_BASE + self._draw(day, SeedIndex.BIOMETRIC_STEPS) * STEPS_SPREAD

        return BiometricData(
            heart_rate=round_half_up(heart_rate),
            hrv=hrv,
            stress_level=int(clamp(stress, 0, 100)),
            steps=round_half_up(steps),
            last_sync=DEFAULT_LAST_SYNC,
        )

    def text_sentiment_for(self, value: DateLike) -> TextSentiment:
        """
        Synthesize the text-derived sentiment snapshot.

        Negative sentiment raises both the stress indicators and the
        ceiling on emotional word count.
        """
        day = normalize_date(value)
        sentiment = SENTIMENT_BASELINE + (self._draw(day, SeedIndex.TEXT_SENTIMENT) - 0.5) * SENTIMENT_SPREAD
        sentiment = clamp(sentiment, -100, 100)

        stress = (
            TEXT_STRESS_BASE
            + self._draw(day, SeedIndex.TEXT_STRESS) * TEXT_STRESS_SPREAD
            - (sentiment / 100) * TEXT_STRESS_SENTIMENT_FACTOR
        )
        stress = clamp(stress, 0, 100)

        word_count = WORD_COUNT_BASE + self._draw(day, SeedIndex.TEXT_WORD_COUNT) * WORD_COUNT_SPREAD
        emotional_words = self._draw(day, SeedIndex.TEXT_EMOTIONAL_WORDS) * max(0.0, (100 - sentiment) / 2)

        return TextSentiment(
            id=f"text_{day}",
            date=day,
            sentiment_score=round_half_up(sentiment),
            stress_indicators=round_half_up(stress),
            word_count=round_half_up(word_count),
            emotional_words=round_half_up(emotional_words),
        )

    def reading_for(self, value: DateLike, channel: SensorChannel) -> Optional[Reading]:
        """
        Single dispatch entry point: reading for a date on one channel.

        Returns None only for optional channels (voice, facial) on days
        without a check-in.
        """
        dispatch = {
            SensorChannel.SLEEP: self.sleep_for,
            SensorChannel.VOICE: self.voice_for,
            SensorChannel.FACIAL: self.facial_for,
            SensorChannel.BIOMETRIC: self.biometrics_for,
            SensorChannel.TEXT: self.text_sentiment_for,
        }
        return dispatch[SensorChannel(channel)](value)


# Shared stateless instance for the functional API below
_SYNTHESIZER = DeterministicSensorSynthesizer()


def generate_sleep_for_date(value: DateLike) -> SleepRecord:
    return _SYNTHESIZER.sleep_for(value)


def generate_voice_for_date(value: DateLike) -> Optional[VoiceSession]:
    return _SYNTHESIZER.voice_for(value)


def generate_facial_for_date(value: DateLike) -> Optional[FacialScan]:
    return _SYNTHESIZER.facial_for(value)


def generate_biometrics_for_date(value: DateLike) -> BiometricData:
    return _SYNTHESIZER.biometrics_for(value)


def generate_text_sentiment_for_date(value: DateLike) -> TextSentiment:
    return _SYNTHESIZER.text_sentiment_for(value)
