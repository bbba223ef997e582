"""
Shared fixtures: hand-built readings with known, nominal values.
"""

from datetime import date, datetime, timedelta, timezone

import pytest

from cognitive_health.generator import (
    BiometricData,
    FacialScan,
    SleepRecord,
    TextSentiment,
    VoiceSession,
)
from cognitive_health.rules import RuleContext
from cognitive_health.scoring import MODALITY_WEIGHTS, CHIContribution, Modality, calculate_chi


FIXED_TIMESTAMP = datetime(2024, 3, 10, 12, 0, tzinfo=timezone.utc)
DAY = "2024-03-10"


def dates_from(start: str, count: int):
    """`count` consecutive ISO dates starting at `start`."""
    first = date.fromisoformat(start)
    return [(first + timedelta(days=i)).isoformat() for i in range(count)]


def make_sleep(hours: float = 8.0, quality: int = 85) -> SleepRecord:
    return SleepRecord(id=f"sleep_{DAY}", date=DAY, hours=hours, quality=quality)


def make_voice(stress: int = 30, pitch: int = 80, volume: int = 50) -> VoiceSession:
    return VoiceSession(
        id=f"voice_{DAY}", date=DAY,
        stress_level=stress, pitch_stability=pitch, volume_energy=volume,
    )


def make_facial(fatigue: int = 20, blink: int = 15, asymmetry: int = 5) -> FacialScan:
    return FacialScan(
        id=f"facial_{DAY}", date=DAY,
        fatigue_score=fatigue, eye_blink_rate=blink, asymmetry_score=asymmetry,
    )


def make_biometrics(heart_rate: int = 70, hrv: int = 50, stress: int = 30, steps: int = 5000) -> BiometricData:
    return BiometricData(heart_rate=heart_rate, hrv=hrv, stress_level=stress, steps=steps)


def make_text(sentiment: int = 40, stress: int = 40) -> TextSentiment:
    return TextSentiment(
        id=f"text_{DAY}", date=DAY,
        sentiment_score=sentiment, stress_indicators=stress,
        word_count=250, emotional_words=10,
    )


def make_contributions(scores):
    """One contribution per modality, in fusion order."""
    return [
        CHIContribution(
            modality=modality,
            score=score,
            weight=MODALITY_WEIGHTS[modality],
            explanation="test",
        )
        for modality, score in zip(Modality, scores)
    ]


_NOMINAL = object()


def make_context(
    sleep=_NOMINAL,
    voice=_NOMINAL,
    facial=_NOMINAL,
    biometrics=_NOMINAL,
    text=_NOMINAL,
) -> RuleContext:
    """Rule context; every argument left out gets a nominal reading (None = absent)."""
    sleep = make_sleep() if sleep is _NOMINAL else sleep
    voice = make_voice() if voice is _NOMINAL else voice
    facial = make_facial() if facial is _NOMINAL else facial
    biometrics = make_biometrics() if biometrics is _NOMINAL else biometrics
    text = make_text() if text is _NOMINAL else text
    chi = calculate_chi(sleep, voice, facial, biometrics, timestamp=FIXED_TIMESTAMP)
    return RuleContext(
        sleep=sleep,
        voice=voice,
        facial=facial,
        biometrics=biometrics,
        chi_result=chi,
        text_sentiment=text,
    )


@pytest.fixture
def nominal_context() -> RuleContext:
    return make_context()
