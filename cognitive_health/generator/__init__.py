"""
Generator Module — Deterministic Sensor Synthesizer

Public API:
- DeterministicSensorSynthesizer: Date-keyed reading synthesizer
- SeedIndex: Central seed-index allocation
- seeded_random: Pure (date, seed) -> [0, 1) draw
- generate_*_for_date: Functional shortcuts per channel
- SleepRecord, VoiceSession, FacialScan, BiometricData, TextSentiment: Reading schemas
"""

from .config import SeedIndex
from .generator import (
    DateLike,
    DeterministicSensorSynthesizer,
    date_to_int,
    generate_biometrics_for_date,
    generate_facial_for_date,
    generate_sleep_for_date,
    generate_text_sentiment_for_date,
    generate_voice_for_date,
    normalize_date,
    seeded_random,
)
from .schemas import (
    BiometricData,
    FacialScan,
    SensorChannel,
    SleepRecord,
    TextSentiment,
    VoiceSession,
)

__all__ = [
    "DateLike",
    "DeterministicSensorSynthesizer",
    "SeedIndex",
    "SensorChannel",
    "date_to_int",
    "normalize_date",
    "seeded_random",
    "generate_sleep_for_date",
    "generate_voice_for_date",
    "generate_facial_for_date",
    "generate_biometrics_for_date",
    "generate_text_sentiment_for_date",
    "SleepRecord",
    "VoiceSession",
    "FacialScan",
    "BiometricData",
    "TextSentiment",
]
