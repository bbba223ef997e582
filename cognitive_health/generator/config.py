"""
Synthesizer Configuration — Seed Allocation and Physiological Ranges

Every draw the synthesizer makes is identified by a member of SeedIndex.
The enum is the single allocation point for seed indices: two draws that
share an index for the same date are perfectly correlated, so @unique
makes a duplicate allocation fail at import time.
"""

from enum import IntEnum, unique


# =============================================================================
# SEED ALLOCATION
# =============================================================================

@unique
class SeedIndex(IntEnum):
    """Centrally allocated seed index per synthesized quantity."""
    # Sleep
    SLEEP_HOURS = 1
    SLEEP_QUALITY = 2
    # Voice
    VOICE_STRESS = 3
    VOICE_PITCH = 4
    VOICE_VOLUME = 5
    VOICE_PRESENCE = 6
    # Facial
    FACIAL_FATIGUE = 7
    FACIAL_BLINK = 8
    FACIAL_ASYMMETRY = 17
    FACIAL_PRESENCE = 18
    # Biometric
    BIOMETRIC_HEART_RATE = 9
    BIOMETRIC_HRV = 10
    BIOMETRIC_STRESS = 11
    BIOMETRIC_STEPS = 12
    # Text sentiment
    TEXT_SENTIMENT = 13
    TEXT_STRESS = 14
    TEXT_WORD_COUNT = 15
    TEXT_EMOTIONAL_WORDS = 16
    # Interventions
    INTERVENTION = 19


# Multiplier applied to sin() before taking the fractional part
HASH_SCALE: float = 10000.0


# =============================================================================
# PRESENCE (optional check-ins)
# =============================================================================

# A reading exists when its presence draw falls below the cutoff
VOICE_PRESENCE_CUTOFF: float = 0.40
FACIAL_PRESENCE_CUTOFF: float = 0.60


# =============================================================================
# SLEEP
# =============================================================================

SLEEP_HOURS_CENTER: float = 7.0
SLEEP_HOURS_SPREAD: float = 3.0
SLEEP_HOURS_MIN: float = 4.0
SLEEP_HOURS_MAX: float = 10.0

SLEEP_QUALITY_BASE: float = 70.0
SLEEP_QUALITY_SPREAD: float = 25.0
SLEEP_QUALITY_REFERENCE_HOURS: float = 9.0  # deficit measured against this
SLEEP_QUALITY_DEFICIT_PENALTY: float = 10.0  # per hour of deficit
SLEEP_QUALITY_MIN: float = 30.0
SLEEP_QUALITY_MAX: float = 100.0


# =============================================================================
# VOICE
# =============================================================================

VOICE_STRESS_BASE: float = 10.0
VOICE_STRESS_SPREAD: float = 70.0
VOICE_PITCH_BASE: float = 50.0
VOICE_PITCH_SPREAD: float = 40.0
VOICE_VOLUME_BASE: float = 30.0
VOICE_VOLUME_SPREAD: float = 50.0


# =============================================================================
# FACIAL
# =============================================================================

FACIAL_FATIGUE_BASE: float = 10.0
FACIAL_FATIGUE_SPREAD: float = 70.0
FACIAL_BLINK_BASE: float = 8.0        # blinks per minute
FACIAL_BLINK_SPREAD: float = 22.0
FACIAL_ASYMMETRY_SPREAD: float = 25.0


# =============================================================================
# BIOMETRIC
# =============================================================================

HEART_RATE_BASE: float = 60.0         # bpm, resting
HEART_RATE_SPREAD: float = 40.0
HRV_BASE: float = 25.0
HRV_SPREAD: float = 75.0
BIOMETRIC_STRESS_BASE: float = 80.0   # nudged down by HRV / 2
BIOMETRIC_STRESS_JITTER: float = 20.0
STEPS_BASE: float = 2000.0
STEPS_SPREAD: float = 13000.0
DEFAULT_LAST_SYNC: str = "Just now"


# =============================================================================
# TEXT SENTIMENT
# =============================================================================

SENTIMENT_BASELINE: float = 35.0      # slightly positive on an average day
SENTIMENT_SPREAD: float = 80.0
TEXT_STRESS_BASE: float = 50.0
TEXT_STRESS_SPREAD: float = 40.0
TEXT_STRESS_SENTIMENT_FACTOR: float = 30.0
WORD_COUNT_BASE: float = 100.0
WORD_COUNT_SPREAD: float = 400.0
