"""
Scoring Configuration — Weights, Neutral Scores and Risk Thresholds

MODALITY_WEIGHTS is the named, overridable weight table used by the
fusion engine. It is kept apart from the fusion algorithm so the
missing-modality policy can be revisited without touching the math.
"""

from typing import Dict

from .schemas import Modality


# ============================================================================
# MODALITY WEIGHTS (sum = 1.0)
# ============================================================================

MODALITY_WEIGHTS: Dict[Modality, float] = {
    Modality.SLEEP: 0.35,       # Sleep is most critical for cognitive health
    Modality.BIOMETRIC: 0.25,   # Heart rate variability, stress indicators
    Modality.FACIAL: 0.20,      # Facial fatigue detection
    Modality.VOICE: 0.15,       # Voice stress patterns
    Modality.BEHAVIORAL: 0.05,  # Typing speed, typo rate (not yet collected)
}

# Tolerance when validating an overriding weight table
WEIGHT_SUM_TOLERANCE = 1e-9


# ============================================================================
# NEUTRAL / PLACEHOLDER SCORES
# ============================================================================

# Score assigned to a modality with no reading for the day.
# Missing data is scored as ambiguous, never dropped from the weight total.
NEUTRAL_SCORE = 50

# Fixed score of the behavioral placeholder
BEHAVIORAL_PLACEHOLDER_SCORE = 75


# ============================================================================
# RISK THRESHOLDS (CHI 0-100, higher = healthier)
# ============================================================================

THRESHOLD_LOW_RISK = 80        # At or above this = LOW risk
THRESHOLD_MODERATE_RISK = 50   # At or above this = MODERATE risk
# Below THRESHOLD_MODERATE_RISK = HIGH risk

SCORE_MIN = 0
SCORE_MAX = 100


# ============================================================================
# SLEEP
# ============================================================================

SLEEP_OPTIMAL_MIN_HOURS = 7.0
SLEEP_OPTIMAL_MAX_HOURS = 9.0
SLEEP_SEVERE_DEFICIT_HOURS = 5.0
SLEEP_DEFICIT_HOURS = 6.0
SLEEP_SEVERE_DEFICIT_PENALTY = 30
SLEEP_DEFICIT_PENALTY = 20
SLEEP_MILD_DEFICIT_PENALTY = 10
SLEEP_OVERSLEEP_PENALTY = 10


# ============================================================================
# BIOMETRIC
# ============================================================================

HEART_RATE_CRITICAL_RANGE = (50, 120)   # outside -> -20
HEART_RATE_NORMAL_RANGE = (60, 100)     # outside -> -10
HEART_RATE_CRITICAL_PENALTY = 20
HEART_RATE_ABNORMAL_PENALTY = 10

HRV_VERY_LOW = 20
HRV_LOW = 35
HRV_HIGH = 100
HRV_VERY_LOW_PENALTY = 25
HRV_LOW_PENALTY = 15
HRV_HIGH_PENALTY = 5
HRV_EXPLANATION_LOW = 30

STEPS_ACTIVE_THRESHOLD = 10000
STEPS_ACTIVE_BONUS = 5
BIOMETRIC_STRESS_EXPLANATION_HIGH = 70


# ============================================================================
# FACIAL
# ============================================================================

BLINK_RATE_HIGH = 25    # per minute, stress indicator
BLINK_RATE_LOW = 8      # per minute, concentration issue
BLINK_RATE_HIGH_PENALTY = 15
BLINK_RATE_LOW_PENALTY = 10

ASYMMETRY_SEVERE = 20
ASYMMETRY_MILD = 10
ASYMMETRY_SEVERE_PENALTY = 20
ASYMMETRY_MILD_PENALTY = 10
ASYMMETRY_EXPLANATION = 15
FATIGUE_EXPLANATION_HIGH = 60


# ============================================================================
# VOICE
# ============================================================================

VOLUME_LOW = 30
VOLUME_HIGH = 80
VOLUME_LOW_PENALTY = 15
VOLUME_HIGH_PENALTY = 10
VOICE_STRESS_EXPLANATION_HIGH = 60
PITCH_EXPLANATION_LOW = 50
VOLUME_EXPLANATION_LOW = 40
