"""
Modality Scorers — Raw Reading to 0-100 Sub-Score

One pure function per modality. Each turns a reading (or None) into a
CHIContribution carrying the normalized score, the modality's fixed
weight and a human-readable rationale.

Absent optional readings score NEUTRAL_SCORE with an explicit
"no data" explanation; they are never dropped from the weighted sum.
"""

from typing import Mapping, Optional

from cognitive_health.generator import BiometricData, FacialScan, SleepRecord, VoiceSession
from cognitive_health.numeric import clamp, round_half_up

from .config import (
    ASYMMETRY_EXPLANATION,
    ASYMMETRY_MILD,
    ASYMMETRY_MILD_PENALTY,
    ASYMMETRY_SEVERE,
    ASYMMETRY_SEVERE_PENALTY,
    BEHAVIORAL_PLACEHOLDER_SCORE,
    BIOMETRIC_STRESS_EXPLANATION_HIGH,
    BLINK_RATE_HIGH,
    BLINK_RATE_HIGH_PENALTY,
    BLINK_RATE_LOW,
    BLINK_RATE_LOW_PENALTY,
    FATIGUE_EXPLANATION_HIGH,
    HEART_RATE_ABNORMAL_PENALTY,
    HEART_RATE_CRITICAL_PENALTY,
    HEART_RATE_CRITICAL_RANGE,
    HEART_RATE_NORMAL_RANGE,
    HRV_EXPLANATION_LOW,
    HRV_HIGH,
    HRV_HIGH_PENALTY,
    HRV_LOW,
    HRV_LOW_PENALTY,
    HRV_VERY_LOW,
    HRV_VERY_LOW_PENALTY,
    MODALITY_WEIGHTS,
    NEUTRAL_SCORE,
    PITCH_EXPLANATION_LOW,
    SCORE_MAX,
    SCORE_MIN,
    SLEEP_DEFICIT_HOURS,
    SLEEP_DEFICIT_PENALTY,
    SLEEP_MILD_DEFICIT_PENALTY,
    SLEEP_OPTIMAL_MAX_HOURS,
    SLEEP_OPTIMAL_MIN_HOURS,
    SLEEP_OVERSLEEP_PENALTY,
    SLEEP_SEVERE_DEFICIT_HOURS,
    SLEEP_SEVERE_DEFICIT_PENALTY,
    STEPS_ACTIVE_BONUS,
    STEPS_ACTIVE_THRESHOLD,
    VOICE_STRESS_EXPLANATION_HIGH,
    VOLUME_EXPLANATION_LOW,
    VOLUME_HIGH,
    VOLUME_HIGH_PENALTY,
    VOLUME_LOW,
    VOLUME_LOW_PENALTY,
)
from .schemas import CHIContribution, Modality


WeightTable = Mapping[Modality, float]


def _contribution(
    modality: Modality,
    raw_score: float,
    explanation: str,
    weights: WeightTable,
) -> CHIContribution:
    """Clamp, round and package a raw score."""
    score = clamp(raw_score, SCORE_MIN, SCORE_MAX)
    return CHIContribution(
        modality=modality,
        score=round_half_up(score),
        weight=weights[modality],
        explanation=explanation,
    )


def _no_data(modality: Modality, label: str, weights: WeightTable) -> CHIContribution:
    return CHIContribution(
        modality=modality,
        score=NEUTRAL_SCORE,
        weight=weights[modality],
        explanation=f"No {label} data available",
    )


def score_sleep(
    sleep: Optional[SleepRecord],
    weights: WeightTable = MODALITY_WEIGHTS,
) -> CHIContribution:
    """
    Score sleep on hours (7-9h optimal) and quality.

    Stepped penalties for short nights (-30 <5h, -20 <6h, -10 <7h) and
    long nights (-10 >9h), then scaled by quality / 100.
    """
    if sleep is None:
        return _no_data(Modality.SLEEP, "sleep", weights)

    hours = sleep.hours
    score = 100.0

    if hours < SLEEP_SEVERE_DEFICIT_HOURS:
        score -= SLEEP_SEVERE_DEFICIT_PENALTY
    elif hours < SLEEP_DEFICIT_HOURS:
        score -= SLEEP_DEFICIT_PENALTY
    elif hours < SLEEP_OPTIMAL_MIN_HOURS:
        score -= SLEEP_MILD_DEFICIT_PENALTY
    elif hours <= SLEEP_OPTIMAL_MAX_HOURS:
        score = 100.0  # optimal
    else:
        score -= SLEEP_OVERSLEEP_PENALTY

    score = score * (sleep.quality / 100)

    if SLEEP_OPTIMAL_MIN_HOURS <= hours <= SLEEP_OPTIMAL_MAX_HOURS:
        explanation = f"Good sleep: {hours:g}h with {sleep.quality}% quality"
    elif hours < SLEEP_OPTIMAL_MIN_HOURS:
        explanation = f"Insufficient sleep: only {hours:g}h (target: 7-9h)"
    else:
        explanation = f"Excessive sleep: {hours:g}h (may indicate fatigue)"

    return _contribution(Modality.SLEEP, score, explanation, weights)


def score_biometric(
    biometrics: BiometricData,
    weights: WeightTable = MODALITY_WEIGHTS,
) -> CHIContribution:
    """
    Score the wearable snapshot: heart rate, HRV, stress and activity.
    """
    heart_rate = biometrics.heart_rate
    hrv = biometrics.hrv
    stress = biometrics.stress_level
    steps = biometrics.steps
    score = 100.0

    critical_low, critical_high = HEART_RATE_CRITICAL_RANGE
    normal_low, normal_high = HEART_RATE_NORMAL_RANGE
    if heart_rate < critical_low or heart_rate > critical_high:
        score -= HEART_RATE_CRITICAL_PENALTY
    elif heart_rate < normal_low or heart_rate > normal_high:
        score -= HEART_RATE_ABNORMAL_PENALTY

    if hrv < HRV_VERY_LOW:
        score -= HRV_VERY_LOW_PENALTY
    elif hrv < HRV_LOW:
        score -= HRV_LOW_PENALTY
    elif hrv > HRV_HIGH:
        score -= HRV_HIGH_PENALTY

    score = score * ((100 - stress) / 100)

    if steps > STEPS_ACTIVE_THRESHOLD:
        score = min(100.0, score + STEPS_ACTIVE_BONUS)

    notes = []
    if heart_rate < normal_low:
        notes.append("Low heart rate.")
    if heart_rate > normal_high:
        notes.append("Elevated heart rate.")
    if hrv < HRV_EXPLANATION_LOW:
        notes.append("Low HRV (high stress).")
    if stress > BIOMETRIC_STRESS_EXPLANATION_HIGH:
        notes.append("High stress level.")
    if steps > STEPS_ACTIVE_THRESHOLD:
        notes.append("Good physical activity.")
    explanation = " ".join(notes) or f"HR: {heart_rate}bpm, HRV: {hrv}, Steps: {steps}"

    return _contribution(Modality.BIOMETRIC, score, explanation, weights)


def score_facial(
    facial: Optional[FacialScan],
    weights: WeightTable = MODALITY_WEIGHTS,
) -> CHIContribution:
    """
    Score the facial scan: fatigue, blink rate extremes and asymmetry.
    """
    if facial is None:
        return _no_data(Modality.FACIAL, "facial scan", weights)

    score = 100.0 * ((100 - facial.fatigue_score) / 100)

    if facial.eye_blink_rate > BLINK_RATE_HIGH:
        score -= BLINK_RATE_HIGH_PENALTY
    elif facial.eye_blink_rate < BLINK_RATE_LOW:
        score -= BLINK_RATE_LOW_PENALTY

    if facial.asymmetry_score > ASYMMETRY_SEVERE:
        score -= ASYMMETRY_SEVERE_PENALTY
    elif facial.asymmetry_score > ASYMMETRY_MILD:
        score -= ASYMMETRY_MILD_PENALTY

    notes = []
    if facial.fatigue_score > FATIGUE_EXPLANATION_HIGH:
        notes.append("High fatigue detected.")
    if facial.eye_blink_rate > BLINK_RATE_HIGH:
        notes.append("Elevated blink rate (stress).")
    if facial.asymmetry_score > ASYMMETRY_EXPLANATION:
        notes.append("Facial asymmetry detected.")
    explanation = " ".join(notes) or "Facial features appear healthy."

    return _contribution(Modality.FACIAL, score, explanation, weights)


def score_voice(
    voice: Optional[VoiceSession],
    weights: WeightTable = MODALITY_WEIGHTS,
) -> CHIContribution:
    """
    Score the voice session: stress, pitch stability and volume extremes.
    """
    if voice is None:
        return _no_data(Modality.VOICE, "voice session", weights)

    score = 100.0
    score = score * ((100 - voice.stress_level) / 100)
    score = score * (voice.pitch_stability / 100)

    if voice.volume_energy < VOLUME_LOW:
        score -= VOLUME_LOW_PENALTY   # fatigue
    elif voice.volume_energy > VOLUME_HIGH:
        score -= VOLUME_HIGH_PENALTY  # agitation

    notes = []
    if voice.stress_level > VOICE_STRESS_EXPLANATION_HIGH:
        notes.append("High stress in voice.")
    if voice.pitch_stability < PITCH_EXPLANATION_LOW:
        notes.append("Poor pitch stability.")
    if voice.volume_energy < VOLUME_EXPLANATION_LOW:
        notes.append("Low energy in voice.")
    explanation = " ".join(notes) or f"Voice stress: {voice.stress_level}%"

    return _contribution(Modality.VOICE, score, explanation, weights)


def score_behavioral(weights: WeightTable = MODALITY_WEIGHTS) -> CHIContribution:
    """
    Behavioral placeholder (typing speed, typo rate).

    Always returns the fixed placeholder score until typing-pattern
    capture exists.
    """
    return CHIContribution(
        modality=Modality.BEHAVIORAL,
        score=BEHAVIORAL_PLACEHOLDER_SCORE,
        weight=weights[Modality.BEHAVIORAL],
        explanation="Behavioral metrics (typing speed, typos) not yet collected",
    )
