"""
Synthesized Reading Schemas — Pydantic Models

One immutable model per modality. Range constraints are part of the
contract: a reading outside its range fails validation at construction.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


ISO_DATE_PATTERN = r"^\d{4}-\d{2}-\d{2}$"


class Reading(BaseModel):
    """Base class for all synthesized readings (frozen value objects)."""
    model_config = ConfigDict(frozen=True)


class SleepRecord(Reading):
    """One night's sleep."""
    id: str
    date: str = Field(..., pattern=ISO_DATE_PATTERN)
    hours: float = Field(..., ge=0, le=24, description="Hours slept")
    quality: int = Field(..., ge=0, le=100, description="Sleep quality (0-100)")


class VoiceSession(Reading):
    """Optional voice check-in."""
    id: str
    date: str = Field(..., pattern=ISO_DATE_PATTERN)
    stress_level: int = Field(..., ge=0, le=100)
    pitch_stability: int = Field(..., ge=0, le=100)
    volume_energy: int = Field(..., ge=0, le=100)


class FacialScan(Reading):
    """Optional facial check-in."""
    id: str
    date: str = Field(..., pattern=ISO_DATE_PATTERN)
    fatigue_score: int = Field(..., ge=0, le=100)
    eye_blink_rate: int = Field(..., ge=0, description="Blinks per minute")
    asymmetry_score: int = Field(..., ge=0, le=100)


class BiometricData(Reading):
    """Wearable snapshot."""
    heart_rate: int = Field(..., gt=0, description="Resting heart rate (bpm)")
    hrv: int = Field(..., ge=0, description="Heart rate variability")
    stress_level: int = Field(..., ge=0, le=100)
    steps: int = Field(..., ge=0)
    last_sync: str = "Just now"


class TextSentiment(Reading):
    """Psychological state extracted from the day's typed text."""
    id: str
    date: str = Field(..., pattern=ISO_DATE_PATTERN)
    sentiment_score: int = Field(..., ge=-100, le=100)
    stress_indicators: int = Field(..., ge=0, le=100)
    word_count: int = Field(..., ge=0)
    emotional_words: int = Field(..., ge=0)


class SensorChannel(str, Enum):
    """Sensor channels the synthesizer can produce readings for."""
    SLEEP = "sleep"
    VOICE = "voice"
    FACIAL = "facial"
    BIOMETRIC = "biometric"
    TEXT = "text"
