"""
CHI Schemas — Contributions, Fused Result and Risk Tiers
"""

from datetime import datetime, timezone
from enum import Enum
from typing import List

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Modality(str, Enum):
    """The five modalities fused into the CHI, in fusion order."""
    SLEEP = "sleep"
    BIOMETRIC = "biometric"
    FACIAL = "facial"
    VOICE = "voice"
    BEHAVIORAL = "behavioral"


class RiskLevel(str, Enum):
    """Risk classification levels."""
    LOW = "Low"
    MODERATE = "Moderate"
    HIGH = "High"


class CHIContribution(BaseModel):
    """One modality's vote towards the Cognitive Health Index."""
    model_config = ConfigDict(frozen=True)

    modality: Modality
    score: int = Field(..., ge=0, le=100, description="Normalized sub-score")
    weight: float = Field(..., ge=0.0, le=1.0, description="Fixed fusion weight")
    explanation: str


class CHIResult(BaseModel):
    """
    Fused Cognitive Health Index.

    Output guarantees:
    - chi_score in [0, 100]
    - risk_level is a total function of chi_score
    """
    model_config = ConfigDict(frozen=True)

    chi_score: int = Field(..., ge=0, le=100)
    contributions: List[CHIContribution]
    risk_level: RiskLevel
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    @field_validator('timestamp')
    @classmethod
    def ensure_utc(cls, v: datetime) -> datetime:
        if v.tzinfo is None:
            return v.replace(tzinfo=timezone.utc)
        return v
