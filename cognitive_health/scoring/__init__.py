"""
Scoring Module — Modality Scorers + CHI Fusion

Public API:
- score_sleep / score_biometric / score_facial / score_voice / score_behavioral
- CHIFusionEngine: Weighted fusion into the Cognitive Health Index
- calculate_chi: Fusion with the default weight table
- classify_risk_level: CHI -> Low/Moderate/High
- MODALITY_WEIGHTS: Named, overridable weight table
- CHIContribution, CHIResult, Modality, RiskLevel: Schemas
"""

from .config import (
    BEHAVIORAL_PLACEHOLDER_SCORE,
    MODALITY_WEIGHTS,
    NEUTRAL_SCORE,
    THRESHOLD_LOW_RISK,
    THRESHOLD_MODERATE_RISK,
)
from .fusion import CHIFusionEngine, calculate_chi, classify_risk_level, validate_weights
from .schemas import CHIContribution, CHIResult, Modality, RiskLevel
from .scorers import score_behavioral, score_biometric, score_facial, score_sleep, score_voice

__all__ = [
    "CHIFusionEngine",
    "calculate_chi",
    "classify_risk_level",
    "validate_weights",
    "score_sleep",
    "score_biometric",
    "score_facial",
    "score_voice",
    "score_behavioral",
    "CHIContribution",
    "CHIResult",
    "Modality",
    "RiskLevel",
    "MODALITY_WEIGHTS",
    "NEUTRAL_SCORE",
    "BEHAVIORAL_PLACEHOLDER_SCORE",
    "THRESHOLD_LOW_RISK",
    "THRESHOLD_MODERATE_RISK",
]
