"""
Guidance Helpers — Risk Display Hints and Recommendations

Pure helpers the presentation layer consults. Guidance is chosen by risk
tier; for Moderate risk, by the single lowest-scoring modality.
"""

from cognitive_health.scoring import CHIResult, Modality, RiskLevel

from .constants import (
    RECOMMENDATION_BY_MODALITY,
    RECOMMENDATION_DEFAULT,
    RECOMMENDATION_HIGH_RISK,
    RECOMMENDATION_LOW_RISK,
    RISK_COLORS,
    RISK_PALETTE,
)
from .schemas import RiskDescriptor


def risk_descriptor(risk_level: RiskLevel) -> RiskDescriptor:
    """Display hint (label, color and palette tokens) for a risk tier."""
    level = RiskLevel(risk_level)
    family = RISK_PALETTE[level]
    return RiskDescriptor(
        risk_level=level,
        label=f"{level.value} Risk",
        color=RISK_COLORS[level],
        bg=f"bg-{family}-50",
        text=f"text-{family}-600",
        dot=f"bg-{family}-500",
    )


def weakest_modality(chi_result: CHIResult) -> Modality:
    """
    Lowest-scoring modality of a result.

    Ties go to the first in sleep -> biometric -> facial -> voice -> behavioral.
    """
    order = list(Modality)
    ranked = sorted(chi_result.contributions, key=lambda c: order.index(c.modality))
    return min(ranked, key=lambda c: c.score).modality


def recommendation_for(chi_result: CHIResult) -> str:
    """Guidance string for a fused result."""
    if chi_result.risk_level == RiskLevel.LOW:
        return RECOMMENDATION_LOW_RISK
    if chi_result.risk_level == RiskLevel.HIGH:
        return RECOMMENDATION_HIGH_RISK

    return RECOMMENDATION_BY_MODALITY.get(weakest_modality(chi_result), RECOMMENDATION_DEFAULT)
