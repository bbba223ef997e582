"""
Report Constants — Display Hints and Guidance Text

All presentation-adjacent strings and palette tokens centralized here.
This file is the single source of truth for what the UI is told about
a risk tier or a recommendation.
"""

from typing import Dict

from cognitive_health.scoring import Modality, RiskLevel


# =============================================================================
# COLOR PALETTE
# =============================================================================

SUCCESS: str = "#10b981"   # Emerald - low risk
WARNING: str = "#f59e0b"   # Amber - moderate risk
DANGER: str = "#f43f5e"    # Rose - high risk

RISK_COLORS: Dict[RiskLevel, str] = {
    RiskLevel.LOW: SUCCESS,
    RiskLevel.MODERATE: WARNING,
    RiskLevel.HIGH: DANGER,
}

# Palette family used to derive background / text / dot tokens
RISK_PALETTE: Dict[RiskLevel, str] = {
    RiskLevel.LOW: "emerald",
    RiskLevel.MODERATE: "amber",
    RiskLevel.HIGH: "rose",
}


# =============================================================================
# RECOMMENDATIONS
# =============================================================================

RECOMMENDATION_LOW_RISK: str = "Great! Keep maintaining your healthy habits."
RECOMMENDATION_HIGH_RISK: str = (
    "Your cognitive load is high. Please take immediate action: rest, hydrate, "
    "and consider a 15-minute break."
)
RECOMMENDATION_DEFAULT: str = "Monitor your health metrics regularly."

# Moderate risk: guidance keyed by the weakest modality
RECOMMENDATION_BY_MODALITY: Dict[Modality, str] = {
    Modality.SLEEP: "Consider getting more sleep tonight to improve cognitive health.",
    Modality.BIOMETRIC: "Try some relaxation exercises to reduce stress and improve HRV.",
    Modality.FACIAL: "You seem fatigued. Take a break and rest your eyes.",
    Modality.VOICE: "Your voice suggests stress. Try a breathing exercise.",
}


# =============================================================================
# CHART SAMPLING
# =============================================================================

# Monthly CHI trend keeps every Nth day (plus the last day of the month)
MONTHLY_TREND_SAMPLE_EVERY: int = 3
