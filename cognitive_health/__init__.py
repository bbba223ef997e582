"""
Cognitive Health Monitor — Deterministic Scoring Core

date -> synthesized readings -> modality scores -> fused CHI + risk
     -> rule verdicts -> aggregated period views

Public API:
- state_for_date: Full daily snapshot for an ISO date
- daily_summary / weekly_summary / monthly_summary: Period views
- risk_descriptor / recommendation_for: Presentation helpers
"""

__version__ = "1.0.0"

from .state import SystemState, state_for_date
from .reports import (
    daily_summary,
    monthly_summary,
    recommendation_for,
    risk_descriptor,
    weekly_summary,
)

__all__ = [
    "SystemState",
    "state_for_date",
    "daily_summary",
    "weekly_summary",
    "monthly_summary",
    "risk_descriptor",
    "recommendation_for",
]
