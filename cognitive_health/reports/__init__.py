"""
Reports Module — Period Aggregation + Presentation Helpers

Public API:
- daily_summary: One date, guidance and day-over-day comparison
- weekly_summary: Rolling window ending on a date (default 7 days)
- monthly_summary: Calendar month by offset from today
- summarize_states / compare_periods / top_burnout_contributors: Reductions
- risk_descriptor: Display hint for a risk tier
- recommendation_for: Guidance string for a CHI result
"""

from .aggregator import (
    average_chi,
    compare_periods,
    daily_summary,
    longest_low_streak,
    month_dates,
    monthly_summary,
    states_to_frame,
    summarize_states,
    top_burnout_contributors,
    weekly_summary,
)
from .guidance import recommendation_for, risk_descriptor, weakest_modality
from .schemas import (
    BurnoutContributor,
    DailyPoint,
    DailySummary,
    MonthlySummary,
    PeriodComparison,
    PeriodStats,
    RiskCounts,
    RiskDescriptor,
    RiskShare,
    TrendDirection,
    WeeklySummary,
)

__all__ = [
    "daily_summary",
    "weekly_summary",
    "monthly_summary",
    "summarize_states",
    "compare_periods",
    "top_burnout_contributors",
    "longest_low_streak",
    "average_chi",
    "states_to_frame",
    "month_dates",
    "risk_descriptor",
    "recommendation_for",
    "weakest_modality",
    "BurnoutContributor",
    "DailyPoint",
    "DailySummary",
    "MonthlySummary",
    "PeriodComparison",
    "PeriodStats",
    "RiskCounts",
    "RiskDescriptor",
    "RiskShare",
    "TrendDirection",
    "WeeklySummary",
]
