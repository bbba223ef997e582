"""
Report Schemas — Aggregated Daily / Weekly / Monthly Views
"""

from enum import Enum
from typing import List

from pydantic import BaseModel, ConfigDict, Field

from cognitive_health.rules import RuleExecution
from cognitive_health.scoring import RiskLevel
from cognitive_health.state import SystemState


class ReportModel(BaseModel):
    model_config = ConfigDict(frozen=True)


class TrendDirection(str, Enum):
    UP = "up"
    DOWN = "down"
    STABLE = "stable"


class RiskDescriptor(ReportModel):
    """Display hint for a risk tier."""
    risk_level: RiskLevel
    label: str
    color: str
    bg: str
    text: str
    dot: str


class RiskCounts(ReportModel):
    low: int = Field(default=0, ge=0)
    moderate: int = Field(default=0, ge=0)
    high: int = Field(default=0, ge=0)


class PeriodStats(ReportModel):
    """Reduction of a window of daily states."""
    days: int = Field(..., ge=0)
    avg_chi: int = Field(..., ge=0, le=100)
    avg_sleep_hours: float = Field(..., ge=0)
    avg_hrv: int = Field(..., ge=0)
    avg_stress: int = Field(..., ge=0, le=100)
    risk_counts: RiskCounts
    longest_low_streak: int = Field(..., ge=0)


class PeriodComparison(ReportModel):
    """Current window vs. the immediately preceding one."""
    current_avg_chi: int
    previous_avg_chi: int
    percentage: float = Field(..., description="Signed % change of the average CHI")
    direction: TrendDirection


class DailyPoint(ReportModel):
    date: str
    chi_score: int
    risk_level: RiskLevel


class BurnoutContributor(ReportModel):
    rule_name: str
    count: int = Field(..., ge=1)


class RiskShare(ReportModel):
    risk_level: RiskLevel
    count: int = Field(..., ge=1)


class DailySummary(ReportModel):
    date: str
    state: SystemState
    fired_rules: List[RuleExecution]
    rule_summary: str
    recommendation: str
    risk_descriptor: RiskDescriptor
    comparison: PeriodComparison


class WeeklySummary(ReportModel):
    start_date: str
    end_date: str
    daily_points: List[DailyPoint]
    stats: PeriodStats
    top_burnout_contributors: List[BurnoutContributor]
    high_risk_days: int = Field(..., ge=0)
    comparison: PeriodComparison


class MonthlySummary(ReportModel):
    month: str
    year: int
    start_date: str
    end_date: str
    daily_points: List[DailyPoint]
    chi_trend: List[DailyPoint]
    risk_distribution: List[RiskShare]
    stats: PeriodStats
    comparison: PeriodComparison
    previous_month: str = Field(..., description="Compared month as YYYY-MM")
