"""
Period Aggregators — Daily, Weekly and Monthly Views

Each view evaluates the full pipeline independently for every date in
its window (state_for_date), then reduces the per-date states with
pandas. No date depends on another, so a view recomputed later, or a
weekly and a monthly view sharing dates, agree exactly on every date.

Reductions:
- Means of CHI, sleep hours, HRV and biometric stress
- Risk-tier counts and the longest consecutive Low-risk streak
- % change of the average CHI against the preceding window
- Weekly only: most frequently fired rules ("top burnout contributors")
"""

import calendar
import logging
from collections import Counter
from datetime import date as Date
from datetime import timedelta
from typing import List, Optional, Sequence

import pandas as pd

from cognitive_health.config import settings
from cognitive_health.generator import DateLike, normalize_date
from cognitive_health.numeric import round_half_up, round_to_tenth
from cognitive_health.rules import get_fired_rules, get_rule_summary
from cognitive_health.scoring import RiskLevel
from cognitive_health.state import SystemState, date_range_ending, state_for_date

from .constants import MONTHLY_TREND_SAMPLE_EVERY
from .guidance import recommendation_for, risk_descriptor
from .schemas import (
    BurnoutContributor,
    DailyPoint,
    DailySummary,
    MonthlySummary,
    PeriodComparison,
    PeriodStats,
    RiskCounts,
    RiskShare,
    TrendDirection,
    WeeklySummary,
)

logger = logging.getLogger(__name__)


# ============================================================================
# Reductions
# ============================================================================

def build_states(dates: Sequence[str]) -> List[SystemState]:
    """Evaluate the pipeline once per date, in the given order."""
    return [state_for_date(day) for day in dates]


def states_to_frame(states: Sequence[SystemState]) -> pd.DataFrame:
    """Flatten daily states into one row per date."""
    return pd.DataFrame({
        "date": [s.date for s in states],
        "chi_score": [s.chi_score for s in states],
        "risk_level": [s.risk_level.value for s in states],
        "sleep_hours": [s.sensor_snapshot.sleep.hours for s in states],
        "hrv": [s.sensor_snapshot.biometrics.hrv for s in states],
        "stress": [s.sensor_snapshot.biometrics.stress_level for s in states],
    })


def longest_low_streak(risk_levels: pd.Series) -> int:
    """
    Longest run of consecutive Low-risk days.

    Every non-Low day opens a new run id; summing the Low flags per run
    gives each run's length.
    """
    is_low = risk_levels.eq(RiskLevel.LOW.value)
    if not is_low.any():
        return 0
    run_id = (~is_low).cumsum()
    return int(is_low.groupby(run_id).sum().max())


def average_chi(states: Sequence[SystemState]) -> int:
    """Half-up rounded mean CHI of a window."""
    if not states:
        raise ValueError("Cannot average an empty window")
    return round_half_up(states_to_frame(states)["chi_score"].mean())


def summarize_states(states: Sequence[SystemState]) -> PeriodStats:
    """
    Reduce a window of daily states.

    Raises:
        ValueError: If the window is empty
    """
    if not states:
        raise ValueError("Cannot summarize an empty window")

    df = states_to_frame(states)
    counts = df["risk_level"].value_counts()

    return PeriodStats(
        days=len(df),
        avg_chi=round_half_up(df["chi_score"].mean()),
        avg_sleep_hours=round_to_tenth(df["sleep_hours"].mean()),
        avg_hrv=round_half_up(df["hrv"].mean()),
        avg_stress=round_half_up(df["stress"].mean()),
        risk_counts=RiskCounts(
            low=int(counts.get(RiskLevel.LOW.value, 0)),
            moderate=int(counts.get(RiskLevel.MODERATE.value, 0)),
            high=int(counts.get(RiskLevel.HIGH.value, 0)),
        ),
        longest_low_streak=longest_low_streak(df["risk_level"]),
    )


def compare_periods(
    current_avg: int,
    previous_avg: int,
    dead_band: Optional[float] = None,
) -> PeriodComparison:
    """
    Percentage change of the average CHI against the preceding window.

    Direction is "stable" within ±dead_band percent.
    """
    band = settings.TREND_DEAD_BAND_PCT if dead_band is None else dead_band

    if previous_avg == 0:
        percentage = 0.0 if current_avg == 0 else 100.0
    else:
        percentage = round_to_tenth((current_avg - previous_avg) / previous_avg * 100)

    if percentage > band:
        direction = TrendDirection.UP
    elif percentage < -band:
        direction = TrendDirection.DOWN
    else:
        direction = TrendDirection.STABLE

    return PeriodComparison(
        current_avg_chi=current_avg,
        previous_avg_chi=previous_avg,
        percentage=percentage,
        direction=direction,
    )


def top_burnout_contributors(
    states: Sequence[SystemState],
    limit: Optional[int] = None,
) -> List[BurnoutContributor]:
    """
    Rules that fired most often across a window.

    Ranked by fire count descending; ties keep first-encountered order
    (date order, then KR1..KR5 within a day).
    """
    limit = settings.TOP_CONTRIBUTORS_LIMIT if limit is None else limit
    tally: Counter = Counter()
    for state in states:
        for execution in get_fired_rules(state.rule_executions):
            tally[execution.rule_name] += 1

    return [
        BurnoutContributor(rule_name=name, count=count)
        for name, count in tally.most_common(limit)
    ]


def _daily_points(states: Sequence[SystemState]) -> List[DailyPoint]:
    return [
        DailyPoint(date=s.date, chi_score=s.chi_score, risk_level=s.risk_level)
        for s in states
    ]


def _as_date(value: Optional[DateLike]) -> Date:
    if value is None:
        return Date.today()
    return Date.fromisoformat(normalize_date(value))


# ============================================================================
# Views
# ============================================================================

def daily_summary(value: Optional[DateLike] = None) -> DailySummary:
    """
    Daily view: one date's state plus guidance, compared with the day before.

    Args:
        value: ISO date (default: today)
    """
    day = _as_date(value)
    state = state_for_date(day)
    previous = state_for_date(day - timedelta(days=1))

    fired = get_fired_rules(state.rule_executions)
    comparison = compare_periods(state.chi_score, previous.chi_score)

    logger.info(
        f"[Aggregator] Daily {state.date}: chi={state.chi_score} "
        f"risk={state.risk_level.value} fired={len(fired)}"
    )

    return DailySummary(
        date=state.date,
        state=state,
        fired_rules=fired,
        rule_summary=get_rule_summary(state.rule_executions),
        recommendation=recommendation_for(state.chi_result),
        risk_descriptor=risk_descriptor(state.risk_level),
        comparison=comparison,
    )


def weekly_summary(
    end_date: Optional[DateLike] = None,
    window_days: Optional[int] = None,
) -> WeeklySummary:
    """
    Weekly view: rolling window ending on end_date (default today).

    Compared against the window of equal length immediately before it.
    """
    days = window_days or settings.WEEKLY_WINDOW_DAYS
    if days < 1:
        raise ValueError(f"window_days must be positive, got {days}")

    end = _as_date(end_date)
    dates = date_range_ending(end, days)
    previous_dates = date_range_ending(end - timedelta(days=days), days)

    states = build_states(dates)
    stats = summarize_states(states)
    previous_avg = average_chi(build_states(previous_dates))
    comparison = compare_periods(stats.avg_chi, previous_avg)

    logger.info(
        f"[Aggregator] Weekly {dates[0]}..{dates[-1]}: avg_chi={stats.avg_chi} "
        f"prev={previous_avg} trend={comparison.direction.value}"
    )

    return WeeklySummary(
        start_date=dates[0],
        end_date=dates[-1],
        daily_points=_daily_points(states),
        stats=stats,
        top_burnout_contributors=top_burnout_contributors(states),
        high_risk_days=stats.risk_counts.high,
        comparison=comparison,
    )


def month_dates(year: int, month: int) -> List[str]:
    """Every ISO date of a calendar month."""
    last_day = calendar.monthrange(year, month)[1]
    return [Date(year, month, day).isoformat() for day in range(1, last_day + 1)]


def _shift_month(year: int, month: int, offset: int):
    index = year * 12 + (month - 1) + offset
    return index // 12, index % 12 + 1


def monthly_summary(
    month_offset: int = 0,
    today: Optional[DateLike] = None,
) -> MonthlySummary:
    """
    Monthly view: the calendar month `month_offset` months from today.

    Args:
        month_offset: 0 = current month, -1 = last month, ...
        today: Anchor date (default: today)
    """
    anchor = _as_date(today)
    year, month = _shift_month(anchor.year, anchor.month, month_offset)
    prev_year, prev_month = _shift_month(year, month, -1)

    dates = month_dates(year, month)
    states = build_states(dates)
    stats = summarize_states(states)
    previous_avg = average_chi(build_states(month_dates(prev_year, prev_month)))
    comparison = compare_periods(stats.avg_chi, previous_avg)

    points = _daily_points(states)
    chi_trend = [
        point for idx, point in enumerate(points)
        if idx % MONTHLY_TREND_SAMPLE_EVERY == 0 or idx == len(points) - 1
    ]
    counts = stats.risk_counts
    risk_distribution = [
        RiskShare(risk_level=level, count=count)
        for level, count in (
            (RiskLevel.LOW, counts.low),
            (RiskLevel.MODERATE, counts.moderate),
            (RiskLevel.HIGH, counts.high),
        )
        if count > 0
    ]

    logger.info(
        f"[Aggregator] Monthly {year}-{month:02d}: avg_chi={stats.avg_chi} "
        f"prev={previous_avg} low_streak={stats.longest_low_streak}"
    )

    return MonthlySummary(
        month=calendar.month_name[month],
        year=year,
        start_date=dates[0],
        end_date=dates[-1],
        daily_points=points,
        chi_trend=chi_trend,
        risk_distribution=risk_distribution,
        stats=stats,
        comparison=comparison,
        previous_month=f"{prev_year}-{prev_month:02d}",
    )
