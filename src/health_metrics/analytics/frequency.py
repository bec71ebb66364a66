"""Weekly exercise frequency against weight change."""

import logging
from datetime import timedelta

from health_metrics.analytics.calendar import iter_weeks, week_label
from health_metrics.analytics.stats import mean, pearson_correlation
from health_metrics.domain.exercise import (
    FrequencyImpact,
    FrequencyImpactPeriod,
    FrequencySummary,
)
from health_metrics.domain.records import ExerciseSession, WeightSample

_logger = logging.getLogger(__name__)

MIN_WEIGHT_SAMPLES = 2
MIN_EXERCISE_WEEKS = 2

NOT_ENOUGH_WEIGHTS = "Not enough weight records to analyse."
NOT_ENOUGH_WEEKS = (
    "Too few weeks with exercise; keep training to get a clearer picture."
)
NO_VARIATION = (
    "Weekly exercise counts or weight changes did not vary enough to compare."
)


def analyze_frequency_impact(
    sessions: list[ExerciseSession], weights: list[WeightSample]
) -> FrequencyImpact:
    """Correlate sessions per week with that week's weight change.

    Negative coefficients mean more exercise went with more weight loss.
    """
    if len(weights) < MIN_WEIGHT_SAMPLES:
        _logger.debug("Frequency impact skipped: %s weight samples", len(weights))
        return FrequencyImpact(periods=[], correlation=None, insight=NOT_ENOUGH_WEIGHTS)

    ordered = sorted(weights, key=lambda w: w.recorded_at)
    periods = []
    weeks = iter_weeks(ordered[0].recorded_at, ordered[-1].recorded_at)
    for number, (start, following) in enumerate(weeks, start=1):
        week_weights = [w for w in ordered if start <= w.recorded_at < following]
        week_sessions = [s for s in sessions if start <= s.recorded_at < following]
        if not week_weights and not week_sessions:
            continue
        end_day = (following - timedelta(days=1)).date()
        periods.append(
            FrequencyImpactPeriod(
                week_number=number,
                label=week_label(start.date(), end_day),
                start=start.date(),
                end=end_day,
                exercise_count=len(week_sessions),
                total_duration=sum(s.duration_minutes for s in week_sessions),
                weight_change=_weight_change(week_weights),
                avg_weight=_avg_weight(week_weights),
            )
        )

    correlation, insight = _correlate(periods)
    return FrequencyImpact(
        periods=periods,
        correlation=correlation,
        insight=insight,
        summary=_summarize(periods),
    )


def _weight_change(week_weights: list[WeightSample]) -> float:
    # A single weigh-in still counts as a recorded week with no change.
    if len(week_weights) < 2:  # noqa: PLR2004
        return 0.0
    return round(week_weights[-1].weight - week_weights[0].weight, 1)


def _avg_weight(week_weights: list[WeightSample]) -> float | None:
    if not week_weights:
        return None
    return round(mean([w.weight for w in week_weights]), 1)


def _correlate(periods: list[FrequencyImpactPeriod]) -> tuple[float | None, str]:
    active = [p for p in periods if p.exercise_count > 0]
    if len(active) < MIN_EXERCISE_WEEKS:
        return None, NOT_ENOUGH_WEEKS
    coefficient = pearson_correlation(
        [p.exercise_count for p in active], [p.weight_change for p in active]
    )
    if coefficient is None:
        return None, NO_VARIATION
    coefficient = round(coefficient, 3)
    return coefficient, _insight(coefficient)


def _insight(coefficient: float) -> str:
    if coefficient < -0.5:  # noqa: PLR2004
        return (
            "More exercise is strongly associated with greater weight loss; "
            "adding sessions helps."
        )
    if coefficient < -0.2:  # noqa: PLR2004
        return "More exercise is somewhat associated with weight loss; keep the habit."
    if coefficient < 0.2:  # noqa: PLR2004
        return (
            "Exercise frequency and weight change are only weakly related; "
            "diet adjustments may be needed."
        )
    return (
        "Exercise does not appear to drive weight change; review workout "
        "intensity and diet."
    )


def _summarize(periods: list[FrequencyImpactPeriod]) -> FrequencySummary:
    if not periods:
        return FrequencySummary()
    return FrequencySummary(
        total_weeks=len(periods),
        avg_exercise_per_week=round(mean([p.exercise_count for p in periods]), 1),
        avg_weight_change_per_week=round(
            mean([p.weight_change for p in periods]), 2
        ),
    )
