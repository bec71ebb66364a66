"""Composite exercise report."""

from datetime import datetime

from health_metrics.analytics.exercise import score_exercise_efficiency
from health_metrics.analytics.frequency import analyze_frequency_impact
from health_metrics.analytics.stats import mean
from health_metrics.analytics.time_slots import (
    DISTINCT_HOUR_RATIO,
    MIN_DISTINCT_HOURS,
    analyze_best_time_slot,
)
from health_metrics.analytics.weight_deltas import (
    POSITIVE,
    analyze_weight_change_after_exercise,
)
from health_metrics.domain.exercise import ExerciseReport, WeightDeltaSummary
from health_metrics.domain.records import ExerciseSession, WeightSample


def generate_exercise_report(  # noqa: PLR0913
    sessions: list[ExerciseSession],
    weights: list[WeightSample],
    generated_at: datetime,
    min_distinct_hours: int = MIN_DISTINCT_HOURS,
    distinct_hour_ratio: float = DISTINCT_HOUR_RATIO,
) -> ExerciseReport:
    """Run every exercise analysis over the same snapshot and merge the results."""
    deltas = analyze_weight_change_after_exercise(sessions, weights)
    summary = WeightDeltaSummary(
        total=len(deltas),
        positive=sum(1 for d in deltas if d.effectiveness == POSITIVE),
        avg_change=round(mean([d.weight_change for d in deltas]), 2),
    )
    return ExerciseReport(
        weight_changes=deltas,
        weight_change_summary=summary,
        efficiency=score_exercise_efficiency(sessions, weights),
        time_slots=analyze_best_time_slot(
            sessions, weights, min_distinct_hours, distinct_hour_ratio
        ),
        frequency=analyze_frequency_impact(sessions, weights),
        generated_at=generated_at,
    )
