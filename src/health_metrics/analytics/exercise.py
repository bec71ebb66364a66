"""Composite exercise efficiency score."""

import logging
import math
from datetime import timedelta

from health_metrics.analytics.stats import population_std_dev
from health_metrics.analytics.weight_deltas import (
    POSITIVE,
    analyze_weight_change_after_exercise,
)
from health_metrics.domain.exercise import EfficiencyScore, WeightDelta
from health_metrics.domain.records import ExerciseSession, WeightSample

_logger = logging.getLogger(__name__)

FREQUENCY_MAX = 40
# Five sessions a week saturate the frequency score.
FREQUENCY_POINTS_PER_WEEKLY_SESSION = 8
CONSISTENCY_MAX = 30
CONSISTENCY_PENALTY_PER_DAY = 3
WEIGHT_IMPACT_MAX = 30

# (minimum score, level, description), highest first.
LEVELS = (
    (80, "excellent", "Excellent! The exercise plan is very effective."),
    (60, "good", "Good, keep it up."),
    (40, "fair", "Fair, there is room to improve."),
    (20, "poor", "The exercise plan needs work."),
)
LOWEST_LEVEL = ("none", "Exercise frequency is low.")


def score_exercise_efficiency(
    sessions: list[ExerciseSession], weights: list[WeightSample]
) -> EfficiencyScore:
    """Score exercise habits 0-100 from frequency, consistency and weight impact."""
    if not sessions or not weights:
        _logger.debug(
            "Efficiency score skipped: sessions=%s weights=%s",
            len(sessions),
            len(weights),
        )
        return EfficiencyScore(
            score=0,
            frequency=0,
            consistency=0,
            weight_impact=0,
            level=LOWEST_LEVEL[0],
            description="Not enough data yet.",
            exercise_days_per_week=0.0,
        )

    days_per_week = exercise_days_per_week(sessions, weights)
    frequency = min(
        FREQUENCY_MAX, days_per_week * FREQUENCY_POINTS_PER_WEEKLY_SESSION
    )
    consistency = consistency_score(sessions)
    weight_impact = weight_impact_score(
        analyze_weight_change_after_exercise(sessions, weights)
    )

    total = round(frequency + consistency + weight_impact)
    level, description = _level_for(total)
    return EfficiencyScore(
        score=total,
        frequency=round(frequency),
        consistency=round(consistency),
        weight_impact=round(weight_impact),
        level=level,
        description=description,
        exercise_days_per_week=round(days_per_week, 1),
    )


def exercise_days_per_week(
    sessions: list[ExerciseSession], weights: list[WeightSample]
) -> float:
    """Sessions per week over the inclusive day span of the weigh-ins."""
    timestamps = [w.recorded_at for w in weights]
    span = max(timestamps) - min(timestamps)
    total_days = max(1, math.floor(span / timedelta(days=1)) + 1)
    return len(sessions) / total_days * 7


def consistency_score(sessions: list[ExerciseSession]) -> float:
    """Score 0-30 that drops as the day gaps between sessions get irregular."""
    if len(sessions) < 2:  # noqa: PLR2004
        return 0.0
    ordered = sorted(s.recorded_at for s in sessions)
    gaps = [
        math.floor((later - earlier) / timedelta(days=1))
        for earlier, later in zip(ordered, ordered[1:], strict=False)
    ]
    std_dev = population_std_dev(gaps)
    return max(
        0.0,
        min(CONSISTENCY_MAX, CONSISTENCY_MAX - std_dev * CONSISTENCY_PENALTY_PER_DAY),
    )


def weight_impact_score(deltas: list[WeightDelta]) -> float:
    """Share of effective sessions scaled to 0-30."""
    if not deltas:
        return 0.0
    positive = sum(1 for d in deltas if d.effectiveness == POSITIVE)
    return positive / len(deltas) * WEIGHT_IMPACT_MAX


def _level_for(score: int) -> tuple[str, str]:
    for minimum, level, description in LEVELS:
        if score >= minimum:
            return level, description
    return LOWEST_LEVEL
