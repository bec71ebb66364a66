"""Which time of day exercise works best."""

import logging

from health_metrics.analytics.weight_deltas import (
    POSITIVE,
    analyze_weight_change_after_exercise,
)
from health_metrics.domain.exercise import (
    AFTERNOON,
    EVENING,
    MORNING,
    TIME_SLOTS,
    TimeSlotAnalysis,
    TimeSlotStat,
    WeightDelta,
)
from health_metrics.domain.records import ExerciseSession, WeightSample

_logger = logging.getLogger(__name__)

GOOD = "good"
INSUFFICIENT = "insufficient"

# Timestamps spread over too few hours of the day are treated as app defaults
# rather than real logging times. Needs more than
# max(MIN_DISTINCT_HOURS, session_count * DISTINCT_HOUR_RATIO) distinct hours.
MIN_DISTINCT_HOURS = 3
DISTINCT_HOUR_RATIO = 0.5

MIN_SESSIONS_FOR_BEST = 2

SLOT_NAMES = {
    MORNING: "Morning (05:00-12:00)",
    AFTERNOON: "Afternoon (12:00-18:00)",
    EVENING: "Evening (18:00-05:00)",
}

UNRELIABLE_TIMES = (
    "Exercise records do not carry real workout times, so the best time of "
    "day cannot be determined. Log the actual time of each session."
)
NO_DELTAS = "Not enough data for analysis yet."
NEED_MORE_SESSIONS = "Log more sessions to get a reliable time-of-day analysis."


def has_reliable_times(
    sessions: list[ExerciseSession],
    min_distinct_hours: int = MIN_DISTINCT_HOURS,
    distinct_hour_ratio: float = DISTINCT_HOUR_RATIO,
) -> bool:
    """Return whether session timestamps look like real logging times."""
    hours = {session.recorded_at.hour for session in sessions}
    threshold = max(min_distinct_hours, len(sessions) * distinct_hour_ratio)
    return len(hours) > threshold


def analyze_best_time_slot(
    sessions: list[ExerciseSession],
    weights: list[WeightSample],
    min_distinct_hours: int = MIN_DISTINCT_HOURS,
    distinct_hour_ratio: float = DISTINCT_HOUR_RATIO,
) -> TimeSlotAnalysis:
    """Rank morning, afternoon and evening sessions by weight effect."""
    if not has_reliable_times(sessions, min_distinct_hours, distinct_hour_ratio):
        _logger.debug("Time slot analysis skipped: unreliable session times")
        return _insufficient(UNRELIABLE_TIMES)

    deltas = analyze_weight_change_after_exercise(sessions, weights)
    if not deltas:
        return _insufficient(NO_DELTAS)

    slots = {
        slot: _slot_stat([d for d in deltas if d.time_slot == slot])
        for slot in TIME_SLOTS
    }

    best_slot = None
    best_score = None
    for slot in TIME_SLOTS:
        stat = slots[slot]
        if stat.count < MIN_SESSIONS_FOR_BEST:
            continue
        if best_score is None or stat.score > best_score:
            best_slot = slot
            best_score = stat.score

    if best_slot is None:
        recommendation = NEED_MORE_SESSIONS
    else:
        best = slots[best_slot]
        recommendation = (
            f"{SLOT_NAMES[best_slot]} workouts work best: average weight change "
            f"{best.avg_change:+.2f} jin, effective {best.effectiveness:.1f}% "
            "of the time."
        )

    return TimeSlotAnalysis(
        best_slot=best_slot,
        slots=slots,
        recommendation=recommendation,
        data_quality=GOOD,
    )


def _slot_stat(deltas: list[WeightDelta]) -> TimeSlotStat:
    if not deltas:
        return TimeSlotStat()
    count = len(deltas)
    avg_change = sum(d.weight_change for d in deltas) / count
    positive = sum(1 for d in deltas if d.effectiveness == POSITIVE)
    effectiveness = positive / count * 100
    return TimeSlotStat(
        count=count,
        avg_change=round(avg_change, 2),
        effectiveness=round(effectiveness, 1),
        score=round(-avg_change * 10 + effectiveness, 1),
    )


def _insufficient(reason: str) -> TimeSlotAnalysis:
    return TimeSlotAnalysis(
        best_slot=None,
        slots={slot: TimeSlotStat() for slot in TIME_SLOTS},
        recommendation=reason,
        data_quality=INSUFFICIENT,
    )
