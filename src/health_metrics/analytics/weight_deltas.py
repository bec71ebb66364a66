"""Weight change around individual exercise sessions."""

from datetime import datetime, timedelta

from health_metrics.domain.exercise import AFTERNOON, EVENING, MORNING, WeightDelta
from health_metrics.domain.records import ExerciseSession, WeightSample

POSITIVE = "positive"
NEGATIVE = "negative"

DELTA_WINDOW = timedelta(hours=24)

MORNING_START_HOUR = 5
AFTERNOON_START_HOUR = 12
EVENING_START_HOUR = 18


def time_slot_for(moment: datetime) -> str:
    """Classify a timestamp as morning, afternoon or evening.

    Evening wraps past midnight until 04:59.
    """
    hour = moment.hour
    if MORNING_START_HOUR <= hour < AFTERNOON_START_HOUR:
        return MORNING
    if AFTERNOON_START_HOUR <= hour < EVENING_START_HOUR:
        return AFTERNOON
    return EVENING


def analyze_weight_change_after_exercise(
    sessions: list[ExerciseSession], weights: list[WeightSample]
) -> list[WeightDelta]:
    """Compare the weigh-ins in the 24 hours before and after each session.

    The before weight is the most recent sample at or before the session, the
    after weight is the last sample within 24 hours after it. Sessions without
    a weigh-in on both sides are skipped. A delta at or below zero counts as
    effective.
    """
    deltas = []
    for session in sessions:
        at = session.recorded_at
        before = [w for w in weights if at - DELTA_WINDOW <= w.recorded_at <= at]
        after = [w for w in weights if at < w.recorded_at <= at + DELTA_WINDOW]
        if not before or not after:
            continue
        before_weight = max(before, key=lambda w: w.recorded_at).weight
        after_weight = max(after, key=lambda w: w.recorded_at).weight
        change = round(after_weight - before_weight, 1)
        deltas.append(
            WeightDelta(
                recorded_at=at,
                duration_minutes=session.duration_minutes,
                time_slot=time_slot_for(at),
                before_weight=before_weight,
                after_weight=after_weight,
                weight_change=change,
                effectiveness=POSITIVE if change <= 0 else NEGATIVE,
            )
        )
    return deltas
