"""Summary statistics over weight samples."""

from datetime import date, timedelta

from health_metrics.analytics.calendar import DAYS_PER_WEEK, start_of_week
from health_metrics.analytics.charts import DEFAULT_HEIGHT_CM, calculate_bmi
from health_metrics.analytics.stats import mean
from health_metrics.domain.records import Profile, WeightSample
from health_metrics.domain.weights import WeightStats


def calculate_weight_stats(
    samples: list[WeightSample],
    profile: Profile | None,
    today: date | None = None,
    default_height_cm: float = DEFAULT_HEIGHT_CM,
) -> WeightStats:
    """Summarize ``samples`` with progress towards the profile's target weight.

    Week and month counts are relative to ``today`` (defaults to the current
    date). Pass a slice of the history to get per-period figures.
    """
    if not samples:
        return WeightStats()

    ordered = sorted(samples, key=lambda s: s.recorded_at)
    weights = [s.weight for s in ordered]
    initial = weights[0]
    current = weights[-1]
    height_cm = (
        profile.height_cm
        if profile is not None and profile.height_cm
        else default_height_cm
    )
    reference = today or date.today()
    week_start = start_of_week(reference)
    week_end = week_start + timedelta(days=DAYS_PER_WEEK)
    target = profile.target_weight if profile is not None else None
    progress, remaining = _target_progress(initial, current, target)

    return WeightStats(
        current=current,
        initial=initial,
        average=round(mean(weights), 1),
        min=min(weights),
        max=max(weights),
        bmi=calculate_bmi(current, height_cm),
        change=round(current - initial, 1),
        total_records=len(ordered),
        this_month=sum(
            1
            for s in ordered
            if (s.recorded_at.year, s.recorded_at.month)
            == (reference.year, reference.month)
        ),
        this_week=sum(1 for s in ordered if week_start <= s.recorded_at < week_end),
        target_progress=progress,
        target_remaining=remaining,
    )


def _target_progress(
    initial: float, current: float, target: float | None
) -> tuple[float | None, float | None]:
    if not target or target <= 0:
        return None, None
    # Direction is fixed by where the history started relative to the target.
    if initial > target:
        total, moved = initial - target, initial - current
    else:
        total, moved = target - initial, current - initial
    progress = min(100.0, max(0.0, moved / total * 100)) if total > 0 else 0.0
    return round(progress, 1), round(target - current, 1)
