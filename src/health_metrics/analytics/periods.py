"""Weekly and monthly energy balance buckets."""

import logging
from collections.abc import Callable, Iterator, Mapping
from datetime import date, datetime, timedelta

from health_metrics.analytics.calendar import (
    iter_months,
    iter_weeks,
    month_label,
    week_label,
)
from health_metrics.analytics.energy import derive_daily_energy
from health_metrics.domain.energy import PeriodSummary
from health_metrics.domain.records import (
    DailyRecord,
    Profile,
    WeightSample,
    all_weight_samples,
)

_logger = logging.getLogger(__name__)

MIN_WEIGHT_SAMPLES = 2

PeriodIterator = Callable[[datetime, datetime], Iterator[tuple[datetime, datetime]]]


def bucket_weekly(
    profile: Profile | None,
    daily_records: Mapping[date, DailyRecord],
    reference_year: int | None = None,
) -> list[PeriodSummary]:
    """Return Monday-aligned weeks, most recent first."""
    return _bucket(
        profile,
        daily_records,
        iter_weeks,
        week_label,
        reference_year,
    )


def bucket_monthly(
    profile: Profile | None,
    daily_records: Mapping[date, DailyRecord],
    reference_year: int | None = None,
) -> list[PeriodSummary]:
    """Return calendar months, most recent first."""
    return _bucket(
        profile,
        daily_records,
        iter_months,
        lambda start, _end: month_label(start),
        reference_year,
    )


def _bucket(
    profile: Profile | None,
    daily_records: Mapping[date, DailyRecord],
    periods: PeriodIterator,
    label: Callable[[date, date], str],
    reference_year: int | None,
) -> list[PeriodSummary]:
    samples = all_weight_samples(daily_records)
    if len(samples) < MIN_WEIGHT_SAMPLES:
        _logger.debug("Skipping period buckets: %s weight samples", len(samples))
        return []

    first = samples[0].recorded_at
    last = samples[-1].recorded_at
    summaries = []
    for start, following in periods(first, last):
        end_day = (following - timedelta(days=1)).date()
        summaries.append(
            _summarize_period(
                profile,
                daily_records,
                samples,
                start,
                following,
                label(start.date(), end_day),
                reference_year,
            )
        )
    summaries.reverse()
    return summaries


def _summarize_period(  # noqa: PLR0913
    profile: Profile | None,
    daily_records: Mapping[date, DailyRecord],
    samples: list[WeightSample],
    start: datetime,
    following: datetime,
    label: str,
    reference_year: int | None,
) -> PeriodSummary:
    start_day = start.date()
    end_day = (following - timedelta(days=1)).date()
    in_period = [s for s in samples if start <= s.recorded_at < following]
    before = [s for s in samples if s.recorded_at < start]

    start_weight = None
    end_weight = None
    weight_change = None
    if in_period:
        anchor = before[-1] if before else in_period[0]
        start_weight = anchor.weight
        end_weight = in_period[-1].weight
        weight_change = round(end_weight - start_weight, 2)

    daily = derive_daily_energy(
        profile, daily_records, start_day, end_day, reference_year
    )
    complete = [d for d in daily if d.is_complete]
    valid = [d.net_calories for d in complete if d.net_calories is not None]
    total_net_calories = sum(valid) if valid else None
    avg_daily_deficit = (
        total_net_calories / len(valid) if total_net_calories is not None else None
    )

    return PeriodSummary(
        label=label,
        start=start_day,
        end=end_day,
        start_weight=start_weight,
        end_weight=end_weight,
        weight_change=weight_change,
        total_net_calories=total_net_calories,
        avg_daily_deficit=avg_daily_deficit,
        valid_days=len(valid),
        complete_days=len(complete),
        total_days=(end_day - start_day).days + 1,
    )
