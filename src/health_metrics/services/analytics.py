"""Analytics service over a snapshot of the health record store."""

import logging
from dataclasses import dataclass
from datetime import date, datetime, timedelta
from typing import Protocol

from health_metrics.analytics.calendar import (
    DAYS_PER_WEEK,
    next_month,
    start_of_month,
    start_of_week,
)
from health_metrics.analytics.charts import DEFAULT_HEIGHT_CM, build_chart_series
from health_metrics.analytics.correlation import analyze_correlation
from health_metrics.analytics.energy import derive_daily_energy
from health_metrics.analytics.periods import bucket_monthly, bucket_weekly
from health_metrics.analytics.report import generate_exercise_report
from health_metrics.analytics.time_slots import DISTINCT_HOUR_RATIO, MIN_DISTINCT_HOURS
from health_metrics.analytics.weight_stats import calculate_weight_stats
from health_metrics.domain.charts import (
    ALL_TIME,
    MONTHLY,
    WEEKLY,
    ChartRecord,
    ChartSeries,
    PeriodMeta,
)
from health_metrics.domain.energy import (
    CorrelationResult,
    DerivedDailyEnergy,
    PeriodSummary,
)
from health_metrics.domain.exercise import ExerciseReport
from health_metrics.domain.records import (
    DailyRecord,
    Profile,
    WeightSample,
    all_exercise_sessions,
    all_weight_samples,
)
from health_metrics.domain.weights import WeightStats

_logger = logging.getLogger(__name__)


class HealthRecordRepository(Protocol):
    """Read-only interface to the persisted record store."""

    def get_profile(self) -> Profile | None:
        """Return the user profile, if one has been saved."""

    def list_daily_records(self) -> dict[date, DailyRecord]:
        """Return every daily record keyed by date."""


@dataclass
class EnergyReport:
    """Period buckets with their calorie/weight correlation."""

    periods: list[PeriodSummary]
    correlation: CorrelationResult


@dataclass
class AnalyticsService:
    """Runs the analytics engine against fresh repository snapshots."""

    repository: HealthRecordRepository
    default_height_cm: float = DEFAULT_HEIGHT_CM
    min_distinct_hours: int = MIN_DISTINCT_HOURS
    distinct_hour_ratio: float = DISTINCT_HOUR_RATIO

    def daily_energy(self, start: date, end: date) -> list[DerivedDailyEnergy]:
        """Return derived energy balance for recorded days in a range."""
        profile = self.repository.get_profile()
        records = self.repository.list_daily_records()
        return derive_daily_energy(profile, records, start, end)

    def weekly_energy_report(self) -> EnergyReport:
        """Return weekly buckets, most recent first, with correlation."""
        profile = self.repository.get_profile()
        records = self.repository.list_daily_records()
        periods = bucket_weekly(profile, records)
        _logger.info("Weekly energy report: periods=%s", len(periods))
        return EnergyReport(periods=periods, correlation=analyze_correlation(periods))

    def monthly_energy_report(self) -> EnergyReport:
        """Return monthly buckets, most recent first, with correlation."""
        profile = self.repository.get_profile()
        records = self.repository.list_daily_records()
        periods = bucket_monthly(profile, records)
        _logger.info("Monthly energy report: periods=%s", len(periods))
        return EnergyReport(periods=periods, correlation=analyze_correlation(periods))

    def exercise_report(self, generated_at: datetime | None = None) -> ExerciseReport:
        """Return the composite exercise effectiveness report."""
        records = self.repository.list_daily_records()
        sessions = all_exercise_sessions(records)
        weights = all_weight_samples(records)
        _logger.info(
            "Exercise report: sessions=%s weights=%s", len(sessions), len(weights)
        )
        return generate_exercise_report(
            sessions,
            weights,
            generated_at or datetime.now(),
            self.min_distinct_hours,
            self.distinct_hour_ratio,
        )

    def weight_stats(
        self,
        start: date | None = None,
        end: date | None = None,
        today: date | None = None,
    ) -> WeightStats:
        """Return weight statistics, optionally limited to ``[start, end]``."""
        profile = self.repository.get_profile()
        samples = all_weight_samples(self.repository.list_daily_records())
        if start is not None:
            samples = [s for s in samples if s.recorded_at.date() >= start]
        if end is not None:
            samples = [s for s in samples if s.recorded_at.date() <= end]
        return calculate_weight_stats(
            samples, profile, today, default_height_cm=self.default_height_cm
        )

    def chart_for_period(self, kind: str, day: date | None = None) -> ChartSeries:
        """Return chart series for the week or month containing ``day``.

        ``kind="all"`` charts the whole history with no anchor point.
        """
        profile = self.repository.get_profile()
        records = self.repository.list_daily_records()
        height_cm = (
            profile.height_cm
            if profile is not None and profile.height_cm
            else self.default_height_cm
        )
        samples = all_weight_samples(records)
        target = day or date.today()

        if kind == ALL_TIME:
            meta = PeriodMeta(kind=ALL_TIME)
            in_period = samples
            anchor = None
        else:
            start, following = _period_window(kind, target)
            meta = PeriodMeta(
                kind=kind,
                start=start.date(),
                end=(following - timedelta(days=1)).date(),
            )
            in_period = [s for s in samples if start <= s.recorded_at < following]
            before = [s for s in samples if s.recorded_at < start]
            anchor = before[-1] if before else None

        chart_samples = [anchor, *in_period] if anchor else in_period
        if not chart_samples:
            return build_chart_series([], meta, height_cm)

        energy = {
            entry.day: entry
            for entry in derive_daily_energy(
                profile,
                records,
                chart_samples[0].recorded_at.date(),
                chart_samples[-1].recorded_at.date(),
            )
        }
        chart_records = [
            _chart_record(sample, energy, is_previous=sample is anchor)
            for sample in chart_samples
        ]
        _logger.info("Chart series: kind=%s points=%s", kind, len(chart_records))
        return build_chart_series(chart_records, meta, height_cm)


def _period_window(kind: str, day: date) -> tuple[datetime, datetime]:
    if kind == WEEKLY:
        start = start_of_week(day)
        return start, start + timedelta(days=DAYS_PER_WEEK)
    if kind == MONTHLY:
        start = start_of_month(day)
        return start, next_month(start)
    raise ValueError(f"Unknown period kind: {kind}")


def _chart_record(
    sample: WeightSample,
    energy: dict[date, DerivedDailyEnergy],
    is_previous: bool,
) -> ChartRecord:
    day_energy = energy.get(sample.recorded_at.date())
    return ChartRecord(
        recorded_at=sample.recorded_at,
        weight=sample.weight,
        net_calories=day_energy.net_calories if day_energy else None,
        is_complete=day_energy.is_complete if day_energy else False,
        is_previous=is_previous,
    )
