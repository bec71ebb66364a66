"""Tests for the analytics service."""

from datetime import date, datetime

import pytest

from health_metrics.analytics.frequency import NOT_ENOUGH_WEIGHTS
from health_metrics.domain.charts import ALL_TIME, MONTHLY, WEEKLY, ChartSeries
from health_metrics.domain.records import Profile
from health_metrics.services.analytics import AnalyticsService
from tests.conftest import InMemoryHealthRecordRepository, by_day, make_day


@pytest.fixture
def stocked_repository(
    repository: InMemoryHealthRecordRepository,
) -> InMemoryHealthRecordRepository:
    repository.records = by_day(
        make_day(date(2024, 3, 1), weights=[141]),
        make_day(date(2024, 3, 4), weights=[140], meals=[2000]),
        make_day(date(2024, 3, 6), weights=[139], exercises=[250]),
        make_day(date(2024, 3, 12), weights=[138]),
    )
    return repository


def test_daily_energy_returns_recorded_days(
    analytics_service: AnalyticsService,
    stocked_repository: InMemoryHealthRecordRepository,
) -> None:
    days = analytics_service.daily_energy(date(2024, 3, 2), date(2024, 3, 10))

    assert [entry.day for entry in days] == [date(2024, 3, 4), date(2024, 3, 6)]
    assert days[0].calories_in == 2000
    assert days[1].calories_out == 250
    assert all(entry.net_calories is not None for entry in days)


def test_weekly_energy_report(
    analytics_service: AnalyticsService,
    stocked_repository: InMemoryHealthRecordRepository,
) -> None:
    report = analytics_service.weekly_energy_report()

    assert [p.start for p in report.periods] == [
        date(2024, 3, 11),
        date(2024, 3, 4),
        date(2024, 2, 26),
    ]
    assert report.periods[0].weight_change == -1
    assert report.correlation.sample_size == 3


def test_monthly_energy_report(
    analytics_service: AnalyticsService,
    stocked_repository: InMemoryHealthRecordRepository,
) -> None:
    report = analytics_service.monthly_energy_report()

    [march] = report.periods
    assert march.label == "2024-03"
    assert march.weight_change == -3
    assert report.correlation.coefficient is None


def test_reports_read_a_fresh_snapshot(
    analytics_service: AnalyticsService,
    stocked_repository: InMemoryHealthRecordRepository,
) -> None:
    before = analytics_service.weekly_energy_report()
    stocked_repository.records[date(2024, 3, 19)] = make_day(
        date(2024, 3, 19), weights=[137]
    )
    after = analytics_service.weekly_energy_report()

    assert len(after.periods) == len(before.periods) + 1
    assert stocked_repository.reads == 2


def test_exercise_report_without_data(analytics_service: AnalyticsService) -> None:
    generated_at = datetime(2024, 3, 20, 9)

    report = analytics_service.exercise_report(generated_at)

    assert report.generated_at == generated_at
    assert report.weight_changes == []
    assert report.weight_change_summary.total == 0
    assert report.weight_change_summary.avg_change == 0
    assert report.efficiency.score == 0
    assert report.efficiency.level == "none"
    assert report.time_slots.data_quality == "insufficient"
    assert report.frequency.insight == NOT_ENOUGH_WEIGHTS


def test_exercise_report_collects_deltas(
    analytics_service: AnalyticsService,
    stocked_repository: InMemoryHealthRecordRepository,
) -> None:
    stocked_repository.records[date(2024, 3, 7)] = make_day(
        date(2024, 3, 7), weights=[138.6]
    )

    report = analytics_service.exercise_report(datetime(2024, 3, 20))

    [delta] = report.weight_changes
    assert delta.recorded_at == datetime(2024, 3, 6, 18)
    assert delta.before_weight == 139
    assert delta.after_weight == 138.6
    assert delta.effectiveness == "positive"
    assert report.weight_change_summary.positive == 1
    assert report.time_slots.data_quality == "insufficient"


def test_weekly_chart_includes_previous_point(
    analytics_service: AnalyticsService,
    stocked_repository: InMemoryHealthRecordRepository,
) -> None:
    series = analytics_service.chart_for_period(WEEKLY, date(2024, 3, 6))

    assert [p.y for p in series.weight_points] == [140, 139]
    [previous] = series.previous_points
    assert previous.x == datetime(2024, 3, 1, 8)
    assert [bar.color for bar in series.calorie_bars] == [
        "deficit",
        "surplus",
        "deficit",
    ]
    assert series.time_range is not None
    assert series.time_range.min == datetime(2024, 3, 1, 8)
    assert series.week_boundaries == [datetime(2024, 3, 4)]


def test_monthly_chart_without_records_is_empty(
    analytics_service: AnalyticsService,
    stocked_repository: InMemoryHealthRecordRepository,
) -> None:
    assert analytics_service.chart_for_period(MONTHLY, date(2023, 6, 1)) == (
        ChartSeries()
    )


def test_all_time_chart_has_no_anchor(
    analytics_service: AnalyticsService,
    stocked_repository: InMemoryHealthRecordRepository,
) -> None:
    series = analytics_service.chart_for_period(ALL_TIME)

    assert len(series.weight_points) == 4
    assert series.previous_points == []
    assert series.time_range is not None
    assert series.time_range.min == datetime(2024, 3, 1, 8)


def test_chart_uses_default_height_without_profile() -> None:
    repository = InMemoryHealthRecordRepository(
        records=by_day(make_day(date(2024, 3, 4), weights=[140]))
    )
    service = AnalyticsService(repository, default_height_cm=160)

    series = service.chart_for_period(WEEKLY, date(2024, 3, 4))

    assert series.weight_points[0].bmi == 27.3
    assert series.calorie_bars[0].y is None


def test_chart_rejects_unknown_period(analytics_service: AnalyticsService) -> None:
    with pytest.raises(ValueError, match="Unknown period kind"):
        analytics_service.chart_for_period("yearly", date(2024, 3, 4))


def test_weight_stats_for_a_period(
    analytics_service: AnalyticsService,
    stocked_repository: InMemoryHealthRecordRepository,
) -> None:
    stocked_repository.profile = Profile(height_cm=170, target_weight=131)

    overall = analytics_service.weight_stats(today=date(2024, 3, 12))
    week = analytics_service.weight_stats(
        date(2024, 3, 4), date(2024, 3, 10), today=date(2024, 3, 12)
    )

    assert overall.total_records == 4
    assert overall.change == -3.0
    assert overall.target_progress == 30.0
    assert overall.this_week == 1
    assert week.initial == 140
    assert week.current == 139
    assert week.total_records == 2
    assert week.target_remaining == -8.0
