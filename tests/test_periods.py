"""Tests for weekly and monthly period buckets."""

from dataclasses import replace
from datetime import date

import pytest

from health_metrics.analytics.periods import bucket_monthly, bucket_weekly
from health_metrics.domain.records import Profile
from tests.conftest import REFERENCE_YEAR, by_day, make_day


def test_bucket_weekly_requires_two_weight_samples(profile: Profile) -> None:
    records = by_day(make_day(date(2024, 3, 4), weights=[140], meals=[1500]))

    assert bucket_weekly(profile, records, REFERENCE_YEAR) == []
    assert bucket_weekly(profile, {}, REFERENCE_YEAR) == []


def test_bucket_weekly_uses_previous_week_as_anchor(profile: Profile) -> None:
    records = by_day(
        make_day(date(2024, 3, 4), weights=[140]),
        make_day(date(2024, 3, 12), weights=[138]),
    )

    latest, earliest = bucket_weekly(profile, records, REFERENCE_YEAR)

    assert latest.label == "3.11-3.17"
    assert latest.start == date(2024, 3, 11)
    assert latest.end == date(2024, 3, 17)
    assert latest.start_weight == 140
    assert latest.end_weight == 138
    assert latest.weight_change == -2
    assert latest.total_days == 7
    assert earliest.label == "3.04-3.10"
    assert earliest.start_weight == 140
    assert earliest.weight_change == 0


def test_bucket_weekly_spans_from_first_monday(profile: Profile) -> None:
    records = by_day(
        make_day(date(2024, 3, 7), weights=[140]),
        make_day(date(2024, 3, 17), weights=[139]),
    )

    periods = bucket_weekly(profile, records, REFERENCE_YEAR)

    assert [p.start for p in periods] == [date(2024, 3, 11), date(2024, 3, 4)]


def test_bucket_weekly_emits_empty_weeks_with_null_weights(profile: Profile) -> None:
    records = by_day(
        make_day(date(2024, 3, 4), weights=[140]),
        make_day(date(2024, 3, 20), weights=[137]),
    )

    periods = bucket_weekly(profile, records, REFERENCE_YEAR)

    assert len(periods) == 3
    gap = periods[1]
    assert gap.start == date(2024, 3, 11)
    assert gap.start_weight is None
    assert gap.end_weight is None
    assert gap.weight_change is None
    assert gap.total_net_calories is None
    assert gap.avg_daily_deficit is None
    assert periods[0].start_weight == 140


def test_bucket_weekly_sums_only_complete_days(profile: Profile) -> None:
    monday = make_day(date(2024, 3, 4), weights=[140], meals=[2000])
    tuesday = make_day(date(2024, 3, 5), weights=[140], meals=[1000])
    wednesday = make_day(date(2024, 3, 6), meals=[1200])
    next_week = make_day(date(2024, 3, 12), weights=[138])

    complete = bucket_weekly(
        profile, by_day(monday, tuesday, wednesday, next_week), REFERENCE_YEAR
    )[-1]
    flipped = bucket_weekly(
        profile,
        by_day(monday, replace(tuesday, is_complete=False), wednesday, next_week),
        REFERENCE_YEAR,
    )[-1]

    assert complete.total_net_calories == pytest.approx(382.5 - 617.5)
    assert complete.valid_days == 2
    assert complete.complete_days == 3
    assert complete.avg_daily_deficit == pytest.approx(-117.5)
    assert flipped.total_net_calories == pytest.approx(382.5)
    assert complete.total_net_calories - flipped.total_net_calories == pytest.approx(
        -617.5
    )
    assert flipped.valid_days == 1


def test_bucket_weekly_without_bmr_has_no_energy_totals() -> None:
    records = by_day(
        make_day(date(2024, 3, 4), weights=[140], meals=[2000]),
        make_day(date(2024, 3, 5), weights=[139], meals=[1500]),
    )

    [period] = bucket_weekly(Profile(height_cm=170), records, REFERENCE_YEAR)

    assert period.total_net_calories is None
    assert period.avg_daily_deficit is None
    assert period.valid_days == 0
    assert period.complete_days == 2


def test_bucket_monthly_calendar_months(profile: Profile) -> None:
    records = by_day(
        make_day(date(2024, 1, 31), weights=[150]),
        make_day(date(2024, 3, 2), weights=[146]),
        make_day(date(2024, 3, 20), weights=[145]),
    )

    periods = bucket_monthly(profile, records, REFERENCE_YEAR)

    assert [p.label for p in periods] == ["2024-03", "2024-02", "2024-01"]
    march, february, january = periods
    assert february.total_days == 29
    assert february.weight_change is None
    assert march.start_weight == 150
    assert march.end_weight == 145
    assert march.weight_change == -5
    assert march.end == date(2024, 3, 31)
    assert january.start == date(2024, 1, 1)
    assert january.weight_change == 0
