"""Daily energy balance from raw meal, exercise and weight entries."""

from collections.abc import Mapping
from datetime import date

from health_metrics.analytics.calendar import iter_days
from health_metrics.analytics.stats import mean
from health_metrics.domain.energy import DerivedDailyEnergy
from health_metrics.domain.records import FEMALE, MALE, DailyRecord, Profile

JIN_PER_KG = 2
MIN_AGE = 1
MAX_AGE = 150


def calculate_bmr(
    weight_jin: float | None,
    height_cm: float | None,
    birth_year: int | None,
    gender: str | None,
    reference_year: int | None = None,
) -> float | None:
    """Return the Mifflin-St Jeor BMR in kcal, or None if any input is unusable."""
    if not weight_jin or not height_cm or birth_year is None:
        return None
    if gender not in {MALE, FEMALE}:
        return None
    year = reference_year if reference_year is not None else date.today().year
    age = year - birth_year
    if age < MIN_AGE or age > MAX_AGE:
        return None
    weight_kg = weight_jin / JIN_PER_KG
    base = 10 * weight_kg + 6.25 * height_cm - 5 * age
    return base + 5 if gender == MALE else base - 161


def summarize_day(
    profile: Profile | None,
    record: DailyRecord,
    reference_year: int | None = None,
) -> DerivedDailyEnergy:
    """Derive one day's energy balance from its raw entries."""
    weights = [sample.weight for sample in record.weights]
    avg_weight = mean(weights) if weights else None
    calories_in = sum(m.calories for m in record.meals if m.calories is not None)
    calories_out = sum(e.calories for e in record.exercises if e.calories is not None)
    bmr = None
    if profile is not None:
        bmr = calculate_bmr(
            avg_weight,
            profile.height_cm,
            profile.birth_year,
            profile.gender,
            reference_year,
        )
    net_calories = calories_in - (bmr + calories_out) if bmr is not None else None
    return DerivedDailyEnergy(
        day=record.day,
        weight=avg_weight,
        calories_in=calories_in,
        calories_out=calories_out,
        bmr=bmr,
        net_calories=net_calories,
        is_complete=record.is_complete,
    )


def derive_daily_energy(
    profile: Profile | None,
    daily_records: Mapping[date, DailyRecord],
    range_start: date,
    range_end: date,
    reference_year: int | None = None,
) -> list[DerivedDailyEnergy]:
    """Return energy balance for each recorded day in ``[range_start, range_end]``."""
    return [
        summarize_day(profile, daily_records[day], reference_year)
        for day in iter_days(range_start, range_end)
        if day in daily_records
    ]
