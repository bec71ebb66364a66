"""Domain models for raw health records."""

from dataclasses import dataclass, field
from datetime import date, datetime

MALE = "male"
FEMALE = "female"


@dataclass(frozen=True)
class Profile:
    """Single user profile used to derive BMR."""

    height_cm: float | None
    birth_year: int | None = None
    gender: str | None = None
    target_weight: float | None = None


@dataclass(frozen=True)
class WeightSample:
    """A weight measurement in jin (half a kilogram)."""

    recorded_at: datetime
    weight: float
    fasting: bool = True


@dataclass(frozen=True)
class MealEntry:
    """A meal with its estimated energy, if analysed yet."""

    recorded_at: datetime
    calories: float | None
    meal_type: str = "other"


@dataclass(frozen=True)
class ExerciseSession:
    """An exercise session."""

    recorded_at: datetime
    duration_minutes: float
    calories: float | None = None


@dataclass(frozen=True)
class DailyRecord:
    """All entries logged for one calendar day."""

    day: date
    weights: list[WeightSample] = field(default_factory=list)
    meals: list[MealEntry] = field(default_factory=list)
    exercises: list[ExerciseSession] = field(default_factory=list)
    is_complete: bool = False


def all_weight_samples(daily_records: dict[date, DailyRecord]) -> list[WeightSample]:
    """Flatten weight samples from daily records, oldest first."""
    samples = [w for record in daily_records.values() for w in record.weights]
    return sorted(samples, key=lambda sample: sample.recorded_at)


def all_exercise_sessions(
    daily_records: dict[date, DailyRecord],
) -> list[ExerciseSession]:
    """Flatten exercise sessions from daily records, oldest first."""
    sessions = [s for record in daily_records.values() for s in record.exercises]
    return sorted(sessions, key=lambda session: session.recorded_at)
