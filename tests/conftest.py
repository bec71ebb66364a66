"""Shared test fixtures."""

from dataclasses import dataclass, field
from datetime import date, datetime

import pytest

from health_metrics.config import Settings
from health_metrics.domain.records import (
    DailyRecord,
    ExerciseSession,
    MealEntry,
    Profile,
    WeightSample,
)
from health_metrics.services.analytics import AnalyticsService, HealthRecordRepository

REFERENCE_YEAR = 2024


@dataclass
class InMemoryHealthRecordRepository(HealthRecordRepository):
    """In-memory health record repository for tests."""

    profile: Profile | None = None
    records: dict[date, DailyRecord] = field(default_factory=dict)
    reads: int = 0

    def get_profile(self) -> Profile | None:
        return self.profile

    def list_daily_records(self) -> dict[date, DailyRecord]:
        self.reads += 1
        return dict(self.records)


def make_day(  # noqa: PLR0913
    day: date,
    weights: list[float] | None = None,
    meals: list[float | None] | None = None,
    exercises: list[float | None] | None = None,
    is_complete: bool = True,
    hour: int = 8,
) -> DailyRecord:
    """Build a daily record with entries at fixed times on ``day``."""
    return DailyRecord(
        day=day,
        weights=[
            WeightSample(
                recorded_at=datetime(day.year, day.month, day.day, hour), weight=w
            )
            for w in weights or []
        ],
        meals=[
            MealEntry(
                recorded_at=datetime(day.year, day.month, day.day, 12),
                calories=kcal,
                meal_type="lunch",
            )
            for kcal in meals or []
        ],
        exercises=[
            ExerciseSession(
                recorded_at=datetime(day.year, day.month, day.day, 18),
                duration_minutes=30,
                calories=kcal,
            )
            for kcal in exercises or []
        ],
        is_complete=is_complete,
    )


def by_day(*records: DailyRecord) -> dict[date, DailyRecord]:
    return {record.day: record for record in records}


def weigh_in(moment: datetime, weight: float) -> WeightSample:
    return WeightSample(recorded_at=moment, weight=weight)


def session(moment: datetime, duration: float = 30) -> ExerciseSession:
    return ExerciseSession(recorded_at=moment, duration_minutes=duration)


@pytest.fixture
def settings() -> Settings:
    return Settings(
        supabase_url="https://example.supabase.co",
        supabase_service_key="header.payload.signature",
    )


@pytest.fixture
def profile() -> Profile:
    return Profile(height_cm=170, birth_year=1994, gender="male")


@pytest.fixture
def repository(profile: Profile) -> InMemoryHealthRecordRepository:
    return InMemoryHealthRecordRepository(profile=profile)


@pytest.fixture
def analytics_service(
    repository: InMemoryHealthRecordRepository,
) -> AnalyticsService:
    return AnalyticsService(repository)
