"""Supabase-backed snapshot reader for health records."""

import logging
from dataclasses import dataclass
from datetime import date, datetime

from supabase import Client

from health_metrics.config import parse_gender
from health_metrics.domain.records import (
    DailyRecord,
    ExerciseSession,
    MealEntry,
    Profile,
    WeightSample,
)
from health_metrics.services.analytics import HealthRecordRepository

_logger = logging.getLogger(__name__)

# PostgREST default max_rows.
PAGE_SIZE = 1000


@dataclass
class SupabaseHealthRecordRepository(HealthRecordRepository):
    """Supabase implementation for reading profile and daily records.

    Tables are read page by page so the snapshot is not cut off at the
    server's row limit. ``page_size`` must not exceed that limit.
    """

    client: Client
    page_size: int = PAGE_SIZE

    def get_profile(self) -> Profile | None:
        """Return the single stored profile."""
        response = (
            self.client.table("profile")
            .select("height_cm, birth_year, gender, target_weight")
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        row = response.data[0]
        birth_year = _optional_float(row.get("birth_year"))
        return Profile(
            height_cm=_optional_float(row.get("height_cm")),
            birth_year=int(birth_year) if birth_year is not None else None,
            gender=parse_gender(row.get("gender")),
            target_weight=_optional_float(row.get("target_weight")),
        )

    def list_daily_records(self) -> dict[date, DailyRecord]:
        """Return all records grouped into days."""
        weights: dict[date, list[WeightSample]] = {}
        for row in self._select("weight_records", "recorded_at, weight, fasting"):
            recorded_at = _parse_timestamp(row, "weight_records")
            weight = _optional_float(row.get("weight"))
            if recorded_at is None or weight is None:
                continue
            weights.setdefault(recorded_at.date(), []).append(
                WeightSample(
                    recorded_at=recorded_at,
                    weight=weight,
                    fasting=row.get("fasting") is not False,
                )
            )

        meals: dict[date, list[MealEntry]] = {}
        for row in self._select(
            "meal_records", "recorded_at, estimated_calories, meal_type"
        ):
            recorded_at = _parse_timestamp(row, "meal_records")
            if recorded_at is None:
                continue
            meals.setdefault(recorded_at.date(), []).append(
                MealEntry(
                    recorded_at=recorded_at,
                    calories=_optional_float(row.get("estimated_calories")),
                    meal_type=str(row.get("meal_type") or "other"),
                )
            )

        exercises: dict[date, list[ExerciseSession]] = {}
        for row in self._select(
            "exercise_records", "recorded_at, duration_minutes, estimated_calories"
        ):
            recorded_at = _parse_timestamp(row, "exercise_records")
            if recorded_at is None:
                continue
            exercises.setdefault(recorded_at.date(), []).append(
                ExerciseSession(
                    recorded_at=recorded_at,
                    duration_minutes=_optional_float(row.get("duration_minutes"))
                    or 0.0,
                    calories=_optional_float(row.get("estimated_calories")),
                )
            )

        complete = {
            date.fromisoformat(str(row["day"])): bool(row.get("is_complete"))
            for row in self._select("daily_records", "day, is_complete")
            if row.get("day")
        }

        days = set(weights) | set(meals) | set(exercises) | set(complete)
        return {
            day: DailyRecord(
                day=day,
                weights=weights.get(day, []),
                meals=meals.get(day, []),
                exercises=exercises.get(day, []),
                is_complete=complete.get(day, False),
            )
            for day in sorted(days)
        }

    def _select(self, table: str, columns: str) -> list[dict[str, object]]:
        order_column = "day" if table == "daily_records" else "recorded_at"
        rows: list[dict[str, object]] = []
        offset = 0
        while True:
            response = (
                self.client.table(table)
                .select(columns)
                .order(order_column, desc=False)
                .range(offset, offset + self.page_size - 1)
                .execute()
            )
            page = response.data or []
            rows.extend(page)
            if len(page) < self.page_size:
                return rows
            offset += self.page_size


def _parse_timestamp(row: dict[str, object], table: str) -> datetime | None:
    raw = row.get("recorded_at")
    if not isinstance(raw, str) or not raw:
        _logger.warning("Skipping %s row without recorded_at", table)
        return None
    try:
        parsed = datetime.fromisoformat(raw)
    except ValueError:
        _logger.warning("Skipping %s row with bad recorded_at: %s", table, raw)
        return None
    # Analytics work on naive local wall-clock time.
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone().replace(tzinfo=None)
    return parsed


def _optional_float(value: object) -> float | None:
    if value is None or value == "":
        return None
    try:
        return float(value)
    except (TypeError, ValueError):
        return None
