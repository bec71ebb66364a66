"""Domain models for energy balance analytics.

Sign convention: net calories below zero are a deficit and weight change
below zero is a loss.
"""

from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True)
class DerivedDailyEnergy:
    """Energy balance for one day."""

    day: date
    weight: float | None
    calories_in: float
    calories_out: float
    bmr: float | None
    net_calories: float | None
    is_complete: bool


@dataclass(frozen=True)
class PeriodSummary:
    """Calendar-aligned week or month of energy and weight data."""

    label: str
    start: date
    end: date
    start_weight: float | None
    end_weight: float | None
    weight_change: float | None
    total_net_calories: float | None
    avg_daily_deficit: float | None
    valid_days: int
    complete_days: int
    total_days: int


@dataclass(frozen=True)
class PeriodAccuracy:
    """Theoretical versus observed weight change for a period."""

    period: PeriodSummary
    theoretical_weight_change: float
    actual_weight_change: float
    accuracy: float | None


@dataclass(frozen=True)
class CorrelationResult:
    """Correlation between net calories and weight change."""

    coefficient: float | None
    strength: str | None
    interpretation: str
    sample_size: int
    analysis: list[PeriodAccuracy]
