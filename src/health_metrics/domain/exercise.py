"""Domain models for exercise analysis."""

from dataclasses import dataclass, field
from datetime import date, datetime

MORNING = "morning"
AFTERNOON = "afternoon"
EVENING = "evening"
TIME_SLOTS = (MORNING, AFTERNOON, EVENING)


@dataclass(frozen=True)
class WeightDelta:
    """Weight change across the 24 hours around one session."""

    recorded_at: datetime
    duration_minutes: float
    time_slot: str
    before_weight: float
    after_weight: float
    weight_change: float
    effectiveness: str


@dataclass(frozen=True)
class WeightDeltaSummary:
    """Aggregate view over all weight deltas."""

    total: int
    positive: int
    avg_change: float


@dataclass(frozen=True)
class EfficiencyScore:
    """Composite 0-100 exercise efficiency score."""

    score: int
    frequency: int
    consistency: int
    weight_impact: int
    level: str
    description: str
    exercise_days_per_week: float


@dataclass(frozen=True)
class TimeSlotStat:
    """Effectiveness statistics for one time of day."""

    count: int = 0
    avg_change: float = 0.0
    effectiveness: float = 0.0
    score: float = 0.0


@dataclass(frozen=True)
class TimeSlotAnalysis:
    """Per-slot statistics and the best slot, if one qualifies."""

    best_slot: str | None
    slots: dict[str, TimeSlotStat]
    recommendation: str
    data_quality: str


@dataclass(frozen=True)
class FrequencyImpactPeriod:
    """Exercise volume and weight change for one week."""

    week_number: int
    label: str
    start: date
    end: date
    exercise_count: int
    total_duration: float
    weight_change: float
    avg_weight: float | None


@dataclass(frozen=True)
class FrequencySummary:
    """Averages across the emitted weeks."""

    total_weeks: int = 0
    avg_exercise_per_week: float = 0.0
    avg_weight_change_per_week: float = 0.0


@dataclass(frozen=True)
class FrequencyImpact:
    """Weekly exercise frequency versus weight change."""

    periods: list[FrequencyImpactPeriod]
    correlation: float | None
    insight: str
    summary: FrequencySummary = field(default_factory=FrequencySummary)


@dataclass(frozen=True)
class ExerciseReport:
    """Composite exercise effectiveness report."""

    weight_changes: list[WeightDelta]
    weight_change_summary: WeightDeltaSummary
    efficiency: EfficiencyScore
    time_slots: TimeSlotAnalysis
    frequency: FrequencyImpact
    generated_at: datetime
