"""Domain models for weight statistics."""

from dataclasses import dataclass


@dataclass(frozen=True)
class WeightStats:
    """Dashboard summary of a run of weight samples, in jin.

    An empty run leaves every figure at zero. Target fields stay None when the
    profile has no target weight.
    """

    current: float = 0.0
    initial: float = 0.0
    average: float = 0.0
    min: float = 0.0
    max: float = 0.0
    bmi: float = 0.0
    change: float = 0.0
    total_records: int = 0
    this_month: int = 0
    this_week: int = 0
    target_progress: float | None = None
    target_remaining: float | None = None
