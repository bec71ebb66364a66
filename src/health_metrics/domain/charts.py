"""Domain models for chart series."""

from dataclasses import dataclass, field
from datetime import date, datetime

WEEKLY = "weekly"
MONTHLY = "monthly"
ALL_TIME = "all"

NEUTRAL = "neutral"
SURPLUS = "surplus"
DEFICIT = "deficit"


@dataclass(frozen=True)
class PeriodMeta:
    """Which period a chart covers."""

    kind: str
    start: date | None = None
    end: date | None = None


@dataclass(frozen=True)
class ChartRecord:
    """A weight sample joined with its day's energy balance."""

    recorded_at: datetime
    weight: float
    net_calories: float | None = None
    is_complete: bool = False
    is_previous: bool = False


@dataclass(frozen=True)
class ChartPoint:
    """A weight point with its BMI."""

    x: datetime
    y: float
    bmi: float


@dataclass(frozen=True)
class AnomalyPoint:
    """A point whose weight jumped from the previous one."""

    x: datetime
    y: float
    bmi: float
    change: float


@dataclass(frozen=True)
class CalorieBar:
    """Net calorie bar; ``y`` is None when it should render as a gap."""

    x: datetime
    y: float | None
    color: str


@dataclass(frozen=True)
class TimeRange:
    """Visible x-axis bounds."""

    min: datetime
    max: datetime


@dataclass(frozen=True)
class ChartSeries:
    """Visualization-ready series for a period."""

    weight_points: list[ChartPoint] = field(default_factory=list)
    previous_points: list[ChartPoint] = field(default_factory=list)
    calorie_bars: list[CalorieBar] = field(default_factory=list)
    moving_average: list[ChartPoint] = field(default_factory=list)
    anomalies: list[AnomalyPoint] = field(default_factory=list)
    time_range: TimeRange | None = None
    week_boundaries: list[datetime] = field(default_factory=list)
