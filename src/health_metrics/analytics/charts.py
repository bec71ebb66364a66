"""Chart-ready series for a report period."""

from datetime import datetime, timedelta

from health_metrics.analytics.calendar import (
    DAYS_PER_WEEK,
    end_of_day,
    next_month,
    start_of_month,
    week_boundaries,
)
from health_metrics.analytics.energy import JIN_PER_KG
from health_metrics.domain.charts import (
    DEFICIT,
    MONTHLY,
    NEUTRAL,
    SURPLUS,
    WEEKLY,
    AnomalyPoint,
    CalorieBar,
    ChartPoint,
    ChartRecord,
    ChartSeries,
    PeriodMeta,
    TimeRange,
)

MOVING_AVERAGE_WINDOW = 7
ANOMALY_THRESHOLD = 4
DEFAULT_HEIGHT_CM = 170.0


def calculate_bmi(weight_jin: float, height_cm: float) -> float:
    """Return BMI for a weight in jin."""
    height_m = height_cm / 100
    return round(weight_jin / JIN_PER_KG / (height_m * height_m), 1)


def calorie_color(net_calories: float | None) -> str:
    """Classify a net calorie bar."""
    if net_calories is None or net_calories == 0:
        return NEUTRAL
    return SURPLUS if net_calories > 0 else DEFICIT


def build_chart_series(
    period_records: list[ChartRecord], period_meta: PeriodMeta, height_cm: float
) -> ChartSeries:
    """Build every series the period chart needs.

    ``period_records`` may contain one record flagged ``is_previous``: the last
    weigh-in before the period, drawn for continuity.
    """
    if not period_records:
        return ChartSeries()

    ordered = sorted(period_records, key=lambda r: r.recorded_at)
    current = [r for r in ordered if not r.is_previous]
    anchor = next((r for r in ordered if r.is_previous), None)

    def point(record: ChartRecord) -> ChartPoint:
        return ChartPoint(
            x=record.recorded_at,
            y=record.weight,
            bmi=calculate_bmi(record.weight, height_cm),
        )

    weight_points = [point(r) for r in current]
    previous_points = [point(anchor)] if anchor else []

    calorie_bars = []
    for record in ordered:
        value = record.net_calories if record.is_complete else None
        calorie_bars.append(
            CalorieBar(x=record.recorded_at, y=value, color=calorie_color(value))
        )

    averaged = [anchor, *current] if anchor else current
    moving_average = []
    for index, record in enumerate(averaged):
        window = averaged[max(0, index - MOVING_AVERAGE_WINDOW + 1) : index + 1]
        average = round(sum(r.weight for r in window) / len(window), 1)
        moving_average.append(
            ChartPoint(
                x=record.recorded_at,
                y=average,
                bmi=calculate_bmi(average, height_cm),
            )
        )

    anomalies = []
    for previous, record in zip(current, current[1:], strict=False):
        change = abs(record.weight - previous.weight)
        if change > ANOMALY_THRESHOLD:
            anomalies.append(
                AnomalyPoint(
                    x=record.recorded_at,
                    y=record.weight,
                    bmi=calculate_bmi(record.weight, height_cm),
                    change=round(change, 1),
                )
            )

    time_range = _time_range(ordered, current, anchor, period_meta)
    return ChartSeries(
        weight_points=weight_points,
        previous_points=previous_points,
        calorie_bars=calorie_bars,
        moving_average=moving_average,
        anomalies=anomalies,
        time_range=time_range,
        week_boundaries=week_boundaries(time_range.min, time_range.max),
    )


def _time_range(
    ordered: list[ChartRecord],
    current: list[ChartRecord],
    anchor: ChartRecord | None,
    period_meta: PeriodMeta,
) -> TimeRange:
    bounds = _period_bounds(period_meta)
    if bounds is None:
        observed = current or ordered
        range_min = observed[0].recorded_at
        range_max = observed[-1].recorded_at
    else:
        range_min, range_max = bounds
    if anchor is not None and anchor.recorded_at < range_min:
        range_min = anchor.recorded_at
    return TimeRange(min=range_min, max=range_max)


def _period_bounds(period_meta: PeriodMeta) -> tuple[datetime, datetime] | None:
    if period_meta.start is None:
        return None
    if period_meta.kind == WEEKLY:
        start = datetime.combine(period_meta.start, datetime.min.time())
        end = period_meta.end or period_meta.start + timedelta(days=DAYS_PER_WEEK - 1)
        return start, end_of_day(end)
    if period_meta.kind == MONTHLY:
        start = start_of_month(period_meta.start)
        last_day = (next_month(start) - timedelta(days=1)).date()
        return start, end_of_day(last_day)
    return None
