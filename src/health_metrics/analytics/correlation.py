"""Correlation between period energy balance and observed weight change.

Both series share one sign convention: net calories below zero are a deficit
and weight change below zero is a loss. A bigger deficit should therefore pair
with a bigger loss, so a *positive* coefficient is the physiologically
expected direction and a negative one is flagged as unexpected.
"""

import logging

from health_metrics.analytics.energy import JIN_PER_KG
from health_metrics.analytics.stats import (
    MODERATE,
    STRONG,
    correlation_strength,
    pearson_correlation,
)
from health_metrics.domain.energy import (
    CorrelationResult,
    PeriodAccuracy,
    PeriodSummary,
)

_logger = logging.getLogger(__name__)

KCAL_PER_KG_FAT = 7700
MIN_PERIODS = 2

INSUFFICIENT_DATA = (
    "Insufficient data: at least 2 periods with both weight change and "
    "complete calorie logs are needed."
)
UNDEFINED_CORRELATION = (
    "Correlation is undefined because net calories or weight change did not "
    "vary across periods."
)


def analyze_correlation(periods: list[PeriodSummary]) -> CorrelationResult:
    """Correlate total net calories with weight change across periods."""
    qualifying = [
        period
        for period in periods
        if period.weight_change is not None
        and period.total_net_calories is not None
        and period.valid_days > 0
    ]
    analysis = [_period_accuracy(period) for period in qualifying]

    if len(qualifying) < MIN_PERIODS:
        _logger.debug("Correlation skipped: %s qualifying periods", len(qualifying))
        return CorrelationResult(
            coefficient=None,
            strength=None,
            interpretation=INSUFFICIENT_DATA,
            sample_size=len(qualifying),
            analysis=analysis,
        )

    coefficient = pearson_correlation(
        [period.total_net_calories for period in qualifying],
        [period.weight_change for period in qualifying],
    )
    if coefficient is None:
        return CorrelationResult(
            coefficient=None,
            strength=None,
            interpretation=UNDEFINED_CORRELATION,
            sample_size=len(qualifying),
            analysis=analysis,
        )

    strength = correlation_strength(coefficient)
    return CorrelationResult(
        coefficient=round(coefficient, 3),
        strength=strength,
        interpretation=_interpret(coefficient, strength),
        sample_size=len(qualifying),
        analysis=analysis,
    )


def theoretical_weight_change(total_net_calories: float) -> float:
    """Weight change in jin implied by a net calorie total."""
    return round(total_net_calories / KCAL_PER_KG_FAT * JIN_PER_KG, 2)


def weight_change_accuracy(theoretical: float, actual: float) -> float | None:
    """Percent agreement between predicted and observed change.

    Only defined when both moved in the same direction.
    """
    same_direction = (theoretical < 0 and actual < 0) or (
        theoretical > 0 and actual > 0
    )
    if not same_direction:
        return None
    diff = abs(theoretical - actual)
    avg = (abs(theoretical) + abs(actual)) / 2
    return round(100 - (diff / avg) * 100, 1)


def _period_accuracy(period: PeriodSummary) -> PeriodAccuracy:
    theoretical = theoretical_weight_change(period.total_net_calories)
    actual = period.weight_change
    return PeriodAccuracy(
        period=period,
        theoretical_weight_change=theoretical,
        actual_weight_change=actual,
        accuracy=weight_change_accuracy(theoretical, actual),
    )


def _interpret(coefficient: float, strength: str) -> str:
    r_text = f"r={coefficient:.3f}"
    if coefficient == 0:
        return "Net calories and weight change show no linear relationship."
    if coefficient > 0:
        text = (
            f"Net calories and weight change are positively correlated ({r_text}): "
            "larger deficits went with larger weight loss, as expected."
        )
        if strength not in {STRONG, MODERATE}:
            text += (
                " The relationship is weak; calorie logs may be inaccurate, "
                "weigh-ins fluctuate, or water and muscle changes mask the trend."
            )
        return text
    return (
        f"Net calories and weight change are negatively correlated ({r_text}), "
        "which is unexpected. Possible causes: inaccurate calorie logging, "
        "metabolic adaptation, or incomplete records."
    )
