"""Small statistics helpers."""

import math
from collections.abc import Sequence

STRONG = "strong"
MODERATE = "moderate"
WEAK = "weak"
NONE = "none"


def mean(values: Sequence[float]) -> float:
    """Arithmetic mean; zero for an empty sequence."""
    if not values:
        return 0.0
    return sum(values) / len(values)


def population_std_dev(values: Sequence[float]) -> float:
    """Population standard deviation; zero for an empty sequence."""
    if not values:
        return 0.0
    avg = mean(values)
    variance = sum((value - avg) ** 2 for value in values) / len(values)
    return math.sqrt(variance)


def pearson_correlation(xs: Sequence[float], ys: Sequence[float]) -> float | None:
    """Return Pearson's r, or None when it is undefined.

    Undefined means mismatched lengths, fewer than two pairs, or zero variance
    in either series.
    """
    if len(xs) != len(ys) or len(xs) < 2:  # noqa: PLR2004
        return None
    # Checked on the raw values so the answer does not depend on scale.
    if max(xs) == min(xs) or max(ys) == min(ys):
        return None
    mean_x = mean(xs)
    mean_y = mean(ys)
    covariance = 0.0
    variance_x = 0.0
    variance_y = 0.0
    for x, y in zip(xs, ys, strict=True):
        diff_x = x - mean_x
        diff_y = y - mean_y
        covariance += diff_x * diff_y
        variance_x += diff_x * diff_x
        variance_y += diff_y * diff_y
    denominator = math.sqrt(variance_x) * math.sqrt(variance_y)
    if denominator == 0:
        return None
    return max(-1.0, min(1.0, covariance / denominator))


def correlation_strength(coefficient: float) -> str:
    """Bucket ``|r|`` into strong, moderate, weak or none."""
    magnitude = abs(coefficient)
    if magnitude >= 0.7:  # noqa: PLR2004
        return STRONG
    if magnitude >= 0.4:  # noqa: PLR2004
        return MODERATE
    if magnitude >= 0.2:  # noqa: PLR2004
        return WEAK
    return NONE
