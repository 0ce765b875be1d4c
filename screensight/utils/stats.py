"""Statistics helpers — population variance and the normalized scores built on it. No engine imports."""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np

# Scores are rounded so that threshold comparisons are not decided by float noise
# (0.4 + 0.2 must compare equal to 0.6).
_SCORE_DIGITS = 6


def as_array(values: Sequence[float]) -> np.ndarray:
    return np.asarray(values, dtype=np.float64)


def mean(values: Sequence[float]) -> float:
    if len(values) == 0:
        return 0.0
    return float(np.mean(as_array(values)))


def variance(values: Sequence[float]) -> float:
    """Population variance (divides by N). 0 for an empty sequence."""
    if len(values) == 0:
        return 0.0
    return float(np.var(as_array(values)))


def normalized_variance(values: Sequence[float]) -> float:
    """var / (mean² + 1). Scale-free spread; the +1 keeps all-zero inputs finite."""
    if len(values) == 0:
        return 0.0
    m = mean(values)
    return variance(values) / (m * m + 1)


def consistency(values: Sequence[float]) -> float:
    """1 − normalized variance, floored at 0. Empty input has no consistency."""
    if len(values) == 0:
        return 0.0
    return score(1 - normalized_variance(values))


def inverse_variance(values: Sequence[float], scale: float) -> float:
    """max(0, 1 − var/scale). Used for alignment quality and grid regularity."""
    if len(values) == 0 or scale <= 0:
        return 0.0
    return score(1 - variance(values) / scale)


def uniformity(values: Sequence[float]) -> float:
    """max(0, 1 − var/mean²). 0 when the mean is 0 (nothing to be uniform about)."""
    if len(values) == 0:
        return 0.0
    m = mean(values)
    if abs(m) < 1e-10:
        return 0.0
    return score(1 - variance(values) / (m * m))


def spread(values: Sequence[float]) -> float:
    """var / mean², the complement of ``uniformity`` without the floor."""
    if len(values) == 0:
        return 0.0
    m = mean(values)
    if abs(m) < 1e-10:
        return 0.0
    return variance(values) / (m * m)


def score(value: float) -> float:
    """Clamp to [0, 1] and round away float noise."""
    return round(min(1.0, max(0.0, float(value))), _SCORE_DIGITS)
