"""Normalization utilities for feature matrices."""

from __future__ import annotations

import numpy as np

from ..errors import DegenerateStatisticsError


def zscore_normalize(features: np.ndarray) -> tuple[float, float]:
    """Z-score normalize a feature matrix in place over all entries flattened together.

    Uses the population standard deviation. Returns the (mean, std) that were
    removed.

    Raises:
        TypeError: If features is not a floating-point NumPy array.
        DegenerateStatisticsError: If the matrix is empty or its variance is zero
            (to within rounding of the mean).
    """
    if not isinstance(features, np.ndarray) or features.dtype.kind != "f":
        raise TypeError("features must be a floating-point NumPy array")
    if features.size == 0:
        raise DegenerateStatisticsError("Cannot normalize an empty feature matrix")
    mean = float(np.mean(features))
    std = float(np.std(features))
    if not np.isfinite(mean) or not np.isfinite(std):
        raise DegenerateStatisticsError("Feature statistics are not finite")
    if std == 0.0 or std <= 4 * np.finfo(np.float64).eps * abs(mean):
        raise DegenerateStatisticsError(
            f"Feature matrix has zero variance (constant value {mean!r})"
        )
    features -= mean
    features /= std
    return mean, std
