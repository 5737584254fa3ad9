# estimators/min.py

from __future__ import annotations

import math
from typing import Any, Iterable, Optional, Sequence

import numpy as np

from estimators.base import (
    DEFAULT_CONFIDENCE_LEVEL,
    Estimator,
    ExactPointStatistic,
)
from estimators.categories import StatisticCategory


class MinEstimator(ExactPointStatistic, Estimator):
    """
    Running minimum of an observation stream.

    Each observation costs O(1): the count is bumped and the stored minimum
    is replaced when the new value is strictly smaller. Weights are accepted
    for interface conformance and ignored, since the minimum is unweighted.

    The sample minimum has no generally applicable sampling distribution, so
    the estimator reports itself as an exact point statistic: half-width,
    variance and relative precision are all zero.

    Before the first observation ``estimate()`` returns ``math.inf``, which
    compares greater than any real value of any Python numeric type. NaN
    observations are counted but never become the minimum.

    Example:
        est = MinEstimator()
        est.collect_many([5.0, 3.0, 9.0, 1.0, 7.0])
        est.estimate()          # 1.0
        est.num_observations()  # 5
    """

    def __init__(self, confidence_level: float = DEFAULT_CONFIDENCE_LEVEL):
        self._confidence_level = confidence_level
        self._count = 0
        self._minimum: Any = math.inf

    def collect(self, value: Any, weight: float = 1.0) -> None:
        self._count += 1
        if value < self._minimum:
            self._minimum = value

    def collect_many(
        self, values: Iterable[Any], weights: Optional[Sequence[float]] = None
    ) -> None:
        # Only numeric 1-D arrays are reduced with numpy; anything else (lists
        # mixing int and float, Fraction, Decimal, ...) keeps exact scalar
        # comparisons.
        if not isinstance(values, np.ndarray) or values.dtype.kind not in "biuf":
            super().collect_many(values, weights)
            return
        if values.ndim != 1:
            raise ValueError(
                f"Expected a 1-D array of observations, got {values.ndim}-D."
            )
        if weights is not None and len(weights) != values.size:
            raise ValueError(
                f"Got {len(weights)} weights for {values.size} values."
            )

        self._count += int(values.size)
        observations = values
        if observations.dtype.kind == "f":
            observations = observations[~np.isnan(observations)]
        if observations.size == 0:
            return
        lowest = observations.min()
        if lowest < self._minimum:
            self._minimum = lowest.item()

    def category(self) -> StatisticCategory:
        return StatisticCategory.MIN

    def confidence_level(self) -> float:
        return self._confidence_level

    def estimate(self) -> Any:
        return self._minimum

    def num_observations(self) -> int:
        return self._count

    def reset(self) -> None:
        self._minimum = math.inf
        self._count = 0

    def name(self) -> str:
        return "Min"
