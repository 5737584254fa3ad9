# estimators/max.py

from __future__ import annotations

import math
from typing import Any

from estimators.base import (
    DEFAULT_CONFIDENCE_LEVEL,
    Estimator,
    ExactPointStatistic,
)
from estimators.categories import StatisticCategory


class MaxEstimator(ExactPointStatistic, Estimator):
    """
    Running maximum of an observation stream.

    Mirror of :class:`~estimators.min.MinEstimator`: starts at ``-math.inf``,
    replaces the stored value on a strictly larger observation and ignores
    weights.
    """

    def __init__(self, confidence_level: float = DEFAULT_CONFIDENCE_LEVEL):
        self._confidence_level = confidence_level
        self._count = 0
        self._maximum: Any = -math.inf

    def collect(self, value: Any, weight: float = 1.0) -> None:
        self._count += 1
        if value > self._maximum:
            self._maximum = value

    def category(self) -> StatisticCategory:
        return StatisticCategory.MAX

    def confidence_level(self) -> float:
        return self._confidence_level

    def estimate(self) -> Any:
        return self._maximum

    def num_observations(self) -> int:
        return self._count

    def reset(self) -> None:
        self._maximum = -math.inf
        self._count = 0

    def name(self) -> str:
        return "Max"
