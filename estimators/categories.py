# estimators/categories.py

from __future__ import annotations

from enum import Enum, auto


class StatisticCategory(Enum):
    """Kinds of statistic an estimator can produce.

    Used as reporting and dispatch metadata by the collection layer. An
    estimator never branches on its own category.
    """

    MIN = auto()
    MAX = auto()
    MEAN = auto()
    VARIANCE = auto()
    QUANTILE = auto()

    @classmethod
    def parse(cls, label: str) -> StatisticCategory:
        """Return the category named by ``label`` (case-insensitive)."""

        try:
            return cls[label.strip().upper()]
        except KeyError:
            raise ValueError(f"Unknown statistic category '{label}'.") from None
