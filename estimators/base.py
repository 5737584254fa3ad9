"""Estimator contract shared by every statistic kind.

A simulation's result-collection layer holds estimators of different kinds
(min, max, mean, ...) side by side. It only ever talks to them through
:class:`Estimator`, so it can feed, query and reset them without knowing what
they compute.

Estimators that have no probabilistic interval around their estimate (the
exact point statistics such as min and max) report ``0.0`` for the half-width,
variance and relative precision. Kinds with a genuine confidence interval
override those with their own math.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Iterable, Optional, Sequence

from estimators.categories import StatisticCategory

DEFAULT_CONFIDENCE_LEVEL = 0.95


class Estimator(ABC):
    """
    Online estimator fed one observation at a time.

    ``estimate()`` is always defined, but with no observations its value is
    meaningless; check ``num_observations()`` first.
    """

    @abstractmethod
    def collect(self, value: Any, weight: float = 1.0) -> None:
        """
        Ingest one observation.
        Kinds that are unweighted accept ``weight`` and ignore it.
        """
        raise NotImplementedError

    @abstractmethod
    def category(self) -> StatisticCategory:
        raise NotImplementedError

    @abstractmethod
    def confidence_level(self) -> float:
        """Confidence level the estimator was built with."""
        raise NotImplementedError

    @abstractmethod
    def estimate(self) -> Any:
        """Current point estimate."""
        raise NotImplementedError

    @abstractmethod
    def half_width(self) -> float:
        """Half-width of the confidence interval around ``estimate()``."""
        raise NotImplementedError

    @abstractmethod
    def variance(self) -> float:
        raise NotImplementedError

    @abstractmethod
    def relative_precision(self) -> float:
        """Half-width divided by the estimate."""
        raise NotImplementedError

    @abstractmethod
    def num_observations(self) -> int:
        """Number of ``collect`` calls since construction or the last reset."""
        raise NotImplementedError

    @abstractmethod
    def reset(self) -> None:
        """
        Return to the construction-time state.
        The confidence level is kept.
        """
        raise NotImplementedError

    @abstractmethod
    def name(self) -> str:
        """Stable human readable name of the estimator kind."""
        raise NotImplementedError

    def collect_many(
        self, values: Iterable[Any], weights: Optional[Sequence[float]] = None
    ) -> None:
        """Collect a batch of observations, in order.

        Equivalent to calling ``collect`` once per value. ``weights``, when
        given, must have one entry per value.

        Raises
        ------
        ValueError
            If ``weights`` and ``values`` differ in length.
        """

        values = list(values)
        if weights is None:
            weights = [1.0] * len(values)
        elif len(weights) != len(values):
            raise ValueError(
                f"Got {len(weights)} weights for {len(values)} values."
            )
        for value, weight in zip(values, weights):
            self.collect(value, weight)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(n={self.num_observations()}, "
            f"estimate={self.estimate()!r})"
        )


class ExactPointStatistic:
    """
    Interval metadata for estimators without a sampling distribution.

    An exact point statistic has no spread to report, so the half-width,
    variance and relative precision are all zero.
    """

    def half_width(self) -> float:
        return 0.0

    def variance(self) -> float:
        return 0.0

    def relative_precision(self) -> float:
        return 0.0
