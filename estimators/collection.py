"""Named collection of estimators for one simulation model.

The collection is the consumer of the :class:`~estimators.base.Estimator`
contract: event-handling code pushes observations into it by metric name, and
replication-management code resets it between independent replications and
takes a snapshot of every estimate at the end of each one.
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import Any, Callable, Iterator, List, MutableMapping, Optional, Tuple

from estimators.base import Estimator
from estimators.categories import StatisticCategory

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EstimateSummary:
    """Point-in-time view of one metric's estimator.

    ``estimate`` is ``None`` when the estimator has seen no observations, so
    the sentinel an empty estimator holds never leaks into results.
    """

    metric: str
    name: str
    category: StatisticCategory
    estimate: Optional[Any]
    half_width: float
    variance: float
    relative_precision: float
    num_observations: int
    confidence_level: float

    @classmethod
    def of(cls, metric: str, estimator: Estimator) -> EstimateSummary:
        n = estimator.num_observations()
        return cls(
            metric=metric,
            name=estimator.name(),
            category=estimator.category(),
            estimate=estimator.estimate() if n > 0 else None,
            half_width=estimator.half_width(),
            variance=estimator.variance(),
            relative_precision=estimator.relative_precision(),
            num_observations=n,
            confidence_level=estimator.confidence_level(),
        )


class StatisticsCollection:
    """Estimators keyed by the metric they measure.

    Metrics keep their registration order for iteration and snapshots. Not
    thread-safe: feed it from the thread running the replication.
    """

    def __init__(self) -> None:
        self._estimators: MutableMapping[str, Estimator] = {}

    def register(self, metric: str, estimator: Estimator) -> None:
        """Attach ``estimator`` to ``metric``."""

        if metric in self._estimators:
            raise ValueError(f"Metric '{metric}' already registered.")
        self._estimators[metric] = estimator
        logger.debug("registered metric=%s estimator=%s", metric, estimator.name())

    def get(self, metric: str) -> Estimator:
        """Return the estimator for ``metric``, raising ``KeyError`` if missing."""

        return self._estimators[metric]

    def collect(self, metric: str, value: Any, weight: float = 1.0) -> None:
        self._estimators[metric].collect(value, weight)

    def by_category(self, category: StatisticCategory) -> List[Estimator]:
        """Return all estimators of the given kind."""

        return [
            estimator
            for estimator in self._estimators.values()
            if estimator.category() is category
        ]

    def reset(self) -> None:
        for estimator in self._estimators.values():
            estimator.reset()
        logger.debug("reset %d estimators", len(self._estimators))

    def snapshot(self) -> List[EstimateSummary]:
        return [
            EstimateSummary.of(metric, estimator)
            for metric, estimator in self._estimators.items()
        ]

    def __iter__(self) -> Iterator[Tuple[str, Estimator]]:
        return iter(self._estimators.items())

    def __len__(self) -> int:
        return len(self._estimators)

    def __contains__(self, metric: object) -> bool:
        return metric in self._estimators


def run_replications(
    collection: StatisticsCollection,
    replicate: Callable[[StatisticsCollection, random.Random], None],
    n_replications: int,
    seed: int = 0,
) -> List[List[EstimateSummary]]:
    """
    Run independent replications over one collection.

    Before replication k the collection is reset and ``replicate`` receives a
    fresh ``random.Random(seed + k)``, so each replication's results depend
    only on its own index, not on what ran before it.

    Returns one snapshot per replication, in order.
    """
    if n_replications < 0:
        raise ValueError("n_replications must be non-negative")

    snapshots: List[List[EstimateSummary]] = []
    for k in range(n_replications):
        collection.reset()
        replicate(collection, random.Random(seed + k))
        snapshots.append(collection.snapshot())
        logger.info("completed replication=%d/%d", k + 1, n_replications)
    return snapshots
