"""
Configuration for building a statistics collection.

A collection config lists the metrics to track and the estimator kind for
each, e.g.

    confidence_level: 0.95
    metrics:
      - name: response_time_min
        kind: min
      - name: queue_length_max
        kind: max
        confidence_level: 0.9

``confidence_level`` at the top level is the default for every metric and may
be overridden per metric.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable, Dict, Mapping, Sequence

from estimators.base import DEFAULT_CONFIDENCE_LEVEL, Estimator
from estimators.categories import StatisticCategory
from estimators.collection import StatisticsCollection
from estimators.max import MaxEstimator
from estimators.min import MinEstimator

# Kinds whose math lives in this package. Mean, variance and quantile
# estimators are provided by other packages.
ESTIMATOR_FACTORIES: Dict[StatisticCategory, Callable[[float], Estimator]] = {
    StatisticCategory.MIN: MinEstimator,
    StatisticCategory.MAX: MaxEstimator,
}


def validate_confidence_level(level: float) -> None:
    if not 0.0 < level < 1.0:
        raise ValueError(f"Confidence level must lie in (0, 1), got {level}.")


@dataclass(frozen=True)
class EstimatorConfig:
    metric: str
    kind: StatisticCategory
    confidence_level: float = DEFAULT_CONFIDENCE_LEVEL

    def validate(self) -> None:
        """
        Raises
        ------
        ValueError
            If the metric name is empty, the kind has no estimator here, or
            the confidence level is out of range.
        """

        if not self.metric:
            raise ValueError("Estimator config requires a metric name.")
        if self.kind not in ESTIMATOR_FACTORIES:
            raise ValueError(f"No estimator available for kind {self.kind.name}.")
        validate_confidence_level(self.confidence_level)


@dataclass(frozen=True)
class CollectionConfig:
    confidence_level: float
    metrics: Sequence[EstimatorConfig]

    def validate(self) -> None:
        validate_confidence_level(self.confidence_level)
        seen = set()
        for metric in self.metrics:
            metric.validate()
            if metric.metric in seen:
                raise ValueError(f"Metric '{metric.metric}' configured twice.")
            seen.add(metric.metric)


def _parse_metric(entry: Any, default_level: float) -> EstimatorConfig:
    if not isinstance(entry, Mapping) or "name" not in entry or "kind" not in entry:
        raise ValueError("Metric entry requires 'name' and 'kind'.")
    return EstimatorConfig(
        metric=str(entry["name"]),
        kind=StatisticCategory.parse(str(entry["kind"])),
        confidence_level=float(entry.get("confidence_level", default_level)),
    )


def parse_config(data: Mapping[str, Any]) -> CollectionConfig:
    """
    Build a validated config from already-loaded YAML data.

    Raises
    ------
    ValueError
        If the data is not a mapping, ``metrics`` is not a list of
        ``name``/``kind`` entries, or any value fails validation.
    """

    if not isinstance(data, Mapping):
        raise ValueError("Statistics config must be a mapping at the top level.")
    entries = data.get("metrics") or []
    if not isinstance(entries, list):
        raise ValueError("Statistics config 'metrics' must be a list.")

    default_level = float(data.get("confidence_level", DEFAULT_CONFIDENCE_LEVEL))
    metrics = [_parse_metric(entry, default_level) for entry in entries]
    config = CollectionConfig(confidence_level=default_level, metrics=metrics)
    config.validate()
    return config


def load_config(path: Path) -> CollectionConfig:
    import yaml  # type: ignore

    data = yaml.safe_load(Path(path).read_text()) or {}
    return parse_config(data)


def build_estimator(
    kind: StatisticCategory, confidence_level: float = DEFAULT_CONFIDENCE_LEVEL
) -> Estimator:
    """Return a fresh estimator of the requested kind."""

    factory = ESTIMATOR_FACTORIES.get(kind)
    if factory is None:
        raise ValueError(f"No estimator available for kind {kind.name}.")
    return factory(confidence_level)


def build_collection(config: CollectionConfig) -> StatisticsCollection:
    collection = StatisticsCollection()
    for metric in config.metrics:
        collection.register(
            metric.metric, build_estimator(metric.kind, metric.confidence_level)
        )
    return collection
