"""Online point estimators for discrete-event simulation output."""

from .base import DEFAULT_CONFIDENCE_LEVEL, Estimator, ExactPointStatistic
from .categories import StatisticCategory
from .collection import EstimateSummary, StatisticsCollection, run_replications
from .config import (
    CollectionConfig,
    EstimatorConfig,
    build_collection,
    build_estimator,
    load_config,
    parse_config,
)
from .max import MaxEstimator
from .min import MinEstimator

__all__ = [
    "DEFAULT_CONFIDENCE_LEVEL",
    "Estimator",
    "ExactPointStatistic",
    "StatisticCategory",
    "MinEstimator",
    "MaxEstimator",
    "EstimateSummary",
    "StatisticsCollection",
    "run_replications",
    "CollectionConfig",
    "EstimatorConfig",
    "load_config",
    "parse_config",
    "build_estimator",
    "build_collection",
]
