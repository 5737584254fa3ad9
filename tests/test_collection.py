# tests/test_collection.py

import random

import pytest

from estimators.categories import StatisticCategory
from estimators.collection import EstimateSummary, StatisticsCollection, run_replications
from estimators.max import MaxEstimator
from estimators.min import MinEstimator


def make_collection() -> StatisticsCollection:
    collection = StatisticsCollection()
    collection.register("wait_min", MinEstimator())
    collection.register("wait_max", MaxEstimator())
    collection.register("service_min", MinEstimator(confidence_level=0.9))
    return collection


def test_registration_and_lookup():
    collection = make_collection()

    assert len(collection) == 3
    assert "wait_min" in collection
    assert collection.get("wait_max").name() == "Max"
    assert [metric for metric, _ in collection] == ["wait_min", "wait_max", "service_min"]


def test_duplicate_metric_raises():
    collection = make_collection()
    with pytest.raises(ValueError):
        collection.register("wait_min", MinEstimator())


def test_unknown_metric_raises_key_error():
    collection = make_collection()
    with pytest.raises(KeyError):
        collection.get("missing")
    with pytest.raises(KeyError):
        collection.collect("missing", 1.0)


def test_collect_routes_to_named_estimator():
    collection = make_collection()
    for value in [5.0, 3.0, 9.0]:
        collection.collect("wait_min", value)
        collection.collect("wait_max", value)

    assert collection.get("wait_min").estimate() == 3.0
    assert collection.get("wait_max").estimate() == 9.0
    assert collection.get("service_min").num_observations() == 0


def test_by_category_preserves_registration_order():
    collection = make_collection()
    mins = collection.by_category(StatisticCategory.MIN)

    assert mins == [collection.get("wait_min"), collection.get("service_min")]
    assert collection.by_category(StatisticCategory.MEAN) == []


def test_snapshot_hides_sentinel_for_empty_metrics():
    collection = make_collection()
    collection.collect("wait_min", 2.5, weight=4.0)

    summaries = {s.metric: s for s in collection.snapshot()}

    assert summaries["wait_min"] == EstimateSummary(
        metric="wait_min",
        name="Min",
        category=StatisticCategory.MIN,
        estimate=2.5,
        half_width=0.0,
        variance=0.0,
        relative_precision=0.0,
        num_observations=1,
        confidence_level=0.95,
    )
    assert summaries["service_min"].estimate is None
    assert summaries["service_min"].num_observations == 0
    assert summaries["service_min"].confidence_level == 0.9


def test_reset_clears_every_estimator():
    collection = make_collection()
    collection.collect("wait_min", 1.0)
    collection.collect("wait_max", 1.0)
    collection.reset()

    assert all(est.num_observations() == 0 for _, est in collection)


def draw_waits(collection: StatisticsCollection, rng: random.Random) -> None:
    for _ in range(30):
        wait = rng.expovariate(1.0)
        collection.collect("wait_min", wait)
        collection.collect("wait_max", wait)


def test_replications_are_independent_and_reproducible():
    collection = make_collection()
    snapshots = run_replications(collection, draw_waits, n_replications=4, seed=100)

    assert len(snapshots) == 4
    for snapshot in snapshots:
        by_metric = {s.metric: s for s in snapshot}
        # Counts do not accumulate across replications.
        assert by_metric["wait_min"].num_observations == 30
        assert by_metric["wait_min"].estimate <= by_metric["wait_max"].estimate

    # Replication k depends only on seed + k.
    rerun = run_replications(make_collection(), draw_waits, n_replications=2, seed=102)
    assert rerun == snapshots[2:]


def test_replication_matches_direct_minimum():
    collection = StatisticsCollection()
    collection.register("x", MinEstimator())

    def replicate(col, rng):
        for _ in range(10):
            col.collect("x", rng.uniform(0.0, 1.0))

    (snapshot,) = run_replications(collection, replicate, n_replications=1, seed=9)

    rng = random.Random(9)
    expected = min(rng.uniform(0.0, 1.0) for _ in range(10))
    assert snapshot[0].estimate == pytest.approx(expected)


def test_run_replications_rejects_negative_count():
    with pytest.raises(ValueError):
        run_replications(make_collection(), draw_waits, n_replications=-1)


def test_zero_replications_returns_empty():
    assert run_replications(make_collection(), draw_waits, n_replications=0) == []
