"""
End-to-end scenarios through the package root

Checks:
1. The public API is importable from mapops
2. Operations compose (filter → map → reduce)
3. Cross-operation properties hold on a larger container
"""

import random

import pytest

import mapops


@pytest.fixture
def scores() -> dict[str, int]:
    return {"a": 1, "b": 0, "c": 3}


class TestPublicApi:
    """Tests for the exported surface"""

    def test_all_names_exported(self) -> None:
        for name in mapops.__all__:
            assert hasattr(mapops, name), name

    def test_scenario_scores(self, scores: dict[str, int]) -> None:
        assert mapops.clean(scores) == {"a": 1, "c": 3}
        assert mapops.sum(scores) == 4
        assert mapops.max(scores) == 3
        assert mapops.filter_by(scores, lambda k, v: v > 0) == {"a": 1, "c": 3}

    def test_scenario_from_entries(self) -> None:
        assert mapops.from_entries([("x", 1), ("y", 2), ("x", 5)]) == {"x": 5, "y": 2}

    def test_scenario_fill_zero(self) -> None:
        c = {"a": 1, "b": 2}
        ref = c
        mapops.fill_zero(c)
        assert c == {"a": 0, "b": 0}
        assert c is ref


class TestComposition:
    """Chained operations"""

    def test_filter_map_reduce(self, scores: dict[str, int]) -> None:
        positive = mapops.filter_by(scores, lambda k, v: v > 0)
        squared = mapops.map(positive, lambda k, v: v * v)
        assert mapops.reduce(squared, lambda acc, k, v: acc + v) == 10

    def test_collect_equals_filter_then_map(self, scores: dict[str, int]) -> None:
        collected = mapops.collect(scores, lambda k, v: (v + 1, v != 0))
        chained = mapops.map(mapops.filter_not(scores, 0), lambda k, v: v + 1)
        assert collected == chained


class TestProperties:
    """Properties over a randomly generated container"""

    @pytest.fixture
    def big(self) -> dict[int, int]:
        rng = random.Random(99)
        return {i: rng.randint(-5, 5) for i in range(200)}

    def test_clean_keeps_only_non_zero(self, big: dict[int, int]) -> None:
        cleaned = mapops.clean(big)
        assert len(cleaned) <= len(big)
        assert cleaned == {k: v for k, v in big.items() if v != 0}

    def test_partition_covers_input(self, big: dict[int, int]) -> None:
        matches, rest = mapops.partition(big, 0)
        assert set(matches) | set(rest) == set(big)
        assert not set(matches) & set(rest)
        assert mapops.count(big, 0) == len(matches)

    def test_sum_equals_reduce(self, big: dict[int, int]) -> None:
        assert mapops.sum(big) == mapops.reduce(big, lambda acc, k, v: acc + v)

    def test_entries_round_trip(self, big: dict[int, int]) -> None:
        assert mapops.from_entries(mapops.entries(big)) == big

    def test_fill_then_get(self, big: dict[int, int]) -> None:
        key_set = set(mapops.keys(big))
        mapops.fill(big, 42)
        assert set(mapops.keys(big)) == key_set
        assert all(mapops.get(big, k) == (42, True) for k in key_set)
