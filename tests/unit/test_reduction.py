"""
Tests for Reduction

Checks:
1. reduce seeds with a stored value; empty returns zero
2. fold starts from the seed; empty returns the seed unchanged
3. sum == reduce(+), sum({}) == 0
4. max / min and their *_by variants, including empty containers
"""

from decimal import Decimal

import pytest

from mapops.ops.reduction import (
    fold,
    max,
    max_by,
    min,
    min_by,
    reduce,
    sum,
    sum_by,
)


@pytest.fixture
def scores() -> dict[str, int]:
    return {"a": 1, "b": 0, "c": 3}


# =============================================================================
# REDUCE / FOLD
# =============================================================================


class TestReduce:
    """Tests for reduce"""

    def test_order_independent_combiner(self, scores: dict[str, int]) -> None:
        assert reduce(scores, lambda acc, k, v: acc + v) == 4

    def test_empty_returns_zero(self) -> None:
        assert reduce({}, lambda acc, k, v: acc + v) is None
        assert reduce({}, lambda acc, k, v: acc + v, zero=0) == 0

    def test_single_entry_skips_combiner(self) -> None:
        """The only value is the seed; f is never called"""

        def combiner(acc: int, k: str, v: int) -> int:
            raise AssertionError("combiner should not be called")

        assert reduce({"x": 5}, combiner) == 5

    def test_combiner_called_len_minus_one_times(self, scores: dict[str, int]) -> None:
        calls = []

        def combiner(acc: int, k: str, v: int) -> int:
            calls.append(k)
            return acc + v

        reduce(scores, combiner)
        assert len(calls) == len(scores) - 1

    def test_combiner_error_propagates(self, scores: dict[str, int]) -> None:
        def combiner(acc: int, k: str, v: int) -> int:
            raise KeyError(k)

        with pytest.raises(KeyError):
            reduce(scores, combiner)


class TestFold:
    """Tests for fold"""

    def test_fold_with_seed(self, scores: dict[str, int]) -> None:
        assert fold(scores, 100, lambda acc, k, v: acc + v) == 104

    def test_fold_changes_type(self) -> None:
        """Accumulator type may differ from the value type"""
        c = {"a": "x", "b": "yy", "c": "zzz"}
        assert fold(c, 0, lambda acc, k, v: acc + len(v)) == 6

    def test_fold_over_keys(self, scores: dict[str, int]) -> None:
        assert fold(scores, frozenset(), lambda acc, k, v: acc | {k}) == {"a", "b", "c"}

    def test_empty_returns_seed(self) -> None:
        seed = object()
        assert fold({}, seed, lambda acc, k, v: acc) is seed


# =============================================================================
# SUM
# =============================================================================


class TestSum:
    """Tests for sum and sum_by"""

    def test_scenario(self, scores: dict[str, int]) -> None:
        assert sum(scores) == 4

    def test_matches_reduce(self) -> None:
        c = {f"k{i}": i * 1.5 for i in range(10)}
        assert sum(c) == pytest.approx(reduce(c, lambda acc, k, v: acc + v))

    def test_empty_is_zero(self) -> None:
        assert sum({}) == 0

    def test_empty_with_custom_zero(self) -> None:
        assert sum({}, zero=Decimal("0")) == Decimal("0")

    def test_complex_values(self) -> None:
        assert sum({"a": 1 + 2j, "b": 3 - 1j}) == 4 + 1j

    def test_sum_by(self) -> None:
        c = {"a": "x", "b": "yy"}
        assert sum_by(c, lambda k, v: len(v)) == 3

    def test_sum_by_empty(self) -> None:
        assert sum_by({}, lambda k, v: v) == 0

    def test_sum_by_float_zero(self) -> None:
        assert sum_by({"a": 1}, lambda k, v: v / 2, zero=0.0) == pytest.approx(0.5)


# =============================================================================
# MAX / MIN
# =============================================================================


class TestMaxMin:
    """Tests for max, min, max_by and min_by"""

    def test_max_scenario(self, scores: dict[str, int]) -> None:
        assert max(scores) == 3

    def test_min(self, scores: dict[str, int]) -> None:
        assert min(scores) == 0

    def test_negative_values(self) -> None:
        c = {"a": -5, "b": -2, "c": -9}
        assert max(c) == -2
        assert min(c) == -9

    def test_strings(self) -> None:
        c = {1: "pear", 2: "apple", 3: "zucchini"}
        assert max(c) == "zucchini"
        assert min(c) == "apple"

    def test_empty_returns_zero(self) -> None:
        assert max({}) is None
        assert min({}) is None
        assert max({}, zero=0) == 0

    def test_max_by(self) -> None:
        c = {"a": "x", "b": "yyy", "c": "zz"}
        assert max_by(c, lambda k, v: len(v)) == 3

    def test_min_by(self) -> None:
        c = {"a": "x", "b": "yyy", "c": "zz"}
        assert min_by(c, lambda k, v: len(v)) == 1

    def test_by_variants_seed_with_first_projection(self) -> None:
        """All-negative projections still yield a projection, not zero"""
        c = {"a": 1, "b": 2}
        assert max_by(c, lambda k, v: -v, zero=0) == -1
        assert min_by({"a": -1}, lambda k, v: -v, zero=0) == 1

    def test_by_variants_use_key(self) -> None:
        c = {"short": 0, "longest": 0, "mid": 0}
        assert max_by(c, lambda k, v: len(k)) == 7

    def test_by_variants_empty(self) -> None:
        assert max_by({}, lambda k, v: v) is None
        assert min_by({}, lambda k, v: v, zero=0) == 0
