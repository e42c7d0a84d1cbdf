"""Tests for the random sampler."""

import numpy as np
import pytest

from takecmd.core.errors import EmptyPool, InsufficientPool, InvalidRange
from takecmd.core.sampler import Sampler


class TestUniformInt:
    """Test uniform_int."""

    def test_within_bounds(self, sampler):
        """Values stay inside the inclusive range."""
        values = [sampler.uniform_int(5, 45) for _ in range(2000)]
        assert min(values) >= 5
        assert max(values) <= 45

    def test_both_endpoints_reachable(self, sampler):
        """Inclusive range produces both min and max."""
        values = {sampler.uniform_int(0, 3) for _ in range(500)}
        assert values == {0, 1, 2, 3}

    def test_degenerate_range(self, sampler):
        """min == max always returns that value."""
        assert all(sampler.uniform_int(7, 7) == 7 for _ in range(20))

    def test_returns_python_int(self, sampler):
        """Values are plain ints, not numpy scalars."""
        assert type(sampler.uniform_int(0, 10)) is int

    def test_rejects_inverted_range(self, sampler):
        """min > max raises InvalidRange."""
        with pytest.raises(InvalidRange):
            sampler.uniform_int(10, 1)


class TestUniformFloat:
    """Test uniform_float."""

    def test_within_bounds_and_precision(self, sampler):
        """Values lie in range with at most the requested decimals."""
        for _ in range(2000):
            value = sampler.uniform_float(0.1, 5.0, 2)
            assert 0.1 <= value <= 5.0
            assert round(value, 2) == value

    def test_one_decimal(self, sampler):
        """One-decimal precision is honoured."""
        for _ in range(500):
            value = sampler.uniform_float(8.0, 40.0, 1)
            assert 8.0 <= value <= 40.0
            assert round(value, 1) == value

    def test_bounds_finer_than_precision(self, sampler):
        """Bounds with extra decimals never round outside the interval."""
        for _ in range(500):
            value = sampler.uniform_float(0.105, 0.139, 2)
            assert 0.105 <= value <= 0.139

    def test_no_representable_value(self, sampler):
        """Interval with no value at that precision raises InvalidRange."""
        with pytest.raises(InvalidRange):
            sampler.uniform_float(0.101, 0.109, 2)

    def test_rejects_inverted_range(self, sampler):
        """min > max raises InvalidRange."""
        with pytest.raises(InvalidRange):
            sampler.uniform_float(5.0, 0.1, 2)


class TestWeightedBool:
    """Test weighted_bool."""

    def test_thirty_percent_rate(self, sampler):
        """Observed rate over 100k draws is within 2 points of 30%."""
        n = 100_000
        hits = sum(sampler.weighted_bool(30) for _ in range(n))
        assert abs(hits / n - 0.30) < 0.02

    def test_ten_percent_rate(self, sampler):
        """Observed rate over 100k draws is within 2 points of 10%."""
        n = 100_000
        hits = sum(sampler.weighted_bool(10) for _ in range(n))
        assert abs(hits / n - 0.10) < 0.02

    def test_extremes(self, sampler):
        """0% is never true and 100% is always true."""
        assert not any(sampler.weighted_bool(0) for _ in range(1000))
        assert all(sampler.weighted_bool(100) for _ in range(1000))

    def test_coin_flip_is_fair(self, sampler):
        """Unweighted boolean is close to 50%."""
        n = 20_000
        hits = sum(sampler.coin_flip() for _ in range(n))
        assert abs(hits / n - 0.5) < 0.02

    @pytest.mark.parametrize("percent", [-1, 100.5])
    def test_rejects_out_of_range(self, sampler, percent):
        """Percentages outside [0, 100] raise InvalidRange."""
        with pytest.raises(InvalidRange):
            sampler.weighted_bool(percent)


class TestPickOne:
    """Test pick_one."""

    def test_picks_member(self, sampler):
        """Pick returns an element of the pool."""
        pool = ["tsunami", "flood", "tornado"]
        assert all(sampler.pick_one(pool) in pool for _ in range(100))

    def test_all_members_reachable(self, sampler):
        """Every element is eventually picked."""
        pool = ("a", "b", "c", "d")
        assert {sampler.pick_one(pool) for _ in range(400)} == set(pool)

    def test_empty_pool(self, sampler):
        """Empty pool raises EmptyPool."""
        with pytest.raises(EmptyPool):
            sampler.pick_one([])


class TestPickSet:
    """Test pick_set."""

    def test_distinct_members(self, sampler):
        """Picked elements are distinct members of the pool."""
        pool = [f"item{i}" for i in range(20)]
        for _ in range(200):
            picked = sampler.pick_set(pool, 8)
            assert len(picked) == 8
            assert len(set(picked)) == 8
            assert set(picked) <= set(pool)

    def test_whole_pool(self, sampler):
        """Count equal to pool size returns a permutation."""
        pool = ["a", "b", "c"]
        assert sorted(sampler.pick_set(pool, 3)) == pool

    def test_zero_count(self, sampler):
        """Count of zero returns nothing."""
        assert sampler.pick_set(["a", "b"], 0) == []

    def test_insufficient_pool(self, sampler):
        """Count above pool size raises InsufficientPool."""
        with pytest.raises(InsufficientPool):
            sampler.pick_set(["a", "b"], 3)

    def test_negative_count(self, sampler):
        """Negative count raises InvalidRange."""
        with pytest.raises(InvalidRange):
            sampler.pick_set(["a", "b"], -1)


class TestReproducibility:
    """Test seeded determinism."""

    def test_same_seed_same_draws(self):
        """Two samplers with the same seed agree."""
        a = Sampler.from_seed(123)
        b = Sampler.from_seed(123)
        pool = list(range(50))

        assert [a.uniform_int(0, 1000) for _ in range(10)] == [b.uniform_int(0, 1000) for _ in range(10)]
        assert a.pick_set(pool, 10) == b.pick_set(pool, 10)

    def test_wraps_given_generator(self):
        """Sampler uses the injected generator."""
        rng = np.random.default_rng(7)
        sampler = Sampler(rng)
        assert sampler.rng is rng
