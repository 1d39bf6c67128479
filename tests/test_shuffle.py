"""Tests for the shuffle module."""

import pytest

from team_shuffler.shuffle import NoShuffle, RandomShuffle, get_strategy


class TestShuffleStrategies:
    """Test cases for shuffle strategies."""

    def test_no_shuffle_does_nothing(self):
        """NoShuffle leaves the list as it was."""
        items = [0, 1, 2, 3, 4]

        NoShuffle().shuffle(items)

        assert items == [0, 1, 2, 3, 4]

    def test_random_shuffle_keeps_elements(self):
        """RandomShuffle only reorders."""
        items = list(range(50))

        RandomShuffle().shuffle(items)

        assert sorted(items) == list(range(50))

    def test_random_shuffle_shuffles_list(self):
        """Repeated shuffles are not all identical."""
        orderings = set()
        for _ in range(10):
            items = list(range(10))
            RandomShuffle().shuffle(items)
            orderings.add(tuple(items))

        assert len(orderings) > 1

    def test_seeded_shuffle_is_reproducible(self):
        """The same seed gives the same ordering."""
        first = list(range(20))
        second = list(range(20))

        RandomShuffle(seed=42).shuffle(first)
        RandomShuffle(seed=42).shuffle(second)

        assert first == second

    def test_get_strategy(self):
        """Strategies are looked up by name."""
        assert isinstance(get_strategy('none'), NoShuffle)
        strategy = get_strategy('random', seed=7)
        assert isinstance(strategy, RandomShuffle)
        assert strategy.seed == 7

    def test_unknown_strategy(self):
        """Unknown names are rejected."""
        with pytest.raises(ValueError, match="Unknown shuffle strategy"):
            get_strategy('sorted')
