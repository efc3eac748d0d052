import logging
import random
from collections.abc import Callable
from typing import Any

import pytest

from intervalkit.core.algorithms import (
    is_greater_than_or_equal_max,
    is_greater_than_or_equal_min,
    is_in_interval,
    is_less_than_or_equal_max,
    is_less_than_or_equal_min,
    load,
    set_greater_value,
    set_less_value,
    set_values,
)
from intervalkit.intervals.base import SimpleInterval
from intervalkit.intervals.kinds import (
    BoundedInterval,
    OptionalValueInterval,
    ReferenceInterval,
)

IntervalFactory = Callable[..., SimpleInterval[Any]]

_KINDS: list[IntervalFactory] = [
    ReferenceInterval,
    BoundedInterval,
    OptionalValueInterval,
]
_KIND_IDS = ["reference", "bounded", "optional"]

all_kinds = pytest.mark.parametrize("make", _KINDS, ids=_KIND_IDS)


class TestSetValues:
    @all_kinds
    @pytest.mark.parametrize(
        "a,b,expected",
        [
            (1, 5, (1, 5)),
            (5, 1, (1, 5)),
            (3, 3, (3, 3)),
            (-2, 7, (-2, 7)),
            (7, -2, (-2, 7)),
        ],
    )
    def test_orders_values(
        self, make: IntervalFactory, a: int, b: int, expected: tuple[int, int]
    ) -> None:
        interval = make(0, 0)
        set_values(interval, a, b)
        assert interval.to_tuple() == expected

    @all_kinds
    def test_argument_order_does_not_matter(
        self, make: IntervalFactory
    ) -> None:
        assert make(5, 1) == make(1, 5)

    @all_kinds
    def test_degenerate_point_is_closed(self, make: IntervalFactory) -> None:
        interval = make(3, 3)
        assert not interval.left_open
        assert not interval.right_open
        assert is_in_interval(interval, 3)
        assert not is_in_interval(interval, 4)

    @all_kinds
    def test_applies_open_flags(self, make: IntervalFactory) -> None:
        interval = make(0, 0)
        set_values(interval, 9, 2, left_open=True, right_open=False)
        assert interval.to_tuple() == (2, 9)
        assert interval.left_open
        assert not interval.right_open

    @all_kinds
    def test_replaces_existing_range(self, make: IntervalFactory) -> None:
        interval = make(100, 200)
        set_values(interval, 1, 5)
        assert interval.to_tuple() == (1, 5)

    def test_absent_first_value_is_lower_unbounded(self) -> None:
        interval = ReferenceInterval()
        set_values(interval, None, 5)
        assert interval.to_tuple() == (None, 5)
        assert not interval.left_bounded
        assert interval.right_bounded

    def test_absent_second_value_is_upper_unbounded(self) -> None:
        interval = ReferenceInterval()
        set_values(interval, 5, None)
        assert interval.to_tuple() == (5, None)
        assert interval.left_bounded
        assert not interval.right_bounded

    @pytest.mark.full
    @all_kinds
    def test_random_pairs_are_normalized(self, make: IntervalFactory) -> None:
        rng = random.Random(1234)
        for _ in range(2000):
            a = rng.randint(-1000, 1000)
            b = rng.randint(-1000, 1000)
            interval = make(0, 0)
            set_values(interval, a, b)
            assert interval.to_tuple() == (min(a, b), max(a, b))
            assert make(a, b) == make(b, a)


class TestMembership:
    @all_kinds
    def test_closed_contains_endpoints(self, make: IntervalFactory) -> None:
        interval = make(1, 5)
        assert is_in_interval(interval, 1)
        assert is_in_interval(interval, 5)
        assert is_in_interval(interval, 3)
        assert not is_in_interval(interval, 0)
        assert not is_in_interval(interval, 6)

    @all_kinds
    def test_open_excludes_endpoints(self, make: IntervalFactory) -> None:
        interval = make(1, 5, True, True)
        assert not is_in_interval(interval, 1)
        assert not is_in_interval(interval, 5)
        assert is_in_interval(interval, 2)
        assert is_in_interval(interval, 4)

    @all_kinds
    def test_half_open(self, make: IntervalFactory) -> None:
        interval = make(1, 5, False, True)
        assert is_in_interval(interval, 1)
        assert not is_in_interval(interval, 5)

    def test_contains_operator(self) -> None:
        interval = OptionalValueInterval(1, 5)
        assert 3 in interval
        assert 9 not in interval

    @pytest.mark.parametrize(
        "value", [-(10**12), -1, 0, 3.5, 10**12, float("inf")]
    )
    def test_fully_unbounded_accepts_everything(self, value: float) -> None:
        assert is_in_interval(ReferenceInterval(), value)
        assert is_in_interval(OptionalValueInterval(), value)

    def test_absent_value_is_not_a_member(self) -> None:
        assert None not in ReferenceInterval()
        assert None not in OptionalValueInterval(1, None)

    def test_lower_bounded_only(self) -> None:
        interval = ReferenceInterval(1, None)
        assert is_in_interval(interval, 1)
        assert is_in_interval(interval, 10**9)
        assert not is_in_interval(interval, 0)

    def test_upper_bounded_only(self) -> None:
        interval = OptionalValueInterval(None, 5, right_open=True)
        assert is_in_interval(interval, -(10**9))
        assert is_in_interval(interval, 4)
        assert not is_in_interval(interval, 5)

    def test_strings_use_natural_order(self) -> None:
        interval = ReferenceInterval("apple", "melon")
        assert "banana" in interval
        assert "zucchini" not in interval


class TestWidening:
    @all_kinds
    def test_greater_value_inside_keeps_max(
        self, make: IntervalFactory
    ) -> None:
        interval = make(1, 5)
        set_greater_value(interval, 3)
        assert interval.to_tuple() == (1, 5)

    @all_kinds
    def test_greater_value_raises_max(self, make: IntervalFactory) -> None:
        interval = make(1, 5)
        set_greater_value(interval, 8)
        assert interval.to_tuple() == (1, 8)
        set_greater_value(interval, 8)
        assert interval.to_tuple() == (1, 8)

    @all_kinds
    def test_greater_value_below_min_is_ignored(
        self, make: IntervalFactory
    ) -> None:
        interval = make(1, 5)
        set_greater_value(interval, -4)
        assert interval.to_tuple() == (1, 5)

    @all_kinds
    def test_less_value_lowers_min(self, make: IntervalFactory) -> None:
        interval = make(1, 5)
        set_less_value(interval, 3)
        assert interval.to_tuple() == (1, 5)
        set_less_value(interval, -2)
        assert interval.to_tuple() == (-2, 5)
        set_less_value(interval, -2)
        assert interval.to_tuple() == (-2, 5)

    @all_kinds
    def test_sets_open_flags(self, make: IntervalFactory) -> None:
        interval = make(1, 5)
        set_greater_value(interval, 3, right_open=True)
        set_less_value(interval, 0, left_open=True)
        assert interval.to_tuple() == (0, 5)
        assert interval.left_open
        assert interval.right_open

    @all_kinds
    def test_non_decreasing_sequence_never_narrows(
        self, make: IntervalFactory
    ) -> None:
        interval = make(0, 0)
        previous = interval.to_tuple()
        for value in [0, 2, 2, 5, 9, 9, 12]:
            set_greater_value(interval, value)
            current = interval.to_tuple()
            assert current[0] == previous[0]
            assert current[1] >= previous[1]
            previous = current
        assert interval.to_tuple() == (0, 12)

    def test_absent_value_unbounds_the_side(self) -> None:
        interval = ReferenceInterval(1, 5)
        set_greater_value(interval, None)
        assert interval.to_tuple() == (1, None)
        set_less_value(interval, None)
        assert interval.to_tuple() == (None, None)

    def test_unbounded_interval_stays_unbounded(self) -> None:
        interval = OptionalValueInterval()
        set_greater_value(interval, 8)
        set_less_value(interval, -8)
        assert interval.to_tuple() == (None, None)

    def test_empty_bounded_interval_grows_from_default(self) -> None:
        interval = BoundedInterval()
        set_greater_value(interval, 8)
        set_less_value(interval, -3)
        assert interval.to_tuple() == (-3, 8)

    @pytest.mark.slow
    @all_kinds
    def test_random_widening_covers_observations(
        self, make: IntervalFactory
    ) -> None:
        rng = random.Random(99)
        for _ in range(200):
            values = [rng.randint(-500, 500) for _ in range(25)]
            interval = make(values[0], values[0])
            for value in values[1:]:
                set_less_value(interval, value)
                set_greater_value(interval, value)
            assert interval.to_tuple() == (min(values), max(values))
            assert all(is_in_interval(interval, value) for value in values)

    def test_logs_widening(self, caplog: pytest.LogCaptureFixture) -> None:
        interval = OptionalValueInterval(1, 5)
        with caplog.at_level(
            logging.DEBUG, logger="intervalkit.core.algorithms"
        ):
            set_greater_value(interval, 8)
            set_greater_value(interval, 8)
        messages = [record.getMessage() for record in caplog.records]
        assert messages == ["widening maximum from 5 to 8"]


class TestCombinators:
    @all_kinds
    def test_min_combinators(self, make: IntervalFactory) -> None:
        interval = make(1, 5)
        assert is_less_than_or_equal_min(interval, 1)
        assert is_less_than_or_equal_min(interval, 0)
        assert not is_less_than_or_equal_min(interval, 2)
        assert is_greater_than_or_equal_min(interval, 1)
        assert is_greater_than_or_equal_min(interval, 2)
        assert not is_greater_than_or_equal_min(interval, 0)

    @all_kinds
    def test_max_combinators(self, make: IntervalFactory) -> None:
        interval = make(1, 5)
        assert is_less_than_or_equal_max(interval, 5)
        assert is_less_than_or_equal_max(interval, 4)
        assert not is_less_than_or_equal_max(interval, 6)
        assert is_greater_than_or_equal_max(interval, 5)
        assert is_greater_than_or_equal_max(interval, 6)
        assert not is_greater_than_or_equal_max(interval, 4)

    def test_absent_value_against_unbounded_sides(self) -> None:
        interval = ReferenceInterval()
        assert is_less_than_or_equal_min(interval, None)
        assert is_greater_than_or_equal_max(interval, None)
        assert not interval.is_less_than_min(None)
        assert not interval.is_greater_than_max(None)


class TestLoad:
    def test_copies_state(self) -> None:
        target = OptionalValueInterval(10, 20)
        load(target, OptionalValueInterval(2, 4, True, False))
        assert target.to_tuple() == (2, 4)
        assert target.left_open
        assert not target.right_open

    def test_copies_unbounded_sides(self) -> None:
        target = ReferenceInterval(1, 2)
        load(target, ReferenceInterval(None, 7))
        assert target.to_tuple() == (None, 7)
        assert str(target) == "(-∞, 7]"

    def test_none_source_is_ignored(self) -> None:
        target = BoundedInterval(1, 5)
        load(target, None)
        assert target.to_tuple() == (1, 5)
