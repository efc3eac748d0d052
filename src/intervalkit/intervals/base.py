import copy
import logging
from typing import Any, ClassVar, Generic, TypeVar

from intervalkit.core.algorithms import is_in_interval, set_values
from intervalkit.core.bounds import (
    Bound,
    Unbounded,
    apply_bounds,
    lower_bound,
    upper_bound,
)
from intervalkit.core.contract import BoundComparator
from intervalkit.core.moves import BoundMove, RangeViolationError, Side
from intervalkit.core.render import render_interval

T = TypeVar("T")

logger = logging.getLogger(__name__)


class SimpleInterval(Generic[T]):
    """Interval state shared by every kind.

    Holds the endpoints and the explicit open flags. Comparisons against the
    endpoints go through the comparator installed by the concrete kind.
    """

    supports_unbounded: ClassVar[bool] = True

    def __init__(
        self,
        comparator: BoundComparator[T],
        value_a: T,
        value_b: T,
        left_open: bool = False,
        right_open: bool = False,
    ) -> None:
        self._comparator = comparator
        self._minimum = value_a
        self._maximum = value_a
        self._left_open = False
        self._right_open = False
        set_values(self, value_a, value_b, left_open, right_open)

    @property
    def left_bounded(self) -> bool:
        return self._comparator.is_bounded(self._minimum)

    @property
    def right_bounded(self) -> bool:
        return self._comparator.is_bounded(self._maximum)

    @property
    def left_open(self) -> bool:
        return self._left_open or not self.left_bounded

    @left_open.setter
    def left_open(self, value: bool) -> None:
        self._left_open = bool(value)

    @property
    def right_open(self) -> bool:
        return self._right_open or not self.right_bounded

    @right_open.setter
    def right_open(self, value: bool) -> None:
        self._right_open = bool(value)

    @property
    def minimum(self) -> T:
        return self._minimum

    @minimum.setter
    def minimum(self, value: T) -> None:
        self._try_move_bound(Side.MIN, value).raise_for_violation()

    @property
    def maximum(self) -> T:
        return self._maximum

    @maximum.setter
    def maximum(self, value: T) -> None:
        self._try_move_bound(Side.MAX, value).raise_for_violation()

    def try_set_min(self, value: T) -> BoundMove:
        """Set the minimum unless it would pass the maximum."""
        return self._try_move_bound(Side.MIN, value)

    def try_set_max(self, value: T) -> BoundMove:
        """Set the maximum unless it would fall below the minimum."""
        return self._try_move_bound(Side.MAX, value)

    def _try_move_bound(self, side: Side, value: T) -> BoundMove:
        if self._comparator.is_bounded(value):
            if (
                side is Side.MIN
                and self.right_bounded
                and self.is_greater_than_max(value)
            ):
                return self._reject(side, value, self._maximum)
            if (
                side is Side.MAX
                and self.left_bounded
                and self.is_less_than_min(value)
            ):
                return self._reject(side, value, self._minimum)

        if side is Side.MIN:
            self._minimum = value
        else:
            self._maximum = value
        return BoundMove(side=side, value=value, accepted=True)

    def _reject(self, side: Side, value: T, bound: T) -> BoundMove:
        logger.debug(
            "rejected %s move to %r: %s is %r",
            side.value,
            value,
            side.opposite.value,
            bound,
        )
        return BoundMove(side=side, value=value, accepted=False, bound=bound)

    def collapse_to(self, value: T) -> None:
        self._minimum = value
        self._maximum = value

    def is_less_than_min(self, value: T) -> bool:
        return self._comparator.is_less_than_min(self._minimum, value)

    def is_greater_than_min(self, value: T) -> bool:
        return self._comparator.is_greater_than_min(self._minimum, value)

    def equals_min(self, value: T) -> bool:
        return self._comparator.equals_min(self._minimum, value)

    def is_less_than_max(self, value: T) -> bool:
        return self._comparator.is_less_than_max(self._maximum, value)

    def is_greater_than_max(self, value: T) -> bool:
        return self._comparator.is_greater_than_max(self._maximum, value)

    def equals_max(self, value: T) -> bool:
        return self._comparator.equals_max(self._maximum, value)

    def to_tuple(self) -> tuple[T, T]:
        return (self._minimum, self._maximum)

    def to_list(self) -> list[T]:
        return [self._minimum, self._maximum]

    def to_bounds(self) -> tuple[Bound, Bound]:
        return (lower_bound(self), upper_bound(self))

    def set_bounds(self, lower: Bound, upper: Bound) -> None:
        """Replace both endpoints from tagged bounds.

        Leaves the interval unchanged when ``lower`` lies above ``upper``.
        """
        if not self.supports_unbounded and (
            isinstance(lower, Unbounded) or isinstance(upper, Unbounded)
        ):
            raise ValueError(
                f"{type(self).__name__} has no unbounded endpoints"
            )
        state = (
            self._minimum,
            self._maximum,
            self._left_open,
            self._right_open,
        )
        try:
            apply_bounds(self, lower, upper)
        except RangeViolationError:
            (
                self._minimum,
                self._maximum,
                self._left_open,
                self._right_open,
            ) = state
            raise

    def copy(self) -> "SimpleInterval[T]":
        return copy.copy(self)

    def __contains__(self, value: Any) -> bool:
        return is_in_interval(self, value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SimpleInterval) or type(other) is not type(
            self
        ):
            return NotImplemented
        return (
            self._comparator == other._comparator
            and self.equals_min(other.minimum)
            and self.equals_max(other.maximum)
            and self.left_open == other.left_open
            and self.right_open == other.right_open
        )

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        return render_interval(self)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}({self._minimum!r}, {self._maximum!r}, "
            f"left_open={self.left_open}, right_open={self.right_open})"
        )
