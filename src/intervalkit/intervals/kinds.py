from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, ClassVar, Generic, TypeVar

from intervalkit.core.contract import natural_compare
from intervalkit.intervals.base import SimpleInterval

T = TypeVar("T")


@dataclass(frozen=True)
class AbsentAsInfinityComparator(Generic[T]):
    """Comparator where ``None`` means "no bound".

    A ``None`` candidate is negative infinity against the minimum and positive
    infinity against the maximum. Two ``None`` operands are equal, so a
    ``None`` candidate is never greater than an absent minimum and never a
    member of any interval, even a fully unbounded one.
    """

    key: Callable[[T], Any] | None = None

    def _compare(self, value: T, bound: T) -> int:
        if self.key is None:
            return natural_compare(value, bound)
        return natural_compare(self.key(value), self.key(bound))

    def _equals(self, bound: T | None, value: T | None) -> bool:
        if bound is None or value is None:
            return bound is None and value is None
        return self._compare(value, bound) == 0

    def is_bounded(self, value: T | None) -> bool:
        return value is not None

    def is_less_than_min(self, minimum: T | None, value: T | None) -> bool:
        if value is None:
            return minimum is not None
        if minimum is None:
            return False
        return self._compare(value, minimum) < 0

    def is_greater_than_min(self, minimum: T | None, value: T | None) -> bool:
        if value is None:
            return False
        if minimum is None:
            return True
        return self._compare(value, minimum) > 0

    def equals_min(self, minimum: T | None, value: T | None) -> bool:
        return self._equals(minimum, value)

    def is_less_than_max(self, maximum: T | None, value: T | None) -> bool:
        if value is None:
            return False
        if maximum is None:
            return True
        return self._compare(value, maximum) < 0

    def is_greater_than_max(self, maximum: T | None, value: T | None) -> bool:
        if value is None:
            return maximum is not None
        if maximum is None:
            return False
        return self._compare(value, maximum) > 0

    def equals_max(self, maximum: T | None, value: T | None) -> bool:
        return self._equals(maximum, value)


@dataclass(frozen=True)
class TotalOrderComparator(Generic[T]):
    """Comparator for domains where every value is a concrete bound."""

    def is_bounded(self, value: T) -> bool:
        return True

    def is_less_than_min(self, minimum: T, value: T) -> bool:
        return natural_compare(value, minimum) < 0

    def is_greater_than_min(self, minimum: T, value: T) -> bool:
        return natural_compare(value, minimum) > 0

    def equals_min(self, minimum: T, value: T) -> bool:
        return natural_compare(value, minimum) == 0

    def is_less_than_max(self, maximum: T, value: T) -> bool:
        return natural_compare(value, maximum) < 0

    def is_greater_than_max(self, maximum: T, value: T) -> bool:
        return natural_compare(value, maximum) > 0

    def equals_max(self, maximum: T, value: T) -> bool:
        return natural_compare(value, maximum) == 0


class ReferenceInterval(SimpleInterval[T | None]):
    """Interval over arbitrary comparable objects; ``None`` is unbounded.

    ``key`` maps values to the objects actually compared, e.g.
    ``str.casefold`` for case-insensitive text ranges. Intervals built with
    different keys never compare equal.

    ``None`` is not a member of any reference interval: against an absent
    endpoint it compares equal rather than beyond it.
    """

    def __init__(
        self,
        value_a: T | None = None,
        value_b: T | None = None,
        left_open: bool = False,
        right_open: bool = False,
        *,
        key: Callable[[T], Any] | None = None,
    ) -> None:
        super().__init__(
            AbsentAsInfinityComparator(key),
            value_a,
            value_b,
            left_open,
            right_open,
        )


class BoundedInterval(SimpleInterval[T]):
    """Interval whose endpoints are always concrete values.

    Without values it collapses to the single point ``[default, default]``.
    """

    supports_unbounded: ClassVar[bool] = False

    def __init__(
        self,
        value_a: T | None = None,
        value_b: T | None = None,
        left_open: bool = False,
        right_open: bool = False,
        *,
        default: Any = 0,
    ) -> None:
        if value_a is None and value_b is None:
            value_a = value_b = default
        elif value_a is None or value_b is None:
            raise TypeError(
                f"{type(self).__name__} needs both values or neither"
            )
        super().__init__(
            TotalOrderComparator(), value_a, value_b, left_open, right_open
        )


class OptionalValueInterval(SimpleInterval[T | None]):
    """Interval over plain ordered values where ``None`` is unbounded."""

    def __init__(
        self,
        value_a: T | None = None,
        value_b: T | None = None,
        left_open: bool = False,
        right_open: bool = False,
    ) -> None:
        super().__init__(
            AbsentAsInfinityComparator(),
            value_a,
            value_b,
            left_open,
            right_open,
        )
