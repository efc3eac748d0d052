"""Comparison contract shared by every interval kind.

A kind supplies a ``BoundComparator``: six primitives comparing a candidate
value against a given minimum or maximum, plus ``is_bounded`` telling a
concrete value apart from the kind's "no bound" marker. Intervals bind the
primitives to their current endpoints and expose them through
``IntervalLike``, which is all the generic algorithms rely on.
"""

from typing import Any, Protocol, TypeVar

T = TypeVar("T")


class BoundComparator(Protocol[T]):
    def is_bounded(self, value: T) -> bool: ...

    def is_less_than_min(self, minimum: T, value: T) -> bool: ...

    def is_greater_than_min(self, minimum: T, value: T) -> bool: ...

    def equals_min(self, minimum: T, value: T) -> bool: ...

    def is_less_than_max(self, maximum: T, value: T) -> bool: ...

    def is_greater_than_max(self, maximum: T, value: T) -> bool: ...

    def equals_max(self, maximum: T, value: T) -> bool: ...


class IntervalLike(Protocol[T]):
    minimum: T
    maximum: T
    left_open: bool
    right_open: bool

    @property
    def left_bounded(self) -> bool: ...

    @property
    def right_bounded(self) -> bool: ...

    def collapse_to(self, value: T) -> None: ...

    def is_less_than_min(self, value: T) -> bool: ...

    def is_greater_than_min(self, value: T) -> bool: ...

    def equals_min(self, value: T) -> bool: ...

    def is_less_than_max(self, value: T) -> bool: ...

    def is_greater_than_max(self, value: T) -> bool: ...

    def equals_max(self, value: T) -> bool: ...


def natural_compare(a: Any, b: Any) -> int:
    """Three-way compare using the operands' own ordering."""
    if a < b:
        return -1
    if b < a:
        return 1
    return 0
