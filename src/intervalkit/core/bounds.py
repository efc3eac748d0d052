"""Tagged endpoint representation.

Each endpoint is one of ``Unbounded``, ``Inclusive(value)`` or
``Exclusive(value)``, folding the bounded/open state and the value into a
single object.
"""

from typing import Annotated, Any, Literal

from pydantic import BaseModel, ConfigDict, Field

from intervalkit.core.contract import IntervalLike


class Unbounded(BaseModel):
    model_config = ConfigDict(frozen=True)
    kind: Literal["unbounded"] = "unbounded"


class Inclusive(BaseModel):
    model_config = ConfigDict(frozen=True)
    kind: Literal["inclusive"] = "inclusive"
    value: Any


class Exclusive(BaseModel):
    model_config = ConfigDict(frozen=True)
    kind: Literal["exclusive"] = "exclusive"
    value: Any


Bound = Annotated[
    Unbounded | Inclusive | Exclusive, Field(discriminator="kind")
]


def _endpoint(value: Any, bounded: bool, is_open: bool) -> Bound:
    if not bounded:
        return Unbounded()
    if is_open:
        return Exclusive(value=value)
    return Inclusive(value=value)


def lower_bound(interval: IntervalLike[Any]) -> Bound:
    return _endpoint(
        interval.minimum, interval.left_bounded, interval.left_open
    )


def upper_bound(interval: IntervalLike[Any]) -> Bound:
    return _endpoint(
        interval.maximum, interval.right_bounded, interval.right_open
    )


def apply_bounds(
    interval: IntervalLike[Any],
    lower: Bound,
    upper: Bound,
    unbounded: Any = None,
) -> None:
    """Replace both endpoints of ``interval`` with tagged bounds.

    ``unbounded`` is the marker the interval's kind uses for a missing
    endpoint. Raises ``RangeViolationError`` when ``lower`` lies above
    ``upper``.
    """
    match lower:
        case Unbounded():
            interval.collapse_to(unbounded)
            left_open = True
        case Inclusive(value=value) | Exclusive(value=value):
            interval.collapse_to(value)
            left_open = isinstance(lower, Exclusive)
        case _:
            raise TypeError(f"Unknown lower bound: {lower!r}")
    match upper:
        case Unbounded():
            interval.maximum = unbounded
            right_open = True
        case Inclusive(value=value) | Exclusive(value=value):
            interval.maximum = value
            right_open = isinstance(upper, Exclusive)
        case _:
            raise TypeError(f"Unknown upper bound: {upper!r}")
    interval.left_open = left_open
    interval.right_open = right_open
