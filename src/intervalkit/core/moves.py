from dataclasses import dataclass
from enum import Enum
from typing import Any


class Side(str, Enum):
    MIN = "min"
    MAX = "max"

    @property
    def opposite(self) -> "Side":
        return Side.MAX if self is Side.MIN else Side.MIN


class RangeViolationError(ValueError):
    """Raised when a bound would cross the opposite, bounded endpoint."""

    def __init__(self, side: Side, value: Any, bound: Any) -> None:
        if side is Side.MIN:
            reason = "minimum must not be greater than the maximum"
        else:
            reason = "maximum must not be less than the minimum"
        super().__init__(
            f"{reason}: got {value!r}, {side.opposite.value} is {bound!r}"
        )
        self.side = side
        self.value = value
        self.bound = bound


@dataclass(frozen=True)
class BoundMove:
    """Outcome of an attempt to move one endpoint of an interval."""

    side: Side
    value: Any
    accepted: bool
    bound: Any = None

    def raise_for_violation(self) -> None:
        if not self.accepted:
            raise RangeViolationError(self.side, self.value, self.bound)
