import logging
from typing import Any

from intervalkit.core.contract import IntervalLike

logger = logging.getLogger(__name__)


def is_less_than_or_equal_min(interval: IntervalLike[Any], value: Any) -> bool:
    return interval.is_less_than_min(value) or interval.equals_min(value)


def is_greater_than_or_equal_min(
    interval: IntervalLike[Any], value: Any
) -> bool:
    return interval.is_greater_than_min(value) or interval.equals_min(value)


def is_less_than_or_equal_max(interval: IntervalLike[Any], value: Any) -> bool:
    return interval.is_less_than_max(value) or interval.equals_max(value)


def is_greater_than_or_equal_max(
    interval: IntervalLike[Any], value: Any
) -> bool:
    return interval.is_greater_than_max(value) or interval.equals_max(value)


def set_values(
    interval: IntervalLike[Any],
    value_a: Any,
    value_b: Any,
    left_open: bool = False,
    right_open: bool = False,
) -> None:
    """Set both endpoints from two values given in any order.

    The lesser value becomes the minimum and the greater one the maximum.
    An unbounded ``value_a`` stays on the minimum side and an unbounded
    ``value_b`` on the maximum side.
    """
    interval.collapse_to(value_a)
    if is_greater_than_or_equal_min(
        interval, value_b
    ) or is_greater_than_or_equal_max(interval, value_b):
        interval.maximum = value_b
    else:
        interval.minimum = value_b
    interval.left_open = left_open
    interval.right_open = right_open


def set_greater_value(
    interval: IntervalLike[Any],
    value: Any,
    right_open: bool | None = None,
) -> None:
    """Raise the maximum to ``value`` if it lies at or above it.

    Values already inside the interval leave it unchanged.
    """
    if right_open is not None:
        interval.right_open = right_open
    if is_greater_than_or_equal_max(interval, value):
        if not interval.equals_max(value):
            logger.debug(
                "widening maximum from %r to %r", interval.maximum, value
            )
        interval.maximum = value


def set_less_value(
    interval: IntervalLike[Any],
    value: Any,
    left_open: bool | None = None,
) -> None:
    """Lower the minimum to ``value`` if it lies at or below it.

    Values already inside the interval leave it unchanged.
    """
    if left_open is not None:
        interval.left_open = left_open
    if is_less_than_or_equal_min(interval, value):
        if not interval.equals_min(value):
            logger.debug(
                "widening minimum from %r to %r", interval.minimum, value
            )
        interval.minimum = value


def is_in_interval(interval: IntervalLike[Any], value: Any) -> bool:
    if interval.left_open:
        left_ok = interval.is_greater_than_min(value)
    else:
        left_ok = is_greater_than_or_equal_min(interval, value)
    if not left_ok:
        return False
    if interval.right_open:
        return interval.is_less_than_max(value)
    return is_less_than_or_equal_max(interval, value)


def load(interval: IntervalLike[Any], source: IntervalLike[Any] | None) -> None:
    """Copy endpoints and open flags from ``source`` into ``interval``."""
    if source is None:
        return
    interval.collapse_to(source.minimum)
    interval.maximum = source.maximum
    interval.left_open = source.left_open
    interval.right_open = source.right_open
