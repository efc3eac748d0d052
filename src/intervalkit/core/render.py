from typing import Any

from intervalkit.core.contract import IntervalLike

NEGATIVE_INFINITY_SYMBOL = "-∞"
POSITIVE_INFINITY_SYMBOL = "+∞"


def _quote(text: str) -> str:
    escaped = text.replace('"', '\\"')
    return f'"{escaped}"'


def render_interval(interval: IntervalLike[Any]) -> str:
    """Render an interval as ``[min, max]`` with open ends in parentheses.

    Unbounded ends render as infinity symbols. When either endpoint text
    contains a comma or semicolon the separator becomes ``;`` and endpoint
    texts containing ``;`` are quoted.
    """
    if interval.left_bounded:
        left = str(interval.minimum)
    else:
        left = NEGATIVE_INFINITY_SYMBOL
    if interval.right_bounded:
        right = str(interval.maximum)
    else:
        right = POSITIVE_INFINITY_SYMBOL

    sep = ","
    if any(ch in text for text in (left, right) for ch in ",;"):
        sep = ";"
        if ";" in left:
            left = _quote(left)
        if ";" in right:
            right = _quote(right)

    opening = "(" if interval.left_open else "["
    closing = ")" if interval.right_open else "]"
    return f"{opening}{left}{sep} {right}{closing}"
