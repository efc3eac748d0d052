"""Interval kinds: shared base, concrete kinds and their configuration."""

from intervalkit.intervals.base import SimpleInterval
from intervalkit.intervals.kinds import (
    AbsentAsInfinityComparator,
    BoundedInterval,
    OptionalValueInterval,
    ReferenceInterval,
    TotalOrderComparator,
)
from intervalkit.intervals.models import (
    IntervalKind,
    IntervalSpec,
    ValueDomain,
    build_interval,
    coerce_value,
)

__all__ = [
    "AbsentAsInfinityComparator",
    "BoundedInterval",
    "IntervalKind",
    "IntervalSpec",
    "OptionalValueInterval",
    "ReferenceInterval",
    "SimpleInterval",
    "TotalOrderComparator",
    "ValueDomain",
    "build_interval",
    "coerce_value",
]
