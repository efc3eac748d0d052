import datetime
import math
from decimal import Decimal
from enum import Enum
from typing import Annotated, Any

from pydantic import (
    AfterValidator,
    BaseModel,
    BeforeValidator,
    Field,
    TypeAdapter,
    model_validator,
)

from intervalkit.intervals.base import SimpleInterval
from intervalkit.intervals.kinds import (
    BoundedInterval,
    OptionalValueInterval,
    ReferenceInterval,
)


class IntervalKind(str, Enum):
    REFERENCE = "reference"
    BOUNDED = "bounded"
    OPTIONAL = "optional"


class ValueDomain(str, Enum):
    INT = "int"
    FLOAT = "float"
    DECIMAL = "decimal"
    DATE = "date"
    DATETIME = "datetime"
    STR = "str"


def _reject_bool(value: Any) -> Any:
    if isinstance(value, bool):
        raise ValueError("bool is not allowed for numeric endpoint values")
    return value


def _reject_nan(value: Any) -> Any:
    # NaN is unordered; infinities are kept.
    if math.isnan(value):
        raise ValueError("nan is not an ordered endpoint value")
    return value


_DOMAIN_ADAPTERS: dict[ValueDomain, TypeAdapter[Any]] = {
    ValueDomain.INT: TypeAdapter(
        Annotated[int, BeforeValidator(_reject_bool)]
    ),
    ValueDomain.FLOAT: TypeAdapter(
        Annotated[
            float,
            BeforeValidator(_reject_bool),
            AfterValidator(_reject_nan),
        ]
    ),
    ValueDomain.DECIMAL: TypeAdapter(
        Annotated[Decimal, AfterValidator(_reject_nan)]
    ),
    ValueDomain.DATE: TypeAdapter(datetime.date),
    ValueDomain.DATETIME: TypeAdapter(datetime.datetime),
    ValueDomain.STR: TypeAdapter(str),
}

_DOMAIN_DEFAULTS: dict[ValueDomain, Any] = {
    ValueDomain.INT: 0,
    ValueDomain.FLOAT: 0.0,
    ValueDomain.DECIMAL: Decimal(0),
    ValueDomain.DATE: datetime.date.min,
    ValueDomain.DATETIME: datetime.datetime.min,
    ValueDomain.STR: "",
}


def coerce_value(domain: ValueDomain, raw: Any) -> Any:
    """Convert a raw value (usually text) into the domain's type.

    ``None`` passes through as the unbounded marker.
    """
    if raw is None:
        return None
    return _DOMAIN_ADAPTERS[domain].validate_python(raw)


class IntervalSpec(BaseModel):
    kind: IntervalKind = Field(
        default=IntervalKind.OPTIONAL, description="Interval kind to build"
    )
    domain: ValueDomain = Field(
        default=ValueDomain.INT, description="Type of the endpoint values"
    )
    value_a: Any = Field(default=None, description="First endpoint value")
    value_b: Any = Field(default=None, description="Second endpoint value")
    left_open: bool = False
    right_open: bool = False
    default: Any = Field(
        default=None,
        description="Point used by an empty bounded interval",
    )

    @model_validator(mode="after")
    def validate_values(self) -> "IntervalSpec":
        self.value_a = coerce_value(self.domain, self.value_a)
        self.value_b = coerce_value(self.domain, self.value_b)
        self.default = coerce_value(self.domain, self.default)
        if self.kind == IntervalKind.BOUNDED and (
            (self.value_a is None) != (self.value_b is None)
        ):
            raise ValueError(
                "bounded intervals need both endpoint values or neither"
            )
        return self


def build_interval(spec: IntervalSpec) -> SimpleInterval[Any]:
    if spec.kind == IntervalKind.REFERENCE:
        return ReferenceInterval(
            spec.value_a, spec.value_b, spec.left_open, spec.right_open
        )
    if spec.kind == IntervalKind.BOUNDED:
        default = spec.default
        if default is None:
            default = _DOMAIN_DEFAULTS[spec.domain]
        return BoundedInterval(
            spec.value_a,
            spec.value_b,
            spec.left_open,
            spec.right_open,
            default=default,
        )
    return OptionalValueInterval(
        spec.value_a, spec.value_b, spec.left_open, spec.right_open
    )
