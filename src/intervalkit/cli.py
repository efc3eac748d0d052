import logging
from datetime import date, datetime
from decimal import Decimal
from typing import Annotated, Any, NoReturn

import srsly
import typer
from pydantic import ValidationError

from intervalkit.core.algorithms import (
    is_in_interval,
    set_greater_value,
    set_less_value,
)
from intervalkit.intervals.base import SimpleInterval
from intervalkit.intervals.models import (
    IntervalKind,
    IntervalSpec,
    ValueDomain,
    build_interval,
    coerce_value,
)

app = typer.Typer(help="Build, render and query intervals.")

KindOption = Annotated[
    IntervalKind,
    typer.Option("--kind", "-k", help="reference, bounded or optional"),
]
DomainOption = Annotated[
    ValueDomain,
    typer.Option(
        "--domain", "-d", help="int, float, decimal, date, datetime or str"
    ),
]
MinOption = Annotated[
    str | None,
    typer.Option("--min", help="Lower endpoint; omit for unbounded"),
]
MaxOption = Annotated[
    str | None,
    typer.Option("--max", help="Upper endpoint; omit for unbounded"),
]
LeftOpenOption = Annotated[
    bool, typer.Option("--left-open", help="Exclude the lower endpoint")
]
RightOpenOption = Annotated[
    bool, typer.Option("--right-open", help="Exclude the upper endpoint")
]


def _fail(message: str, err: Exception) -> NoReturn:
    typer.echo(f"Error: {message}", err=True)
    raise typer.Exit(1) from err


def _build(
    kind: IntervalKind,
    domain: ValueDomain,
    value_a: Any,
    value_b: Any,
    left_open: bool = False,
    right_open: bool = False,
) -> SimpleInterval[Any]:
    try:
        spec = IntervalSpec(
            kind=kind,
            domain=domain,
            value_a=value_a,
            value_b=value_b,
            left_open=left_open,
            right_open=right_open,
        )
    except ValidationError as err:
        _fail(str(err), err)
    return build_interval(spec)


def _json_value(value: Any) -> Any:
    if isinstance(value, (Decimal, date, datetime)):
        return str(value)
    return value


@app.callback()
def main(
    verbose: Annotated[
        bool, typer.Option("--verbose", "-v", help="Enable debug logging")
    ] = False,
) -> None:
    if verbose:
        logging.basicConfig(level=logging.DEBUG)


@app.command()
def render(
    kind: KindOption = IntervalKind.OPTIONAL,
    domain: DomainOption = ValueDomain.INT,
    min_value: MinOption = None,
    max_value: MaxOption = None,
    left_open: LeftOpenOption = False,
    right_open: RightOpenOption = False,
    as_json: Annotated[
        bool, typer.Option("--json", help="Print a JSON object")
    ] = False,
) -> None:
    """Print the interval built from the given endpoints."""
    interval = _build(
        kind, domain, min_value, max_value, left_open, right_open
    )
    if not as_json:
        typer.echo(str(interval))
        return
    typer.echo(
        srsly.json_dumps(
            {
                "text": str(interval),
                "min": _json_value(interval.minimum),
                "max": _json_value(interval.maximum),
                "left_open": interval.left_open,
                "right_open": interval.right_open,
            }
        )
    )


@app.command()
def contains(
    value: Annotated[str, typer.Argument(help="Value to test")],
    kind: KindOption = IntervalKind.OPTIONAL,
    domain: DomainOption = ValueDomain.INT,
    min_value: MinOption = None,
    max_value: MaxOption = None,
    left_open: LeftOpenOption = False,
    right_open: RightOpenOption = False,
) -> None:
    """Exit 0 and print true if VALUE lies in the interval."""
    interval = _build(
        kind, domain, min_value, max_value, left_open, right_open
    )
    try:
        candidate = coerce_value(domain, value)
    except ValidationError as err:
        _fail(f"Invalid value '{value}' for domain {domain.value}", err)
    inside = is_in_interval(interval, candidate)
    typer.echo("true" if inside else "false")
    if not inside:
        raise typer.Exit(1)


@app.command()
def widen(
    values: Annotated[list[str], typer.Argument(help="Observed values")],
    kind: KindOption = IntervalKind.OPTIONAL,
    domain: DomainOption = ValueDomain.INT,
) -> None:
    """Print the smallest closed interval covering all VALUES."""
    try:
        observed = [coerce_value(domain, raw) for raw in values]
    except ValidationError as err:
        _fail(f"Invalid values for domain {domain.value}", err)
    interval = _build(kind, domain, observed[0], observed[0])
    for value in observed[1:]:
        set_less_value(interval, value)
        set_greater_value(interval, value)
    typer.echo(str(interval))
