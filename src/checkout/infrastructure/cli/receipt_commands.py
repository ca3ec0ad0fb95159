"""CLI commands that print receipts."""

from __future__ import annotations

from collections.abc import Callable

import click

from checkout.application.build_receipt import BuildReceiptHandler
from checkout.application.checkout_cart import CheckoutCartHandler
from checkout.application.dto import ItemSpec, ReceiptDTO
from checkout.domain.exceptions import DomainException
from checkout.domain.model.cashier import PURCHASE_DATETIME_FORMAT, Cashier
from checkout.infrastructure.bootstrap import system_clock
from checkout.infrastructure.demo import demo_scenarios

RULE = "-" * 60
SCENARIO_SEPARATOR = "= = = = = = = = = = = = ="


def render_receipt(dto: ReceiptDTO) -> list[str]:
    """Lay out a receipt, one string per output line."""
    out = [
        f"Date: {dto.purchased_datetime}",
        "--- Products ---",
        "",
    ]

    for index, line in enumerate(dto.lines):
        out.append(f"{line.name} - {line.brand}")
        out.append(f"${line.price}")
        if line.has_discount:
            out.append(
                f"#discount: {line.discount_percentage}% -${line.discount_amount}"
            )
        if index != len(dto.lines) - 1:
            out.append("")

    out.append(RULE)
    out.append(f"SUBTOTAL: ${dto.subtotal}")
    out.append(f"DISCOUNT: {'-$' if dto.has_discount else ''}{dto.discount_total}")
    out.append(f"TOTAL: ${dto.total}")
    out.append("")
    return out


def print_receipt(cashier: Cashier, echo: Callable[[str], None] = click.echo) -> None:
    """Write the receipt for *cashier* to stdout."""
    dto = BuildReceiptHandler().handle(cashier)
    for line in render_receipt(dto):
        echo(line)


def _parse_item(raw: str) -> ItemSpec:
    """Parse 'shirt,Blue Cotton Shirt,BrandS,14.99,blue,M' into an ItemSpec."""
    fields = [field.strip() for field in raw.split(",")]
    if len(fields) != 6:
        raise click.BadParameter(
            f"Invalid item format '{raw}'. "
            "Expected 'Category,Name,Brand,Price,Color,Size'."
        )
    category, name, brand, price, color, size = fields
    return ItemSpec(
        category=category,
        name=name,
        brand=brand,
        price=price,
        color=color,
        size=size,
    )


@click.command("demo")
def demo() -> None:
    """Print the four demonstration receipts."""
    try:
        scenarios = demo_scenarios(clock=system_clock)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    for number, scenario in enumerate(scenarios):
        if number > 0:
            click.echo()
            click.echo()
            click.echo(SCENARIO_SEPARATOR)
            click.echo()
        click.echo(scenario.title)
        click.echo()
        print_receipt(scenario.cashier)


@click.command("receipt")
@click.option(
    "--item",
    "items",
    required=True,
    multiple=True,
    help="Item as 'Category,Name,Brand,Price,Color,Size'. Repeat for more items.",
)
@click.option(
    "--date",
    "purchased_datetime",
    default=None,
    help=f"Purchase date as '{PURCHASE_DATETIME_FORMAT}'. Defaults to now.",
)
def receipt(items: tuple[str, ...], purchased_datetime: str | None) -> None:
    """Print a receipt for the given items."""
    specs = [_parse_item(raw) for raw in items]

    handler = CheckoutCartHandler(clock=system_clock)

    try:
        cashier = handler.handle(specs, purchased_datetime)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    print_receipt(cashier)
