"""CLI commands for placing a cupcake order."""

from __future__ import annotations

import click

from cupcake.application.dto import Success
from cupcake.application.order_form import OrderForm
from cupcake.domain.exceptions import DomainException, ValidationError
from cupcake.domain.model.value_objects import (
    CAKE_TYPES,
    MAX_QUANTITY,
    MIN_QUANTITY,
    cake_type_index,
    cake_type_name,
)
from cupcake.infrastructure.bootstrap import settings, submit_order_handler
from cupcake.infrastructure.logger import configure_logging, get_logger

logger = get_logger(__name__)

_ADDRESS_OPTIONS = (
    ("name", "Name"),
    ("street_address", "Street Address"),
    ("city", "City"),
    ("zip", "Zip"),
)


def _parse_cake_type(ctx, param, value: str) -> int:
    """Accept either a flavour name ('chocolate') or its index ('1')."""
    try:
        if value.strip().isdigit():
            index = int(value)
            cake_type_name(index)
            return index
        return cake_type_index(value)
    except ValidationError as exc:
        raise click.BadParameter(str(exc))


@click.command("types")
def list_types() -> None:
    """List the available cake types."""
    for index, name in enumerate(CAKE_TYPES):
        click.echo(f"  {index}  {name}")


@click.command("place")
@click.option("--type", "cake_type", default="0", callback=_parse_cake_type,
              help="Cake type, by name or index.")
@click.option("--quantity", default=MIN_QUANTITY, show_default=True,
              type=click.IntRange(MIN_QUANTITY, MAX_QUANTITY), help="Number of cakes.")
@click.option("--special-request", is_flag=True, default=False,
              help="Enable the topping options below.")
@click.option("--extra-frosting", is_flag=True, default=False,
              help="Add extra frosting (needs --special-request).")
@click.option("--add-sprinkles", is_flag=True, default=False,
              help="Add extra sprinkles (needs --special-request).")
@click.option("--name", prompt="Name", default="", help="Recipient name.")
@click.option("--street-address", prompt="Street Address", default="", help="Street address.")
@click.option("--city", prompt="City", default="", help="City.")
@click.option("--zip", "zip_code", prompt="Zip", default="", help="Zip code.")
@click.option("--dry-run", is_flag=True, default=False,
              help="Print the request body instead of sending it.")
@click.pass_context
def order_place(
    ctx: click.Context,
    cake_type: int,
    quantity: int,
    special_request: bool,
    extra_frosting: bool,
    add_sprinkles: bool,
    name: str,
    street_address: str,
    city: str,
    zip_code: str,
    dry_run: bool,
) -> None:
    """Place a cupcake order."""
    try:
        config = settings()
    except ValueError as exc:
        raise click.ClickException(f"Invalid configuration: {exc}")
    verbose = bool(ctx.obj and ctx.obj.get("verbose"))
    configure_logging("DEBUG" if verbose else config.log_level)

    form = OrderForm(handler=submit_order_handler(config))
    order = form.order
    order.cake_type = cake_type
    form.set_quantity(quantity)
    order.special_request = special_request
    # Topping toggles are only reachable behind the special request switch.
    if form.toppings_visible:
        order.extra_frosting = extra_frosting
        order.add_sprinkles = add_sprinkles
    order.name = name
    order.street_address = street_address
    order.city = city
    order.zip = zip_code

    try:
        if not order.is_valid:
            missing = [label for attr, label in _ADDRESS_OPTIONS if not getattr(order, attr)]
            raise click.ClickException(
                f"Order is incomplete, please fill in: {', '.join(missing)}"
            )

        if dry_run:
            click.echo(order.encode().decode("utf-8"))
            return

        try:
            outcome = form.place_order().result()
        except DomainException as exc:
            raise click.ClickException(str(exc))
    finally:
        form.close()

    if isinstance(outcome, Success):
        click.echo("Thanks")
        click.echo(outcome.message)
        return

    logger.error("Order failed: %r", outcome)
    click.echo("Order could not be placed.", err=True)
    ctx.exit(1)
