import click

from cupcake.infrastructure.cli.order_commands import list_types, order_place


@click.group()
@click.option("--verbose", is_flag=True, default=False, help="Log debug output to stderr.")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """Cupcake Corner: order cupcakes from the command line."""
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose


@cli.group()
def order() -> None:
    """Place orders."""


# Register subcommands
cli.add_command(list_types)
order.add_command(order_place)
