import click

from checkout.infrastructure.bootstrap import DEFAULT_LOG_LEVEL, configure_logging
from checkout.infrastructure.cli.receipt_commands import demo, receipt


@click.group(invoke_without_command=True)
@click.option(
    "--log-level",
    envvar="CHECKOUT_LOG_LEVEL",
    default=DEFAULT_LOG_LEVEL,
    show_default=True,
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    help="Logging level for messages on stderr.",
)
@click.pass_context
def cli(ctx: click.Context, log_level: str) -> None:
    """Checkout: print receipts with date and quantity discounts.

    Without a subcommand, prints the demonstration receipts.
    """
    configure_logging(log_level)
    if ctx.invoked_subcommand is None:
        ctx.invoke(demo)


# Register subcommands
cli.add_command(demo)
cli.add_command(receipt)
