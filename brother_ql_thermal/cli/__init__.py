import logging

import click

from .discover import discover
from .info import info
from .print import print_cmd
from .status import status_cmd

logger = logging.getLogger("brother_ql_thermal")


printer_help = "The identifier for the printer, a string like usb://0x04f9:0x2042/000M6Z401370. Run `brother_ql_thermal discover` to list the connected printers."


@click.group()
@click.option("-p", "--printer", metavar="PRINTER_IDENTIFIER", envvar="BROTHER_QL_PRINTER", help=printer_help)
@click.option("--debug", is_flag=True, envvar="BROTHER_QL_DEBUG")
@click.version_option(package_name="brother_ql_thermal")
@click.pass_context
def cli(ctx, *args, **kwargs):
    """Print text labels on Brother QL printers connected via USB."""

    # Store the general CLI options in the context meta dictionary.
    # The name corresponds to the second half of the respective envvar:
    ctx.meta["PRINTER"] = kwargs.get("printer", None)

    logging.basicConfig(level="DEBUG" if kwargs.get("debug") else "INFO")


cli.add_command(discover)
cli.add_command(info)
cli.add_command(print_cmd)
cli.add_command(status_cmd)

if __name__ == "__main__":
    cli()
