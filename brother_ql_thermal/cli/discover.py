import click

from ..backends import BrotherQLBackendPyUSB
from ..utils.output_helpers import log_discovered_devices


@click.command()
@click.pass_context
def discover(ctx):
    """find connected label printers"""
    available_devices = BrotherQLBackendPyUSB.list_available_devices()

    log_discovered_devices(available_devices)
    for identifier in available_devices:
        click.echo(identifier)
