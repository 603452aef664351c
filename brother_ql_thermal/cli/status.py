import click

from ..backends import BrotherQLBackendPyUSB
from ..exceptions import BrotherQLError, BrotherQLUnknownMedia
from ..printer import BrotherQLPrinter


def open_backend(ctx) -> BrotherQLBackendPyUSB:
    identifier = ctx.meta.get("PRINTER")
    try:
        if identifier is None:
            available_devices = BrotherQLBackendPyUSB.list_available_devices()
            if not available_devices:
                raise click.ClickException("No printer found. Is it connected and switched on?")
            identifier = available_devices[0]
        return BrotherQLBackendPyUSB(identifier)
    except BrotherQLError as e:
        raise click.ClickException(str(e)) from e


@click.command(name="status", short_help="Show the status of the printer")
@click.pass_context
def status_cmd(ctx):
    """Query the printer for its model, loaded media and errors."""
    with open_backend(ctx) as backend:
        printer = BrotherQLPrinter(backend)
        try:
            status = printer.initialize()
        except BrotherQLError as e:
            raise click.ClickException(str(e)) from e

    click.echo(f"Model:  {status.model.identifier}")
    click.echo(f"Status: {status.status_type.name}")
    click.echo(f"Media:  {status.media.media_type.name} ({status.media.width} x {status.media.length} mm)")
    try:
        label = status.media.to_geometry()
        click.echo(f"Label:  {label.identifier} ({label.dots_printable[0]} printable dots wide)")
    except BrotherQLUnknownMedia:
        click.echo("Label:  unknown")
    click.echo("Errors: " + (", ".join(status.errors) if status.errors else "none"))
