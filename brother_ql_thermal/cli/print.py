import click

from ..exceptions import BrotherQLError
from ..printer import BrotherQLPrinter
from ..raster import TextRasterizer, image_to_raster_lines
from .status import open_backend


@click.command("print", short_help="Print a text label")
@click.argument("text")
@click.option("-s", "--secondary", help="Smaller second line of text printed below TEXT.")
@click.option("-f", "--font", type=click.Path(exists=True, dir_okay=False), envvar="BROTHER_QL_FONT", required=True, help="TrueType/OpenType font file to render the text with.")
@click.option("-i", "--image", type=click.Path(exists=True, dir_okay=False), help="Image (eg. a logo) to print below the text. Only used on 12mm continuous tape.")
@click.option("--font-scale", type=float, default=1.0, show_default=True, help="Factor applied to the maximum font size.")
@click.option("--length", type=click.IntRange(min=1), help="Label length in dots for continuous tape.")
@click.option("--save-render", type=click.Path(dir_okay=False, writable=True), help="Also save the rendered label to this image file.")
@click.option("--no-wait", is_flag=True, help="Return as soon as the label was sent instead of waiting for the printer to finish.")
@click.option("--timeout", type=float, help="Give up waiting for the printer after this many seconds.")
@click.pass_context
def print_cmd(ctx, text, **kwargs):
    """Print a label showing TEXT, sized to the media loaded in the printer."""
    with open_backend(ctx) as backend:
        printer = BrotherQLPrinter(backend)
        try:
            printer.initialize()
            label = printer.current_label()

            rasterizer = TextRasterizer(label, kwargs["font"])
            rasterizer.set_second_row_image(kwargs["image"])
            image = rasterizer.render(text, kwargs["secondary"], kwargs["font_scale"], length=kwargs["length"])
            if kwargs["save_render"]:
                image.save(kwargs["save_render"])
            lines = image_to_raster_lines(image)

            if kwargs["no_wait"]:
                status = printer.print(lines)
            else:
                status = printer.print_blocking(lines, timeout=kwargs["timeout"])
        except BrotherQLError as e:
            raise click.ClickException(str(e)) from e

    if status.errors:
        raise click.ClickException("Printer reported: " + ", ".join(status.errors))
