import click

from ..labels import all_geometries
from ..models import Models
from ..utils.output_helpers import textual_label_description


@click.group()
@click.pass_context
def info(ctx, *args, **kwargs):
    """List available labels, models etc."""


@info.command(name="models")
@click.pass_context
def models_cmd(ctx, *args, **kwargs):
    """List the supported printer models"""
    click.echo("Supported models:")
    for model in Models.identifiers():
        click.echo(" " + model)


@info.command()
@click.pass_context
def labels(ctx, *args, **kwargs):
    """List the supported label media"""
    click.echo(textual_label_description(all_geometries()), nl=False)
