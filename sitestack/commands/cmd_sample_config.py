import click

from sitestack.util import settings_to_sample


@click.command("sample-config")
def cli():
    """Print a sample config file with every setting and its default."""
    click.echo(settings_to_sample())
