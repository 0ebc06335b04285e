import click

from sitestack import site_directory


@click.command("register")
@click.argument("name")
@click.argument("path", type=click.Path(file_okay=False, resolve_path=True))
@click.pass_context
def cli(ctx, name, path):
    """Register a site and the directory its stack runs from.

    aliases: add
    """
    with site_directory.site_directory(**ctx.parent.cm_kwargs) as directory:
        directory.add(name, path)
