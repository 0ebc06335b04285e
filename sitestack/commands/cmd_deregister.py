import click

from sitestack import site_directory


@click.command("deregister")
@click.argument("names", metavar="NAME...", nargs=-1, required=True)
@click.pass_context
def cli(ctx, names):
    """Deregister site(s).

    aliases: remove
    """
    with site_directory.site_directory(**ctx.parent.cm_kwargs) as directory:
        directory.remove(names)
