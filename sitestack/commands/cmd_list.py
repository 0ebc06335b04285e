import click

from sitestack import site_directory


@click.command("list")
@click.pass_context
def cli(ctx):
    """List registered sites.

    aliases: ls
    """
    cols_str = "  ".join(["{:<32}", "{}"])
    with site_directory.site_directory(**ctx.parent.cm_kwargs) as directory:
        sites = directory.list_all()
        if sites:
            click.echo(cols_str.format("NAME", "PATH"))
            for site in sites:
                click.echo(cols_str.format(site.name, site.path))
        else:
            click.echo("No sites registered")
