import click

from sitestack import options
from sitestack import orchestrator
from sitestack.state import StackFlags


@click.command("restart")
@options.site_name_arg()
@options.nginx_option("restart")
@options.php_option("restart")
@options.db_option("restart", "--mysql")
@options.all_option("restart")
@options.yes_option()
@click.pass_context
def cli(ctx, site_name, nginx, php, db, all_, yes):
    """Restart the given stacks.

    With SITE_NAME, only the containers selected by --nginx, --php and --db (or every container with --all) of that
    site are restarted.

    Without SITE_NAME, --all restarts every container of every registered site after asking for confirmation.
    """
    flags = StackFlags.from_options(nginx=nginx, php=php, db=db, all=all_, yes=yes)
    with orchestrator.stack_orchestrator(**ctx.parent.cm_kwargs) as so:
        so.restart(site_name, flags)
