import click

from sitestack import options
from sitestack import orchestrator
from sitestack.state import StackFlags


@click.command("reload")
@options.site_name_arg()
@options.nginx_option("reload")
@options.php_option("reload")
@options.db_option("reload")
@options.all_option("reload")
@options.yes_option()
@click.pass_context
def cli(ctx, site_name, nginx, php, db, all_, yes):
    """Reload the given stacks without restarting their containers.

    nginx validates its configuration before reloading, php-fpm is signalled to reload its workers. The database has
    no reload and is skipped.

    Without SITE_NAME, --all reloads every site after asking for confirmation.
    """
    flags = StackFlags.from_options(nginx=nginx, php=php, db=db, all=all_, yes=yes)
    with orchestrator.stack_orchestrator(**ctx.parent.cm_kwargs) as so:
        so.reload(site_name, flags)
