""" Click definitions for various shared options and arguments.
"""
import click


def debug_option():
    return click.option("-d", "--debug", is_flag=True, help="Enables debug mode.")


def config_file_option():
    return click.option(
        "-c",
        "--config-file",
        type=click.Path(exists=True, dir_okay=False, resolve_path=True),
        help="sitestack config file. Can also be set with $SITESTACK_CONFIG_FILE",
    )


def sites_file_option():
    return click.option(
        "--sites-file",
        type=click.Path(dir_okay=False, resolve_path=True),
        help="Site registry to operate on, overrides the `sites_file` setting.",
    )


def site_name_arg():
    return click.argument("site_name", metavar="[SITE_NAME]", required=False)


def nginx_option(verb):
    return click.option("--nginx", is_flag=True, default=False, help=f"To {verb} nginx.")


def php_option(verb):
    return click.option("--php", is_flag=True, default=False, help=f"To {verb} php.")


def db_option(verb, *aliases):
    return click.option("--db", *aliases, "db", is_flag=True, default=False, help=f"To {verb} the database.")


def all_option(verb):
    return click.option(
        "--all", "all_", is_flag=True, default=False,
        help=f"To {verb} all the stacks. Without SITE_NAME, every stack of every site (possibly dangerous).",
    )


def yes_option():
    return click.option("-y", "--yes", is_flag=True, default=False, help="Do not ask for confirmation.")
