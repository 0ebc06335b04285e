""" Command line utilities for restarting and reloading site stacks
"""

import importlib
import os

import click

from sitestack import io
from sitestack import options


CONTEXT_SETTINGS = {
    "auto_envvar_prefix": "SITESTACK",
    "help_option_names": ["-h", "--help"]
}

COMMAND_ALIASES = {
    "add": "register",
    "ls": "list",
    "remove": "deregister",
}


cmd_folder = os.path.abspath(os.path.join(os.path.dirname(__file__), "commands"))


def set_debug(debug_opt):
    if debug_opt:
        io.DEBUG = True


def list_cmds():
    return sorted(
        filename[len("cmd_"):-len(".py")].replace("_", "-")
        for filename in os.listdir(cmd_folder)
        if filename.startswith("cmd_") and filename.endswith(".py")
    )


def name_to_command(name):
    try:
        module = importlib.import_module(f"sitestack.commands.cmd_{name.replace('-', '_')}")
    except ImportError as exc:
        io.error(f"Problem loading command {name}, exception {exc}")
        return None
    return module.cli


class SitestackCLI(click.Group):
    def list_commands(self, ctx):
        return list_cmds()

    def get_command(self, ctx, name):
        name = COMMAND_ALIASES.get(name, name)
        # unknown names are left to click's "No such command"
        if name not in list_cmds():
            return None
        return name_to_command(name)


@click.command(cls=SitestackCLI, context_settings=CONTEXT_SETTINGS)
@click.version_option()
@options.debug_option()
@options.config_file_option()
@options.sites_file_option()
@click.pass_context
def sitestack(ctx, debug, config_file, sites_file):
    """Restart and reload the nginx, php and database containers of managed sites."""
    set_debug(debug)
    ctx.cm_kwargs = {
        "config_file": config_file,
        "sites_file": sites_file,
    }
