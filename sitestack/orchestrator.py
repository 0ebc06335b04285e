""" Restart and reload the stacks of one or all sites.
"""
import contextlib
import itertools
import logging
import os
from typing import List, Tuple

import sitestack.io
from sitestack.config_manager import load_settings
from sitestack.exceptions import SelectorError
from sitestack.executor import CommandExecutor
from sitestack.settings import DEFAULT_COMPOSE_COMMAND
from sitestack.site_directory import SiteDirectory
from sitestack.state import (
    ALL_COMPONENTS,
    CommandType,
    Component,
    OperationRequest,
    Site,
    StackFlags,
    stack_command,
)

log = logging.getLogger(__name__)

SEPARATOR = "-----------------------"


@contextlib.contextmanager
def stack_orchestrator(config_file=None, sites_file=None):
    settings = load_settings(config_file=config_file, sites_file=sites_file)
    if settings.log_file:
        sitestack.io.log_to_file(settings.log_file)
    yield StackOrchestrator(
        SiteDirectory(settings.sites_file),
        executor=CommandExecutor(),
        compose_command=settings.compose_argv,
    )


class StackOrchestrator(object):
    """Turns a site selection and component flags into container restarts or reloads.

    ``output`` is anything with the ``info``/``debug``/``warn`` functions of :mod:`sitestack.io`, and ``confirm`` is
    called as ``confirm(prompt, flags)`` before touching every site.
    """

    def __init__(self, site_directory, executor=None, compose_command=None, confirm=None, output=None):
        self.site_directory = site_directory
        self.executor = executor or CommandExecutor()
        self.compose_command = tuple(compose_command or (DEFAULT_COMPOSE_COMMAND,))
        self.confirm = confirm or sitestack.io.confirm
        self.output = output or sitestack.io

    def reload(self, site_name=None, flags=None):
        """Gracefully reload the selected stacks: nginx checks its config and reloads, php-fpm gets USR2."""
        self.exec_stacks(site_name, flags, CommandType.reload)
        log.debug("stack reload end")

    def restart(self, site_name=None, flags=None):
        """Restart the selected stack containers."""
        self.exec_stacks(site_name, flags, CommandType.restart)
        log.debug("stack restart end")

    def exec_stacks(self, site_name, flags, command_type):
        flags = flags or StackFlags()
        command_type = CommandType(command_type)
        log.debug("stack %s start", command_type.value)
        log.debug("site_name: %s", site_name)
        log.debug("flags: %s", flags)

        sites = self.resolve_sites(site_name, flags, command_type)
        if not sites:
            self.output.warn("No sites are registered, nothing to do")
            return
        components = self.resolve_components(flags, sites, site_name=site_name)

        requests = self.operations(sites, components, command_type)
        for site, site_requests in itertools.groupby(requests, key=lambda r: r.site):
            self.output.info(f"\nExecuting for {site.name}")
            self.output.info(SEPARATOR, bright=False)
            self.enter_site(site)
            for request in site_requests:
                self.exec_stack_from_type(request.site, request.component, request.command_type)
            self.output.info(SEPARATOR, bright=False)

    def resolve_sites(self, site_name, flags, command_type) -> List[Site]:
        if site_name:
            site = self.site_directory.find(site_name)
            if site is None:
                raise SelectorError(f"Site {site_name} does not exist.")
            return [site]
        elif flags.all:
            self.confirm(f"Are you sure you want to {CommandType(command_type).value} all containers?", flags)
            return self.site_directory.list_all()
        raise SelectorError("Please specify a site-name or (possibly dangerous) `--all` flag for all the sites.")

    def resolve_components(self, flags, sites, site_name=None) -> Tuple[Component, ...]:
        # --all touches every component even when individual component flags were also given
        if flags.all and sites:
            return ALL_COMPONENTS
        components = flags.ordered_components
        if not components:
            raise SelectorError(
                f"Please specify at least one of --nginx, --php, --db or --all for site {site_name}."
                if site_name else "Please specify at least one of --nginx, --php, --db or --all."
            )
        return components

    def operations(self, sites, components, command_type) -> List[OperationRequest]:
        """Every site's full set of operations, in site order, before the next site's."""
        return [
            OperationRequest(site=site, component=component, command_type=command_type)
            for site in sites
            for component in components
        ]

    def enter_site(self, site):
        # commands of every following component run here, it is not restored afterward
        try:
            os.chdir(site.path)
        except OSError as exc:
            self.output.debug(f"Unable to change to directory of site {site.name}, continuing in {os.getcwd()}: {exc}")
            log.debug("chdir to %s failed: %s", site.path, exc)

    def exec_stack_from_type(self, site, component, command_type):
        command = stack_command(self.compose_command, component, command_type)
        if command is None:
            self.output.debug(f"No {CommandType(command_type).value} operation for {Component(component).value} of {site.name}, skipping")
            return None
        return self.launch_stack_command(command, component, command_type)

    def launch_stack_command(self, command, component, command_type):
        self.output.info(f"{CommandType(command_type).gerund} {Component(component).value}", bright=False)
        self.output.debug(f"COMMAND: {command}")
        log.debug("COMMAND: %s", command)
        result = self.executor.run(command)
        self.output.debug(f"Exit status: {result.returncode}")
        if result.output:
            self.output.info(result.output.rstrip("\n"), bright=False)
        self.output.info("Done.\n", bright=False)
        return result
