""" The registry of managed sites.
"""
import contextlib
import errno
import os
from typing import List, Optional

from pydantic import ValidationError
from yaml import safe_dump, safe_load, YAMLError

import sitestack.io
from sitestack.config_manager import load_settings
from sitestack.state import Site


@contextlib.contextmanager
def site_directory(config_file=None, sites_file=None):
    settings = load_settings(config_file=config_file, sites_file=sites_file)
    directory = SiteDirectory(settings.sites_file)
    yield directory
    if directory.modified:
        directory.save()


class SiteDirectory(object):
    """Sites in the order they appear in the registry file.

    A missing registry file is an empty registry.
    """

    def __init__(self, sites_file):
        # convert from pathlib.Path
        self.sites_file = str(sites_file)
        self.modified = False
        self.__sites = None

    @property
    def sites(self) -> List[Site]:
        if self.__sites is None:
            self.__sites = self.__load()
        return self.__sites

    def __load(self):
        if not os.path.exists(self.sites_file):
            sitestack.io.debug(f"Site registry does not exist: {self.sites_file}")
            return []
        with open(self.sites_file) as sites_fh:
            try:
                registry = safe_load(sites_fh)
            except YAMLError as exc:
                sitestack.io.error(f"Failed to parse site registry: {self.sites_file}")
                sitestack.io.exception(str(exc))

        registry = registry or {}
        if type(registry) is not dict or not isinstance(registry.get("sites") or [], list):
            sitestack.io.exception(f"Site registry does not contain a `sites` list: {self.sites_file}")

        sites = []
        names = set()
        for entry in registry.get("sites") or []:
            try:
                site = Site.model_validate(entry)
            except ValidationError as exc:
                sitestack.io.exception(f"Invalid site entry in {self.sites_file}: {exc}")
            if site.name in names:
                sitestack.io.exception(f"Duplicate site name {site.name} in site registry: {self.sites_file}")
            names.add(site.name)
            sites.append(site)
        sitestack.io.debug(f"Loaded {len(sites)} site(s) from {self.sites_file}")
        return sites

    def find(self, name) -> Optional[Site]:
        for site in self.sites:
            if site.name == name:
                return site
        return None

    def list_all(self) -> List[Site]:
        return list(self.sites)

    def add(self, name, path):
        if self.find(name) is not None:
            sitestack.io.exception(f"Site {name} is already registered")
        try:
            site = Site(name=name, path=os.path.abspath(path))
        except ValidationError as exc:
            sitestack.io.exception(f"Invalid site: {exc}")
        self.sites.append(site)
        self.modified = True
        sitestack.io.info(f"Registered site {site.name}: {site.path}")
        return site

    def remove(self, names):
        for name in names:
            site = self.find(name)
            if site is None:
                sitestack.io.warn(f"Not a registered site: {name}")
                continue
            self.sites.remove(site)
            self.modified = True
            sitestack.io.info(f"Deregistered site {name}")

    def save(self):
        try:
            os.makedirs(os.path.dirname(os.path.abspath(self.sites_file)))
        except OSError as exc:
            if exc.errno != errno.EEXIST:
                raise
        with open(self.sites_file, "w") as sites_fh:
            safe_dump({"sites": [site.model_dump() for site in self.sites]}, sites_fh, default_flow_style=False, sort_keys=False)
        self.modified = False
        sitestack.io.debug(f"Saved site registry: {self.sites_file}")
