import os
from pathlib import Path

import pytest
import yaml

import sitestack.io
from sitestack.exceptions import ConfirmationDeclined
from sitestack.executor import CommandResult
from sitestack.orchestrator import StackOrchestrator
from sitestack.site_directory import SiteDirectory

SITE_NAMES = ("example.com", "example.org", "example.net")


class RecordingExecutor(object):
    """Stands in for the container engine, remembering each command and the directory it ran in."""

    def __init__(self, results=None):
        self.calls = []
        self.results = results or {}

    def run(self, command, cwd=None):
        self.calls.append((command.argv, os.getcwd()))
        return self.results.get(command.argv, CommandResult(0, ""))

    @property
    def argvs(self):
        return [argv for argv, _ in self.calls]


class Confirm(object):
    def __init__(self, answer=True):
        self.answer = answer
        self.prompts = []

    def __call__(self, prompt, flags):
        self.prompts.append(prompt)
        if not self.answer:
            raise ConfirmationDeclined()


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch, tmp_path):
    for var in list(os.environ):
        if var.upper().startswith("SITESTACK_"):
            monkeypatch.delenv(var)
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "xdg"))
    monkeypatch.setattr(sitestack.io, "DEBUG", False)
    # orchestration changes directory into each site
    monkeypatch.chdir(tmp_path)


@pytest.fixture()
def site_dirs(tmp_path):
    dirs = {}
    for name in SITE_NAMES:
        path = tmp_path / "sites" / name
        path.mkdir(parents=True)
        dirs[name] = path
    return dirs


@pytest.fixture()
def sites_file(tmp_path, site_dirs):
    path = tmp_path / "sites.yml"
    registry = {"sites": [{"name": name, "path": str(site_dirs[name])} for name in SITE_NAMES]}
    with open(path, "w") as fh:
        yaml.safe_dump(registry, fh, sort_keys=False)
    return path


@pytest.fixture()
def directory(sites_file):
    return SiteDirectory(sites_file)


@pytest.fixture()
def executor():
    return RecordingExecutor()


@pytest.fixture()
def confirm():
    return Confirm()


@pytest.fixture()
def orchestrator(directory, executor, confirm):
    return StackOrchestrator(directory, executor=executor, confirm=confirm)


@pytest.fixture()
def config_file(tmp_path):
    def _config_file(settings):
        path = Path(tmp_path) / "sitestack.yml"
        with open(path, "w") as fh:
            yaml.safe_dump({"sitestack": settings}, fh)
        return path
    return _config_file


@pytest.fixture()
def make_executor():
    return RecordingExecutor


@pytest.fixture()
def make_confirm():
    return Confirm
