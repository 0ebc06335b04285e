import pytest
from pydantic import ValidationError

from sitestack.state import (
    ALL_COMPONENTS,
    CommandType,
    Component,
    Site,
    STACK_COMMANDS,
    stack_command,
    StackFlags,
)


def test_restart_defined_for_every_component():
    for component in ALL_COMPONENTS:
        assert STACK_COMMANDS[(component, CommandType.restart)] == ("restart", component.value)


def test_reload_matrix():
    assert stack_command(("docker-compose",), Component.nginx, CommandType.reload).argv == (
        "docker-compose", "exec", "-T", "nginx", "bash", "-c", "nginx -t && nginx -s reload")
    assert stack_command(("docker-compose",), Component.php, CommandType.reload).argv == (
        "docker-compose", "exec", "-T", "php", "bash", "-c", "kill -USR2 1")
    assert stack_command(("docker-compose",), Component.db, CommandType.reload) is None


def test_stack_command_accepts_values():
    command = stack_command(("docker", "compose"), "db", "restart")
    assert command.argv == ("docker", "compose", "restart", "db")
    assert str(command) == "docker compose restart db"


def test_all_is_not_a_component():
    with pytest.raises(ValueError):
        Component("all")
    with pytest.raises(ValidationError):
        StackFlags(components={"all"})


def test_flags_from_options():
    flags = StackFlags.from_options(db=True, nginx=True, yes=True)
    assert flags.components == {Component.nginx, Component.db}
    assert flags.ordered_components == (Component.nginx, Component.db)
    assert flags.yes
    assert not flags.all
    assert StackFlags.from_options().ordered_components == ()


def test_gerund():
    assert CommandType.reload.gerund == "reloading"
    assert CommandType.restart.gerund == "restarting"


def test_site_is_immutable():
    site = Site(name="example.com", path="/srv/example.com")
    with pytest.raises(ValidationError):
        site.name = "example.org"


def test_site_requires_name():
    with pytest.raises(ValidationError):
        Site(name="  ", path="/srv/example.com")


@pytest.mark.parametrize("name", [" a.example", "a.example ", "a.example\n"])
def test_site_name_surrounding_whitespace(name):
    with pytest.raises(ValidationError):
        Site(name=name, path="/srv/a.example")
