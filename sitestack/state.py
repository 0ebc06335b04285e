""" Classes to represent sites, their stacks and the operations run against them.
"""
import enum
import shlex
from typing import FrozenSet, Optional, Tuple

from pydantic import BaseModel, ConfigDict, field_validator


class Component(str, enum.Enum):
    """A member of a site's stack. The value is the compose service name."""
    nginx = "nginx"
    php = "php"
    db = "db"


ALL_COMPONENTS = tuple(Component)


class CommandType(str, enum.Enum):
    reload = "reload"
    restart = "restart"

    @property
    def gerund(self):
        return f"{self.value}ing"


class Site(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    path: str

    @field_validator("name", "path")
    @classmethod
    def _not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("must not be empty")
        return v

    @field_validator("name")
    @classmethod
    def _no_surrounding_whitespace(cls, v: str) -> str:
        # names are matched verbatim against the command line
        if v != v.strip():
            raise ValueError("must not start or end with whitespace")
        return v


class StackFlags(BaseModel):
    """Component selection from the command line.

    ``all`` is kept apart from ``components``: it both selects every site (when no site name is given) and expands to
    every component, and is never itself something to restart.
    """
    model_config = ConfigDict(frozen=True)

    components: FrozenSet[Component] = frozenset()
    all: bool = False
    yes: bool = False

    @classmethod
    def from_options(cls, nginx=False, php=False, db=False, all=False, yes=False):
        selected = {Component.nginx: nginx, Component.php: php, Component.db: db}
        return cls(components=frozenset(c for c, on in selected.items() if on), all=all, yes=yes)

    @property
    def ordered_components(self) -> Tuple[Component, ...]:
        return tuple(c for c in ALL_COMPONENTS if c in self.components)


class OperationRequest(BaseModel):
    model_config = ConfigDict(frozen=True)

    site: Site
    component: Component
    command_type: CommandType


class StackCommand(BaseModel):
    """An engine command as an argument vector, run from the site's directory."""
    model_config = ConfigDict(frozen=True)

    argv: Tuple[str, ...]

    def __str__(self):
        return shlex.join(self.argv)


# arguments appended to the compose command for each (component, command type), absent pairs have no operation
STACK_COMMANDS = {
    (Component.nginx, CommandType.restart): ("restart", "nginx"),
    (Component.php, CommandType.restart): ("restart", "php"),
    (Component.db, CommandType.restart): ("restart", "db"),
    (Component.nginx, CommandType.reload): ("exec", "-T", "nginx", "bash", "-c", "nginx -t && nginx -s reload"),
    (Component.php, CommandType.reload): ("exec", "-T", "php", "bash", "-c", "kill -USR2 1"),
}


def stack_command(compose_argv, component, command_type) -> Optional[StackCommand]:
    args = STACK_COMMANDS.get((Component(component), CommandType(command_type)))
    if args is None:
        return None
    return StackCommand(argv=tuple(compose_argv) + args)
