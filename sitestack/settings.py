import os
import shlex
from typing import Union

from pydantic import Field, field_validator
from pydantic_settings import (
    BaseSettings,
    SettingsConfigDict,
)
from typing_extensions import Annotated

DEFAULT_COMPOSE_COMMAND = "docker-compose"


def default_sites_file():
    config_home = os.environ.get("XDG_CONFIG_HOME") or os.path.join(os.path.expanduser("~"), ".config")
    return os.path.join(config_home, "sitestack", "sites.yml")


class Settings(BaseSettings):
    """
    Configuration for sitestack.
    Every option can also be set in the environment, e.g. ``SITESTACK_COMPOSE_COMMAND="docker compose"``.
    """
    model_config = SettingsConfigDict(
        case_sensitive=False,
        env_nested_delimiter=".",
        env_prefix="sitestack_",
        # Ignore unknown keys so a newer config file still works with an older sitestack.
        extra="ignore",
    )

    sites_file: str = Field(default_factory=default_sites_file, description="""
Path to the site registry, a YAML file with a ``sites`` list of ``name`` and ``path`` entries.
Defaults to ``$XDG_CONFIG_HOME/sitestack/sites.yml``.
""")
    compose_command: str = Field(DEFAULT_COMPOSE_COMMAND, description="""
Container orchestration command used to restart and reload stacks, run from each site's directory.
Set to ``docker compose`` to use the compose plugin instead of the standalone binary.
""")
    log_file: Annotated[Union[str, None], Field(description="""
Append a debug level record of every stack operation to this file. Default is no file log.
""")] = None

    @field_validator("compose_command", mode="after")
    @classmethod
    def _compose_command_not_empty(cls, value: str) -> str:
        if not shlex.split(value):
            raise ValueError("compose_command must not be empty")
        return value

    @property
    def compose_argv(self):
        return tuple(shlex.split(self.compose_command))
