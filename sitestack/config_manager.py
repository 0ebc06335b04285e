""" Load sitestack settings from a config file, the environment and command line overrides.
"""
import logging
import os

from pydantic import ValidationError
from yaml import safe_load, YAMLError

import sitestack.io
from sitestack.settings import Settings

log = logging.getLogger(__name__)

CONFIG_SECTION = "sitestack"
# options holding paths, relative values are relative to the config file that sets them
PATH_OPTIONS = ("sites_file", "log_file")


def load_config_file(config_file):
    with open(config_file) as config_fh:
        try:
            config_dict = safe_load(config_fh)
        except YAMLError as exc:
            sitestack.io.error(f"Failed to parse config: {config_file}")
            sitestack.io.exception(str(exc))

    if type(config_dict) is not dict or CONFIG_SECTION not in config_dict:
        sitestack.io.exception(f"Config file does not look like a valid sitestack configuration file: {config_file}")

    settings_dict = config_dict[CONFIG_SECTION] or {}
    if type(settings_dict) is not dict:
        sitestack.io.exception(f"The `{CONFIG_SECTION}` section must be a mapping: {config_file}")

    for option in PATH_OPTIONS:
        value = settings_dict.get(option)
        if value and not os.path.isabs(value):
            settings_dict[option] = os.path.abspath(os.path.join(os.path.dirname(config_file), value))
    sitestack.io.debug(f"Loaded settings from config file: {config_file}")
    return settings_dict


def load_settings(config_file=None, **overrides):
    """Settings from defaults, then environment, then ``config_file``, then non-None ``overrides``."""
    settings_dict = {}
    if config_file:
        settings_dict.update(load_config_file(config_file))
    settings_dict.update({k: v for k, v in overrides.items() if v is not None})
    try:
        settings = Settings(**settings_dict)
    except ValidationError as exc:
        # suppress the traceback and just report the error
        sitestack.io.exception(str(exc))
    log.debug("settings: %s", settings.model_dump())
    return settings
