"""
"""
import json

import jsonref
import yaml

from sitestack.config_manager import CONFIG_SECTION
from sitestack.settings import Settings


def settings_to_sample():
    schema = json.dumps(Settings.model_json_schema())
    # expand schema for easier processing
    data = jsonref.loads(schema)
    strings = [process_property(CONFIG_SECTION, data)]
    for key, value in data["properties"].items():
        strings.append(process_property(key, value, 1))
    concat = "\n".join(strings)
    return concat


def process_property(key, value, depth=0):
    extra_white_space = "  " * depth
    default = value.get("default", "")
    if default is None:
        default = ""
    if default != "":
        # make values more yaml-like.
        default = yaml.dump(default)
        if default.endswith("\n...\n"):
            default = default[: -(len("\n...\n"))]
        default = default.strip()
    description = "\n".join(f"{extra_white_space}# {desc}".rstrip() for desc in value["description"].strip().split("\n"))
    comment = "# "
    if key == CONFIG_SECTION:
        # the section key itself should not be commented
        comment = ""
    if default == "":
        value_sep = ""
    else:
        value_sep = " "
    return f"{description}\n{extra_white_space}{comment}{key}:{value_sep}{default}\n"
