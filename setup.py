#!/usr/bin/env python
# -*- coding: utf-8 -*-
import ast
import os
import re

from setuptools import setup, find_packages


with open("README.rst") as file:
    long_description = file.read()

long_description += "\n\n"
with open("HISTORY.rst") as file:
    long_description += file.read()

with open(os.path.join("sitestack", "__init__.py")) as f:
    init_contents = f.read()

    def get_var(var_name):
        pattern = re.compile(r"%s\s+=\s+(.*)" % var_name)
        match = pattern.search(init_contents).group(1)
        return str(ast.literal_eval(match))

    version = get_var("__version__")

setup(
    name="sitestack",
    version=version,
    packages=find_packages(exclude=["tests", "tests.*"]),
    description="Command-line utility to restart and reload the container stacks of managed sites",
    long_description=long_description,
    long_description_content_type="text/x-rst",
    license="MIT",
    keywords="sitestack docker-compose nginx php",
    python_requires=">=3.8",
    install_requires=["Click", "pyyaml", "pydantic>=2", "pydantic-settings", "typing_extensions", "jsonref"],
    extras_require={"test": ["pytest"]},
    entry_points={"console_scripts": [
        "sitestack = sitestack.cli:sitestack",
    ]},
    classifiers=[
        "Intended Audience :: System Administrators",
        "License :: OSI Approved :: MIT License",
        "Natural Language :: English",
        "Operating System :: POSIX",
        "Programming Language :: Python :: 3",
    ],
    zip_safe=False,
)
