#!/usr/bin/env python
# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.
from setuptools import setup, find_packages
import pathlib
import re

HERE = pathlib.Path(__file__).parent.absolute()

JSONDELTA_PATH = HERE / "jsondelta"


def get_version(path):
    "Read __version__ from a file without importing the package."
    with open(path) as f:
        match = re.search(r'^__version__ = "([^"]+)"', f.read(), re.M)
    return match.group(1)


VERSION = get_version(JSONDELTA_PATH / '_version.py')

with open(HERE / 'README.md') as f:
    LONG_DESCRIPTION = f.read()


if __name__ == '__main__':
    setup(
      name="jsondelta",
      version=VERSION,
      description="Compute ordered RFC 6902 style patches between json values",
      long_description=LONG_DESCRIPTION,
      long_description_content_type="text/markdown",
      license="BSD",
      python_requires=">=3.8",
      packages=find_packages(),
      package_data={
          "jsondelta": ["*.schema.json"],
          "jsondelta.tests": ["files/*.json"],
      },
      install_requires=[
          "colorama",
          "jupyter_core",
          "traitlets>=5",
      ],
      extras_require={
          "test": [
              "jsonschema",
              "pytest>=6.0",
          ],
      },
      entry_points={
          "console_scripts": [
              "jsondelta = jsondelta.__main__:main_dispatch",
              "jsondiff = jsondelta.jsondiffapp:main",
          ],
      },
      classifiers=[
          "License :: OSI Approved :: BSD License",
          "Programming Language :: Python :: 3",
      ],
    )
