# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import re
from collections import namedtuple

VersionInfo = namedtuple("VersionInfo", ["major", "minor", "micro", "releaselevel", "serial"])

_release_levels = {"a": "alpha", "b": "beta", "rc": "candidate", "": "final"}

__version__ = "0.3.0"

_version_pattern = re.compile(
    r"^(?P<major>\d+)\.(?P<minor>\d+)\.(?P<micro>\d+)"
    r"((?P<releaselevel>a|b|rc)(?P<serial>\d+))?$"
)


def parse_version(version):
    "Split a version string like '0.3.0rc1' into a VersionInfo tuple."
    match = _version_pattern.match(version)
    if match is None:
        raise ValueError("Invalid version string: %r" % (version,))
    groups = match.groupdict()
    level = groups["releaselevel"] or ""
    return VersionInfo(
        int(groups["major"]),
        int(groups["minor"]),
        int(groups["micro"]),
        _release_levels[level],
        int(groups["serial"] or 0),
    )


version_info = parse_version(__version__)
