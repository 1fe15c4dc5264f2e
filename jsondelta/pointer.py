# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

"""Helpers for the '/'-separated paths used in patch operations.

Segments are joined verbatim: '/' and '~' inside object keys are not
escaped, so a key containing '/' yields a path with extra segments.
"""

from collections import namedtuple


PathInfo = namedtuple("PathInfo", ["segments", "length", "last"])


def join_path(path, key):
    "Append a key or array index to path, e.g. ('/a', 0) -> '/a/0'."
    return "%s/%s" % (path, key)


def path_info(path):
    """Split a patch path into its segments.

    The split is a plain split on '/', so the root-relative path '/a/b'
    gives segments ['', 'a', 'b'] with length 3 and last segment 'b',
    and the root path '' gives [''].
    """
    segments = path.split("/")
    length = len(segments)
    return PathInfo(segments, length, segments[length - 1])
