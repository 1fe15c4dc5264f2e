# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from .config import (
    DiffConfig, PathContext, object_hash_from_keys, property_filter_excluding,
)
from .generic import diff

__all__ = [
    "diff", "DiffConfig", "PathContext",
    "object_hash_from_keys", "property_filter_excluding",
]
