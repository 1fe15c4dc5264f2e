# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from ._version import __version__

from .diffing import diff, DiffConfig, PathContext
from .log import JSONDeltaError, MissingHashFunction, PatchFormatError
from .patch_format import PatchOp, PatchOperation, validate_patch, is_valid_patch
from .pointer import path_info, PathInfo


__all__ = [
    "__version__",
    "diff", "DiffConfig", "PathContext",
    "PatchOp", "PatchOperation", "validate_patch", "is_valid_patch",
    "path_info", "PathInfo",
    "JSONDeltaError", "MissingHashFunction", "PatchFormatError",
    ]
