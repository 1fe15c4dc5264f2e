# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from ..patch_format import PatchBuilder, validate_patch
from ..pointer import join_path
from ..utils import is_primitive, is_json_array, is_json_object, strict_equal

from .arrays import diff_arrays
from .config import DiffConfig, LEFT, RIGHT

__all__ = ["diff"]


# Sentinel to allow None as a value
Missing = object()


def diff(a, b, config=None, *, object_hash=None, property_filter=None,
         ignore_array_move=False):
    """Compute the patch transforming json-like value a into b.

    The result is a list of add/remove/replace/move operations which,
    applied in order to a, reproduce b. Either pass a DiffConfig, or
    the individual callbacks/flags as keyword arguments, not both.
    """
    if config is not None:
        if object_hash is not None or property_filter is not None or ignore_array_move:
            raise TypeError(
                "diff() takes either a config or object_hash/property_filter/"
                "ignore_array_move keyword arguments, not both")
    else:
        config = DiffConfig(
            object_hash=object_hash,
            property_filter=property_filter,
            ignore_array_move=ignore_array_move,
        )

    builder = PatchBuilder()
    diff_values(a, b, "", builder, config)
    p = builder.validated()

    # We can turn this off for performance after the library has been well tested:
    validate_patch(p)

    return p


def diff_values(a, b, path, builder, config):
    "Append operations transforming value a into b at path to builder."

    # Primitives are compared by value and never recursed into
    if is_primitive(a) or is_primitive(b):
        if not strict_equal(a, b):
            builder.replace(path, b)
        return

    if path == "" and is_json_array(a) and is_json_array(b):
        diff_arrays(a, b, "", builder, config, diff_values)
        return

    # Arrays below the root can't be merged with anything
    # but are replaced wholesale at this point
    if is_json_array(a) or is_json_array(b):
        builder.replace(path, b)
        return

    diff_dicts(a, b, path, builder, config)


def diff_dicts(a, b, path, builder, config):
    """Append operations transforming object a into b at path to builder.

    Keys of b are handled first, in b's order, then the keys only
    present in a are removed, in a's order. Keys rejected by the
    property filter for a side are ignored on that side.
    """
    for key in b:
        if not config.include_key(key, RIGHT, path):
            continue

        subpath = join_path(path, key)
        avalue = a.get(key, Missing)
        bvalue = b[key]

        if is_json_array(avalue) and is_json_array(bvalue):
            diff_arrays(avalue, bvalue, subpath, builder, config, diff_values)
        elif is_json_object(bvalue):
            if is_json_object(avalue):
                diff_dicts(avalue, bvalue, subpath, builder, config)
            elif avalue is not Missing:
                builder.replace(subpath, bvalue)
            else:
                builder.add(subpath, bvalue)
        elif avalue is Missing:
            builder.add(subpath, bvalue)
        elif not strict_equal(avalue, bvalue):
            builder.replace(subpath, bvalue)

    for key in a:
        if not config.include_key(key, LEFT, path):
            continue
        if key not in b:
            builder.remove(join_path(path, key))
