import json
from collections import namedtuple

from ..utils import is_json_object


# Passed to object_hash and property_filter callbacks, identifying which
# input a value came from and the path of its container
PathContext = namedtuple("PathContext", ["side", "path"])

LEFT = "left"
RIGHT = "right"


class DiffConfig:
    """Set of callbacks/flags to pass around while diffing

    object_hash: callable (value, context) -> str. When given, arrays
        are reconciled by matching element hashes instead of positions.
    property_filter: callable (key, context) -> bool. Object keys for
        which it returns False are skipped on that side.
    ignore_array_move: suppress move operations for hashed arrays.
    """

    def __init__(self, *, object_hash=None, property_filter=None, ignore_array_move=False):
        self.object_hash = object_hash
        self.property_filter = property_filter
        self.ignore_array_move = bool(ignore_array_move)

    @property
    def compare_arrays_by_hash(self):
        return self.object_hash is not None

    def include_key(self, key, side, path):
        "Return True unless the property filter excludes key on side."
        if not callable(self.property_filter):
            return True
        return bool(self.property_filter(key, PathContext(side, path)))

    def __repr__(self):
        return "DiffConfig(object_hash=%r, property_filter=%r, ignore_array_move=%r)" % (
            self.object_hash, self.property_filter, self.ignore_array_move)


def object_hash_from_keys(keys):
    """Build an object_hash identifying array elements by the given keys.

    The first key present in an object element is used. Elements without
    any of the keys, and non-object elements, hash to their json text.
    """
    keys = list(keys)

    def object_hash(value, context):
        if is_json_object(value):
            for key in keys:
                if key in value:
                    return "%s:%s" % (key, json.dumps(value[key], sort_keys=True))
        return json.dumps(value, sort_keys=True, default=repr)
    return object_hash


def property_filter_excluding(keys):
    "Build a property_filter dropping the given keys on both sides."
    excluded = frozenset(keys)

    def property_filter(key, context):
        return key not in excluded
    return property_filter
