# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

"""Reconciliation of two arrays into add/remove/replace/move operations.

Two strategies are available: by index, pairing elements at the same
position, and by hash, pairing elements with equal object hashes and
emitting move operations for elements that changed position.
"""

from ..log import MissingHashFunction, debug
from ..pointer import join_path
from ..utils import serialized_equal

from .config import PathContext, LEFT, RIGHT

__all__ = ["diff_arrays", "diff_arrays_by_index", "diff_arrays_by_hash", "ShadowOrder"]


class ShadowOrder(object):
    """Working copy of the order of matched element hashes.

    Tracks where each element sits after the add/remove operations
    of one array, and is reordered as move operations are emitted
    so that the indices of later moves account for earlier ones.
    """

    def __init__(self, hashes=()):
        self._hashes = list(hashes)

    def __len__(self):
        return len(self._hashes)

    def __iter__(self):
        return iter(self._hashes)

    def append(self, h):
        self._hashes.append(h)

    def index(self, h):
        return self._hashes.index(h)

    def move(self, current, target):
        "Remove the hash at index current and reinsert it at index target."
        self._hashes.insert(target, self._hashes.pop(current))


def _first_indices(hashes):
    "Map each hash to the index of its first occurrence."
    indices = {}
    for i, h in enumerate(hashes):
        indices.setdefault(h, i)
    return indices


def diff_arrays(a, b, path, builder, config, compare):
    """Append operations transforming array a into array b to builder.

    compare(x, y, path, builder, config) is called for element pairs
    that are kept, to surface differences inside them.
    """
    # If arrays are equal, no further comparison is required
    if serialized_equal(a, b):
        return

    if config.compare_arrays_by_hash:
        debug("Comparing arrays at %r by object hash", path or "/")
        diff_arrays_by_hash(a, b, path, builder, config, compare)
    else:
        debug("Comparing arrays at %r by index", path or "/")
        diff_arrays_by_index(a, b, path, builder, config, compare)


def diff_arrays_by_index(a, b, path, builder, config, compare):
    "Compare arrays position by position, without move detection."
    na, nb = len(a), len(b)

    # Index into the array as it looks after the operations so far
    index = 0
    for i in range(max(na, nb)):
        subpath = join_path(path, index)
        index += 1
        if i < na and i < nb:
            compare(a[i], b[i], subpath, builder, config)
        elif i < nb:
            builder.add(subpath, b[i])
        else:
            builder.remove(subpath)
            # Following items shift down by one
            index -= 1


def diff_arrays_by_hash(a, b, path, builder, config, compare):
    "Compare arrays by pairing elements with equal object hashes."
    object_hash = config.object_hash
    if not callable(object_hash):
        raise MissingHashFunction(
            "No object_hash function provided for array at %r" % (path or "/"))

    ahashes = [object_hash(value, PathContext(LEFT, path)) for value in a]
    bhashes = [object_hash(value, PathContext(RIGHT, path)) for value in b]
    bindices = _first_indices(bhashes)

    shadow = ShadowOrder()
    index = 0
    for i, h in enumerate(ahashes):
        subpath = join_path(path, index)
        index += 1
        j = bindices.get(h)
        if j is not None:
            # Element is kept, but may have changed internally
            compare(a[i], b[j], subpath, builder, config)
            shadow.append(h)
        else:
            builder.remove(subpath)
            index -= 1

    matched = set(shadow)
    for j, h in enumerate(bhashes):
        if h in matched:
            continue
        builder.add(join_path(path, index), b[j])
        index += 1
        shadow.append(h)

    if config.ignore_array_move:
        return

    # Moves are emitted after all other operations on this array,
    # walking target positions from the back
    for i in reversed(range(len(bhashes))):
        h = bhashes[i]
        target = bindices[h]
        current = shadow.index(h)
        if current != target:
            builder.move(join_path(path, current), join_path(path, target))
            shadow.move(current, target)
