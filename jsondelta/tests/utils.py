# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import copy
import json

from jsondelta import diff, path_info
from jsondelta.patch_format import is_valid_patch


def _parent_and_key(doc, path):
    info = path_info(path)
    parent = doc
    for segment in info.segments[1:-1]:
        parent = parent[int(segment)] if isinstance(parent, list) else parent[segment]
    key = int(info.last) if isinstance(parent, list) else info.last
    return parent, key


def _get(doc, path):
    if path == "":
        return doc
    parent, key = _parent_and_key(doc, path)
    return parent[key]


def _add(doc, path, value):
    if path == "":
        return value
    parent, key = _parent_and_key(doc, path)
    if isinstance(parent, list):
        parent.insert(key, value)
    else:
        parent[key] = value
    return doc


def _remove(doc, path):
    parent, key = _parent_and_key(doc, path)
    del parent[key]
    return doc


def _replace(doc, path, value):
    if path == "":
        return value
    parent, key = _parent_and_key(doc, path)
    parent[key] = value
    return doc


def apply_patch(doc, patch):
    """Apply patch operations in order to a copy of doc.

    Only used to check generated patches in these tests.
    """
    doc = copy.deepcopy(doc)
    for e in patch:
        op = e["op"]
        if op == "add":
            doc = _add(doc, e["path"], copy.deepcopy(e["value"]))
        elif op == "remove":
            doc = _remove(doc, e["path"])
        elif op == "replace":
            doc = _replace(doc, e["path"], copy.deepcopy(e["value"]))
        elif op == "move":
            value = _get(doc, e["from"])
            doc = _remove(doc, e["from"])
            doc = _add(doc, e["path"], value)
        else:
            raise AssertionError("Unexpected op %r in generated patch" % op)
    return doc


def check_diff_and_patch(a, b, **kwargs):
    "Check that applying diff(a, b) to a reproduces b."
    p = diff(a, b, **kwargs)
    assert is_valid_patch(p)
    assert apply_patch(a, p) == b
    return p


def check_symmetric_diff_and_patch(a, b, **kwargs):
    "Check that applying diff(a, b) to a reproduces b and vice versa."
    check_diff_and_patch(a, b, **kwargs)
    check_diff_and_patch(b, a, **kwargs)


def hash_by_id(value, context):
    "Identify objects by their id, anything else by its json text."
    if isinstance(value, dict) and "id" in value:
        return str(value["id"])
    return json.dumps(value, sort_keys=True)
