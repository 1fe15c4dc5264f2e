# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from .log import PatchFormatError


class PatchOperation(dict):
    """For internal usage in jsondelta library.

    Minimal class providing attribute access to patch operation keys.
    Since `from` is a python keyword, the source path of move and copy
    operations can also be reached as `from_`.
    """
    def __getattr__(self, name):
        if name.startswith("__") and name.endswith("__"):
            return self.__getattribute__(name)
        if name == "from_":
            name = "from"
        try:
            return self[name]
        except KeyError:
            raise AttributeError(name)

    def __setattr__(self, name, value):
        if name == "from_":
            name = "from"
        self[name] = value


class PatchOp:
    "Collection of valid values for the op field in patch operations."
    ADD = "add"
    REMOVE = "remove"
    REPLACE = "replace"
    MOVE = "move"
    COPY = "copy"
    TEST = "test"


def op_add(path, value):
    "Create a patch operation inserting value at path."
    return PatchOperation(op=PatchOp.ADD, path=path, value=value)

def op_remove(path):
    "Create a patch operation deleting the value at path."
    return PatchOperation(op=PatchOp.REMOVE, path=path)

def op_replace(path, value):
    "Create a patch operation overwriting the value at path."
    return PatchOperation(op=PatchOp.REPLACE, path=path, value=value)

def op_move(from_path, path):
    "Create a patch operation relocating the value at from_path to path."
    return PatchOperation(op=PatchOp.MOVE, path=path, **{"from": from_path})

def op_copy(from_path, path):
    "Create a patch operation duplicating the value at from_path to path."
    return PatchOperation(op=PatchOp.COPY, path=path, **{"from": from_path})

def op_test(path, value):
    "Create a patch operation asserting that the value at path equals value."
    return PatchOperation(op=PatchOp.TEST, path=path, value=value)


class PatchBuilder(object):
    """Ordered accumulator for the operations of a patch.

    Operations are kept in the order they are appended, which
    is the order they must be applied in.
    """

    # Valid values for the op field of emitted operations
    OPS = (
        PatchOp.ADD,
        PatchOp.REMOVE,
        PatchOp.REPLACE,
        PatchOp.MOVE,
        )

    def __init__(self):
        self._patch = []

    def validated(self):
        return list(self._patch)

    def append(self, entry):
        # Simplifies some algorithms
        if entry is None:
            return

        # Typechecking (just for internal consistency checking)
        assert isinstance(entry, PatchOperation)
        assert "op" in entry
        assert entry.op in PatchBuilder.OPS
        assert isinstance(entry.get("path"), str)

        self._patch.append(entry)

    def add(self, path, value):
        self.append(op_add(path, value))

    def remove(self, path):
        self.append(op_remove(path))

    def replace(self, path, value):
        self.append(op_replace(path, value))

    def move(self, from_path, path):
        self.append(op_move(from_path, path))


def to_operation_dicts(patch):
    "Convert a patch of plain dicts (e.g. loaded from json) to PatchOperations."
    if not isinstance(patch, list):
        raise PatchFormatError("Patch must be a list, not '{}'.".format(type(patch).__name__))
    return [PatchOperation(e) for e in patch]


def is_valid_patch(patch):
    """Checks whether a patch (list of operations) is well formed.

    Returns a boolean indicating the well-formedness of the patch.
    """
    try:
        validate_patch(patch)
    except PatchFormatError:
        return False
    return True


def validate_patch(patch):
    """Check whether a patch (list of operations) is well formed.

    Raises a PatchFormatError if not well formed.
    """
    if not isinstance(patch, list):
        raise PatchFormatError("Patch must be a list.")
    for e in patch:
        validate_operation(e)


_ops_with_value = (PatchOp.ADD, PatchOp.REPLACE, PatchOp.TEST)
_ops_with_from = (PatchOp.MOVE, PatchOp.COPY)
_all_ops = (PatchOp.REMOVE,) + _ops_with_value + _ops_with_from


def validate_operation(e):
    """Check that e is a well formed patch operation.

    Raises a PatchFormatError if not well formed.
    """
    if not isinstance(e, PatchOperation):
        raise PatchFormatError("Patch operation '{}' is not a patch type.".format(e))

    op = e.get("op")
    if op not in _all_ops:
        raise PatchFormatError("Unknown patch op '{}'.".format(op))

    path = e.get("path")
    if not isinstance(path, str):
        raise PatchFormatError(
            "Invalid path '{}' of type '{}' in {} operation.".format(
                path, type(path), op))
    if path and not path.startswith("/"):
        raise PatchFormatError(
            "Path '{}' must be empty or start with '/'.".format(path))

    if op in _ops_with_value and "value" not in e:
        raise PatchFormatError("{} operation at '{}' needs a value.".format(op, path))

    if op in _ops_with_from:
        source = e.get("from")
        if not isinstance(source, str):
            raise PatchFormatError(
                "{} operation at '{}' needs a string 'from' path, not '{}'.".format(
                    op, path, source))

    # Note that the values are not checked in any way, as they
    # can in principle be arbitrary json objects
