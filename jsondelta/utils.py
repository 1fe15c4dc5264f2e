# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import codecs
from collections.abc import Mapping
import io
import json
import locale
import numbers
import os
import sys

if os.name == 'nt':
    EXPLICIT_MISSING_FILE = 'nul'
else:
    EXPLICIT_MISSING_FILE = '/dev/null'


# Python types accepted as json arrays
array_types = (list, tuple)


def read_json(f):
    """Read a json document from a filename or file-like object.

    The null filename ("/dev/null" on *nix, "nul" on Windows) stands
    for an empty document and reads as an empty dict.
    """
    if f == EXPLICIT_MISSING_FILE:
        return {}
    if isinstance(f, str):
        with io.open(f, encoding="utf-8") as fo:
            return json.load(fo)
    return json.load(f)


def is_json_array(x):
    return isinstance(x, array_types)


def is_json_object(x):
    return isinstance(x, Mapping)


def is_primitive(x):
    """Return True for values compared by value rather than structure.

    Anything that is not a json object or array counts, which makes
    non-json values degrade to a plain equality comparison.
    """
    return not isinstance(x, array_types) and not isinstance(x, Mapping)


def _is_number(x):
    return isinstance(x, numbers.Number) and not isinstance(x, bool)


def strict_equal(a, b):
    """Compare two values without cross-type coercion.

    Numbers compare by value (1 == 1.0), but booleans never equal
    numbers. Objects and arrays are only equal to themselves.
    """
    if not (is_primitive(a) and is_primitive(b)):
        return a is b
    if _is_number(a) and _is_number(b):
        return a == b
    return type(a) is type(b) and a == b


def serialized_equal(a, b):
    """Return True if a and b serialize to the same json text.

    Values that cannot be serialized are never considered equal here.
    """
    try:
        return json.dumps(a, allow_nan=False) == json.dumps(b, allow_nan=False)
    except (TypeError, ValueError):
        return False


def setup_std_streams():
    """Prepare sys.stdout/err for writing patches to a terminal.

    Unencodable characters are escaped instead of raising, and ANSI
    colour codes are translated by colorama on Windows.
    """
    if not os.getenv("PYTHONIOENCODING"):
        fallback = locale.getpreferredencoding() or "UTF-8"
        for name in ("stdout", "stderr"):
            stream = getattr(sys, name)
            if stream is not getattr(sys, "__%s__" % name):
                # Captured or redirected, leave alone
                continue
            errors = getattr(stream, "errors", None) or "strict"
            if errors == "strict" or errors.startswith("surrogate"):
                encoding = getattr(stream, "encoding", None) or fallback
                writer = codecs.getwriter(encoding)(stream.buffer, errors="backslashreplace")
                setattr(sys, name, writer)

    # colorama wraps the streams set up above
    if sys.platform.startswith("win"):
        import colorama
        colorama.init()
