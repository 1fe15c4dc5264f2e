# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import logging


class JSONDeltaError(RuntimeError):
    pass


class MissingHashFunction(JSONDeltaError):
    """Raised when hash based array comparison is requested without
    a callable object hash."""
    pass


class PatchFormatError(ValueError):
    pass


LOG_FORMAT = '[%(levelname)1.1s %(module)s:%(lineno)d] %(message)s'


def init_logging(level=logging.INFO):
    """Configure root logging for a command line entry point.

    Warnings issued through the warnings module are routed to logging too.
    """
    logging.basicConfig(format=LOG_FORMAT, level=level)
    logging.captureWarnings(True)


def set_jsondelta_log_level(level, set_main=True):
    "Set level of the jsondelta logger, and of the root logger if set_main."
    logger.setLevel(level)
    if set_main:
        logging.getLogger().setLevel(level)


logger = logging.getLogger('jsondelta')

debug = logger.debug
info = logger.info
