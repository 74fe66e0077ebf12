# -*- coding: utf-8 -*-
"""Python KISS Set-Mode Utility Functions Definitions."""
import logging

from . import constants

__author__ = "kiss-setmode Contributors"  # NOQA pylint: disable=R0801
__copyright__ = (
    "Copyright 2024 kiss-setmode Contributors"  # NOQA pylint: disable=R0801
)
__license__ = "Apache License, Version 2.0"  # NOQA pylint: disable=R0801


def escape_special_codes(raw_codes):
    """
    Escape special codes, per KISS spec.

    "If the FEND or FESC codes appear in the data to be transferred, they
    need to be escaped. The FEND code is then sent as FESC, TFEND and the
    FESC is then sent as FESC, TFESC."
    - http://en.wikipedia.org/wiki/KISS_(TNC)#Description
    """
    # FESC first, otherwise the FESC of an escaped FEND gets escaped again
    return bytes(raw_codes).replace(constants.FESC, constants.FESC_TFESC).replace(
        constants.FEND,
        constants.FESC_TFEND,
    )


def getLogger(name):
    """
    Get a logger hooked up with the appropriate levels and outputs.
    """
    logger = logging.getLogger(name)

    if not logger.handlers:
        logger.setLevel(constants.LOG_LEVEL)
        console_handler = logging.StreamHandler()
        console_handler.setLevel(constants.LOG_LEVEL)
        console_handler.setFormatter(constants.LOG_FORMAT)
        logger.addHandler(console_handler)
    return logger


def set_log_level(level, prefix="kiss_setmode"):
    """Change the level of every logger (and handler) under `prefix`."""
    for name, logger in list(logging.root.manager.loggerDict.items()):
        if not isinstance(logger, logging.Logger):
            continue
        if name == prefix or name.startswith(prefix + "."):
            logger.setLevel(level)
            for handler in logger.handlers:
                handler.setLevel(level)
