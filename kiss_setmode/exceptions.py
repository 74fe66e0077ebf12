#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""Python KISS Set-Mode Exception Definitions."""

__author__ = "kiss-setmode Contributors"  # NOQA pylint: disable=R0801
__copyright__ = (
    "Copyright 2024 kiss-setmode Contributors"  # NOQA pylint: disable=R0801
)
__license__ = "Apache License, Version 2.0"  # NOQA pylint: disable=R0801


class SetModeError(Exception):
    """Base class for kiss-setmode errors."""

    pass


class ConfigurationError(SetModeError, ValueError):
    """Invalid or incomplete configuration, detected before any I/O."""

    pass


class KISSConnectionError(SetModeError, ConnectionError):
    """The TCP connection or serial port could not be opened."""

    pass


class TransmissionError(SetModeError, IOError):
    """Writing the frame failed, or fewer bytes than the frame were written."""

    pass
