"""
kiss_setmode Python KISS TNC Mode Setter.
~~~~


:author: kiss-setmode Contributors
:copyright: Copyright 2024 kiss-setmode Contributors
:license: Apache License, Version 2.0
"""
from importlib_metadata import version

from .classes import AbstractKISS, SerialKISS, TCPKISS
from .exceptions import (
    ConfigurationError,
    KISSConnectionError,
    SetModeError,
    TransmissionError,
)
from .kiss import build_frame, Command
from .setmode import Connection, create_transport, mode_byte, set_mode, SetModeConfig

__author__ = "kiss-setmode Contributors"  # NOQA pylint: disable=R0801
__copyright__ = (
    "Copyright 2024 kiss-setmode Contributors"  # NOQA pylint: disable=R0801
)
__license__ = "Apache License, Version 2.0"  # NOQA pylint: disable=R0801
__distribution__ = "kiss-setmode"
__version__ = version(__distribution__)
__all__ = [
    "AbstractKISS",
    "build_frame",
    "Command",
    "ConfigurationError",
    "Connection",
    "create_transport",
    "KISSConnectionError",
    "mode_byte",
    "SerialKISS",
    "set_mode",
    "SetModeConfig",
    "SetModeError",
    "TCPKISS",
    "TransmissionError",
]
