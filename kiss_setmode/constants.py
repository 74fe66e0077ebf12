#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""Python KISS Set-Mode Constants."""

import logging

__author__ = "kiss-setmode Contributors"  # NOQA pylint: disable=R0801
__copyright__ = (
    "Copyright 2024 kiss-setmode Contributors"  # NOQA pylint: disable=R0801
)
__license__ = "Apache License, Version 2.0"  # NOQA pylint: disable=R0801


LOG_LEVEL = logging.INFO
LOG_FORMAT = logging.Formatter(
    "%(asctime)s kiss-setmode %(levelname)s %(name)s.%(funcName)s:%(lineno)d"
    " - %(message)s"
)

# KISS Special Characters
# http://en.wikipedia.org/wiki/KISS_(TNC)#Special_Characters
FEND = b"\xC0"
FESC = b"\xDB"
TFEND = b"\xDC"
TFESC = b"\xDD"

# "FEND is sent as FESC, TFEND"
FESC_TFEND = b"".join([FESC, TFEND])

# "FESC is sent as FESC, TFESC"
FESC_TFESC = b"".join([FESC, TFESC])

# Added to the mode number when it should only apply until the next power
# cycle. Persisted modes are sent unchanged.
VOLATILE_MODE_OFFSET = 16

# Baud rate the TNC accepts configuration commands on, regardless of the
# baud rate of the selected mode.
CONFIG_BAUDRATE = 57600

# Seconds to wait after writing, before the connection is torn down.
SETTLE_DELAY = 0.5

DEFAULT_CONNECTION = "serial"
DEFAULT_HOST = "127.0.0.1"
DEFAULT_TCP_PORT = 5001
DEFAULT_SERIAL_PORT = "/dev/ttyACM0"
