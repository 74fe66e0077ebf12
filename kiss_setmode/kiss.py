"""KISS command codes and frame assembly."""
import enum
from typing import Union

from . import util
from .constants import FEND

__author__ = "kiss-setmode Contributors"
__copyright__ = "Copyright 2024 kiss-setmode Contributors"
__license__ = "Apache License, Version 2.0"


class Command(enum.Enum):
    """
    KISS Command Codes

    http://en.wikipedia.org/wiki/KISS_(TNC)#Command_Codes
    """

    DATA_FRAME = b"\x00"
    TX_DELAY = b"\x01"
    PERSISTENCE = b"\x02"
    SLOT_TIME = b"\x03"
    TX_TAIL = b"\x04"
    FULL_DUPLEX = b"\x05"
    SET_HARDWARE = b"\x06"
    RETURN = b"\xFF"


def _as_bytes(value: Union[Command, bytes, int]) -> bytes:
    if isinstance(value, Command):
        return value.value
    # Do the reasonable thing if a user passes an int
    if isinstance(value, int):
        return bytes([value])
    return bytes(value)


def build_frame(
    command: Union[Command, bytes, int],
    payload: Union[bytes, bytearray, int] = b"",
) -> bytes:
    """
    Wrap a payload in a KISS frame.

    :param command: KISS Command Code, as enum, int or a single byte
    :param payload: bytes to send with the command; an int is sent as one byte
    :return: FEND, command, escaped payload, FEND
    """
    command = _as_bytes(command)
    if len(command) != 1:
        raise ValueError("command must be a single byte (actual={!r})".format(command))
    frame_escaped = util.escape_special_codes(_as_bytes(payload))
    return b"".join([FEND, command, frame_escaped, FEND])
