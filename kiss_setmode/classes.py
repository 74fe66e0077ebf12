#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""Python KISS Set-Mode Transport Class Definitions."""

import abc
import socket
from types import TracebackType
from typing import Any, Optional, Type

from attrs import define, field
import serial

from . import constants, util
from .exceptions import KISSConnectionError, TransmissionError

__author__ = "kiss-setmode Contributors"  # NOQA pylint: disable=R0801
__copyright__ = (
    "Copyright 2024 kiss-setmode Contributors"  # NOQA pylint: disable=R0801
)
__license__ = "Apache License, Version 2.0"  # NOQA pylint: disable=R0801


@define
class AbstractKISS(abc.ABC):
    """
    Abstract KISS object: a write-only channel to a TNC.

    Use as a context manager; the channel is opened on enter and closed on
    exit, whether or not the body raised.
    """

    _logger = util.getLogger(__name__)  # pylint: disable=R0801

    def __enter__(self) -> "AbstractKISS":
        self.start()
        return self

    def __exit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc: Optional[BaseException],
        traceback: Optional[TracebackType],
    ) -> Optional[bool]:
        self.stop()
        return None

    @property
    @abc.abstractmethod
    def is_open(self) -> bool:
        """True between `start()` and `stop()`."""

    @abc.abstractmethod
    def start(self, **kwargs: Any) -> None:
        """
        Open the underlying connection.

        :raises KISSConnectionError: if it cannot be opened.
        """

    @abc.abstractmethod
    def stop(self) -> None:
        """
        Close the underlying connection. Safe to call more than once.
        """

    def close(self) -> None:
        """Alias of `stop()`."""
        self.stop()

    @abc.abstractmethod
    def _write(self, frame: bytes) -> int:
        """Hand the bytes to the open connection, return the count written."""

    def write(self, frame: bytes) -> int:
        """
        Writes frame to KISS interface.

        :param frame: Frame to write, already KISS encoded.
        :return: number of bytes written, which may be less than `len(frame)`.
        :raises TransmissionError: if the interface is not open.
        """
        if not self.is_open:
            raise TransmissionError("{!r} is not open".format(self))
        self._logger.debug("write frame=%r", frame)
        return self._write(bytes(frame))


@define
class TCPKISS(AbstractKISS):

    """KISS TCP Class."""

    host: str = field(default=constants.DEFAULT_HOST)
    port: int = field(default=constants.DEFAULT_TCP_PORT, converter=int)
    _socket: Optional[socket.socket] = field(default=None, init=False, repr=False)

    @property
    def address(self):
        return (self.host, self.port)

    @property
    def is_open(self) -> bool:
        return self._socket is not None

    def start(self, **kwargs: Any) -> None:
        """
        Connects to the KISS TCP server.

        :param **kwargs: passed to `socket.create_connection`.
        """
        address = "{}:{}".format(*self.address)
        try:
            self._socket = socket.create_connection(self.address, **kwargs)
        except OSError as exc:
            raise KISSConnectionError(
                "Unable to connect to {}: {}".format(address, exc)
            ) from exc
        self._logger.info("Connected to %s via TCP", address)

    def stop(self) -> None:
        if self._socket is not None:
            sock, self._socket = self._socket, None
            sock.close()
            self._logger.debug("Closed TCP connection to %s:%s", *self.address)

    def _write(self, frame: bytes) -> int:
        return self._socket.send(frame)


@define
class SerialKISS(AbstractKISS):

    """KISS Serial Class."""

    port: str = field(default=constants.DEFAULT_SERIAL_PORT)
    speed: int = field(default=constants.CONFIG_BAUDRATE, converter=int)
    _serial: Optional[serial.Serial] = field(default=None, init=False, repr=False)

    @property
    def is_open(self) -> bool:
        return self._serial is not None

    def start(self, **kwargs: Any) -> None:
        """
        Opens the serial device at 8N1.

        :param **kwargs: passed to `serial.Serial`.
        """
        try:
            self._serial = serial.Serial(
                port=self.port,
                baudrate=self.speed,
                bytesize=serial.EIGHTBITS,
                parity=serial.PARITY_NONE,
                stopbits=serial.STOPBITS_ONE,
                **kwargs
            )
        except (serial.SerialException, OSError, ValueError) as exc:
            raise KISSConnectionError(
                "Unable to open serial port {}: {}".format(self.port, exc)
            ) from exc
        self._logger.info("Opened serial port %s at %d baud", self.port, self.speed)

    def stop(self) -> None:
        if self._serial is not None:
            ser, self._serial = self._serial, None
            ser.close()
            self._logger.debug("Closed serial port %s", self.port)

    def _write(self, frame: bytes) -> int:
        written = self._serial.write(frame)
        self._serial.flush()
        return written
