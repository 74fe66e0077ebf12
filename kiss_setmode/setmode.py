"""Send a single KISS "set mode" command to a TNC."""
import enum
import time
from typing import Union

from attrs import define, field

from . import constants, kiss, modes, util
from .classes import AbstractKISS, SerialKISS, TCPKISS
from .exceptions import ConfigurationError, TransmissionError

__author__ = "kiss-setmode Contributors"
__copyright__ = "Copyright 2024 kiss-setmode Contributors"
__license__ = "Apache License, Version 2.0"


log = util.getLogger(__name__)


class Connection(enum.Enum):
    """How to reach the TNC."""

    TCP = "tcp"
    SERIAL = "serial"


def to_connection(value: Union[Connection, str]) -> Connection:
    if isinstance(value, Connection):
        return value
    try:
        return Connection(str(value).lower())
    except ValueError:
        raise ConfigurationError("Unknown connection type: {}".format(value)) from None


def mode_byte(mode: int, persist: bool) -> int:
    """
    The mode value as sent to the TNC.

    Persisted modes are stored to flash and sent as-is; otherwise
    VOLATILE_MODE_OFFSET is added and the mode lasts until power-off.
    """
    if persist:
        return mode
    return mode + constants.VOLATILE_MODE_OFFSET


def _to_mode(value) -> int:
    try:
        return int(value)
    except (TypeError, ValueError):
        raise ConfigurationError("mode must be an integer: {!r}".format(value)) from None


def _validate_mode(instance, attribute, value):
    if value == 0:
        raise ConfigurationError("mode is required and must be non-zero")
    if value < 0:
        raise ConfigurationError("mode must not be negative: {}".format(value))
    wire_value = mode_byte(value, instance.persist)
    if not 0 <= wire_value <= 0xFF:
        raise ConfigurationError(
            "mode {} does not fit in a byte when sent as {} (persist={})".format(
                value, wire_value, instance.persist
            )
        )


def _validate_persist(instance, attribute, value):
    if not isinstance(value, bool):
        raise ConfigurationError("persist must be True or False: {!r}".format(value))


def _validate_serial_port(instance, attribute, value):
    if instance.connection is Connection.SERIAL and not value:
        raise ConfigurationError("a serial port is required for serial connection")


@define(frozen=True, kw_only=True)
class SetModeConfig:
    """Resolved options for one set-mode command."""

    # 0 means "not supplied"
    mode: int = field(default=0, converter=_to_mode, validator=_validate_mode)
    persist: bool = field(default=False, validator=_validate_persist)
    connection: Connection = field(
        default=constants.DEFAULT_CONNECTION, converter=to_connection
    )
    host: str = field(default=constants.DEFAULT_HOST)
    port: int = field(default=constants.DEFAULT_TCP_PORT, converter=int)
    serial_port: str = field(
        default=constants.DEFAULT_SERIAL_PORT, validator=_validate_serial_port
    )


def create_transport(config: SetModeConfig) -> AbstractKISS:
    """Select the (unopened) KISS interface for `config.connection`."""
    if config.connection is Connection.TCP:
        return TCPKISS(host=config.host, port=config.port)
    elif config.connection is Connection.SERIAL:
        if not config.serial_port:
            raise ConfigurationError("a serial port is required for serial connection")
        return SerialKISS(port=config.serial_port, speed=constants.CONFIG_BAUDRATE)
    raise ConfigurationError("Unknown connection type: {!r}".format(config.connection))


def set_mode(config: SetModeConfig) -> bytes:
    """
    Build the set-mode frame and write it once to the configured TNC.

    The connection is closed on every path. After a successful write the
    TNC is given SETTLE_DELAY seconds before the connection goes away.

    :return: the frame that was written
    :raises ConfigurationError: the connection type is unusable
    :raises KISSConnectionError: the connection could not be opened
    :raises TransmissionError: the write failed or was short
    """
    value = mode_byte(config.mode, config.persist)
    frame = kiss.build_frame(kiss.Command.SET_HARDWARE, value)

    known = modes.lookup(config.mode)
    if known is not None:
        log.debug("mode %d: %s", config.mode, known.describe())

    with create_transport(config) as ki:
        try:
            written = ki.write(frame)
        except OSError as exc:
            raise TransmissionError("Error sending mode command: {}".format(exc)) from exc
        if written is None or written < len(frame):
            raise TransmissionError(
                "Error sending mode command: wrote {} of {} bytes".format(
                    written, len(frame)
                )
            )

        if config.persist:
            log.info("Sent KISS packet to set mode to %d (%d)", value, config.mode)
        else:
            log.info(
                "Sent KISS packet to set mode to %d (%d + %d)",
                value,
                config.mode,
                constants.VOLATILE_MODE_OFFSET,
            )

        time.sleep(constants.SETTLE_DELAY)

    return frame
