import socket
from typing import List, Optional

from attrs import define, field
import pytest

from kiss_setmode import setmode
from kiss_setmode.classes import AbstractKISS
from kiss_setmode.util import getLogger


__author__ = "kiss-setmode Contributors"  # NOQA pylint: disable=R0801
__copyright__ = (
    "Copyright 2024 kiss-setmode Contributors"  # NOQA pylint: disable=R0801
)
__license__ = "Apache License, Version 2.0"  # NOQA pylint: disable=R0801


logger = getLogger(__name__)


@define
class MockKISS(AbstractKISS):
    """In-memory KISS interface recording what happens to it."""

    short_by: int = field(default=0)
    write_error: Optional[Exception] = field(default=None)
    start_error: Optional[Exception] = field(default=None)
    frames: List[bytes] = field(factory=list)
    start_count: int = field(default=0)
    stop_count: int = field(default=0)
    events: List[tuple] = field(factory=list)
    _open: bool = field(default=False)

    @property
    def is_open(self) -> bool:
        return self._open

    def start(self, **kwargs) -> None:
        self.start_count += 1
        self.events.append(("start",))
        if self.start_error is not None:
            raise self.start_error
        self._open = True

    def stop(self) -> None:
        self.stop_count += 1
        self.events.append(("stop",))
        self._open = False

    def _write(self, frame: bytes) -> int:
        if self.write_error is not None:
            raise self.write_error
        self.frames.append(frame)
        self.events.append(("write", frame))
        return len(frame) - self.short_by


@pytest.fixture
def mock_kiss(monkeypatch):
    """Route `set_mode` to a MockKISS; returns the instance for inspection."""
    ki = MockKISS()
    monkeypatch.setattr(setmode, "create_transport", lambda config: ki)
    return ki


@pytest.fixture(autouse=True)
def settle_calls(monkeypatch):
    """Skip the post-write settle delay, recording the requested sleeps."""
    calls = []
    monkeypatch.setattr(setmode.time, "sleep", calls.append)
    return calls


@pytest.fixture
def tcp_server():
    """A listening socket on localhost that nothing has accepted yet."""
    server = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    server.bind(("127.0.0.1", 0))
    server.listen(1)
    server.settimeout(5)
    yield server
    server.close()


@pytest.fixture
def closed_tcp_port():
    """A localhost port with no listener, so connecting is refused."""
    sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    sock.bind(("127.0.0.1", 0))
    port = sock.getsockname()[1]
    sock.close()
    return port


def receive_all(server):
    """Accept one client on `server` and read until it disconnects."""
    conn, _ = server.accept()
    data = b""
    with conn:
        conn.settimeout(5)
        while True:
            chunk = conn.recv(64)
            if not chunk:
                break
            data += chunk
    logger.debug("received=%r", data)
    return data


def unescape(escaped_codes):
    """Reverse of `escape_special_codes`, for round-trip checks."""
    return escaped_codes.replace(b"\xDB\xDC", b"\xC0").replace(b"\xDB\xDD", b"\xDB")
