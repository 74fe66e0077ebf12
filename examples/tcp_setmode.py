#!/usr/bin/env python3
"""
Store a mode to the flash of a TNC reachable over TCP.

The TNC must be bridged to a socket, e.g. by `socat` or a KISS TCP server
that passes SETHW frames through.
"""
import os

import kiss_setmode


KISS_HOST = os.environ.get("KISS_HOST", "localhost")
KISS_PORT = os.environ.get("KISS_PORT", "5001")
KISS_MODE = os.environ.get("KISS_MODE", "3")


def main():
    config = kiss_setmode.SetModeConfig(
        mode=int(KISS_MODE),
        persist=True,
        connection="tcp",
        host=KISS_HOST,
        port=int(KISS_PORT),
    )
    kiss_setmode.set_mode(config)


if __name__ == "__main__":
    main()
