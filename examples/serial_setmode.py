#!/usr/bin/env python3
"""
Set the mode of a Serial TNC until it is power cycled.
"""
import os

import kiss_setmode


KISS_SERIAL = os.environ.get("KISS_SERIAL", "/dev/ttyACM0")
KISS_MODE = os.environ.get("KISS_MODE", "3")


def main():
    config = kiss_setmode.SetModeConfig(
        mode=int(KISS_MODE),
        connection="serial",
        serial_port=KISS_SERIAL,
    )
    kiss_setmode.set_mode(config)


if __name__ == "__main__":
    main()
