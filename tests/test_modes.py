"""Tests for the TNC mode table."""
import pytest

from kiss_setmode import modes

__author__ = "kiss-setmode Contributors"
__copyright__ = "Copyright 2024 kiss-setmode Contributors"
__license__ = "Apache License, Version 2.0"


def test_all_dip_positions_listed():
    assert sorted(modes.MODES) == list(range(15))


@pytest.mark.parametrize("number,dip", ((1, "0001"), (11, "1011"), (14, "1110")))
def test_dip(number, dip):
    assert modes.lookup(number).dip == dip


def test_lookup_unknown():
    assert modes.lookup(15) is None
    assert modes.lookup(200) is None


def test_legacy():
    assert modes.lookup(0).legacy
    assert modes.lookup(0).superseded_by == "9600 GFSK IL2P"
    assert not modes.lookup(3).legacy


def test_describe():
    assert modes.lookup(3).describe() == "9600 baud 4FSK IL2Pc (FM, 12.5k)"
    assert modes.lookup(6).describe() == (
        "1200 baud AFSK AX.25 (FM, 12.5k), superseded by 1200 AFSK IL2P"
    )


def test_format_table():
    table = modes.format_table()
    lines = table.splitlines()
    assert lines[0] == "Modern Modes:"
    assert "Legacy Modes:" in lines
    assert lines[1].split() == ["Mode", "DIP", "Baud", "bps", "Mod", "Proto", "Usage", "BW"]
    assert lines[2].split() == ["1", "0001", "19200", "19200", "4FSK", "IL2Pc", "FM", "25k"]
    assert "  0       0000   9600   9600  GFSK   AX.25    9600 GFSK IL2P" in table
    assert len(lines) == 1 + 1 + 9 + 1 + 1 + 1 + 6
