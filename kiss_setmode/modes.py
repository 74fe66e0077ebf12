"""NinoTNC operating modes, as selected by the DIP switches or `SETHW`."""
from typing import Dict, Iterable, Optional

from attrs import define, field

__author__ = "kiss-setmode Contributors"
__copyright__ = "Copyright 2024 kiss-setmode Contributors"
__license__ = "Apache License, Version 2.0"


@define(frozen=True)
class Mode:
    """One row of the TNC mode table."""

    number: int
    baud: int
    bps: int
    modulation: str
    protocol: str
    usage: str
    bandwidth: str
    superseded_by: Optional[str] = field(default=None)

    @property
    def dip(self) -> str:
        """DIP switch positions selecting this mode."""
        return format(self.number, "04b")

    @property
    def legacy(self) -> bool:
        return self.superseded_by is not None

    def describe(self) -> str:
        text = "{} baud {} {} ({}, {})".format(
            self.baud, self.modulation, self.protocol, self.usage, self.bandwidth
        )
        if self.legacy:
            text += ", superseded by {}".format(self.superseded_by)
        return text


MODERN_MODES = (
    Mode(1, 19200, 19200, "4FSK", "IL2Pc", "FM", "25k"),
    Mode(3, 9600, 9600, "4FSK", "IL2Pc", "FM", "12.5k"),
    Mode(2, 9600, 9600, "GFSK", "IL2Pc", "FM", "25k"),
    Mode(5, 3600, 3600, "QPSK", "IL2Pc", "FM", "12.5k"),
    Mode(11, 1200, 2400, "QPSK", "IL2Pc", "SSB/FM", "2.4kHz"),
    Mode(10, 1200, 1200, "BPSK", "IL2Pc", "SSB/FM", "2.4kHz"),
    Mode(9, 300, 600, "QPSK", "IL2Pc", "SSB", "500Hz"),
    Mode(8, 300, 300, "BPSK", "IL2Pc", "SSB", "500Hz"),
    Mode(14, 300, 300, "AFSK", "IL2Pc", "SSB", "500Hz"),
)

LEGACY_MODES = (
    Mode(0, 9600, 9600, "GFSK", "AX.25", "FM", "25k", "9600 GFSK IL2P"),
    Mode(4, 4800, 4800, "GFSK", "IL2Pc", "FM", "12.5k", "9600 4FSK IL2Pc"),
    Mode(7, 1200, 1200, "AFSK", "IL2P", "FM", "12.5k", "4800 GFSK IL2Pc"),
    Mode(6, 1200, 1200, "AFSK", "AX.25", "FM", "12.5k", "1200 AFSK IL2P"),
    Mode(12, 300, 300, "AFSK", "AX.25", "SSB", "500Hz", "300 AFSK IL2P"),
    Mode(13, 300, 300, "AFSK", "IL2P", "SSB", "500Hz", "300 AFSK IL2Pc"),
)

MODES: Dict[int, Mode] = {m.number: m for m in MODERN_MODES + LEGACY_MODES}


def lookup(number: int) -> Optional[Mode]:
    """Return the table entry for a mode number, or None if it isn't listed."""
    return MODES.get(number)


def _rows(modes: Iterable[Mode], legacy: bool) -> Iterable[str]:
    if legacy:
        yield "  {:<8}{:<7}{:<7}{:<6}{:<7}{:<9}{:<21}{:<7}{}".format(
            "Mode", "DIP", "Baud", "bps", "Mod", "Proto", "Superseded by", "Usage", "BW"
        )
    else:
        yield "  {:<8}{:<7}{:<7}{:<6}{:<7}{:<9}{:<10}{}".format(
            "Mode", "DIP", "Baud", "bps", "Mod", "Proto", "Usage", "BW"
        )
    for m in modes:
        if legacy:
            yield "  {:<8}{:<7}{:<7}{:<6}{:<7}{:<9}{:<21}{:<7}{}".format(
                m.number, m.dip, m.baud, m.bps, m.modulation, m.protocol,
                m.superseded_by, m.usage, m.bandwidth,
            )
        else:
            yield "  {:<8}{:<7}{:<7}{:<6}{:<7}{:<9}{:<10}{}".format(
                m.number, m.dip, m.baud, m.bps, m.modulation, m.protocol,
                m.usage, m.bandwidth,
            )


def format_table() -> str:
    """Render the modern and legacy mode tables as plain text."""
    lines = ["Modern Modes:"]
    lines.extend(_rows(MODERN_MODES, legacy=False))
    lines.append("")
    lines.append("Legacy Modes:")
    lines.extend(_rows(LEGACY_MODES, legacy=True))
    return "\n".join(lines)
