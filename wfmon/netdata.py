"""Aggregated network records, keys and signal quality."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from typing import Dict, List

from wfmon.compare import compare
from wfmon.wifi import Band, ChannelWidthOperation, SecondaryChannelOffset

SSID_KEY = "Network"
BSSID_KEY = "BSSID"
MANUF_KEY = "Manuf"
MANUF_LONG_KEY = "Manufactor"
CHAN_KEY = "Chan"
WIDTH_KEY = "Width"
BAND_KEY = "Band"
RSSI_KEY = "RSSI"
QUALITY_KEY = "Quality"
BARS_KEY = "Bars"
NOISE_KEY = "Noise"
SNR_KEY = "SNR"


@dataclass(frozen=True)
class Key:
    """Unique key of a network in the table."""

    bssid: str = ""
    network_name: str = ""

    def compare(self, other: "Key") -> int:
        """Order by SSID then BSSID; networks without an SSID sort last."""
        if not self.network_name and not other.network_name:
            return compare(self.bssid, other.bssid)
        if not self.network_name:
            return 1
        if not other.network_name:
            return -1
        res = compare(self.network_name, other.network_name)
        if res == 0:
            res = compare(self.bssid, other.bssid)
        return res


@dataclass
class Network:
    """Aggregated data about one station."""

    bssid: str = ""
    manuf: str = ""
    manuf_long: str = ""
    network_name: str = ""
    channel: int = 0
    offset: SecondaryChannelOffset = SecondaryChannelOffset.SCN
    frequency_center0: int = 0
    frequency_center1: int = 0
    channel_width: int = 0  # MHz
    width_operation: ChannelWidthOperation = ChannelWidthOperation.W20_OR_40
    band: Band = Band.UNKNOWN
    rssi: int = 0  # dBm
    quality: int = 0  # percent
    noise: int = 0  # dBm
    snr: int = 0  # dB

    def key(self) -> Key:
        return Key(self.bssid, self.network_name)


def _trunc_div(a: int, b: int) -> int:
    q = abs(a) // abs(b)
    return q if (a >= 0) == (b >= 0) else -q


@dataclass(frozen=True)
class QualityConverter:
    """Derives a 0-100 signal quality from RSSI and SNR."""

    rssi: int = 0
    snr: int = 0

    def signal_quality(self) -> int:
        """Return signal quality in percent, based on RSSI."""
        return self._quad_rssi()

    def _quad_rssi(self) -> int:
        perfect, worst = -20, -85
        span = (perfect - worst) * (perfect - worst)
        delta = perfect - self.rssi
        numerator = 100 * span - delta * (15 * (perfect - worst) + 62 * delta)
        quality = _trunc_div(numerator, span)
        if quality > 100:
            return 100
        if quality < 1:
            return 0
        return quality

    def linear_snr(self) -> int:
        """Return signal quality in percent from a linear SNR model."""
        if self.snr < 0:
            return 0
        return ((5 * self.snr) // 2) & 0xFF


def format_quality(quality: int) -> str:
    """Return quality as a percentage string."""
    return f"{quality}%"


def table_slice(table: Dict[Key, Network]) -> List[Network]:
    """Return copies of all networks held in a table."""
    return [dataclasses.replace(network) for network in table.values()]