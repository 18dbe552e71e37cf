"""Comparators that order network records by a table column."""

from __future__ import annotations

from typing import Any, Callable

from wfmon.compare import compare
from wfmon.netdata import Network

Sorter = Callable[[Network, Network], int]
"""Three-way comparison of two networks: negative, zero or positive."""


def by_key_sorter() -> Sorter:
    """Order networks by their key (SSID, then BSSID)."""

    def sorter(a: Network, b: Network) -> int:
        return a.key().compare(b.key())

    return sorter


def field_sorter(getter: Callable[[Network], Any]) -> Sorter:
    """Order networks by ``getter``; ties are broken by the network key."""

    def sorter(a: Network, b: Network) -> int:
        res = compare(getter(a), getter(b))
        if res == 0:
            res = a.key().compare(b.key())
        return res

    return sorter


def by_bssid_sorter() -> Sorter:
    """Order by BSSID."""
    return field_sorter(lambda n: n.bssid)


def by_manuf_sorter() -> Sorter:
    """Order by the vendor's short name."""
    return field_sorter(lambda n: n.manuf)


def by_manuf_long_sorter() -> Sorter:
    """Order by the vendor's full name."""
    return field_sorter(lambda n: n.manuf_long)


def by_ssid_sorter() -> Sorter:
    """Order by network name."""
    return field_sorter(lambda n: n.network_name)


def by_channel_sorter() -> Sorter:
    """Order by primary channel."""
    return field_sorter(lambda n: int(n.channel))


def by_channel_width_sorter() -> Sorter:
    """Order by channel width."""
    return field_sorter(lambda n: int(n.channel_width))


def by_band_sorter() -> Sorter:
    """Order by band."""
    return field_sorter(lambda n: int(n.band))


def by_rssi_sorter() -> Sorter:
    """Order by RSSI."""
    return field_sorter(lambda n: int(n.rssi))


def by_quality_sorter() -> Sorter:
    """Order by signal quality."""
    return field_sorter(lambda n: int(n.quality))


def by_noise_sorter() -> Sorter:
    """Order by noise level."""
    return field_sorter(lambda n: int(n.noise))


def by_snr_sorter() -> Sorter:
    """Order by signal-to-noise ratio."""
    return field_sorter(lambda n: int(n.snr))