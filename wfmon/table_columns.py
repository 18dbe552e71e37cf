"""The Wi-Fi table's columns, default sorting, cell text and signal fields."""

from __future__ import annotations

import logging
from typing import Callable, Dict, List, NamedTuple

from wfmon.columns import Column, ColumnSort, MultipleColumn, Order, SimpleColumn
from wfmon.netdata import (
    BAND_KEY,
    BARS_KEY,
    BSSID_KEY,
    CHAN_KEY,
    MANUF_KEY,
    MANUF_LONG_KEY,
    NOISE_KEY,
    QUALITY_KEY,
    RSSI_KEY,
    SNR_KEY,
    SSID_KEY,
    WIDTH_KEY,
    Network,
    format_quality,
)
from wfmon.sorting import (
    Sorter,
    by_band_sorter,
    by_bssid_sorter,
    by_channel_sorter,
    by_channel_width_sorter,
    by_manuf_long_sorter,
    by_manuf_sorter,
    by_noise_sorter,
    by_quality_sorter,
    by_rssi_sorter,
    by_snr_sorter,
    by_ssid_sorter,
)
from wfmon.wifi import ChannelWidthOperation

_log = logging.getLogger("wfmon")

HASH_KEY = "#"
MANUFACTOR_KEY = MANUF_LONG_KEY

# Positions of the swappable columns in default_columns().
STATION_COLUMN_IDX = 2
SIGNAL_COLUMN_IDX = 6


class _SignalField(NamedTuple):
    key: str
    min_val: float
    max_val: float


def widths() -> Dict[str, int]:
    """Return the width of every simple column."""
    return {
        HASH_KEY: 2,
        SSID_KEY: 20,
        BSSID_KEY: 20,
        MANUF_KEY: 10,
        MANUFACTOR_KEY: 30,
        CHAN_KEY: 7,
        WIDTH_KEY: 8,
        BAND_KEY: 7,
        RSSI_KEY: 7,
        QUALITY_KEY: 10,
        BARS_KEY: 7,
        NOISE_KEY: 8,
        SNR_KEY: 5,
    }


_SORTERS: Dict[str, Callable[[], Sorter]] = {
    HASH_KEY: by_ssid_sorter,
    SSID_KEY: by_ssid_sorter,
    BSSID_KEY: by_bssid_sorter,
    MANUF_KEY: by_manuf_sorter,
    MANUFACTOR_KEY: by_manuf_long_sorter,
    CHAN_KEY: by_channel_sorter,
    WIDTH_KEY: by_channel_width_sorter,
    BAND_KEY: by_band_sorter,
    RSSI_KEY: by_rssi_sorter,
    QUALITY_KEY: by_quality_sorter,
    BARS_KEY: by_quality_sorter,
    NOISE_KEY: by_noise_sorter,
    SNR_KEY: by_snr_sorter,
}


def _column(key: str) -> SimpleColumn:
    column = SimpleColumn(key, widths()[key]).with_sorter(_SORTERS[key]())
    if key == SSID_KEY:
        column = column.with_align("left")
    return column


def simple_columns() -> Dict[str, SimpleColumn]:
    """Return every known simple column by key."""
    return {key: _column(key) for key in widths()}


def default_columns() -> List[Column]:
    """Return the table's columns in display order."""
    return [
        _column(HASH_KEY),
        _column(SSID_KEY),
        MultipleColumn((_column(BSSID_KEY), _column(MANUF_KEY), _column(MANUFACTOR_KEY))),
        _column(CHAN_KEY),
        _column(WIDTH_KEY),
        _column(BAND_KEY),
        MultipleColumn((_column(BARS_KEY), _column(RSSI_KEY), _column(QUALITY_KEY))),
        _column(NOISE_KEY),
        _column(SNR_KEY),
    ]


def sort_by(key: str, order: Order) -> ColumnSort:
    """Return a sort by column ``key``; unknown keys sort like the SSID column."""
    columns = simple_columns()
    column = columns.get(key)
    if column is None:
        _log.warning("column key %s not found to sort table, using default %s", key, SSID_KEY)
        column = columns[SSID_KEY]
    return ColumnSort(key, column.sorter).with_order(order)


def default_sort() -> ColumnSort:
    """Return the table's initial sort: strongest signal first."""
    return sort_by(BARS_KEY, Order.DESC)


def bars(quality: int) -> str:
    """Return signal quality drawn as four bars."""
    if quality >= 80:
        return "▂▄▆█"
    if quality >= 60:
        return "▂▄▆▁"
    if quality >= 40:
        return "▂▄▁▁"
    if quality >= 20:
        return "▂▁▁▁"
    return "▁▁▁▁"


def bars_color(quality: int) -> str:
    """Return the hex colour the bars of ``quality`` are drawn in."""
    if quality >= 80:
        return "#77dd77"
    if quality >= 60:
        return "#a7c7e7"
    if quality >= 40:
        return "#ffb347"
    return "#ff6961"


def _width_text(network: Network) -> str:
    if network.width_operation == ChannelWidthOperation.W80_AND_80:
        return str(ChannelWidthOperation.W80_AND_80)
    return str(int(network.channel_width))


_CELLS: Dict[str, Callable[[Network], str]] = {
    HASH_KEY: lambda n: "█",
    SSID_KEY: lambda n: n.network_name,
    BSSID_KEY: lambda n: n.bssid,
    MANUF_KEY: lambda n: n.manuf,
    MANUFACTOR_KEY: lambda n: n.manuf_long,
    CHAN_KEY: lambda n: str(int(n.channel)),
    WIDTH_KEY: _width_text,
    BAND_KEY: lambda n: n.band.frequency_range(),
    RSSI_KEY: lambda n: str(int(n.rssi)),
    QUALITY_KEY: lambda n: format_quality(n.quality),
    BARS_KEY: lambda n: bars(n.quality),
    NOISE_KEY: lambda n: str(int(n.noise)),
    SNR_KEY: lambda n: str(int(n.snr)),
}


def cell_text(network: Network, key: str) -> str:
    """Return the text of column ``key`` for ``network``; unknown columns are empty."""
    viewer = _CELLS.get(key)
    return viewer(network) if viewer is not None else ""


def rssi_field_msg() -> _SignalField:
    """Signal field for RSSI, in dBm."""
    return _SignalField(RSSI_KEY, -100.0, 0.0)


def quality_field_msg() -> _SignalField:
    """Signal field for quality, in percent."""
    return _SignalField(QUALITY_KEY, 0.0, 100.0)


def bars_field_msg() -> _SignalField:
    """Signal field for bars, which are drawn from quality."""
    return _SignalField(QUALITY_KEY, 0.0, 100.0)


def signal_field_msgs() -> Dict[str, _SignalField]:
    """Return the signal field shown for each signal column key."""
    return {
        RSSI_KEY: rssi_field_msg(),
        QUALITY_KEY: quality_field_msg(),
        BARS_KEY: bars_field_msg(),
    }