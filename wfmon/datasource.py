"""Network table and per-network time series fed from decoded frames."""

from __future__ import annotations

import queue
import threading
from typing import Callable, Dict, List, Optional, Tuple

from wfmon.netdata import QUALITY_KEY, RSSI_KEY, Key, Network, QualityConverter, table_slice
from wfmon.timeseries import TimeSeries, empty_series
from wfmon.wifi import (
    MgmtFrame,
    SecondaryChannelOffset,
    get_band_by_chan,
    get_channel_width,
    get_channel_width_operation,
)

DEFAULT_TIME_SERIES_SIZE = 200

FieldSeries = Callable[[str], TimeSeries]
VendorLookup = Callable[[str], Tuple[str, str]]


def _no_vendor(bssid: str) -> Tuple[str, str]:
    return "", ""


def _int8(value: int) -> int:
    return ((value + 128) & 0xFF) - 128


def _mac_text(addr: bytes) -> str:
    return ":".join(f"{b:02x}" for b in addr)


class EmptyProvider:
    """Provider that knows no networks and no measurements."""

    def networks(self) -> List[Network]:
        return []

    def time_series(self, net_key: Key) -> FieldSeries:
        return lambda col_key: empty_series()


def network_from_frame(frame: MgmtFrame, lookup: VendorLookup = _no_vendor) -> Network:
    """Convert a management frame into a network record.

    ``lookup`` maps a BSSID string to the vendor's short and long names.
    """
    bssid = _mac_text(frame.bssid)
    rssi, noise = frame.rssi, frame.noise
    snr = _int8(rssi - noise)
    manuf, manuf_long = lookup(bssid)
    return Network(
        bssid=bssid,
        manuf=manuf,
        manuf_long=manuf_long,
        network_name=frame.ssid,
        channel=frame.channel,
        offset=SecondaryChannelOffset(frame.secondary_channel_offset & 0b11),
        frequency_center0=frame.channel_center_segment0,
        frequency_center1=frame.channel_center_segment1,
        channel_width=get_channel_width(frame),
        width_operation=get_channel_width_operation(frame.channel_width),
        band=get_band_by_chan(frame.channel),
        rssi=rssi,
        quality=QualityConverter(rssi=rssi, snr=snr).signal_quality(),
        noise=noise,
        snr=snr,
    )


class DataSource:
    """Keeps the latest record of every network and its signal history.

    Frames arrive on ``frames``; putting ``None`` on it marks the source closed.
    """

    def __init__(
        self,
        frames: "queue.Queue[Optional[MgmtFrame]]",
        lookup: VendorLookup = _no_vendor,
        poll_interval: float = 0.1,
    ) -> None:
        self._frames = frames
        self._lookup = lookup
        self._poll_interval = poll_interval
        self._table: Dict[Key, Network] = {}
        self._table_lock = threading.Lock()
        self._series: Dict[Key, Dict[str, TimeSeries]] = {}
        self._series_lock = threading.Lock()
        self._stopped = threading.Event()

    def start(self) -> None:
        """Consume frames until stopped.

        Raises EOFError when the frame source is closed.
        """
        while not self._stopped.is_set():
            try:
                frame = self._frames.get(timeout=self._poll_interval)
            except queue.Empty:
                continue
            if frame is None:
                raise EOFError("frames source closed, stopping updating table")
            self.add(network_from_frame(frame, self._lookup))

    def stop(self) -> None:
        """Make :meth:`start` return."""
        self._stopped.set()

    def _add_metric(self, net_key: Key, field_key: str, value: float) -> None:
        with self._series_lock:
            fields = self._series.setdefault(net_key, {})
            series = fields.get(field_key, TimeSeries(DEFAULT_TIME_SERIES_SIZE))
            fields[field_key] = series.add(value)

    def add(self, network: Network) -> None:
        """Store ``network`` as the latest record for its key and record its signal."""
        with self._table_lock:
            key = network.key()
            self._table[key] = network
            self._add_metric(key, RSSI_KEY, float(network.rssi))
            self._add_metric(key, QUALITY_KEY, float(network.quality))

    def networks(self) -> List[Network]:
        """Return copies of all known networks."""
        with self._table_lock:
            return table_slice(self._table)

    def time_series(self, net_key: Key) -> FieldSeries:
        """Return a lookup from field key to a snapshot of that field's series."""
        with self._series_lock:
            fields = dict(self._series.get(net_key, {}))
        return lambda col_key: fields.get(col_key, empty_series()).copy()