"""Spectrum waves: how much of a band a network occupies and how strongly."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from typing import Callable, List, Protocol, Tuple

from wfmon.events import NetworksOnScreen
from wfmon.netdata import Key, Network
from wfmon.timeseries import TimeSeries
from wfmon.wifi import Band, ChannelWidthOperation, SecondaryChannelOffset

WAVE_20MHZ = 20  # width of a basic wave in MHz
WAVE_20MHZ_WIDTH = 4  # channels spanned by a 20 MHz wave
HALF_OF_WAVE_80MHZ_WIDTH_WITHOUT_CENTER = 6
HALF_OF_WAVE_160MHZ_WIDTH_WITHOUT_CENTER = 14
HALF_OF_WAVE_20MHZ_WIDTH = 2


class _SeriesProvider(Protocol):
    def time_series(self, net_key: Key) -> Callable[[str], TimeSeries]: ...


@dataclass
class Wave:
    """One network drawn on the spectrum."""

    key: Key = field(default_factory=Key)
    band: Band = Band.UNKNOWN
    value: float = 0.0  # RSSI or quality
    channel: int = 0  # primary channel
    sign: int = 0  # HT secondary channel: +1 above, -1 below
    center: Tuple[int, int] = (0, 0)  # VHT segment centres
    width_operation: ChannelWidthOperation = ChannelWidthOperation.W20_OR_40
    width: int = 0  # count of 20 MHz channels
    color: str = ""

    def _ht_edge(self) -> int:
        return (self.channel + self.sign * WAVE_20MHZ_WIDTH * (self.width - 1)) & 0xFF

    def lower_channel(self) -> int:
        """Return the lowest channel number the wave covers."""
        if self.center[0] == 0:
            return min(self.channel, self._ht_edge())
        if self.width_operation in (ChannelWidthOperation.W80, ChannelWidthOperation.W80_AND_80):
            return min(self.channel, (self.center[0] - HALF_OF_WAVE_80MHZ_WIDTH_WITHOUT_CENTER) & 0xFF)
        if self.width_operation is ChannelWidthOperation.W160:
            return min(self.channel, (self.center[0] - HALF_OF_WAVE_160MHZ_WIDTH_WITHOUT_CENTER) & 0xFF)
        return min(self.channel, self._ht_edge())


_SIGNS = {SecondaryChannelOffset.SCA: 1, SecondaryChannelOffset.SCB: -1}


def wave_from_network(network: Network, field_key: str, provider: _SeriesProvider) -> Wave:
    """Build the wave of ``network`` valued by the newest ``field_key`` sample."""
    key = network.key()
    last = provider.time_series(key)(field_key).last()
    return Wave(
        key=key,
        band=network.band,
        value=last if last is not None else 0.0,
        channel=network.channel,
        sign=_SIGNS.get(network.offset, 0),
        center=(network.frequency_center0, network.frequency_center1),
        width_operation=network.width_operation,
        width=(network.channel_width // WAVE_20MHZ) & 0xFF,
    )


def waves_from_screen(
    msg: NetworksOnScreen, field_key: str, provider: _SeriesProvider
) -> List[Wave]:
    """Build the waves of the networks on screen, coloured like their rows."""
    if len(msg.colors) < len(msg.networks):
        raise ValueError(
            f"{len(msg.networks)} networks but only {len(msg.colors)} colors on screen"
        )
    return [
        dataclasses.replace(wave_from_network(network, field_key, provider), color=str(color))
        for network, color in zip(msg.networks, msg.colors)
    ]