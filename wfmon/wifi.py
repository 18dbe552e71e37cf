"""802.11 bands, channel widths and decoded frame structures."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field


class Band(enum.IntEnum):
    """Radio band a channel belongs to."""

    UNKNOWN = 0
    ISM = 1  # 2.4 GHz
    UNII1 = 2  # 5 GHz
    UNII2A = 3
    UNII2B = 4
    UNII2C = 5
    UNII3 = 6

    def __str__(self) -> str:
        return _BAND_NAMES[self]

    def frequency_range(self) -> str:
        """Return the band's frequency in GHz as text: '2.4', '5' or ''."""
        if self is Band.UNKNOWN:
            return ""
        if self is Band.ISM:
            return "2.4"
        return "5"


_BAND_NAMES = {
    Band.UNKNOWN: "",
    Band.ISM: "ISM",
    Band.UNII1: "U-NII-1",
    Band.UNII2A: "U-NII-2A",
    Band.UNII2B: "U-NII-2B",
    Band.UNII2C: "U-NII-2C",
    Band.UNII3: "U-NII-3",
}

MIN_BAND = Band.ISM
MAX_BAND = Band.UNII3


def get_band_by_chan(channel: int) -> Band:
    """Return the band of a primary channel number."""
    if 1 <= channel <= 14:
        return Band.ISM
    if 32 <= channel <= 48:
        return Band.UNII1
    if 50 <= channel <= 68:
        return Band.UNII2A
    if 96 <= channel <= 144:
        return Band.UNII2C
    if 149 <= channel <= 173:
        return Band.UNII3
    return Band.UNKNOWN


class SecondaryChannelOffset(enum.IntEnum):
    """HT secondary channel position relative to the primary one."""

    SCN = 0  # no secondary channel
    SCA = 1  # secondary above primary
    RESERVED = 2
    SCB = 3  # secondary below primary

    def __str__(self) -> str:
        return "RSRVD" if self is SecondaryChannelOffset.RESERVED else self.name


class ChannelWidthOperation(enum.IntEnum):
    """VHT channel width operation."""

    W20_OR_40 = 0
    W80 = 1
    W160 = 2
    W80_AND_80 = 3

    def __str__(self) -> str:
        return _WIDTH_OPERATION_NAMES[self]

    def width(self) -> int:
        """Return the total width in MHz."""
        return _WIDTH_OPERATION_MHZ[self]


_WIDTH_OPERATION_NAMES = {
    ChannelWidthOperation.W20_OR_40: "20/40",
    ChannelWidthOperation.W80: "80",
    ChannelWidthOperation.W160: "160",
    ChannelWidthOperation.W80_AND_80: "80+80",
}

_WIDTH_OPERATION_MHZ = {
    ChannelWidthOperation.W20_OR_40: 20,
    ChannelWidthOperation.W80: 80,
    ChannelWidthOperation.W160: 160,
    ChannelWidthOperation.W80_AND_80: 160,
}


def get_channel_width_operation(w: int) -> ChannelWidthOperation:
    """Map a raw VHT width field to an operation; reserved values mean 20/40."""
    try:
        return ChannelWidthOperation(w)
    except ValueError:
        return ChannelWidthOperation.W20_OR_40


def _format_mac(addr: bytes) -> str:
    return ":".join(f"{b:02x}" for b in addr)


@dataclass
class RadioFrame:
    """Radiotap information of a captured frame."""

    frequency: int = 0  # MHz
    rssi: int = 0  # dBm
    noise: int = 0  # dBm

    def __str__(self) -> str:
        return f"Frequency:{self.frequency} RSSI:{self.rssi} Noise:{self.noise}"


@dataclass
class Dot11Frame:
    """802.11 MAC header addresses with radio information."""

    radio: RadioFrame = field(default_factory=RadioFrame)
    dot11_type: int = 0
    source_address: bytes = b""
    destination_address: bytes = b""
    transmitter_address: bytes = b""
    receiver_address: bytes = b""
    bssid: bytes = b""

    @property
    def frequency(self) -> int:
        return self.radio.frequency

    @property
    def rssi(self) -> int:
        return self.radio.rssi

    @property
    def noise(self) -> int:
        return self.radio.noise

    def __str__(self) -> str:
        return (
            f"Radio:{{{self.radio}}}, Dot11:{self.dot11_type} "
            f"Src:{_format_mac(self.source_address)} "
            f"Dst:{_format_mac(self.destination_address)} "
            f"BSSID:{_format_mac(self.bssid)}"
        )


def new_dot11_frame(dot11_type: int, *args: bytes) -> Dot11Frame:
    """Build a frame from addresses in the order source, destination,
    transmitter, receiver, BSSID; missing addresses are empty."""
    addrs = list(args) + [b""] * max(0, 5 - len(args))
    return Dot11Frame(
        dot11_type=dot11_type,
        source_address=addrs[0],
        destination_address=addrs[1],
        transmitter_address=addrs[2],
        receiver_address=addrs[3],
        bssid=addrs[4],
    )


@dataclass
class HTOperationIE:
    """High Throughput Operation element."""

    primary_channel: int = 0
    secondary_channel_offset: int = 0  # 0 none, 1 above, 3 below, 2 reserved
    supported_channel_width: int = 0


@dataclass
class VHTOperationIE:
    """Very High Throughput Operation element."""

    channel_width: int = 0
    channel_center_segment0: int = 0
    channel_center_segment1: int = 0


@dataclass
class DSSetIE:
    """DS Parameter Set element."""

    channel: int = 0


@dataclass
class InformationElements:
    """Information elements discovered in a management frame."""

    ht_operation: HTOperationIE = field(default_factory=HTOperationIE)
    vht_operation: VHTOperationIE = field(default_factory=VHTOperationIE)
    ds_set: DSSetIE = field(default_factory=DSSetIE)

    @property
    def channel(self) -> int:
        return self.ds_set.channel

    @property
    def primary_channel(self) -> int:
        return self.ht_operation.primary_channel

    @property
    def secondary_channel_offset(self) -> int:
        return self.ht_operation.secondary_channel_offset

    @property
    def channel_width(self) -> int:
        return self.vht_operation.channel_width

    @property
    def channel_center_segment0(self) -> int:
        return self.vht_operation.channel_center_segment0

    @property
    def channel_center_segment1(self) -> int:
        return self.vht_operation.channel_center_segment1

    def __str__(self) -> str:
        return f"HT:{self.ht_operation} VHT:{self.vht_operation} DS:{self.ds_set}"


@dataclass
class MgmtFrame:
    """Management frame: header, information elements and SSID."""

    dot11: Dot11Frame = field(default_factory=Dot11Frame)
    information_elements: InformationElements = field(default_factory=InformationElements)
    ssid: str = ""

    @property
    def bssid(self) -> bytes:
        return self.dot11.bssid

    @property
    def rssi(self) -> int:
        return self.dot11.rssi

    @property
    def noise(self) -> int:
        return self.dot11.noise

    @property
    def frequency(self) -> int:
        return self.dot11.frequency

    @property
    def channel(self) -> int:
        return self.information_elements.channel

    @property
    def primary_channel(self) -> int:
        return self.information_elements.primary_channel

    @property
    def secondary_channel_offset(self) -> int:
        return self.information_elements.secondary_channel_offset

    @property
    def channel_width(self) -> int:
        return self.information_elements.channel_width

    @property
    def channel_center_segment0(self) -> int:
        return self.information_elements.channel_center_segment0

    @property
    def channel_center_segment1(self) -> int:
        return self.information_elements.channel_center_segment1

    def __str__(self) -> str:
        return f"Dot11:{self.dot11}, SSID:{self.ssid} IE:{self.information_elements}"


def get_channel_width(frame: MgmtFrame) -> int:
    """Return the channel width of a frame in MHz (0 when the band is unknown)."""
    band = get_band_by_chan(frame.channel)
    if band is Band.UNKNOWN:
        return 0

    offset = SecondaryChannelOffset(frame.secondary_channel_offset & 0b11)
    bonding = 2 if offset in (SecondaryChannelOffset.SCA, SecondaryChannelOffset.SCB) else 1

    if band is Band.ISM:
        return bonding * 20

    operation = get_channel_width_operation(frame.channel_width)
    if operation is ChannelWidthOperation.W20_OR_40:
        return bonding * 20

    return operation.width()


def unii_width(channel: int) -> int:
    """Return the bonded width in MHz implied by a U-NII channel number."""
    if channel in (50, 114, 163):
        return 160
    if channel in (42, 58, 106, 122, 138, 155, 171):
        return 80
    if channel in (34, 38, 46, 54, 62, 102, 110, 118, 126, 134, 142, 151, 159, 167, 175):
        return 40
    return 20