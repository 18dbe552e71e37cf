import threading

import pytest

from wfmon.airport import AirportError
from wfmon.hopper import DEFAULT_HOP_INTERVAL, ChannelHopper


class _Radio:
    def __init__(self, wanted=3, fail=False):
        self.calls = []
        self.enough = threading.Event()
        self._wanted = wanted
        self._fail = fail

    def set_channel(self, iface, channel):
        self.calls.append((iface, channel))
        if len(self.calls) >= self._wanted:
            self.enough.set()
        if self._fail:
            raise AirportError("radio busy")


def _run_until_enough(hopper, radio, finish):
    worker = threading.Thread(target=hopper.start, daemon=True)
    worker.start()
    assert radio.enough.wait(5)
    finish()
    worker.join(5)
    return worker


def test_default_interval():
    assert ChannelHopper("en0").hop_interval == DEFAULT_HOP_INTERVAL


def test_configure_loads_channels():
    hopper = ChannelHopper("en0", channels_source=lambda name: [1, 6, 11])
    hopper.configure()
    assert hopper.channels == (1, 6, 11)
    assert hopper.channel() == 1


def test_configure_passes_interface_name():
    seen = []
    hopper = ChannelHopper("wlan7", channels_source=lambda name: seen.append(name) or [1])
    hopper.configure()
    assert seen == ["wlan7"]


def test_configure_error_propagates():
    def broken(name):
        raise AirportError("no data")

    hopper = ChannelHopper("en0", channels_source=broken)
    with pytest.raises(AirportError):
        hopper.configure()


def test_start_without_channels_raises():
    hopper = ChannelHopper("en0", channels_source=lambda name: [])
    hopper.configure()
    with pytest.raises(RuntimeError, match="no supported channels"):
        hopper.start()


def test_channel_before_configure_raises():
    with pytest.raises(IndexError):
        ChannelHopper("en0").channel()


def test_hops_cyclically_until_stopped():
    radio = _Radio(wanted=4)
    hopper = ChannelHopper(
        "en0",
        hop_interval=0.01,
        channels_source=lambda name: [1, 6, 11],
        set_channel=radio.set_channel,
    )
    hopper.configure()
    worker = _run_until_enough(hopper, radio, hopper.stop)
    assert not worker.is_alive()
    assert radio.calls[:4] == [("en0", 6), ("en0", 11), ("en0", 1), ("en0", 6)]
    assert hopper.channel() == radio.calls[-1][1]


def test_failed_hops_keep_hopping():
    radio = _Radio(wanted=3, fail=True)
    hopper = ChannelHopper(
        "en0",
        hop_interval=0.01,
        channels_source=lambda name: [1, 6],
        set_channel=radio.set_channel,
    )
    hopper.configure()
    worker = _run_until_enough(hopper, radio, hopper.stop)
    assert not worker.is_alive()
    assert len(radio.calls) >= 3


def test_close_ends_hopping():
    radio = _Radio(wanted=2)
    hopper = ChannelHopper(
        "en0",
        hop_interval=0.01,
        channels_source=lambda name: [1, 6],
        set_channel=radio.set_channel,
    )
    hopper.configure()
    worker = _run_until_enough(hopper, radio, hopper.close)
    assert not worker.is_alive()
    assert radio.calls[:2] == [("en0", 6), ("en0", 1)]