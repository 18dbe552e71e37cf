import queue
import threading

import pytest

from wfmon.datasource import DataSource, EmptyProvider, network_from_frame
from wfmon.netdata import QUALITY_KEY, RSSI_KEY, Key, Network, QualityConverter
from wfmon.wifi import (
    Band,
    DSSetIE,
    Dot11Frame,
    HTOperationIE,
    InformationElements,
    MgmtFrame,
    RadioFrame,
    SecondaryChannelOffset,
    get_channel_width,
)


def make_frame(rssi=-50, noise=-90, ssid="home"):
    return MgmtFrame(
        dot11=Dot11Frame(
            radio=RadioFrame(frequency=2437, rssi=rssi, noise=noise),
            bssid=bytes([0x02, 0, 0, 0, 0, 0x01]),
        ),
        information_elements=InformationElements(
            ht_operation=HTOperationIE(primary_channel=6, secondary_channel_offset=1),
            ds_set=DSSetIE(channel=6),
        ),
        ssid=ssid,
    )


def test_empty_provider():
    provider = EmptyProvider()
    assert provider.networks() == []
    assert provider.time_series(Key("a", "b"))(RSSI_KEY).range(10) == []


def test_network_from_frame():
    frame = make_frame()
    net = network_from_frame(frame, lambda bssid: ("Acme", f"Acme {bssid}"))
    assert net.bssid == "02:00:00:00:00:01"
    assert net.manuf == "Acme"
    assert net.manuf_long == "Acme 02:00:00:00:00:01"
    assert net.network_name == "home"
    assert net.channel == 6
    assert net.band is Band.ISM
    assert net.offset is SecondaryChannelOffset.SCA
    assert net.snr == net.rssi - net.noise
    assert net.channel_width == get_channel_width(frame)
    assert net.quality == QualityConverter(rssi=net.rssi, snr=net.snr).signal_quality()


def test_network_from_frame_without_lookup():
    net = network_from_frame(make_frame())
    assert (net.manuf, net.manuf_long) == ("", "")


def test_add_new_network_records_series():
    ds = DataSource(queue.Queue())
    net = Network(bssid="b1", network_name="n1", rssi=-60, quality=70)
    ds.add(net)
    assert ds.networks() == [net]
    series = ds.time_series(net.key())
    assert series(RSSI_KEY).last() == -60.0
    assert series(QUALITY_KEY).last() == 70.0


def test_add_existing_network_replaces_and_appends():
    ds = DataSource(queue.Queue())
    ds.add(Network(bssid="b1", network_name="n1", rssi=-60))
    ds.add(Network(bssid="b1", network_name="n1", rssi=-40))
    nets = ds.networks()
    assert len(nets) == 1
    assert nets[0].rssi == -40
    assert ds.time_series(Key("b1", "n1"))(RSSI_KEY).range(10) == [-60.0, -40.0]


def test_unknown_key_gives_empty_series():
    ds = DataSource(queue.Queue())
    ds.add(Network(bssid="b1", network_name="n1"))
    assert ds.time_series(Key("x", "y"))(RSSI_KEY).range(10) == []
    assert ds.time_series(Key("b1", "n1"))("unknown").last() is None


def test_networks_returns_copies():
    ds = DataSource(queue.Queue())
    ds.add(Network(bssid="b1", network_name="n1", rssi=-60))
    ds.networks()[0].rssi = 0
    assert ds.networks()[0].rssi == -60


def test_series_snapshot_is_isolated_from_later_adds():
    ds = DataSource(queue.Queue())
    net = Network(bssid="b1", network_name="n1", rssi=-60)
    ds.add(net)
    snapshot = ds.time_series(net.key())
    ds.add(net)
    assert len(snapshot(RSSI_KEY).range(10)) == 1


def test_start_consumes_frames_until_closed():
    frames = queue.Queue()
    frames.put(make_frame())
    frames.put(None)
    ds = DataSource(frames, poll_interval=0.01)
    with pytest.raises(EOFError):
        ds.start()
    assert [n.network_name for n in ds.networks()] == ["home"]


def test_stop_ends_start():
    ds = DataSource(queue.Queue(), poll_interval=0.01)
    worker = threading.Thread(target=ds.start)
    worker.start()
    ds.stop()
    worker.join(timeout=2)
    assert not worker.is_alive()
    assert ds.networks() == []