import functools

import pytest

from wfmon.netdata import Network
from wfmon.sorting import (
    by_band_sorter,
    by_bssid_sorter,
    by_channel_sorter,
    by_channel_width_sorter,
    by_key_sorter,
    by_manuf_long_sorter,
    by_manuf_sorter,
    by_noise_sorter,
    by_quality_sorter,
    by_rssi_sorter,
    by_snr_sorter,
    by_ssid_sorter,
    field_sorter,
)
from wfmon.wifi import Band


def _sorted(networks, sorter):
    return sorted(networks, key=functools.cmp_to_key(sorter))


@pytest.fixture
def networks():
    return [
        Network(bssid="02:00:00:00:00:03", network_name="gamma", manuf="Zeta",
                manuf_long="Zeta Corp", channel=36, channel_width=80, band=Band.UNII1,
                rssi=-70, quality=40, noise=-90, snr=20),
        Network(bssid="02:00:00:00:00:01", network_name="alpha", manuf="Acme",
                manuf_long="Acme Inc", channel=6, channel_width=20, band=Band.ISM,
                rssi=-50, quality=90, noise=-95, snr=45),
        Network(bssid="02:00:00:00:00:02", network_name="", manuf="Beta",
                manuf_long="Beta Ltd", channel=11, channel_width=40, band=Band.ISM,
                rssi=-60, quality=70, noise=-92, snr=32),
    ]


@pytest.mark.parametrize(
    "sorter, getter",
    [
        (by_bssid_sorter(), lambda n: n.bssid),
        (by_manuf_sorter(), lambda n: n.manuf),
        (by_manuf_long_sorter(), lambda n: n.manuf_long),
        (by_channel_sorter(), lambda n: n.channel),
        (by_channel_width_sorter(), lambda n: n.channel_width),
        (by_band_sorter(), lambda n: int(n.band)),
        (by_rssi_sorter(), lambda n: n.rssi),
        (by_quality_sorter(), lambda n: n.quality),
        (by_noise_sorter(), lambda n: n.noise),
        (by_snr_sorter(), lambda n: n.snr),
    ],
)
def test_field_sorters_order_ascending(networks, sorter, getter):
    values = [getter(n) for n in _sorted(networks, sorter)]
    assert values == sorted(values)


def test_ties_are_broken_by_key():
    b = Network(bssid="02:00:00:00:00:0b", network_name="b", channel=1)
    a = Network(bssid="02:00:00:00:00:0a", network_name="a", channel=1)
    result = _sorted([b, a], by_channel_sorter())
    assert [n.network_name for n in result] == ["a", "b"]


def test_key_sorter_puts_hidden_networks_last(networks):
    result = _sorted(networks, by_key_sorter())
    assert result[-1].network_name == ""
    assert [n.network_name for n in result[:2]] == ["alpha", "gamma"]


def test_ssid_sorter_matches_key_sorter_for_named(networks):
    named = [n for n in networks if n.network_name]
    assert _sorted(named, by_ssid_sorter()) == _sorted(named, by_key_sorter())


def test_same_network_compares_equal(networks):
    sorter = by_rssi_sorter()
    assert sorter(networks[0], networks[0]) == 0


def test_comparator_is_antisymmetric(networks):
    sorter = field_sorter(lambda n: n.quality)
    assert sorter(networks[0], networks[1]) == -sorter(networks[1], networks[0])