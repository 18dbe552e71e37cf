import pytest

from wfmon.netdata import (
    Key,
    Network,
    QualityConverter,
    format_quality,
    table_slice,
)


def test_network_key():
    net = Network(bssid="02:00:00:00:00:01", network_name="home")
    assert net.key() == Key("02:00:00:00:00:01", "home")


def test_key_equal():
    assert Key("a", "x").compare(Key("a", "x")) == 0


def test_key_orders_by_name_then_bssid():
    assert Key("b", "alpha").compare(Key("a", "beta")) == -1
    assert Key("b", "same").compare(Key("a", "same")) == 1
    assert Key("a", "same").compare(Key("b", "same")) == -1


def test_key_without_name_sorts_last():
    assert Key("a", "").compare(Key("b", "named")) == 1
    assert Key("b", "named").compare(Key("a", "")) == -1


def test_key_both_unnamed_by_bssid():
    assert Key("a", "").compare(Key("b", "")) == -1
    assert Key("b", "").compare(Key("a", "")) == 1


def test_key_sort_is_consistent():
    keys = [Key("c", ""), Key("b", "z"), Key("a", "a"), Key("a", ""), Key("b", "a")]
    for k1 in keys:
        for k2 in keys:
            assert k1.compare(k2) == -k2.compare(k1)


def test_quality_very_weak_signal():
    assert QualityConverter(rssi=-127).signal_quality() == 0


def test_linear_snr():
    assert QualityConverter(snr=-5).linear_snr() == 0
    assert QualityConverter(snr=0).linear_snr() == 0
    assert QualityConverter(snr=40).linear_snr() == 100


@pytest.mark.parametrize("q", [0, 55, 100])
def test_format_quality(q):
    assert format_quality(q) == f"{q}%"


def test_table_slice_copies():
    n1 = Network(bssid="02:00:00:00:00:01", network_name="one")
    n2 = Network(bssid="02:00:00:00:00:02", network_name="two")
    table = {n1.key(): n1, n2.key(): n2}
    result = table_slice(table)
    assert sorted(n.bssid for n in result) == [n1.bssid, n2.bssid]
    result[0].rssi = -99
    assert table[result[0].key()].rssi == 0


def test_table_slice_empty():
    assert table_slice({}) == []