import pytest

from wfmon.columns import MultipleColumn, Order
from wfmon.netdata import (
    BARS_KEY,
    BSSID_KEY,
    QUALITY_KEY,
    RSSI_KEY,
    SSID_KEY,
    Network,
)
from wfmon.table_columns import (
    SIGNAL_COLUMN_IDX,
    STATION_COLUMN_IDX,
    bars,
    bars_color,
    bars_field_msg,
    cell_text,
    default_columns,
    default_sort,
    quality_field_msg,
    rssi_field_msg,
    signal_field_msgs,
    simple_columns,
    sort_by,
    widths,
)
from wfmon.wifi import Band, ChannelWidthOperation


def test_simple_columns_cover_all_widths():
    columns = simple_columns()
    assert set(columns) == set(widths())
    assert all(columns[key].width == width for key, width in widths().items())
    assert all(column.key == key for key, column in columns.items())


def test_ssid_column_is_left_aligned():
    assert simple_columns()[SSID_KEY].align == "left"


def test_multiple_columns_at_fixed_positions():
    columns = default_columns()
    station, signal = columns[STATION_COLUMN_IDX], columns[SIGNAL_COLUMN_IDX]
    assert isinstance(station, MultipleColumn) and station.key == BSSID_KEY
    assert isinstance(signal, MultipleColumn) and signal.key == BARS_KEY
    assert [signal.next().key, signal.next().next().key] == [RSSI_KEY, QUALITY_KEY]


def test_default_sort_is_bars_descending():
    sort = default_sort()
    assert (sort.key, sort.order) == (BARS_KEY, Order.DESC)


def test_default_sort_puts_strongest_first():
    nets = [
        Network(bssid="02:00:00:00:00:01", network_name="weak", quality=10),
        Network(bssid="02:00:00:00:00:02", network_name="strong", quality=95),
    ]
    default_sort().sort(nets)
    assert [n.network_name for n in nets] == ["strong", "weak"]


def test_sort_by_unknown_key_keeps_key_and_sorts_by_ssid():
    sort = sort_by("Nope", Order.ASC)
    assert sort.key == "Nope"
    nets = [Network(network_name="b"), Network(network_name="a")]
    sort.sort(nets)
    assert [n.network_name for n in nets] == ["a", "b"]


@pytest.mark.parametrize(
    "quality, expected",
    [(100, "▂▄▆█"), (80, "▂▄▆█"), (79, "▂▄▆▁"), (60, "▂▄▆▁"),
     (59, "▂▄▁▁"), (40, "▂▄▁▁"), (39, "▂▁▁▁"), (20, "▂▁▁▁"), (19, "▁▁▁▁"), (0, "▁▁▁▁")],
)
def test_bars_thresholds(quality, expected):
    assert bars(quality) == expected


@pytest.mark.parametrize(
    "quality, expected",
    [(80, "#77dd77"), (60, "#a7c7e7"), (40, "#ffb347"), (20, "#ff6961"), (0, "#ff6961")],
)
def test_bars_color(quality, expected):
    assert bars_color(quality) == expected


def test_cell_text_width_for_80_plus_80():
    network = Network(channel_width=160, width_operation=ChannelWidthOperation.W80_AND_80)
    assert cell_text(network, "Width") == "80+80"


def test_cell_text_fields():
    network = Network(
        bssid="02:00:00:00:00:09", network_name="home", channel=6,
        channel_width=40, band=Band.ISM, rssi=-55, quality=55,
    )
    assert cell_text(network, "Network") == "home"
    assert cell_text(network, "BSSID") == "02:00:00:00:00:09"
    assert cell_text(network, "Chan") == "6"
    assert cell_text(network, "Width") == "40"
    assert cell_text(network, "Band") == "2.4"
    assert cell_text(network, "RSSI") == "-55"
    assert cell_text(network, "Quality") == "55%"
    assert cell_text(network, "Bars") == bars(55)
    assert cell_text(network, "#") == "█"


def test_cell_text_unknown_column_is_empty():
    assert cell_text(Network(network_name="home"), "Nope") == ""


def test_signal_field_messages():
    rssi = rssi_field_msg()
    assert (rssi.key, rssi.min_val, rssi.max_val) == (RSSI_KEY, -100, 0)
    assert bars_field_msg() == quality_field_msg()
    assert bars_field_msg().key == QUALITY_KEY


def test_signal_field_messages_by_column():
    msgs = signal_field_msgs()
    assert set(msgs) == {RSSI_KEY, QUALITY_KEY, BARS_KEY}
    assert msgs[BARS_KEY] == bars_field_msg()
    assert msgs[RSSI_KEY] == rssi_field_msg()