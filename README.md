# wfmon

`wfmon` is a library for keeping track of the Wi-Fi networks around you. It
models what access points announce in their management frames and turns that
into per-network records with a signal quality figure. It keeps a short signal
history for each network and draws it as character-cell charts for a terminal.

It needs nothing beyond the Python standard library. Python 3.10 or later is
required.

## Modules

- `wfmon.wifi` is the radio model. It has `Band` and `get_band_by_chan` for
  bands, `SecondaryChannelOffset` for HT secondary channel offsets, and
  `ChannelWidthOperation` with `get_channel_width_operation` for VHT width
  operations. `get_channel_width` gives the width of a frame in MHz and
  `unii_width` gives the width implied by a U-NII channel number. It also has
  the decoded frame records `RadioFrame`, `Dot11Frame` (built with
  `new_dot11_frame`), `HTOperationIE`, `VHTOperationIE`, `DSSetIE`,
  `InformationElements` and `MgmtFrame`.
- `wfmon.netdata` holds per-network records. `Network` is the record and `Key`
  is its sort key: SSID first, then BSSID, with networks that have no SSID
  placed last. `QualityConverter` maps RSSI to a quality of 0–100 %.
  `format_quality` and `table_slice` are helpers.
- `wfmon.timeseries` has `TimeSeries`, a bounded series of `Sample`s that does
  not change in place. `add` returns a new series.
- `wfmon.datasource` has `DataSource`, which keeps the latest record of every
  network and its RSSI and quality histories. `start` consumes
  `MgmtFrame`s from a `queue.Queue` until `stop` is called; a `None` on the
  queue raises `EOFError`. `network_from_frame` converts a single frame.
  `EmptyProvider` stands in when there is no data.
- `wfmon.mac` and `wfmon.manuf_parser` work with vendor database keys.
  `HardwareAddr` handles MAC-48 addresses and address blocks. `parse_line`
  and `parse_manuf` read a Wireshark-style `manuf` file into a mapping from
  key to `(short name, long name)`. A malformed line raises
  `ManufParseError`.
- `wfmon.airport`, `wfmon.hopper`, `wfmon.network` and `wfmon.repeater`
  handle radio control.
  - `wfmon.airport` runs the macOS `airport` and `system_profiler` tools to
    list supported channels, read the associated network, disassociate, and
    set the channel. Failures raise `AirportError`.
  - `parse_supported_channels` and `parse_associated_network` parse the
    tools' output and can be used on their own.
  - `ChannelHopper` cycles an interface through its channels until it is
    stopped. Both the channel source and the channel setter can be replaced.
  - `interface_by_name` returns an interface's index.
  - `repeat` calls a function on an interval until a `threading.Event` is set.
- `wfmon.logs` handles logging. `new_logger(mode)` configures the `wfmon`
  logger: errors go to stderr and everything goes to the rotating file
  `/usr/local/var/log/wfmon.log`. `wfmon.mode` provides `Mode` and
  `mode_from_string`. `with_logger` and `ctx_logger` bind a logger to the
  current context.
- The table and chart logic has these modules:
  - `wfmon.sorting` has comparators for every column.
  - `wfmon.columns` has `SimpleColumn`, `MultipleColumn`, `ColumnSort`,
    `Order` and `column_titles`.
  - `wfmon.table_columns` has the column layout, `default_sort`, `cell_text`,
    signal `bars` and their colours.
  - `wfmon.color` has `HexColor` and `random_colors`.
  - `wfmon.events` has the messages widgets exchange.
  - `wfmon.buffer` has a coloured character grid, `Buffer`, and block symbols.
  - `wfmon.sparkline` has `Sparkline`.
  - `wfmon.waves` and `wfmon.spectrum` have `Spectrum`.

## Examples

Band and channel width:

```python
from wfmon.wifi import Band, get_band_by_chan, get_channel_width_operation

band = get_band_by_chan(6)
assert band is Band.ISM
print(band.frequency_range())              # 2.4
print(get_channel_width_operation(1).width())  # 80
```

Signal quality:

```python
from wfmon.netdata import QualityConverter, format_quality

print(format_quality(QualityConverter(rssi=-60, snr=30).signal_quality()))
```

A bounded history:

```python
from datetime import datetime
from wfmon.timeseries import TimeSeries

series = TimeSeries(max_len=3)
for value in (-70.0, -65.0, -62.0, -60.0):
    series = series.add(value, datetime.now())
print(series.range(10))                     # [-65.0, -62.0, -60.0]
```

Feeding the data source directly and drawing a sparkline:

```python
import queue
from datetime import datetime
from wfmon.datasource import DataSource
from wfmon.events import NetworkKeyMsg
from wfmon.netdata import RSSI_KEY, Network
from wfmon.sparkline import Sparkline
from wfmon.table_columns import rssi_field_msg

source = DataSource(queue.Queue())
net = Network(bssid="02:00:00:00:00:01", network_name="example", rssi=-55)
source.add(net)
print(source.time_series(net.key())(RSSI_KEY).last())   # -55.0

chart = Sparkline(data_source=source, signal_field=rssi_field_msg(), width=20, height=5)
chart.update(NetworkKeyMsg(key=net.key()))
chart.update(datetime.now())                # a refresh tick
print(chart.view())
```

A vendor database line:

```python
from wfmon.manuf_parser import parse_line

key, short_name, long_name = parse_line("AA:BB:CC\tExample\tExample Devices Ltd")
```

## What it does not do

- It does not capture packets. Nothing here opens a network interface in
  monitor mode or reads capture files, and nothing decodes raw radiotap or
  802.11 bytes into `MgmtFrame`s. You fill the frame records and put them on
  the `DataSource` queue yourself.
- It has no command and no full-screen terminal application. The widgets
  render text and react to messages passed to `update`, but no keyboard loop
  ties them together. There is also no rendered, paged Wi-Fi table:
  `wfmon.table_columns` supplies the columns, sorting and cell text for one.
- It ships no vendor database. `parse_manuf` reads a file you provide.
- Radio control in `wfmon.airport` works only on macOS, where it runs the
  system tools. Changing channels usually needs administrator rights.