"""Wi-Fi network monitoring: radio model, signal quality, time series, radio control and terminal charts."""

__version__ = "0.1.0"