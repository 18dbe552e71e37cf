"""Service that cycles a Wi-Fi interface through its supported channels."""

from __future__ import annotations

import logging
import threading
from typing import Callable, Iterable, List, Optional, Tuple

from wfmon.airport import get_supported_channels, set_interface_channel
from wfmon.repeater import repeat

DEFAULT_HOP_INTERVAL = 0.25  # seconds between hops

_log = logging.getLogger("wfmon")


class ChannelHopper:
    """Hops an interface to its next supported channel every ``hop_interval`` seconds.

    Lifecycle: ``configure`` loads the channels, ``start`` blocks hopping
    until ``stop`` (or ``close``) is called from another thread.
    """

    def __init__(
        self,
        iface_name: str,
        hop_interval: float = DEFAULT_HOP_INTERVAL,
        channels_source: Callable[[str], Iterable[int]] = get_supported_channels,
        set_channel: Callable[[str, int], None] = set_interface_channel,
    ) -> None:
        self.iface_name = iface_name
        self.hop_interval = hop_interval
        self._channels_source = channels_source
        self._set_channel = set_channel
        self._channels: List[int] = []
        self._idx = 0
        self._lock = threading.Lock()
        self._stop_event: Optional[threading.Event] = None

    @property
    def channels(self) -> Tuple[int, ...]:
        """Channels loaded by :meth:`configure`."""
        with self._lock:
            return tuple(self._channels)

    def configure(self) -> None:
        """Load the channels the interface supports."""
        _log.info("Loading supported channel on '%s'", self.iface_name)
        channels = list(self._channels_source(self.iface_name))
        with self._lock:
            self._channels = channels
            self._idx = 0

    def _hop(self) -> None:
        with self._lock:
            self._idx += 1
            if self._idx >= len(self._channels):
                self._idx = 0
            channel = self._channels[self._idx]
            _log.debug("Interface %s hopping to channel %d", self.iface_name, channel)
            self._set_channel(self.iface_name, channel)

    def channel(self) -> int:
        """Return the channel the interface was last set to."""
        with self._lock:
            return self._channels[self._idx]

    def start(self) -> None:
        """Hop until stopped. Raises RuntimeError when no channels were loaded."""
        if not self.channels:
            raise RuntimeError("no supported channels for hopping")

        stop_event = threading.Event()
        self._stop_event = stop_event
        _log.info("🐇 hopping %s", self.iface_name)

        def on_timer() -> None:
            try:
                self._hop()
            except Exception as exc:  # keep hopping whatever one hop does
                _log.error("failed to hop, got %s", exc)

        def on_done() -> None:
            _log.info("stopping hopping on %s", self.iface_name)

        repeat(stop_event, self.hop_interval, on_timer, on_done)

    def stop(self) -> None:
        """Make :meth:`start` return."""
        _log.info("stopping Channel Hopper")
        if self._stop_event is not None:
            self._stop_event.set()

    def close(self) -> None:
        """Release the hopper; hopping, if still running, ends."""
        if self._stop_event is not None:
            self._stop_event.set()