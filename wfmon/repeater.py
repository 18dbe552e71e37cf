"""Run a callback at a fixed interval until told to stop."""

from __future__ import annotations

import threading
from typing import Callable


def repeat(
    stop: threading.Event,
    interval: float,
    on_timer: Callable[[], None],
    on_done: Callable[[], None],
) -> None:
    """Call ``on_timer`` every ``interval`` seconds until ``stop`` is set,
    then call ``on_done`` once. Blocks the calling thread."""
    while not stop.wait(interval):
        on_timer()
    on_done()