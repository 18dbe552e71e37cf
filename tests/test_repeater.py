import threading

from wfmon.repeater import repeat


def test_already_stopped_only_calls_done():
    stop = threading.Event()
    stop.set()
    calls = []
    repeat(stop, 0.01, lambda: calls.append("timer"), lambda: calls.append("done"))
    assert calls == ["done"]


def test_timer_runs_until_stopped():
    stop = threading.Event()
    calls = []

    def on_timer():
        calls.append("timer")
        if calls.count("timer") == 3:
            stop.set()

    repeat(stop, 0.001, on_timer, lambda: calls.append("done"))
    assert calls == ["timer", "timer", "timer", "done"]


def test_stop_from_another_thread():
    stop = threading.Event()
    calls = []
    stopper = threading.Timer(0.05, stop.set)
    stopper.start()
    try:
        repeat(stop, 0.01, lambda: calls.append("timer"), lambda: calls.append("done"))
    finally:
        stopper.cancel()
    assert calls[-1] == "done"
    assert calls.count("done") == 1
    assert all(call == "timer" for call in calls[:-1])