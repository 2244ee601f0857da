"""
Tests for BackgroundTask (schedule runs callbacks inline instead of via Tk.after)
"""
import threading

from shopcolor.worker import BackgroundTask


def inline(fn):
    fn()


def test_runs_off_the_calling_thread_and_reports_result():
    seen = {}

    def target(a, b):
        seen["thread"] = threading.current_thread()
        return a + b

    results = []
    task = BackgroundTask(target, 2, 3, schedule=inline, on_done=results.append).start()
    task.join(timeout=5)

    assert results == [5]
    assert task.result == 5
    assert seen["thread"] is not threading.current_thread()
    assert seen["thread"].daemon


def test_completion_goes_through_schedule():
    scheduled = []
    task = BackgroundTask(lambda: "ok", schedule=scheduled.append, on_done=lambda r: None).start()
    task.join(timeout=5)
    assert len(scheduled) == 1
    assert callable(scheduled[0])


def test_exception_is_logged_and_reported_as_none(caplog):
    def boom():
        raise RuntimeError("kaboom")

    results = []
    with caplog.at_level("ERROR"):
        task = BackgroundTask(boom, schedule=inline, on_done=results.append, name="failing").start()
        task.join(timeout=5)

    assert results == [None]
    assert "Background task failing failed" in caplog.text
    assert "kaboom" in caplog.text


def test_without_on_done_nothing_is_scheduled():
    scheduled = []
    task = BackgroundTask(lambda: 1, schedule=scheduled.append).start()
    task.join(timeout=5)
    assert scheduled == []
    assert task.result == 1


def test_drives_controller_operation(controller, store):
    store.seed(("Acme", "red"))
    done = []
    task = BackgroundTask(controller.load_all, schedule=inline, on_done=done.append).start()
    task.join(timeout=5)
    assert done == [True]
    assert [s.name for s in controller.shops] == ["Acme"]
