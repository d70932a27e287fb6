import threading
import time

from FaceDetection.utils.periodic import PeriodicTimer


def wait_for(condition, timeout=5):
    deadline = time.monotonic() + timeout
    while not condition() and time.monotonic() < deadline:
        time.sleep(0.005)
    return condition()


def test_runs_task_repeatedly_on_one_thread():
    threads = []
    timer = PeriodicTimer(lambda: threads.append(threading.current_thread().name), 5)
    timer.start()
    assert wait_for(lambda: len(threads) >= 5)
    timer.shutdown()
    assert timer.await_termination(1)
    assert set(threads) == {"frame-grabber"}


def test_no_run_after_shutdown():
    runs = []
    timer = PeriodicTimer(lambda: runs.append(1), 5)
    timer.start()
    assert wait_for(lambda: runs)
    timer.shutdown()
    assert timer.await_termination(1)
    count = len(runs)
    time.sleep(0.05)
    assert len(runs) == count


def test_task_errors_do_not_stop_schedule():
    runs = []

    def task():
        runs.append(1)
        raise RuntimeError("boom")

    timer = PeriodicTimer(task, 5)
    timer.start()
    assert wait_for(lambda: len(runs) >= 3)
    timer.shutdown()
    timer.await_termination(1)


def test_await_termination_times_out_on_slow_task():
    release = threading.Event()
    started = threading.Event()

    def task():
        started.set()
        release.wait(2)

    timer = PeriodicTimer(task, 5)
    timer.start()
    assert started.wait(1)
    timer.shutdown()
    assert not timer.await_termination(0.01)
    release.set()
    assert timer.await_termination(2)


def test_await_termination_before_start():
    timer = PeriodicTimer(lambda: None, 5)
    assert timer.await_termination(0.01)
