import logging
import threading
import time

logger = logging.getLogger(__name__)


class PeriodicTimer:
    """
    Runs a task at a fixed rate on a single background thread.
    A run that overshoots the period delays the next one; nothing is skipped.
    """

    def __init__(self, task, period_ms, name="frame-grabber"):
        self.task = task
        self.period = period_ms / 1000.0
        self._stop_event = threading.Event()
        self._thread = threading.Thread(target=self._run, name=name, daemon=True)

    def start(self):
        self._thread.start()

    def _run(self):
        next_run = time.monotonic()
        while not self._stop_event.is_set():
            try:
                self.task()
            except Exception:
                logger.exception("Periodic task failed")
            next_run += self.period
            delay = next_run - time.monotonic()
            if delay > 0:
                self._stop_event.wait(delay)

    def shutdown(self):
        """No run starts after this returns; an in-flight run is not interrupted."""
        self._stop_event.set()

    def is_shutdown(self):
        return self._stop_event.is_set()

    def await_termination(self, timeout):
        """
        Wait up to timeout seconds for the worker thread to exit.
        Returns True if it did.
        """
        if self._thread.ident is None:
            return True
        if self._thread is not threading.current_thread():
            self._thread.join(timeout)
        return not self._thread.is_alive()
