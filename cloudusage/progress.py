"""Print dots to the console while a report is gathered."""

import sys
import threading


class ProgressDots:
    """Prints a message and then a dot every interval until stopped.

    Reads nothing from the report, the only shared state is the stop event.
    """

    def __init__(self, service, interval=1.0, stream=None):
        self.service = service
        self.interval = interval
        self.stream = stream or sys.stdout
        self._stop = threading.Event()
        self._thread = threading.Thread(target=self._run, name="progress-dots", daemon=True)

    def _run(self):
        self.stream.write(f"\nGetting Cloud Storage size for {self.service.title()}")
        self.stream.flush()
        while not self._stop.wait(self.interval):
            self.stream.write(".")
            self.stream.flush()

    def start(self):
        self._thread.start()
        return self

    def stop(self):
        self._stop.set()
        if self._thread.is_alive():
            self._thread.join()

    def __enter__(self):
        return self.start()

    def __exit__(self, *exc):
        self.stop()
