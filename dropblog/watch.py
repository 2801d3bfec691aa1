from __future__ import annotations

import signal
import threading
from typing import Callable


class Scheduler:
    """Run a job every ``interval`` seconds until stopped."""

    def __init__(self, job: Callable[[], object], interval: float = 5.0):
        self.job = job
        self.interval = max(0.0, float(interval))
        self._stop = threading.Event()

    @property
    def stopped(self) -> bool:
        return self._stop.is_set()

    def stop(self, *_args: object) -> None:
        self._stop.set()

    def install_signal_handlers(self) -> None:
        signal.signal(signal.SIGINT, self.stop)
        signal.signal(signal.SIGTERM, self.stop)

    def run_once(self) -> None:
        self.job()

    def run_forever(self) -> int:
        cycles = 0
        while not self._stop.is_set():
            self.run_once()
            cycles += 1
            print(".", end="", flush=True)
            self._stop.wait(self.interval)
        print()
        print("Stopped.")
        return cycles
