import logging
import os
import threading
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Iterator, List, Tuple

logger = logging.getLogger(__name__)

Snapshot = Dict[str, Tuple[int, int]]


@dataclass(frozen=True)
class ChangeEvent:
    path: str


class PollingFileWatcher:
    """Emit a ChangeEvent for each file created or modified under ``root``.

    Polls modification time and size every ``interval`` seconds. Events for
    one file arrive in modification order; ``stop()`` ends the stream.
    """

    def __init__(self, root, interval: float = 0.5):
        self.root = Path(root).resolve()
        self.interval = interval
        self._stop_event = threading.Event()

    @property
    def stopped(self) -> bool:
        return self._stop_event.is_set()

    def stop(self) -> None:
        self._stop_event.set()
        logger.info(f"File watcher for {self.root} stopping...")

    def snapshot(self) -> Snapshot:
        entries: Snapshot = {}
        try:
            with os.scandir(self.root) as it:
                for entry in it:
                    if not entry.is_file():
                        continue
                    stat = entry.stat()
                    entries[entry.path] = (stat.st_mtime_ns, stat.st_size)
        except OSError as e:
            logger.warning(f"Cannot scan {self.root}: {e}")
        return entries

    @staticmethod
    def diff(previous: Snapshot, current: Snapshot) -> List[ChangeEvent]:
        return [
            ChangeEvent(path)
            for path in sorted(current)
            if previous.get(path) != current[path]
        ]

    def subscribe(self) -> Iterator[ChangeEvent]:
        # baseline is taken now, not on first iteration, so edits made
        # between subscribing and consuming are not lost
        baseline = self.snapshot()
        logger.info(f"Watching {self.root} for changes")
        return self._poll(baseline)

    def _poll(self, previous: Snapshot) -> Iterator[ChangeEvent]:
        while not self._stop_event.is_set():
            self._stop_event.wait(self.interval)
            if self._stop_event.is_set():
                break
            current = self.snapshot()
            for event in self.diff(previous, current):
                if self._stop_event.is_set():
                    return
                yield event
            previous = current
        logger.info(f"File watcher for {self.root} stopped")
