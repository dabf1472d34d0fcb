"""Sharing data between threads and watching jobs complete."""

from __future__ import annotations

import threading
import time
from collections.abc import Sequence
from concurrent.futures import ThreadPoolExecutor


def offset_sums(numbers: Sequence[int], workers: int = 8) -> list[int]:
    """Sum every workers-th value from each offset, one thread per offset."""
    if workers < 1:
        raise ValueError("workers must be at least 1")
    shared = tuple(numbers)

    def sum_from(offset: int) -> int:
        total = sum(shared[offset::workers])
        print(f"Sum of offset {offset} is {total}")
        return total

    with ThreadPoolExecutor(max_workers=workers) as pool:
        return list(pool.map(sum_from, range(workers)))


class JobStatus:
    """A count of completed jobs, safe to update from several threads."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._jobs_completed = 0

    @property
    def jobs_completed(self) -> int:
        with self._lock:
            return self._jobs_completed

    def _complete_one(self) -> None:
        with self._lock:
            self._jobs_completed += 1


def run_jobs(count: int = 10, interval: float = 0.25) -> JobStatus:
    """Complete jobs in a worker thread while the caller waits for all of them."""
    if count < 0:
        raise ValueError("count must not be negative")
    if interval < 0:
        raise ValueError("interval must not be negative")
    status = JobStatus()

    def work() -> None:
        for _ in range(count):
            time.sleep(interval)
            status._complete_one()

    worker = threading.Thread(target=work, daemon=True)
    worker.start()
    while status.jobs_completed < count:
        print("waiting... ")
        time.sleep(interval * 2)
    worker.join()
    return status