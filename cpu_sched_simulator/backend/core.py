"""
Core data structures for the CPU scheduling simulator.
Includes the ProcessRecord model and helpers for copying workloads.
"""

from dataclasses import dataclass, replace
from typing import Iterable, List


@dataclass
class ProcessRecord:
    """Static inputs and derived metrics of one process."""
    pid: int
    burst: int
    arrival: int = 0
    priority: int = 0
    waiting: int = 0
    turnaround: int = 0

    def __post_init__(self):
        """Reject values the scheduling formulas are undefined for."""
        if self.burst < 0:
            raise ValueError(f"process {self.pid}: burst time must be >= 0, got {self.burst}")
        if self.arrival < 0:
            raise ValueError(f"process {self.pid}: arrival time must be >= 0, got {self.arrival}")


def clone_records(records: Iterable[ProcessRecord]) -> List[ProcessRecord]:
    """Return fresh copies of the records with computed fields cleared.

    Each algorithm runs on its own copy so that sorting or per-process
    results never leak from one run into the next.
    """
    return [replace(r, waiting=0, turnaround=0) for r in records]
