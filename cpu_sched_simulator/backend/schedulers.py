"""
Scheduling algorithms: FCFS, SJF, Priority and Round Robin.

Every algorithm fills in ``waiting`` on the records it is given and then
applies the same turnaround formula. The module-level ``find_*`` functions
hold the arithmetic; the scheduler classes wrap them so the driver can run
any discipline through one interface and collect an execution timeline.
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from .core import ProcessRecord
from .utils import EventLogger


DEFAULT_QUANTUM = 2


def find_waiting_time_fcfs(plist: List[ProcessRecord], logger: Optional[EventLogger] = None) -> None:
    """Waiting time is the sum of the bursts queued ahead; arrival gaps are not modelled."""
    for i, p in enumerate(plist):
        p.waiting = 0 if i == 0 else plist[i - 1].burst + plist[i - 1].waiting
        if logger is not None:
            logger.log_process_event(p.waiting, p.pid, "start")
            if p.burst > 0:
                logger.log_timeline_slice(p.waiting, p.waiting + p.burst, p.pid)
            logger.log_process_event(p.waiting + p.burst, p.pid, "complete")


def find_turnaround_time(plist: List[ProcessRecord]) -> None:
    for p in plist:
        p.turnaround = p.burst + p.waiting


def find_waiting_time_sjf(plist: List[ProcessRecord], logger: Optional[EventLogger] = None) -> int:
    """Simulate one time unit at a time, always running the shortest remaining job.

    Ties go to the lowest index. Returns the time at which the last
    process finished.
    """
    remaining = [p.burst for p in plist]
    started = [False] * len(plist)
    completed = 0
    for p in plist:
        if p.burst == 0:
            p.waiting = 0
            completed += 1

    t = 0
    while completed != len(plist):
        shortest = None
        for i, p in enumerate(plist):
            if p.arrival <= t and remaining[i] > 0:
                if shortest is None or remaining[i] < remaining[shortest]:
                    shortest = i

        if shortest is None:
            if logger is not None:
                logger.log_timeline_slice(t, t + 1, None, reason="idle")
            t += 1
            continue

        p = plist[shortest]
        if logger is not None:
            if not started[shortest]:
                started[shortest] = True
                logger.log_process_event(t, p.pid, "start")
            logger.log_timeline_slice(t, t + 1, p.pid)
        remaining[shortest] -= 1

        if remaining[shortest] == 0:
            completed += 1
            p.waiting = t + 1 - p.burst - p.arrival
            if logger is not None:
                logger.log_process_event(t + 1, p.pid, "complete")
        t += 1
    return t


def find_waiting_time_rr(plist: List[ProcessRecord], quantum: int = DEFAULT_QUANTUM,
                         logger: Optional[EventLogger] = None) -> int:
    """Cycle over the processes in index order, granting each up to ``quantum`` units.

    Every process is treated as ready at time 0. Returns the total
    elapsed time.
    """
    if quantum <= 0:
        raise ValueError(f"time quantum must be a positive integer, got {quantum}")
    remaining = [p.burst for p in plist]
    started = [False] * len(plist)

    t = 0
    while True:
        done = True
        for i, p in enumerate(plist):
            if remaining[i] <= 0:
                continue
            done = False
            if logger is not None and not started[i]:
                started[i] = True
                logger.log_process_event(t, p.pid, "start")

            run_for = quantum if remaining[i] > quantum else remaining[i]
            if logger is not None:
                logger.log_timeline_slice(t, t + run_for, p.pid)
            t += run_for
            remaining[i] -= run_for

            if remaining[i] == 0:
                p.waiting = max(0, t - p.burst - p.arrival)
                if logger is not None:
                    logger.log_process_event(t, p.pid, "complete")
        if done:
            break
    return t


def sort_by_priority(plist: List[ProcessRecord]) -> None:
    """Stable ascending sort: equal priorities keep their input order."""
    plist.sort(key=lambda p: p.priority)


class BaseScheduler(ABC):
    """Abstract base class for all schedulers."""

    name = ""

    def __init__(self):
        self.logger = EventLogger(self.name)
        self.total_time = 0

    @abstractmethod
    def find_waiting_time(self, plist: List[ProcessRecord]) -> int:
        """Fill in waiting times and return the simulated elapsed time."""
        pass

    def run(self, plist: List[ProcessRecord]) -> List[ProcessRecord]:
        """Compute waiting and turnaround times in place."""
        self.logger = EventLogger(self.name)
        self.total_time = self.find_waiting_time(plist)
        find_turnaround_time(plist)
        return plist


class FCFSScheduler(BaseScheduler):
    """First Come First Serve, in input order."""

    name = "FCFS"

    def find_waiting_time(self, plist: List[ProcessRecord]) -> int:
        find_waiting_time_fcfs(plist, self.logger)
        return sum(p.burst for p in plist)


class SJFScheduler(BaseScheduler):
    """Shortest Job First, simulated per time unit."""

    name = "SJF"

    def find_waiting_time(self, plist: List[ProcessRecord]) -> int:
        return find_waiting_time_sjf(plist, self.logger)


class PriorityScheduler(FCFSScheduler):
    """FCFS over the records sorted by ascending priority value."""

    name = "Priority"

    def find_waiting_time(self, plist: List[ProcessRecord]) -> int:
        sort_by_priority(plist)
        return super().find_waiting_time(plist)


class RoundRobinScheduler(BaseScheduler):
    """Round Robin scheduler implementation."""

    name = "RR"

    def __init__(self, time_quantum: int = DEFAULT_QUANTUM):
        if time_quantum <= 0:
            raise ValueError(f"time quantum must be a positive integer, got {time_quantum}")
        self.time_quantum = time_quantum
        super().__init__()

    def find_waiting_time(self, plist: List[ProcessRecord]) -> int:
        return find_waiting_time_rr(plist, self.time_quantum, self.logger)
