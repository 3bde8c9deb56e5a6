from __future__ import annotations

from typing import List, Iterable, Dict, Type
from dataclasses import dataclass

from .core import ProcessRecord, clone_records
from .schedulers import (
    BaseScheduler, FCFSScheduler, SJFScheduler, PriorityScheduler, RoundRobinScheduler,
    DEFAULT_QUANTUM,
)
from .utils import EventLogger, AVERAGE_MEAN, average


@dataclass
class SimulationResult:
    policy: str
    processes: List[ProcessRecord]
    total_time: int
    avg_waiting_time: float
    avg_turnaround_time: float
    average_mode: str
    logger: EventLogger


class Scheduler:
    FCFS = "FCFS"
    SJF = "SJF"           # per-unit shortest remaining burst
    PRIORITY = "Priority" # FCFS over ascending priority (lower number = higher priority)
    RR = "RR"


# Report order of the four disciplines.
POLICY_ORDER = (Scheduler.FCFS, Scheduler.SJF, Scheduler.PRIORITY, Scheduler.RR)

_SCHEDULERS: Dict[str, Type[BaseScheduler]] = {
    Scheduler.FCFS: FCFSScheduler,
    Scheduler.SJF: SJFScheduler,
    Scheduler.PRIORITY: PriorityScheduler,
    Scheduler.RR: RoundRobinScheduler,
}


def make_scheduler(policy: str, time_quantum: int = DEFAULT_QUANTUM) -> BaseScheduler:
    if policy not in _SCHEDULERS:
        raise ValueError(f"unknown policy {policy!r}, expected one of {POLICY_ORDER}")
    if policy == Scheduler.RR:
        return RoundRobinScheduler(time_quantum=time_quantum)
    return _SCHEDULERS[policy]()


def simulate(
    processes: Iterable[ProcessRecord],
    policy: str = Scheduler.FCFS,
    time_quantum: int = DEFAULT_QUANTUM,
    average_mode: str = AVERAGE_MEAN,
) -> SimulationResult:
    """Run one discipline on a private copy of ``processes``.

    The input records are left untouched.
    """
    scheduler = make_scheduler(policy, time_quantum)
    plist = scheduler.run(clone_records(processes))

    avg_wait = average([p.waiting for p in plist], average_mode)
    avg_tat = average([p.turnaround for p in plist], average_mode)

    return SimulationResult(
        policy=policy,
        processes=plist,
        total_time=scheduler.total_time,
        avg_waiting_time=avg_wait,
        avg_turnaround_time=avg_tat,
        average_mode=average_mode,
        logger=scheduler.logger,
    )


def run_all(
    processes: Iterable[ProcessRecord],
    time_quantum: int = DEFAULT_QUANTUM,
    average_mode: str = AVERAGE_MEAN,
) -> List[SimulationResult]:
    records = list(processes)
    return [simulate(records, policy=policy, time_quantum=time_quantum, average_mode=average_mode)
            for policy in POLICY_ORDER]
