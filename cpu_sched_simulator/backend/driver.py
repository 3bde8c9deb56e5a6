from __future__ import annotations

from typing import List, Optional
from dataclasses import dataclass
import os

from .loader import Workload, load_processes, MAX_PROCESSES
from .schedulers import DEFAULT_QUANTUM
from .simulator import SimulationResult, run_all
from .utils import AVERAGE_MEAN, AVERAGE_MODES
from .visualizer import plot_gantt


@dataclass
class SimulatorConfig:
    time_quantum: int = DEFAULT_QUANTUM
    max_processes: Optional[int] = MAX_PROCESSES
    average_mode: str = AVERAGE_MEAN
    gantt_dir: Optional[str] = None
    export_base: Optional[str] = None

    def __post_init__(self) -> None:
        if self.time_quantum <= 0:
            raise ValueError(f"time quantum must be a positive integer, got {self.time_quantum}")
        if self.max_processes is not None and self.max_processes < 0:
            raise ValueError(f"max processes must be >= 0, got {self.max_processes}")
        if self.average_mode not in AVERAGE_MODES:
            raise ValueError(f"unknown average mode {self.average_mode!r}, expected one of {AVERAGE_MODES}")


@dataclass
class DriverRun:
    workload: Workload
    results: List[SimulationResult]
    written: List[str]


class ScheduleDriver:
    """Loads a process file once and runs every discipline on its own copy."""

    def __init__(self, config: SimulatorConfig | None = None):
        self.config = config or SimulatorConfig()

    def run(self, path: str) -> DriverRun:
        """Load ``path`` and simulate all four disciplines.

        Raises ProcessFileError if the file cannot be read.
        """
        workload = load_processes(path, max_processes=self.config.max_processes)
        results = run_all(
            workload.processes,
            time_quantum=self.config.time_quantum,
            average_mode=self.config.average_mode,
        )
        written = self.write_artifacts(results)
        return DriverRun(workload=workload, results=results, written=written)

    def write_artifacts(self, results: List[SimulationResult]) -> List[str]:
        written: List[str] = []
        for result in results:
            slug = result.policy.lower()
            if self.config.gantt_dir:
                out_path = os.path.join(self.config.gantt_dir, f"gantt_{slug}.png")
                plot_gantt(result.processes, result.logger, out_path)
                written.append(out_path)
            if self.config.export_base:
                base = f"{self.config.export_base}_{slug}"
                parent = os.path.dirname(base)
                if parent:
                    os.makedirs(parent, exist_ok=True)
                result.logger.export_json(f"{base}.json")
                result.logger.export_csv(base)
                written.extend([f"{base}.json", f"{base}_events.csv", f"{base}_timeline.csv"])
        return written
