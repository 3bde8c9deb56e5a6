from __future__ import annotations

import argparse
from typing import List, Optional
import os
import sys

from colorama import Fore, Style, init as colorama_init

# Ensure project root is on sys.path when running as a script
SCRIPT_DIR = os.path.dirname(os.path.abspath(__file__))
PROJECT_ROOT = os.path.abspath(os.path.join(SCRIPT_DIR, os.pardir, os.pardir))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

from cpu_sched_simulator.backend.driver import ScheduleDriver, SimulatorConfig
from cpu_sched_simulator.backend.loader import ProcessFileError, MAX_PROCESSES
from cpu_sched_simulator.backend.report import format_report
from cpu_sched_simulator.backend.schedulers import DEFAULT_QUANTUM
from cpu_sched_simulator.backend.utils import AVERAGE_MEAN, AVERAGE_MODES


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="schedsim",
        description="CPU scheduling simulator: FCFS, SJF, Priority and Round Robin metrics",
    )
    p.add_argument("input", nargs="?", help="Process file of 'pid burst arrival priority' integers")
    p.add_argument("--quantum", type=str, default=str(DEFAULT_QUANTUM), help="Round Robin time quantum (default 2)")
    p.add_argument("--average", choices=AVERAGE_MODES, default=AVERAGE_MEAN,
                   help="'mean' for sum/n, 'first' to reproduce the legacy first-record/n figure")
    p.add_argument("--max-processes", type=str, default=str(MAX_PROCESSES),
                   help="Maximum records to read, 0 for no limit (default 100)")
    p.add_argument("--gantt-dir", type=str, default=None, help="Save one Gantt chart PNG per algorithm here")
    p.add_argument("--export", type=str, default=None, help="Base path for JSON/CSV event logs per algorithm")
    return p


def main(argv: Optional[List[str]] = None) -> int:
    colorama_init(autoreset=True)
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.input:
        print(Fore.RED + "Usage: schedsim <input-file-path>", file=sys.stderr)
        print(parser.format_usage(), end="", file=sys.stderr)
        return 1

    try:
        quantum = int(args.quantum)
        max_processes = int(args.max_processes)
    except ValueError:
        print(Fore.RED + "Error: --quantum and --max-processes take integer values", file=sys.stderr)
        return 1

    try:
        config = SimulatorConfig(
            time_quantum=quantum,
            max_processes=max_processes or None,
            average_mode=args.average,
            gantt_dir=args.gantt_dir,
            export_base=args.export,
        )
    except ValueError as e:
        print(Fore.RED + f"Error: {e}", file=sys.stderr)
        return 1

    try:
        run = ScheduleDriver(config).run(args.input)
    except ProcessFileError as e:
        print(Fore.RED + f"Error: {e}", file=sys.stderr)
        return 1

    for warning in run.workload.warnings:
        print(Fore.YELLOW + f"Warning: {warning}", file=sys.stderr)

    sys.stdout.write(format_report(run.results))

    for path in run.written:
        print(Fore.CYAN + f"Saved {path}", file=sys.stderr)
    if config.average_mode != AVERAGE_MEAN:
        print(Style.DIM + "Averages use the legacy first-record/n formula", file=sys.stderr)
    return 0


if __name__ == "__main__":
    sys.exit(main())
