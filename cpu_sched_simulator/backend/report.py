"""
Plain-text rendering of simulation results in the classic schedsim
console layout.
"""

from typing import Iterable

from .simulator import SimulationResult


SECTION_RULE = "*********"


def format_metrics(result: SimulationResult) -> str:
    lines = ["\tProcesses\tBurst time\tWaiting time\tTurn around time"]
    for p in result.processes:
        lines.append(f"\t{p.pid}\t\t{p.burst}\t\t{p.waiting}\t\t{p.turnaround}")
    text = "\n".join(lines) + "\n"
    text += f"\nAverage waiting time = {result.avg_waiting_time:.2f}"
    text += f"\nAverage turn around time = {result.avg_turnaround_time:.2f}\n"
    return text


def format_section(result: SimulationResult) -> str:
    return f"\n{SECTION_RULE}\n{result.policy}\n" + format_metrics(result)


def format_report(results: Iterable[SimulationResult]) -> str:
    return "".join(format_section(r) for r in results)
