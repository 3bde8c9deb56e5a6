from __future__ import annotations

from typing import List, Dict, Optional, Any, Sequence
import json
import csv


AVERAGE_MEAN = "mean"
AVERAGE_FIRST = "first"
AVERAGE_MODES = (AVERAGE_MEAN, AVERAGE_FIRST)


class EventLogger:
    """Records what a scheduling run did, slice by slice."""

    def __init__(self, policy: str = "") -> None:
        self.policy = policy
        self.process_events: List[Dict[str, Any]] = []
        self.timeline: List[Dict[str, Any]] = []

    def log_process_event(self, time_s: int, pid: int, event: str) -> None:
        self.process_events.append({
            "time": time_s,
            "pid": pid,
            "event": event,
        })

    def log_timeline_slice(self, start: int, end: int, pid: Optional[int], reason: Optional[str] = None) -> None:
        # consecutive unit slices of the same process are merged into one bar
        if self.timeline:
            last = self.timeline[-1]
            if last["pid"] == pid and last["end"] == start and last["reason"] == reason:
                last["end"] = end
                return
        self.timeline.append({
            "start": start,
            "end": end,
            "pid": pid,
            "policy": self.policy,
            "reason": reason,
        })

    def busy_time(self) -> int:
        return sum(seg["end"] - seg["start"] for seg in self.timeline if seg["pid"] is not None)

    def export_json(self, path: str) -> None:
        data = {
            "policy": self.policy,
            "process_events": self.process_events,
            "timeline": self.timeline,
        }
        with open(path, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2)

    def export_csv(self, base_path_no_ext: str) -> None:
        with open(f"{base_path_no_ext}_events.csv", "w", newline="", encoding="utf-8") as f:
            writer = csv.DictWriter(f, fieldnames=["time", "pid", "event"])
            writer.writeheader()
            for row in self.process_events:
                writer.writerow(row)
        with open(f"{base_path_no_ext}_timeline.csv", "w", newline="", encoding="utf-8") as f:
            writer = csv.DictWriter(f, fieldnames=["start", "end", "pid", "policy", "reason"])
            writer.writeheader()
            for row in self.timeline:
                writer.writerow(row)


def compute_avg(values: Sequence[int]) -> float:
    return sum(values) / len(values) if values else 0.0


def compute_first_record_avg(values: Sequence[int]) -> float:
    # Reproduces the reference tool: the first record's value divided by n.
    return values[0] / len(values) if values else 0.0


def average(values: Sequence[int], mode: str = AVERAGE_MEAN) -> float:
    if mode == AVERAGE_MEAN:
        return compute_avg(values)
    if mode == AVERAGE_FIRST:
        return compute_first_record_avg(values)
    raise ValueError(f"unknown average mode {mode!r}, expected one of {AVERAGE_MODES}")
