from __future__ import annotations

from typing import List, Dict
import os
import random
import matplotlib.pyplot as plt

from .core import ProcessRecord
from .utils import EventLogger


def ensure_dir(path: str) -> None:
    parent = os.path.dirname(path)
    if parent:
        os.makedirs(parent, exist_ok=True)


def pid_color(pid: int) -> str:
    # Stable color per pid so the same process looks alike across charts
    rng = random.Random(pid)
    r = rng.randint(50, 220)
    g = rng.randint(50, 220)
    b = rng.randint(50, 220)
    return f"#{r:02x}{g:02x}{b:02x}"


def plot_gantt(processes: List[ProcessRecord], logger: EventLogger, out_path: str) -> None:
    fig, ax = plt.subplots(figsize=(12, 3 + 0.2 * max(1, len(processes))))

    pids_order = sorted({p.pid for p in processes})
    y_positions: Dict[int, int] = {pid: i for i, pid in enumerate(pids_order)}

    for seg in logger.timeline:
        pid = seg.get("pid")
        if pid is None:
            # idle time
            ax.axvspan(seg["start"], seg["end"], color="#dddddd", alpha=0.5)
            continue
        start = seg["start"]
        end = seg["end"]
        ax.barh(y_positions[pid], end - start, left=start, color=pid_color(pid), edgecolor="black", alpha=0.9)

    ax.set_yticks([y_positions[pid] for pid in pids_order])
    ax.set_yticklabels([f"P{pid}" for pid in pids_order])
    ax.set_xlabel("Time")
    ax.set_title(f"Gantt Chart - {logger.policy}")
    ax.grid(True, axis="x", linestyle=":", alpha=0.5)
    fig.tight_layout()

    ensure_dir(out_path)
    fig.savefig(out_path, dpi=150)
    plt.close(fig)
