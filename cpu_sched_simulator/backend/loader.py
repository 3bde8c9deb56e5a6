from __future__ import annotations

from dataclasses import dataclass, field
import re
from typing import List, Optional, Tuple

from .core import ProcessRecord


MAX_PROCESSES = 100
FIELDS_PER_RECORD = 4  # pid burst arrival priority
INT_TOKEN = re.compile(r"[-+]?[0-9]+")


class ProcessFileError(Exception):
    """The process file could not be opened or read."""

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"Invalid filepath {path!r}: {reason}")
        self.path = path
        self.reason = reason


@dataclass
class Workload:
    processes: Tuple[ProcessRecord, ...]
    warnings: List[str] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.processes)


def parse_processes(text: str, max_processes: Optional[int] = MAX_PROCESSES) -> Workload:
    """Parse whitespace-separated ``pid burst arrival priority`` quadruples.

    Parsing stops at the first malformed token, at an invalid record or at
    a short trailing group; what was read up to that point is kept and the
    reason is reported in ``Workload.warnings``.
    """
    tokens = text.split()
    procs: List[ProcessRecord] = []
    warnings: List[str] = []

    for start in range(0, len(tokens), FIELDS_PER_RECORD):
        chunk = tokens[start:start + FIELDS_PER_RECORD]
        record_no = len(procs) + 1
        bad = next((tok for tok in chunk if not _is_int(tok)), None)
        if bad is not None:
            warnings.append(f"record {record_no}: non-integer token {bad!r}, stopped parsing")
            break
        values = [int(tok) for tok in chunk]
        if len(values) < FIELDS_PER_RECORD:
            warnings.append(
                f"record {record_no}: expected {FIELDS_PER_RECORD} fields, found {len(values)}, stopped parsing"
            )
            break
        if max_processes is not None and len(procs) >= max_processes:
            dropped = (len(tokens) - start) // FIELDS_PER_RECORD
            warnings.append(f"capacity of {max_processes} processes reached, ignored {dropped} more record(s)")
            break
        pid, burst, arrival, priority = values
        try:
            procs.append(ProcessRecord(pid=pid, burst=burst, arrival=arrival, priority=priority))
        except ValueError as e:
            warnings.append(f"record {record_no}: {e}, stopped parsing")
            break

    return Workload(processes=tuple(procs), warnings=warnings)


def load_processes(path: str, max_processes: Optional[int] = MAX_PROCESSES) -> Workload:
    try:
        with open(path, encoding="utf-8", errors="replace") as f:
            text = f.read()
    except OSError as e:
        raise ProcessFileError(str(path), e.strerror or str(e)) from e
    return parse_processes(text, max_processes=max_processes)


def _is_int(token: str) -> bool:
    # ASCII digits with an optional sign, as scanf %d reads them
    return INT_TOKEN.fullmatch(token) is not None
