"""
Scheduling engine, process loader and report rendering.
"""

from .core import ProcessRecord, clone_records
from .simulator import simulate, run_all, Scheduler, SimulationResult

__all__ = ['ProcessRecord', 'clone_records', 'simulate', 'run_all', 'Scheduler', 'SimulationResult']
