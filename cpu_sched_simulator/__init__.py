"""
CPU scheduling simulator.
Computes waiting and turnaround times for FCFS, SJF, Priority and Round Robin.
"""
