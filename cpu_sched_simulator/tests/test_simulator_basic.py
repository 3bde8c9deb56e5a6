import pytest

from cpu_sched_simulator.backend.core import ProcessRecord
from cpu_sched_simulator.backend.simulator import simulate, run_all, Scheduler, POLICY_ORDER
from cpu_sched_simulator.backend.utils import average, AVERAGE_FIRST, AVERAGE_MEAN


def make_records():
    return [
        ProcessRecord(pid=1, burst=24, arrival=0, priority=3),
        ProcessRecord(pid=2, burst=3, arrival=0, priority=1),
        ProcessRecord(pid=3, burst=3, arrival=0, priority=2),
    ]


def test_simulate_leaves_input_untouched():
    procs = make_records()
    result = simulate(procs, policy=Scheduler.PRIORITY)
    assert [p.pid for p in procs] == [1, 2, 3]
    assert all(p.waiting == 0 and p.turnaround == 0 for p in procs)
    assert [p.pid for p in result.processes] == [2, 3, 1]


def test_mean_average_is_sum_over_n():
    result = simulate(make_records(), policy=Scheduler.FCFS)
    assert result.average_mode == AVERAGE_MEAN
    assert result.avg_waiting_time == pytest.approx(17.0)
    assert result.avg_turnaround_time == pytest.approx(27.0)


def test_first_record_average_reproduces_legacy_output():
    result = simulate(make_records(), policy=Scheduler.FCFS, average_mode=AVERAGE_FIRST)
    # legacy figure: first record's value divided by n
    assert result.avg_waiting_time == pytest.approx(0.0)
    assert result.avg_turnaround_time == pytest.approx(8.0)

    prio = simulate(make_records(), policy=Scheduler.PRIORITY, average_mode=AVERAGE_FIRST)
    assert prio.avg_turnaround_time == pytest.approx(1.0)


@pytest.mark.parametrize("mode", [AVERAGE_MEAN, AVERAGE_FIRST])
def test_empty_workload_has_zero_averages(mode):
    for result in run_all([], average_mode=mode):
        assert result.processes == []
        assert result.avg_waiting_time == 0.0
        assert result.avg_turnaround_time == 0.0
        assert result.total_time == 0


def test_unknown_average_mode():
    with pytest.raises(ValueError):
        average([1, 2], "median")


def test_unknown_policy():
    with pytest.raises(ValueError):
        simulate(make_records(), policy="SRTF")


def test_run_all_order_and_independence():
    procs = make_records()
    results = run_all(procs, time_quantum=4)
    assert [r.policy for r in results] == list(POLICY_ORDER)
    assert [r.logger.policy for r in results] == list(POLICY_ORDER)

    fcfs, sjf, prio, rr = results
    assert [p.waiting for p in fcfs.processes] == [0, 24, 27]
    assert [p.waiting for p in sjf.processes] == [6, 0, 3]
    assert [p.pid for p in prio.processes] == [2, 3, 1]
    # q=4: p1 0-4, p2 4-7, p3 7-10, then p1 alone until 30
    assert [p.waiting for p in rr.processes] == [6, 4, 7]
    assert rr.total_time == 30
    assert fcfs.processes[0] is not sjf.processes[0]
