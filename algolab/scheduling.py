"""CPU scheduling: first come first served, round robin and shortest job first."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass


@dataclass(frozen=True)
class ProcessStats:
    """Timing figures for one scheduled process."""

    pid: int
    arrival: int
    burst: int
    waiting: int
    turnaround: int

    @property
    def completion(self) -> int:
        """Time at which the process finished."""
        return self.arrival + self.turnaround


@dataclass
class ScheduleResult:
    """The processes of one schedule, in the order the scheduler listed them."""

    processes: list[ProcessStats]

    def average_waiting(self) -> float:
        """Mean waiting time over all processes."""
        return sum(p.waiting for p in self.processes) / len(self.processes)

    def average_turnaround(self) -> float:
        """Mean turnaround time over all processes."""
        return sum(p.turnaround for p in self.processes) / len(self.processes)

    def format_table(self) -> str:
        """Render the schedule as a text table followed by the averages."""
        rule = "-" * 89
        lines = [
            rule,
            "Processes  Burst Time    Arrival Time   Waiting Time  Turn-Around Time  Completion Time",
            rule,
        ]
        lines.extend(
            f"{p.pid:6d}  {p.burst:8d}  {p.arrival:13d}  {p.waiting:14d}  "
            f"{p.turnaround:15d} {p.completion:15d}"
            for p in self.processes
        )
        lines.append(f"Average Waiting Time = {self.average_waiting():.3f}")
        lines.append(f"Average Turn Around Time = {self.average_turnaround():.3f}")
        return "\n".join(lines)


def _require_processes(count: int) -> None:
    if count == 0:
        raise ValueError("at least one process is required")


def fcfs(burst_times: Iterable[int], arrival_times: Iterable[int]) -> ScheduleResult:
    """Schedule processes in the given order, each running to completion.

    Each process starts when the previous bursts have all been served; its
    waiting time is that start time less its arrival time, never below zero.
    """
    bursts = list(burst_times)
    arrivals = list(arrival_times)
    if len(bursts) != len(arrivals):
        raise ValueError("burst_times and arrival_times differ in length")
    _require_processes(len(bursts))

    stats = []
    service = 0
    for pid, (burst, arrival) in enumerate(zip(bursts, arrivals)):
        waiting = max(service - arrival, 0) if pid else 0
        stats.append(ProcessStats(pid, arrival, burst, waiting, burst + waiting))
        service += burst
    return ScheduleResult(stats)


def round_robin(burst_times: Iterable[int], quantum: int) -> ScheduleResult:
    """Schedule processes, all arriving at time zero, in turns of ``quantum``."""
    bursts = list(burst_times)
    _require_processes(len(bursts))
    if quantum <= 0:
        raise ValueError("quantum must be positive")
    if any(b < 0 for b in bursts):
        raise ValueError("burst times must not be negative")

    remaining = list(bursts)
    waiting = [0] * len(bursts)
    time = 0
    while any(r > 0 for r in remaining):
        for i, left in enumerate(remaining):
            if left <= 0:
                continue
            if left > quantum:
                time += quantum
                remaining[i] = left - quantum
            else:
                time += left
                waiting[i] = time - bursts[i]
                remaining[i] = 0

    return ScheduleResult(
        [ProcessStats(pid, 0, burst, wait, burst + wait)
         for pid, (burst, wait) in enumerate(zip(bursts, waiting))]
    )


def _exchange_sort_by_arrival(procs: list[tuple[int, int, int]]) -> list[tuple[int, int, int]]:
    """Order processes by arrival with the pairwise exchange used by the scheduler table."""
    ordered = list(procs)
    for i in range(len(ordered) - 1):
        for j in range(i + 1, len(ordered)):
            if ordered[i][1] > ordered[j][1]:
                ordered[i], ordered[j] = ordered[j], ordered[i]
    return ordered


def shortest_job_first(processes: Iterable[Sequence[int]]) -> ScheduleResult:
    """Non-preemptive shortest job first.

    ``processes`` holds ``(pid, arrival, burst)`` triples. Whenever the CPU is
    free, the arrived process with the shortest burst runs next; ties go to
    the one listed first after ordering by arrival. If nothing has arrived
    yet, the clock moves on to the next arrival. The result lists processes
    ordered by arrival.
    """
    procs = [(int(pid), int(arrival), int(burst)) for pid, arrival, burst in processes]
    _require_processes(len(procs))
    if any(burst < 0 for _, _, burst in procs):
        raise ValueError("burst times must not be negative")

    ordered = _exchange_sort_by_arrival(procs)
    completion: dict[int, int] = {}
    pending = list(range(len(ordered)))
    clock = ordered[0][1]
    while pending:
        ready = [i for i in pending if ordered[i][1] <= clock]
        if not ready:
            clock = min(ordered[i][1] for i in pending)
            ready = [i for i in pending if ordered[i][1] <= clock]
        chosen = min(ready, key=lambda i: ordered[i][2])
        clock += ordered[chosen][2]
        completion[chosen] = clock
        pending.remove(chosen)

    stats = []
    for index, (pid, arrival, burst) in enumerate(ordered):
        turnaround = completion[index] - arrival
        stats.append(ProcessStats(pid, arrival, burst, turnaround - burst, turnaround))
    return ScheduleResult(stats)