"""CPU scheduling: shortest job first, longest job first and shortest remaining time first."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass

_HEADER = (
    "ProcessId  ArrivalTime  BurstTime  Completiontime  "
    "TurnAroundTime  WaitingTime  ResponseTime"
)


@dataclass(frozen=True)
class Process:
    """A job that arrives at a given time and needs burst units of CPU."""

    pid: int
    arrival: int
    burst: int

    def __post_init__(self) -> None:
        if self.arrival < 0:
            raise ValueError("arrival time must not be negative")
        if self.burst <= 0:
            raise ValueError("burst time must be positive")


@dataclass(frozen=True)
class ScheduledProcess:
    """A process together with the times at which it first ran and finished."""

    process: Process
    start: int
    completion: int

    @property
    def turnaround(self) -> int:
        return self.completion - self.process.arrival

    @property
    def waiting(self) -> int:
        return self.turnaround - self.process.burst

    @property
    def response(self) -> int:
        return self.start - self.process.arrival


@dataclass(frozen=True)
class Schedule:
    """The outcome of a scheduling run, one entry per process."""

    entries: tuple[ScheduledProcess, ...]

    def _average(self, pick: Callable[[ScheduledProcess], int]) -> float:
        if not self.entries:
            raise ValueError("schedule is empty")
        return sum(pick(entry) for entry in self.entries) / len(self.entries)

    def average_waiting_time(self) -> float:
        return self._average(lambda entry: entry.waiting)

    def average_turnaround_time(self) -> float:
        return self._average(lambda entry: entry.turnaround)

    def average_response_time(self) -> float:
        return self._average(lambda entry: entry.response)

    def format_table(self) -> str:
        """Render the schedule as a table followed by the two main averages."""
        lines = [_HEADER]
        for entry in self.entries:
            p = entry.process
            lines.append(
                f" {p.pid}             {p.arrival}              {p.burst}"
                f"           {entry.completion}             {entry.turnaround}"
                f"              {entry.waiting}          {entry.response} "
            )
        lines.append(" ")
        lines.append(" ")
        lines.append(f" The average waiting time is : {self.average_waiting_time():f}")
        lines.append(f" The average turn around time is : {self.average_turnaround_time():f}")
        return "\n".join(lines)


def _require_processes(processes: Iterable[Process]) -> list[Process]:
    process_list = list(processes)
    if not process_list:
        raise ValueError("no processes to schedule")
    return process_list


def _non_preemptive(
    processes: Iterable[Process], priority: Callable[[Process], int]
) -> Schedule:
    ordered = sorted(_require_processes(processes), key=lambda p: p.arrival)
    results: list[ScheduledProcess | None] = [None] * len(ordered)
    waiting = list(enumerate(ordered))
    time = 0
    while waiting:
        ready = [item for item in waiting if item[1].arrival <= time]
        if not ready:
            time = min(p.arrival for _, p in waiting)
            continue
        chosen = min(ready, key=lambda item: (priority(item[1]), item[1].arrival, item[0]))
        index, process = chosen
        waiting.remove(chosen)
        results[index] = ScheduledProcess(process, time, time + process.burst)
        time += process.burst
    return Schedule(tuple(entry for entry in results if entry is not None))


def shortest_job_first(processes: Iterable[Process]) -> Schedule:
    """Run whole jobs, always the shortest one ready; ties go to the earlier arrival."""
    return _non_preemptive(processes, lambda p: p.burst)


def longest_job_first(processes: Iterable[Process]) -> Schedule:
    """Run whole jobs, always the longest one ready; ties go to the earlier arrival."""
    return _non_preemptive(processes, lambda p: -p.burst)


def shortest_remaining_time_first(processes: Iterable[Process]) -> Schedule:
    """Run one time unit at a time, always on the job with least work left.

    Entries keep the order in which the processes were given.
    """
    process_list = _require_processes(processes)
    remaining = [p.burst for p in process_list]
    starts: dict[int, int] = {}
    completions: dict[int, int] = {}
    time = 0
    while len(completions) < len(process_list):
        ready = [
            index
            for index, p in enumerate(process_list)
            if p.arrival <= time and index not in completions
        ]
        if not ready:
            time = min(
                p.arrival for index, p in enumerate(process_list) if index not in completions
            )
            continue
        index = min(ready, key=lambda i: (remaining[i], process_list[i].arrival, i))
        starts.setdefault(index, time)
        remaining[index] -= 1
        time += 1
        if remaining[index] == 0:
            completions[index] = time
    return Schedule(
        tuple(
            ScheduledProcess(p, starts[index], completions[index])
            for index, p in enumerate(process_list)
        )
    )