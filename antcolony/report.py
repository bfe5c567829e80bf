"""Statistics over tries and populations, and the end-of-run report."""

from __future__ import annotations

import math
import statistics
from dataclasses import dataclass
from typing import Iterable, Sequence


@dataclass(frozen=True)
class TryResult:
    """Outcome of one independent try."""

    best_length: int
    found_at_iteration: int
    time_best_found: float
    time_total: float


@dataclass(frozen=True)
class RunSummary:
    """Statistics over all tries of a run."""

    best: int
    worst: int
    avg_best: float
    stddev_best: float
    avg_iterations: float
    stddev_iterations: float
    avg_time_best: float
    stddev_time_best: float
    avg_time_total: float
    stddev_time_total: float


def _mean(values: Sequence[float]) -> float:
    return statistics.fmean(values)


def _stddev(values: Sequence[float], mean: float) -> float:
    """Sample standard deviation; undefined (nan) for fewer than two values."""
    if len(values) < 2:
        return math.nan
    return math.sqrt(sum((v - mean) ** 2 for v in values) / (len(values) - 1))


def _mean_and_stddev(values: Sequence[float]) -> tuple[float, float]:
    mean = _mean(values)
    return mean, _stddev(values, mean)


def summarize(results: Iterable[TryResult]) -> RunSummary:
    """Combine the results of all tries of a run."""
    results = list(results)
    if not results:
        raise ValueError("no tries to summarize")
    lengths = [r.best_length for r in results]
    avg_best, sd_best = _mean_and_stddev(lengths)
    avg_it, sd_it = _mean_and_stddev([r.found_at_iteration for r in results])
    avg_tb, sd_tb = _mean_and_stddev([r.time_best_found for r in results])
    avg_tt, sd_tt = _mean_and_stddev([r.time_total for r in results])
    return RunSummary(
        best=min(lengths),
        worst=max(lengths),
        avg_best=avg_best,
        stddev_best=sd_best,
        avg_iterations=avg_it,
        stddev_iterations=sd_it,
        avg_time_best=avg_tb,
        stddev_time_best=sd_tb,
        avg_time_total=avg_tt,
        stddev_time_total=sd_tt,
    )


def format_summary(summary: RunSummary, optimal: int) -> str:
    """The final report; excess over ``optimal`` is added when it is positive."""
    s = summary
    text = (
        f"\nAverage-Best: {s.avg_best:.2f}\t Average-Iterations: {s.avg_iterations:.2f}"
        f"\nStddev-Best: {s.stddev_best:.2f} \t Stddev Iterations: {s.stddev_iterations:.2f}"
        f"\nBest try: {s.best}\t\t Worst try: {s.worst}\n"
        f"\nAvg.time-best: {s.avg_time_best:.2f} stddev.time-best: {s.stddev_time_best:.2f}\n"
        f"\nAvg.time-total: {s.avg_time_total:.2f} stddev.time-total: {s.stddev_time_total:.2f}\n"
    )
    if optimal > 0:
        excess_best = (s.best - optimal) / optimal
        excess_avg = (s.avg_best - optimal) / optimal
        excess_worst = (s.worst - optimal) / optimal
        text += (
            f" excess best = {excess_best:f}, excess average = {excess_avg:f}, "
            f"excess worst = {excess_worst:f}\n"
        )
    return text


def population_statistics(
    tour_lengths: Sequence[int],
    pairwise_distances: Iterable[int],
    branching_factor: float,
    n: int,
) -> dict[str, float]:
    """Statistics of one population of ants.

    ``pairwise_distances`` holds the distance between every pair of ants.
    The result has the mean and standard deviation of the tour lengths,
    their coefficient of variation, the branching factor, the number of
    branches above one per instance, and the average pairwise distance,
    absolute and per node.
    """
    n_ants = len(tour_lengths)
    if n_ants < 2:
        raise ValueError("population statistics need at least two ants")
    if n <= 0:
        raise ValueError("the instance needs at least one node")
    mean, stddev = _mean_and_stddev([float(x) for x in tour_lengths])
    pairs = n_ants * (n_ants - 1) / 2.0
    avg_distance = sum(float(d) for d in pairwise_distances) / pairs
    return {
        "mean": mean,
        "stddev": stddev,
        "variation": stddev / mean if mean else math.nan,
        "branching_factor": branching_factor,
        "branches": (branching_factor - 1.0) * n,
        "avg_distance": avg_distance,
        "avg_distance_per_node": avg_distance / n,
    }


def tour_sum_is_valid(tour: Sequence[int], n: int) -> bool:
    """Quick feasibility check: the first ``n`` cities sum to ``0 + ... + n-1``."""
    return sum(tour[:n]) == (n - 1) * n // 2