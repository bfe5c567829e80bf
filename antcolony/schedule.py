"""Pheromone update schedules and convergence measures of the ACO algorithms."""

from __future__ import annotations

import enum
from typing import Sequence

Matrix = Sequence[Sequence[float]]

_BEST_SO_FAR_DELAY = 50
_QAP_ITERATION_BEST_PHASE = 5


class UpdateTarget(enum.Enum):
    """The ant whose solution deposits pheromone in MAX-MIN Ant System."""

    ITERATION_BEST = "iteration-best"
    RESTART_BEST = "restart-best"
    BEST_SO_FAR = "best-so-far"


class EvaporationMode(enum.Enum):
    """How the pheromone trails evaporate in one iteration."""

    NONE = "none"
    FULL = "full"
    NN_LIST = "nn-list"
    MMAS_NN_LIST = "mmas-nn-list"


def _cdiv(a: int, b: int) -> int:
    """Integer division that truncates towards zero."""
    quotient = abs(a) // abs(b)
    return quotient if (a >= 0) == (b > 0) else -quotient


def _branches(values: Sequence[float], lam: float) -> int:
    low = min(values)
    high = max(values)
    cutoff = low + lam * (high - low)
    return sum(1 for value in values if value > cutoff)


def tsp_node_branching(
    pheromone: Matrix, nn_list: Sequence[Sequence[int]], nn_ants: int, lam: float
) -> float:
    """Average lambda-branching factor over the candidate lists, halved.

    For each node only the pheromone on the arcs to its first ``nn_ants``
    nearest neighbours is considered.
    """
    n = len(pheromone)
    if n == 0:
        raise ValueError("the pheromone matrix is empty")
    if nn_ants <= 0:
        raise ValueError("nn_ants must be positive")
    total = 0
    for row, neighbours in zip(pheromone, nn_list):
        candidates = list(neighbours[:nn_ants])
        if not candidates:
            raise ValueError("a nearest neighbour list is empty")
        total += _branches([row[j] for j in candidates], lam)
    return total / (n * 2)


def qap_node_branching(pheromone: Matrix, lam: float) -> float:
    """Average lambda-branching factor over all entries of each row."""
    n = len(pheromone)
    if n == 0:
        raise ValueError("the pheromone matrix is empty")
    total = sum(_branches(list(row), lam) for row in pheromone)
    return total / n


def _convergence(values, count: int, trail_max: float, trail_min: float) -> float:
    if count == 0:
        raise ValueError("no pheromone values to measure")
    if trail_max == trail_min:
        raise ValueError("trail_max and trail_min must differ")
    cf = sum(max(trail_max - tau, tau - trail_min) for tau in values)
    cf /= count * (trail_max - trail_min)
    return 2.0 * (cf - 0.5)


def tsp_convergence_factor(
    pheromone: Matrix,
    nn_list: Sequence[Sequence[int]],
    nn_ants: int,
    trail_max: float,
    trail_min: float,
) -> float:
    """Convergence factor over the candidate-list arcs: 0 far from, 1 at convergence."""
    n = len(pheromone)
    if nn_ants <= 0:
        raise ValueError("nn_ants must be positive")
    values = [
        row[j]
        for row, neighbours in zip(pheromone, nn_list)
        for j in neighbours[:nn_ants]
    ]
    return _convergence(values, n * nn_ants, trail_max, trail_min)


def qap_convergence_factor(
    pheromone: Matrix, trail_max: float, trail_min: float
) -> float:
    """Convergence factor over all pheromone entries."""
    n = len(pheromone)
    values = [tau for row in pheromone for tau in row]
    return _convergence(values, n * n, trail_max, trail_min)


def _check_u_gb(u_gb: int) -> None:
    if u_gb <= 0:
        raise ValueError(f"u_gb must be positive, got {u_gb}")


def tsp_mmas_update_target(
    iteration: int, u_gb: int, restart_found_best: int
) -> UpdateTarget:
    """Which ant deposits pheromone in MMAS for the TSP at ``iteration``."""
    _check_u_gb(u_gb)
    if iteration % u_gb:
        return UpdateTarget.ITERATION_BEST
    if u_gb == 1 and iteration - restart_found_best > _BEST_SO_FAR_DELAY:
        return UpdateTarget.BEST_SO_FAR
    return UpdateTarget.RESTART_BEST


def tsp_next_u_gb(
    iterations_since_restart: int, schedule_length: int, local_search: bool
) -> int:
    """Frequency of restart-best updates for the next TSP iteration."""
    if not local_search:
        return 25
    if iterations_since_restart < _cdiv(schedule_length, 8):
        return 25
    if iterations_since_restart < _cdiv(schedule_length, 4):
        return 5
    if iterations_since_restart < _cdiv(schedule_length, 2):
        return 3
    if iterations_since_restart < schedule_length:
        return 2
    return 1


def qap_mmas_update_target(
    iterations_since_restart: int, u_gb: int, schedule_length: int
) -> UpdateTarget:
    """Which ant deposits pheromone in MMAS for the QAP."""
    if iterations_since_restart < _QAP_ITERATION_BEST_PHASE:
        return UpdateTarget.ITERATION_BEST
    if iterations_since_restart < schedule_length:
        _check_u_gb(u_gb)
        if iterations_since_restart % u_gb:
            return UpdateTarget.ITERATION_BEST
        return UpdateTarget.RESTART_BEST
    return UpdateTarget.BEST_SO_FAR


def qap_next_u_gb(
    iterations_since_restart: int, schedule_length: int, tabu_search: bool
) -> int:
    """Frequency of restart-best updates for the next QAP iteration."""
    if tabu_search:
        return 2 if iterations_since_restart < schedule_length else 1
    if iterations_since_restart > schedule_length:
        return 1
    if iterations_since_restart > _cdiv(schedule_length, 2):
        return 2
    return 3


def evaporation_mode(
    uses_evaporation: bool, has_nn_list: bool, local_search: bool, ph_limits: bool
) -> EvaporationMode:
    """How evaporation is done given the algorithm and instance setup.

    With candidate lists and local search only the candidate arcs evaporate;
    with pheromone limits the lower limit is checked at the same time.
    """
    if not uses_evaporation:
        return EvaporationMode.NONE
    if has_nn_list and local_search:
        return EvaporationMode.MMAS_NN_LIST if ph_limits else EvaporationMode.NN_LIST
    return EvaporationMode.FULL