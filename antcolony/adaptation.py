"""Per-iteration adaptation of the ACO control parameters."""

from __future__ import annotations

import enum
import math
from dataclasses import dataclass, field


class Variation(enum.Enum):
    """How a parameter changes during a run."""

    NONE = "none"
    DELTA = "delta"
    SWITCH = "switch"


def clamp(value, start, end):
    """Keep ``value`` between ``start`` and ``end``, whichever of them is larger."""
    if start < end:
        if value < start:
            return start
        if value > end:
            return end
        return value
    if value > start:
        return start
    if value < end:
        return end
    return value


@dataclass
class ParameterSchedule:
    """A parameter that starts at ``start`` and may move towards ``end``.

    With ``Variation.DELTA`` the value moves by ``delta`` every iteration and
    is clamped to the interval between ``start`` and ``end``.  With
    ``Variation.SWITCH`` the value jumps to ``end`` at iteration ``switch``.
    """

    start: float
    end: float | None = None
    variation: Variation = Variation.NONE
    delta: float = 0.0
    switch: int = 0
    value: float = field(init=False)

    def __post_init__(self) -> None:
        if self.end is None:
            self.end = self.start
        self.value = self.start

    @property
    def _step(self) -> float:
        return -self.delta if self.start > self.end else self.delta


class ParameterAdapter:
    """Drives the schedules of ``n_ants``, ``beta``, ``rho`` and ``q0``."""

    def __init__(
        self,
        n_ants: ParameterSchedule,
        beta: ParameterSchedule,
        rho: ParameterSchedule,
        q0: ParameterSchedule,
    ) -> None:
        self.n_ants = n_ants
        self.beta = beta
        self.rho = rho
        self.q0 = q0
        self._cum_n_ants = 0.0

    @property
    def _real_schedules(self) -> tuple[ParameterSchedule, ...]:
        return (self.beta, self.rho, self.q0)

    def init(self) -> None:
        """Reset every parameter to its starting value."""
        self._cum_n_ants = 0.0
        for schedule in (self.n_ants, *self._real_schedules):
            schedule.value = schedule.start

    def next_iteration(self, iteration: int) -> None:
        """Advance every parameter by one iteration."""
        self._advance_n_ants(iteration)
        for schedule in self._real_schedules:
            if schedule.variation is Variation.DELTA:
                schedule.value = clamp(
                    schedule.value + schedule._step, schedule.start, schedule.end
                )
            elif schedule.variation is Variation.SWITCH:
                if iteration == schedule.switch:
                    schedule.value = schedule.end

    def _advance_n_ants(self, iteration: int) -> None:
        schedule = self.n_ants
        if schedule.variation is Variation.DELTA:
            # A fractional delta accumulates until it amounts to whole ants.
            self._cum_n_ants += schedule._step
            whole = math.trunc(self._cum_n_ants)
            if abs(whole) >= 1:
                schedule.value += whole
                self._cum_n_ants -= whole
                schedule.value = clamp(schedule.value, schedule.start, schedule.end)
        elif schedule.variation is Variation.SWITCH:
            if iteration == schedule.switch:
                schedule.value = schedule.end