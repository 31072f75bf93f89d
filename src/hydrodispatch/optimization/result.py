from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from deap.tools import Logbook

    from hydrodispatch.distribution import Distribution


@dataclass(frozen=True, slots=True)
class DispatchResult:
    best: Distribution
    fitness: float
    population: list[Distribution]
    logbook: Logbook

    @property
    def total_power(self) -> float:
        return self.best.total_power

    @property
    def flows(self) -> list[float]:
        """Flow assigned to each turbine by the best distribution."""
        return [locus.require_value() for locus in self.best]

    def __len__(self) -> int:
        return len(self.population)

    def __getitem__(self, idx: int) -> Distribution:
        return self.population[idx]
