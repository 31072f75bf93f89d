from collections.abc import Callable, Sequence
from dataclasses import dataclass, field

import numpy as np

from hydrodispatch.distribution import Distribution

TOURNAMENT_SIZE = 20
TOURNAMENT_WINNERS = 2


@dataclass
class Selection:
    """Parent and survivor selection driven by a fitness function (higher is better).

    Parents come from repeated tournaments: each round draws a random group of
    ``tournament_size`` individuals and keeps the best ``n_winners``. Rounds are
    independent, so an individual can win several times. Survivors are the
    ``max_population`` fittest individuals.
    """

    fitness: Callable[[Distribution], float]
    max_population: int
    tournament_size: int = TOURNAMENT_SIZE
    n_winners: int = TOURNAMENT_WINNERS
    rng: np.random.Generator = field(default_factory=np.random.default_rng)

    def __post_init__(self) -> None:
        if self.max_population < 1:
            raise ValueError("max_population must be at least 1")
        if self.tournament_size < 1:
            raise ValueError("tournament_size must be at least 1")
        if not (1 <= self.n_winners <= self.tournament_size):
            raise ValueError("n_winners must lie in [1, tournament_size]")

    def _ranked(self, population: Sequence[Distribution]) -> list[Distribution]:
        scores = [self.fitness(d) for d in population]
        order = sorted(range(len(population)), key=lambda i: scores[i], reverse=True)
        return [population[i] for i in order]

    def tournament(self, population: Sequence[Distribution]) -> list[Distribution]:
        """Best ``n_winners`` out of one randomly drawn group."""
        size = min(self.tournament_size, len(population))
        picks = self.rng.choice(len(population), size=size, replace=False)
        group = [population[int(i)] for i in picks]
        return self._ranked(group)[: self.n_winners]

    def parents(self, population: Sequence[Distribution]) -> list[Distribution]:
        if not population:
            return []
        pool: list[Distribution] = []
        while len(pool) < len(population):
            pool.extend(self.tournament(population))
        return pool[: len(population)]

    def survivors(self, population: Sequence[Distribution]) -> list[Distribution]:
        return self._ranked(population)[: self.max_population]
