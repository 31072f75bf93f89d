from collections.abc import Sequence
from dataclasses import dataclass, field

import numpy as np

from hydrodispatch.distribution import Distribution

from .generation import Generation

DEFAULT_ALPHA = 0.5


def _blend(alpha: float, a: float, b: float, bounds: tuple[float, float]) -> float:
    lo, hi = bounds
    value = alpha * b + (1 - alpha) * a
    return min(max(value, lo), hi)


def _check_pair(alpha: float, parent1: Distribution, parent2: Distribution) -> None:
    if not (0.0 <= alpha <= 1.0):
        raise ValueError("alpha must lie in [0, 1]")
    if len(parent1) != len(parent2):
        raise ValueError("parents must have the same number of loci")


def whole_arithmetic(
    generation: Generation, alpha: float, parent1: Distribution, parent2: Distribution
) -> list[Distribution]:
    """Blend every locus of two parents into two children.

    child1 = alpha * parent2 + (1 - alpha) * parent1, child2 the mirror image.
    Both parents sit within the same turbine limits and alpha lies in [0, 1],
    so each child value is a convex combination and stays within bounds.
    """
    return simple(generation, 0, alpha, parent1, parent2)


def simple(
    generation: Generation, k: int, alpha: float, parent1: Distribution, parent2: Distribution
) -> list[Distribution]:
    """Copy the first ``k`` loci from each parent and blend the rest."""
    _check_pair(alpha, parent1, parent2)
    if not (0 <= k <= len(parent1)):
        raise ValueError(f"k must lie in [0, {len(parent1)}]")

    child1 = generation.template()
    child2 = generation.template()

    for i in range(k):
        child1.set_copy(i, parent1[i])
        child2.set_copy(i, parent2[i])

    for i in range(k, len(parent1)):
        locus1, locus2 = parent1[i], parent2[i]
        a, b = locus1.require_value(), locus2.require_value()
        child1.set_value(i, _blend(alpha, a, b, locus1.bounds))
        child2.set_value(i, _blend(alpha, b, a, locus2.bounds))

    return [child1, child2]


@dataclass
class Recombination:
    """Pairwise recombination operator handed to the search engine.

    With probability ``probability`` the two parents are blended by whole
    arithmetic recombination; otherwise the children are copies of the parents.
    """

    generation: Generation
    probability: float = 1.0
    alpha: float = DEFAULT_ALPHA
    rng: np.random.Generator = field(default_factory=np.random.default_rng)

    n_parents = 2

    def __post_init__(self) -> None:
        if not (0.0 <= self.probability <= 1.0):
            raise ValueError("probability must lie in [0, 1]")
        if not (0.0 <= self.alpha <= 1.0):
            raise ValueError("alpha must lie in [0, 1]")

    def recombine(self, parents: Sequence[Distribution]) -> list[Distribution]:
        if len(parents) != self.n_parents:
            raise ValueError(f"recombination needs exactly {self.n_parents} parents, got {len(parents)}")
        parent1, parent2 = parents
        if self.rng.random() >= self.probability:
            return [parent1.copy(), parent2.copy()]
        return whole_arithmetic(self.generation, self.alpha, parent1, parent2)
