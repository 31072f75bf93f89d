from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import numpy as np
from deap import base, creator, tools

from hydrodispatch.distribution import Distribution
from hydrodispatch.operators import Generation, Recombination, Selection

from .result import DispatchResult

if TYPE_CHECKING:
    from hydrodispatch.plant import Plant

logger = logging.getLogger(__name__)

if "FitnessDispatch" not in creator.__dict__:
    creator.create("FitnessDispatch", base.Fitness, weights=(1.0,))
if "DispatchIndividual" not in creator.__dict__:
    creator.create("DispatchIndividual", Distribution, fitness=creator.FitnessDispatch)


def _derive_seeds(seed: int | None, n: int) -> list[int]:
    rng = np.random.default_rng(seed)
    return [int(x) for x in rng.integers(0, 2**31, size=n)]


def _mutate(individual: Distribution, rng: np.random.Generator, sigma: float, indpb: float) -> tuple[Distribution]:
    """Gaussian perturbation of each locus with probability ``indpb``, clipped to the turbine's limits.

    The step is scaled by the width of the turbine's flow range.
    """
    mutated = False
    for locus in individual:
        if rng.random() >= indpb:
            continue
        lo, hi = locus.bounds
        value = locus.require_value() + rng.normal(0.0, sigma * (hi - lo))
        locus.value = float(np.clip(value, lo, hi))
        mutated = True
    if mutated and individual.fitness.valid:
        del individual.fitness.values
    return (individual,)


def _evaluate_invalid(toolbox: base.Toolbox, individuals: list[Distribution]) -> int:
    invalid = [ind for ind in individuals if not ind.fitness.valid]
    for ind in invalid:
        ind.fitness.values = toolbox.evaluate(ind)
    return len(invalid)


def optimize(
    plant: Plant,
    target: float,
    *,
    pop_size: int = 50,
    generations: int = 50,
    cxpb: float = 0.9,
    mutpb: float = 0.2,
    sigma: float = 0.1,
    seed: int | None = None,
    verbose: bool = False,
) -> DispatchResult:
    """Search for the flow distribution that maximizes plant efficiency at a target power.

    Each generation draws parents by tournament, blends them pairwise, mutates
    the children and keeps the best ``pop_size`` of parents and children.
    The loop runs for exactly ``generations`` generations.
    """
    if pop_size < 2:
        raise ValueError("pop_size must be at least 2")
    if generations < 0:
        raise ValueError("generations cannot be negative")
    if not (0.0 <= mutpb <= 1.0):
        raise ValueError("mutpb must lie in [0, 1]")
    if sigma < 0:
        raise ValueError("sigma cannot be negative")

    plant.target = target

    # Derive sub-seeds for reproducibility
    init_seed, crossover_seed, mutate_seed, select_seed = _derive_seeds(seed, 4)

    generation = Generation(
        plant.turbines,
        rng=np.random.default_rng(init_seed),
        distribution_type=creator.DispatchIndividual,
    )
    recombination = Recombination(generation, probability=cxpb, rng=np.random.default_rng(crossover_seed))
    selection = Selection(
        fitness=lambda ind: ind.fitness.values[0],
        max_population=pop_size,
        rng=np.random.default_rng(select_seed),
    )
    mutate_rng = np.random.default_rng(mutate_seed)

    toolbox = base.Toolbox()
    toolbox.register("individual", generation.random)
    toolbox.register("population", tools.initRepeat, list, toolbox.individual)
    toolbox.register("evaluate", lambda ind: (plant.fitness(ind),))
    toolbox.register("mate", recombination.recombine)
    toolbox.register("mutate", _mutate, rng=mutate_rng, sigma=sigma, indpb=mutpb)
    toolbox.register("select_parents", selection.parents)
    toolbox.register("select_survivors", selection.survivors)

    stats = tools.Statistics(lambda ind: ind.fitness.values[0])
    stats.register("avg", np.mean)
    stats.register("max", np.max)
    stats.register("min", np.min)
    stats.register("std", np.std)

    logbook = tools.Logbook()
    logbook.header = ["gen", "nevals", "avg", "max", "min", "std"]

    pop = toolbox.population(n=pop_size)
    nevals = _evaluate_invalid(toolbox, pop)
    logbook.record(gen=0, nevals=nevals, **stats.compile(pop))
    if verbose:
        print(logbook.stream)

    for gen in range(1, generations + 1):
        parents = toolbox.select_parents(pop)

        offspring: list[Distribution] = []
        for p1, p2 in zip(parents[::2], parents[1::2]):
            offspring.extend(toolbox.mate([p1, p2]))
        for child in offspring:
            toolbox.mutate(child)

        nevals = _evaluate_invalid(toolbox, offspring)
        pop = toolbox.select_survivors(pop + offspring)

        record = stats.compile(pop)
        logbook.record(gen=gen, nevals=nevals, **record)
        logger.debug(f"Generation {gen}: best fitness {record['max']:.6f}")
        if verbose:
            print(logbook.stream)

    best = max(pop, key=lambda ind: ind.fitness.values[0])
    logger.info(
        f"Optimization finished after {generations} generations: "
        f"fitness {best.fitness.values[0]:.6f}, power {best.total_power:.4f} (target {target})"
    )
    return DispatchResult(best=best, fitness=best.fitness.values[0], population=pop, logbook=logbook)
