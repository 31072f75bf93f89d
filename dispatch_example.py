import logging
from datetime import datetime

from hydrodispatch import PlantPreset, build_plant, optimize

HOURLY_DEMAND = 320.0


def run_dispatch(demand: float = HOURLY_DEMAND, pop_size: int = 50, generations: int = 50, seed: int | None = None):
    """
    Find the most efficient flow distribution for the Três Marias plant at a given demand.

    Args:
        demand (float): Target power for the hour
        pop_size (int): Number of distributions kept each generation
        generations (int): Number of generations to run
        seed (int | None): Seed for a reproducible run

    Returns:
        DispatchResult: Best distribution, its fitness and the run logbook
    """
    plant = build_plant(PlantPreset.TRES_MARIAS)
    result = optimize(plant, demand, pop_size=pop_size, generations=generations, seed=seed, verbose=True)

    print(plant.report())
    print(result.best.report())
    print(f"Fitness: {result.fitness:.6f}")
    return result


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(name)s %(levelname)s %(message)s")

    start = datetime.now()
    run_dispatch(seed=42)
    end = datetime.now()
    print(f"Execution time: {end - start}")
