from dataclasses import dataclass, field

from hydrodispatch.errors import ConfigurationError, StateError

from .distribution import Distribution
from .pipe import Conduit
from .turbine import Turbine

TARGET_RATIO_LOW = 0.999
TARGET_RATIO_HIGH = 1.001
OFF_TARGET_PENALTY = 0.9


@dataclass(eq=False)
class Plant:
    """Hydroelectric plant acting as the fitness environment of the search.

    Fitness is efficiency (total power over total flow). Distributions whose
    power misses the target by more than 0.1% keep their place in the
    population but are scaled down by ``OFF_TARGET_PENALTY``.
    Higher fitness is better.
    """

    turbines: tuple[Turbine, ...]
    conduits: tuple[Conduit, ...]
    target: float | None = field(default=None, kw_only=True)

    def __post_init__(self) -> None:
        if self.turbines is None:
            raise ConfigurationError("turbines cannot be None")
        if self.conduits is None:
            raise ConfigurationError("conduits cannot be None")
        self.turbines = tuple(self.turbines)
        self.conduits = tuple(self.conduits)

    def check(self, distribution: Distribution) -> None:
        if len(distribution) != len(self.turbines):
            raise ConfigurationError(
                f"distribution has {len(distribution)} loci but plant has {len(self.turbines)} turbines"
            )
        for i, (locus, turbine) in enumerate(zip(distribution, self.turbines, strict=True)):
            if locus.turbine is not turbine:
                raise ConfigurationError(f"locus {i} is not bound to turbine {i} of this plant")

    def fitness(self, distribution: Distribution) -> float:
        if self.target is None:
            raise StateError("target demand has not been set")
        self.check(distribution)

        power = distribution.total_power
        flow = distribution.total_flow
        if flow == 0:
            raise StateError("cannot evaluate a distribution with zero total flow")

        efficiency = power / flow
        if power < self.target * TARGET_RATIO_LOW or power > self.target * TARGET_RATIO_HIGH:
            efficiency *= OFF_TARGET_PENALTY
        return efficiency

    def report(self) -> str:
        lines = ["Plant:"]
        lines.extend(f"\t{turbine.report()}" for turbine in self.turbines)
        lines.append(f"\ttarget={self.target}")
        return "\n".join(lines)
