from collections.abc import Sequence
from dataclasses import dataclass, field

import numpy as np

from hydrodispatch.distribution import Distribution
from hydrodispatch.errors import ConfigurationError
from hydrodispatch.flow import Flow
from hydrodispatch.pipe.segment import STANDARD_REYNOLDS
from hydrodispatch.turbine import Turbine


@dataclass
class Generation:
    """Builds distributions bound to a fixed, ordered set of turbines.

    ``distribution_type`` lets a search engine ask for its own individual
    class, as long as it accepts a list of loci like ``Distribution``.
    """

    turbines: Sequence[Turbine]
    rng: np.random.Generator = field(default_factory=np.random.default_rng)
    distribution_type: type[Distribution] = Distribution

    def __post_init__(self) -> None:
        if self.turbines is None:
            raise ConfigurationError("turbines cannot be None")

    def template(self) -> Distribution:
        """Distribution with every flow left unassigned."""
        return self.distribution_type([Flow(turbine, None, STANDARD_REYNOLDS) for turbine in self.turbines])

    def random(self) -> Distribution:
        """Distribution with each flow drawn uniformly within its turbine's limits."""
        loci = []
        for turbine in self.turbines:
            value = float(self.rng.uniform(turbine.min_flow, turbine.max_flow))
            # stays within [min_flow, max_flow] under float rounding
            value = min(max(value, turbine.min_flow), turbine.max_flow)
            loci.append(Flow(turbine, value, STANDARD_REYNOLDS))
        return self.distribution_type(loci)

    def random_many(self, n: int) -> list[Distribution]:
        if n < 0:
            raise ValueError("n must be non-negative")
        return [self.random() for _ in range(n)]
