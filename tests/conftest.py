from collections.abc import Callable

import numpy as np
import pytest

from hydrodispatch import Conduit, Flow, Plant, PlantPreset, Turbine, build_plant
from hydrodispatch.pipe import STANDARD_REYNOLDS

GOLDEN_COEFFICIENTS = (0.1463, 0.018076, 0.0050502, -3.5254e-05, -0.00012337, -1.4507e-05)


@pytest.fixture
def make_turbine() -> Callable[..., Turbine]:
    def _make(
        min_power: float = 35.0,
        max_power: float = 66.0,
        min_flow: float = 70.0,
        max_flow: float = 140.0,
        coefficients: tuple[float, ...] = GOLDEN_COEFFICIENTS,
    ) -> Turbine:
        return Turbine(
            min_power=min_power,
            max_power=max_power,
            min_flow=min_flow,
            max_flow=max_flow,
            coefficients=coefficients,
        )

    return _make


@pytest.fixture
def installed_turbine(make_turbine) -> Turbine:
    """Golden turbine on a conduit with no segments, so net head equals gross head."""
    turbine = make_turbine()
    turbine.install(54.0, Conduit())
    turbine.turn_on()
    return turbine


@pytest.fixture
def single_turbine_plant(installed_turbine: Turbine) -> Plant:
    return Plant([installed_turbine], [installed_turbine.conduit])


@pytest.fixture
def make_flow(make_turbine) -> Callable[..., Flow]:
    """Flows on a loose, uninstalled turbine for exercising pipe losses."""
    turbine = make_turbine(min_flow=1.0, max_flow=500.0)

    def _make(value: float, reynolds: float = STANDARD_REYNOLDS) -> Flow:
        return Flow(turbine, value, reynolds)

    return _make


@pytest.fixture
def tres_marias() -> Plant:
    return build_plant(PlantPreset.TRES_MARIAS)


@pytest.fixture
def rng() -> np.random.Generator:
    return np.random.default_rng(42)
