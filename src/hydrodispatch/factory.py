import logging
from collections.abc import Sequence
from enum import Enum

from .errors import ConfigurationError
from .io_utils import TurbineSpec
from .pipe import Conduit, PipeSegment
from .plant import Plant

logger = logging.getLogger(__name__)

TRES_MARIAS_COEFFICIENTS = (0.1463, 0.018076, 0.0050502, -3.5254e-05, -0.00012337, -1.4507e-05)
TRES_MARIAS_GROSS_HEAD = 54.0

# (first bend angle, middle straight length, second bend angle) per penstock
_TRES_MARIAS_PENSTOCKS = (
    (28.0, 91.6, 30.0),
    (22.0, 86.26, 21.0),
    (16.0, 82.54, 12.0),
    (4.0, 80.58, 3.0),
    (4.0, 80.58, 3.0),
    (16.0, 82.54, 12.0),
)


class PlantPreset(Enum):
    TRES_MARIAS = "tres_marias"


def assemble_plant(
    specs: Sequence[TurbineSpec],
    conduits: Sequence[Conduit],
    gross_head: float,
    turned_on: bool = True,
) -> Plant:
    """Build turbines from specs, install each on its conduit and return the plant."""
    if len(specs) != len(conduits):
        raise ConfigurationError(f"got {len(specs)} turbines but {len(conduits)} conduits")

    turbines = [spec.build() for spec in specs]
    for turbine, conduit in zip(turbines, conduits, strict=True):
        turbine.install(gross_head, conduit)
        if turned_on:
            turbine.turn_on()

    logger.info(f"Assembled plant with {len(turbines)} turbines (gross head {gross_head})")
    return Plant(turbines, conduits)


def _tres_marias_conduit(first_angle: float, middle_length: float, second_angle: float) -> Conduit:
    return Conduit(
        [
            PipeSegment.straight(160.0, 6.6, 0.2),
            PipeSegment.polygonal_bend(6.6, first_angle),
            PipeSegment.straight(middle_length, 6.6, 0.2),
            PipeSegment.polygonal_bend(6.6, second_angle),
            PipeSegment.straight(13.4, 6.2, 0.2),
        ]
    )


def build_plant(preset: PlantPreset) -> Plant:
    match preset:
        case PlantPreset.TRES_MARIAS:
            specs = [
                TurbineSpec(
                    min_power=35.0,
                    max_power=66.0,
                    min_flow=70.0,
                    max_flow=140.0,
                    coefficients=TRES_MARIAS_COEFFICIENTS,
                )
                for _ in _TRES_MARIAS_PENSTOCKS
            ]
            conduits = [_tres_marias_conduit(*penstock) for penstock in _TRES_MARIAS_PENSTOCKS]
            return assemble_plant(specs, conduits, TRES_MARIAS_GROSS_HEAD)
    raise ValueError(f"Unknown plant preset: {preset}")
