import math
from dataclasses import dataclass, field
from enum import Enum, auto
from types import MappingProxyType
from typing import TYPE_CHECKING, Self

from hydrodispatch.errors import ConfigurationError, UnknownBendAngleError

if TYPE_CHECKING:
    from hydrodispatch.flow import Flow

GRAVITY = 9.8  # m/s²
STANDARD_REYNOLDS = 70000.0
MAX_BEND_ANGLE = 45.0  # degrees

# Bend angle (degrees) -> loss factor
BEND_LOSS_FACTORS: MappingProxyType[float, float] = MappingProxyType(
    {
        30.0: 0.1,
        28.0: 0.08,
        22.0: 0.03,
        21.0: 0.02,
        16.0: 0.051,
        12.0: 0.047,
        4.0: 0.012,
        3.0: 0.0118,
    }
)


def bend_loss_factor(angle: float) -> float:
    """Look up the tabulated loss factor for a bend angle. No interpolation."""
    try:
        return BEND_LOSS_FACTORS[float(angle)]
    except KeyError:
        raise UnknownBendAngleError(angle) from None


def friction_factor(reynolds: float, relative_roughness: float, diameter: float) -> float:
    """Darcy friction factor from an explicit blend of the laminar and turbulent regimes."""
    laminar = (64 / reynolds) ** 8
    b = relative_roughness / (3.7 * diameter)
    c = 5.74 / reynolds**0.9
    d = 2500 / reynolds
    turbulent = 9.5 * (math.log(b + c) - d**6) ** -16
    return (laminar + turbulent) ** 0.125


class SegmentKind(Enum):
    STRAIGHT = auto()
    POLYGONAL_BEND = auto()
    SMOOTH_BEND = auto()

    @property
    def is_bend(self) -> bool:
        return self is not SegmentKind.STRAIGHT


@dataclass(frozen=True)
class PipeSegment:
    """One piece of penstock: a straight cylindrical pipe or a curved connector.

    Straight segments lose head through wall friction only; bends lose head
    through the change of direction only. Both mechanisms are exposed so a
    segment can be inspected per mechanism, and ``loss`` sums them.

    Use the ``straight``, ``polygonal_bend`` and ``smooth_bend`` constructors
    rather than building the variant by hand.
    """

    kind: SegmentKind
    diameter: float  # m
    length: float = 0.0  # m, straight segments only
    roughness: float = 0.0  # m, straight segments only
    angle: float = 0.0  # degrees, bends only

    area: float = field(init=False, repr=False)
    relative_roughness: float = field(init=False, repr=False)
    loss_constant: float = field(init=False, repr=False)
    standard_friction: float = field(init=False, repr=False)

    def __post_init__(self) -> None:
        if self.diameter <= 0:
            raise ConfigurationError("diameter must be positive")
        # TODO: check the exponent against measured head losses; the geometric area uses diameter**2
        area = math.pi * self.diameter**4 / 4
        object.__setattr__(self, "area", area)

        if self.kind.is_bend:
            if not (0 <= self.angle <= MAX_BEND_ANGLE):
                raise ConfigurationError(f"bend angle {self.angle} outside [0, {MAX_BEND_ANGLE}]")
            factor = self.bend_factor()
            object.__setattr__(self, "relative_roughness", 0.0)
            object.__setattr__(self, "loss_constant", factor / (area**2 * 2 * GRAVITY))
            object.__setattr__(self, "standard_friction", 0.0)
            return

        if self.length <= 0:
            raise ConfigurationError("length must be positive")
        if self.roughness < 0:
            raise ConfigurationError("roughness cannot be negative")
        relative_roughness = self.roughness / self.diameter
        object.__setattr__(self, "relative_roughness", relative_roughness)
        object.__setattr__(
            self, "loss_constant", ((1 / area) ** 2 / (2 * GRAVITY)) * (self.length / self.diameter)
        )
        object.__setattr__(
            self, "standard_friction", friction_factor(STANDARD_REYNOLDS, relative_roughness, self.diameter)
        )

    @classmethod
    def straight(cls, length: float, diameter: float, roughness: float) -> Self:
        return cls(kind=SegmentKind.STRAIGHT, diameter=diameter, length=length, roughness=roughness)

    @classmethod
    def polygonal_bend(cls, diameter: float, angle: float) -> Self:
        return cls(kind=SegmentKind.POLYGONAL_BEND, diameter=diameter, angle=angle)

    @classmethod
    def smooth_bend(cls, diameter: float, angle: float) -> Self:
        return cls(kind=SegmentKind.SMOOTH_BEND, diameter=diameter, angle=angle)

    def bend_factor(self) -> float:
        """Tabulated loss factor with the shape correction applied."""
        factor = bend_loss_factor(self.angle)
        if self.kind is SegmentKind.POLYGONAL_BEND:
            return factor * (1.03 if self.angle >= 15 else 1.02)
        return factor

    def friction(self, reynolds: float) -> float:
        if reynolds == STANDARD_REYNOLDS:
            return self.standard_friction
        return friction_factor(reynolds, self.relative_roughness, self.diameter)

    def straight_loss(self, flow: "Flow") -> float:
        if self.kind.is_bend:
            return 0.0
        return self.friction(flow.reynolds) * flow.require_value() ** 2 * self.loss_constant

    def bend_loss(self, flow: "Flow") -> float:
        if not self.kind.is_bend:
            return 0.0
        return self.loss_constant * flow.require_value() ** 2

    def loss(self, flow: "Flow") -> float:
        return self.straight_loss(flow) + self.bend_loss(flow)
