from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from hydrodispatch.errors import ConfigurationError, StateError

if TYPE_CHECKING:
    from hydrodispatch.flow import Flow
    from hydrodispatch.pipe import Conduit

POWER_CONSTANT = 9.8e-3
N_COEFFICIENTS = 6


@dataclass(eq=False)
class Turbine:
    """Generating unit with operating limits and a quadratic efficiency surface.

    A turbine starts disconnected and switched off. ``install`` binds it to a
    conduit and fixes its gross head, both exactly once; only then can it be
    switched on and evaluated.

    Efficiency is a second-order polynomial in net head H and flow Q::

        c0 + c1*H + c2*Q + c3*H*Q + c4*H**2 + c5*Q**2
    """

    min_power: float  # MW
    max_power: float  # MW
    min_flow: float  # m³/s
    max_flow: float  # m³/s
    coefficients: tuple[float, ...]

    _gross_head: float | None = field(default=None, init=False, repr=False)
    _conduit: "Conduit | None" = field(default=None, init=False, repr=False)
    _on: bool = field(default=False, init=False, repr=False)

    def __post_init__(self) -> None:
        if self.min_power <= 0:
            raise ConfigurationError("min_power must be positive")
        if self.max_power < 0:
            raise ConfigurationError("max_power cannot be negative")
        if self.max_power < self.min_power:
            raise ConfigurationError("max_power cannot be less than min_power")
        if self.min_flow <= 0:
            raise ConfigurationError("min_flow must be positive")
        if self.max_flow < 0:
            raise ConfigurationError("max_flow cannot be negative")
        if self.max_flow < self.min_flow:
            raise ConfigurationError("max_flow cannot be less than min_flow")
        self.coefficients = tuple(float(c) for c in self.coefficients)
        if len(self.coefficients) != N_COEFFICIENTS:
            raise ConfigurationError(
                f"expected {N_COEFFICIENTS} efficiency coefficients, got {len(self.coefficients)}"
            )

    @property
    def flow_bounds(self) -> tuple[float, float]:
        return (self.min_flow, self.max_flow)

    @property
    def gross_head(self) -> float | None:
        return self._gross_head

    @property
    def conduit(self) -> "Conduit | None":
        return self._conduit

    @property
    def is_connected(self) -> bool:
        return self._conduit is not None

    @property
    def is_on(self) -> bool:
        return self._on

    def install(self, gross_head: float, conduit: "Conduit") -> None:
        if self._gross_head is not None:
            raise StateError("gross head can only be set once")
        if gross_head < 0:
            raise ConfigurationError("gross_head cannot be negative")
        if self.is_connected:
            raise StateError("turbine is already connected to a conduit")
        if conduit is None:
            raise ConfigurationError("conduit cannot be None")
        conduit.connect_turbine(self)
        self._gross_head = gross_head
        self._conduit = conduit

    def turn_on(self) -> None:
        if not self.is_connected:
            raise StateError("turbine cannot be turned on before it is connected")
        self._on = True

    def turn_off(self) -> None:
        self._on = False

    def net_head(self, flow: "Flow") -> float:
        if self._conduit is None or self._gross_head is None:
            raise StateError("turbine is not installed")
        return self._gross_head - self._conduit.total_loss(flow)

    def efficiency(self, flow: "Flow") -> float:
        h = self.net_head(flow)
        q = flow.require_value()
        c = self.coefficients
        return c[0] + c[1] * h + c[2] * q + c[3] * h * q + c[4] * h**2 + c[5] * q**2

    def power(self, flow: "Flow") -> float:
        h = self.net_head(flow)
        q = flow.require_value()
        return POWER_CONSTANT * self.efficiency(flow) * h * q

    def report(self) -> str:
        return (
            f"Turbine(on={'yes' if self._on else 'no'}, "
            f"power=[{self.min_power:.2f}, {self.max_power:.2f}], "
            f"flow=[{self.min_flow:.2f}, {self.max_flow:.2f}])"
        )
