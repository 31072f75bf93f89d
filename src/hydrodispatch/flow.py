from typing import TYPE_CHECKING

from hydrodispatch.errors import BoundsError, ConfigurationError, StateError
from hydrodispatch.pipe.segment import STANDARD_REYNOLDS

if TYPE_CHECKING:
    from hydrodispatch.turbine import Turbine


class Flow:
    """Flow assigned to one turbine: a single gene of a distribution.

    The turbine is referenced, never owned. Copies share it, so every locus
    of every distribution reads the same operating limits.
    """

    __slots__ = ("_turbine", "_value", "_reynolds")

    def __init__(
        self,
        turbine: "Turbine",
        value: float | None = None,
        reynolds: float = STANDARD_REYNOLDS,
    ) -> None:
        if turbine is None:
            raise ConfigurationError("turbine cannot be None")
        if reynolds < 0:
            raise ConfigurationError("reynolds cannot be negative")
        self._turbine = turbine
        self._reynolds = reynolds
        self._value: float | None = None
        if value is not None:
            self.value = value

    @property
    def turbine(self) -> "Turbine":
        return self._turbine

    @property
    def reynolds(self) -> float:
        return self._reynolds

    @property
    def bounds(self) -> tuple[float, float]:
        return self._turbine.flow_bounds

    @property
    def value(self) -> float | None:
        return self._value

    @value.setter
    def value(self, value: float) -> None:
        lo, hi = self.bounds
        if not (lo <= value <= hi):
            raise BoundsError(value, (lo, hi))
        self._value = float(value)

    @property
    def is_set(self) -> bool:
        return self._value is not None

    def require_value(self) -> float:
        if self._value is None:
            raise StateError("flow value has not been assigned")
        return self._value

    def power(self) -> float:
        return self._turbine.power(self)

    def copy(self) -> "Flow":
        return Flow(self._turbine, self._value, self._reynolds)

    def __deepcopy__(self, memo: dict) -> "Flow":
        return self.copy()

    def __repr__(self) -> str:
        return f"Flow(value={self._value!r}, reynolds={self._reynolds!r})"
