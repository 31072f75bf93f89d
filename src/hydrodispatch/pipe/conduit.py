from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from hydrodispatch.errors import ConfigurationError, StateError

from .segment import PipeSegment

if TYPE_CHECKING:
    from hydrodispatch.flow import Flow
    from hydrodispatch.turbine import Turbine


@dataclass(eq=False)
class Conduit:
    """Ordered chain of pipe segments feeding exactly one turbine."""

    segments: list[PipeSegment] = field(default_factory=list)
    _turbine: "Turbine | None" = field(default=None, init=False, repr=False)

    @property
    def turbine(self) -> "Turbine | None":
        return self._turbine

    @property
    def is_connected(self) -> bool:
        return self._turbine is not None

    def add_segment(self, segment: PipeSegment) -> None:
        if segment is None:
            raise ConfigurationError("segment cannot be None")
        self.segments.append(segment)

    def connect_turbine(self, turbine: "Turbine") -> None:
        if self.is_connected:
            raise StateError("conduit already feeds a turbine")
        if turbine is None:
            raise ConfigurationError("turbine cannot be None")
        self._turbine = turbine

    def total_loss(self, flow: "Flow") -> float:
        return sum(segment.loss(flow) for segment in self.segments)
