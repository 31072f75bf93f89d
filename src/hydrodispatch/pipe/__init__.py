from .conduit import Conduit
from .segment import (
    BEND_LOSS_FACTORS,
    GRAVITY,
    STANDARD_REYNOLDS,
    PipeSegment,
    SegmentKind,
    bend_loss_factor,
    friction_factor,
)

__all__ = [
    # Constants
    "BEND_LOSS_FACTORS",
    "GRAVITY",
    "STANDARD_REYNOLDS",
    # Segments
    "PipeSegment",
    "SegmentKind",
    "bend_loss_factor",
    "friction_factor",
    # Conduit
    "Conduit",
]
