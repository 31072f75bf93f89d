"""
hydrodispatch

This package models the turbine-and-penstock network of a hydroelectric plant and
provides the operators an evolutionary search needs to find the flow distribution
across turbines that maximizes efficiency while meeting a target power demand.

Classes:
    PipeSegment: A straight pipe or a curved connector, with its head-loss model.
    Conduit: An ordered chain of pipe segments feeding exactly one turbine.
    Turbine: A generating unit with operating limits and an efficiency polynomial.
    Flow: The flow assigned to one turbine; a single gene of a distribution.
    Distribution: A candidate solution, one flow per turbine.
    Plant: The fitness environment evaluating distributions against a target demand.
    Generation, Recombination, Selection: Search operators for the outer engine.
"""

from .distribution import Distribution
from .errors import (
    BoundsError,
    ConfigurationError,
    DispatchError,
    StateError,
    TurbineDataError,
    UnknownBendAngleError,
)
from .factory import PlantPreset, assemble_plant, build_plant
from .flow import Flow
from .io_utils import TurbineSpec, load_turbine_specs
from .operators import Generation, Recombination, Selection
from .optimization import DispatchResult, optimize
from .pipe import STANDARD_REYNOLDS, Conduit, PipeSegment, SegmentKind
from .plant import Plant
from .turbine import Turbine

# Define what should be imported with "from hydrodispatch import *"
__all__ = [
    # Network
    "PipeSegment",
    "SegmentKind",
    "Conduit",
    "Turbine",
    "Plant",
    "STANDARD_REYNOLDS",
    # Candidate solutions
    "Flow",
    "Distribution",
    # Operators
    "Generation",
    "Recombination",
    "Selection",
    # Assembly and data
    "PlantPreset",
    "assemble_plant",
    "build_plant",
    "TurbineSpec",
    "load_turbine_specs",
    # Search
    "optimize",
    "DispatchResult",
    # Errors
    "DispatchError",
    "ConfigurationError",
    "StateError",
    "BoundsError",
    "UnknownBendAngleError",
    "TurbineDataError",
]

# Package version
__version__ = "0.1.0"
