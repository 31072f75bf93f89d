from .optimize import optimize
from .result import DispatchResult

__all__ = ["optimize", "DispatchResult"]
