class DispatchError(Exception):
    """Base class for all errors raised by hydrodispatch."""


class ConfigurationError(DispatchError, ValueError):
    """Raised when a physical parameter is invalid at construction time."""

    pass


class StateError(DispatchError, RuntimeError):
    """Raised when an operation is called out of lifecycle order."""

    pass


class BoundsError(DispatchError, ValueError):
    """Raised when a flow value falls outside its turbine's operating range."""

    def __init__(self, value: float, bounds: tuple[float, float]):
        self.value = value
        self.bounds = bounds
        lo, hi = bounds
        super().__init__(f"Flow value {value} outside bounds [{lo}, {hi}]")


class UnknownBendAngleError(DispatchError, LookupError):
    """Raised when a bend angle has no entry in the loss factor table."""

    def __init__(self, angle: float):
        self.angle = angle
        super().__init__(f"Bend angle {angle:.4f} degrees not defined in the loss factor table")


class TurbineDataError(DispatchError, OSError):
    """Raised when turbine parameter files are missing or malformed."""

    pass
