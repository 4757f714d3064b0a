class AstrocalcError(Exception):
    """Base error."""

class InvalidDateError(AstrocalcError, ValueError):
    """Raised for calendar input outside the domain of a conversion (bad month, negative JD)."""

class ConvergenceError(AstrocalcError, ArithmeticError):
    """Raised when an iterative solver exceeds its iteration cap or cannot converge at all."""

    def __init__(self, message: str, iterations: int = 0, last_delta: float = float("nan")):
        super().__init__(message)
        self.iterations = iterations
        self.last_delta = last_delta
