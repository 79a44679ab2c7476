class AstrochronError(Exception):
    """Base error."""

class ConvergenceError(AstrochronError):
    """Raised when an iterative solver exceeds its iteration cap."""

    def __init__(self, solver: str, iterations: int, correction: float):
        super().__init__(
            f"{solver} did not converge after {iterations} iterations "
            f"(last correction {correction:.3e})"
        )
        self.solver = solver
        self.iterations = iterations
        self.correction = correction

class TheoryUnavailableError(AstrochronError):
    """Raised when a theory is unknown or its optional backend cannot be loaded."""
