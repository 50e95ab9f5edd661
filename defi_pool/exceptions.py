"""Exceptions for the lending pool client."""


class DefiPoolError(Exception):
    """Base exception for lending pool errors."""


class ValidationError(DefiPoolError):
    """User-entered amount is empty, non-numeric or not positive."""


class DuplicateSubmissionError(DefiPoolError):
    """A submission of the same operation kind is still outstanding."""

    def __init__(self, operation: str) -> None:
        """Initialize duplicate submission error.

        Args:
            operation: Operation kind that is already in flight.
        """
        super().__init__(f"A {operation} transaction is already in progress")
        self.operation = operation


class SimulationError(DefiPoolError):
    """Read-only simulated call failed or returned no value."""
