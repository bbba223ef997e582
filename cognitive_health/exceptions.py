"""
Core exceptions.

Invariant violations are defects, not recoverable runtime conditions.
They are raised loudly and never caught inside the package.
"""


class InvariantViolationError(ValueError):
    """A structural invariant of the scoring core does not hold."""

    def __init__(self, invariant: str, detail: str):
        self.invariant = invariant
        self.detail = detail
        super().__init__(f"{invariant}: {detail}")
