"""Exceptions for the setup workflow."""

from shelfsite.exceptions import ShelfsiteError


class WorkflowError(ShelfsiteError):
    """Base exception for workflow errors."""


class IllegalTransitionError(WorkflowError):
    """Raised when an action is not permitted in the current state."""

    def __init__(self, current: str, target: str) -> None:
        self.current = current
        self.target = target
        super().__init__(f"Illegal state transition: {current} -> {target}")
