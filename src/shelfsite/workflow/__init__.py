"""Setup workflow: the finite-state orchestration over validation and provisioning."""

from shelfsite.workflow.setup import SetupSnapshot, SetupState, SetupWorkflow

__all__ = [
    "SetupSnapshot",
    "SetupState",
    "SetupWorkflow",
]
