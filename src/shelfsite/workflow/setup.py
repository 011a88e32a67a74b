"""Setup state machine: pick a folder, classify it, initialize it, activate it.

The transition functions are pure (snapshot in, snapshot out) and checked
against ``_ALLOWED_TRANSITIONS``. :class:`SetupWorkflow` drives them,
performing the side effects through a :class:`SettingsRepository`.

State flow::

    WELCOME -> SELECTING_PATH -> (cancel) WELCOME
                              -> VALIDATING -> ACTIVE
                                            -> NEEDS_INITIALIZATION -> INITIALIZING -> ACTIVE
                                            -> INVALID                              -> NEEDS_INITIALIZATION (error)
    INVALID | NEEDS_INITIALIZATION -> (choose different) WELCOME
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from enum import Enum
from typing import TYPE_CHECKING, Any

from shelfsite.config.model import AppSettings
from shelfsite.site.exceptions import ProvisioningError
from shelfsite.storage.exceptions import StorageError
from shelfsite.workflow.exceptions import IllegalTransitionError

if TYPE_CHECKING:
    from pathlib import Path

    from shelfsite.settings.repository import SettingsRepository
    from shelfsite.site.validation import SiteValidation

logger = logging.getLogger(__name__)


class SetupState(str, Enum):
    """States of the setup workflow."""

    WELCOME = "welcome"
    SELECTING_PATH = "selecting_path"
    VALIDATING = "validating"
    NEEDS_INITIALIZATION = "needs_initialization"
    INVALID = "invalid"
    INITIALIZING = "initializing"
    ACTIVE = "active"


_ALLOWED_TRANSITIONS: dict[SetupState, set[SetupState]] = {
    SetupState.WELCOME: {SetupState.SELECTING_PATH},
    SetupState.SELECTING_PATH: {SetupState.WELCOME, SetupState.VALIDATING},
    SetupState.VALIDATING: {
        SetupState.ACTIVE,
        SetupState.NEEDS_INITIALIZATION,
        SetupState.INVALID,
        SetupState.WELCOME,
    },
    SetupState.NEEDS_INITIALIZATION: {SetupState.INITIALIZING, SetupState.WELCOME},
    SetupState.INVALID: {SetupState.WELCOME},
    SetupState.INITIALIZING: {SetupState.ACTIVE, SetupState.NEEDS_INITIALIZATION},
    SetupState.ACTIVE: set(),
}


@dataclass(frozen=True, slots=True)
class SetupSnapshot:
    """Everything the workflow knows at one point in time.

    At most one pending path and one pending validation are held; both are
    cleared on entering ``ACTIVE`` or on choosing a different folder.
    """

    state: SetupState = SetupState.WELCOME
    pending_path: Path | None = None
    validation: SiteValidation | None = None
    error: str | None = None
    active_path: Path | None = None
    cancelled: bool = False


def can_transition(current: SetupState, target: SetupState) -> bool:
    return target in _ALLOWED_TRANSITIONS.get(current, set())


def _advance(snapshot: SetupSnapshot, target: SetupState, **changes: Any) -> SetupSnapshot:
    if not can_transition(snapshot.state, target):
        raise IllegalTransitionError(snapshot.state.value, target.value)
    return replace(snapshot, state=target, **changes)


def classify(validation: SiteValidation) -> SetupState:
    """Map a validation result to the state the workflow settles in."""
    if not validation.is_valid:
        return SetupState.INVALID
    if validation.is_ready:
        return SetupState.ACTIVE
    return SetupState.NEEDS_INITIALIZATION


def request_folder(snapshot: SetupSnapshot) -> SetupSnapshot:
    return _advance(snapshot, SetupState.SELECTING_PATH, error=None, cancelled=False)


def folder_selected(snapshot: SetupSnapshot, path: Path | None) -> SetupSnapshot:
    if path is None:
        return _advance(snapshot, SetupState.WELCOME, pending_path=None, validation=None, cancelled=True)
    return _advance(snapshot, SetupState.VALIDATING, pending_path=path, validation=None)


def validation_completed(snapshot: SetupSnapshot, validation: SiteValidation) -> SetupSnapshot:
    """Settle after validation.

    Reaching ``ACTIVE`` here assumes the caller already persisted the activation.
    """
    target = classify(validation)
    if target is SetupState.ACTIVE:
        return _advance(snapshot, target, active_path=snapshot.pending_path, pending_path=None, validation=None)
    return _advance(snapshot, target, validation=validation)


def operation_failed(snapshot: SetupSnapshot, message: str) -> SetupSnapshot:
    """Return to ``WELCOME`` with ``message`` after picking or validating failed."""
    return _advance(snapshot, SetupState.WELCOME, pending_path=None, validation=None, error=message)


def begin_initialization(snapshot: SetupSnapshot) -> SetupSnapshot:
    return _advance(snapshot, SetupState.INITIALIZING, error=None)


def initialization_completed(snapshot: SetupSnapshot) -> SetupSnapshot:
    return _advance(
        snapshot, SetupState.ACTIVE, active_path=snapshot.pending_path, pending_path=None, validation=None
    )


def initialization_failed(snapshot: SetupSnapshot, message: str) -> SetupSnapshot:
    return _advance(snapshot, SetupState.NEEDS_INITIALIZATION, error=message)


def choose_different(snapshot: SetupSnapshot) -> SetupSnapshot:
    if snapshot.state not in (SetupState.INVALID, SetupState.NEEDS_INITIALIZATION):
        raise IllegalTransitionError(snapshot.state.value, SetupState.WELCOME.value)
    return _advance(snapshot, SetupState.WELCOME, pending_path=None, validation=None, error=None)


class SetupWorkflow:
    """Drive the setup state machine against a settings repository.

    Storage failures never escape: they are logged and surfaced through
    ``snapshot.error`` so the operator can retry.
    """

    def __init__(self, repository: SettingsRepository) -> None:
        self.repository = repository
        self.snapshot = SetupSnapshot()

    @property
    def state(self) -> SetupState:
        return self.snapshot.state

    @property
    def is_active(self) -> bool:
        return self.snapshot.state is SetupState.ACTIVE

    def select_folder(self) -> SetupSnapshot:
        """Ask the repository's picker for a folder and classify it."""
        self.snapshot = request_folder(self.snapshot)
        try:
            path = self.repository.select_site_path()
        except StorageError as e:
            return self._fail(f"Failed to select folder: {e}")

        self.snapshot = folder_selected(self.snapshot, path)
        if path is None:
            logger.info("Folder selection cancelled")
            return self.snapshot
        return self._validate(path)

    def submit_path(self, path: Path) -> SetupSnapshot:
        """Classify ``path`` as if the picker had returned it."""
        self.snapshot = folder_selected(request_folder(self.snapshot), path)
        return self._validate(path)

    def initialize(self) -> SetupSnapshot:
        """Scaffold missing data for the pending folder and activate it on success."""
        self.snapshot = begin_initialization(self.snapshot)
        path = self.snapshot.pending_path
        if path is None:
            return self._settle_failed_init("No folder selected")

        try:
            result = self.repository.initialize_site_data(path)
        except (StorageError, ProvisioningError) as e:
            return self._settle_failed_init(str(e))
        if not result.success:
            return self._settle_failed_init(result.error or "Failed to initialize site data")
        try:
            self.repository.save(AppSettings(library_path=path))
        except (StorageError, ProvisioningError) as e:
            return self._settle_failed_init(str(e))

        self.snapshot = initialization_completed(self.snapshot)
        logger.info("Initialized and activated %s", path)
        return self.snapshot

    def choose_different(self) -> SetupSnapshot:
        self.snapshot = choose_different(self.snapshot)
        return self.snapshot

    def _validate(self, path: Path) -> SetupSnapshot:
        try:
            validation = self.repository.validate_site_path(path)
            if validation.is_ready:
                self.repository.save(AppSettings(library_path=path))
        except (StorageError, ProvisioningError) as e:
            return self._fail(f"Failed to validate folder: {e}")

        self.snapshot = validation_completed(self.snapshot, validation)
        logger.info("Folder %s classified as %s", path, self.snapshot.state.value)
        return self.snapshot

    def _fail(self, message: str) -> SetupSnapshot:
        logger.warning(message)
        self.snapshot = operation_failed(self.snapshot, message)
        return self.snapshot

    def _settle_failed_init(self, message: str) -> SetupSnapshot:
        logger.warning("Initialization failed: %s", message)
        self.snapshot = initialization_failed(self.snapshot, message)
        return self.snapshot
