"""Pure transition functions of the setup state machine."""

from pathlib import Path

import pytest

from shelfsite.site.validation import SiteValidation
from shelfsite.workflow import setup as sm
from shelfsite.workflow.exceptions import IllegalTransitionError
from shelfsite.workflow.setup import SetupSnapshot, SetupState

SITE = Path("/sites/mine")

READY = SiteValidation(is_valid=True, has_template_files=True, has_config=True, has_books=True)
NEEDS_DATA = SiteValidation(is_valid=True, has_template_files=True, has_config=False, has_books=True)
INVALID = SiteValidation(
    is_valid=False, has_template_files=False, has_config=False, has_books=False, missing_files=("app.js",)
)


def _validating() -> SetupSnapshot:
    return sm.folder_selected(sm.request_folder(SetupSnapshot()), SITE)


@pytest.mark.parametrize(
    ("validation", "expected"),
    [
        (READY, SetupState.ACTIVE),
        (NEEDS_DATA, SetupState.NEEDS_INITIALIZATION),
        (INVALID, SetupState.INVALID),
    ],
)
def test_classify(validation, expected):
    assert sm.classify(validation) is expected


def test_cancel_returns_to_welcome_without_pending_state():
    snapshot = sm.folder_selected(sm.request_folder(SetupSnapshot()), None)

    assert snapshot.state is SetupState.WELCOME
    assert snapshot.cancelled
    assert snapshot.pending_path is None
    assert snapshot.validation is None
    assert snapshot.error is None


def test_ready_validation_enters_active_and_clears_pending():
    snapshot = sm.validation_completed(_validating(), READY)

    assert snapshot.state is SetupState.ACTIVE
    assert snapshot.active_path == SITE
    assert snapshot.pending_path is None
    assert snapshot.validation is None


def test_needs_initialization_holds_pending_path_and_validation():
    snapshot = sm.validation_completed(_validating(), NEEDS_DATA)

    assert snapshot.state is SetupState.NEEDS_INITIALIZATION
    assert snapshot.pending_path == SITE
    assert snapshot.validation == NEEDS_DATA


def test_initialization_failure_allows_retry():
    waiting = sm.validation_completed(_validating(), NEEDS_DATA)

    failed = sm.initialization_failed(sm.begin_initialization(waiting), "disk full")
    assert failed.state is SetupState.NEEDS_INITIALIZATION
    assert failed.error == "disk full"

    retried = sm.begin_initialization(failed)
    assert retried.state is SetupState.INITIALIZING
    assert retried.error is None
    assert sm.initialization_completed(retried).state is SetupState.ACTIVE


@pytest.mark.parametrize("validation", [NEEDS_DATA, INVALID])
def test_choose_different_discards_pending(validation):
    snapshot = sm.choose_different(sm.validation_completed(_validating(), validation))

    assert snapshot == SetupSnapshot()


@pytest.mark.parametrize("validation", [NEEDS_DATA, INVALID])
def test_active_unreachable_without_initialization(validation):
    waiting = sm.validation_completed(_validating(), validation)

    with pytest.raises(IllegalTransitionError):
        sm.initialization_completed(waiting)


def test_invalid_site_cannot_be_initialized():
    invalid = sm.validation_completed(_validating(), INVALID)

    with pytest.raises(IllegalTransitionError) as exc_info:
        sm.begin_initialization(invalid)
    assert exc_info.value.current == "invalid"


def test_active_is_terminal():
    active = sm.validation_completed(_validating(), READY)

    for target in SetupState:
        assert not sm.can_transition(active.state, target)
    with pytest.raises(IllegalTransitionError):
        sm.request_folder(active)


def test_choose_different_only_from_decision_states():
    with pytest.raises(IllegalTransitionError):
        sm.choose_different(SetupSnapshot())


def test_operation_failure_surfaces_error_in_welcome():
    snapshot = sm.operation_failed(_validating(), "backend offline")

    assert snapshot.state is SetupState.WELCOME
    assert snapshot.error == "backend offline"
    assert snapshot.pending_path is None
