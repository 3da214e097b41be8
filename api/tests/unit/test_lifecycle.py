import pytest

from app.application.services.lifecycle import LifecycleController
from app.domain.entities.sports_category import SportsCategory
from app.domain.entities.temporary_person import TemporaryPerson
from app.shared.constants.person_constants import PersonType, RecordStatus
from app.shared.exceptions.domain import StateTransitionException


@pytest.fixture
def lifecycle() -> LifecycleController:
    return LifecycleController()


def _person(status: RecordStatus) -> TemporaryPerson:
    return TemporaryPerson(id=1, first_name="Ana", last_name="Gómez", person_type=PersonType.ATHLETE, status=status)


def _category(status: RecordStatus, inscriptions: int = 0, participants: int = 0) -> SportsCategory:
    return SportsCategory(
        id=3,
        name="Sub-15",
        min_age=13,
        max_age=15,
        status=status,
        inscriptions_count=inscriptions,
        participants_count=participants,
    )


@pytest.mark.parametrize("current", list(RecordStatus))
@pytest.mark.parametrize("target", list(RecordStatus))
def test_status_transitions_are_free(lifecycle, current, target):
    lifecycle.ensure_transition("TemporaryPerson", current, target)


def test_active_person_cannot_be_deleted(lifecycle):
    with pytest.raises(StateTransitionException) as exc_info:
        lifecycle.ensure_person_deletable(_person(RecordStatus.ACTIVE))

    assert '"Active"' in exc_info.value.message
    assert exc_info.value.error_code == "INVALID_STATE_TRANSITION"
    assert exc_info.value.details["current_status"] == "Active"


def test_inactive_person_can_be_deleted(lifecycle):
    lifecycle.ensure_person_deletable(_person(RecordStatus.INACTIVE))


def test_active_category_names_state_as_blocker(lifecycle):
    with pytest.raises(StateTransitionException) as exc_info:
        lifecycle.ensure_category_deletable(_category(RecordStatus.ACTIVE))

    assert '"Active"' in exc_info.value.message
    assert exc_info.value.details["blockers"] == {"status": "Active"}


def test_inactive_category_with_usage_names_both_counts(lifecycle):
    with pytest.raises(StateTransitionException) as exc_info:
        lifecycle.ensure_category_deletable(_category(RecordStatus.INACTIVE, inscriptions=2, participants=0))

    message = exc_info.value.message
    assert "2 inscripción(es)" in message
    assert "0 participante(s)" in message
    assert exc_info.value.details["blockers"] == {"inscriptions": 2, "participants": 0}


def test_inactive_unused_category_can_be_deleted(lifecycle):
    lifecycle.ensure_category_deletable(_category(RecordStatus.INACTIVE))
