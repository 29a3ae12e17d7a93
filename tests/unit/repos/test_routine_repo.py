import pytest

from liftlog.models.routine import DaySchedule, Routine, empty_schedule
from liftlog.repositories.errors import RecordNotFoundError
from liftlog.repositories.routine import StoreRoutineRepository


def make_routine(routine_id: str, active: bool = False) -> Routine:
    schedule = empty_schedule()
    schedule[1] = DaySchedule(day=1, template_ids=["push-gym"])
    return Routine(id=routine_id, name=routine_id.upper(), is_active=active, day_schedule=schedule)


@pytest.fixture
def repo(store):
    repo = StoreRoutineRepository(store)
    repo.add(make_routine("r1", active=True))
    repo.add(make_routine("r2"))
    return repo


def active_ids(repo) -> list[str]:
    return [r.id for r in repo.get_all() if r.is_active]


def test_get_active(repo):
    assert repo.get_active().id == "r1"


def test_adding_active_routine_deactivates_others(repo):
    repo.add(make_routine("r3", active=True))
    assert active_ids(repo) == ["r3"]


def test_updating_to_active_deactivates_others(repo):
    repo.update(make_routine("r2", active=True))
    assert active_ids(repo) == ["r2"]


def test_set_active(repo):
    activated = repo.set_active("r2")

    assert activated.is_active
    assert active_ids(repo) == ["r2"]


def test_set_active_none_deactivates_all(repo):
    assert repo.set_active(None) is None
    assert repo.get_active() is None


def test_set_active_unknown_raises_and_keeps_state(repo):
    with pytest.raises(RecordNotFoundError):
        repo.set_active("nope")
    assert active_ids(repo) == ["r1"]


def test_templates_for_day(repo):
    assert repo.templates_for_day("r1", 1) == ["push-gym"]
    assert repo.templates_for_day("r1", 0) == []
