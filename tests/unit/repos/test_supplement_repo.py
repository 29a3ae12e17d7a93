from datetime import date

import pytest

from liftlog.repositories.errors import SupplementRepoError
from liftlog.repositories.supplement import (
    StoreSupplementIntakeRepository,
    StoreSupplementRepository,
)
from liftlog.utils.db import CollectionKey

DAY = date(2025, 1, 15)


@pytest.fixture
def supplements(store):
    return StoreSupplementRepository(store)


@pytest.fixture
def intakes(store):
    return StoreSupplementIntakeRepository(store)


def test_create_supplement_assigns_next_sort_order(supplements):
    first = supplements.create_supplement("Creatine")
    second = supplements.create_supplement("Vitamin D")

    assert (first.sort_order, second.sort_order) == (0, 1)
    assert [s.name for s in supplements.get_all()] == ["Creatine", "Vitamin D"]


def test_add_intake_is_idempotent_per_day(fixed_now, intakes):
    first = intakes.add_intake("creatine", DAY)
    again = intakes.add_intake("creatine", DAY)

    assert again == first
    assert len(intakes.get_for_date(DAY)) == 1


def test_add_intake_on_another_day_creates_new(fixed_now, intakes):
    intakes.add_intake("creatine", DAY)
    intakes.add_intake("creatine", date(2025, 1, 16))

    assert len(intakes.get_all()) == 2


def test_delete_for_supplement_and_date(fixed_now, intakes):
    intakes.add_intake("creatine", DAY)
    intakes.add_intake("vit-d", DAY)

    assert intakes.delete_for_supplement_and_date("creatine", DAY) is True
    assert intakes.delete_for_supplement_and_date("creatine", DAY) is False
    assert [i.supplement_id for i in intakes.get_for_date(DAY)] == ["vit-d"]


def test_delete_supplement_cascades_to_intakes(fake_table, fixed_now, supplements, intakes):
    creatine = supplements.create_supplement("Creatine")
    intakes.add_intake(creatine.id, DAY)
    intakes.add_intake("other", DAY)

    assert supplements.delete(creatine.id) is True

    assert [i["supplementId"] for i in fake_table.read(CollectionKey.SUPPLEMENT_INTAKES)] == [
        "other"
    ]


def test_failed_intake_cascade_is_logged_and_raised(
    caplog, fake_table, fixed_now, supplements, intakes
):
    creatine = supplements.create_supplement("Creatine")
    intakes.add_intake(creatine.id, DAY)
    fake_table.fail_writes_to(CollectionKey.SUPPLEMENT_INTAKES)

    with pytest.raises(SupplementRepoError) as excinfo:
        supplements.delete(creatine.id)

    assert "failed to delete its intakes" in str(excinfo.value)
    assert "Inconsistency" in caplog.text
    assert fake_table.read(CollectionKey.SUPPLEMENTS) == []
    assert len(fake_table.read(CollectionKey.SUPPLEMENT_INTAKES)) == 1


def test_purge_orphaned_intakes_repairs_failed_cascade(
    fake_table, fixed_now, supplements, intakes
):
    creatine = supplements.create_supplement("Creatine")
    vit_d = supplements.create_supplement("Vitamin D")
    intakes.add_intake(creatine.id, DAY)
    intakes.add_intake(vit_d.id, DAY)
    fake_table.fail_writes_to(CollectionKey.SUPPLEMENT_INTAKES)
    with pytest.raises(SupplementRepoError):
        supplements.delete(creatine.id)
    fake_table.fail_put_for.clear()

    removed = supplements.purge_orphaned_intakes()

    assert removed == 1
    assert [i.supplement_id for i in intakes.get_all()] == [vit_d.id]
