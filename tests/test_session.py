import pytest

from buildlab.core.builder import ConcreteBuildingBuilder
from buildlab.core.errors import BuildLabError, CopyCountOutOfRange, NoCurrentResult
from buildlab.core.session import BuildSession
from buildlab.models import Building, SessionState


def _built(type="Residential", floors=5, color="Blue") -> Building:
    return ConcreteBuildingBuilder(type).set_floors(floors).set_color(color).build()


def test_new_session_is_empty(session: BuildSession):
    assert session.state == SessionState.EMPTY
    assert session.result is None
    assert session.copies == []
    assert not session.can_copy
    assert not session.can_clear


def test_copy_without_result_fails(session: BuildSession):
    with pytest.raises(NoCurrentResult):
        session.copy_current(1)
    assert session.copies == []
    assert issubclass(NoCurrentResult, BuildLabError)


def test_record_result(session: BuildSession):
    b = _built()
    session.record_result(b)
    assert session.result is b
    assert session.state == SessionState.HAS_RESULT_ONLY
    assert session.can_copy


def test_copy_current_appends_distinct_clones(session: BuildSession):
    b = _built()
    session.record_result(b)

    clones = session.copy_current(3)

    assert len(clones) == 3
    assert session.copies == clones
    ids = {c.id for c in clones}
    assert len(ids) == 3
    assert b.id not in ids
    for c in clones:
        assert (c.type, c.floors, c.color) == (b.type, b.floors, b.color)
    assert session.state == SessionState.HAS_RESULT_AND_COPIES


def test_copies_keep_insertion_order(session: BuildSession):
    session.record_result(_built(floors=1))
    first = session.copy_current(2)
    session.record_result(_built(floors=2))
    second = session.copy_current(1)
    assert session.copies == first + second
    assert [c.floors for c in session.copies] == [1, 1, 2]


def test_copies_snapshot_result_at_call_time(session: BuildSession):
    b = _built(floors=4)
    session.record_result(b)
    (copy,) = session.copy_current(1)
    b.floors = 40
    assert copy.floors == 4


@pytest.mark.parametrize("count", [0, -1, 11])
def test_copy_count_out_of_range(session: BuildSession, count: int):
    session.record_result(_built())
    with pytest.raises(CopyCountOutOfRange):
        session.copy_current(count)
    assert session.copies == []


def test_copy_count_bounds_are_inclusive(session: BuildSession):
    session.record_result(_built())
    assert len(session.copy_current(1)) == 1
    assert len(session.copy_current(10)) == 10


def test_custom_bounds():
    session = BuildSession(min_copies=2, max_copies=3)
    session.record_result(_built())
    with pytest.raises(CopyCountOutOfRange):
        session.copy_current(1)
    assert len(session.copy_current(3)) == 3


def test_copy_twice_then_clear(session: BuildSession):
    b = _built()
    session.record_result(b)
    session.copy_current(2)
    session.copy_current(2)
    assert len(session.copies) == 4

    assert session.clear_copies() == 4
    assert session.copies == []
    assert session.result is b
    assert session.state == SessionState.HAS_RESULT_ONLY
    assert not session.can_clear


def test_clear_on_empty_list(session: BuildSession):
    assert session.clear_copies() == 0
    assert session.copies == []
    assert session.state == SessionState.EMPTY


def test_new_result_keeps_existing_copies(session: BuildSession):
    session.record_result(_built(type="Residential"))
    session.copy_current(2)
    replacement = _built(type="Commercial")
    session.record_result(replacement)

    assert session.result is replacement
    assert len(session.copies) == 2
    assert all(c.type == "Residential" for c in session.copies)
    assert session.state == SessionState.HAS_RESULT_AND_COPIES
