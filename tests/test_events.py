import pytest

from fswatch.events import (
    FSN_ALL,
    FSN_CREATE,
    FSN_DELETE,
    FSN_MODIFY,
    FSN_RENAME,
    FileEvent,
    passes_filter,
)
from fswatch.flags import (
    IN_ACCESS,
    IN_ATTRIB,
    IN_CREATE,
    IN_DELETE,
    IN_DELETE_SELF,
    IN_MODIFY,
    IN_MOVE_SELF,
    IN_MOVED_FROM,
    IN_MOVED_TO,
)

PREDICATES = ("is_create", "is_delete", "is_modify", "is_rename")


@pytest.mark.parametrize(
    "mask, kind",
    [
        (IN_CREATE, "is_create"),
        (IN_MOVED_TO, "is_create"),
        (IN_DELETE, "is_delete"),
        (IN_DELETE_SELF, "is_delete"),
        (IN_MODIFY, "is_modify"),
        (IN_ATTRIB, "is_modify"),
        (IN_MOVE_SELF, "is_rename"),
        (IN_MOVED_FROM, "is_rename"),
    ],
)
def test_each_bit_sets_exactly_one_kind(mask, kind):
    event = FileEvent(mask=mask, name="x")
    results = {p: getattr(event, p)() for p in PREDICATES}
    assert results == {p: p == kind for p in PREDICATES}


def test_access_only_event_has_no_kind():
    event = FileEvent(mask=IN_ACCESS, name="f")
    results = {p: getattr(event, p)() for p in PREDICATES}
    assert results == {p: False for p in PREDICATES}
    assert str(event) == '"f": '


def test_str_single_kind():
    assert str(FileEvent(mask=IN_DELETE, name="_test")) == '"_test": DELETE'


def test_str_multiple_kinds_in_fixed_order():
    event = FileEvent(mask=IN_MODIFY | IN_CREATE | IN_MOVED_FROM, name="a")
    assert str(event) == '"a": CREATE|MODIFY|RENAME'


def test_str_no_kinds():
    assert str(FileEvent(mask=0, name="a")) == '"a": '


def test_str_quotes_name():
    event = FileEvent(mask=IN_CREATE, name='we"ird')
    assert str(event).startswith('"we\\"ird"')


def test_fsn_all_admits_every_kind():
    events = [
        FileEvent(mask=IN_CREATE, name="c"),
        FileEvent(mask=IN_MODIFY, name="m"),
        FileEvent(mask=IN_DELETE, name="d"),
        FileEvent(mask=IN_MOVED_FROM, name="r"),
    ]
    union = FSN_CREATE | FSN_MODIFY | FSN_DELETE | FSN_RENAME
    assert [passes_filter(e, FSN_ALL) for e in events] == [True] * 4
    assert [passes_filter(e, union) for e in events] == [True] * 4


@pytest.mark.parametrize(
    "mask, selected",
    [
        (IN_CREATE, FSN_CREATE),
        (IN_MODIFY, FSN_MODIFY),
        (IN_DELETE, FSN_DELETE),
        (IN_MOVED_FROM, FSN_RENAME),
    ],
)
def test_filter_passes_only_selected_kind(mask, selected):
    event = FileEvent(mask=mask, name="p")
    assert passes_filter(event, selected)
    assert passes_filter(event, FSN_ALL)
    assert not passes_filter(event, FSN_ALL & ~selected)
    assert not passes_filter(event, 0)


def test_filter_any_matching_kind_suffices():
    event = FileEvent(mask=IN_CREATE | IN_MODIFY, name="p")
    assert passes_filter(event, FSN_MODIFY)
    assert passes_filter(event, FSN_CREATE)
    assert not passes_filter(event, FSN_DELETE | FSN_RENAME)


def test_filter_rejects_event_without_kind():
    event = FileEvent(mask=IN_ACCESS, name="p")
    assert not passes_filter(event, FSN_ALL)


def test_events_are_value_objects():
    assert FileEvent(IN_CREATE, "a") == FileEvent(mask=IN_CREATE, name="a", cookie=0)
    assert FileEvent(IN_CREATE, "a").cookie == 0