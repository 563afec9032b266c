import pytest

from fswatch import flags
from fswatch.flags import (
    FILE_NOTIFY_CHANGE_ATTRIBUTES,
    FILE_NOTIFY_CHANGE_DIR_NAME,
    FILE_NOTIFY_CHANGE_FILE_NAME,
    FILE_NOTIFY_CHANGE_LAST_ACCESS,
    FILE_NOTIFY_CHANGE_LAST_WRITE,
    FS_ACCESS,
    FS_ALL_EVENTS,
    FS_ATTRIB,
    FS_CREATE,
    FS_DELETE,
    FS_IGNORED,
    FS_MODIFY,
    FS_MOVE,
    FS_MOVED_FROM,
    FS_MOVED_TO,
    FS_Q_OVERFLOW,
    FileAction,
    event_bit_names,
    to_fsnotify_flags,
    to_windows_flags,
)

NAME_BITS = FILE_NOTIFY_CHANGE_FILE_NAME | FILE_NOTIFY_CHANGE_DIR_NAME


@pytest.mark.parametrize(
    "mask, expected",
    [
        (FS_ACCESS, FILE_NOTIFY_CHANGE_LAST_ACCESS),
        (FS_MODIFY, FILE_NOTIFY_CHANGE_LAST_WRITE),
        (FS_ATTRIB, FILE_NOTIFY_CHANGE_ATTRIBUTES),
        (FS_MOVE, NAME_BITS),
        (FS_CREATE, NAME_BITS),
        (FS_DELETE, NAME_BITS),
        (FS_MOVED_FROM, NAME_BITS),
        (0, 0),
    ],
)
def test_to_windows_flags_single_bits(mask, expected):
    assert to_windows_flags(mask) == expected


def test_to_windows_flags_all_events_covers_every_filter():
    expected = (
        FILE_NOTIFY_CHANGE_LAST_ACCESS
        | FILE_NOTIFY_CHANGE_LAST_WRITE
        | FILE_NOTIFY_CHANGE_ATTRIBUTES
        | NAME_BITS
    )
    assert to_windows_flags(FS_ALL_EVENTS) == expected


def test_to_windows_flags_ignores_special_bits():
    assert to_windows_flags(FS_IGNORED | FS_Q_OVERFLOW) == 0


@pytest.mark.parametrize(
    "action, expected",
    [
        (FileAction.ADDED, FS_CREATE),
        (FileAction.REMOVED, FS_DELETE),
        (FileAction.MODIFIED, FS_MODIFY),
        (FileAction.RENAMED_OLD_NAME, FS_MOVED_FROM),
        (FileAction.RENAMED_NEW_NAME, FS_MOVED_TO),
    ],
)
def test_to_fsnotify_flags_known_actions(action, expected):
    assert to_fsnotify_flags(action) == expected
    assert to_fsnotify_flags(int(action)) == expected


@pytest.mark.parametrize("action", [0, 6, 999, -1])
def test_to_fsnotify_flags_unknown_action_is_zero(action):
    assert to_fsnotify_flags(action) == 0


def test_event_bit_names_ordering():
    assert event_bit_names(FS_DELETE | FS_CREATE) == ["FS_CREATE", "FS_DELETE"]


def test_event_bit_names_move_expands_both_halves():
    assert event_bit_names(FS_MOVE) == ["FS_MOVED_FROM", "FS_MOVED_TO"]


def test_event_bit_names_empty():
    assert event_bit_names(0) == []


def test_event_bit_names_special():
    assert event_bit_names(FS_IGNORED | FS_Q_OVERFLOW) == ["FS_IGNORED", "FS_Q_OVERFLOW"]


def test_event_bits_roundtrip_every_single_bit():
    for value, name in flags.EVENT_BITS:
        assert event_bit_names(value) == [name]


def test_composite_masks_expand_to_their_parts():
    assert event_bit_names(flags.IN_MOVE) == ["FS_MOVED_FROM", "FS_MOVED_TO"]
    assert to_windows_flags(flags.OS_AGNOSTIC_EVENTS) == (
        FILE_NOTIFY_CHANGE_LAST_WRITE | FILE_NOTIFY_CHANGE_ATTRIBUTES | NAME_BITS
    )
    assert to_windows_flags(flags.IN_ACCESS) == FILE_NOTIFY_CHANGE_LAST_ACCESS


def test_in_masks_map_like_fs_masks():
    assert event_bit_names(flags.IN_CREATE) == ["FS_CREATE"]
    assert event_bit_names(flags.IN_IGNORED) == ["FS_IGNORED"]
    assert to_windows_flags(flags.IN_ALL_EVENTS) == to_windows_flags(FS_ALL_EVENTS)