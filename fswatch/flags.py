"""Bit masks for filesystem notifications and conversions between them.

The ``IN_*`` values follow the inotify(7) interface. The ``FS_*`` values
share the same layout and are used where events are built from directory
change records. ``FILE_NOTIFY_CHANGE_*`` and ``FILE_ACTION_*`` describe the
directory-change filter and the actions reported for each change record.
"""

from __future__ import annotations

from enum import IntEnum

# Options for adding a watch.
IN_ONLYDIR = 0x01000000
IN_DONT_FOLLOW = 0x02000000
IN_MASK_ADD = 0x20000000
IN_ONESHOT = 0x80000000

# Events.
IN_ACCESS = 0x00000001
IN_MODIFY = 0x00000002
IN_ATTRIB = 0x00000004
IN_CLOSE_WRITE = 0x00000008
IN_CLOSE_NOWRITE = 0x00000010
IN_CLOSE = IN_CLOSE_WRITE | IN_CLOSE_NOWRITE
IN_OPEN = 0x00000020
IN_MOVED_FROM = 0x00000040
IN_MOVED_TO = 0x00000080
IN_MOVE = IN_MOVED_FROM | IN_MOVED_TO
IN_CREATE = 0x00000100
IN_DELETE = 0x00000200
IN_DELETE_SELF = 0x00000400
IN_MOVE_SELF = 0x00000800
IN_ALL_EVENTS = 0x00000FFF

OS_AGNOSTIC_EVENTS = (
    IN_MOVED_TO
    | IN_MOVED_FROM
    | IN_CREATE
    | IN_ATTRIB
    | IN_MODIFY
    | IN_MOVE_SELF
    | IN_DELETE
    | IN_DELETE_SELF
)

# Special events.
IN_UNMOUNT = 0x00002000
IN_Q_OVERFLOW = 0x00004000
IN_IGNORED = 0x00008000
IN_ISDIR = 0x40000000

# Options and events in the directory-change notation.
FS_ONESHOT = 0x80000000
FS_ONLYDIR = 0x1000000

FS_ACCESS = 0x1
FS_ALL_EVENTS = 0xFFF
FS_ATTRIB = 0x4
FS_CLOSE = 0x18
FS_CREATE = 0x100
FS_DELETE = 0x200
FS_DELETE_SELF = 0x400
FS_MODIFY = 0x2
FS_MOVE = 0xC0
FS_MOVED_FROM = 0x40
FS_MOVED_TO = 0x80
FS_MOVE_SELF = 0x800

FS_IGNORED = 0x8000
FS_Q_OVERFLOW = 0x4000

# Directory-change notification filter bits.
FILE_NOTIFY_CHANGE_FILE_NAME = 0x001
FILE_NOTIFY_CHANGE_DIR_NAME = 0x002
FILE_NOTIFY_CHANGE_ATTRIBUTES = 0x004
FILE_NOTIFY_CHANGE_SIZE = 0x008
FILE_NOTIFY_CHANGE_LAST_WRITE = 0x010
FILE_NOTIFY_CHANGE_LAST_ACCESS = 0x020
FILE_NOTIFY_CHANGE_CREATION = 0x040


class FileAction(IntEnum):
    """Action carried by a directory change record."""

    ADDED = 1
    REMOVED = 2
    MODIFIED = 3
    RENAMED_OLD_NAME = 4
    RENAMED_NEW_NAME = 5


FILE_ACTION_ADDED = FileAction.ADDED
FILE_ACTION_REMOVED = FileAction.REMOVED
FILE_ACTION_MODIFIED = FileAction.MODIFIED
FILE_ACTION_RENAMED_OLD_NAME = FileAction.RENAMED_OLD_NAME
FILE_ACTION_RENAMED_NEW_NAME = FileAction.RENAMED_NEW_NAME

EVENT_BITS: tuple[tuple[int, str], ...] = (
    (FS_ACCESS, "FS_ACCESS"),
    (FS_ATTRIB, "FS_ATTRIB"),
    (FS_CREATE, "FS_CREATE"),
    (FS_DELETE, "FS_DELETE"),
    (FS_DELETE_SELF, "FS_DELETE_SELF"),
    (FS_MODIFY, "FS_MODIFY"),
    (FS_MOVED_FROM, "FS_MOVED_FROM"),
    (FS_MOVED_TO, "FS_MOVED_TO"),
    (FS_MOVE_SELF, "FS_MOVE_SELF"),
    (FS_IGNORED, "FS_IGNORED"),
    (FS_Q_OVERFLOW, "FS_Q_OVERFLOW"),
)

_ACTION_FLAGS = {
    FileAction.ADDED: FS_CREATE,
    FileAction.REMOVED: FS_DELETE,
    FileAction.MODIFIED: FS_MODIFY,
    FileAction.RENAMED_OLD_NAME: FS_MOVED_FROM,
    FileAction.RENAMED_NEW_NAME: FS_MOVED_TO,
}


def to_windows_flags(mask: int) -> int:
    """Return the directory-change filter needed to observe ``mask``."""
    result = 0
    if mask & FS_ACCESS:
        result |= FILE_NOTIFY_CHANGE_LAST_ACCESS
    if mask & FS_MODIFY:
        result |= FILE_NOTIFY_CHANGE_LAST_WRITE
    if mask & FS_ATTRIB:
        result |= FILE_NOTIFY_CHANGE_ATTRIBUTES
    if mask & (FS_MOVE | FS_CREATE | FS_DELETE):
        result |= FILE_NOTIFY_CHANGE_FILE_NAME | FILE_NOTIFY_CHANGE_DIR_NAME
    return result


def to_fsnotify_flags(action: int) -> int:
    """Return the event bit for a change-record action, or 0 if unknown."""
    try:
        return _ACTION_FLAGS[FileAction(action)]
    except ValueError:
        return 0


def event_bit_names(mask: int) -> list[str]:
    """Return the names of the event bits set in ``mask``, in fixed order."""
    return [name for value, name in EVENT_BITS if mask & value]