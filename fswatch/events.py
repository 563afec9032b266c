"""Filesystem events and the per-path filter applied before delivery."""

from __future__ import annotations

import json
from dataclasses import dataclass

from .flags import (
    IN_ATTRIB,
    IN_CREATE,
    IN_DELETE,
    IN_DELETE_SELF,
    IN_MODIFY,
    IN_MOVE_SELF,
    IN_MOVED_FROM,
    IN_MOVED_TO,
)

FSN_CREATE = 1
FSN_MODIFY = 2
FSN_DELETE = 4
FSN_RENAME = 8

FSN_ALL = FSN_MODIFY | FSN_DELETE | FSN_RENAME | FSN_CREATE


@dataclass(frozen=True)
class FileEvent:
    """A single notification: the raw event mask and the affected path."""

    mask: int = 0
    name: str = ""
    cookie: int = 0

    def is_create(self) -> bool:
        """Whether the event was triggered by a creation."""
        return bool(self.mask & IN_CREATE) or bool(self.mask & IN_MOVED_TO)

    def is_delete(self) -> bool:
        """Whether the event was triggered by a deletion."""
        return bool(self.mask & IN_DELETE_SELF) or bool(self.mask & IN_DELETE)

    def is_modify(self) -> bool:
        """Whether the event was triggered by a content or attribute change."""
        return bool(self.mask & IN_MODIFY) or bool(self.mask & IN_ATTRIB)

    def is_rename(self) -> bool:
        """Whether the event was triggered by a change of name."""
        return bool(self.mask & IN_MOVE_SELF) or bool(self.mask & IN_MOVED_FROM)

    def __str__(self) -> str:
        kinds = [
            label
            for label, present in (
                ("CREATE", self.is_create()),
                ("DELETE", self.is_delete()),
                ("MODIFY", self.is_modify()),
                ("RENAME", self.is_rename()),
            )
            if present
        ]
        return f"{json.dumps(self.name, ensure_ascii=False)}: {'|'.join(kinds)}"


def passes_filter(event: FileEvent, flags: int) -> bool:
    """Whether ``event`` matches any of the ``FSN_*`` kinds selected in ``flags``."""
    return (
        (flags & FSN_CREATE == FSN_CREATE and event.is_create())
        or (flags & FSN_MODIFY == FSN_MODIFY and event.is_modify())
        or (flags & FSN_DELETE == FSN_DELETE and event.is_delete())
        or (flags & FSN_RENAME == FSN_RENAME and event.is_rename())
    )