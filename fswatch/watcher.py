"""A polling filesystem watcher that reports create, modify, delete and rename events.

Watched directories are scanned for new entries so that files created inside
them are reported as creations and then watched themselves. Events pass a
per-path ``FSN_*`` filter before they are delivered.
"""

from __future__ import annotations

import os
import queue
import stat
import threading
from collections.abc import Iterator
from contextlib import suppress
from dataclasses import dataclass

from .events import FSN_ALL, FileEvent, passes_filter
from .flags import IN_ATTRIB, IN_CREATE, IN_DELETE_SELF, IN_MODIFY, IN_MOVE_SELF

NOTE_DELETE = 0x0001
NOTE_WRITE = 0x0002
NOTE_EXTEND = 0x0004
NOTE_ATTRIB = 0x0008
NOTE_LINK = 0x0010
NOTE_RENAME = 0x0020
NOTE_REVOKE = 0x0040

NOTE_ALLEVENTS = NOTE_DELETE | NOTE_WRITE | NOTE_ATTRIB | NOTE_RENAME

DEFAULT_POLL_INTERVAL = 0.1

_CLOSED = object()


class WatcherClosedError(RuntimeError):
    """Raised when a watch is requested on a closed watcher."""


@dataclass
class _Watch:
    stat: os.stat_result
    follow: bool


def _identity(st: os.stat_result) -> tuple[int, int]:
    return st.st_dev, st.st_ino


def _content(st: os.stat_result) -> tuple[int, int]:
    return st.st_mtime_ns, st.st_size


def _attributes(st: os.stat_result) -> tuple[int, ...]:
    return st.st_mode, st.st_ctime_ns, st.st_nlink, st.st_uid, st.st_gid


class Watcher:
    """Watches files and directories and delivers matching events.

    Iterating over the watcher yields events until it is closed. Errors met
    while polling are put on :attr:`errors`.
    """

    def __init__(self, poll_interval: float = DEFAULT_POLL_INTERVAL) -> None:
        self.poll_interval = poll_interval
        self.errors: queue.Queue[OSError] = queue.Queue()
        self._events: queue.Queue[object] = queue.Queue()
        self._lock = threading.RLock()
        self._watches: dict[str, _Watch] = {}
        self._fsn_flags: dict[str, int] = {}
        self._en_flags: dict[str, int] = {}
        self._file_exists: set[str] = set()
        self._closed = False
        self._stop = threading.Event()
        self._thread = threading.Thread(target=self._run, daemon=True)
        self._thread.start()

    # Public interface

    def watch(self, path: str) -> None:
        """Watch ``path`` for every kind of event."""
        self.watch_flags(path, FSN_ALL)

    def watch_flags(self, path: str, flags: int) -> None:
        """Watch ``path``, delivering only the ``FSN_*`` kinds in ``flags``."""
        path = os.fspath(path)
        with self._lock:
            self._fsn_flags[path] = flags
            self._add_watch(path, NOTE_ALLEVENTS)

    def remove_watch(self, path: str) -> None:
        """Stop watching ``path``; raise ValueError if it is not watched."""
        path = os.fspath(path)
        with self._lock:
            self._fsn_flags.pop(path, None)
            self._remove_watch(path)

    def close(self) -> None:
        """Stop polling and end iteration; closing twice does nothing."""
        with self._lock:
            if self._closed:
                return
            self._closed = True
        self._stop.set()
        if threading.current_thread() is not self._thread:
            self._thread.join()
        with self._lock:
            self._watches.clear()
        self._events.put(_CLOSED)

    def __enter__(self) -> Watcher:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def __iter__(self) -> Iterator[FileEvent]:
        while True:
            item = self._events.get()
            if item is _CLOSED:
                self._events.put(_CLOSED)
                return
            yield item  # type: ignore[misc]

    # Watch bookkeeping

    def _add_watch(self, path: str, flags: int) -> None:
        if self._closed:
            raise WatcherClosedError("watcher already closed")

        entry = self._watches.get(path)
        found = entry is not None
        if entry is None:
            st = os.lstat(path)
            if stat.S_ISSOCK(st.st_mode):
                return
            follow = False
            if stat.S_ISLNK(st.st_mode):
                # Broken links are accepted silently and simply never report.
                try:
                    target = os.path.realpath(path, strict=True)
                    st = os.lstat(target)
                except OSError:
                    return
                follow = True
            entry = _Watch(st, follow)
            self._watches[path] = entry

        watch_dir = (
            stat.S_ISDIR(entry.stat.st_mode)
            and flags & NOTE_WRITE
            and (not found or not self._en_flags.get(path, 0) & NOTE_WRITE)
        )
        self._en_flags[path] = flags
        if watch_dir:
            self._watch_directory_files(path)

    def _remove_watch(self, path: str) -> None:
        if path not in self._watches:
            raise ValueError(f"can't remove non-existent watch for: {path}")
        del self._watches[path]

    def _watch_directory_files(self, dir_path: str) -> None:
        with os.scandir(dir_path) as entries:
            children = sorted(entries, key=lambda e: e.name)
        for child in children:
            file_path = os.path.join(dir_path, child.name)
            if child.is_dir(follow_symlinks=False):
                new_flags = NOTE_DELETE | self._en_flags.get(file_path, 0)
            else:
                new_flags = NOTE_DELETE | NOTE_WRITE | NOTE_RENAME
            try:
                self._add_watch(file_path, new_flags)
            finally:
                self._fsn_flags[file_path] = FSN_ALL
            self._file_exists.add(file_path)

    def _send_directory_change_events(self, dir_path: str) -> None:
        try:
            with os.scandir(dir_path) as entries:
                names = sorted(e.name for e in entries)
        except OSError as exc:
            self.errors.put(exc)
            names = []
        for name in names:
            file_path = os.path.join(dir_path, name)
            if file_path not in self._file_exists:
                self._fsn_flags[file_path] = FSN_ALL
                self._emit(FileEvent(mask=IN_CREATE, name=file_path))
            self._file_exists.add(file_path)
        with suppress(OSError):
            self._watch_directory_files(dir_path)

    # Polling

    def _run(self) -> None:
        while not self._stop.wait(self.poll_interval):
            with self._lock:
                if self._closed:
                    return
                try:
                    self._poll()
                except OSError as exc:
                    self.errors.put(exc)

    def _poll(self) -> None:
        for path in list(self._watches):
            entry = self._watches.get(path)
            if entry is not None:
                self._check(path, entry)

    def _check(self, path: str, entry: _Watch) -> None:
        try:
            st = os.stat(path) if entry.follow else os.lstat(path)
        except OSError:
            st = None

        if st is None or _identity(st) != _identity(entry.stat):
            renamed = self._was_renamed(path, entry.stat)
            mask = IN_MOVE_SELF if renamed else IN_DELETE_SELF
            self._emit(FileEvent(mask=mask, name=path))
            self._watches.pop(path, None)
            self._file_exists.discard(path)
            if not renamed:
                # A file replaced by a move shows up as a new entry of the parent.
                parent = os.path.dirname(path) or "."
                if parent in self._watches and os.path.lexists(parent):
                    self._send_directory_change_events(parent)
            return

        flags = self._en_flags.get(path, 0)
        mask = 0
        if _content(st) != _content(entry.stat) and flags & NOTE_WRITE:
            mask |= IN_MODIFY
        if _attributes(st) != _attributes(entry.stat) and flags & NOTE_ATTRIB:
            mask |= IN_ATTRIB
        entry.stat = st
        if not mask:
            return
        if stat.S_ISDIR(st.st_mode):
            self._send_directory_change_events(path)
        else:
            self._emit(FileEvent(mask=mask, name=path))

    @staticmethod
    def _was_renamed(path: str, old: os.stat_result) -> bool:
        parent = os.path.dirname(path) or "."
        try:
            with os.scandir(parent) as entries:
                for child in entries:
                    if child.path == path or os.path.join(parent, child.name) == path:
                        continue
                    with suppress(OSError):
                        if _identity(child.stat(follow_symlinks=False)) == _identity(old):
                            return True
        except OSError:
            return False
        return False

    def _emit(self, event: FileEvent) -> None:
        if passes_filter(event, self._fsn_flags.get(event.name, 0)):
            self._events.put(event)