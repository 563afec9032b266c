# fswatch

Watch files and directories and receive an event whenever something in them
is created, modified, deleted or renamed. Changes are found by polling: a
background thread compares each watched path with its last known state at a
fixed interval.

## Installing

```
pip install .
```

To run the test suite:

```
pip install .[test]
pytest
```

## From the command line

```
fswatch [--events KINDS] [--interval SECONDS] [--count N] [--timeout SECONDS] PATH [PATH ...]
```

Each event is printed to standard output as it is found, for example

```
event: "some/dir/file.txt": CREATE
event: "some/dir/file.txt": MODIFY
event: "some/dir/file.txt": DELETE
```

Errors met while watching are printed to standard error as `error: ...`.

| option       | meaning                                                                 |
|--------------|-------------------------------------------------------------------------|
| `--events`   | comma separated kinds to report: `create`, `modify`, `delete`, `rename`, `all` (default `all`) |
| `--interval` | seconds between polls (default `0.1`)                                    |
| `--count`    | stop after this many events                                              |
| `--timeout`  | stop after this many seconds                                             |

Without `--count` or `--timeout` the command runs until interrupted with
Ctrl-C. It exits with status 0, or 1 if one of the paths cannot be watched
(for example because it does not exist).

## As a library

```python
from fswatch.watcher import Watcher

with Watcher(poll_interval=0.1) as watcher:
    watcher.watch("/tmp/foo")
    for event in watcher:
        if event.is_create():
            print("new:", event.name)
        elif event.is_modify():
            print("changed:", event.name)
        elif event.is_delete():
            print("gone:", event.name)
        elif event.is_rename():
            print("renamed:", event.name)
```

Iterating over a `Watcher` blocks until the next event and ends once the
watcher is closed. Errors met while polling are put on the `watcher.errors`
queue (a `queue.Queue`) instead of being raised.

### What is reported

- Watching a directory also watches the entries directly inside it. New
  entries are reported as creations and are then watched themselves.
  Sub-directories are not watched recursively, but their creation and
  deletion are reported.
- A change of a file's contents (modification time or size) or of its
  attributes (mode, link count, owner, change time) is reported as a
  modification.
- When a watched path disappears, it is reported as a rename if an entry with
  the same device and inode now exists in the same directory, and as a
  deletion otherwise. The path is then no longer watched. After a deletion
  the parent directory, if watched, is scanned again, so a file that was
  replaced by a move shows up as a creation.
- A symbolic link is followed; a broken link can be watched without error
  and simply produces no events. Sockets are accepted and ignored.

### Choosing which events to receive

`watch(path)` reports every kind of event. `watch_flags(path, flags)` reports
only the kinds selected by a bitmask, using the constants in
`fswatch.events`:

| constant     | value | events   |
|--------------|-------|----------|
| `FSN_CREATE` | 1     | create   |
| `FSN_MODIFY` | 2     | modify   |
| `FSN_DELETE` | 4     | delete   |
| `FSN_RENAME` | 8     | rename   |
| `FSN_ALL`    | 15    | all      |

```python
from fswatch.events import FSN_DELETE, FSN_MODIFY

watcher.watch_flags("/tmp/foo", FSN_MODIFY | FSN_DELETE)
```

Watching a path that does not exist raises the `OSError` from the file
system. `remove_watch(path)` stops watching a path; removing a path that is
not watched raises `ValueError`.

### Closing

`close()` stops the polling thread and ends iteration over the events.
Calling it more than once is harmless. Adding a watch after closing raises
`fswatch.watcher.WatcherClosedError`. Using the watcher as a context manager
closes it on exit.

### Events

`fswatch.events.FileEvent` is a frozen dataclass with the fields `mask` (the
raw event bits, as defined in `fswatch.flags`), `name` (the path concerned)
and `cookie`. It answers `is_create()`, `is_modify()`, `is_delete()` and
`is_rename()`. Its string form is the quoted path followed by the kinds that
apply, joined with `|`, for example `"data.txt": MODIFY`.

`fswatch.events.passes_filter(event, flags)` tells whether an event matches
any of the kinds selected in an `FSN_*` bitmask.

### Event bits

`fswatch.flags` holds the `IN_*` and `FS_*` event bit constants and three
helpers:

- `event_bit_names(mask)` lists the names of the `FS_*` bits set in a mask,
  in a fixed order.
- `to_fsnotify_flags(action)` maps a directory change record action
  (`FileAction`) to its event bit, or 0 for an unknown action.
- `to_windows_flags(mask)` gives the `FILE_NOTIFY_CHANGE_*` filter needed to
  observe the events in a mask.

## What it does not do

The watcher does not use kernel notification facilities; every change is
found by polling, so events arrive up to one poll interval late, and changes
that are undone between two polls are not seen. Directories are not watched
recursively.