"""Command that watches paths and prints each event as it arrives."""

from __future__ import annotations

import argparse
import queue
import sys
import threading
from collections.abc import Sequence

from .events import FSN_ALL, FSN_CREATE, FSN_DELETE, FSN_MODIFY, FSN_RENAME
from .watcher import DEFAULT_POLL_INTERVAL, Watcher, WatcherClosedError

_KINDS = {
    "create": FSN_CREATE,
    "modify": FSN_MODIFY,
    "delete": FSN_DELETE,
    "rename": FSN_RENAME,
    "all": FSN_ALL,
}


def _event_kinds(text: str) -> int:
    flags = 0
    for part in text.split(","):
        kind = part.strip().lower()
        if kind not in _KINDS:
            raise argparse.ArgumentTypeError(f"unknown event kind: {kind!r}")
        flags |= _KINDS[kind]
    return flags


def _positive_float(text: str) -> float:
    try:
        value = float(text)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"not a number: {text!r}") from exc
    if value <= 0:
        raise argparse.ArgumentTypeError(f"must be positive: {text!r}")
    return value


def _positive_int(text: str) -> int:
    try:
        value = int(text)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"not an integer: {text!r}") from exc
    if value <= 0:
        raise argparse.ArgumentTypeError(f"must be positive: {text!r}")
    return value


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="fswatch",
        description="Watch files and directories and print filesystem events.",
    )
    parser.add_argument("paths", nargs="+", help="files or directories to watch")
    parser.add_argument(
        "--events",
        type=_event_kinds,
        default=FSN_ALL,
        help="comma separated kinds to report: create, modify, delete, rename, all",
    )
    parser.add_argument(
        "--interval",
        type=_positive_float,
        default=DEFAULT_POLL_INTERVAL,
        help="seconds between polls",
    )
    parser.add_argument(
        "--count", type=_positive_int, default=None, help="stop after this many events"
    )
    parser.add_argument(
        "--timeout", type=_positive_float, default=None, help="stop after this many seconds"
    )
    return parser


def _print_errors(watcher: Watcher, stop: threading.Event) -> None:
    while not stop.is_set():
        try:
            error = watcher.errors.get(timeout=0.05)
        except queue.Empty:
            continue
        print(f"error: {error}", file=sys.stderr, flush=True)


def _drain_errors(watcher: Watcher) -> None:
    while True:
        try:
            error = watcher.errors.get_nowait()
        except queue.Empty:
            return
        print(f"error: {error}", file=sys.stderr, flush=True)


def main(argv: Sequence[str] | None = None) -> int:
    """Watch the given paths and print events until stopped; return the exit status."""
    args = _build_parser().parse_args(argv)

    watcher = Watcher(poll_interval=args.interval)
    try:
        for path in args.paths:
            watcher.watch_flags(path, args.events)
    except (OSError, WatcherClosedError) as exc:
        watcher.close()
        print(f"error: {exc}", file=sys.stderr, flush=True)
        return 1

    stop = threading.Event()
    reporter = threading.Thread(target=_print_errors, args=(watcher, stop), daemon=True)
    reporter.start()
    timer = threading.Timer(args.timeout, watcher.close) if args.timeout else None
    if timer is not None:
        timer.daemon = True
        timer.start()

    seen = 0
    try:
        for event in watcher:
            print(f"event: {event}", flush=True)
            seen += 1
            if args.count is not None and seen >= args.count:
                break
    except KeyboardInterrupt:
        pass
    finally:
        if timer is not None:
            timer.cancel()
        watcher.close()
        stop.set()
        reporter.join()
        _drain_errors(watcher)
    return 0


if __name__ == "__main__":
    sys.exit(main())