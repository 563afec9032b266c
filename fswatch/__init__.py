"""Polling watcher for create, modify, delete and rename events on files and directories."""

__version__ = "0.1.0"