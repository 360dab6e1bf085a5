# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Copilot-for-Consensus contributors

"""File logger with size-based rotation."""

import json
import logging
import threading
from dataclasses import fields
from pathlib import Path
from typing import Any, BinaryIO

from .colors import strip_ansi_color_codes, strip_colors_from_args
from .formatting import json_default
from .level import LogLevel
from .logger import Logger
from .options import FileLoggerOptions, LoggerOptions

logger = logging.getLogger(__name__)


class RotatingFileSink:
    """An open log file that rotates itself when it grows past ``max_size``.

    Rotated files are kept next to the active file with numbered suffixes:
    ``app.log.1`` is the most recent, ``app.log.<max_files>`` the oldest.

    The sink is reference counted so that a file logger and its children can
    share one handle and one size counter; the file is closed when the last
    holder releases it.
    """

    def __init__(self, file_path: str | Path, max_size: int, max_files: int, append: bool = True):
        """Create the parent directory if needed and open the file.

        Args:
            file_path: Path of the active log file
            max_size: Size in bytes at which the file is rotated
            max_files: Number of rotated files to keep
            append: Append to an existing file instead of truncating it

        Raises:
            OSError: If the directory cannot be created or the file opened
        """
        self.path = Path(file_path)
        self.max_size = max_size
        self.max_files = max_files
        self._lock = threading.RLock()
        self._handle: BinaryIO | None = None
        self._size = 0
        self._refs = 1
        self._closed = False
        # Set while the handle is lost after a failed reopen; reset on recovery
        self._unavailable_reported = False

        self.path.parent.mkdir(parents=True, exist_ok=True)
        self._open("ab" if append else "wb")

    @property
    def size(self) -> int:
        """Bytes written to the active file since it was opened or rotated."""
        return self._size

    @property
    def closed(self) -> bool:
        return self._closed

    def _open(self, mode: str) -> None:
        self._handle = open(self.path, mode)
        self._size = self.path.stat().st_size

    def _close_handle(self) -> None:
        if self._handle is None:
            return
        handle, self._handle = self._handle, None
        try:
            handle.flush()
        finally:
            handle.close()

    def rotated_path(self, index: int) -> Path:
        """Path of the rotated file with the given suffix number."""
        return self.path.with_name(f"{self.path.name}.{index}")

    def acquire(self) -> "RotatingFileSink":
        """Register another holder of this sink."""
        with self._lock:
            self._refs += 1
            return self

    def release(self) -> None:
        """Drop one holder; the file is closed when none remain."""
        with self._lock:
            self._refs -= 1
            if self._refs <= 0:
                self.close()

    def close(self) -> None:
        """Flush and close the file. Safe to call more than once."""
        with self._lock:
            self._closed = True
            try:
                self._close_handle()
            except OSError as e:
                logger.error("Error closing log file %s: %s", self.path, e)

    def rotate(self) -> bool:
        """Archive the active file under ``.1`` and start a fresh one.

        Returns:
            True if the renames succeeded. On failure the error is logged and
            the existing file is reopened for appending. If the reopen fails
            too, later writes retry it.
        """
        with self._lock:
            if self._closed:
                return False
            try:
                self._close_handle()
            except OSError as e:
                logger.error("Error closing log file %s before rotation: %s", self.path, e)

            rotated = True
            try:
                oldest = self.rotated_path(self.max_files)
                if oldest.exists():
                    oldest.unlink()
                for index in range(self.max_files - 1, 0, -1):
                    source = self.rotated_path(index)
                    if source.exists():
                        source.replace(self.rotated_path(index + 1))
                if self.path.exists():
                    self.path.replace(self.rotated_path(1))
            except OSError as e:
                logger.error("Error rotating log file %s: %s", self.path, e)
                rotated = False

            try:
                self._open("ab")
            except OSError as e:
                logger.error("Error reopening log file %s after rotation: %s", self.path, e)
                return False
            return rotated

    def write(self, entry: str) -> bool:
        """Write one entry, rotating first if it would not fit.

        Returns:
            True if the entry was written, False if it was dropped
        """
        data = entry.encode("utf-8")
        with self._lock:
            if self._closed:
                return False

            if self._handle is None and not self._reopen():
                return False

            if self._size > 0 and self._size + len(data) > self.max_size:
                if not self.rotate():
                    return False

            try:
                self._handle.write(data)  # type: ignore[union-attr]
                self._handle.flush()  # type: ignore[union-attr]
            except OSError as e:
                logger.error("Error writing to log file %s: %s", self.path, e)
                self._resync_size()
                return False

            self._size += len(data)
            return True

    def _reopen(self) -> bool:
        """Reopen a handle lost to a failed rotation. Reports the first failure only."""
        try:
            self._open("ab")
        except OSError as e:
            if not self._unavailable_reported:
                self._unavailable_reported = True
                logger.error("Log file %s is unavailable, dropping entries: %s", self.path, e)
            return False
        if self._unavailable_reported:
            self._unavailable_reported = False
            logger.warning("Log file %s reopened", self.path)
        return True

    def _resync_size(self) -> None:
        # A failed write may have put part of the entry on disk
        try:
            self._size = self.path.stat().st_size
        except OSError as e:
            logger.warning("Could not read size of log file %s: %s", self.path, e)


def _as_file_options(options: LoggerOptions | None) -> FileLoggerOptions:
    if options is None:
        return FileLoggerOptions()
    if isinstance(options, FileLoggerOptions):
        return options
    return FileLoggerOptions(**{f.name: getattr(options, f.name) for f in fields(LoggerOptions)})


class FileLogger(Logger):
    """Logger that appends plain-text lines to a rotating log file.

    Each line has the form ``[timestamp] [LEVEL] [context] message`` followed,
    when there are arguments, by the arguments as a JSON array. Color codes are
    always stripped.

    Example:
        >>> with FileLogger(FileLoggerOptions(file_path="logs/app.log", max_size=1024 * 1024)) as log:
        ...     log.info("User {user} logged in", {"user": "alice"})
    """

    def __init__(self, options: LoggerOptions | None = None, sink: RotatingFileSink | None = None):
        """Initialize file logger.

        Args:
            options: Logger options; plain LoggerOptions get the file defaults
            sink: Already open sink to write through (used by child loggers)

        Raises:
            OSError: If the log file cannot be opened
        """
        file_options = _as_file_options(options).without_colors()
        super().__init__(file_options)
        self._file_options: FileLoggerOptions = file_options  # type: ignore[assignment]
        self._sink = sink or RotatingFileSink(
            file_options.file_path,
            max_size=file_options.max_size,
            max_files=file_options.max_files,
            append=file_options.append,
        )
        self._closed = False

    @property
    def file_path(self) -> Path:
        return self._sink.path

    @property
    def sink(self) -> RotatingFileSink:
        return self._sink

    def _entry(self, level: LogLevel, message: Any, args: tuple[Any, ...]) -> str:
        formatted = strip_ansi_color_codes(self._format(message, args))
        entry = f"{self._prefix(level)} {formatted}"
        if args:
            try:
                entry += f"  {json.dumps(strip_colors_from_args(args), default=json_default)}"
            except (TypeError, ValueError):
                entry += " [Arguments could not be serialized]"
        return entry + "\n"

    def log(self, level: LogLevel | str, message: str, *args: Any) -> None:
        """Format and write a log entry.

        The entry is written and flushed before this returns. Write failures
        are reported through the module logger and the entry is dropped.
        """
        emit_level = self._accept(level)
        if emit_level is None or self._closed:
            return
        try:
            entry = self._entry(emit_level, message, args)
        except Exception as e:
            logger.error("Could not format log entry for %s: %s", self._sink.path, e)
            return
        self._sink.write(entry)

    def child(self, context: str) -> "FileLogger":
        """Create a child logger writing to the same file through the same sink."""
        if self._sink.closed:
            return FileLogger(self._file_options.with_context(context))
        return FileLogger(self._file_options.with_context(context), sink=self._sink.acquire())

    def close(self) -> None:
        """Release this logger's hold on the file. Safe to call more than once."""
        if self._closed:
            return
        self._closed = True
        self._sink.release()
