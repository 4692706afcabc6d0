"""Line-buffered output writer.

Lines reach the output one line late: appending a line writes the line
buffered before it. Until then the newest line can still be extended
(``append_to_last_line``) or dropped (``delete_last_line``). This lets the
class assembly emit a separator after every member and cancel the last one
when the class closes, without knowing in advance which member is last.

States::

    EMPTY --append--> PENDING --append--> PENDING (previous line written)
    PENDING --delete_last_line--> EMPTY
    EMPTY | PENDING --close--> CLOSED (pending line written)
"""

from enum import StrEnum
from pathlib import Path
from types import TracebackType
from typing import Self, TextIO

from classgen.exceptions import OutputExistsError, WriterStateError
from classgen.formatting.indent import build_indent


class WriterState(StrEnum):
    """Buffer state of a LineBufferedWriter."""

    EMPTY = "empty"
    PENDING = "pending"
    CLOSED = "closed"


class LineBufferedWriter:
    """Append-only writer holding back the most recent line.

    Use as a context manager so the pending line is flushed on every exit
    path, including errors.
    """

    def __init__(self, sink: TextIO, *, name: str = "<stream>", owns_sink: bool = False):
        self._sink = sink
        self._name = name
        self._owns_sink = owns_sink
        self._pending: str | None = None
        self._closed = False

    @classmethod
    def create(cls, path: Path) -> Self:
        """Open a new output file. The file must not exist yet.

        Raises:
            OutputExistsError: If ``path`` already exists.
        """
        try:
            handle = path.open("x", encoding="utf-8", newline="\n")
        except FileExistsError as exc:
            raise OutputExistsError(f"{path} already exists.") from exc
        return cls(handle, name=str(path), owns_sink=True)

    @property
    def name(self) -> str:
        return self._name

    @property
    def state(self) -> WriterState:
        if self._closed:
            return WriterState.CLOSED
        if self._pending is None:
            return WriterState.EMPTY
        return WriterState.PENDING

    @property
    def pending_line(self) -> str | None:
        """The buffered line not yet written, or None."""
        return self._pending

    def append(self, content: str, indent_level: int = 0) -> None:
        """Buffer a new line, writing the previously buffered one."""
        self._require_open()
        line = build_indent(indent_level) + content if content else ""
        previous = self._swap(line)
        if previous is not None:
            self._write(previous)

    def append_to_last_line(self, suffix: str) -> None:
        """Extend the buffered line in place."""
        self._require_open()
        if self._pending is None:
            raise WriterStateError(f"No buffered line to extend in {self._name}")
        self._pending += suffix

    def delete_last_line(self) -> None:
        """Drop the buffered line so it is never written."""
        self._require_open()
        if self._pending is None:
            raise WriterStateError(f"No buffered line to delete in {self._name}")
        self._pending = None

    def close(self) -> None:
        """Write the buffered line, if any, and release the sink."""
        if self._closed:
            return
        try:
            previous = self._swap(None)
            if previous is not None:
                self._write(previous)
            self._sink.flush()
        finally:
            self._closed = True
            if self._owns_sink:
                self._sink.close()

    def __enter__(self) -> Self:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        self.close()

    def _swap(self, line: str | None) -> str | None:
        previous = self._pending
        self._pending = line
        return previous

    def _write(self, line: str) -> None:
        self._sink.write(line.rstrip() + "\n")

    def _require_open(self) -> None:
        if self._closed:
            raise WriterStateError(f"Writer for {self._name} is closed")
