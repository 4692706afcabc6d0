"""Common test fixtures for classgen."""

import io
from collections.abc import Iterator

import pytest

from classgen.writer import LineBufferedWriter


@pytest.fixture
def output() -> io.StringIO:
    """In-memory sink for writer-based tests."""
    return io.StringIO()


@pytest.fixture
def writer(output: io.StringIO) -> Iterator[LineBufferedWriter]:
    """Writer over the in-memory sink. Call ``writer.close()`` before reading ``output``."""
    line_writer = LineBufferedWriter(output)
    yield line_writer
    line_writer.close()
