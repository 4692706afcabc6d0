"""Tests for the line-buffered writer."""

import io
from pathlib import Path

import pytest

from classgen.exceptions import OutputExistsError, WriterError, WriterStateError
from classgen.writer import LineBufferedWriter, WriterState


class TestBuffering:
    """Test the one-line delay and edits of the pending line."""

    def test_lines_are_written_one_line_late(self, writer, output):
        writer.append("a")
        assert output.getvalue() == ""

        writer.append("b")
        assert output.getvalue() == "a\n"
        assert writer.pending_line == "b"

    def test_delete_last_line(self, writer, output):
        writer.append("a")
        writer.append("b")
        writer.delete_last_line()
        writer.close()

        assert output.getvalue() == "a\n"

    def test_append_with_indent(self, writer, output):
        writer.append("123", 1)
        writer.append("456", 2)
        writer.close()

        assert output.getvalue() == "    123\n        456\n"

    def test_empty_line_has_no_indent(self, writer, output):
        writer.append("", 3)
        writer.close()

        assert output.getvalue() == "\n"

    def test_trailing_whitespace_is_trimmed(self, writer, output):
        writer.append("x   ")
        writer.close()

        assert output.getvalue() == "x\n"

    def test_append_to_last_line(self, writer, output):
        writer.append("private $count", 1)
        writer.append_to_last_line(" = 0")
        writer.append_to_last_line(";")
        writer.close()

        assert output.getvalue() == "    private $count = 0;\n"

    def test_append_to_last_line_without_pending_line(self, writer):
        with pytest.raises(WriterStateError, match="No buffered line to extend"):
            writer.append_to_last_line(";")

    def test_delete_without_pending_line(self, writer):
        writer.append("a")
        writer.delete_last_line()

        with pytest.raises(WriterStateError, match="No buffered line to delete"):
            writer.delete_last_line()


class TestLifecycle:
    """Test writer states and closing."""

    def test_state_transitions(self, writer):
        assert writer.state == WriterState.EMPTY

        writer.append("a")
        assert writer.state == WriterState.PENDING

        writer.delete_last_line()
        assert writer.state == WriterState.EMPTY

        writer.close()
        assert writer.state == WriterState.CLOSED

    def test_closed_writer_rejects_operations(self, writer):
        writer.close()

        with pytest.raises(WriterStateError, match="closed"):
            writer.append("late")
        with pytest.raises(WriterStateError):
            writer.append_to_last_line("late")
        with pytest.raises(WriterError):
            writer.delete_last_line()

    def test_close_is_idempotent(self, writer, output):
        writer.append("a")
        writer.close()
        writer.close()

        assert output.getvalue() == "a\n"

    def test_context_manager_flushes_on_error(self):
        output = io.StringIO()

        with pytest.raises(RuntimeError):
            with LineBufferedWriter(output) as writer:
                writer.append("kept")
                raise RuntimeError("boom")

        assert output.getvalue() == "kept\n"
        assert writer.state == WriterState.CLOSED

    def test_borrowed_sink_stays_open(self):
        output = io.StringIO()
        with LineBufferedWriter(output) as writer:
            writer.append("a")

        assert not output.closed


class TestCreate:
    """Test file-backed writers."""

    def test_writes_file(self, tmp_path: Path):
        path = tmp_path / "Foo.php"

        with LineBufferedWriter.create(path) as writer:
            assert writer.name == str(path)
            writer.append("<?php")
            writer.append("")
            writer.append("class Foo")

        assert path.read_text(encoding="utf-8") == "<?php\n\nclass Foo\n"

    def test_refuses_existing_file(self, tmp_path: Path):
        path = tmp_path / "Foo.php"
        path.write_text("original", encoding="utf-8")

        with pytest.raises(OutputExistsError, match="already exists"):
            LineBufferedWriter.create(path)

        assert path.read_text(encoding="utf-8") == "original"
