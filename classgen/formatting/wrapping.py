"""Word wrapping of free text into decorated comment lines.

Text is trimmed, split into paragraphs at blank lines, and every paragraph is
re-flowed: hard line breaks inside a paragraph become single spaces. Each
paragraph is then packed greedily into lines of at most 80 columns, counting
the indentation and comment decoration that precede the content. Paragraphs
are separated by exactly one blank decorated line.

A word that does not fit on a line by itself is never split. The line holding
it runs past column 80 and breaks at the first space after the word.
"""

import re

LINE_WIDTH = 80

_NEWLINES = re.compile(r"\r\n?")
_PARAGRAPH_BREAK = re.compile(r"\n\s*\n\s*")
_LINE_BREAK = re.compile(r"[^\S\n]*\n[^\S\n]*")


def split_paragraphs(text: str) -> list[str]:
    """Split text into re-flowed paragraphs.

    Returns an empty list for blank input.
    """
    text = _NEWLINES.sub("\n", text).strip()
    if not text:
        return []
    return [_LINE_BREAK.sub(" ", paragraph).strip() for paragraph in _PARAGRAPH_BREAK.split(text)]


def decorate(line_prefix: str, content: str = "") -> str:
    """Join a line prefix (indent plus comment marker) and its content."""
    if not content:
        return line_prefix
    return f"{line_prefix} {content}"


def find_last_break(line: str, start: int = 0, width: int = LINE_WIDTH) -> int:
    """Index of the space a too-long line should break at.

    Looks for the last space in ``line[start:width + 1]`` so the part before
    the break is at most ``width`` columns. When the content holds no such
    space, falls back to the first space after ``start``. Returns -1 when the
    line has no space to break at.
    """
    index = line.rfind(" ", start, width + 1)
    if index == -1:
        index = line.find(" ", start)
    return index


def wrap_text(
    text: str,
    line_prefix: str,
    continuation_indent: str = "",
    width: int = LINE_WIDTH,
) -> list[str]:
    """Wrap free text into decorated lines.

    Args:
        text: Free text, possibly containing several blank-line separated
            paragraphs.
        line_prefix: Indentation and comment marker placed before every
            line, e.g. ``"    *"`` or ``"//"``.
        continuation_indent: Extra indentation placed between the marker and
            the content of every line (used for attribute descriptions).
        width: Maximum rendered line length.

    Returns:
        Lines without trailing whitespace.
    """
    lines: list[str] = []
    for index, paragraph in enumerate(split_paragraphs(text)):
        if index:
            lines.append(decorate(line_prefix).rstrip())
        lines.extend(_wrap_paragraph(paragraph, line_prefix, continuation_indent, width))
    return lines


def _wrap_paragraph(paragraph: str, line_prefix: str, continuation_indent: str, width: int) -> list[str]:
    head = f"{line_prefix} {continuation_indent}"
    lines: list[str] = []
    remaining = paragraph
    while remaining:
        line = head + remaining
        if len(line) <= width:
            lines.append(line.rstrip())
            break
        index = find_last_break(line, len(head), width)
        if index == -1:
            lines.append(line.rstrip())
            break
        lines.append(line[:index].rstrip())
        remaining = line[index + 1 :].lstrip(" ")
    return lines
