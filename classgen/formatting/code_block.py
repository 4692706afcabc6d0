"""Normalization of code embedded in the XML input.

Code is usually written inside CDATA sections and wrapped in ``<?php ... ?>``
so editors highlight it. The markers are removed and the block is shifted
left by its smallest indentation, so it can be re-indented at the level of
the generated method body.
"""

import re

_OPEN_MARKER = re.compile(r"^\s*<\?(php)?")
_CLOSE_MARKER = re.compile(r"\?>\s*$")
_LEADING_WHITESPACE = re.compile(r"^[^\S\n]*")


def normalize_code_block(raw: str) -> list[str]:
    """Turn raw embedded code into lines relative to their own indentation.

    The first line is ignored when measuring indentation, because it starts
    right after the opening tag rather than at a real column. Blank first and
    last lines are dropped.
    """
    lines = raw.replace("\r\n", "\n").split("\n")
    lines[0] = _OPEN_MARKER.sub("", lines[0])
    lines[-1] = _CLOSE_MARKER.sub("", lines[-1])

    if len(lines) == 1:
        return [lines[0].strip()]

    width = _smallest_indent(lines[1:])
    lines = [_dedent(line, width) for line in lines]
    return _drop_blank_edges(lines)


def _smallest_indent(lines: list[str]) -> int:
    widths = [len(_LEADING_WHITESPACE.match(line).group()) for line in lines if line.strip()]
    return min(widths, default=0)


def _dedent(line: str, width: int) -> str:
    """Remove up to ``width`` leading whitespace characters."""
    leading = len(_LEADING_WHITESPACE.match(line).group())
    return line[min(leading, width) :].rstrip()


def _drop_blank_edges(lines: list[str]) -> list[str]:
    if lines and not lines[-1].strip():
        lines = lines[:-1]
    if lines and not lines[0].strip():
        lines = lines[1:]
    return lines
