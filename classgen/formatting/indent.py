"""Indentation and tab-stop helpers shared by every renderer."""

INDENT_WIDTH = 4
TAB_WIDTH = 4


def build_indent(level: int) -> str:
    """Whitespace prefix for an indent level."""
    if level < 0:
        raise ValueError(f"indent level must be >= 0, got {level}")
    return " " * INDENT_WIDTH * level


def add_pseudo_tab(text: str) -> str:
    """Pad with spaces up to the next tab stop.

    At least one space is always added, so text already sitting on a tab
    stop moves to the following one.
    """
    text += " "
    while len(text) % TAB_WIDTH != 0:
        text += " "
    return text
