"""Text layout engine: indentation, word wrapping, docblocks and embedded code."""

from classgen.formatting.code_block import normalize_code_block
from classgen.formatting.docblock import (
    BLOCK_COMMENT,
    LINE_COMMENT,
    AttributeEntry,
    DecorationProfile,
    render_attribute,
    render_docblock,
)
from classgen.formatting.indent import INDENT_WIDTH, TAB_WIDTH, add_pseudo_tab, build_indent
from classgen.formatting.wrapping import LINE_WIDTH, find_last_break, split_paragraphs, wrap_text

__all__ = [
    "BLOCK_COMMENT",
    "INDENT_WIDTH",
    "LINE_COMMENT",
    "LINE_WIDTH",
    "TAB_WIDTH",
    "AttributeEntry",
    "DecorationProfile",
    "add_pseudo_tab",
    "build_indent",
    "find_last_break",
    "normalize_code_block",
    "render_attribute",
    "render_docblock",
    "split_paragraphs",
    "wrap_text",
]
