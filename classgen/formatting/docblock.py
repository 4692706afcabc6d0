"""Docblock and comment rendering.

A comment is rendered from a description, an ordered list of tagged
attribute lines (``@param``, ``@return``, ...) and a decoration profile that
chooses between block comments (``/** ... */``) and line comments (``//``).

Block comments collapse to a single line when they are short enough:

    /** @var int Number of retries. */

Everything else uses the multi-line form:

    /**
     * Description, wrapped at 80 columns.
     *
     * @param   string  $name
     *  Wrapped parameter description.
     * @return  void
     */
"""

from collections.abc import Sequence
from dataclasses import dataclass

from classgen.exceptions import DocblockError, MissingDescriptionError
from classgen.formatting.indent import add_pseudo_tab, build_indent
from classgen.formatting.wrapping import LINE_WIDTH, decorate, split_paragraphs, wrap_text

MAX_ATTRIBUTE_FIELDS = 3
DESCRIPTION_INDENT = " "


@dataclass(frozen=True)
class DecorationProfile:
    """Comment delimiters for one comment style."""

    line_marker: str
    open_marker: str | None = None
    close_marker: str | None = None
    single_line_eligible: bool = False


BLOCK_COMMENT = DecorationProfile(
    line_marker=" *",
    open_marker="/**",
    close_marker=" */",
    single_line_eligible=True,
)
LINE_COMMENT = DecorationProfile(line_marker="//")


@dataclass(frozen=True)
class AttributeEntry:
    """One tagged line of a docblock.

    ``data`` holds up to three fields: usually a type, a label (such as the
    parameter name) and a long description that is wrapped onto the
    following lines.
    """

    tag: str
    data: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        if not self.tag:
            raise DocblockError("Docblock attribute needs a tag")
        object.__setattr__(self, "data", tuple(self.data))
        if len(self.data) > MAX_ATTRIBUTE_FIELDS:
            raise DocblockError(
                f"Docblock attribute @{self.tag} has {len(self.data)} data fields, at most {MAX_ATTRIBUTE_FIELDS} are allowed"
            )


def render_docblock(
    description: str | None,
    attributes: Sequence[AttributeEntry] = (),
    *,
    indent_level: int = 0,
    profile: DecorationProfile = BLOCK_COMMENT,
    force_multiline: bool = False,
) -> list[str]:
    """Render a comment to fully indented lines.

    Raises:
        MissingDescriptionError: If the description is empty or missing.
    """
    if description is None or not description.strip():
        raise MissingDescriptionError("Missing description in docblock.")

    indent = build_indent(indent_level)
    if profile.single_line_eligible and not force_multiline:
        line = _render_single_line(description, attributes, indent, profile)
        if line is not None:
            return [line]
    return _render_multi_line(description, attributes, indent, profile)


def _render_single_line(
    description: str,
    attributes: Sequence[AttributeEntry],
    indent: str,
    profile: DecorationProfile,
) -> str | None:
    """Single-line form, or None when the comment does not qualify."""
    if len(attributes) > 1:
        return None
    paragraphs = split_paragraphs(description)
    if len(paragraphs) != 1:
        return None

    parts: list[str] = []
    if attributes:
        attribute = attributes[0]
        if len(attribute.data) > 1:
            return None
        parts.append(f"@{attribute.tag}")
        if attribute.data and attribute.data[0]:
            parts.append(attribute.data[0])
    parts.append(paragraphs[0])

    line = f"{indent}{profile.open_marker or ''} {' '.join(parts)}{profile.close_marker or ''}"
    if len(line) > LINE_WIDTH:
        return None
    return line.rstrip()


def _render_multi_line(
    description: str,
    attributes: Sequence[AttributeEntry],
    indent: str,
    profile: DecorationProfile,
) -> list[str]:
    line_prefix = indent + profile.line_marker
    lines: list[str] = []

    if profile.open_marker:
        lines.append(indent + profile.open_marker)

    lines.extend(wrap_text(description, line_prefix))

    if attributes:
        lines.append(decorate(line_prefix).rstrip())
        for attribute in attributes:
            lines.extend(render_attribute(attribute, line_prefix))

    if profile.close_marker:
        lines.append(indent + profile.close_marker)

    return lines


def render_attribute(attribute: AttributeEntry, line_prefix: str) -> list[str]:
    """Render one attribute: the tag line plus its wrapped description, if any."""
    line = decorate(line_prefix, f"@{attribute.tag}")
    data = attribute.data
    if data:
        line = add_pseudo_tab(line) + data[0]
    if len(data) > 1:
        line = add_pseudo_tab(line) + data[1]

    lines = [line.rstrip()]
    if len(data) > 2:
        lines.extend(wrap_text(data[2], line_prefix, DESCRIPTION_INDENT))
    return lines
