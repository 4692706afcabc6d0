"""Assembly of complete class files."""

import io
from pathlib import Path

from classgen.exceptions import MissingOutputDirectoryError, OutputExistsError
from classgen.formatting.docblock import AttributeEntry, render_docblock
from classgen.generator.members import MemberWriter
from classgen.generator.specs import ClassSpec, ProjectSpec, Visibility
from classgen.logging import get_logger
from classgen.namespaces import NamespaceMap
from classgen.settings import Settings
from classgen.settings import settings as default_settings
from classgen.writer import LineBufferedWriter

logger = get_logger(__name__)

MEMBER_INDENT = 1
ACCESSORS_START = "// START getters and setters."
ACCESSORS_END = "// END getters and setters."
HELPERS_MARKER = "// Helper functions below this line."


def write_class(spec: ClassSpec, writer: LineBufferedWriter) -> None:
    """Write a whole class file through ``writer``."""
    members = MemberWriter(writer, NamespaceMap.from_uses(spec.uses), MEMBER_INDENT)

    writer.append("<?php")
    writer.append("")
    if spec.namespace:
        writer.append(f"namespace {spec.namespace};")
        writer.append("")

    if spec.uses:
        for use in spec.uses:
            writer.append(f"use {use};")
        writer.append("")

    for superdoc in spec.superdocs:
        _append_lines(writer, render_docblock(superdoc, force_multiline=True))
        writer.append("")

    attributes = [AttributeEntry("author", (spec.author,))] if spec.author else []
    _append_lines(writer, render_docblock(spec.description, attributes, force_multiline=True))

    writer.append(spec.declaration())
    writer.append("{")

    if spec.traits:
        for trait in spec.traits:
            writer.append(f"use {trait};", MEMBER_INDENT)
        writer.append("")

    _write_properties(spec, writer, members)
    _write_methods(spec, writer, members)

    # Drop the separator left by the last member.
    if writer.pending_line == "":
        writer.delete_last_line()
    writer.append("}")


def _write_properties(spec: ClassSpec, writer: LineBufferedWriter, members: MemberWriter) -> None:
    for constant in spec.constants:
        members.write_constant(constant)
    for prop in spec.properties:
        members.write_property(prop)

    with_accessors = [prop for prop in spec.properties if prop.getter or prop.setter]
    if not with_accessors:
        return

    writer.append("")
    writer.append(ACCESSORS_START, MEMBER_INDENT)
    writer.append("")
    for prop in with_accessors:
        members.write_accessors(prop)
    writer.append(ACCESSORS_END, MEMBER_INDENT)
    writer.append("")


def _write_methods(spec: ClassSpec, writer: LineBufferedWriter, members: MemberWriter) -> None:
    for visibility in Visibility:
        group = spec.methods.get(visibility, ())
        if not group:
            continue
        if visibility is Visibility.PRIVATE:
            writer.append("")
            writer.append(HELPERS_MARKER, MEMBER_INDENT)
            writer.append("")
        for member in group:
            members.write_member(member)


def _append_lines(writer: LineBufferedWriter, lines: list[str]) -> None:
    for line in lines:
        writer.append(line)


def render_class(spec: ClassSpec) -> list[str]:
    """Render a class in memory, so rendering errors surface before any file is opened."""
    buffer = io.StringIO()
    with LineBufferedWriter(buffer, name=spec.name) as writer:
        write_class(spec, writer)
    return buffer.getvalue().splitlines()


def write_lines(path: Path, lines: list[str]) -> None:
    """Write rendered lines to a new file.

    Raises:
        OutputExistsError: If the file already exists.
    """
    with LineBufferedWriter.create(path) as writer:
        _append_lines(writer, lines)


def generate_class(spec: ClassSpec, output_dir: Path, extension: str = ".php") -> Path:
    """Write one class to ``<output_dir>/<Name><extension>``.

    Raises:
        OutputExistsError: If the file already exists.
    """
    lines = render_class(spec)
    output_dir.mkdir(parents=True, exist_ok=True)
    path = output_dir / f"{spec.name}{extension}"
    logger.info("Writing %s to %s", spec.name, path)
    write_lines(path, lines)
    return path


def resolve_output_dir(
    spec: ClassSpec,
    project: ProjectSpec,
    default_output: str | None = None,
    settings: Settings | None = None,
) -> Path:
    """Pick the output directory of a class.

    Precedence: the class's own ``output``, the caller's ``default_output``,
    the document's ``default-output``, then the configured default.
    """
    settings = settings or default_settings
    for candidate in (spec.output, default_output, project.default_output, settings.default_output_dir):
        if candidate:
            return Path(candidate)
    raise MissingOutputDirectoryError(
        f"Class {spec.name} has no output directory and no default output directory is set"
    )


def generate_project(
    project: ProjectSpec,
    default_output: str | None = None,
    settings: Settings | None = None,
) -> list[Path]:
    """Write every class of the project.

    Output directories, existing files and rendering are all checked before
    the first file is written, so a failing run leaves no output behind.
    """
    settings = settings or default_settings
    pending: list[tuple[Path, list[str]]] = []
    for spec in project.classes:
        path = resolve_output_dir(spec, project, default_output, settings) / f"{spec.name}{settings.file_extension}"
        if path.exists():
            raise OutputExistsError(f"{path} already exists.")
        pending.append((path, render_class(spec)))

    for path, lines in pending:
        path.parent.mkdir(parents=True, exist_ok=True)
        logger.info("Writing %s", path)
        write_lines(path, lines)
    logger.info("Generated %d classes", len(pending))
    return [path for path, _ in pending]
