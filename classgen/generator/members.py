"""Rendering of class members: constants, properties, accessors, methods and comments.

Every member is followed by one blank separator line. The class builder
removes the last separator through the writer before closing the class.
"""

from collections.abc import Sequence

from classgen.formatting.docblock import BLOCK_COMMENT, LINE_COMMENT, AttributeEntry, DecorationProfile, render_docblock
from classgen.generator.specs import CommentSpec, ConstantSpec, MemberSpec, MethodSpec, ParameterSpec, PropertySpec
from classgen.namespaces import NamespaceMap
from classgen.writer import LineBufferedWriter

MISSING_BODY = "// Todo."
UNTYPED = "mixed"


class MemberWriter:
    """Writes members of one class at a fixed indent level."""

    def __init__(self, writer: LineBufferedWriter, namespaces: NamespaceMap, indent_level: int = 1):
        self._writer = writer
        self._namespaces = namespaces
        self._indent_level = indent_level

    def write_docblock(
        self,
        description: str,
        attributes: Sequence[AttributeEntry] = (),
        *,
        profile: DecorationProfile = BLOCK_COMMENT,
        force_multiline: bool = False,
    ) -> None:
        # Docblock lines carry their own indentation.
        for line in render_docblock(
            description,
            attributes,
            indent_level=self._indent_level,
            profile=profile,
            force_multiline=force_multiline,
        ):
            self._writer.append(line)

    def write_constant(self, spec: ConstantSpec) -> None:
        self.write_docblock(spec.description, [self._var(spec.type)], force_multiline=spec.force_multiline)
        self._writer.append(f"const {spec.name} = {spec.value};", self._indent_level)
        self._writer.append("")

    def write_property(self, spec: PropertySpec) -> None:
        self.write_docblock(spec.description, [self._var(spec.type)], force_multiline=spec.force_multiline)
        static = "static " if spec.is_static else ""
        self._writer.append(f"private {static}${spec.name}", self._indent_level)
        if spec.default:
            self._writer.append_to_last_line(f" = {spec.default_literal()}")
        self._writer.append_to_last_line(";")
        self._writer.append("")

    def write_accessors(self, spec: PropertySpec) -> None:
        """Setter first, then getter, skipping the disabled ones."""
        if spec.setter:
            self.write_method(spec.setter_method())
        if spec.getter:
            self.write_method(spec.getter_method())

    def write_method(self, spec: MethodSpec) -> None:
        attributes = [AttributeEntry("param", self._parameter_data(parameter)) for parameter in spec.parameters]
        attributes.append(AttributeEntry("return", (self.doc_type(spec.return_type or "void"),)))
        self.write_docblock(spec.description, attributes, force_multiline=True)

        self._writer.append(spec.signature(), self._indent_level)
        if spec.is_abstract:
            self._writer.append_to_last_line(";")
        else:
            self._write_body(spec.body)
        self._writer.append("")

    def write_comment(self, spec: CommentSpec) -> None:
        self.write_docblock(spec.text, profile=LINE_COMMENT)
        self._writer.append("")

    def write_member(self, spec: MemberSpec) -> None:
        if isinstance(spec, CommentSpec):
            self.write_comment(spec)
        else:
            self.write_method(spec)

    def doc_type(self, type_name: str) -> str:
        """Type as shown in documentation: fully qualified, ``mixed`` when unset."""
        if not type_name:
            return UNTYPED
        return self._namespaces.fully_qualified_name(type_name)

    def _var(self, type_name: str) -> AttributeEntry:
        return AttributeEntry("var", (self.doc_type(type_name),))

    def _parameter_data(self, parameter: ParameterSpec) -> tuple[str, ...]:
        data = (self.doc_type(parameter.type), f"${parameter.name}")
        if parameter.description.strip():
            data += (parameter.description,)
        return data

    def _write_body(self, body: Sequence[str] | None) -> None:
        self._writer.append("{", self._indent_level)
        for line in body if body is not None else (MISSING_BODY,):
            self._writer.append(line, self._indent_level + 1)
        self._writer.append("}", self._indent_level)
