"""Read the XML class description into specs.

Every piece of free text read from the document goes through macro
expansion before it is stored. Embedded code is expanded and then
normalized with normalize_code_block.
"""

import xml.etree.ElementTree as ET
from pathlib import Path

from classgen.exceptions import InputError
from classgen.formatting.code_block import normalize_code_block
from classgen.generator.specs import (
    ClassSpec,
    CommentSpec,
    ConstantSpec,
    MemberSpec,
    MethodSpec,
    ParameterSpec,
    ProjectSpec,
    PropertySpec,
    Visibility,
)
from classgen.logging import get_logger
from classgen.macros import MacroRegistry

logger = get_logger(__name__)

ROOT_TAGS: frozenset[str] = frozenset({"classgen", "phlute"})
CDATA_OPEN = "<![CDATA["
CDATA_CLOSE = "]]>"

_TRUE_VALUES = frozenset({"1", "true", "yes"})
_FALSE_VALUES = frozenset({"0", "false", "no"})


def check_cdata_balance(text: str) -> None:
    """Fail when CDATA openers and closers do not pair up.

    A stray ``]]>`` inside embedded code silently truncates the section, so
    the counts are compared before parsing.
    """
    opened = text.count(CDATA_OPEN)
    closed = text.count(CDATA_CLOSE)
    if opened != closed:
        raise InputError(
            f"Found {opened} '{CDATA_OPEN}' but {closed} '{CDATA_CLOSE}'. If ']]>' appears in embedded code, "
            "separate the brackets (for example ']] >')."
        )


def load_project(path: Path, registry: MacroRegistry | None = None) -> tuple[ProjectSpec, MacroRegistry]:
    """Read and parse an input file."""
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise InputError(f"Cannot read input file {path}: {exc}") from exc
    return parse_project(text, registry)


def parse_project(text: str, registry: MacroRegistry | None = None) -> tuple[ProjectSpec, MacroRegistry]:
    """Parse an input document.

    Macros are registered into ``registry`` (a new one when omitted) before
    any class is read. Returns the project and the registry used.
    """
    check_cdata_balance(text)
    try:
        root = ET.fromstring(text)
    except ET.ParseError as exc:
        raise InputError(f"Invalid XML: {exc}") from exc
    if root.tag not in ROOT_TAGS:
        raise InputError(f"Unexpected root element <{root.tag}>, expected <classgen>")

    if registry is None:
        registry = MacroRegistry()
    macros = root.find("macros")
    if macros is not None:
        registry.register_all((_require(node, "name"), "".join(node.itertext())) for node in macros.findall("macro"))
    logger.debug("Registered %d macros", len(registry))

    reader = _SpecReader(registry)
    classes = tuple(reader.read_class(node) for node in root.findall("class"))
    logger.debug("Parsed %d classes", len(classes))
    return ProjectSpec(default_output=root.get("default-output", ""), classes=classes), registry


def _require(node: ET.Element, attribute: str) -> str:
    value = node.get(attribute, "")
    if not value:
        raise InputError(f"<{node.tag}> is missing the required '{attribute}' attribute")
    return value


def _flag(node: ET.Element, attribute: str, default: bool) -> bool:
    value = node.get(attribute)
    if value is None or value == "":
        return default
    value = value.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    accepted = ", ".join(sorted(_TRUE_VALUES | _FALSE_VALUES))
    raise InputError(f"<{node.tag}> attribute '{attribute}' must be one of {accepted}, got {value!r}")


def _keywords(node: ET.Element) -> frozenset[str]:
    return frozenset(node.get("keywords", "").split())


def _label(node: ET.Element) -> str:
    """Element as shown in error messages, e.g. ``<method name="run">``."""
    name = node.get("name")
    return f'<{node.tag} name="{name}">' if name else f"<{node.tag}>"


class _SpecReader:
    """Builds specs from elements, expanding macros in all free text."""

    def __init__(self, registry: MacroRegistry):
        self._registry = registry

    def read_class(self, node: ET.Element) -> ClassSpec:
        name = _require(node, "name")
        methods: dict[Visibility, tuple[MemberSpec, ...]] = {}
        for visibility in Visibility:
            group = node.find(f"methods/{visibility}")
            if group is not None:
                methods[visibility] = self._read_members(group, visibility)

        return ClassSpec(
            name=name,
            description=self._description(node),
            namespace=node.get("namespace", ""),
            author=self._expand(node.get("author", "")),
            extends=node.get("extends", ""),
            implements=tuple(node.get("implements", "").replace(",", " ").split()),
            keywords=_keywords(node),
            uses=tuple(_require(use, "value") for use in node.findall("uses/use")),
            traits=tuple(_require(trait, "value") for trait in node.findall("traits/trait")),
            superdocs=tuple(self._required_text(superdoc) for superdoc in node.findall("superdocs/superdoc")),
            constants=tuple(self._read_constant(child) for child in node.findall("properties/constant")),
            properties=tuple(self._read_property(child) for child in node.findall("properties/property")),
            methods=methods,
            output=node.get("output", ""),
        )

    def _read_members(self, group: ET.Element, visibility: Visibility) -> tuple[MemberSpec, ...]:
        members: list[MemberSpec] = []
        for child in group:
            if child.tag == "method":
                members.append(self._read_method(child, visibility))
            elif child.tag == "comment":
                members.append(CommentSpec(text=self._required_text(child)))
        return tuple(members)

    def _read_method(self, node: ET.Element, visibility: Visibility) -> MethodSpec:
        keywords = _keywords(node)
        return MethodSpec(
            name=_require(node, "name"),
            description=self._description(node),
            parameters=tuple(self._read_parameter(child) for child in node.findall("input")),
            return_type=node.get("return", ""),
            body=self._content(node),
            visibility=visibility,
            is_static="static" in keywords,
            is_abstract="abstract" in keywords,
        )

    def _read_parameter(self, node: ET.Element) -> ParameterSpec:
        return ParameterSpec(
            name=_require(node, "name"),
            type=node.get("type", ""),
            description=self._expand(node.get("desc", "")),
        )

    def _read_property(self, node: ET.Element) -> PropertySpec:
        getter = node.find("getter")
        setter = node.find("setter")
        return PropertySpec(
            name=_require(node, "name"),
            description=self._description(node),
            type=node.get("type", ""),
            default=node.get("default", ""),
            is_static="static" in _keywords(node),
            getter=_flag(node, "getter", True),
            setter=_flag(node, "setter", True),
            getter_body=self._content(getter) if getter is not None else None,
            setter_body=self._content(setter) if setter is not None else None,
            force_multiline=_flag(node, "multiline", False),
        )

    def _read_constant(self, node: ET.Element) -> ConstantSpec:
        return ConstantSpec(
            name=_require(node, "name"),
            value=_require(node, "value"),
            description=self._description(node),
            type=node.get("type", ""),
            force_multiline=_flag(node, "multiline", False),
        )

    def _description(self, node: ET.Element) -> str:
        """``doc`` attribute, or the ``<doc>`` child when the attribute is absent.

        Raises:
            InputError: If neither holds any text.
        """
        if "doc" in node.attrib:
            text = self._expand(node.attrib["doc"])
        else:
            doc = node.find("doc")
            text = self._text(doc) if doc is not None else ""
        if not text.strip():
            raise InputError(f"{_label(node)} has no description; add a doc attribute or a <doc> element")
        return text

    def _required_text(self, node: ET.Element) -> str:
        text = self._text(node)
        if not text.strip():
            raise InputError(f"{_label(node)} is empty")
        return text

    def _content(self, node: ET.Element) -> tuple[str, ...] | None:
        content = node.find("content")
        if content is None:
            return None
        return tuple(normalize_code_block(self._text(content)))

    def _text(self, node: ET.Element) -> str:
        return self._expand("".join(node.itertext()))

    def _expand(self, text: str) -> str:
        return self._registry.expand(text)
