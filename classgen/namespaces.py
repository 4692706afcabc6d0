r"""Resolution of short type names to fully-qualified names for docblocks.

Each generated class imports other classes with ``use`` statements. Inside
its documentation, types are written out in full so readers do not need to
look at the imports. With ``use App\Model\Foo;`` the type ``?Foo`` is
documented as ``\App\Model\Foo|null`` and ``int`` stays ``int``.

Names that are not imported and not builtin are assumed to live in the
global namespace. Signatures in generated code keep the short names.
"""

from collections.abc import Iterable, Mapping
from types import MappingProxyType

NAMESPACE_SEPARATOR = "\\"
UNION_SEPARATOR = "|"
NULLABLE_MARKER = "?"
ARRAY_SUFFIX = "[]"

BUILTIN_TYPES: frozenset[str] = frozenset({
    "int",
    "integer",
    "float",
    "double",
    "string",
    "bool",
    "boolean",
    "array",
    "iterable",
    "callable",
    "void",
    "resource",
    "mixed",
    "null",
    "object",
    "self",
    "static",
    "parent",
    "false",
    "true",
    "never",
})


def short_name(qualified_name: str) -> str:
    """Segment after the last namespace separator."""
    return qualified_name.rsplit(NAMESPACE_SEPARATOR, 1)[-1]


class NamespaceMap:
    """Read-only mapping from imported short names to their full names."""

    def __init__(self, names: Mapping[str, str] | None = None):
        self._names: Mapping[str, str] = MappingProxyType(dict(names or {}))

    @classmethod
    def from_uses(cls, uses: Iterable[str]) -> "NamespaceMap":
        """Build the map from the values of ``use`` statements."""
        names: dict[str, str] = {}
        for use in uses:
            qualified = use.strip().lstrip(NAMESPACE_SEPARATOR)
            if qualified:
                names[short_name(qualified)] = qualified
        return cls(names)

    @property
    def names(self) -> Mapping[str, str]:
        return self._names

    def fully_qualified_name(self, type_name: str) -> str:
        """Resolve every member of a (possibly union) type expression."""
        return UNION_SEPARATOR.join(self._resolve_member(member) for member in type_name.split(UNION_SEPARATOR))

    def _resolve_member(self, member: str) -> str:
        member = member.strip()
        nullable = member.startswith(NULLABLE_MARKER)
        if nullable:
            member = member[len(NULLABLE_MARKER) :]

        array_suffix = ""
        while member.endswith(ARRAY_SUFFIX):
            member = member[: -len(ARRAY_SUFFIX)]
            array_suffix += ARRAY_SUFFIX

        resolved = self._qualify(member) + array_suffix
        if nullable:
            resolved += UNION_SEPARATOR + "null"
        return resolved

    def _qualify(self, name: str) -> str:
        if not name or name.startswith(NAMESPACE_SEPARATOR):
            return name
        if name in self._names:
            return NAMESPACE_SEPARATOR + self._names[name]
        if name.lower() in BUILTIN_TYPES:
            return name
        return NAMESPACE_SEPARATOR + name
