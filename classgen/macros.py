"""Macro expansion for free text taken from the XML input.

A macro is a named template with positional placeholders ``$1``, ``$2``, ...
It is called with double braces, the name first, then the arguments. An
argument is either a bare word or a double-quoted phrase:

    >>> registry = MacroRegistry({"mymac": 'First "$1", second "$2".'})
    >>> registry.expand('Call {{mymac "testable bestable" four}} here.')
    'Call First "testable bestable", second "four". here.'

Expansion is a single pass: the output of one macro is never scanned for
further macro calls, and argument text is never re-substituted.

A registry is populated once, then read. Registering after the first
expansion raises MacroRegistryFrozenError.
"""

import re
from collections.abc import Iterable, Mapping

from classgen.exceptions import MacroNotDefinedError, MacroRegistryFrozenError, MacroSyntaxError
from classgen.logging import get_logger

logger = get_logger(__name__)

MACRO_CALL = re.compile(r"\{\{.*?\}\}")
_PLACEHOLDER = re.compile(r"\$(\d+)")


def tokenize_call(call: str) -> list[str]:
    """Split the inside of a macro call into the name and its arguments.

    Raises:
        MacroSyntaxError: On an unterminated quoted argument.
    """
    tokens: list[str] = []
    rest = call.strip()
    while rest:
        if rest.startswith('"'):
            end = rest.find('"', 1)
            if end == -1:
                raise MacroSyntaxError(f"Unterminated quoted argument in macro call {{{{{call}}}}}")
            tokens.append(rest[1:end])
            rest = rest[end + 1 :].lstrip()
        else:
            token, _, rest = rest.partition(" ")
            tokens.append(token)
            rest = rest.lstrip()
    return tokens


def substitute(template: str, arguments: list[str]) -> str:
    """Replace ``$n`` placeholders with the n-th argument.

    Placeholders without a matching argument are kept as they are.
    """

    def replace(match: re.Match[str]) -> str:
        position = int(match.group(1))
        if 1 <= position <= len(arguments):
            return arguments[position - 1]
        return match.group(0)

    return _PLACEHOLDER.sub(replace, template)


class MacroRegistry:
    """Named macro templates for one generation run."""

    def __init__(self, macros: Mapping[str, str] | None = None):
        self._macros: dict[str, str] = {}
        self._frozen = False
        if macros:
            self.register_all(macros.items())

    def __contains__(self, name: object) -> bool:
        return name in self._macros

    def __len__(self) -> int:
        return len(self._macros)

    @property
    def is_frozen(self) -> bool:
        return self._frozen

    def register(self, name: str, template: str) -> None:
        """Add a macro. A later definition of the same name replaces the earlier one."""
        if self._frozen:
            raise MacroRegistryFrozenError(f"Cannot register macro {name!r} after expansion has started")
        if not name:
            raise MacroSyntaxError("Macro definitions need a name")
        if name in self._macros:
            logger.warning("Macro %r is defined more than once; the last definition wins", name)
        self._macros[name] = template

    def register_all(self, entries: Iterable[tuple[str, str]]) -> None:
        for name, template in entries:
            self.register(name, template)

    def template(self, name: str) -> str:
        """Look up a macro template.

        Raises:
            MacroNotDefinedError: If no macro has this name.
        """
        try:
            return self._macros[name]
        except KeyError:
            raise MacroNotDefinedError(f'Macro "{name}" is not defined.') from None

    def expand(self, text: str) -> str:
        """Expand every macro call in ``text``."""
        self._frozen = True
        return MACRO_CALL.sub(self._expand_call, text)

    def _expand_call(self, match: re.Match[str]) -> str:
        call = match.group(0)[2:-2]
        tokens = tokenize_call(call)
        if not tokens or not tokens[0]:
            raise MacroSyntaxError(f"Macro call {match.group(0)!r} has no macro name")
        name, *arguments = tokens
        return substitute(self.template(name), arguments)
