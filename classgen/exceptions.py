"""Exception hierarchy for classgen.

This module defines the exception hierarchy used throughout the classgen package.
All exceptions inherit from ClassgenError, so a single except clause aborts a
generation run cleanly.
"""


class ClassgenError(Exception):
    """Base exception for all classgen errors."""


class InputError(ClassgenError):
    """Raised when the XML input is malformed or misses a required element."""


class MissingOutputDirectoryError(ClassgenError):
    """Raised when a class has no output directory and no default is configured."""


class DocblockError(ClassgenError):
    """Raised when a docblock cannot be rendered from the given parts."""


class MissingDescriptionError(DocblockError):
    """Raised when a docblock is rendered without a description."""


class MacroError(ClassgenError):
    """Base exception for macro errors."""


class MacroNotDefinedError(MacroError):
    """Raised when a macro call references a name that was never registered."""


class MacroSyntaxError(MacroError):
    """Raised when a macro call cannot be tokenized."""


class MacroRegistryFrozenError(MacroError):
    """Raised when macros are registered after expansion has started."""


class WriterError(ClassgenError):
    """Base exception for output writer errors."""


class OutputExistsError(WriterError):
    """Raised when a writer is created over an already existing output file."""


class WriterStateError(WriterError):
    """Raised when a writer operation is invalid in the writer's current state."""
