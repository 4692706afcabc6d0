"""classgen - generate PHP class files from declarative XML descriptions.

The XML input describes classes: namespaces, imports, properties, constants
and methods, together with their documentation. classgen writes one source
file per class with wrapped docblocks, generated getters and setters, and
normalized method bodies.

Core pieces:
    - **formatting**: indentation, 80-column word wrapping, docblocks, embedded code
    - **writer**: line-buffered output that can retract its last line
    - **macros**: ``{{name arg "quoted arg"}}`` text templates
    - **namespaces**: fully-qualified type names for documentation
    - **generator**: XML loading, class assembly and the ``classgen`` CLI

Quick Start:
    >>> from pathlib import Path
    >>> from classgen import generate_project, load_project
    >>>
    >>> project, _ = load_project(Path("classes.xml"))
    >>> generate_project(project, default_output="src")

Environment Variables:
    - CLASSGEN_DEFAULT_OUTPUT_DIR: Fallback output directory
    - CLASSGEN_FILE_EXTENSION: Generated file suffix (default ".php")
    - CLASSGEN_LOG_LEVEL: Log level of the classgen logger
    - CLASSGEN_LOGGING_CONFIG: Path to a YAML logging configuration
"""

from .exceptions import (
    ClassgenError,
    DocblockError,
    InputError,
    MacroError,
    MacroNotDefinedError,
    MacroRegistryFrozenError,
    MacroSyntaxError,
    MissingDescriptionError,
    MissingOutputDirectoryError,
    OutputExistsError,
    WriterError,
    WriterStateError,
)
from .formatting import (
    BLOCK_COMMENT,
    LINE_COMMENT,
    AttributeEntry,
    DecorationProfile,
    normalize_code_block,
    render_docblock,
    wrap_text,
)
from .generator import generate_class, generate_project, load_project, parse_project
from .logging import LoggingConfig, get_logger, setup_logging
from .macros import MacroRegistry
from .namespaces import NamespaceMap
from .settings import Settings, settings
from .writer import LineBufferedWriter

__version__ = "0.1.0"

__all__ = [
    "BLOCK_COMMENT",
    "LINE_COMMENT",
    "AttributeEntry",
    "ClassgenError",
    "DecorationProfile",
    "DocblockError",
    "InputError",
    "LineBufferedWriter",
    "LoggingConfig",
    "MacroError",
    "MacroNotDefinedError",
    "MacroRegistry",
    "MacroRegistryFrozenError",
    "MacroSyntaxError",
    "MissingDescriptionError",
    "MissingOutputDirectoryError",
    "NamespaceMap",
    "OutputExistsError",
    "Settings",
    "WriterError",
    "WriterStateError",
    "generate_class",
    "generate_project",
    "get_logger",
    "load_project",
    "normalize_code_block",
    "parse_project",
    "render_docblock",
    "settings",
    "setup_logging",
    "wrap_text",
]
