"""Class file generation from XML descriptions.

Reads the XML input into frozen specs, then assembles each class through
the formatting engine and a line-buffered writer.
"""

from classgen.generator.class_builder import generate_class, generate_project, render_class, resolve_output_dir, write_class
from classgen.generator.loader import check_cdata_balance, load_project, parse_project
from classgen.generator.members import MemberWriter
from classgen.generator.specs import (
    ClassSpec,
    CommentSpec,
    ConstantSpec,
    MethodSpec,
    ParameterSpec,
    ProjectSpec,
    PropertySpec,
    Visibility,
)

__all__ = [
    "ClassSpec",
    "CommentSpec",
    "ConstantSpec",
    "MemberWriter",
    "MethodSpec",
    "ParameterSpec",
    "ProjectSpec",
    "PropertySpec",
    "Visibility",
    "check_cdata_balance",
    "generate_class",
    "generate_project",
    "load_project",
    "parse_project",
    "render_class",
    "resolve_output_dir",
    "write_class",
]
