"""Descriptors for the classes to generate.

The loader fills these from the XML input. Auto-generated accessors are
built as ordinary MethodSpec instances, so hand-written and generated
methods go through the same renderer.

All types are frozen Pydantic models.
"""

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field


class Visibility(StrEnum):
    """Method visibility, in output order."""

    PUBLIC = "public"
    PROTECTED = "protected"
    PRIVATE = "private"


class ParameterSpec(BaseModel):
    """A method parameter."""

    model_config = ConfigDict(frozen=True)

    name: str
    type: str = ""
    description: str = ""

    def declaration(self) -> str:
        """``<type> $<name>``, or ``$<name>`` when untyped."""
        if self.type:
            return f"{self.type} ${self.name}"
        return f"${self.name}"


class MethodSpec(BaseModel):
    """A method, either written in the input or generated for a property.

    ``body`` is None when the input has no content; the renderer then emits
    a placeholder comment.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    description: str
    parameters: tuple[ParameterSpec, ...] = ()
    return_type: str = ""
    body: tuple[str, ...] | None = None
    visibility: Visibility = Visibility.PUBLIC
    is_static: bool = False
    is_abstract: bool = False

    def signature(self) -> str:
        """Declaration line without the trailing ``;`` of abstract methods."""
        static = " static" if self.is_static else ""
        arguments = ", ".join(parameter.declaration() for parameter in self.parameters)
        returns = "" if self.return_type in ("", "void") else f": {self.return_type}"
        declaration = f"{self.visibility}{static} function {self.name}({arguments}){returns}"
        if self.is_abstract:
            return f"abstract {declaration}"
        return declaration


class CommentSpec(BaseModel):
    """A free-standing line comment between methods."""

    model_config = ConfigDict(frozen=True)

    text: str


MemberSpec = MethodSpec | CommentSpec


class ConstantSpec(BaseModel):
    """A class constant."""

    model_config = ConfigDict(frozen=True)

    name: str
    value: str
    description: str
    type: str = ""
    force_multiline: bool = False


class PropertySpec(BaseModel):
    """A private property with optional generated accessors."""

    model_config = ConfigDict(frozen=True)

    name: str
    description: str
    type: str = ""
    default: str = ""
    is_static: bool = False
    getter: bool = True
    setter: bool = True
    getter_body: tuple[str, ...] | None = None
    setter_body: tuple[str, ...] | None = None
    force_multiline: bool = False

    @property
    def accessor_suffix(self) -> str:
        return self.name[:1].upper() + self.name[1:]

    @property
    def reference(self) -> str:
        """Expression reading the property from inside the class."""
        if self.is_static:
            return f"self::${self.name}"
        return f"$this->{self.name}"

    def default_literal(self) -> str:
        """Default value as written in the declaration; strings are quoted."""
        if self.type == "string":
            return f'"{self.default}"'
        return self.default

    def getter_method(self) -> MethodSpec:
        return MethodSpec(
            name=f"get{self.accessor_suffix}",
            description=f"Getter for {self.name}.",
            return_type=self.type,
            body=self.getter_body or (f"return {self.reference};",),
            is_static=self.is_static,
        )

    def setter_method(self) -> MethodSpec:
        return MethodSpec(
            name=f"set{self.accessor_suffix}",
            description=f"Setter for {self.name}.",
            parameters=(ParameterSpec(name="input", type=self.type),),
            return_type="void",
            body=self.setter_body or (f"{self.reference} = $input;",),
            is_static=self.is_static,
        )


class ClassSpec(BaseModel):
    """Everything needed to write one class file."""

    model_config = ConfigDict(frozen=True)

    name: str
    description: str
    namespace: str = ""
    author: str = ""
    extends: str = ""
    implements: tuple[str, ...] = ()
    keywords: frozenset[str] = frozenset()
    uses: tuple[str, ...] = ()
    traits: tuple[str, ...] = ()
    superdocs: tuple[str, ...] = ()
    constants: tuple[ConstantSpec, ...] = ()
    properties: tuple[PropertySpec, ...] = ()
    methods: dict[Visibility, tuple[MemberSpec, ...]] = Field(default_factory=dict)
    output: str = ""

    @property
    def is_abstract(self) -> bool:
        return "abstract" in self.keywords

    @property
    def is_final(self) -> bool:
        return "final" in self.keywords

    def declaration(self) -> str:
        """``[abstract |final ]class Name[ extends Base][ implements A, B]``."""
        modifier = "abstract " if self.is_abstract else "final " if self.is_final else ""
        declaration = f"{modifier}class {self.name}"
        if self.extends:
            declaration += f" extends {self.extends}"
        if self.implements:
            declaration += f" implements {', '.join(self.implements)}"
        return declaration


class ProjectSpec(BaseModel):
    """Parsed input document."""

    model_config = ConfigDict(frozen=True)

    default_output: str = ""
    classes: tuple[ClassSpec, ...] = ()
