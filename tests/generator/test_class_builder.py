"""Tests for whole-class assembly and output files."""

from pathlib import Path

import pytest

from classgen.exceptions import MissingDescriptionError, MissingOutputDirectoryError, OutputExistsError
from classgen.generator.class_builder import (
    generate_class,
    generate_project,
    render_class,
    resolve_output_dir,
    write_class,
)
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
from classgen.settings import Settings

GREETER = ClassSpec(
    name="Greeter",
    namespace=r"App\Service",
    description="Greets people.",
    author="Jane Doe",
    extends="Base",
    uses=(r"App\Model\Person",),
    properties=(PropertySpec(name="greeting", type="string", default="Hello", description="Greeting word."),),
    methods={
        Visibility.PUBLIC: (
            MethodSpec(
                name="greet",
                description="Greet a person.",
                parameters=(ParameterSpec(name="person", type="Person"),),
                return_type="string",
                body=('return $this->greeting . " " . $person->getName();',),
            ),
        ),
    },
)

GREETER_OUTPUT = r"""<?php

namespace App\Service;

use App\Model\Person;

/**
 * Greets people.
 *
 * @author  Jane Doe
 */
class Greeter extends Base
{
    /** @var string Greeting word. */
    private $greeting = "Hello";


    // START getters and setters.

    /**
     * Setter for greeting.
     *
     * @param   string  $input
     * @return  void
     */
    public function setGreeting(string $input)
    {
        $this->greeting = $input;
    }

    /**
     * Getter for greeting.
     *
     * @return  string
     */
    public function getGreeting(): string
    {
        return $this->greeting;
    }

    // END getters and setters.

    /**
     * Greet a person.
     *
     * @param   \App\Model\Person   $person
     * @return  string
     */
    public function greet(Person $person): string
    {
        return $this->greeting . " " . $person->getName();
    }
}
"""

SHAPE = ClassSpec(
    name="Shape",
    description="A shape.",
    keywords=frozenset({"abstract"}),
    traits=("Named",),
    superdocs=("Generated file.",),
    constants=(ConstantSpec(name="SIDES", value="0", description="Sides.", type="int"),),
    methods={
        Visibility.PUBLIC: (MethodSpec(name="area", description="Area.", return_type="float", is_abstract=True),),
        Visibility.PRIVATE: (
            CommentSpec(text="Internal."),
            MethodSpec(name="helper", description="Helper.", visibility=Visibility.PRIVATE),
        ),
    },
)

SHAPE_OUTPUT = """<?php

/**
 * Generated file.
 */

/**
 * A shape.
 */
abstract class Shape
{
    use Named;

    /** @var int Sides. */
    const SIDES = 0;

    /**
     * Area.
     *
     * @return  float
     */
    abstract public function area(): float;


    // Helper functions below this line.

    // Internal.

    /**
     * Helper.
     *
     * @return  void
     */
    private function helper()
    {
        // Todo.
    }
}
"""


NO_DEFAULTS = Settings(default_output_dir="")


class TestWriteClass:
    """Test whole-class layout."""

    def test_class_with_accessors(self, writer, output):
        write_class(GREETER, writer)
        writer.close()

        assert output.getvalue() == GREETER_OUTPUT

    def test_abstract_class_with_helpers(self, writer, output):
        write_class(SHAPE, writer)
        writer.close()

        assert output.getvalue() == SHAPE_OUTPUT

    def test_empty_class(self, writer, output):
        write_class(ClassSpec(name="Empty", description="Nothing here."), writer)
        writer.close()

        assert output.getvalue() == "<?php\n\n/**\n * Nothing here.\n */\nclass Empty\n{\n}\n"

    def test_property_without_accessors_has_no_markers(self, writer, output):
        spec = ClassSpec(
            name="Plain",
            description="Plain.",
            properties=(PropertySpec(name="x", type="int", description="X.", getter=False, setter=False),),
        )
        write_class(spec, writer)
        writer.close()

        text = output.getvalue()
        assert "START getters" not in text
        assert text.endswith("    /** @var int X. */\n    private $x;\n}\n")

    def test_output_has_no_trailing_whitespace(self, writer, output):
        write_class(GREETER, writer)
        writer.close()

        assert all(line == line.rstrip() for line in output.getvalue().splitlines())

    def test_render_class_matches_written_output(self):
        assert render_class(SHAPE) == SHAPE_OUTPUT.splitlines()


class TestGenerateClass:
    """Test writing a single class file."""

    def test_creates_directory(self, tmp_path: Path):
        path = generate_class(GREETER, tmp_path / "nested" / "src")

        assert path == tmp_path / "nested" / "src" / "Greeter.php"
        assert path.read_text(encoding="utf-8") == GREETER_OUTPUT

    def test_extension(self, tmp_path: Path):
        assert generate_class(SHAPE, tmp_path, ".inc").name == "Shape.inc"

    def test_refuses_to_overwrite(self, tmp_path: Path):
        generate_class(GREETER, tmp_path)

        with pytest.raises(OutputExistsError):
            generate_class(GREETER, tmp_path)

    def test_render_error_leaves_no_file(self, tmp_path: Path):
        broken = ClassSpec(
            name="Broken",
            description="Broken class.",
            methods={Visibility.PUBLIC: (MethodSpec(name="run", description=""),)},
        )

        with pytest.raises(MissingDescriptionError):
            generate_class(broken, tmp_path)

        assert not (tmp_path / "Broken.php").exists()


class TestOutputDirectories:
    """Test output directory resolution."""

    def test_precedence(self):
        project = ProjectSpec(default_output="doc-default")
        config = Settings(default_output_dir="settings-default")

        own = ClassSpec(name="A", description="A.", output="own")
        other = ClassSpec(name="B", description="B.")

        assert resolve_output_dir(own, project, "cli", config) == Path("own")
        assert resolve_output_dir(other, project, "cli", config) == Path("cli")
        assert resolve_output_dir(other, project, None, config) == Path("doc-default")
        assert resolve_output_dir(other, ProjectSpec(), None, config) == Path("settings-default")

    def test_missing_output_dir(self):
        with pytest.raises(MissingOutputDirectoryError, match="Class A has no output directory"):
            resolve_output_dir(ClassSpec(name="A", description="A."), ProjectSpec(), None, NO_DEFAULTS)


class TestGenerateProject:
    """Test batch generation, which writes all classes or none."""

    def test_writes_every_class(self, tmp_path: Path):
        project = ProjectSpec(default_output=str(tmp_path / "out"), classes=(GREETER, SHAPE))

        paths = generate_project(project, settings=NO_DEFAULTS)

        assert [path.name for path in paths] == ["Greeter.php", "Shape.php"]
        assert all(path.parent == tmp_path / "out" for path in paths)
        assert paths[0].read_text(encoding="utf-8") == GREETER_OUTPUT

    def test_missing_output_dir_writes_nothing(self, tmp_path: Path):
        project = ProjectSpec(
            classes=(
                GREETER.model_copy(update={"output": str(tmp_path)}),
                ClassSpec(name="Orphan", description="No output."),
            )
        )

        with pytest.raises(MissingOutputDirectoryError):
            generate_project(project, settings=NO_DEFAULTS)

        assert not (tmp_path / "Greeter.php").exists()

    def test_undocumented_method_in_later_class_writes_nothing(self, tmp_path: Path):
        bad = ClassSpec(
            name="Bad",
            description="Bad class.",
            methods={Visibility.PUBLIC: (MethodSpec(name="run", description=""),)},
        )
        project = ProjectSpec(default_output=str(tmp_path), classes=(GREETER, bad))

        with pytest.raises(MissingDescriptionError):
            generate_project(project, settings=NO_DEFAULTS)

        assert list(tmp_path.iterdir()) == []

    def test_existing_file_in_later_class_writes_nothing(self, tmp_path: Path):
        (tmp_path / "Shape.php").write_text("keep", encoding="utf-8")
        project = ProjectSpec(default_output=str(tmp_path), classes=(GREETER, SHAPE))

        with pytest.raises(OutputExistsError, match="Shape.php already exists"):
            generate_project(project, settings=NO_DEFAULTS)

        assert not (tmp_path / "Greeter.php").exists()
        assert (tmp_path / "Shape.php").read_text(encoding="utf-8") == "keep"

    def test_rerun_after_failure_succeeds(self, tmp_path: Path):
        bad = ClassSpec(
            name="Bad",
            description="Bad class.",
            methods={Visibility.PUBLIC: (MethodSpec(name="run", description=""),)},
        )
        with pytest.raises(MissingDescriptionError):
            generate_project(ProjectSpec(default_output=str(tmp_path), classes=(GREETER, bad)), settings=NO_DEFAULTS)

        fixed = bad.model_copy(update={"methods": {Visibility.PUBLIC: (MethodSpec(name="run", description="Run."),)}})
        paths = generate_project(ProjectSpec(default_output=str(tmp_path), classes=(GREETER, fixed)), settings=NO_DEFAULTS)

        assert [path.name for path in paths] == ["Greeter.php", "Bad.php"]
