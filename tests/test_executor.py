from __future__ import annotations

from pathlib import Path

import pytest

from mdgen.documents import ProjectFileReader, TextDocument
from mdgen.engine.executor import COMMAND_HANDLERS, ExecutionContext, execute_command
from mdgen.engine.options import EngineOptions
from mdgen.engine.scanner import scan_commands
from mdgen.exceptions import CommandArgumentError, SourceFileNotFoundError


def _only_command(text: str):
    (command,) = scan_commands(TextDocument(text, path="doc.md"))
    return command


def test_known_command_names() -> None:
    assert set(COMMAND_HANDLERS) == {"insertjs", "toc"}


def test_insertjs_renders_heading_and_fenced_block(static_reader) -> None:
    reader = static_reader({"./lib/a.js": "\n\n  const a = 1;\nexport default a;  \n\n"})
    command = _only_command("<!-- gen:insertjs(./lib/a.js) -->\n<!-- gen:stop -->")

    output = execute_command(command, ExecutionContext(reader=reader))

    assert output == (
        "\nFile: [./lib/a.js](./lib/a.js)\n"
        "```js\n"
        "const a = 1;\nexport default a;\n"
        "```\n"
    )
    assert reader.reads == ["./lib/a.js"]


def test_insertjs_reads_relative_to_project_root(tmp_path: Path) -> None:
    (tmp_path / "examples").mkdir()
    (tmp_path / "examples" / "simple.js").write_text("run();\n", encoding="utf-8")
    command = _only_command("<!-- gen:insertjs(examples/simple.js) --><!-- gen:stop -->")

    output = execute_command(
        command, ExecutionContext(reader=ProjectFileReader(tmp_path))
    )

    assert output is not None
    assert "```js\nrun();\n```" in output


def test_insertjs_missing_file(tmp_path: Path) -> None:
    command = _only_command("<!-- gen:insertjs(./nope.js) --><!-- gen:stop -->")

    with pytest.raises(SourceFileNotFoundError) as excinfo:
        execute_command(command, ExecutionContext(reader=ProjectFileReader(tmp_path)))

    assert excinfo.value.path == "./nope.js"
    assert "./nope.js" in str(excinfo.value)


def test_insertjs_directory_target_is_missing_file(tmp_path: Path) -> None:
    (tmp_path / "lib").mkdir()
    command = _only_command("<!-- gen:insertjs(lib) --><!-- gen:stop -->")

    with pytest.raises(SourceFileNotFoundError):
        execute_command(command, ExecutionContext(reader=ProjectFileReader(tmp_path)))


def test_insertjs_requires_path_argument(static_reader) -> None:
    command = _only_command("<!-- gen:insertjs --><!-- gen:stop -->")

    with pytest.raises(CommandArgumentError):
        execute_command(command, ExecutionContext(reader=static_reader()))


def test_unknown_command_returns_none(static_reader) -> None:
    command = _only_command("<!-- gen:frobnicate(x) -->keep<!-- gen:stop -->")

    assert execute_command(command, ExecutionContext(reader=static_reader())) is None


def test_toc_only_covers_text_after_directive(static_reader) -> None:
    command = _only_command(
        "# Before\n"
        "<!-- gen:toc -->\n# Inside\n<!-- gen:stop -->\n"
        "## After\n### Deeper\n"
    )

    output = execute_command(command, ExecutionContext(reader=static_reader()))

    assert output == "\n- [After](#after)\n  * [Deeper](#deeper)\n"


def test_toc_uses_configured_slug_letters(static_reader) -> None:
    command = _only_command("<!-- gen:toc --><!-- gen:stop -->\n# Привет API\n")
    context = ExecutionContext(
        reader=static_reader(), options=EngineOptions(slug_letters="a-z")
    )

    assert execute_command(command, context) == "\n- [Привет API](#-api)\n"


def test_execute_does_not_mutate_document(static_reader) -> None:
    text = "<!-- gen:toc -->old<!-- gen:stop -->\n# H\n"
    doc = TextDocument(text)
    (command,) = scan_commands(doc)

    execute_command(command, ExecutionContext(reader=static_reader()))

    assert doc.text() == text
