"""Compute replacement text for scanned commands.

Handlers are registered by directive name in ``COMMAND_HANDLERS``. A handler
returns the text to splice between the markers; it never mutates the
document. Adding a directive means adding a handler and a table entry.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable

from mdgen.documents import FileReader
from mdgen.engine.options import EngineOptions
from mdgen.engine.scanner import Command
from mdgen.engine.toc import generate_table_of_contents
from mdgen.exceptions import CommandArgumentError


@dataclass(frozen=True)
class ExecutionContext:
    reader: FileReader
    options: EngineOptions = field(default_factory=EngineOptions)


CommandHandler = Callable[[Command, ExecutionContext], str]


def _insert_js(command: Command, context: ExecutionContext) -> str:
    if not command.args or not command.args[0]:
        raise CommandArgumentError(
            f"Command 'gen:{command.name}' requires a file path argument"
        )
    path = command.args[0]
    body = context.reader.read(path).strip()
    return f"\nFile: [{path}]({path})\n```js\n{body}\n```\n"


def _table_of_contents(command: Command, context: ExecutionContext) -> str:
    remainder = command.document.text()[command.end:]
    return generate_table_of_contents(remainder, context.options.slug_letters)


COMMAND_HANDLERS: dict[str, CommandHandler] = {
    "insertjs": _insert_js,
    "toc": _table_of_contents,
}


def execute_command(command: Command, context: ExecutionContext) -> str | None:
    """Return the replacement text, or ``None`` when the name is unknown.

    Raises ``SourceFileNotFoundError`` or ``CommandArgumentError`` when a
    known command cannot produce its output.
    """
    handler = COMMAND_HANDLERS.get(command.name)
    if handler is None:
        return None
    return handler(command, context)
