"""Apply computed command output back into the owning documents.

Offsets captured during scanning are only valid against the text seen at
scan time, so every document's commands are spliced rightmost first: an
edit never shifts the region of a command that is still pending.
"""

from __future__ import annotations

from typing import Iterable, Sequence

from mdgen.documents import DocumentSource, FileReader
from mdgen.engine import messages
from mdgen.engine.executor import ExecutionContext, execute_command
from mdgen.engine.messages import Diagnostic
from mdgen.engine.options import EngineOptions
from mdgen.engine.scanner import Command, MarkerSyntax, scan_commands
from mdgen.exceptions import MdgenError, UnterminatedCommandError


def collect_commands(
    documents: Iterable[DocumentSource],
    syntax: MarkerSyntax = MarkerSyntax(),
) -> tuple[list[Command], list[Diagnostic]]:
    commands: list[Command] = []
    diagnostics: list[Diagnostic] = []
    for document in documents:
        try:
            commands.extend(scan_commands(document, syntax))
        except UnterminatedCommandError as exc:
            diagnostics.append(messages.error(str(exc)))
    return commands, diagnostics


def splice(text: str, command: Command, replacement: str) -> str:
    return text[: command.start] + replacement + text[command.end :]


def apply_command(command: Command, replacement: str) -> bool:
    document = command.document
    return document.set_text(splice(document.text(), command, replacement))


def apply_commands(
    commands: Sequence[Command],
    context: ExecutionContext,
) -> list[Diagnostic]:
    diagnostics: list[Diagnostic] = []
    changed: dict[int, DocumentSource] = {}
    order: dict[int, int] = {}
    for index, command in enumerate(commands):
        order.setdefault(id(command.document), index)
    for command in sorted(commands, key=lambda item: item.start, reverse=True):
        try:
            replacement = execute_command(command, context)
        except MdgenError as exc:
            diagnostics.append(messages.error(str(exc)))
            continue
        if replacement is None:
            diagnostics.append(messages.error(f"Unknown command 'gen:{command.name}'"))
            continue
        if apply_command(command, replacement):
            changed[id(command.document)] = command.document
    for key in sorted(changed, key=lambda item: order[item]):
        diagnostics.append(
            messages.warning(f"GEN: updated {changed[key].project_path()}")
        )
    return diagnostics


def run_commands(
    documents: Iterable[DocumentSource],
    reader: FileReader,
    options: EngineOptions | None = None,
) -> list[Diagnostic]:
    """Expand every directive in ``documents`` and return the diagnostics."""
    options = options or EngineOptions()
    commands, diagnostics = collect_commands(documents, options.markers)
    context = ExecutionContext(reader=reader, options=options)
    diagnostics.extend(apply_commands(commands, context))
    return diagnostics
