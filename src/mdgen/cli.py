from __future__ import annotations

import json
from pathlib import Path
from typing import List, Optional

import typer

from mdgen.config import (
    document_defaults,
    document_excludes,
    document_paths,
    engine_options,
    load_config,
    override_markers,
)
from mdgen.documents import ProjectFileReader, iter_markdown_paths, load_documents
from mdgen.engine import messages, run_commands
from mdgen.engine.messages import Diagnostic, DiagnosticKind, has_errors
from mdgen.engine.toc import generate_table_of_contents
from mdgen.schema import DiagnosticDTO, RunReportDTO

app = typer.Typer(add_completion=False)


def _resolve_document_paths(
    paths: list[Path] | None,
    *,
    root: Path,
    config: dict,
) -> list[Path]:
    section = document_defaults(config)
    raw: list[str | Path] = list(paths) if paths else list(document_paths(section))
    return iter_markdown_paths(raw, root=root, exclude=document_excludes(section))


def _run_expansion(
    *,
    paths: list[Path] | None,
    root: Path,
    config_path: Path | None,
    check: bool,
    open_marker: str | None,
    close_marker: str | None,
) -> tuple[RunReportDTO, list[Diagnostic]]:
    root = root.resolve()
    config = override_markers(
        load_config(root=root, config_path=config_path),
        open_token=open_marker,
        close_token=close_marker,
    )
    documents, failures = load_documents(
        _resolve_document_paths(paths, root=root, config=config),
        root=root,
    )
    diagnostics = [messages.error(str(exc)) for exc in failures]
    diagnostics.extend(
        run_commands(documents, ProjectFileReader(root), engine_options(config))
    )
    updated = [doc.project_path() for doc in documents if doc.dirty]
    if not check:
        for doc in documents:
            doc.save()
    exit_code = 1 if has_errors(diagnostics) or (check and updated) else 0
    report = RunReportDTO(
        documents=[doc.project_path() for doc in documents],
        updated=updated,
        diagnostics=[DiagnosticDTO.from_diagnostic(item) for item in diagnostics],
        check=check,
        exit_code=exit_code,
    )
    return report, diagnostics


@app.command("run")
def run(
    paths: List[Path] = typer.Argument(None),
    root: Path = typer.Option(Path("."), "--root"),
    config: Optional[Path] = typer.Option(None, "--config"),
    check: bool = typer.Option(
        False,
        "--check/--write",
        help="Report documents that would change without writing them.",
    ),
    open_marker: Optional[str] = typer.Option(None, "--open-marker"),
    close_marker: Optional[str] = typer.Option(None, "--close-marker"),
    json_output: bool = typer.Option(False, "--json", help="Emit a JSON run report."),
) -> None:
    """Expand gen: directives in markdown documents."""
    report, diagnostics = _run_expansion(
        paths=paths,
        root=root,
        config_path=config,
        check=check,
        open_marker=open_marker,
        close_marker=close_marker,
    )
    if json_output:
        typer.echo(json.dumps(report.model_dump(), indent=2, sort_keys=True))
    else:
        if not report.documents and not diagnostics:
            typer.echo("No markdown documents found.")
        for item in diagnostics:
            typer.echo(item.render(), err=item.kind is DiagnosticKind.ERROR)
        if check and report.updated:
            typer.echo(
                f"{len(report.updated)} document(s) out of date.",
                err=True,
            )
    raise typer.Exit(code=report.exit_code)


@app.command("toc")
def toc(
    path: Path = typer.Argument(...),
    root: Path = typer.Option(Path("."), "--root"),
    config: Optional[Path] = typer.Option(None, "--config"),
) -> None:
    """Print the table of contents for a markdown file."""
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeError) as exc:
        raise typer.BadParameter(f"Cannot read {path}: {exc}") from exc
    options = engine_options(load_config(root=root.resolve(), config_path=config))
    typer.echo(generate_table_of_contents(text, options.slug_letters).strip("\n"))
