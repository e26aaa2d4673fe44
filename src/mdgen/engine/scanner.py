"""Locate ``gen:<name>`` ... ``gen:stop`` directive regions in document text."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from functools import cached_property

from mdgen.documents import DocumentSource
from mdgen.exceptions import UnterminatedCommandError

DEFAULT_OPEN_TOKEN = "<!--"
DEFAULT_CLOSE_TOKEN = "-->"
STOP_NAME = "stop"


@dataclass(frozen=True)
class MarkerSyntax:
    """Comment convention wrapping directive markers."""

    open_token: str = DEFAULT_OPEN_TOKEN
    close_token: str = DEFAULT_CLOSE_TOKEN

    @cached_property
    def start_re(self) -> re.Pattern[str]:
        return re.compile(
            rf"{re.escape(self.open_token)}\s*gen:([a-z-]+)(\(.*\))?\s*{re.escape(self.close_token)}",
            re.IGNORECASE,
        )

    @cached_property
    def stop_re(self) -> re.Pattern[str]:
        return re.compile(
            rf"{re.escape(self.open_token)}\s*gen:{STOP_NAME}\s*{re.escape(self.close_token)}",
            re.IGNORECASE,
        )


@dataclass(frozen=True)
class Command:
    name: str
    args: tuple[str, ...]
    # Half-open region between the markers in the text seen at scan time.
    start: int
    end: int
    original_text: str
    marker: str
    document: DocumentSource = field(compare=False, repr=False)


def parse_args(group: str | None) -> tuple[str, ...]:
    if not group:
        return ()
    return tuple(arg.strip() for arg in group[1:-1].split(","))


def scan_text(
    text: str,
    document: DocumentSource,
    syntax: MarkerSyntax = MarkerSyntax(),
) -> list[Command]:
    commands: list[Command] = []
    pos = 0
    while True:
        start = syntax.start_re.search(text, pos)
        if start is None:
            return commands
        if start.group(1).lower() == STOP_NAME:
            # Stray closing marker with no open directive.
            pos = start.end()
            continue
        stop = syntax.stop_re.search(text, start.end())
        if stop is None:
            raise UnterminatedCommandError(start.group(0), document.project_path())
        commands.append(
            Command(
                name=start.group(1).lower(),
                args=parse_args(start.group(2)),
                start=start.end(),
                end=stop.start(),
                original_text=text[start.end():stop.start()],
                marker=start.group(0),
                document=document,
            )
        )
        pos = stop.end()


def scan_commands(
    document: DocumentSource,
    syntax: MarkerSyntax = MarkerSyntax(),
) -> list[Command]:
    return scan_text(document.text(), document, syntax)
