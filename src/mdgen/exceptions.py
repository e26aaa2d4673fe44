"""Exception hierarchy for mdgen directive processing."""

from __future__ import annotations


class MdgenError(RuntimeError):
    """Base class for failures raised while expanding directives.

    These never escape a run: the applier converts them into error
    diagnostics so the remaining commands and documents keep processing.
    """


class UnterminatedCommandError(MdgenError):
    """An opening marker has no closing ``gen:stop`` marker after it."""

    def __init__(self, marker: str, project_path: str):
        super().__init__(
            f"Failed to find 'gen:stop' for command {marker} in {project_path}"
        )
        self.marker = marker
        self.project_path = project_path


class SourceFileNotFoundError(MdgenError):
    def __init__(self, path: str, *, reason: str = "file not found"):
        super().__init__(f"Failed to read '{path}': {reason}")
        self.path = path
        self.reason = reason


class CommandArgumentError(MdgenError):
    pass


class SlugPatternError(MdgenError):
    def __init__(self, letters: str, reason: str):
        super().__init__(f"Invalid slug letter class '{letters}': {reason}")
        self.letters = letters
