from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable


class DiagnosticKind(str, Enum):
    ERROR = "error"
    WARNING = "warning"


@dataclass(frozen=True)
class Diagnostic:
    kind: DiagnosticKind
    message: str

    def render(self) -> str:
        return f"{self.kind.value}: {self.message}"


def error(message: str) -> Diagnostic:
    return Diagnostic(kind=DiagnosticKind.ERROR, message=message)


def warning(message: str) -> Diagnostic:
    return Diagnostic(kind=DiagnosticKind.WARNING, message=message)


def has_errors(diagnostics: Iterable[Diagnostic]) -> bool:
    return any(item.kind is DiagnosticKind.ERROR for item in diagnostics)
