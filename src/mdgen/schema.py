from __future__ import annotations

from typing import List, Literal

from pydantic import BaseModel

from mdgen.engine.messages import Diagnostic


class DiagnosticDTO(BaseModel):
    kind: Literal["error", "warning"]
    message: str

    @classmethod
    def from_diagnostic(cls, diagnostic: Diagnostic) -> "DiagnosticDTO":
        return cls(kind=diagnostic.kind.value, message=diagnostic.message)


class RunReportDTO(BaseModel):
    documents: List[str]
    updated: List[str] = []
    diagnostics: List[DiagnosticDTO] = []
    check: bool = False
    exit_code: int = 0
