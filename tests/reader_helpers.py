from __future__ import annotations

from mdgen.exceptions import SourceFileNotFoundError


class StaticReader:
    def __init__(self, files: dict[str, str]):
        self.files = files
        self.reads: list[str] = []

    def read(self, project_relative_path: str) -> str:
        self.reads.append(project_relative_path)
        try:
            return self.files[project_relative_path]
        except KeyError:
            raise SourceFileNotFoundError(project_relative_path) from None
