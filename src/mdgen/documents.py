"""Document sources and file readers consumed by the expansion engine."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, Protocol

from mdgen.exceptions import SourceFileNotFoundError


class DocumentSource(Protocol):
    def text(self) -> str: ...

    def set_text(self, new_text: str) -> bool: ...

    def project_path(self) -> str: ...


class FileReader(Protocol):
    def read(self, project_relative_path: str) -> str: ...


class TextDocument:
    """In-memory document; ``set_text`` reports whether the content changed."""

    def __init__(self, text: str, *, path: str = "<memory>"):
        self._text = text
        self._path = path

    def text(self) -> str:
        return self._text

    def set_text(self, new_text: str) -> bool:
        if new_text == self._text:
            return False
        self._text = new_text
        return True

    def project_path(self) -> str:
        return self._path


class FileDocument(TextDocument):
    def __init__(self, path: Path, *, root: Path, encoding: str = "utf-8"):
        self.path = path
        self.root = root
        self.encoding = encoding
        self.dirty = False
        display = _display_path(path, root)
        try:
            text = path.read_text(encoding=encoding)
        except (OSError, UnicodeError) as exc:
            raise SourceFileNotFoundError(display, reason=str(exc)) from exc
        super().__init__(text, path=display)

    def set_text(self, new_text: str) -> bool:
        changed = super().set_text(new_text)
        if changed:
            self.dirty = True
        return changed

    def save(self) -> bool:
        if not self.dirty:
            return False
        self.path.write_text(self.text(), encoding=self.encoding)
        self.dirty = False
        return True


class ProjectFileReader:
    """Reads included files relative to the project root."""

    def __init__(self, root: Path, *, encoding: str = "utf-8"):
        self.root = root
        self.encoding = encoding

    def resolve(self, project_relative_path: str) -> Path:
        return (self.root / project_relative_path).resolve()

    def read(self, project_relative_path: str) -> str:
        path = self.resolve(project_relative_path)
        try:
            return path.read_text(encoding=self.encoding)
        except FileNotFoundError as exc:
            raise SourceFileNotFoundError(project_relative_path) from exc
        except IsADirectoryError as exc:
            raise SourceFileNotFoundError(
                project_relative_path, reason="is a directory"
            ) from exc
        except (OSError, UnicodeError) as exc:
            raise SourceFileNotFoundError(project_relative_path, reason=str(exc)) from exc


def _display_path(path: Path, root: Path) -> str:
    try:
        return path.resolve().relative_to(root.resolve()).as_posix()
    except ValueError:
        return path.as_posix()


def iter_markdown_paths(
    paths: Iterable[str | Path],
    *,
    root: Path,
    exclude: Iterable[str] = (),
) -> list[Path]:
    excluded = {(root / item).resolve() for item in exclude if item}
    out: list[Path] = []
    seen: set[Path] = set()
    for raw in paths:
        if not str(raw):
            continue
        path = Path(raw)
        if not path.is_absolute():
            path = root / path
        if path.is_dir():
            candidates = sorted(path.rglob("*.md"))
        elif path.is_file():
            candidates = [path]
        else:
            continue
        for doc in candidates:
            resolved = doc.resolve()
            if resolved in seen or _is_excluded(resolved, excluded):
                continue
            out.append(doc)
            seen.add(resolved)
    return out


def _is_excluded(path: Path, excluded: set[Path]) -> bool:
    return any(path == item or item in path.parents for item in excluded)


def load_documents(
    paths: Iterable[Path], *, root: Path
) -> tuple[list[FileDocument], list[SourceFileNotFoundError]]:
    """Load every readable document; unreadable ones are returned as failures."""
    documents: list[FileDocument] = []
    failures: list[SourceFileNotFoundError] = []
    for path in paths:
        try:
            documents.append(FileDocument(path, root=root))
        except SourceFileNotFoundError as exc:
            failures.append(exc)
    return documents, failures
