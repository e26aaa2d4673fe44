from __future__ import annotations

from datetime import date, datetime, time
from pathlib import Path
from typing import TypeAlias
import tomllib

from mdgen.engine.options import EngineOptions
from mdgen.engine.scanner import DEFAULT_CLOSE_TOKEN, DEFAULT_OPEN_TOKEN, MarkerSyntax
from mdgen.engine.toc import DEFAULT_SLUG_LETTERS, slug_strip_pattern
from mdgen.exceptions import SlugPatternError

DEFAULT_CONFIG_NAME = "mdgen.toml"
DEFAULT_DOCUMENT_PATHS = ("README.md", "docs")

TomlScalar: TypeAlias = str | int | float | bool | None | date | datetime | time
TomlValue: TypeAlias = TomlScalar | list["TomlValue"] | dict[str, "TomlValue"]
TomlTable: TypeAlias = dict[str, TomlValue]


def _load_toml(path: Path) -> TomlTable:
    try:
        raw = path.read_text(encoding="utf-8")
    except (OSError, UnicodeError):
        return {}
    try:
        data = tomllib.loads(raw)
    except tomllib.TOMLDecodeError:
        return {}
    return data if isinstance(data, dict) else {}


def load_config(root: Path | None = None, config_path: Path | None = None) -> TomlTable:
    if config_path is None:
        base = root if root is not None else Path.cwd()
        config_path = base / DEFAULT_CONFIG_NAME
    return _load_toml(config_path)


def _section(data: TomlTable, name: str) -> TomlTable:
    section = data.get(name, {})
    return section if isinstance(section, dict) else {}


def marker_defaults(data: TomlTable) -> TomlTable:
    return _section(data, "markers")


def toc_defaults(data: TomlTable) -> TomlTable:
    return _section(data, "toc")


def document_defaults(data: TomlTable) -> TomlTable:
    return _section(data, "documents")


def _name_list(value: TomlValue) -> list[str]:
    if isinstance(value, str):
        raw: list[TomlValue] = [value]
    elif isinstance(value, list):
        raw = value
    else:
        return []
    names: list[str] = []
    for item in raw:
        if isinstance(item, str):
            names.extend(part.strip() for part in item.split(","))
    return [name for name in names if name]


def _as_text(value: TomlValue, default: str) -> str:
    if isinstance(value, str) and value.strip():
        return value.strip()
    return default


def document_paths(section: TomlTable | None) -> list[str]:
    if not isinstance(section, dict):
        return list(DEFAULT_DOCUMENT_PATHS)
    paths = _name_list(section.get("paths"))
    return paths or list(DEFAULT_DOCUMENT_PATHS)


def document_excludes(section: TomlTable | None) -> list[str]:
    if not isinstance(section, dict):
        return []
    return _name_list(section.get("exclude"))


def _slug_letters(value: TomlValue) -> str:
    letters = _as_text(value, DEFAULT_SLUG_LETTERS)
    try:
        slug_strip_pattern(letters)
    except SlugPatternError:
        return DEFAULT_SLUG_LETTERS
    return letters


def engine_options(data: TomlTable) -> EngineOptions:
    markers = marker_defaults(data)
    toc = toc_defaults(data)
    return EngineOptions(
        markers=MarkerSyntax(
            open_token=_as_text(markers.get("open"), DEFAULT_OPEN_TOKEN),
            close_token=_as_text(markers.get("close"), DEFAULT_CLOSE_TOKEN),
        ),
        slug_letters=_slug_letters(toc.get("slug_letters")),
    )


def override_markers(
    data: TomlTable,
    *,
    open_token: str | None = None,
    close_token: str | None = None,
) -> TomlTable:
    """Return ``data`` with command-line marker tokens taking precedence."""
    markers = dict(marker_defaults(data))
    if open_token is not None:
        markers["open"] = open_token
    if close_token is not None:
        markers["close"] = close_token
    return {**data, "markers": markers}
