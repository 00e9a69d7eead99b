"""Scanner registry and dispatcher."""

from __future__ import annotations

from pathlib import Path

from gql_import.models import SchemaSource
from gql_import.scanner.base import BaseScanner
from gql_import.scanner.sdl_scanner import (
    SdlScanner,
    extract_definitions,
    parse_import_lines,
    parse_source,
)


def scan_directory(
    directory: Path,
    skip_dirs: list[str] | None = None,
) -> list[SchemaSource]:
    """Scan a directory for schema files, sorted by path."""
    sources = SdlScanner(skip_dirs=skip_dirs).scan_directory(directory)
    sources.sort(key=lambda s: str(s.file_path))
    return sources


def scan_file(file_path: Path) -> SchemaSource:
    return SdlScanner().scan_file(file_path)


__all__ = [
    "BaseScanner",
    "SdlScanner",
    "extract_definitions",
    "parse_import_lines",
    "parse_source",
    "scan_directory",
    "scan_file",
]
