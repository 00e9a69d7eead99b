"""Print a closed definition set back to SDL and write it out."""

from __future__ import annotations

from pathlib import Path
from typing import Sequence

from graphql.language import DocumentNode, print_ast

from gql_import.models import Definition, ExportResult


def print_definitions(definitions: Sequence[Definition]) -> str:
    """Render definitions as one SDL document, in the given order."""
    if not definitions:
        return ""
    document = DocumentNode(definitions=tuple(definitions))
    return print_ast(document) + "\n"


def export_schema(
    definitions: Sequence[Definition],
    output_path: Path | None = None,
) -> ExportResult:
    """Render definitions and, when ``output_path`` is given, write the file."""
    sdl = print_definitions(definitions)
    result = ExportResult(output_path=output_path, sdl=sdl, definitions=list(definitions))
    if output_path is not None:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(sdl, encoding="utf-8")
        result.files_created.append(output_path)
    return result
