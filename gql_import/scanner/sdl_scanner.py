"""GraphQL SDL scanner built on graphql-core's parser."""

from __future__ import annotations

import logging
import re
from pathlib import Path

from graphql import parse
from graphql.language import DocumentNode

from gql_import.errors import ImportSyntaxError
from gql_import.models import DEFINITION_NODE_TYPES, Definition, ImportLine, SchemaSource
from gql_import.scanner.base import BaseScanner

logger = logging.getLogger(__name__)

_IMPORT_PREFIX = re.compile(r"^#\s*import\b")
_IMPORT_LINE = re.compile(
    r"""^\#\s*import\s+(?P<names>.+?)\s+from\s+(?P<quote>["'])(?P<path>[^"']+)(?P=quote)\s*;?\s*$"""
)
_NAME = re.compile(r"^(\*|[_A-Za-z][_0-9A-Za-z]*)$")


def parse_import_lines(sdl: str, file_path: Path | None = None) -> list[ImportLine]:
    """Find ``# import A, B from "file.graphql"`` comments in SDL text."""
    imports: list[ImportLine] = []
    for line_number, raw in enumerate(sdl.splitlines(), start=1):
        line = raw.strip()
        if not _IMPORT_PREFIX.match(line):
            continue
        m = _IMPORT_LINE.match(line)
        if not m:
            raise ImportSyntaxError(raw, line_number, file_path)
        names = [n.strip() for n in m.group("names").split(",")]
        if not names or not all(_NAME.match(n) for n in names):
            raise ImportSyntaxError(raw, line_number, file_path)
        imports.append(ImportLine(names=names, path=m.group("path"), line_number=line_number))
    return imports


def extract_definitions(document: DocumentNode) -> list[Definition]:
    """Keep the definition kinds that take part in reference resolution."""
    definitions: list[Definition] = []
    for node in document.definitions:
        if isinstance(node, DEFINITION_NODE_TYPES):
            definitions.append(node)
        else:
            logger.debug("ignoring %s", node.kind)
    return definitions


def parse_source(sdl: str, file_path: Path | None = None) -> SchemaSource:
    """Parse SDL text into a SchemaSource. Empty documents yield no definitions."""
    imports = parse_import_lines(sdl, file_path)
    if sdl.strip() and not _only_comments(sdl):
        document = parse(sdl, no_location=True)
        definitions = extract_definitions(document)
    else:
        definitions = []
    return SchemaSource(
        file_path=file_path or Path("<string>"),
        definitions=definitions,
        imports=imports,
    )


def _only_comments(sdl: str) -> bool:
    return all(
        not line.strip() or line.lstrip().startswith("#")
        for line in sdl.splitlines()
    )


class SdlScanner(BaseScanner):
    extensions = (".graphql", ".graphqls", ".gql")

    def scan_file(self, file_path: Path) -> SchemaSource:
        source = file_path.read_text(encoding="utf-8")
        return parse_source(source, file_path)
