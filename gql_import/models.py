"""Data models for the gql-import pipeline."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from pathlib import Path
from typing import Union

from graphql.language import (
    DirectiveDefinitionNode,
    EnumTypeDefinitionNode,
    InputObjectTypeDefinitionNode,
    InterfaceTypeDefinitionNode,
    ObjectTypeDefinitionNode,
    ScalarTypeDefinitionNode,
    SchemaDefinitionNode,
    UnionTypeDefinitionNode,
)

Definition = Union[
    ObjectTypeDefinitionNode,
    InterfaceTypeDefinitionNode,
    InputObjectTypeDefinitionNode,
    UnionTypeDefinitionNode,
    EnumTypeDefinitionNode,
    ScalarTypeDefinitionNode,
    DirectiveDefinitionNode,
    SchemaDefinitionNode,
]

DEFINITION_NODE_TYPES: tuple[type, ...] = (
    ObjectTypeDefinitionNode,
    InterfaceTypeDefinitionNode,
    InputObjectTypeDefinitionNode,
    UnionTypeDefinitionNode,
    EnumTypeDefinitionNode,
    ScalarTypeDefinitionNode,
    DirectiveDefinitionNode,
    SchemaDefinitionNode,
)


class DefinitionKind(enum.Enum):
    OBJECT = "object"
    INTERFACE = "interface"
    INPUT = "input"
    UNION = "union"
    ENUM = "enum"
    SCALAR = "scalar"
    DIRECTIVE = "directive"
    SCHEMA = "schema"

    @classmethod
    def of(cls, node: Definition) -> DefinitionKind:
        return _KIND_BY_NODE[type(node)]


_KIND_BY_NODE: dict[type, DefinitionKind] = {
    ObjectTypeDefinitionNode: DefinitionKind.OBJECT,
    InterfaceTypeDefinitionNode: DefinitionKind.INTERFACE,
    InputObjectTypeDefinitionNode: DefinitionKind.INPUT,
    UnionTypeDefinitionNode: DefinitionKind.UNION,
    EnumTypeDefinitionNode: DefinitionKind.ENUM,
    ScalarTypeDefinitionNode: DefinitionKind.SCALAR,
    DirectiveDefinitionNode: DefinitionKind.DIRECTIVE,
    SchemaDefinitionNode: DefinitionKind.SCHEMA,
}


@dataclass
class ImportLine:
    """One `# import A, B from "file.graphql"` comment."""
    names: list[str]
    path: str
    line_number: int

    @property
    def imports_all(self) -> bool:
        return "*" in self.names


@dataclass
class SchemaSource:
    """Result from the scanner stage: one parsed schema file."""
    file_path: Path
    definitions: list[Definition] = field(default_factory=list)
    imports: list[ImportLine] = field(default_factory=list)

    @property
    def names(self) -> list[str]:
        from gql_import.analysis.definitions import get_node_name
        return [get_node_name(d) for d in self.definitions]


@dataclass
class ExportResult:
    """Result from the exporter stage."""
    output_path: Path | None = None
    sdl: str = ""
    definitions: list[Definition] = field(default_factory=list)
    files_created: list[Path] = field(default_factory=list)
    manifest_path: Path | None = None


@dataclass
class ImportConfig:
    """Configuration for the import/merge pipeline."""
    source_dir: Path = field(default_factory=lambda: Path("."))
    root_file: Path | None = None
    output_path: Path | None = None
    targets: list[str] = field(default_factory=list)
    pattern: str | None = None
    merge_all: bool = False
    write_manifest: bool = False
    skip_dirs: list[str] = field(default_factory=lambda: [
        "node_modules", ".git", "__pycache__",
        "build", "dist", ".venv", "venv", "env",
        ".eggs", "*.egg-info",
    ])
