"""Exceptions raised while loading schemas and resolving references."""

from __future__ import annotations

from pathlib import Path


class ResolutionError(Exception):
    """A referenced type or directive is absent from every known schema."""

    kind = "Unresolved"

    def __init__(
        self,
        target: str,
        definition: str | None = None,
        field: str | None = None,
    ):
        self.target = target
        self.definition = definition
        self.field = field
        super().__init__(self._message())

    def _where(self) -> str:
        if self.definition and self.field:
            return f"{self.definition}.{self.field}: "
        if self.definition:
            return f"{self.definition}: "
        if self.field:
            return f"Field {self.field}: "
        return ""

    def _message(self) -> str:
        return f"{self._where()}Couldn't find {self.target} in any of the schemas."

    def to_dict(self) -> dict:
        return {
            "kind": self.kind,
            "target": self.target,
            "definition": self.definition,
            "field": self.field,
            "message": str(self),
        }


class MissingInterfaceError(ResolutionError):
    kind = "MissingInterface"

    def _message(self) -> str:
        return f"{self._where()}Couldn't find interface {self.target} in any of the schemas."


class MissingTypeError(ResolutionError):
    kind = "MissingType"

    def _message(self) -> str:
        return f"{self._where()}Couldn't find type {self.target} in any of the schemas."


class MissingUnionMemberError(ResolutionError):
    kind = "MissingUnionMember"

    def _message(self) -> str:
        return f"{self._where()}Couldn't find union member {self.target} in any of the schemas."


class MissingDirectiveError(ResolutionError):
    kind = "MissingDirective"

    def _message(self) -> str:
        return f"{self._where()}Couldn't find directive @{self.target} in any of the schemas."


class SchemaFileNotFoundError(Exception):
    """An import line points at a file that does not exist."""

    def __init__(self, path: Path, imported_from: Path | None = None):
        self.path = path
        self.imported_from = imported_from
        msg = f"Schema file not found: {path}"
        if imported_from:
            msg += f" (imported from {imported_from})"
        super().__init__(msg)


class ImportSyntaxError(Exception):
    """An `# import` comment could not be parsed."""

    def __init__(self, line: str, line_number: int, file_path: Path | None = None):
        self.line = line
        self.line_number = line_number
        self.file_path = file_path
        where = f"{file_path}:{line_number}" if file_path else f"line {line_number}"
        super().__init__(f"Malformed import at {where}: {line.strip()!r}")
