"""Abstract base scanner."""

from __future__ import annotations

import abc
import fnmatch
import logging
from pathlib import Path

from graphql import GraphQLError

from gql_import.errors import ImportSyntaxError
from gql_import.models import SchemaSource

logger = logging.getLogger(__name__)


class BaseScanner(abc.ABC):
    """Base class for schema file scanners."""

    extensions: tuple[str, ...]

    def __init__(self, skip_dirs: list[str] | None = None):
        self.skip_dirs = skip_dirs or [
            "node_modules", ".git", "__pycache__",
            "build", "dist", ".venv", "venv", "env",
        ]

    @abc.abstractmethod
    def scan_file(self, file_path: Path) -> SchemaSource:
        """Parse a single file."""

    def scan_directory(self, directory: Path) -> list[SchemaSource]:
        """Recursively scan a directory for schema files.

        Files that cannot be read or parsed are logged and skipped.
        """
        sources: list[SchemaSource] = []
        for path in sorted(directory.rglob("*")):
            if path.is_dir():
                continue
            if self._should_skip(path.relative_to(directory)):
                continue
            if path.suffix in self.extensions:
                try:
                    sources.append(self.scan_file(path))
                except (GraphQLError, ImportSyntaxError, OSError, UnicodeDecodeError) as e:
                    logger.warning("skipping %s: %s", path, e)
        return sources

    def _should_skip(self, path: Path) -> bool:
        for part in path.parts:
            for pattern in self.skip_dirs:
                if fnmatch.fnmatch(part, pattern):
                    return True
        return False
