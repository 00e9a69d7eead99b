"""Generate manifest.json."""

from __future__ import annotations

import json
from datetime import datetime
from pathlib import Path
from typing import Sequence

from gql_import.analysis.definitions import get_node_name
from gql_import.models import DefinitionKind, ExportResult, SchemaSource


def generate_manifest(
    result: ExportResult,
    sources: Sequence[SchemaSource],
    source_dir: Path | None = None,
) -> Path:
    """Write a manifest.json next to the exported schema listing every definition."""
    if result.output_path is None:
        raise ValueError("Cannot write a manifest for a schema that was not written to disk")

    origin: dict[str, Path] = {}
    for source in sources:
        for name in source.names:
            origin.setdefault(name, source.file_path)

    items = []
    for definition in result.definitions:
        name = get_node_name(definition)
        source_file = origin.get(name)
        items.append({
            "name": name,
            "kind": DefinitionKind.of(definition).value,
            "source_file": str(source_file) if source_file else None,
        })

    manifest = {
        "version": "1.0",
        "generated": datetime.now().isoformat(),
        "source_directory": str(source_dir) if source_dir else None,
        "schema_file": str(result.output_path),
        "total_definitions": len(items),
        "definitions": items,
        "source_files": [str(s.file_path) for s in sources],
    }

    manifest_path = result.output_path.parent / "manifest.json"
    manifest_path.write_text(
        json.dumps(manifest, indent=2) + "\n",
        encoding="utf-8",
    )
    return manifest_path
