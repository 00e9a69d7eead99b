"""Pipeline orchestrator: scan -> select seeds -> close -> export."""

from __future__ import annotations

import fnmatch
import logging
from collections import deque
from pathlib import Path
from typing import Callable, Sequence

from gql_import.analysis import compute_closure, get_node_name, unique_by_name
from gql_import.errors import MissingTypeError, SchemaFileNotFoundError
from gql_import.exporter import export_schema, generate_manifest
from gql_import.models import Definition, ExportResult, ImportConfig, SchemaSource
from gql_import.scanner import scan_directory, scan_file

logger = logging.getLogger(__name__)

ProgressCallback = Callable[[str, int, int], None]


def run_scan(config: ImportConfig, progress: ProgressCallback | None = None) -> list[SchemaSource]:
    """Stage 1: Scan the source directory."""
    if progress:
        progress("Scanning", 0, 1)
    sources = scan_directory(config.source_dir, skip_dirs=config.skip_dirs)
    if progress:
        progress("Scanning", 1, 1)
    logger.info("scanned %d schema file(s) in %s", len(sources), config.source_dir)
    return sources


def all_definitions(sources: Sequence[SchemaSource]) -> list[Definition]:
    """Concatenate definitions from every source, in source order."""
    return [d for source in sources for d in source.definitions]


def select_definitions(
    candidates: Sequence[Definition],
    targets: Sequence[str] = (),
    pattern: str | None = None,
    select_all: bool = False,
) -> list[Definition]:
    """Pick seed definitions by exact name, glob pattern, or all of them."""
    if select_all:
        return unique_by_name(candidates)

    selected: list[Definition] = []
    if targets:
        wanted = set(targets)
        selected.extend(d for d in candidates if get_node_name(d) in wanted)
        found = {get_node_name(d) for d in selected}
        if found != wanted:
            # Try case-insensitive for the names still missing
            missing = {t.lower() for t in wanted - found}
            selected.extend(
                d for d in candidates
                if get_node_name(d) not in found and get_node_name(d).lower() in missing
            )

    if pattern:
        selected.extend(d for d in candidates if fnmatch.fnmatch(get_node_name(d), pattern))

    return unique_by_name(selected)


def merge_sources(
    sources: Sequence[SchemaSource],
    targets: Sequence[str] = (),
    pattern: str | None = None,
    merge_all: bool = False,
) -> list[Definition]:
    """Closed definition set for the selected seeds over every source."""
    candidates = all_definitions(sources)
    seeds = select_definitions(candidates, targets, pattern, merge_all)
    if not seeds:
        raise ValueError(
            f"No matching definitions found. "
            f"Scanned {len(candidates)} total definitions. "
            f"Targets: {list(targets)!r}, Pattern: {pattern!r}"
        )
    return compute_closure(candidates, seeds)


def run_merge(
    config: ImportConfig,
    progress: ProgressCallback | None = None,
) -> ExportResult:
    """Directory mode: close the selected definitions over every schema file."""
    sources = run_scan(config, progress)

    if progress:
        progress("Resolving", 0, 1)
    definitions = merge_sources(sources, config.targets, config.pattern, config.merge_all)
    if progress:
        progress("Resolving", 1, 1)

    return _export(definitions, sources, config, progress)


def collect_import_graph(root: Path) -> list[SchemaSource]:
    """Load ``root`` and every file reachable through its import lines.

    Each file is loaded once; import paths are relative to the importing file.
    """
    root = root.resolve()
    if not root.is_file():
        raise SchemaFileNotFoundError(root)

    loaded: dict[Path, SchemaSource] = {}
    queue: deque[tuple[Path, Path | None]] = deque([(root, None)])
    while queue:
        path, imported_from = queue.popleft()
        if path in loaded:
            continue
        if not path.is_file():
            raise SchemaFileNotFoundError(path, imported_from)
        source = scan_file(path)
        loaded[path] = source
        logger.debug("loaded %s (%d definitions)", path, len(source.definitions))
        for line in source.imports:
            queue.append(((path.parent / line.path).resolve(), path))

    return list(loaded.values())


def resolve_imports(sources: Sequence[SchemaSource]) -> list[Definition]:
    """Seed definitions for import mode: the root's own plus everything it imports.

    ``sources[0]`` is the root. ``*`` imports a file's definitions together
    with whatever that file imports in turn.
    """
    by_path = {s.file_path.resolve(): s for s in sources}
    exported: dict[Path, list[Definition]] = {}
    in_progress: set[Path] = set()

    def exports_of(source: SchemaSource) -> list[Definition]:
        path = source.file_path.resolve()
        if path in exported:
            return exported[path]
        if path in in_progress:
            return list(source.definitions)
        in_progress.add(path)
        result = list(source.definitions)
        for line in source.imports:
            target = by_path[(path.parent / line.path).resolve()]
            available = exports_of(target)
            if line.imports_all:
                result.extend(available)
                continue
            for name in line.names:
                # a type and a directive may share the imported name
                matches = [d for d in available if get_node_name(d) == name]
                if not matches:
                    raise MissingTypeError(name, definition=str(target.file_path))
                result.extend(matches)
        in_progress.discard(path)
        exported[path] = unique_by_name(result)
        return exported[path]

    return exports_of(sources[0])


def run_import(
    config: ImportConfig,
    progress: ProgressCallback | None = None,
) -> ExportResult:
    """Import mode: the root schema plus its ``# import`` lines, closed."""
    if config.root_file is None:
        raise ValueError("Import mode needs a root schema file")

    if progress:
        progress("Loading", 0, 1)
    sources = collect_import_graph(config.root_file)
    if progress:
        progress("Loading", 1, 1)

    if progress:
        progress("Resolving", 0, 1)
    seeds = resolve_imports(sources)
    definitions = compute_closure(all_definitions(sources), seeds)
    if progress:
        progress("Resolving", 1, 1)

    return _export(definitions, sources, config, progress)


def _export(
    definitions: list[Definition],
    sources: Sequence[SchemaSource],
    config: ImportConfig,
    progress: ProgressCallback | None,
) -> ExportResult:
    if progress:
        progress("Exporting", 0, 1)
    result = export_schema(definitions, config.output_path)
    if config.write_manifest and config.output_path is not None:
        result.manifest_path = generate_manifest(result, sources, config.source_dir)
        result.files_created.append(result.manifest_path)
    if progress:
        progress("Exporting", 1, 1)
    logger.info("resolved %d definition(s) from %d file(s)", len(definitions), len(sources))
    return result
