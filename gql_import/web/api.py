"""FastAPI routes for the gql-import HTTP API."""

from __future__ import annotations

import logging
from pathlib import Path

from fastapi import APIRouter, HTTPException
from graphql import GraphQLError
from pydantic import BaseModel, Field

from gql_import.analysis import get_node_name
from gql_import.errors import ImportSyntaxError, ResolutionError
from gql_import.exporter import print_definitions
from gql_import.models import DefinitionKind, ImportConfig
from gql_import.pipeline import merge_sources, run_scan
from gql_import.scanner import parse_source

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api")


# --- Request / Response models ---

class ClosureRequest(BaseModel):
    sources: dict[str, str]  # source name -> SDL text
    targets: list[str] = Field(default_factory=list)
    pattern: str | None = None
    all: bool = False

class ScanRequest(BaseModel):
    path: str


# --- Path safety ---

def _validate_path(p: str) -> Path:
    """Ensure path exists and is under home directory."""
    resolved = Path(p).expanduser().resolve()
    if not resolved.exists():
        raise HTTPException(404, f"Path not found: {resolved}")
    home = Path.home().resolve()
    if not resolved.is_relative_to(home):
        raise HTTPException(403, "Path must be under your home directory")
    return resolved


# --- Endpoints ---

@router.post("/closure")
def closure(req: ClosureRequest):
    """Close the selected definitions over every submitted source."""
    sources = []
    for name, sdl in req.sources.items():
        try:
            sources.append(parse_source(sdl, Path(name)))
        except (GraphQLError, ImportSyntaxError) as e:
            raise HTTPException(400, f"{name}: {e}")

    try:
        definitions = merge_sources(sources, req.targets, req.pattern, req.all)
    except ResolutionError as e:
        logger.info("closure failed: %s", e)
        raise HTTPException(422, e.to_dict())
    except ValueError as e:
        raise HTTPException(404, str(e))

    return {
        "count": len(definitions),
        "definitions": [
            {"name": get_node_name(d), "kind": DefinitionKind.of(d).value}
            for d in definitions
        ],
        "sdl": print_definitions(definitions),
    }


@router.post("/scan")
def scan(req: ScanRequest):
    """List the definitions found under a directory."""
    source_dir = _validate_path(req.path)
    if not source_dir.is_dir():
        raise HTTPException(400, f"Not a directory: {source_dir}")

    sources = run_scan(ImportConfig(source_dir=source_dir))
    files = [
        {
            "path": str(s.file_path),
            "definitions": [
                {"name": get_node_name(d), "kind": DefinitionKind.of(d).value}
                for d in s.definitions
            ],
            "imports": [{"names": i.names, "path": i.path} for i in s.imports],
        }
        for s in sources
    ]
    return {
        "count": sum(len(f["definitions"]) for f in files),
        "files": files,
    }
