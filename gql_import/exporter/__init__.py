"""Exporter layer."""

from gql_import.exporter.manifest_generator import generate_manifest
from gql_import.exporter.sdl_exporter import export_schema, print_definitions

__all__ = ["export_schema", "generate_manifest", "print_definitions"]
