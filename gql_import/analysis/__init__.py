"""Reference resolution: collector, closure driver and lookup helpers."""

from gql_import.analysis.closure import complete_definition_pool, compute_closure
from gql_import.analysis.collector import collect_references, find_implementations
from gql_import.analysis.definitions import (
    BUILTIN_DIRECTIVES,
    BUILTIN_TYPES,
    build_lookup,
    get_named_type,
    get_node_key,
    get_node_name,
    unique_by_name,
)

__all__ = [
    "BUILTIN_DIRECTIVES",
    "BUILTIN_TYPES",
    "build_lookup",
    "collect_references",
    "complete_definition_pool",
    "compute_closure",
    "find_implementations",
    "get_named_type",
    "get_node_key",
    "get_node_name",
    "unique_by_name",
]
