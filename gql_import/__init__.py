"""gql-import: assemble a closed GraphQL schema from many schema files."""

from gql_import.analysis import complete_definition_pool, compute_closure
from gql_import.errors import (
    MissingDirectiveError,
    MissingInterfaceError,
    MissingTypeError,
    MissingUnionMemberError,
    ResolutionError,
)

__version__ = "0.1.0"

__all__ = [
    "MissingDirectiveError",
    "MissingInterfaceError",
    "MissingTypeError",
    "MissingUnionMemberError",
    "ResolutionError",
    "complete_definition_pool",
    "compute_closure",
]
