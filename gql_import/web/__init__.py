"""HTTP API for closure computation."""

from gql_import.web.app import create_app

__all__ = ["create_app"]
