"""Lookup and dedup helpers shared by the closure driver and the collector."""

from __future__ import annotations

from typing import Iterable

from graphql.language import (
    DirectiveDefinitionNode,
    NamedTypeNode,
    SchemaDefinitionNode,
    TypeNode,
)

from gql_import.models import Definition

BUILTIN_TYPES = frozenset({"String", "Float", "Int", "Boolean", "ID"})

BUILTIN_DIRECTIVES = frozenset({"deprecated", "skip", "include"})

SCHEMA_NAME = "schema"

DIRECTIVE_PREFIX = "@"


def get_node_name(node: Definition) -> str:
    """Name of a definition; the schema definition is always named "schema"."""
    if isinstance(node, SchemaDefinitionNode):
        return SCHEMA_NAME
    return node.name.value


def get_node_key(node: Definition) -> str:
    """Lookup key of a definition. Directives live in their own "@" namespace."""
    if isinstance(node, DirectiveDefinitionNode):
        return DIRECTIVE_PREFIX + node.name.value
    return get_node_name(node)


def get_named_type(type_node: TypeNode) -> NamedTypeNode:
    """Unwrap list and non-null modifiers down to the named type."""
    while not isinstance(type_node, NamedTypeNode):
        type_node = type_node.type
    return type_node


def build_lookup(definitions: Iterable[Definition]) -> dict[str, Definition]:
    """Index definitions by key. The first definition seen for a key wins."""
    lookup: dict[str, Definition] = {}
    for definition in definitions:
        lookup.setdefault(get_node_key(definition), definition)
    return lookup


def unique_by_name(definitions: Iterable[Definition]) -> list[Definition]:
    """Drop repeated definitions, keeping the first; types and directives never clash."""
    seen: set[str] = set()
    result: list[Definition] = []
    for definition in definitions:
        key = get_node_key(definition)
        if key in seen:
            continue
        seen.add(key)
        result.append(definition)
    return result
