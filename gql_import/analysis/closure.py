"""Closure driver: expand a seed set until no reference is left unresolved."""

from __future__ import annotations

import logging
from collections import deque
from typing import Sequence

from gql_import.analysis.collector import collect_references
from gql_import.analysis.definitions import (
    build_lookup,
    get_node_key,
    get_node_name,
    unique_by_name,
)
from gql_import.models import Definition

logger = logging.getLogger(__name__)


def complete_definition_pool(
    all_definitions: Sequence[Definition],
    definition_pool: Sequence[Definition],
    new_definitions: Sequence[Definition],
) -> list[Definition]:
    """Return the closed, deduplicated pool for the given seeds.

    Args:
        all_definitions: Every candidate definition from every source schema.
            Used for name lookup and for finding interface implementations.
        definition_pool: Definitions already wanted in the result.
        new_definitions: Definitions still to be expanded; usually the same
            list as ``definition_pool``.

    Returns:
        The pool grown with every transitively referenced definition, unique
        by name (first occurrence wins) and otherwise in insertion order.

    Raises:
        ResolutionError: a reference cannot be resolved. Nothing is returned
            in that case.
    """
    pool: list[Definition] = list(definition_pool)
    worklist: deque[Definition] = deque(new_definitions)
    visited: dict[str, bool] = {}
    expanded = 0

    while worklist:
        lookup = build_lookup(all_definitions)
        definition = worklist.popleft()
        key = get_node_key(definition)
        if visited.get(key):
            continue

        collected = collect_references(definition, pool, lookup, all_definitions)
        if collected:
            logger.debug(
                "%s pulls in %s", key, ", ".join(get_node_name(d) for d in collected),
            )
        worklist.extend(collected)
        pool.extend(collected)

        visited[key] = True
        expanded += 1

    result = unique_by_name(pool)
    logger.debug("closure: expanded %d definitions, %d in result", expanded, len(result))
    return result


def compute_closure(
    all_definitions: Sequence[Definition],
    seeds: Sequence[Definition],
) -> list[Definition]:
    """Closure of ``seeds`` over ``all_definitions``."""
    return complete_definition_pool(all_definitions, seeds, seeds)
