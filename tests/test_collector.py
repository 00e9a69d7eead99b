"""Tests for the per-definition reference collector and lookup helpers."""

import pytest
from graphql import parse

from gql_import.analysis import (
    build_lookup,
    collect_references,
    find_implementations,
    get_named_type,
    get_node_key,
    get_node_name,
    unique_by_name,
)
from gql_import.errors import MissingDirectiveError, MissingTypeError
from gql_import.scanner import extract_definitions

SDL = """
    directive @auth(role: Role) on OBJECT | FIELD_DEFINITION
    enum Role { ADMIN USER }
    schema { query: Query }
    type Query { me: User @auth(role: USER) feed(after: Cursor): [Post!]! }
    interface Node { id: ID! }
    type User implements Node { id: ID! }
    type Post implements Node { id: ID! author: User }
    scalar Cursor
"""


def _setup():
    candidates = extract_definitions(parse(SDL))
    lookup = build_lookup(candidates)
    return candidates, lookup


def _collect(name, pool_names=()):
    candidates, lookup = _setup()
    pool = [lookup[n] for n in pool_names]
    return [get_node_name(d) for d in collect_references(lookup[name], pool, lookup, candidates)]


def test_get_node_name_schema():
    _, lookup = _setup()
    assert get_node_name(lookup["schema"]) == "schema"
    assert get_node_name(lookup["Query"]) == "Query"


def test_get_named_type_unwraps():
    doc = parse("type A { f: [[B!]!] }")
    field = doc.definitions[0].fields[0]
    assert get_named_type(field.type).name.value == "B"


def test_build_lookup_first_wins():
    defs = extract_definitions(parse("type A { x: Int } type A { y: Int }"))
    lookup = build_lookup(defs)
    assert lookup["A"] is defs[0]


def test_unique_by_name_keeps_order():
    defs = extract_definitions(parse("type B { x: Int } type A { x: Int } type B { y: Int }"))
    assert [get_node_name(d) for d in unique_by_name(defs)] == ["B", "A"]


def test_query_collects_fields_args_and_directives():
    assert _collect("Query", pool_names=["Query"]) == ["User", "Role", "auth", "Post", "Cursor"]


def test_pooled_names_skipped():
    assert _collect("Query", pool_names=["Query", "User", "Post", "@auth"]) == ["Cursor"]


def test_directive_definition_collects_nothing():
    assert _collect("@auth") == []


def test_object_collects_interface():
    assert _collect("User", pool_names=["User"]) == ["Node"]


def test_interface_collects_implementations_even_if_pooled():
    assert _collect("Node", pool_names=["Node", "User"]) == ["User", "Post"]


def test_schema_collects_roots():
    assert _collect("schema") == ["Query"]


def test_does_not_mutate_inputs():
    candidates, lookup = _setup()
    pool = [lookup["Query"]]
    before = list(candidates)
    collect_references(lookup["Query"], pool, lookup, candidates)
    assert [get_node_name(d) for d in pool] == ["Query"]
    assert candidates == before
    assert len(lookup) == len(build_lookup(candidates))


def test_find_implementations():
    candidates, _ = _setup()
    names = [d.name.value for d in find_implementations(candidates, "Node")]
    assert names == ["User", "Post"]
    assert find_implementations(candidates, "Missing") == []


def test_get_node_key_separates_directives():
    defs = extract_definitions(parse("type auth { id: ID } directive @auth on OBJECT"))
    assert [get_node_key(d) for d in defs] == ["auth", "@auth"]
    assert set(build_lookup(defs)) == {"auth", "@auth"}
    assert len(unique_by_name(defs)) == 2


def _collect_from(sdl, name):
    candidates = extract_definitions(parse(sdl))
    lookup = build_lookup(candidates)
    definition = lookup[name]
    return [get_node_name(d) for d in collect_references(definition, [definition], lookup, candidates)]


def test_interface_field_argument_types():
    assert _collect_from("""
        interface I { f(x: In): Int }
        input In { v: Int }
    """, "I") == ["In"]


def test_interface_field_directives():
    assert _collect_from("""
        directive @cost(value: Int) on FIELD_DEFINITION
        interface I { f: Int @cost(value: 2) }
    """, "I") == ["cost"]


def test_input_field_directives():
    assert _collect_from("""
        directive @length(max: Int) on INPUT_FIELD_DEFINITION
        input In { name: String @length(max: 10) }
    """, "In") == ["length"]


def test_input_field_missing_type():
    with pytest.raises(MissingTypeError) as exc:
        _collect_from("input In { when: Timestamp }", "In")
    assert exc.value.target == "Timestamp"
    assert exc.value.definition == "In"
    assert exc.value.field == "when"


def test_enum_value_directives():
    assert _collect_from("""
        directive @label(text: String) on ENUM_VALUE
        enum Color { RED @label(text: "r") GREEN }
    """, "Color") == ["label"]


def test_enum_value_missing_directive():
    with pytest.raises(MissingDirectiveError) as exc:
        _collect_from("enum Color { RED @custom }", "Color")
    assert exc.value.field == "RED"
