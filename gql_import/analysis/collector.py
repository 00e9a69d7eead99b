"""Reference collector: what a single definition needs that the pool lacks."""

from __future__ import annotations

from typing import Sequence, Union

from graphql.language import (
    DirectiveDefinitionNode,
    DirectiveNode,
    EnumTypeDefinitionNode,
    FieldDefinitionNode,
    InputObjectTypeDefinitionNode,
    InputValueDefinitionNode,
    InterfaceTypeDefinitionNode,
    NamedTypeNode,
    ObjectTypeDefinitionNode,
    SchemaDefinitionNode,
    UnionTypeDefinitionNode,
)

from gql_import.analysis.definitions import (
    BUILTIN_DIRECTIVES,
    BUILTIN_TYPES,
    DIRECTIVE_PREFIX,
    get_named_type,
    get_node_key,
    get_node_name,
)
from gql_import.errors import (
    MissingDirectiveError,
    MissingInterfaceError,
    MissingTypeError,
    MissingUnionMemberError,
    ResolutionError,
)
from gql_import.models import Definition

FieldLike = Union[FieldDefinitionNode, InputValueDefinitionNode]


def find_implementations(
    all_definitions: Sequence[Definition],
    interface_name: str,
) -> list[ObjectTypeDefinitionNode]:
    """Every object type in ``all_definitions`` that implements ``interface_name``."""
    return [
        d for d in all_definitions
        if isinstance(d, ObjectTypeDefinitionNode)
        and any(i.name.value == interface_name for i in d.interfaces or ())
    ]


def collect_references(
    definition: Definition,
    definition_pool: Sequence[Definition],
    lookup: dict[str, Definition],
    all_definitions: Sequence[Definition],
) -> list[Definition]:
    """Return the definitions ``definition`` references that are not in the pool.

    Interfaces additionally pull in every implementing object type found in
    ``all_definitions``, whether or not it is already in the pool.

    Raises a :class:`~gql_import.errors.ResolutionError` subclass on the first
    name that is neither in the pool, a built-in, nor in ``lookup``.
    """
    return _Collector(definition_pool, lookup, all_definitions).collect(definition)


class _Collector:
    """Holds the per-call output list while walking one definition."""

    def __init__(
        self,
        definition_pool: Sequence[Definition],
        lookup: dict[str, Definition],
        all_definitions: Sequence[Definition],
    ):
        self.pool_keys = {get_node_key(d) for d in definition_pool}
        self.lookup = lookup
        self.all_definitions = all_definitions
        self.collected: list[Definition] = []
        self._collected_keys: set[str] = set()
        self._owner: str | None = None

    def collect(self, definition: Definition) -> list[Definition]:
        self._owner = get_node_name(definition)

        if not isinstance(definition, DirectiveDefinitionNode):
            self._collect_directives(getattr(definition, "directives", None))

        if isinstance(definition, InputObjectTypeDefinitionNode):
            for input_field in definition.fields or ():
                self._collect_field(input_field)

        elif isinstance(definition, InterfaceTypeDefinitionNode):
            for field in definition.fields or ():
                self._collect_field(field)
                for argument in field.arguments or ():
                    self._collect_field(argument, parent=field.name.value)
            # implementors are included even when already pooled
            for implementation in find_implementations(self.all_definitions, self._owner):
                if implementation.name.value not in self._collected_keys:
                    self._add(implementation)

        elif isinstance(definition, UnionTypeDefinitionNode):
            for member in definition.types or ():
                self._collect_named(member, MissingUnionMemberError)

        elif isinstance(definition, ObjectTypeDefinitionNode):
            for interface in definition.interfaces or ():
                self._collect_named(interface, MissingInterfaceError)
            for field in definition.fields or ():
                self._collect_field(field)
                for argument in field.arguments or ():
                    self._collect_field(argument, parent=field.name.value)

        elif isinstance(definition, EnumTypeDefinitionNode):
            for value in definition.values or ():
                self._collect_directives(value.directives, field=value.name.value)

        elif isinstance(definition, SchemaDefinitionNode):
            # root types may use names other than Query/Mutation/Subscription
            for operation_type in definition.operation_types or ():
                self._collect_named(
                    operation_type.type,
                    MissingTypeError,
                    field=operation_type.operation.value,
                )

        return self.collected

    def _needs(self, key: str) -> bool:
        return key not in self.pool_keys and key not in self._collected_keys

    def _add(self, definition: Definition) -> None:
        self._collected_keys.add(get_node_key(definition))
        self.collected.append(definition)

    def _collect_named(
        self,
        type_node: NamedTypeNode,
        error: type[ResolutionError],
        field: str | None = None,
    ) -> None:
        name = type_node.name.value
        if not self._needs(name) or name in BUILTIN_TYPES:
            return
        match = self.lookup.get(name)
        if match is None:
            raise error(name, definition=self._owner, field=field)
        self._add(match)

    def _collect_field(self, node: FieldLike, parent: str | None = None) -> None:
        field_name = node.name.value
        if parent:
            field_name = f"{parent}({field_name})"
        self._collect_named(get_named_type(node.type), MissingTypeError, field=field_name)
        self._collect_directives(node.directives, field=field_name)

    def _collect_directives(
        self,
        directives: Sequence[DirectiveNode] | None,
        field: str | None = None,
    ) -> None:
        for directive in directives or ():
            name = directive.name.value
            key = DIRECTIVE_PREFIX + name
            if not self._needs(key) or name in BUILTIN_DIRECTIVES:
                continue
            match = self.lookup.get(key)
            if match is None:
                raise MissingDirectiveError(name, definition=self._owner, field=field)
            # reserve the key first so a directive used on its own arguments terminates
            self._collected_keys.add(key)
            for argument in match.arguments or ():
                self._collect_field(argument, parent=f"@{name}")
            self.collected.append(match)
