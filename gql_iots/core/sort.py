"""Dependency ordering of schema type definitions.

Definitions are returned leaves first: every local type referenced by a field
or union member precedes the type referencing it.
"""

import logging
from typing import Iterable, Iterator, Union

from graphql import (
    DefinitionNode,
    EnumTypeDefinitionNode,
    InputObjectTypeDefinitionNode,
    ListTypeNode,
    NamedTypeNode,
    NonNullTypeNode,
    ObjectTypeDefinitionNode,
    ScalarTypeDefinitionNode,
    TypeNode,
    UnionTypeDefinitionNode,
)

logger = logging.getLogger(__name__)

TypeDefinition = Union[
    ObjectTypeDefinitionNode,
    UnionTypeDefinitionNode,
    EnumTypeDefinitionNode,
    InputObjectTypeDefinitionNode,
    ScalarTypeDefinitionNode,
]

TYPE_DEFINITION_NODES = (
    ObjectTypeDefinitionNode,
    UnionTypeDefinitionNode,
    EnumTypeDefinitionNode,
    InputObjectTypeDefinitionNode,
    ScalarTypeDefinitionNode,
)


def is_type_definition(node: DefinitionNode) -> bool:
    """Check if a definition is one of the supported schema type kinds."""
    return isinstance(node, TYPE_DEFINITION_NODES)


def get_named_type(type_node: TypeNode) -> NamedTypeNode:
    """Unwrap list and non-null wrappers down to the named type."""
    while isinstance(type_node, (ListTypeNode, NonNullTypeNode)):
        type_node = type_node.type
    return type_node


def _dependencies(node: TypeDefinition) -> Iterator[str]:
    """Yield the names a definition refers to, in declaration order."""
    if isinstance(node, (ObjectTypeDefinitionNode, InputObjectTypeDefinitionNode)):
        for field in node.fields or ():
            yield get_named_type(field.type).name.value
    elif isinstance(node, UnionTypeDefinitionNode):
        for member in node.types or ():
            yield member.name.value


def sort_graph_types(definitions: Iterable[TypeDefinition]) -> list[TypeDefinition]:
    """Order type definitions so dependencies come before dependents.

    The traversal is a depth-first walk in input order with an explicit stack.
    A definition is marked visited when it is entered, so self and mutual
    references terminate; within a cycle the first reachable type is emitted
    after the rest of its dependency closure. Names that are not defined
    locally (built-in scalars, externally supplied types) are skipped.
    """
    graph = list(definitions)
    by_name = {d.name.value: d for d in graph}
    visited: set[str] = set()
    ordered: list[TypeDefinition] = []

    for root in graph:
        if root.name.value in visited:
            continue
        visited.add(root.name.value)
        stack = [(root, _dependencies(root))]
        while stack:
            node, deps = stack[-1]
            for dep_name in deps:
                if dep_name in visited or dep_name not in by_name:
                    continue
                visited.add(dep_name)
                dep = by_name[dep_name]
                stack.append((dep, _dependencies(dep)))
                break
            else:
                stack.pop()
                ordered.append(node)

    logger.debug("Ordered %d type definitions", len(ordered))
    return ordered
