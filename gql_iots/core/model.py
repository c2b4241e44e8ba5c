"""Compile schema type definitions into IR.

Each definition becomes one immutable IR tree. References to other local
types are compiled recursively from a name -> definition table; every type is
compiled once and the result shared by all referencing fields.
"""

import logging
from dataclasses import dataclass, field
from typing import Iterable, Mapping, Optional, Union

from graphql import (
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

from .errors import CyclicTypeReferenceError, UnresolvedTypeReferenceError
from .ir import (
    DEFAULT_SCALARS,
    IRArray,
    IREnum,
    IRInputObject,
    IRMutation,
    IRNamed,
    IRObject,
    IROption,
    IRPrimitive,
    IRQuery,
    IRScalar,
    IRUnion,
    IoTsType,
    NamedIRType,
)
from .sort import TypeDefinition

logger = logging.getLogger(__name__)

InputIRType = Union[IRInputObject, IRScalar, IRPrimitive, IREnum]


class _TypeCompiler:
    """Compiles definitions against a fixed name table, caching by name."""

    def __init__(self, named_types: Mapping[str, TypeDefinition]):
        self.named_types = named_types
        self._compiled: dict[str, NamedIRType] = {}
        self._in_progress: list[str] = []

    def compile(self, node: TypeDefinition) -> NamedIRType:
        name = node.name.value
        if name in self._compiled:
            return self._compiled[name]
        if name in self._in_progress:
            start = self._in_progress.index(name)
            raise CyclicTypeReferenceError(self._in_progress[start:] + [name])

        self._in_progress.append(name)
        try:
            result = self._compile_definition(node)
        finally:
            self._in_progress.pop()
        self._compiled[name] = result
        return result

    def _compile_definition(self, node: TypeDefinition) -> NamedIRType:
        name = node.name.value

        if isinstance(node, EnumTypeDefinitionNode):
            return IREnum(name, tuple(v.name.value for v in node.values or ()))

        if isinstance(node, ObjectTypeDefinitionNode):
            props = self._compile_fields(node)
            if name == "Query":
                return IRQuery(name, props)
            if name == "Mutation":
                return IRMutation(name, props)
            return IRNamed(name, IRObject(props))

        if isinstance(node, InputObjectTypeDefinitionNode):
            return IRInputObject(name, self._compile_fields(node))

        if isinstance(node, ScalarTypeDefinitionNode):
            return IRScalar(name)

        if isinstance(node, UnionTypeDefinitionNode):
            members = []
            for member in node.types or ():
                member_name = member.name.value
                definition = self.named_types.get(member_name)
                if definition is None:
                    raise UnresolvedTypeReferenceError(member_name, context=f"union {name}")
                members.append(self.compile(definition))
            return IRNamed(name, IRUnion(tuple(members)))

        raise TypeError(f"Unsupported type definition: {type(node).__name__}")

    def _compile_fields(
        self, node: Union[ObjectTypeDefinitionNode, InputObjectTypeDefinitionNode]
    ) -> dict[str, IoTsType]:
        props: dict[str, IoTsType] = {}
        for field_node in node.fields or ():
            props[field_node.name.value] = self.resolve(field_node.type)
        return props

    def _named(self, type_name: str) -> IoTsType:
        if type_name in DEFAULT_SCALARS:
            return DEFAULT_SCALARS[type_name]
        definition = self.named_types.get(type_name)
        if definition is None:
            raise UnresolvedTypeReferenceError(type_name)
        return self.compile(definition)

    def resolve(self, type_node: TypeNode, required: bool = False) -> IoTsType:
        """Resolve a field signature, mirroring its non-null markers."""
        return resolve_type_node(type_node, self._named, required)


def resolve_type_node(type_node: TypeNode, lookup, required: bool = False) -> IoTsType:
    """Translate a GraphQL type signature into Array/Option-wrapped IR.

    ``lookup`` maps a named type to its required IR. ``[String]``,
    ``[String!]``, ``[String]!`` and ``[String!]!`` yield four distinct shapes.
    """
    if isinstance(type_node, NonNullTypeNode):
        return resolve_type_node(type_node.type, lookup, required=True)
    if isinstance(type_node, ListTypeNode):
        array = IRArray(resolve_type_node(type_node.type, lookup))
        return array if required else IROption(array)
    if isinstance(type_node, NamedTypeNode):
        resolved = lookup(type_node.name.value)
        return resolved if required else IROption(resolved)
    raise TypeError(f"Unsupported type node: {type(type_node).__name__}")


def compile_type_definition(
    node: TypeDefinition, named_types: Mapping[str, TypeDefinition]
) -> NamedIRType:
    """Compile a single definition, resolving references through ``named_types``."""
    return _TypeCompiler(named_types).compile(node)


@dataclass
class CompiledSchema:
    """The schema-side IR, in dependency order.

    Built once per compilation and shared read-only by every operation.
    """
    types: list[NamedIRType] = field(default_factory=list)
    _by_name: dict[str, NamedIRType] = field(default_factory=dict, repr=False)

    def __post_init__(self):
        if not self._by_name:
            self._by_name = {t.name: t for t in self.types}

    def get(self, name: str) -> Optional[NamedIRType]:
        """Look up a compiled type by name."""
        return self._by_name.get(name)

    @property
    def query(self) -> Optional[IRQuery]:
        node = self._by_name.get("Query")
        return node if isinstance(node, IRQuery) else None

    @property
    def mutation(self) -> Optional[IRMutation]:
        node = self._by_name.get("Mutation")
        return node if isinstance(node, IRMutation) else None

    def named_inputs(self) -> dict[str, InputIRType]:
        """Return the types usable as variables, seeded with the built-in scalars."""
        inputs: dict[str, InputIRType] = dict(DEFAULT_SCALARS)
        for node in self.types:
            if isinstance(node, (IRScalar, IRInputObject, IREnum)):
                inputs[node.name] = node
        return inputs


def compile_schema(definitions: Iterable[TypeDefinition]) -> CompiledSchema:
    """Compile ordered type definitions into a :class:`CompiledSchema`."""
    graph = list(definitions)
    compiler = _TypeCompiler({d.name.value: d for d in graph})
    types = [compiler.compile(node) for node in graph]
    logger.debug("Compiled %d schema types", len(types))
    return CompiledSchema(types=types)
