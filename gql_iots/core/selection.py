"""Compile operation selections into minimal IR.

For every selected field only the requested shape is kept: a ``__typename``
discriminant, a ``Pick`` of the selected leaf fields and one object per nested
selection. Selections on unions must cover every member.
"""

import logging
from dataclasses import dataclass, field
from typing import Callable, Union

from graphql import (
    FieldNode,
    FragmentSpreadNode,
    InlineFragmentNode,
    OperationDefinitionNode,
    OperationType,
    SelectionNode,
    SelectionSetNode,
)

from .errors import (
    NonExhaustiveUnionError,
    UnknownFieldError,
    UnresolvedTypeReferenceError,
    UnsupportedOperationError,
    UnsupportedSelectionError,
)
from .ir import (
    IRArray,
    IRIntersection,
    IRMutation,
    IRNamed,
    IRObject,
    IROption,
    IRPick,
    IRQuery,
    IRScalar,
    IRUnion,
    IoTsType,
    get_ir_name,
    get_props,
    typename,
)
from .model import CompiledSchema

logger = logging.getLogger(__name__)

RootType = Union[IRQuery, IRMutation]


@dataclass
class _Partition:
    """A selection set split by how each part is compiled."""
    primitives: list[FieldNode] = field(default_factory=list)
    nested: list[FieldNode] = field(default_factory=list)
    fragments: list[InlineFragmentNode] = field(default_factory=list)


def _partition(selection_set: SelectionSetNode | None) -> _Partition:
    partition = _Partition()
    if selection_set is None:
        return partition
    for selection in selection_set.selections:
        _check_supported(selection)
        if isinstance(selection, FieldNode):
            if selection.selection_set is not None:
                partition.nested.append(selection)
            elif selection.name.value != "__typename":
                partition.primitives.append(selection)
        else:
            partition.fragments.append(selection)
    return partition


def _check_supported(selection: SelectionNode):
    if isinstance(selection, FragmentSpreadNode):
        raise UnsupportedSelectionError("fragment spread", selection.name.value)
    if not isinstance(selection, (FieldNode, InlineFragmentNode)):
        raise UnsupportedSelectionError(type(selection).__name__)
    if selection.directives:
        names = ", ".join(f"@{d.name.value}" for d in selection.directives)
        raise UnsupportedSelectionError("directive", names)
    if isinstance(selection, FieldNode) and selection.alias is not None:
        raise UnsupportedSelectionError(
            "alias", f"{selection.alias.value}: {selection.name.value}"
        )
    if isinstance(selection, InlineFragmentNode) and selection.type_condition is None:
        raise UnsupportedSelectionError("inline fragment without type condition")


def _unwrap(node: IoTsType) -> tuple[IoTsType, Callable[[IoTsType], IoTsType]]:
    """Peel Array/Option wrappers, returning the core and a re-wrapping function."""
    wrappers = []
    while isinstance(node, (IRArray, IROption)):
        wrappers.append(type(node))
        node = node.value

    def rewrap(inner: IoTsType) -> IoTsType:
        for wrapper in reversed(wrappers):
            inner = wrapper(inner)
        return inner

    return node, rewrap


def _is_union(node: IoTsType) -> bool:
    return isinstance(node, IRNamed) and isinstance(node.value, IRUnion)


def _object_selection(current: IoTsType, partition: _Partition) -> IRIntersection:
    name = get_ir_name(current)
    return IRIntersection((
        typename(name),
        IRPick(name, tuple(s.name.value for s in partition.primitives)),
        *(
            IRObject({s.name.value: _compile_field(s, current)})
            for s in partition.nested
        ),
    ))


def _compile_field(node: FieldNode, parent: IoTsType) -> IoTsType:
    name = node.name.value
    declared = get_props(parent).get(name)
    if declared is None:
        raise UnknownFieldError(name, get_ir_name(parent) or type(parent).__name__)

    current, rewrap = _unwrap(declared)
    partition = _partition(node.selection_set)

    if _is_union(current) and partition.fragments:
        return rewrap(_union_selection(current, partition.fragments))

    if isinstance(current, IRScalar):
        return declared

    if partition.fragments:
        raise UnsupportedSelectionError(
            "inline fragment", f"on non-union type {get_ir_name(current) or name}"
        )

    if not partition.primitives and not partition.nested:
        parent_name = get_ir_name(parent)
        return IRIntersection((typename(parent_name), IRPick(parent_name, (name,))))

    return rewrap(_object_selection(current, partition))


def _union_selection(union: IRNamed, fragments: list[InlineFragmentNode]) -> IRUnion:
    members = union.value.types
    member_names = [get_ir_name(m) for m in members]

    by_condition: dict[str, InlineFragmentNode] = {}
    for fragment in fragments:
        by_condition.setdefault(fragment.type_condition.name.value, fragment)

    missing = [n for n in member_names if n not in by_condition]
    if missing:
        raise NonExhaustiveUnionError(union.name, missing)

    for condition in by_condition:
        if condition not in member_names:
            raise UnresolvedTypeReferenceError(condition, context=f"union type: {union.name}")

    return IRUnion(tuple(
        _object_selection(member, _partition(by_condition[member_name].selection_set))
        for member, member_name in zip(members, member_names)
    ))


def get_root(operation: OperationDefinitionNode, schema: CompiledSchema) -> RootType:
    """Return the schema root type an operation is compiled against."""
    if operation.operation == OperationType.MUTATION:
        root, root_name = schema.mutation, "Mutation"
    elif operation.operation == OperationType.QUERY:
        root, root_name = schema.query, "Query"
    else:
        raise UnsupportedOperationError(
            operation.name.value if operation.name else None,
            f"{operation.operation.value} operations are not supported",
        )
    if root is None:
        raise UnresolvedTypeReferenceError(root_name)
    return root


def compile_selection(operation: OperationDefinitionNode, root: RootType) -> RootType:
    """Compile an operation's selection set against its root type.

    The result is a Query/Mutation node named after the operation holding
    one entry per top-level field, in the order the operation selects them.
    """
    if operation.name is None:
        raise UnsupportedOperationError(None, "operations must be named")
    op_name = operation.name.value

    props: dict[str, IoTsType] = {}
    for selection in operation.selection_set.selections:
        _check_supported(selection)
        if not isinstance(selection, FieldNode):
            raise UnsupportedSelectionError(
                "inline fragment", f"on root type {root.name}"
            )
        if selection.name.value in props:
            raise UnsupportedSelectionError("duplicate field", selection.name.value)
        props[selection.name.value] = _compile_field(selection, root)

    logger.debug("Compiled selection %s with %d root fields", op_name, len(props))
    if operation.operation == OperationType.MUTATION:
        return IRMutation(op_name, props)
    return IRQuery(op_name, props)
