"""Render IR nodes as io-ts codec expressions.

Rendering is context free: named nodes nested inside another node are
emitted as a reference to their definition name, on the assumption that the
definition itself is emitted elsewhere in the same module.

Two modes exist and differ only for ``IROption``: output codecs use
``optionFromNullable`` (absent keys decode to ``None``), input codecs accept an
explicit ``null``.
"""

from typing import Callable, Sequence, TypeVar

from .ir import (
    IRArray,
    IREnum,
    IRInputObject,
    IRIntersection,
    IRLiteral,
    IRMutation,
    IRNamed,
    IRObject,
    IROption,
    IRPick,
    IRPrimitive,
    IRQuery,
    IRScalar,
    IRUnion,
    IoTsType,
    NamedIRType,
    PrimitiveKind,
    is_named_type,
)

A = TypeVar("A")

# Maximum members io-ts type inference handles in one t.intersection
MAX_INTERSECTION_SIZE = 5

PRIMITIVE_CODECS = {
    PrimitiveKind.STRING: "t.string",
    PrimitiveKind.INT: "t.number",
    PrimitiveKind.FLOAT: "t.number",
    PrimitiveKind.BOOLEAN: "t.boolean",
    PrimitiveKind.ID: "t.string",
}


def chunk(size: int, items: Sequence[A]) -> list[list[A]]:
    """Split items into consecutive groups of at most ``size``."""
    return [list(items[i:i + size]) for i in range(0, len(items), size)]


def intersection_groups(types: Sequence[A]) -> list[list[A]]:
    """Group intersection members for emission.

    Up to five members stay in one group. Larger lists are split into groups
    of five, or four when a group of five would leave a single trailing member.
    """
    if len(types) <= MAX_INTERSECTION_SIZE:
        return [list(types)]
    size = MAX_INTERSECTION_SIZE
    if len(types) % MAX_INTERSECTION_SIZE == 1:
        size = MAX_INTERSECTION_SIZE - 1
    return chunk(size, types)


class CodecPrinter:
    """Prints IR nodes; ``input_mode`` selects how options are rendered."""

    def __init__(self, input_mode: bool = False):
        self.input_mode = input_mode

    def ref(self, node: IoTsType) -> str:
        """Print a reference for named nodes, the full codec otherwise."""
        if is_named_type(node) and node.name:
            return node.name
        return self.print(node)

    def props(self, props) -> str:
        return ",\n".join(f"{key}: {self.ref(value)}" for key, value in props.items())

    def print(self, node: IoTsType) -> str:
        if isinstance(node, IRPrimitive):
            return PRIMITIVE_CODECS[node.kind]

        if isinstance(node, IRScalar):
            return "t.any"

        if isinstance(node, IRLiteral):
            return f"t.literal('{node.value}')"

        if isinstance(node, IREnum):
            if len(node.cases) == 1:
                return f"t.literal('{node.cases[0]}')"
            return "t.union([{}])".format(",".join(f"t.literal('{c}')" for c in node.cases))

        if isinstance(node, IRArray):
            return f"t.array({self.ref(node.value)})"

        if isinstance(node, IROption):
            if self.input_mode:
                return f"t.union([t.null, {self.ref(node.value)}])"
            return f"optionFromNullable({self.ref(node.value)})"

        if isinstance(node, IRPick):
            fields = ",".join(f"'{f}'" for f in node.fields)
            return f"Pick({node.type}.props, {fields})"

        if isinstance(node, IRUnion):
            return "t.union([{}])".format(", ".join(self.ref(m) for m in node.types))

        if isinstance(node, IRIntersection):
            groups = intersection_groups(node.types)
            if len(groups) == 1:
                return self._intersection(groups[0])
            return "t.intersection([{}])".format(", ".join(self._intersection(g) for g in groups))

        if isinstance(node, (IRObject, IRQuery, IRMutation, IRInputObject)):
            return f"t.type({{ {self.props(node.props)}}})"

        if isinstance(node, IRNamed):
            if isinstance(node.value, IRObject):
                body = f"__typename: t.literal('{node.name}')"
                if node.value.props:
                    body = f"{body},\n{self.props(node.value.props)}"
                return f"t.type({{ \n{body}\n}})"
            return self.print(node.value)

        raise TypeError(f"Unsupported IR node: {type(node).__name__}")

    def _intersection(self, types: Sequence[IoTsType]) -> str:
        return "t.intersection([{}])".format(", ".join(self.ref(t) for t in types))


_output_printer = CodecPrinter()
_input_printer = CodecPrinter(input_mode=True)


def print_type(node: IoTsType) -> str:
    """Print the output-side codec for a node."""
    return _output_printer.print(node)


def print_input_type(node: IoTsType) -> str:
    """Print the input-side codec for a node."""
    return _input_printer.print(node)


def _definition(name: str, codec: str, type_expr: Callable[[str], str] | None = None) -> str:
    type_of = f"t.TypeOf<typeof {name}>"
    if type_expr is not None:
        type_of = type_expr(type_of)
    return f"export const {name} = {codec};\nexport type {name} = {type_of};\n"


def print_named_type(node: NamedIRType) -> str:
    """Print the codec definition and type alias for a schema type."""
    if isinstance(node, IRInputObject):
        return print_variables(node)
    return _definition(node.name, print_type(node))


def print_variables(node: IRInputObject) -> str:
    """Print an input object definition; options accept ``null``."""
    return _definition(node.name, print_input_type(node))


def print_selection(node: IRQuery | IRMutation) -> str:
    """Print the response codec of a compiled operation.

    The codec validates the whole ``{ data }`` payload while the exported
    type is the ``data`` member.
    """
    tag = "Mutation" if isinstance(node, IRMutation) else "Query"
    name = f"{node.name}{tag}"
    return _definition(
        name,
        f"t.type({{ data: {print_type(node)} }})",
        lambda type_of: f"{type_of}['data']",
    )
