"""Intermediate Representation (IR) for io-ts codec generation.

Every GraphQL construct the generator understands is compiled into a small,
closed set of immutable node types. Consumers dispatch on the concrete node
class; nodes refer to each other's emitted definitions by name only.
"""

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Mapping, Union


class PrimitiveKind(Enum):
    """The built-in GraphQL scalars."""
    STRING = "String"
    INT = "Int"
    BOOLEAN = "Boolean"
    FLOAT = "Float"
    ID = "ID"


def _freeze(props: Mapping[str, "IoTsType"]) -> Mapping[str, "IoTsType"]:
    return MappingProxyType(dict(props))


@dataclass(frozen=True)
class IRPrimitive:
    kind: PrimitiveKind


@dataclass(frozen=True)
class IRScalar:
    """A custom scalar; carries no structural information."""
    name: str


@dataclass(frozen=True)
class IREnum:
    """An enum with its cases in declaration order."""
    name: str
    cases: tuple[str, ...] = ()


@dataclass(frozen=True)
class IRLiteral:
    value: str


@dataclass(frozen=True)
class IRObject:
    """An anonymous structural object."""
    props: Mapping[str, "IoTsType"] = field(default_factory=dict)

    def __post_init__(self):
        object.__setattr__(self, "props", _freeze(self.props))


@dataclass(frozen=True)
class IRUnion:
    """Members in schema declaration order."""
    types: tuple["IoTsType", ...] = ()


@dataclass(frozen=True)
class IRNamed:
    """Gives an object or union a name that other definitions can reference."""
    name: str
    value: Union[IRObject, IRUnion]


@dataclass(frozen=True)
class IRInputObject:
    name: str
    props: Mapping[str, "IoTsType"] = field(default_factory=dict)

    def __post_init__(self):
        object.__setattr__(self, "props", _freeze(self.props))


@dataclass(frozen=True)
class IRQuery:
    name: str
    props: Mapping[str, "IoTsType"] = field(default_factory=dict)

    def __post_init__(self):
        object.__setattr__(self, "props", _freeze(self.props))


@dataclass(frozen=True)
class IRMutation:
    name: str
    props: Mapping[str, "IoTsType"] = field(default_factory=dict)

    def __post_init__(self):
        object.__setattr__(self, "props", _freeze(self.props))


@dataclass(frozen=True)
class IRArray:
    value: "IoTsType"


@dataclass(frozen=True)
class IROption:
    """A nullable value, or an absent key on the output side."""
    value: "IoTsType"


@dataclass(frozen=True)
class IRIntersection:
    """Members in emission order."""
    types: tuple["IoTsType", ...] = ()


@dataclass(frozen=True)
class IRPick:
    """A subset of the fields of the definition emitted under ``type``.

    ``type`` is resolved by name when the codec is evaluated, so the target
    definition must be emitted in the same module.
    """
    type: str
    fields: tuple[str, ...] = ()


IoTsType = Union[
    IRPrimitive,
    IRScalar,
    IREnum,
    IRLiteral,
    IRObject,
    IRNamed,
    IRInputObject,
    IRQuery,
    IRMutation,
    IRArray,
    IROption,
    IRUnion,
    IRIntersection,
    IRPick,
]

NamedIRType = Union[IRNamed, IREnum, IRScalar, IRInputObject, IRQuery, IRMutation]

NAMED_IR_TYPES = (IRNamed, IREnum, IRScalar, IRInputObject, IRQuery, IRMutation)

STRING = IRPrimitive(PrimitiveKind.STRING)
INT = IRPrimitive(PrimitiveKind.INT)
BOOLEAN = IRPrimitive(PrimitiveKind.BOOLEAN)
FLOAT = IRPrimitive(PrimitiveKind.FLOAT)
ID = IRPrimitive(PrimitiveKind.ID)

# Looked up by GraphQL type name
DEFAULT_SCALARS: dict[str, IRPrimitive] = {
    "ID": ID,
    "String": STRING,
    "Boolean": BOOLEAN,
    "Int": INT,
    "Float": FLOAT,
}


def typename(name: str) -> IRObject:
    """Return the ``__typename`` discriminant object for a named type."""
    return IRObject({"__typename": IRLiteral(name)})


def is_named_type(node: IoTsType) -> bool:
    """Check if a node is emitted as its own top-level definition."""
    return isinstance(node, NAMED_IR_TYPES)


def get_ir_name(node: IoTsType) -> str:
    """Return the definition name of a named node, or "" for anonymous nodes."""
    if is_named_type(node):
        return node.name
    return ""


def get_props(node: IoTsType) -> Mapping[str, IoTsType]:
    """Return the field map of an object-shaped node (empty for anything else)."""
    if isinstance(node, (IRQuery, IRMutation, IRObject, IRInputObject)):
        return node.props
    if isinstance(node, IRNamed) and isinstance(node.value, IRObject):
        return node.value.props
    return {}
