"""Compile operation variable declarations into an input object IR."""

from typing import Mapping

from graphql import OperationDefinitionNode

from .errors import UnresolvedTypeReferenceError, UnsupportedOperationError
from .ir import IRInputObject, IoTsType
from .model import InputIRType, resolve_type_node


def capitalize_first_letter(s: str) -> str:
    """Uppercase the first character only: ``query`` -> ``Query``."""
    return s[:1].upper() + s[1:]


def variables_name(operation: OperationDefinitionNode) -> str:
    """Return the definition name for an operation's variables, e.g. ``TodoQueryVariables``."""
    if operation.name is None:
        raise UnsupportedOperationError(None, "operations must be named")
    kind = capitalize_first_letter(operation.operation.value)
    return f"{operation.name.value}{kind}Variables"


def compile_variables(
    operation: OperationDefinitionNode, named_inputs: Mapping[str, InputIRType]
) -> IRInputObject:
    """Compile the variables of an operation, one entry per declaration in order.

    Named types are resolved against ``named_inputs`` (built-in scalars plus
    the schema's scalars, enums and input objects).
    """
    name = variables_name(operation)

    def lookup(type_name: str) -> IoTsType:
        resolved = named_inputs.get(type_name)
        if resolved is None:
            raise UnresolvedTypeReferenceError(type_name, context=name)
        return resolved

    props: dict[str, IoTsType] = {}
    for definition in operation.variable_definitions or ():
        props[definition.variable.name.value] = resolve_type_node(definition.type, lookup)
    return IRInputObject(name, props)
