"""Core modules for io-ts codec generation."""

from .config import GeneratorConfig
from .errors import (
    CodegenError,
    CyclicTypeReferenceError,
    NonExhaustiveUnionError,
    UnknownFieldError,
    UnresolvedTypeReferenceError,
    UnsupportedOperationError,
    UnsupportedSelectionError,
)
from .generator import CodeGenerator
from .hooks import AddHeaderHook, CommandFormatHook, HookRunner, PostGenerateHook
from .ir import (
    DEFAULT_SCALARS,
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
    typename,
)
from .model import CompiledSchema, compile_schema, compile_type_definition
from .parser import DocumentParser, ParsedDocuments, definitions_from_schema
from .printer import (
    print_input_type,
    print_named_type,
    print_selection,
    print_type,
    print_variables,
)
from .selection import compile_selection, get_root
from .sort import sort_graph_types
from .variable import compile_variables

__all__ = [
    # Config
    "GeneratorConfig",
    # Errors
    "CodegenError",
    "CyclicTypeReferenceError",
    "NonExhaustiveUnionError",
    "UnknownFieldError",
    "UnresolvedTypeReferenceError",
    "UnsupportedOperationError",
    "UnsupportedSelectionError",
    # Generator
    "CodeGenerator",
    # Hooks
    "AddHeaderHook",
    "CommandFormatHook",
    "HookRunner",
    "PostGenerateHook",
    # IR types
    "DEFAULT_SCALARS",
    "IRArray",
    "IREnum",
    "IRInputObject",
    "IRIntersection",
    "IRLiteral",
    "IRMutation",
    "IRNamed",
    "IRObject",
    "IROption",
    "IRPick",
    "IRPrimitive",
    "IRQuery",
    "IRScalar",
    "IRUnion",
    "IoTsType",
    "typename",
    # Compilers
    "CompiledSchema",
    "compile_schema",
    "compile_type_definition",
    "compile_selection",
    "compile_variables",
    "get_root",
    "sort_graph_types",
    # Parser
    "DocumentParser",
    "ParsedDocuments",
    "definitions_from_schema",
    # Printer
    "print_input_type",
    "print_named_type",
    "print_selection",
    "print_type",
    "print_variables",
]
