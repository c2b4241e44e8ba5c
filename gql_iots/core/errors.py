"""Errors raised while compiling a schema and its operations.

Every error is fatal for the current compilation; no output is produced.
"""

from typing import Iterable, Optional


class CodegenError(Exception):
    """Base class for compilation errors."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class UnresolvedTypeReferenceError(CodegenError):
    """A named type, union member or scalar could not be found."""

    def __init__(self, name: str, context: Optional[str] = None):
        self.name = name
        self.context = context
        message = f"Could not find type definition with name: {name}"
        if context:
            message = f"{message} (in {context})"
        super().__init__(message)


class UnknownFieldError(CodegenError):
    """An operation selects a field the type does not declare."""

    def __init__(self, field_name: str, type_name: str):
        self.field_name = field_name
        self.type_name = type_name
        super().__init__(f"Field: {field_name} does not exist on type: {type_name}")


class NonExhaustiveUnionError(CodegenError):
    """A selection on a union omits one or more of its members."""

    def __init__(self, union_name: str, missing: Iterable[str]):
        self.union_name = union_name
        self.missing = list(missing)
        cases = "\n\t- ".join(self.missing)
        super().__init__(
            f"Non exhaustive matching on Union: `{union_name}`.\n\nMissing cases:\n\t- {cases}"
        )


class UnsupportedSelectionError(CodegenError):
    """A selection uses a construct the compiler cannot express."""

    def __init__(self, kind: str, detail: Optional[str] = None):
        self.kind = kind
        self.detail = detail
        message = f"Unsupported selection: {kind}"
        if detail:
            message = f"{message} ({detail})"
        super().__init__(message)


class UnsupportedOperationError(CodegenError):
    """An operation cannot be compiled (anonymous, subscription, ...)."""

    def __init__(self, operation_name: Optional[str], reason: str):
        self.operation_name = operation_name
        self.reason = reason
        super().__init__(f"Cannot compile operation {operation_name or '<anonymous>'}: {reason}")


class CyclicTypeReferenceError(CodegenError):
    """A type reaches itself through its own fields."""

    def __init__(self, path: Iterable[str]):
        self.path = list(path)
        super().__init__(f"Cyclic type reference: {' -> '.join(self.path)}")
