"""GraphQL document loading using graphql-core.

Parses schema and operation files and keeps the definitions the compiler
understands.
"""

import logging
import os
from dataclasses import dataclass, field
from typing import Iterable

from graphql import (
    DocumentNode,
    GraphQLSchema,
    OperationDefinitionNode,
    parse,
    print_schema,
)

from .errors import CodegenError
from .sort import TypeDefinition, is_type_definition

logger = logging.getLogger(__name__)

GRAPHQL_EXTENSIONS = (".graphql", ".graphqls", ".gql")


@dataclass
class ParsedDocuments:
    """Definitions collected from schema and operation sources."""
    type_definitions: list[TypeDefinition] = field(default_factory=list)
    operations: list[OperationDefinitionNode] = field(default_factory=list)


def split_definitions(document: DocumentNode, parsed: ParsedDocuments):
    """Sort a document's definitions into type definitions and operations."""
    for definition in document.definitions:
        if is_type_definition(definition):
            parsed.type_definitions.append(definition)
        elif isinstance(definition, OperationDefinitionNode):
            parsed.operations.append(definition)
        else:
            logger.debug("Skipping unsupported definition: %s", definition.kind)


def definitions_from_schema(schema: GraphQLSchema) -> list[TypeDefinition]:
    """Return the type definitions of a built schema.

    The schema is printed and re-parsed, so built-in scalars and
    introspection types are left out.
    """
    parsed = ParsedDocuments()
    split_definitions(parse(print_schema(schema)), parsed)
    return parsed.type_definitions


def collect_graphql_files(path: str) -> list[str]:
    """Collect GraphQL files from a file or directory path."""
    files = []
    if os.path.isfile(path):
        files.append(path)
    else:
        for root, _, filenames in os.walk(path):
            for filename in filenames:
                if filename.endswith(GRAPHQL_EXTENSIONS):
                    files.append(os.path.join(root, filename))
    return sorted(files)


class DocumentParser:
    """Parses schema and operation files."""

    def __init__(self, schema_path: str, document_paths: Iterable[str] = ()):
        """Initialize a parser with a schema path and operation document paths.

        Each path may be a single file or a directory searched recursively.
        """
        self.schema_path = schema_path
        self.document_paths = list(document_paths)

    def parse_all(self) -> ParsedDocuments:
        """Parse all files and return their definitions.

        Type definitions are only taken from the schema path and operations
        only from the document paths.
        """
        schema = ParsedDocuments()
        for file_path in collect_graphql_files(self.schema_path):
            split_definitions(self._parse_file(file_path), schema)

        documents = ParsedDocuments()
        for document_path in self.document_paths:
            for file_path in collect_graphql_files(document_path):
                split_definitions(self._parse_file(file_path), documents)

        return ParsedDocuments(
            type_definitions=schema.type_definitions,
            operations=documents.operations,
        )

    @staticmethod
    def _parse_file(file_path: str) -> DocumentNode:
        try:
            with open(file_path, encoding="utf-8") as f:
                content = f.read()
        except UnicodeDecodeError as e:
            raise CodegenError(f"Could not read {file_path} as UTF-8: {e}") from e
        try:
            return parse(content)
        except Exception:
            logger.error("Error parsing %s", os.path.basename(file_path))
            raise
