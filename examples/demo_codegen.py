#!/usr/bin/env python3
"""Demonstration of io-ts codec generation.

This script shows how to:
1. Parse a GraphQL schema and operation documents
2. Inspect the compiled IR of an operation
3. Generate the codec module

Equivalent CLI call:
    gql-iots generate -s examples/todo/schema.graphql -d examples/todo/operations.graphql -o codecs.ts
"""

from pathlib import Path

from gql_iots.core import (
    CodeGenerator,
    DocumentParser,
    compile_selection,
    get_root,
)


def main():
    todo_dir = Path(__file__).parent / "todo"

    print("=== io-ts Codec Generation Demo ===\n")

    print("1. Parsing documents...")
    parser = DocumentParser(str(todo_dir / "schema.graphql"), [str(todo_dir / "operations.graphql")])
    parsed = parser.parse_all()
    print(f"   {len(parsed.type_definitions)} types, {len(parsed.operations)} operations")

    generator = CodeGenerator(parsed.type_definitions, parsed.operations)

    print("\n2. Compiled selection of GetTodo:")
    schema = generator.compile_schema()
    operation = parsed.operations[0]
    print(f"   {compile_selection(operation, get_root(operation, schema))}")

    print("\n3. Generated module:\n")
    print(generator.generate())


if __name__ == "__main__":
    main()
