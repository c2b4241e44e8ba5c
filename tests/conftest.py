"""Shared helpers for compiling schemas and operations in tests."""

import pytest
from graphql import OperationDefinitionNode, parse

from gql_iots.core.model import CompiledSchema, compile_schema
from gql_iots.core.sort import is_type_definition, sort_graph_types


def parse_definitions(schema: str) -> list:
    """Parse SDL and return its supported type definitions."""
    return [d for d in parse(schema).definitions if is_type_definition(d)]


def parse_operation(operation: str) -> OperationDefinitionNode:
    """Parse a document holding a single operation."""
    return parse(operation).definitions[0]


def compile_graph(schema: str) -> CompiledSchema:
    """Order and compile SDL into a CompiledSchema."""
    return compile_schema(sort_graph_types(parse_definitions(schema)))


TODO_SCHEMA = """
type Todo {
  id: ID!
  description: String!
  author: Author!
  lastUpdated: LastUpdated!
  unit: Unit!
}

scalar Unit

type Author {
  name: String!
  address: Address!
}

type Address {
  postcode: String!
}

union LastUpdated = Today | Never

type Today {
  date: String!
  dayOfWeek: DayOfWeek!
}

union DayOfWeek = Monday | Tuesday

type Monday {
  day: Int!
}

type Tuesday {
  day: Int!
}

type Never {
  creation: String!
}

enum Status {
  BACKLOG
  DONE
}

input TodoInput {
  description: String!
  status: Status
  tags: [String!]
}

type Query {
  todo: Todo!
  todos: [Todo!]!
  headTodo: Todo
  maybeTodos: [Todo]
  todoIncAddress: Address!
  unit: Unit!
  maybeUnit: Unit
  count: Int!
  lastUpdated: [LastUpdated!]
}

type Mutation {
  update(id: ID!, todo: TodoInput!): UpdateResponse!
}

union UpdateResponse = Todo | Error

type Error {
  message: String!
}
"""


@pytest.fixture
def todo_schema() -> CompiledSchema:
    return compile_graph(TODO_SCHEMA)
