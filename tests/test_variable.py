"""Tests for compiling operation variables."""

import pytest

from gql_iots.core.errors import UnresolvedTypeReferenceError, UnsupportedOperationError
from gql_iots.core.ir import (
    BOOLEAN,
    ID,
    STRING,
    IRArray,
    IREnum,
    IRInputObject,
    IROption,
    IRScalar,
)
from gql_iots.core.variable import capitalize_first_letter, compile_variables, variables_name

from conftest import compile_graph, parse_operation

VARIABLE_SCHEMA = """
type Todo {
  id: ID!
  description: String!
}

scalar Date

enum Status {
  OPEN
  CLOSED
}

input TodoInput {
  description: String!
}

input TodoInputOptionDescription {
  description: String
}

type Query {
  todo(id: ID!): Todo
}

type Mutation {
  create(todo: TodoInput!): Todo!
}
"""


@pytest.fixture
def named_inputs():
    return compile_graph(VARIABLE_SCHEMA).named_inputs()


def compile_op(source: str, named_inputs) -> IRInputObject:
    return compile_variables(parse_operation(source), named_inputs)


class TestCompileVariables:
    """Tests for compile_variables."""

    def test_primitive_required(self, named_inputs):
        actual = compile_op(
            "mutation PrimitiveRequired($description: String!) { create { id } }",
            named_inputs,
        )
        assert actual == IRInputObject("PrimitiveRequiredMutationVariables", {"description": STRING})

    def test_primitive_optional(self, named_inputs):
        actual = compile_op(
            "mutation PrimitiveOptional($description: String) { create { id } }",
            named_inputs,
        )
        assert actual == IRInputObject(
            "PrimitiveOptionalMutationVariables", {"description": IROption(STRING)}
        )

    def test_custom_input_required(self, named_inputs):
        actual = compile_op(
            "mutation CustomRequired($todo: TodoInput!) { create(todo: $todo) { id } }",
            named_inputs,
        )
        assert actual == IRInputObject(
            "CustomRequiredMutationVariables",
            {"todo": IRInputObject("TodoInput", {"description": STRING})},
        )

    def test_custom_input_optional(self, named_inputs):
        actual = compile_op(
            "mutation CustomOptional($todo: TodoInput) { create(todo: $todo) { id } }",
            named_inputs,
        )
        assert actual.props["todo"] == IROption(IRInputObject("TodoInput", {"description": STRING}))

    def test_nested_optional_input_field(self, named_inputs):
        actual = compile_op(
            "mutation Nested($todo: TodoInputOptionDescription!) { create { id } }",
            named_inputs,
        )
        assert actual.props["todo"] == IRInputObject(
            "TodoInputOptionDescription", {"description": IROption(STRING)}
        )

    def test_scalars_enums_and_lists(self, named_inputs):
        actual = compile_op(
            "query Search($ids: [ID!]!, $on: Date, $status: [Status], $flag: Boolean!) { todo { id } }",
            named_inputs,
        )
        assert actual == IRInputObject("SearchQueryVariables", {
            "ids": IRArray(ID),
            "on": IROption(IRScalar("Date")),
            "status": IROption(IRArray(IROption(IREnum("Status", ("OPEN", "CLOSED"))))),
            "flag": BOOLEAN,
        })

    def test_declaration_order(self, named_inputs):
        actual = compile_op("query Q($b: Int, $a: Int, $c: Int) { todo { id } }", named_inputs)
        assert list(actual.props) == ["b", "a", "c"]

    def test_no_variables(self, named_inputs):
        actual = compile_op("query Plain { todo { id } }", named_inputs)
        assert actual == IRInputObject("PlainQueryVariables", {})

    def test_output_types_are_not_inputs(self, named_inputs):
        with pytest.raises(UnresolvedTypeReferenceError) as exc_info:
            compile_op("query Bad($todo: Todo) { todo { id } }", named_inputs)
        assert exc_info.value.name == "Todo"

    def test_anonymous_operation(self, named_inputs):
        with pytest.raises(UnsupportedOperationError):
            compile_op("query ($id: ID!) { todo(id: $id) { id } }", named_inputs)


class TestNaming:
    """Tests for variable definition names."""

    def test_variables_name(self):
        assert variables_name(parse_operation("query GetTodo { todo { id } }")) == "GetTodoQueryVariables"

    def test_capitalize_first_letter(self):
        assert capitalize_first_letter("mutation") == "Mutation"
        assert capitalize_first_letter("camelCase") == "CamelCase"
        assert capitalize_first_letter("") == ""
