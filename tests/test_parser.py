"""Tests for loading GraphQL documents."""

import pytest
from graphql import GraphQLSyntaxError, build_schema

from gql_iots.core.errors import CodegenError
from gql_iots.core.parser import DocumentParser, collect_graphql_files, definitions_from_schema

SCHEMA = """
scalar Date

interface Node {
  id: ID!
}

type Todo implements Node {
  id: ID!
  due: Date
}

type Query {
  todo: Todo
}
"""


@pytest.fixture
def project(tmp_path):
    schema_dir = tmp_path / "schema"
    schema_dir.mkdir()
    (schema_dir / "schema.graphqls").write_text(SCHEMA)
    (schema_dir / "README.md").write_text("not graphql")

    ops_dir = tmp_path / "ops" / "nested"
    ops_dir.mkdir(parents=True)
    (ops_dir / "todo.graphql").write_text("query GetTodo { todo { id } }")
    (tmp_path / "ops" / "more.gql").write_text(
        "fragment F on Todo { id }\nquery Other { todo { due } }"
    )
    return tmp_path


class TestDocumentParser:
    """Tests for DocumentParser."""

    def test_collects_supported_type_definitions(self, project):
        parsed = DocumentParser(str(project / "schema")).parse_all()
        assert [d.name.value for d in parsed.type_definitions] == ["Date", "Todo", "Query"]

    def test_collects_operations(self, project):
        parsed = DocumentParser(str(project / "schema"), [str(project / "ops")]).parse_all()
        assert [op.name.value for op in parsed.operations] == ["Other", "GetTodo"]

    def test_operations_in_schema_are_ignored(self, tmp_path):
        schema = tmp_path / "schema.graphql"
        schema.write_text("type Query { a: Int }\nquery Stray { a }")
        parsed = DocumentParser(str(schema)).parse_all()
        assert parsed.operations == []

    def test_syntax_error_propagates(self, tmp_path):
        schema = tmp_path / "schema.graphql"
        schema.write_text("type Query {")
        with pytest.raises(GraphQLSyntaxError):
            DocumentParser(str(schema)).parse_all()

    def test_non_utf8_file_is_rejected(self, tmp_path):
        schema = tmp_path / "schema.graphql"
        schema.write_bytes(b"type Query { a: String } # \xff\xfe")
        with pytest.raises(CodegenError) as exc_info:
            DocumentParser(str(schema)).parse_all()
        assert "UTF-8" in str(exc_info.value)


def test_collect_graphql_files_sorted(project):
    files = collect_graphql_files(str(project / "ops"))
    assert [f.rsplit("/", 1)[-1] for f in files] == ["more.gql", "todo.graphql"]


def test_definitions_from_schema_skips_builtins():
    schema = build_schema(SCHEMA)
    names = {d.name.value for d in definitions_from_schema(schema)}
    assert names == {"Date", "Todo", "Query"}
