"""Command-line interface for gql-iots."""

import logging
from pathlib import Path

import click
from graphql import GraphQLError

from .core.config import GeneratorConfig
from .core.errors import CodegenError
from .core.generator import CodeGenerator
from .core.parser import DocumentParser


@click.group()
@click.version_option()
def main():
    """Generate io-ts codecs from GraphQL schemas and operations."""
    pass


@main.command()
@click.option(
    "--schema",
    "-s",
    required=True,
    type=click.Path(exists=True),
    help="Path to GraphQL schema file or directory.",
)
@click.option(
    "--documents",
    "-d",
    multiple=True,
    type=click.Path(exists=True),
    help="Operation document file or directory (repeatable).",
)
@click.option(
    "--output",
    "-o",
    required=True,
    type=click.Path(),
    help="Output file for generated codecs (e.g., codecs.ts).",
)
@click.option(
    "--header",
    default=None,
    help="Text placed at the top of the generated file.",
)
@click.option(
    "--format-command",
    default=None,
    help="Formatter reading stdin, e.g. 'npx prettier --parser typescript'.",
)
@click.option(
    "--template-dir",
    default=None,
    type=click.Path(file_okay=False),
    help="Directory with templates overriding the built-in ones.",
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Enable verbose output.",
)
def generate(
    schema: str,
    documents: tuple[str, ...],
    output: str,
    header: str | None,
    format_command: str | None,
    template_dir: str | None,
    verbose: bool,
):
    """Generate io-ts codecs from a GraphQL schema and operations.

    Examples:

        gql-iots generate --schema ./schema.graphql --documents ./src/queries --output ./src/codecs.ts

        gql-iots generate -s ./schema -d ./ops -o ./codecs.ts --format-command "npx prettier --parser typescript"
    """
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    schema_path = Path(schema).resolve()
    output_path = Path(output).resolve()

    if verbose:
        click.echo(f"Schema: {schema_path}")
        click.echo(f"Output: {output_path}")

    try:
        click.echo("Parsing documents...")
        parser = DocumentParser(str(schema_path), [str(Path(d).resolve()) for d in documents])
        parsed = parser.parse_all()

        if verbose:
            click.echo(f"  Types: {len(parsed.type_definitions)}")
            click.echo(f"  Operations: {len(parsed.operations)}")

        config = GeneratorConfig(
            template_dir=template_dir,
            header=header,
            format_command=format_command,
        )

        click.echo("Generating codecs...")
        generator = CodeGenerator(parsed.type_definitions, parsed.operations, config)
        code = generator.write(str(output_path))
    except (CodegenError, GraphQLError) as e:
        raise click.ClickException(str(e)) from e

    if verbose:
        click.echo(f"  Lines: {len(code.splitlines())}")

    click.echo(f"Done! Generated codecs in {output_path}")


if __name__ == "__main__":
    main()
