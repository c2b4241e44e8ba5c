"""Code generator for io-ts codecs.

Compiles schema definitions and operations to IR, prints every IR node and
renders the result into a single TypeScript module with Jinja2.

Supports custom templates via the config's template_dir:
    config = GeneratorConfig(template_dir="./my_templates")
    generator = CodeGenerator(definitions, operations, config)

Template lookup order:
1. User's template directory (if provided)
2. Package default templates
"""

import logging
import os
from pathlib import Path
from typing import Iterable, Optional

from graphql import OperationDefinitionNode
from jinja2 import ChoiceLoader, Environment, FileSystemLoader, PackageLoader, select_autoescape

from .config import GeneratorConfig
from .model import CompiledSchema, compile_schema
from .printer import print_named_type, print_selection, print_variables
from .selection import compile_selection, get_root
from .sort import TypeDefinition, sort_graph_types
from .variable import compile_variables

logger = logging.getLogger(__name__)

TEMPLATE_NAME = "codecs.ts.j2"


class CodeGenerator:
    """Generates an io-ts module from GraphQL definitions.

    Available templates to override:
        - codecs.ts.j2: module layout and helper preamble

    Example:
        generator = CodeGenerator(
            definitions=parsed.type_definitions,
            operations=parsed.operations,
        )
        generator.write("./src/codecs.ts")
    """

    def __init__(
        self,
        definitions: Iterable[TypeDefinition],
        operations: Iterable[OperationDefinitionNode] = (),
        config: Optional[GeneratorConfig] = None,
    ):
        """Initialize the code generator.

        Args:
            definitions: Schema type definitions, in any order
            operations: Query and mutation definitions to generate codecs for
            config: Rendering options; defaults to GeneratorConfig()
        """
        self.definitions = list(definitions)
        self.operations = list(operations)
        self.config = config or GeneratorConfig()
        self.hooks = self.config.hook_runner()

        # Build template loader - custom templates take precedence
        loaders = []
        if self.config.template_dir:
            template_path = Path(self.config.template_dir)
            if template_path.is_dir():
                loaders.append(FileSystemLoader(str(template_path)))
            else:
                logger.warning("Template directory %s does not exist", template_path)
        loaders.append(PackageLoader("gql_iots", "templates"))

        self.env = Environment(
            loader=ChoiceLoader(loaders),
            autoescape=select_autoescape(),
            keep_trailing_newline=True,
        )

    def compile_schema(self) -> CompiledSchema:
        """Order and compile the schema definitions."""
        return compile_schema(sort_graph_types(self.definitions))

    def render(self) -> str:
        """Compile everything and render the module, before hooks run.

        Compilation finishes before any text is rendered, so a failing
        operation never yields partial output.
        """
        schema = self.compile_schema()
        named_inputs = schema.named_inputs()

        variables = []
        selections = []
        for operation in self.operations:
            variables.append(compile_variables(operation, named_inputs))
            selections.append(compile_selection(operation, get_root(operation, schema)))

        logger.debug(
            "Rendering %d schema types and %d operations",
            len(schema.types),
            len(self.operations),
        )
        template = self.env.get_template(TEMPLATE_NAME)
        return template.render(
            named_types=[print_named_type(t) for t in schema.types],
            variables=[print_variables(v) for v in variables],
            selections=[print_selection(s) for s in selections],
        )

    def generate(self, filename: str = "codecs.ts") -> str:
        """Render the module and run post-generation hooks over it."""
        return self.hooks.run_post_hooks(filename, self.render())

    def write(self, output_path: str) -> str:
        """Generate the module and write it to ``output_path``."""
        content = self.generate(os.path.basename(output_path))
        directory = os.path.dirname(output_path)
        if directory:
            os.makedirs(directory, exist_ok=True)
        with open(output_path, "w", encoding="utf-8") as f:
            f.write(content)
        return content
