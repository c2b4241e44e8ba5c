"""Post-generation hooks for transforming the generated module.

The generator emits unformatted TypeScript; hooks run over the rendered text
before it is written, typically to format it or prepend a header.

Example usage:
    from gql_iots.core.hooks import HookRunner, AddHeaderHook, CommandFormatHook

    runner = HookRunner()
    runner.add_post_hook(CommandFormatHook("npx prettier --parser typescript"))
    runner.add_post_hook(AddHeaderHook("// Auto-generated - do not edit"))
"""

import logging
import shlex
import subprocess
from typing import Protocol, runtime_checkable

from .errors import CodegenError

logger = logging.getLogger(__name__)


@runtime_checkable
class PostGenerateHook(Protocol):
    """Protocol for post-generation hooks.

    Example:
        class StripTrailingWhitespace(PostGenerateHook):
            def post_generate(self, filename: str, content: str) -> str:
                return "\\n".join(line.rstrip() for line in content.splitlines())
    """

    def post_generate(self, filename: str, content: str) -> str:
        """Called with the generated module before it is written.

        Args:
            filename: The name of the output file (e.g., "codecs.ts")
            content: The generated code content

        Returns:
            The (possibly transformed) code to write
        """
        ...


class AddHeaderHook:
    """Built-in hook to add a header to the generated module.

    Example:
        hook = AddHeaderHook("// Auto-generated - do not edit")
    """

    def __init__(self, header: str):
        self.header = header

    def post_generate(self, _filename: str, content: str) -> str:
        """Add a header to the beginning of the file."""
        if not self.header.endswith("\n"):
            header = self.header + "\n\n"
        else:
            header = self.header + "\n"
        return header + content


class CommandFormatHook:
    """Built-in hook piping the module through an external formatter.

    The command reads source on stdin and writes the formatted source to
    stdout, like ``prettier --parser typescript``.
    """

    def __init__(self, command: str):
        self.command = command

    def post_generate(self, filename: str, content: str) -> str:
        """Run the formatter and return its output."""
        args = shlex.split(self.command)
        logger.debug("Formatting %s with %s", filename, args[0])
        try:
            result = subprocess.run(
                args,
                input=content,
                capture_output=True,
                text=True,
                check=True,
            )
        except FileNotFoundError as e:
            raise CodegenError(f"Formatter not found: {args[0]}") from e
        except subprocess.CalledProcessError as e:
            raise CodegenError(
                f"Formatter failed for {filename} (exit {e.returncode}): {e.stderr.strip()}"
            ) from e
        return result.stdout


class HookRunner:
    """Runs a collection of hooks in order."""

    def __init__(self):
        self.post_hooks: list[PostGenerateHook] = []

    def add_post_hook(self, hook: PostGenerateHook):
        """Add a post-generation hook."""
        self.post_hooks.append(hook)

    def run_post_hooks(self, filename: str, content: str) -> str:
        """Run all post-generation hooks in order."""
        for hook in self.post_hooks:
            content = hook.post_generate(filename, content)
        return content
