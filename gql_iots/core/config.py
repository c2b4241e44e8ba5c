"""Generator configuration."""

from typing import Optional

from pydantic import BaseModel, field_validator

from .hooks import AddHeaderHook, CommandFormatHook, HookRunner


class GeneratorConfig(BaseModel):
    """Options controlling how the generated module is rendered.

    Attributes:
        template_dir: Directory with Jinja2 templates overriding the built-in ones
        header: Text placed at the top of the generated module
        format_command: Formatter command the output is piped through,
            e.g. ``npx prettier --parser typescript --print-width 120``
    """

    template_dir: Optional[str] = None
    header: Optional[str] = None
    format_command: Optional[str] = None

    @field_validator("format_command")
    @classmethod
    def _non_blank_command(cls, value: Optional[str]) -> Optional[str]:
        if value is not None and not value.strip():
            raise ValueError("format_command must not be blank")
        return value

    def hook_runner(self) -> HookRunner:
        """Build the post-generation hooks these options ask for."""
        runner = HookRunner()
        if self.format_command:
            runner.add_post_hook(CommandFormatHook(self.format_command))
        if self.header:
            runner.add_post_hook(AddHeaderHook(self.header))
        return runner
