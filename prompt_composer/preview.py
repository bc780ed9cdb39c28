"""
Rich preview of built prompts.

Prints each rendered section of a builder in its own panel, followed by a
size summary.
"""

from typing import Optional

from rich.console import Console
from rich.panel import Panel
from rich.text import Text

from .builder import PromptBuilder
from .cleanup import cleanup_output
from .components.base import ParameterMap
from .constants import CHARS_PER_TOKEN
from .renderer import RenderedSection, default_label_formatter


def estimate_tokens(text: str) -> int:
    """Estimate token count for a text string (4 chars per token)."""
    return len(text) // CHARS_PER_TOKEN


class PromptPreview:
    """Renders a builder's sections to a Rich console.

    Example:
        preview = PromptPreview()
        preview.show(builder, {"name": "Ada"})
    """

    def __init__(self, console: Optional[Console] = None) -> None:
        """
        Initialize the preview.

        Args:
            console: Optional Rich Console instance
        """
        self._console = console or Console()

    @property
    def console(self) -> Console:
        """Get the Rich console."""
        return self._console

    def section_panel(self, section: RenderedSection) -> Panel:
        """Build the panel for one section, titled by its label or kind."""
        title = section.label or default_label_formatter(section.component)
        return Panel(
            Text(section.content),
            title=Text(title, style="bold"),
            title_align="left",
            subtitle=Text(section.component.kind.value, style="dim"),
            subtitle_align="right",
        )

    def show(self, builder: PromptBuilder, params: Optional[ParameterMap] = None) -> str:
        """Print the builder's sections and a summary line.

        Args:
            builder: The builder to preview.
            params: Build parameters.

        Returns:
            The built prompt text.
        """
        params = params if params is not None else {}
        sections = builder.render_sections(params)
        for section in sections:
            self._console.print(self.section_panel(section))

        separator = builder.render_options.separator
        prompt = cleanup_output(separator.join(section.text for section in sections))
        self._console.print(
            f"[dim]{len(prompt)} chars, ~{estimate_tokens(prompt)} tokens[/dim]"
        )
        return prompt
