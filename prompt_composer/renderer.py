"""
Standalone component renderer.

Resolves components, attaches labels and joins the sections into a cleaned
prompt. Unlike PromptBuilder, the default options synthesize a per-kind
label (e.g. "Role", "Examples") for components without an explicit one.
"""

from dataclasses import dataclass
from typing import Iterable, Optional

from .cleanup import cleanup_output
from .components.base import ParameterMap, PromptComponent
from .config import LabelFormatter, RenderOptions
from .constants import DEFAULT_LABELS
from .resolver import resolve_component


DEFAULT_OPTIONS = RenderOptions()


def default_label_formatter(component: PromptComponent) -> str:
    """Return the explicit label, or a human-readable label for the kind."""
    if component.label:
        return component.label
    kind = component.kind.value
    return DEFAULT_LABELS.get(kind, kind.upper())


def explicit_label(component: PromptComponent) -> str:
    """Return the explicit label, or "" so no label line is written."""
    return component.label or ""


@dataclass
class RenderedSection:
    """A resolved component before sections are joined."""
    component: PromptComponent
    label: str
    content: str

    @property
    def text(self) -> str:
        """The section as it appears in the prompt."""
        if self.label:
            return f"{self.label}\n{self.content}"
        return self.content


def _formatter(options: RenderOptions) -> LabelFormatter:
    return options.label_formatter or default_label_formatter


def render_section(
    component: PromptComponent,
    params: ParameterMap,
    options: RenderOptions = DEFAULT_OPTIONS,
) -> Optional[RenderedSection]:
    """Resolve one component into a RenderedSection.

    Returns:
        The section, or None when skip_empty is set and the resolved
        content is empty or whitespace-only.
    """
    content = resolve_component(component, params)

    if options.skip_empty and not content.strip():
        return None

    label = _formatter(options)(component) if options.include_labels else ""
    return RenderedSection(component=component, label=label, content=content)


def render_sections(
    components: Iterable[PromptComponent],
    params: Optional[ParameterMap] = None,
    options: Optional[RenderOptions] = None,
) -> list[RenderedSection]:
    """Render components to sections, dropping those that render to nothing."""
    params = params if params is not None else {}
    options = options or DEFAULT_OPTIONS

    sections = []
    for component in components:
        section = render_section(component, params, options)
        if section is not None and section.text:
            sections.append(section)
    return sections


def render_component(
    component: PromptComponent,
    params: ParameterMap,
    options: RenderOptions = DEFAULT_OPTIONS,
) -> str:
    """Render a single component to text, "" if it is skipped."""
    section = render_section(component, params, options)
    return section.text if section is not None else ""


def render_components(
    components: Iterable[PromptComponent],
    params: Optional[ParameterMap] = None,
    options: Optional[RenderOptions] = None,
) -> str:
    """Render components into one cleaned prompt string.

    Args:
        components: Components in output order.
        params: Build parameters.
        options: Render options; defaults synthesize per-kind labels.

    Returns:
        The joined sections after whitespace cleanup.
    """
    options = options or DEFAULT_OPTIONS
    sections = render_sections(components, params, options)
    return cleanup_output(options.separator.join(section.text for section in sections))
