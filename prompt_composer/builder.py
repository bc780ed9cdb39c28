"""
PromptBuilder - Fluent API for assembling prompts.

The builder is a thin configuration layer: it records components, then
delegates condition filtering, ordering, content resolution, rendering and
cleanup to the shared primitives.
"""

import json
import logging
from typing import Any, Mapping, Optional

from .components.base import ComponentKind, Condition, ParameterMap, PromptComponent
from .components.library import COMPONENT_CLASSES
from .conditions import filter_components_by_condition
from .config import RenderOptions
from .registry import ComponentRegistry, sort_components
from .renderer import RenderedSection, explicit_label, render_components, render_sections


logger = logging.getLogger(__name__)


def format_input_record(record: Mapping[str, Any]) -> str:
    """Convert a key/value record to ``- key: value`` lines.

    String values are kept as-is so their placeholders are substituted at
    build time; other values are compact JSON, non-ASCII text left unescaped.
    """
    lines = []
    for key, value in record.items():
        if not isinstance(value, str):
            value = json.dumps(value, separators=(",", ":"), ensure_ascii=False, default=str)
        lines.append(f"- {key}: {value}")
    return "\n".join(lines)


class PromptBuilder:
    """Builds prompts from components added through a fluent API.

    Components added through the kind methods without an explicit order get
    the next insertion index as their order. Labels are only written when
    set explicitly.

    Example:
        prompt = (
            PromptBuilder()
            .role("You are ${persona}")
            .goal("Help the user")
            .steps(["Read the question", "Answer it"], label="Steps")
            .build({"persona": "a helpful assistant"})
        )
    """

    def __init__(self, render_options: Optional[RenderOptions] = None) -> None:
        """Initialize an empty builder.

        Args:
            render_options: Options passed to the renderer. Defaults to
                blank-line separated sections with explicit labels only.
        """
        self._registry = ComponentRegistry()
        self._render_options = render_options or RenderOptions(label_formatter=explicit_label)

    @property
    def render_options(self) -> RenderOptions:
        """Get the render options used by build()."""
        return self._render_options

    def _add(
        self,
        kind: ComponentKind,
        content: Any,
        condition: Optional[Condition],
        order: Optional[int],
        label: Optional[str],
    ) -> "PromptBuilder":
        component = COMPONENT_CLASSES[kind](
            content,
            condition=condition,
            order=self._registry.resolve_order(order),
            label=label,
        )
        self._registry.append(component)
        return self

    def role(self, content: Any, condition: Optional[Condition] = None,
             order: Optional[int] = None, label: Optional[str] = None) -> "PromptBuilder":
        """Add a role component."""
        return self._add(ComponentKind.ROLE, content, condition, order, label)

    def goal(self, content: Any, condition: Optional[Condition] = None,
             order: Optional[int] = None, label: Optional[str] = None) -> "PromptBuilder":
        """Add a goal component."""
        return self._add(ComponentKind.GOAL, content, condition, order, label)

    def input(self, content: Any, condition: Optional[Condition] = None,
              order: Optional[int] = None, label: Optional[str] = None) -> "PromptBuilder":
        """Add an input component.

        A mapping is converted to ``- key: value`` lines right away; the
        resulting text is then treated as ordinary template content.
        """
        if isinstance(content, Mapping):
            content = format_input_record(content)
        return self._add(ComponentKind.INPUT, content, condition, order, label)

    def output(self, content: Any, condition: Optional[Condition] = None,
               order: Optional[int] = None, label: Optional[str] = None) -> "PromptBuilder":
        """Add an output component."""
        return self._add(ComponentKind.OUTPUT, content, condition, order, label)

    def context(self, content: Any, condition: Optional[Condition] = None,
                order: Optional[int] = None, label: Optional[str] = None) -> "PromptBuilder":
        """Add a context component."""
        return self._add(ComponentKind.CONTEXT, content, condition, order, label)

    def persona(self, content: Any, condition: Optional[Condition] = None,
                order: Optional[int] = None, label: Optional[str] = None) -> "PromptBuilder":
        """Add a persona component."""
        return self._add(ComponentKind.PERSONA, content, condition, order, label)

    def tone(self, content: Any, condition: Optional[Condition] = None,
             order: Optional[int] = None, label: Optional[str] = None) -> "PromptBuilder":
        """Add a tone component."""
        return self._add(ComponentKind.TONE, content, condition, order, label)

    def few_shots(self, content: Any, condition: Optional[Condition] = None,
                  order: Optional[int] = None, label: Optional[str] = None) -> "PromptBuilder":
        """Add a few-shots component; lists render as ``Example N:`` blocks."""
        return self._add(ComponentKind.FEW_SHOTS, content, condition, order, label)

    def guardrails(self, content: Any, condition: Optional[Condition] = None,
                   order: Optional[int] = None, label: Optional[str] = None) -> "PromptBuilder":
        """Add a guardrails component; lists render as bullets."""
        return self._add(ComponentKind.GUARDRAILS, content, condition, order, label)

    def constraints(self, content: Any, condition: Optional[Condition] = None,
                    order: Optional[int] = None, label: Optional[str] = None) -> "PromptBuilder":
        """Add a constraints component; lists render as bullets."""
        return self._add(ComponentKind.CONSTRAINTS, content, condition, order, label)

    def tasks(self, content: Any, condition: Optional[Condition] = None,
              order: Optional[int] = None, label: Optional[str] = None) -> "PromptBuilder":
        """Add a tasks component; lists render numbered."""
        return self._add(ComponentKind.TASKS, content, condition, order, label)

    def steps(self, content: Any, condition: Optional[Condition] = None,
              order: Optional[int] = None, label: Optional[str] = None) -> "PromptBuilder":
        """Add a steps component; lists render as ``Step N:`` lines."""
        return self._add(ComponentKind.STEPS, content, condition, order, label)

    def add_component(self, component: PromptComponent) -> "PromptBuilder":
        """Add a component as-is, without assigning a default order."""
        self._registry.append(component)
        return self

    def add_components(self, components: list[PromptComponent]) -> "PromptBuilder":
        """Add several components as-is."""
        self._registry.extend(components)
        return self

    def get_components(self) -> list[PromptComponent]:
        """Return a copy of the added components."""
        return self._registry.components()

    def clear(self) -> "PromptBuilder":
        """Remove all components and restart default ordering from zero."""
        self._registry.clear()
        return self

    def active_components(self, params: Optional[ParameterMap] = None) -> list[PromptComponent]:
        """Components that survive condition filtering, in output order."""
        params = params if params is not None else {}
        components = self._registry.components()
        active = filter_components_by_condition(components, params)
        logger.debug(f"Building prompt: {len(components)} components, {len(active)} active")
        return sort_components(active)

    def render_sections(self, params: Optional[ParameterMap] = None) -> list[RenderedSection]:
        """Render the active components to sections without joining them."""
        params = params if params is not None else {}
        return render_sections(self.active_components(params), params, self._render_options)

    def build(self, params: Optional[ParameterMap] = None) -> str:
        """Build the final prompt.

        Filters components by their conditions, sorts them by order,
        resolves each against params, drops empty sections, joins the rest
        and cleans up whitespace. Exceptions from content functions and
        predicates propagate unchanged.

        Args:
            params: Parameters for templates, content functions and
                predicates.

        Returns:
            The prompt text.
        """
        params = params if params is not None else {}
        return render_components(self.active_components(params), params, self._render_options)

    def __len__(self) -> int:
        """Return the number of added components."""
        return len(self._registry)
