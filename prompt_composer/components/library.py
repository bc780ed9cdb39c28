"""
Kind-specific prompt components.

Each class fixes the kind of a PromptComponent so callers only supply the
content and options.
"""

from typing import Any, Optional

from .base import ComponentKind, Condition, PromptComponent


class _KindComponent(PromptComponent):
    """PromptComponent whose kind is set by the subclass."""

    KIND: ComponentKind

    def __init__(
        self,
        content: Any,
        condition: Optional[Condition] = None,
        order: Optional[int] = None,
        label: Optional[str] = None,
    ) -> None:
        super().__init__(self.KIND, content, condition=condition, order=order, label=label)


class RoleComponent(_KindComponent):
    """Who the model should act as."""
    KIND = ComponentKind.ROLE


class GoalComponent(_KindComponent):
    """What the model should achieve."""
    KIND = ComponentKind.GOAL


class InputComponent(_KindComponent):
    """Input data or parameters for the task."""
    KIND = ComponentKind.INPUT


class OutputComponent(_KindComponent):
    """Expected shape of the response."""
    KIND = ComponentKind.OUTPUT


class ContextComponent(_KindComponent):
    """Background information."""
    KIND = ComponentKind.CONTEXT


class PersonaComponent(_KindComponent):
    """Character and personality traits."""
    KIND = ComponentKind.PERSONA


class ToneComponent(_KindComponent):
    """Communication style."""
    KIND = ComponentKind.TONE


class FewShotsComponent(_KindComponent):
    """Worked examples; lists render as ``Example N:`` blocks."""
    KIND = ComponentKind.FEW_SHOTS


class GuardrailsComponent(_KindComponent):
    """Safety rules; lists render as bullets."""
    KIND = ComponentKind.GUARDRAILS


class ConstraintsComponent(_KindComponent):
    """Limits on the response; lists render as bullets."""
    KIND = ComponentKind.CONSTRAINTS


class TasksComponent(_KindComponent):
    """Things to do; lists render as a numbered list."""
    KIND = ComponentKind.TASKS


class StepsComponent(_KindComponent):
    """Ordered procedure; lists render as ``Step N:`` lines."""
    KIND = ComponentKind.STEPS


COMPONENT_CLASSES: dict[ComponentKind, type[PromptComponent]] = {
    cls.KIND: cls
    for cls in (
        RoleComponent,
        GoalComponent,
        InputComponent,
        OutputComponent,
        ContextComponent,
        PersonaComponent,
        ToneComponent,
        FewShotsComponent,
        GuardrailsComponent,
        ConstraintsComponent,
        TasksComponent,
        StepsComponent,
    )
}
