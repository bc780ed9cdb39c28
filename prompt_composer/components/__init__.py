"""
Prompt components module.

Provides the component model and one component class per kind.
"""

from .base import (
    ComponentKind,
    Condition,
    ContentType,
    ParameterMap,
    PromptComponent,
    classify_content,
)
from .library import (
    COMPONENT_CLASSES,
    ConstraintsComponent,
    ContextComponent,
    FewShotsComponent,
    GoalComponent,
    GuardrailsComponent,
    InputComponent,
    OutputComponent,
    PersonaComponent,
    RoleComponent,
    StepsComponent,
    TasksComponent,
    ToneComponent,
)

__all__ = [
    "ComponentKind",
    "Condition",
    "ContentType",
    "ParameterMap",
    "PromptComponent",
    "classify_content",
    "COMPONENT_CLASSES",
    "RoleComponent",
    "GoalComponent",
    "InputComponent",
    "OutputComponent",
    "ContextComponent",
    "PersonaComponent",
    "ToneComponent",
    "FewShotsComponent",
    "GuardrailsComponent",
    "ConstraintsComponent",
    "TasksComponent",
    "StepsComponent",
]
