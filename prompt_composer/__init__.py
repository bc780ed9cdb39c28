"""
prompt_composer - Fluent builder for structured LLM prompts.

Prompts are composed from named components (role, goal, steps, ...), each a
literal string, ${name} template, list of strings or function of runtime
parameters, optionally conditional and explicitly ordered.
"""

from .builder import PromptBuilder
from .cleanup import cleanup_output
from .components import (
    ComponentKind,
    Condition,
    ContentType,
    PromptComponent,
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
from .conditions import create_condition, evaluate_condition, filter_components_by_condition
from .config import ConfigError, RenderOptions, export_options, import_options
from .constants import APP_NAME, APP_VERSION, APP_DESCRIPTION
from .parameters import (
    MissingParametersError,
    extract_parameters,
    resolve_content,
    substitute,
    validate_parameters,
)
from .renderer import RenderedSection, render_component, render_components, render_sections
from .resolver import resolve_component_content

__version__ = APP_VERSION

__all__ = [
    "APP_NAME",
    "APP_VERSION",
    "APP_DESCRIPTION",
    "PromptBuilder",
    "ComponentKind",
    "Condition",
    "ContentType",
    "PromptComponent",
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
    "substitute",
    "resolve_content",
    "extract_parameters",
    "validate_parameters",
    "MissingParametersError",
    "resolve_component_content",
    "create_condition",
    "evaluate_condition",
    "filter_components_by_condition",
    "RenderOptions",
    "RenderedSection",
    "ConfigError",
    "export_options",
    "import_options",
    "render_component",
    "render_components",
    "render_sections",
    "cleanup_output",
]
