"""
Constants and defaults for prompt_composer.
"""
import re
from typing import Final

APP_NAME: Final[str] = "prompt_composer"
APP_VERSION: Final[str] = "1.0.0"
APP_DESCRIPTION: Final[str] = "Fluent builder for structured LLM prompts"

# Matches ${name}; the name may carry surrounding whitespace
PLACEHOLDER_PATTERN: Final[re.Pattern] = re.compile(r"\$\{([^}]+)\}")

DEFAULT_SEPARATOR: Final[str] = "\n\n"

# Approximation used by the preview summary
CHARS_PER_TOKEN: Final[int] = 4

DEFAULT_LABELS: Final[dict[str, str]] = {
    "role": "Role",
    "goal": "Goal",
    "input": "Input",
    "output": "Output",
    "context": "Context",
    "persona": "Persona",
    "tone": "Tone",
    "few-shots": "Examples",
    "guardrails": "Guardrails",
    "constraints": "Constraints",
    "tasks": "Tasks",
    "steps": "Steps",
}
