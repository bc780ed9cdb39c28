"""
Render configuration module.

Provides the RenderOptions dataclass and helpers to validate and move it to
and from JSON. Label formatters are code and are never serialized.
"""

import json
from dataclasses import dataclass
from typing import Any, Callable, Optional

from .components.base import PromptComponent
from .constants import DEFAULT_SEPARATOR


class ConfigError(Exception):
    """Render options JSON could not be read or did not validate.

    ``line`` and ``column`` point into the JSON text when the failure is a
    syntax error and are None otherwise.
    """

    def __init__(self, message: str, line: Optional[int] = None, column: Optional[int] = None):
        position = []
        if line is not None:
            position.append(f"line {line}")
            if column is not None:
                position.append(f"column {column}")
        if position:
            message = f"{message} (at {', '.join(position)})"
        super().__init__(message)
        self.line = line
        self.column = column


# Current options format version
OPTIONS_VERSION = "1.0"


LabelFormatter = Callable[[PromptComponent], str]


@dataclass
class RenderOptions:
    """Options for rendering components into a prompt.

    Attributes:
        separator: Text placed between rendered sections.
        include_labels: Whether sections get a label line.
        label_formatter: Produces the label for a component; None selects
            the per-kind default formatter. An empty label means no label
            line.
        skip_empty: Drop sections whose content is empty or whitespace.

    Example:
        options = RenderOptions(separator="\\n---\\n", include_labels=False)
        prompt = render_components(components, params, options)
    """
    separator: str = DEFAULT_SEPARATOR
    include_labels: bool = True
    label_formatter: Optional[LabelFormatter] = None
    skip_empty: bool = True

    def to_dict(self) -> dict[str, Any]:
        """Convert the serializable fields to a dictionary with version info."""
        return {
            "version": OPTIONS_VERSION,
            "separator": self.separator,
            "include_labels": self.include_labels,
            "skip_empty": self.skip_empty,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "RenderOptions":
        """Create RenderOptions from a dictionary.

        Args:
            data: Dictionary containing option fields; missing ones use
                defaults.

        Returns:
            A new RenderOptions instance.
        """
        return cls(
            separator=data.get("separator", DEFAULT_SEPARATOR),
            include_labels=data.get("include_labels", True),
            skip_empty=data.get("skip_empty", True),
        )


def validate_render_options(data: dict[str, Any]) -> tuple[bool, list[str]]:
    """Validate a render options dictionary.

    Args:
        data: Dictionary to validate.

    Returns:
        A tuple of (is_valid, errors).
    """
    errors: list[str] = []

    if not isinstance(data, dict):
        return False, ["Render options must be a dictionary"]

    if "version" not in data:
        errors.append("Missing required field: 'version'")
    elif not isinstance(data["version"], str):
        errors.append("Field 'version' must be a string")

    if "separator" in data and not isinstance(data["separator"], str):
        errors.append("Field 'separator' must be a string")

    for flag in ("include_labels", "skip_empty"):
        if flag in data and not isinstance(data[flag], bool):
            errors.append(f"Field '{flag}' must be a boolean")

    return len(errors) == 0, errors


def export_options(options: RenderOptions) -> str:
    """Serialize RenderOptions to a JSON string."""
    return json.dumps(options.to_dict(), indent=2)


def import_options(text: str) -> RenderOptions:
    """Load RenderOptions previously written by export_options.

    Raises:
        ConfigError: For malformed JSON or options that fail validation.
    """
    try:
        payload = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ConfigError(
            f"Malformed render options JSON: {exc.msg}", line=exc.lineno, column=exc.colno
        ) from exc

    ok, problems = validate_render_options(payload)
    if ok:
        return RenderOptions.from_dict(payload)
    raise ConfigError("Invalid render options: " + "; ".join(problems))
