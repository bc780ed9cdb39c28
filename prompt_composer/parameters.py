"""
Parameter substitution for template strings.

Templates use ${name} placeholders. Substitution is lenient: a placeholder
whose parameter is missing or None is left in the output untouched so the
gap stays visible to whoever reads the prompt.
"""

import logging
import re
from typing import Any, Callable, Optional, Union

from .components.base import ParameterMap
from .constants import PLACEHOLDER_PATTERN


logger = logging.getLogger(__name__)


class MissingParametersError(ValueError):
    """Raised by strict validation when a template references absent parameters."""

    def __init__(self, missing: list[str]):
        self.missing = list(missing)
        super().__init__(f"Missing required parameters: {', '.join(self.missing)}")


def stringify(value: Any) -> str:
    """Render a parameter value as text.

    Booleans use their lowercase literal form; everything else goes
    through ``str()``.
    """
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def substitute(template: str, params: ParameterMap) -> str:
    """Replace ${name} placeholders with values from params.

    Args:
        template: Template string containing ${name} placeholders.
        params: Mapping of parameter names to values.

    Returns:
        The template with every resolvable placeholder replaced.

    Example:
        >>> substitute("Hello ${name}", {"name": "John"})
        'Hello John'
        >>> substitute("Hello ${ name }", {})
        'Hello ${ name }'
    """
    def replace(match: re.Match) -> str:
        value = params.get(match.group(1).strip())
        if value is None:
            return match.group(0)
        return stringify(value)

    return PLACEHOLDER_PATTERN.sub(replace, template)


def resolve_content(
    content: Union[str, Callable[[ParameterMap], str]],
    params: Optional[ParameterMap] = None,
) -> str:
    """Resolve a string or function content value.

    Functions are called with params and their result returned as-is;
    strings go through substitute().
    """
    params = params if params is not None else {}
    if callable(content):
        return content(params)
    return substitute(content, params)


def extract_parameters(template: str) -> list[str]:
    """List the distinct parameter names in a template, in first-seen order.

    Example:
        >>> extract_parameters("Hello ${name}, age ${age}, bye ${name}")
        ['name', 'age']
    """
    names: dict[str, None] = {}
    for match in PLACEHOLDER_PATTERN.finditer(template):
        names.setdefault(match.group(1).strip(), None)
    return list(names)


def validate_parameters(
    template: str,
    params: ParameterMap,
    strict: bool = False,
) -> list[str]:
    """Find the template parameters that params cannot satisfy.

    Args:
        template: Template string to check.
        params: Mapping of parameter names to values.
        strict: Raise instead of returning when something is missing.

    Returns:
        Names of missing (absent or None) parameters, in template order.

    Raises:
        MissingParametersError: If strict and any parameter is missing.
    """
    missing = [name for name in extract_parameters(template) if params.get(name) is None]

    if strict and missing:
        logger.debug(f"Strict validation failed, missing parameters: {missing}")
        raise MissingParametersError(missing)

    return missing
