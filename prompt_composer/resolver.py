"""
Component content resolution.

Turns the content of a component (string, template, list of strings,
function of the parameters, or nested component) into rendered text. Lists
are formatted according to the component kind.
"""

from typing import Any, Callable, Iterable, Optional, Union

from .components.base import (
    ComponentKind,
    ContentType,
    ParameterMap,
    PromptComponent,
    classify_content,
)
from .parameters import stringify, substitute


KindLike = Union[ComponentKind, str]

# kind -> (item formatter taking (index, item), joiner)
_ITEM_FORMATS: dict[ComponentKind, tuple[Callable[[int, str], str], str]] = {
    ComponentKind.STEPS: (lambda i, item: f"Step {i}: {item}", "\n"),
    ComponentKind.TASKS: (lambda i, item: f"{i}. {item}", "\n"),
    ComponentKind.FEW_SHOTS: (lambda i, item: f"Example {i}:\n{item}", "\n\n"),
    ComponentKind.GUARDRAILS: (lambda i, item: f"- {item}", "\n"),
    ComponentKind.CONSTRAINTS: (lambda i, item: f"- {item}", "\n"),
}


def _as_kind(kind: Optional[KindLike]) -> Optional[ComponentKind]:
    if kind is None or isinstance(kind, ComponentKind):
        return kind
    try:
        return ComponentKind(kind)
    except ValueError:
        return None


def filter_items(items: Iterable[Any]) -> list[str]:
    """Drop None and empty-string entries from a list of items."""
    return [
        stringify(item)
        for item in items
        if item is not None and item != ""
    ]


def format_items(items: Iterable[Any], kind: Optional[KindLike] = None) -> str:
    """Format list content for a component kind.

    Args:
        items: The raw items; None and empty strings are dropped first.
        kind: Component kind selecting the prefix and joiner.

    Returns:
        The formatted block, or "" if no item survives filtering.

    Example:
        >>> format_items(["a", "b"], ComponentKind.STEPS)
        'Step 1: a\\nStep 2: b'
    """
    filtered = filter_items(items)
    if not filtered:
        return ""

    item_format = _ITEM_FORMATS.get(_as_kind(kind))
    if item_format is None:
        return "\n".join(filtered)

    formatter, joiner = item_format
    return joiner.join(formatter(i, item) for i, item in enumerate(filtered, start=1))


def _resolve_result(result: Any, params: ParameterMap, kind: Optional[KindLike]) -> str:
    # Function results are returned verbatim; only literal content is substituted
    if result is None:
        return ""
    if isinstance(result, PromptComponent):
        return resolve_component(result, params, kind)
    if isinstance(result, (list, tuple)):
        return format_items(result, kind)
    if isinstance(result, str):
        return result
    return ""


def _resolve(
    content: Any,
    content_type: ContentType,
    params: ParameterMap,
    kind: Optional[KindLike],
) -> str:
    if content_type is ContentType.EMPTY:
        return ""
    if content_type is ContentType.ITEMS:
        return format_items(content, kind)
    if content_type is ContentType.CALLABLE:
        return _resolve_result(content(params), params, kind)
    if content_type is ContentType.COMPONENT:
        return resolve_component(content, params, kind)
    if content_type is ContentType.TEMPLATE:
        return substitute(content, params)
    return content


def resolve_component(
    component: PromptComponent,
    params: ParameterMap,
    kind: Optional[KindLike] = None,
) -> str:
    """Resolve a component's content using its classified content type.

    An explicit kind overrides the component's own kind for list formatting.
    """
    return _resolve(component.content, component.content_type, params, kind or component.kind)


def resolve_component_content(
    content: Any,
    params: ParameterMap,
    kind: Optional[KindLike] = None,
) -> str:
    """Resolve raw component content to a string.

    Resolution by content shape:
    - None resolves to "".
    - Lists are filtered and formatted for the kind.
    - Functions are called with params; a None result gives "", a component
      result is resolved recursively (kind overriding the component's own),
      a list result is formatted, a string result is returned unchanged.
    - Strings go through parameter substitution.

    Args:
        content: The content value to resolve.
        params: Build parameters.
        kind: Optional component kind for list formatting.

    Returns:
        The resolved text, possibly empty.
    """
    return _resolve(content, classify_content(content), params, kind)
