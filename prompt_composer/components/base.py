"""
Base types for prompt components.

Provides the ComponentKind and ContentType enums, the Condition dataclass and
the PromptComponent class that every prompt section is built from.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Optional, Union

from ..constants import PLACEHOLDER_PATTERN


ParameterMap = dict[str, Any]
Predicate = Callable[[ParameterMap], Any]


class ComponentKind(str, Enum):
    """Fixed set of section kinds a prompt is made of."""
    ROLE = "role"
    GOAL = "goal"
    INPUT = "input"
    OUTPUT = "output"
    CONTEXT = "context"
    PERSONA = "persona"
    TONE = "tone"
    FEW_SHOTS = "few-shots"
    GUARDRAILS = "guardrails"
    CONSTRAINTS = "constraints"
    TASKS = "tasks"
    STEPS = "steps"


class ContentType(str, Enum):
    """Shape of a component's content, decided whenever the content is set."""
    EMPTY = "empty"
    LITERAL = "literal"
    TEMPLATE = "template"
    ITEMS = "items"
    CALLABLE = "callable"
    COMPONENT = "component"


@dataclass
class Condition:
    """If/then/else rule that swaps a component for zero or more others.

    Attributes:
        predicate: Called with the build parameters; its truthiness picks
            the branch.
        then: Component(s) used when the predicate is truthy.
        otherwise: Optional component(s) used when it is falsy.
    """
    predicate: Predicate
    then: Union["PromptComponent", list["PromptComponent"]]
    otherwise: Optional[Union["PromptComponent", list["PromptComponent"]]] = None


def classify_content(content: Any) -> ContentType:
    """Determine the ContentType of a content value.

    Args:
        content: A string, template string, list/tuple of strings, callable,
            PromptComponent, or None.

    Returns:
        The matching ContentType.

    Raises:
        TypeError: If the value is none of the supported shapes.
    """
    if content is None:
        return ContentType.EMPTY
    if isinstance(content, PromptComponent):
        return ContentType.COMPONENT
    if isinstance(content, str):
        if PLACEHOLDER_PATTERN.search(content):
            return ContentType.TEMPLATE
        return ContentType.LITERAL
    if isinstance(content, (list, tuple)):
        return ContentType.ITEMS
    if callable(content):
        return ContentType.CALLABLE
    raise TypeError(f"Unsupported component content: {type(content).__name__}")


class PromptComponent:
    """One named section of a prompt.

    The kind is fixed at construction. Content may be a literal string, a
    template containing ${name} placeholders, a list of strings, a function
    of the build parameters, or another component.

    Example:
        component = PromptComponent(
            ComponentKind.STEPS,
            ["Read the input", "Answer"],
            label="Steps",
        )
    """

    def __init__(
        self,
        kind: Union[ComponentKind, str],
        content: Any,
        condition: Optional[Condition] = None,
        order: Optional[int] = None,
        label: Optional[str] = None,
    ) -> None:
        try:
            self._kind = ComponentKind(kind)
        except ValueError:
            raise ValueError(f"Unknown component kind: {kind!r}") from None
        self.content = content
        self.condition = condition
        self.order = order
        self.label = label

    @property
    def kind(self) -> ComponentKind:
        """The component kind."""
        return self._kind

    @property
    def content(self) -> Any:
        """The raw content value."""
        return self._content

    @content.setter
    def content(self, value: Any) -> None:
        self._content_type = classify_content(value)
        self._content = value

    @property
    def content_type(self) -> ContentType:
        """Shape of the current content."""
        return self._content_type

    def clone(self, **updates: Any) -> "PromptComponent":
        """Create a copy with condition, order or label replaced.

        An update given as None keeps the current value.

        Args:
            **updates: Any of ``condition``, ``order``, ``label``.

        Returns:
            A new component of the same class, kind and content.
        """
        unknown = set(updates) - {"condition", "order", "label"}
        if unknown:
            raise TypeError(f"Cannot update component fields: {', '.join(sorted(unknown))}")

        copy = object.__new__(type(self))
        copy._kind = self._kind
        copy._content_type = self._content_type
        copy._content = self._content
        for name in ("condition", "order", "label"):
            value = updates.get(name)
            setattr(copy, name, value if value is not None else getattr(self, name))
        return copy

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(kind={self._kind.value!r}, "
            f"content_type={self._content_type.value!r}, order={self.order!r}, "
            f"label={self.label!r})"
        )
