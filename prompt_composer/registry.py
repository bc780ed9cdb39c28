"""
ComponentRegistry - Holds a builder's components and default ordering.

Components are kept in insertion order. Each fluent append without an
explicit order consumes the next value of an instance-local counter.
"""

import logging
from typing import Iterable, Optional

from .components.base import PromptComponent


logger = logging.getLogger(__name__)


def sort_components(components: Iterable[PromptComponent]) -> list[PromptComponent]:
    """Stable sort by order ascending.

    Components without an order come after all ordered ones, keeping their
    relative insertion order.
    """
    return sorted(
        components,
        key=lambda c: (c.order is None, c.order if c.order is not None else 0),
    )


class ComponentRegistry:
    """Append-only component list with an insertion counter.

    Example:
        registry = ComponentRegistry()
        registry.append(RoleComponent("You are helpful", order=registry.next_order()))
        registry.components()  # copy of the list
    """

    def __init__(self) -> None:
        """Initialize an empty registry."""
        self._components: list[PromptComponent] = []
        self._next_order = 0

    def next_order(self) -> int:
        """Consume and return the next default order value."""
        order = self._next_order
        self._next_order += 1
        return order

    def resolve_order(self, order: Optional[int]) -> int:
        """Return order if given, otherwise consume the next default value."""
        if order is None:
            return self.next_order()
        return order

    def append(self, component: PromptComponent) -> None:
        """Append a component as-is."""
        self._components.append(component)

    def extend(self, components: Iterable[PromptComponent]) -> None:
        """Append several components as-is."""
        self._components.extend(components)

    def components(self) -> list[PromptComponent]:
        """Return a copy of the registered components."""
        return list(self._components)

    def clear(self) -> None:
        """Remove all components and reset the order counter to zero."""
        logger.debug(f"Clearing {len(self._components)} components")
        self._components = []
        self._next_order = 0

    def __len__(self) -> int:
        """Return the number of registered components."""
        return len(self._components)
