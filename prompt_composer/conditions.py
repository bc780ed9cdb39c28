"""
Conditional component evaluation.

A component carrying a Condition is replaced, in place, by the components of
whichever branch the predicate selects.
"""

import logging
from typing import Optional, Union

from .components.base import Condition, ParameterMap, PromptComponent, Predicate


logger = logging.getLogger(__name__)

ComponentOrList = Union[PromptComponent, list[PromptComponent]]


def _as_list(components: ComponentOrList) -> list[PromptComponent]:
    if isinstance(components, (list, tuple)):
        return list(components)
    return [components]


def create_condition(
    predicate: Predicate,
    then: ComponentOrList,
    otherwise: Optional[ComponentOrList] = None,
) -> Condition:
    """Build a Condition.

    Example:
        adult = create_condition(
            lambda p: p["age"] > 18,
            GoalComponent("Discuss retirement plans"),
            GoalComponent("Discuss saving pocket money"),
        )
    """
    return Condition(predicate=predicate, then=then, otherwise=otherwise)


def evaluate_condition(condition: Condition, params: ParameterMap) -> list[PromptComponent]:
    """Evaluate a condition against the build parameters.

    Exceptions raised by the predicate propagate unchanged.

    Args:
        condition: The condition to evaluate.
        params: Build parameters passed to the predicate.

    Returns:
        The ``then`` components if the predicate is truthy, otherwise the
        ``otherwise`` components, or an empty list when there is no
        ``otherwise`` branch.
    """
    if condition.predicate(params):
        logger.debug("Condition matched, using 'then' branch")
        return _as_list(condition.then)

    if condition.otherwise is not None:
        logger.debug("Condition did not match, using 'otherwise' branch")
        return _as_list(condition.otherwise)

    return []


def filter_components_by_condition(
    components: list[PromptComponent],
    params: ParameterMap,
) -> list[PromptComponent]:
    """Expand conditional components, keeping relative positions.

    Components without a condition pass through. Each conditional component
    is replaced by the zero or more components its condition yields.
    """
    result: list[PromptComponent] = []
    for component in components:
        if component.condition is None:
            result.append(component)
        else:
            result.extend(evaluate_condition(component.condition, params))
    return result
