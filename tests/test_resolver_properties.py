"""
Property-based tests for component content resolution.

Tests list formatting, function content and nested components.
"""

import allure
import pytest
from hypothesis import given, settings, strategies as st

from prompt_composer.components import (
    ComponentKind,
    ContentType,
    GoalComponent,
    PromptComponent,
    StepsComponent,
    classify_content,
)
from prompt_composer.resolver import format_items, resolve_component, resolve_component_content


item_strategy = st.one_of(
    st.none(),
    st.just(""),
    st.text(alphabet=st.characters(blacklist_categories=("Cs",)), min_size=1, max_size=20),
)

# Items that cannot themselves look like "Step N:"
simple_item_strategy = st.one_of(st.none(), st.just(""), st.text(alphabet="abc ", min_size=1, max_size=8))


@allure.feature("Content Resolution")
@allure.story("List filtering")
@allure.severity(allure.severity_level.CRITICAL)
@settings(max_examples=100)
@given(items=st.lists(item_strategy, max_size=10), kind=st.sampled_from(list(ComponentKind)))
def test_list_items_filtered_before_formatting(items, kind):
    """
    None and empty-string items never reach the output; a list with nothing
    left resolves to the empty string.
    """
    result = resolve_component_content(items, {}, kind)
    survivors = [item for item in items if item]

    if not survivors:
        assert result == ""
    else:
        assert result == format_items(survivors, kind)
        for item in survivors:
            assert item in result


@allure.feature("Content Resolution")
@allure.story("Numbered formats count surviving items")
@allure.severity(allure.severity_level.NORMAL)
@settings(max_examples=100)
@given(items=st.lists(simple_item_strategy, max_size=10))
def test_step_numbers_follow_surviving_items(items):
    """Step numbering is 1..n over the filtered items."""
    survivors = [item for item in items if item]
    result = resolve_component_content(items, {}, ComponentKind.STEPS)

    for i, item in enumerate(survivors, start=1):
        assert f"Step {i}: {item}" in result
    assert f"Step {len(survivors) + 1}:" not in result


@allure.feature("Content Resolution")
@allure.story("List formats by kind")
@allure.severity(allure.severity_level.CRITICAL)
class TestListFormatting:
    """Example-based checks of the per-kind list formats."""

    def test_steps(self):
        assert resolve_component_content(["a", "b"], {}, "steps") == "Step 1: a\nStep 2: b"

    def test_tasks(self):
        assert resolve_component_content(["a", "b"], {}, "tasks") == "1. a\n2. b"

    def test_guardrails(self):
        assert resolve_component_content(["a", "b"], {}, "guardrails") == "- a\n- b"

    def test_constraints_filtering(self):
        assert resolve_component_content([None, "", "x", None], {}, "constraints") == "- x"

    def test_few_shots(self):
        result = resolve_component_content(["Q: 1\nA: 1", "Q: 2\nA: 2"], {}, ComponentKind.FEW_SHOTS)
        assert result == "Example 1:\nQ: 1\nA: 1\n\nExample 2:\nQ: 2\nA: 2"

    def test_other_kind_is_plain_lines(self):
        assert resolve_component_content(["a", "b"], {}, ComponentKind.CONTEXT) == "a\nb"

    def test_no_kind_is_plain_lines(self):
        assert resolve_component_content(["a", "b"], {}) == "a\nb"

    def test_tuple_content(self):
        assert resolve_component_content(("a", "b"), {}, "tasks") == "1. a\n2. b"

    def test_list_items_are_not_substituted(self):
        assert resolve_component_content(["${x}"], {"x": "y"}, "steps") == "Step 1: ${x}"

    def test_non_string_items_are_stringified(self):
        assert resolve_component_content([False, 1, True, "x"], {}, "tasks") == "1. false\n2. 1\n3. true\n4. x"


@allure.feature("Content Resolution")
@allure.story("Strings, functions and nested components")
@allure.severity(allure.severity_level.CRITICAL)
class TestContentShapes:
    """Resolution of the non-list content shapes."""

    def test_none(self):
        assert resolve_component_content(None, {}) == ""

    def test_template_substitution(self):
        assert resolve_component_content("Hi ${name}", {"name": "Ada"}) == "Hi Ada"

    def test_function_string_is_not_substituted(self):
        assert resolve_component_content(lambda p: "Hi ${name}", {"name": "Ada"}) == "Hi ${name}"

    def test_function_receives_params(self):
        assert resolve_component_content(lambda p: f"Hi {p['name']}", {"name": "Ada"}) == "Hi Ada"

    def test_function_returning_none(self):
        assert resolve_component_content(lambda p: None, {}) == ""

    def test_function_returning_list(self):
        result = resolve_component_content(lambda p: ["a", None, "b"], {}, ComponentKind.TASKS)
        assert result == "1. a\n2. b"

    def test_function_returning_unsupported_value(self):
        assert resolve_component_content(lambda p: 42, {}) == ""

    def test_function_returning_component_uses_its_kind(self):
        nested = StepsComponent(["x", "y"])
        assert resolve_component_content(lambda p: nested, {}) == "Step 1: x\nStep 2: y"

    def test_explicit_kind_overrides_nested_kind(self):
        nested = StepsComponent(["x", "y"])
        assert resolve_component_content(lambda p: nested, {}, ComponentKind.GUARDRAILS) == "- x\n- y"

    def test_nested_component_template_is_substituted(self):
        nested = GoalComponent("Help ${who}")
        assert resolve_component_content(nested, {"who": "Ada"}) == "Help Ada"

    def test_nested_function_chain(self):
        nested = PromptComponent(ComponentKind.TASKS, lambda p: [p["task"]])
        assert resolve_component_content(lambda p: nested, {"task": "Run"}) == "1. Run"

    def test_function_errors_propagate(self):
        def broken(params):
            raise RuntimeError("boom")

        with pytest.raises(RuntimeError, match="boom"):
            resolve_component_content(broken, {})

    def test_unsupported_content_raises(self):
        with pytest.raises(TypeError):
            resolve_component_content(42, {})

    def test_resolve_component_uses_component_kind(self):
        assert resolve_component(StepsComponent(["a"]), {}) == "Step 1: a"


@allure.feature("Content Resolution")
@allure.story("Content classification")
@allure.severity(allure.severity_level.NORMAL)
@pytest.mark.parametrize(
    "content, expected",
    [
        (None, ContentType.EMPTY),
        ("plain", ContentType.LITERAL),
        ("Hi ${name}", ContentType.TEMPLATE),
        (["a"], ContentType.ITEMS),
        (("a",), ContentType.ITEMS),
        (lambda p: "x", ContentType.CALLABLE),
        (GoalComponent("x"), ContentType.COMPONENT),
    ],
)
def test_classify_content(content, expected):
    assert classify_content(content) is expected
