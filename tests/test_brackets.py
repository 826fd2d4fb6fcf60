import pytest
from hypothesis import given
from hypothesis import strategies as st

from algokit.brackets import brackets_balanced


@pytest.mark.parametrize("text", ["", "()", "[]", "{}", "([]{})", "{[()()]}"])
def test_balanced(text):
    assert brackets_balanced(text) is True


@pytest.mark.parametrize("text", ["(", ")", "(]", "([)]", "{{}", "())"])
def test_unbalanced(text):
    assert brackets_balanced(text) is False


def test_other_character_closes_innermost_bracket():
    assert brackets_balanced("(x") is True
    assert brackets_balanced("x") is False


@st.composite
def nested(draw, depth=3):
    if depth == 0 or draw(st.booleans()):
        return ""
    opener, closer = draw(st.sampled_from([("(", ")"), ("[", "]"), ("{", "}")]))
    inner = draw(nested(depth=depth - 1))
    rest = draw(nested(depth=depth - 1))
    return opener + inner + closer + rest


@given(text=nested())
def test_generated_nesting_is_balanced(text):
    assert brackets_balanced(text) is True


@given(text=nested().filter(bool))
def test_dropping_last_character_unbalances(text):
    assert brackets_balanced(text[:-1]) is False