from hypothesis import given
from hypothesis import strategies as st

from algokit.kmp import kmp_search, prefix_table

small_text = st.text(alphabet="ab", max_size=20)


def test_table_starts_with_fixed_entries():
    table = prefix_table("abcabd")
    assert table[0] == -1
    assert table[1] == 0
    assert len(table) == 6


def test_table_for_repeated_pattern():
    assert prefix_table("aaaa") == [-1, 0, 1, 2]


def test_empty_and_single_pattern_tables():
    assert prefix_table("") == []
    assert prefix_table("z") == [-1]


@given(pattern=small_text.filter(bool))
def test_table_entries_are_borders(pattern):
    table = prefix_table(pattern)
    for i, border in enumerate(table[1:], start=1):
        prefix = pattern[:i]
        assert 0 <= border < i
        assert prefix[:border] == prefix[i - border:]
        assert all(prefix[:k] != prefix[i - k:] for k in range(border + 1, i))


@given(text=small_text, pattern=st.text(alphabet="ab", max_size=5))
def test_search_agrees_with_str_find(text, pattern):
    assert kmp_search(text, pattern) == text.find(pattern)


@given(prefix=small_text, pattern=small_text, suffix=small_text)
def test_found_position_holds_pattern(prefix, pattern, suffix):
    text = prefix + pattern + suffix
    position = kmp_search(text, pattern)
    assert 0 <= position <= len(prefix)
    assert text[position:position + len(pattern)] == pattern


def test_missing_pattern_gives_minus_one():
    assert kmp_search("abcabc", "abd") == -1
    assert kmp_search("ab", "abc") == -1


def test_empty_pattern_matches_at_start():
    assert kmp_search("anything", "") == 0


def test_works_on_lists():
    assert kmp_search([1, 2, 1, 2, 3], [1, 2, 3]) == 2