"""Property-based tests for configuration merging.

Invariants covered:
- Aggregation: every value assigned to a parameter survives, in order
- Source splitting: merging sources one after another equals merging their
  concatenation
- Comments and blank lines never change the result
- Numeric suffixes never reach the merged keys
"""

from hypothesis import given, strategies as st

from warden.config import merge_lines, normalize_key

# =============================================================================
# Strategies
# =============================================================================

_SEGMENT_ALPHABET = "abcdefghijklmnopqrstuvwxyz"
_VALUE_ALPHABET = (
    "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789"
    " .,:;/=+-_*'\"#"
)

segment = st.text(alphabet=_SEGMENT_ALPHABET, min_size=1, max_size=8)

# Parameter names such as dbms.memory.heap
base_key = st.lists(segment, min_size=1, max_size=4).map(".".join)

# Optional aggregation suffix such as .0 or .12
suffix = st.one_of(st.just(""), st.integers(0, 99).map(lambda n: f".{n}"))

raw_key = st.tuples(base_key, suffix).map("".join)

value = st.text(alphabet=_VALUE_ALPHABET, min_size=1, max_size=30)

assignment = st.tuples(raw_key, value)

comment = st.one_of(
    st.just(""),
    st.text(alphabet=_VALUE_ALPHABET, max_size=30).map(lambda s: f"#{s}"),
)


def _lines(assignments: list[tuple[str, str]]) -> list[str]:
    return [f"{key}={val}\n" for key, val in assignments]


# =============================================================================
# Properties
# =============================================================================


@given(st.lists(assignment, max_size=20))
def test_every_value_survives_in_order(assignments: list[tuple[str, str]]) -> None:
    merged = merge_lines({}, _lines(assignments))

    expected: dict[str, list[str]] = {}
    for key, val in assignments:
        expected.setdefault(normalize_key(key), []).append(val)

    assert merged == {key: " ".join(vals) for key, vals in expected.items()}


@given(st.lists(assignment, max_size=10), st.lists(assignment, max_size=10))
def test_sequential_sources_equal_concatenation(
    first: list[tuple[str, str]], second: list[tuple[str, str]]
) -> None:
    sequential = merge_lines(merge_lines({}, _lines(first)), _lines(second))
    combined = merge_lines({}, _lines(first) + _lines(second))

    assert sequential == combined


@given(st.lists(assignment, max_size=10), st.lists(comment, max_size=10), st.data())
def test_comments_do_not_change_result(
    assignments: list[tuple[str, str]], comments: list[str], data: st.DataObject
) -> None:
    lines = _lines(assignments)
    noisy = list(lines)
    for line in comments:
        position = data.draw(st.integers(0, len(noisy)))
        noisy.insert(position, f"{line}\n")

    assert merge_lines({}, noisy) == merge_lines({}, lines)


@given(base_key, st.integers(0, 99))
def test_suffix_names_the_base_parameter(key: str, index: int) -> None:
    assert normalize_key(f"{key}.{index}") == normalize_key(key)


@given(st.lists(assignment, max_size=20))
def test_merged_keys_have_no_dots_or_suffixes(
    assignments: list[tuple[str, str]],
) -> None:
    merged = merge_lines({}, _lines(assignments))

    for key in merged:
        assert "." not in key
        assert not key.rsplit("_", 1)[-1].isdigit()
