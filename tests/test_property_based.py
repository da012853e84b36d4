from __future__ import annotations

import string

from hypothesis import given
from hypothesis import strategies as st
from yaml_enum_annotate.renderer import build_decorations
from yaml_enum_annotate.scanner import annotate, split_lines

value_strategy = st.text(alphabet=string.ascii_letters + string.digits + "_", min_size=1, max_size=16)


def _document(indent: int, enum_values: list[str], varnames: list[str]) -> str:
    pad = " " * indent
    lines = [f"{pad}enum:", *(f"{pad}  - {value}" for value in enum_values)]
    lines += [f"{pad}x-enum-varnames:", *(f"{pad}  - {name}" for name in varnames)]
    return "\n".join(lines) + "\n"


@given(st.text(max_size=300))
def test_annotate_never_raises_and_points_at_real_lines(text: str):
    annotations = annotate(text)

    line_count = len(split_lines(text))
    assert all(0 <= line_index < line_count for line_index, _ in annotations)


@given(st.text(alphabet=st.characters(exclude_characters=":"), max_size=300))
def test_no_key_lines_means_no_annotations(text: str):
    assert annotate(text) == []


@given(st.text(max_size=300))
def test_annotate_is_deterministic(text: str):
    assert annotate(text) == annotate(text)


@given(
    st.integers(min_value=0, max_value=6),
    st.lists(value_strategy, max_size=10),
    st.lists(value_strategy, max_size=10),
)
def test_pairs_are_positional_and_truncated(indent: int, enum_values: list[str], varnames: list[str]):
    annotations = annotate(_document(indent, enum_values, varnames))

    expected_count = min(len(enum_values), len(varnames))
    assert [text for _, text in annotations] == varnames[:expected_count]
    assert [line_index for line_index, _ in annotations] == list(range(1, expected_count + 1))


@given(st.lists(st.tuples(st.integers(min_value=-5, max_value=20), value_strategy), max_size=20))
def test_decorations_are_unique_per_line(annotations):
    decorations = build_decorations(annotations, line_count=10)

    line_indices = [decoration.line_index for decoration in decorations]
    assert len(line_indices) == len(set(line_indices))
    assert all(0 <= line_index < 10 for line_index in line_indices)
