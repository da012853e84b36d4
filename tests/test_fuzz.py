from __future__ import annotations

import os

import pytest
from yaml_enum_annotate.renderer import render_annotated
from yaml_enum_annotate.scanner import annotate, split_lines

atheris = pytest.importorskip("atheris")


def test_annotate_with_fuzzed_input():
    data = os.urandom(4096)
    provider = atheris.FuzzedDataProvider(data)

    for _ in range(128):
        if provider.remaining_bytes() == 0:
            break
        text = provider.ConsumeUnicodeNoSurrogates(256)
        annotations = annotate(text)
        assert all(0 <= line_index < len(split_lines(text)) for line_index, _ in annotations)


def test_render_with_fuzzed_enum_items():
    data = os.urandom(4096)
    provider = atheris.FuzzedDataProvider(data)
    values: list[str] = []

    while provider.remaining_bytes() > 0 and len(values) < 32:
        value = provider.ConsumeUnicodeNoSurrogates(16).replace("\n", " ").replace("\r", " ")
        values.append(value or "VALUE")

    lines = ["enum:", *(f"  - {value}" for value in values), "x-enum-varnames:"]
    lines += [f"  - {value}" for value in values]
    text = "\n".join(lines)

    rendered = render_annotated(text, annotate(text), colorize=False)
    assert len(split_lines(rendered)) == len(split_lines(text))
