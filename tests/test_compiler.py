"""
Tests for the SelectionCompiler.

Covers:
- Empty selection → sentinel row
- Output in bundle order regardless of selection order
- Stale keys (from another language's checklist) dropped
"""

import pytest

from lingosheet.compiler import EMPTY_SELECTION_TEXT, SelectionCompiler, empty_selection
from lingosheet.schemas import TranslationBundle


@pytest.fixture
def compiler():
    return SelectionCompiler()


@pytest.fixture
def bundle():
    return TranslationBundle.from_document(
        "en",
        {"instructions": {"i1": "Step one", "i2": "Step two", "i3": "Step three"}},
    )


def test_empty_selection_yields_sentinel(compiler, bundle):
    output = compiler.compile(set(), bundle)
    assert output.entries == ["No instructions selected."]
    assert output.empty_state is True
    assert output == empty_selection()


def test_single_selection(compiler, bundle):
    output = compiler.compile({"i1"}, bundle)
    assert output.entries == ["Step one"]
    assert output.empty_state is False


def test_output_follows_bundle_order(compiler, bundle):
    output = compiler.compile(frozenset(["i3", "i1"]), bundle)
    assert output.entries == ["Step one", "Step three"]


def test_stale_keys_are_skipped(compiler, bundle):
    output = compiler.compile({"i2", "gone"}, bundle)
    assert output.entries == ["Step two"]


def test_only_stale_keys_yield_sentinel(compiler, bundle):
    output = compiler.compile({"gone"}, bundle)
    assert output.entries == [EMPTY_SELECTION_TEXT]
    assert output.empty_state is True
