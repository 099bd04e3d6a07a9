"""
Tests for ResourceStore and bundle key resolution.

Covers:
- Dotted path lookup (sections, instructions, misses)
- Bundle parsing rules (root mapping, mandatory instructions)
- Write-once behaviour (first bundle wins, sealed store rejects writes)
"""

import pytest
from pydantic import ValidationError

from conftest import make_store
from lingosheet.exceptions import LanguageNotLoaded
from lingosheet.schemas import TranslationBundle
from lingosheet.store import ResourceStore


# ── Key resolution ─────────────────────────────────────────────────────


def test_lookup_section_key(store):
    assert store.lookup("en", "ui.title") == "Instruction Sheet"
    assert store.lookup("es", "ui.title") == "Hoja de instrucciones"


def test_lookup_instruction_key(store):
    assert store.lookup("es", "instructions.i2") == "Paso dos"


def test_lookup_missing_subkey_is_miss(store):
    assert store.lookup("es", "ui.generate_button") is None


def test_lookup_missing_section_is_miss(store):
    assert store.lookup("en", "footer.note") is None


def test_lookup_unknown_language_is_miss(store):
    assert store.lookup("fr", "ui.title") is None


def test_resolve_section_itself_is_not_a_string():
    bundle = TranslationBundle.from_document("en", {"ui": {"title": "T"}, "instructions": {}})
    assert bundle.resolve("ui") is None
    assert bundle.resolve("") is None


def test_resolve_deep_path():
    bundle = TranslationBundle.from_document(
        "en",
        {"help": {"faq": {"q1": "Why?"}}, "instructions": {}},
    )
    assert bundle.resolve("help.faq.q1") == "Why?"
    assert bundle.resolve("help.faq.q1.extra") is None


def test_resolve_empty_string_is_miss():
    bundle = TranslationBundle.from_document("es", {"ui": {"title": ""}, "instructions": {}})
    assert bundle.resolve("ui.title") is None


# ── Parsing ────────────────────────────────────────────────────────────


def test_instruction_order_preserved():
    bundle = TranslationBundle.from_document(
        "en", {"instructions": {"z": "Last", "a": "First", "m": "Middle"}}
    )
    assert list(bundle.instructions) == ["z", "a", "m"]


def test_root_must_be_mapping():
    with pytest.raises(ValueError):
        TranslationBundle.from_document("en", ["not", "a", "mapping"])


def test_instructions_section_required():
    with pytest.raises(ValueError, match="instructions"):
        TranslationBundle.from_document("en", {"ui": {"title": "T"}})


def test_instruction_text_must_be_string():
    with pytest.raises(ValidationError):
        TranslationBundle.from_document("en", {"instructions": {"i1": 42}})


# ── Write-once ─────────────────────────────────────────────────────────


def test_bundle_raises_language_not_loaded(store):
    with pytest.raises(LanguageNotLoaded) as exc_info:
        store.bundle("fr")
    assert exc_info.value.language == "fr"


def test_first_bundle_wins():
    store = ResourceStore()
    store.add(TranslationBundle.from_document("en", {"instructions": {"i1": "First"}}))
    store.add(TranslationBundle.from_document("en", {"instructions": {"i1": "Second"}}))
    assert store.lookup("en", "instructions.i1") == "First"
    assert len(store) == 1


def test_sealed_store_rejects_writes(en_doc):
    store = make_store(en=en_doc)
    assert store.sealed
    with pytest.raises(RuntimeError):
        store.add(TranslationBundle.from_document("es", {"instructions": {}}))


def test_languages_in_load_order(en_doc, es_doc):
    store = make_store(es=es_doc, en=en_doc)
    assert store.languages == ["es", "en"]
    assert "en" in store
    assert "fr" not in store
