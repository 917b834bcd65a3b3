from __future__ import annotations

from mkdocs_bookmap.text.normalize import normalize


def test_normalize_strips_key_quotes_and_whitespace():
    assert normalize("site_name: 'My Guide'", "site_name:") == "My Guide"
    assert normalize('site_name: "My Guide"  ', "site_name:") == "My Guide"


def test_normalize_removes_only_first_key_occurrence():
    assert normalize("- Step - by - step", "-") == "Step - by - step"


def test_normalize_without_key_only_trims():
    assert normalize("  intro.md ", "") == "intro.md"
    assert normalize(" 'intro.md'") == "intro.md"


def test_normalize_unmatched_key_leaves_text():
    assert normalize(" Guide ", "site_name:") == "Guide"


def test_normalize_drops_embedded_quotes():
    assert normalize("Don't panic") == "Dont panic"
