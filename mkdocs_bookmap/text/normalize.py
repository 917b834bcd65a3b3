"""Text normalization helpers for navigation lines."""

from __future__ import annotations

QUOTE_CHARACTERS = ("'", '"')


def normalize(text: str, key: str = "") -> str:
    """Strip *key*, quote characters and surrounding whitespace from *text*.

    Only the first occurrence of *key* is removed. An empty or unmatched key
    leaves the text untouched apart from quote removal and trimming.
    """

    if key:
        text = text.replace(key, "", 1)
    for quote in QUOTE_CHARACTERS:
        text = text.replace(quote, "")
    return text.strip()


__all__ = ["QUOTE_CHARACTERS", "normalize"]
