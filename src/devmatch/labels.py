"""Display labels for enum-like profile values."""

from __future__ import annotations

import re

_SEPARATORS = re.compile(r"[_\-\s]+")

ACRONYMS = {"api", "apis", "aws", "gcp", "ci/cd", "os", "ios", "sql", "ui", "ux", "qa"}


def format_enum_label(value: str | None) -> str:
    """Turn a stored slug such as ``backend_dev`` into ``Backend Dev``.

    Words that already carry capitals (``TypeScript``, ``FastAPI``) keep
    their spelling apart from the first letter.
    """
    if not value:
        return ""
    words = [word for word in _SEPARATORS.split(value.strip()) if word]
    return " ".join(_format_word(word) for word in words)


def _format_word(word: str) -> str:
    if word.lower() in ACRONYMS:
        return word.upper()
    if word.islower():
        return word.capitalize()
    return word[:1].upper() + word[1:]


__all__ = ["format_enum_label"]
