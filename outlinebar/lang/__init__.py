"""Language detection and item-matcher registry.

Languages are resolved from the file suffix first, then from Pygments lexer
metadata (filename patterns, then a shebang line). Only languages with a
registered matcher can be outlined.
"""

from __future__ import annotations

from pathlib import Path

from pygments.lexers import get_lexer_for_filename, guess_lexer
from pygments.util import ClassNotFound

from .python import match_python_item
from .types import ItemKind, ItemMatch, ItemMatcher

LANGUAGE_BY_SUFFIX: dict[str, str] = {
    ".py": "python",
    ".pyi": "python",
    ".pyw": "python",
}

MATCHERS_BY_LANGUAGE: dict[str, ItemMatcher] = {
    "python": match_python_item,
}

# Pygments lexer aliases that share the Python matcher.
LANGUAGE_ALIASES: dict[str, str] = {
    "py": "python",
    "python3": "python",
    "py3": "python",
    "python2": "python",
    "py2": "python",
    "sage": "python",
    "bazel": "python",
    "starlark": "python",
}


class UnsupportedLanguageError(LookupError):
    """Raised when no item matcher is registered for a language."""


def _language_from_aliases(aliases: list[str]) -> str | None:
    for alias in aliases:
        if alias in MATCHERS_BY_LANGUAGE:
            return alias
        if alias in LANGUAGE_ALIASES:
            return LANGUAGE_ALIASES[alias]
    return None


def language_for_path(path: Path, source: str = "") -> str | None:
    """Return the outline language key for ``path``, or ``None`` when unknown."""
    language = LANGUAGE_BY_SUFFIX.get(path.suffix.lower())
    if language is not None:
        return language

    try:
        lexer = get_lexer_for_filename(path.name)
    except ClassNotFound:
        lexer = None
    if lexer is not None:
        language = _language_from_aliases(list(lexer.aliases))
        if language is not None:
            return language

    if source.startswith("#!"):
        shebang = source.split("\n", 1)[0]
        try:
            lexer = guess_lexer(shebang)
        except ClassNotFound:
            return None
        return _language_from_aliases(list(lexer.aliases))
    return None


def matcher_for_language(language: str) -> ItemMatcher:
    """Return the item matcher registered for ``language``."""
    key = LANGUAGE_ALIASES.get(language, language)
    matcher = MATCHERS_BY_LANGUAGE.get(key)
    if matcher is None:
        supported = ", ".join(sorted(MATCHERS_BY_LANGUAGE))
        raise UnsupportedLanguageError(f"No outline matcher configured for {language!r} (supported: {supported}).")
    return matcher


__all__ = [
    "ItemKind",
    "ItemMatch",
    "ItemMatcher",
    "LANGUAGE_BY_SUFFIX",
    "MATCHERS_BY_LANGUAGE",
    "UnsupportedLanguageError",
    "language_for_path",
    "match_python_item",
    "matcher_for_language",
]
