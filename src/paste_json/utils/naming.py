"""Helpers for turning JSON keys into identifiers."""

import keyword
import re
from typing import Iterable, Set

_INVALID_IDENTIFIER_CHARS = re.compile(r"\W")


class NamingContext:
    """Registry of names already handed out within one scope."""

    def __init__(self, reserved: Iterable[str] = ()):
        self._used: Set[str] = set(reserved)

    def __contains__(self, name: str) -> bool:
        return name in self._used

    def claim(self, base_name: str) -> str:
        """Return ``base_name`` if free, otherwise the first free ``base_name2``, ``base_name3``, ..."""
        name = base_name
        suffix = 2
        while name in self._used:
            name = f"{base_name}{suffix}"
            suffix += 1
        self._used.add(name)
        return name


def sanitize_identifier(name: str, empty_fallback: str = "_") -> str:
    """
    Make ``name`` usable as an identifier.

    Characters outside ``\\w`` become underscores and a leading digit is
    prefixed with an underscore.
    """
    if not name:
        return empty_fallback
    sanitized = _INVALID_IDENTIFIER_CHARS.sub("_", name)
    if sanitized[0].isdigit():
        sanitized = "_" + sanitized
    return sanitized


def capitalize_key(key: str) -> str:
    """Upper-case only the first character: ``items`` -> ``Items``, ``first_name`` -> ``First_name``."""
    sanitized = sanitize_identifier(key, empty_fallback="Anonymous")
    return sanitized[:1].upper() + sanitized[1:]


def python_field_name(key: str) -> str:
    name = sanitize_identifier(key)
    if keyword.iskeyword(name):
        name += "_"
    return name


def is_identifier(name: str) -> bool:
    return name.isidentifier()
