"""Utility modules for paste-json."""

from .validation import ValidationUtils
from .naming import NamingContext, capitalize_key, sanitize_identifier

__all__ = ["ValidationUtils", "NamingContext", "capitalize_key", "sanitize_identifier"]
