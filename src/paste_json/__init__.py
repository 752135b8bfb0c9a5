"""
paste-json - Infer class declarations from a JSON document.

Derives one declaration per distinct object shape of a JSON document,
names each after the key it was found under, and prints them in a
deterministic order.
"""

from .generator import ClassGenerator
from .inference import DEFAULT_MAX_DEPTH
from .types import (
    ErrorType,
    GenerationError,
    GenerationResult,
    JsonParseError,
    StackDepthExceededError,
    TargetLanguage,
    UnsupportedRootError,
    UnsupportedValueError,
)

__version__ = "1.0.0"
__all__ = [
    "ClassGenerator",
    "DEFAULT_MAX_DEPTH",
    "ErrorType",
    "GenerationError",
    "GenerationResult",
    "JsonParseError",
    "StackDepthExceededError",
    "TargetLanguage",
    "UnsupportedRootError",
    "UnsupportedValueError",
]
