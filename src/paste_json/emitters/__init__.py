"""Declaration emitters for the supported target notations."""

import logging
from typing import Optional, Union

from ..types import TargetLanguage
from .base import BaseEmitter
from .csharp import CSharpEmitter
from .typescript import TypeScriptEmitter
from .python import PythonEmitter

EMITTERS = {
    TargetLanguage.CSHARP: CSharpEmitter,
    TargetLanguage.TYPESCRIPT: TypeScriptEmitter,
    TargetLanguage.PYTHON: PythonEmitter,
}


def get_emitter(target: Union[TargetLanguage, str],
                logger: Optional[logging.Logger] = None) -> BaseEmitter:
    """Create the emitter for a target language or its name."""
    if isinstance(target, str):
        try:
            target = TargetLanguage(target.lower())
        except ValueError:
            supported = ", ".join(t.value for t in TargetLanguage)
            raise ValueError(f"Unsupported target '{target}'; expected one of: {supported}")
    return EMITTERS[target](logger)


__all__ = [
    "BaseEmitter", "CSharpEmitter", "TypeScriptEmitter", "PythonEmitter",
    "EMITTERS", "get_emitter",
]
