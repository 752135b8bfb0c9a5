"""Python dataclass emitter."""

from typing import List, Optional, Tuple

from ..types import PrimitiveKind
from ..utils.naming import python_field_name
from .base import BaseEmitter

# annotations only reach typing through the ``t`` alias; generated classes
# may be called ``List`` or ``Any``
PREAMBLE = """from __future__ import annotations

import typing as t
from dataclasses import dataclass"""


class PythonEmitter(BaseEmitter):
    """
    Emits ``@dataclass`` declarations using ``typing`` annotations.

    The declarations reference classes defined further down, so the
    output only runs behind the preamble with postponed annotations.
    """

    PRIMITIVE_NAMES = {
        PrimitiveKind.BOOL: "bool",
        PrimitiveKind.INTEGER: "int",
        PrimitiveKind.FLOAT: "float",
        PrimitiveKind.STRING: "str",
    }
    OPEN_TYPE = "t.Any"
    RESERVED_CLASS_NAMES = frozenset({"None", "True", "False"})

    def preamble(self) -> Optional[str]:
        return PREAMBLE

    def member_name(self, key: str) -> str:
        return python_field_name(key)

    def render_nullable(self, inner: str) -> str:
        return f"t.Optional[{inner}]"

    def render_array(self, element: str) -> str:
        return f"t.List[{element}]"

    def render_declaration(self, name: str, fields: List[Tuple[str, str]]) -> str:
        lines = ["@dataclass", f"class {name}:"]
        for member, type_name in fields:
            lines.append(f"    {member}: {type_name}")
        if not fields:
            lines.append("    pass")
        return "\n".join(lines)
