"""TypeScript interface emitter."""

import json
from typing import List, Tuple

from ..types import PrimitiveKind
from ..utils.naming import is_identifier
from .base import BaseEmitter


class TypeScriptEmitter(BaseEmitter):
    """Emits ``export interface`` declarations."""

    PRIMITIVE_NAMES = {
        PrimitiveKind.BOOL: "boolean",
        PrimitiveKind.INTEGER: "number",
        PrimitiveKind.FLOAT: "number",
        PrimitiveKind.STRING: "string",
    }
    OPEN_TYPE = "any"

    def member_name(self, key: str) -> str:
        return key if is_identifier(key) else json.dumps(key)

    def render_nullable(self, inner: str) -> str:
        return f"{inner} | null"

    def render_array(self, element: str) -> str:
        if " " in element:
            return f"({element})[]"
        return f"{element}[]"

    def render_declaration(self, name: str, fields: List[Tuple[str, str]]) -> str:
        lines = [f"export interface {name} {{"]
        for member, type_name in fields:
            lines.append(f"  {member}: {type_name};")
        lines.append("}")
        return "\n".join(lines)
