"""C# class emitter, the notation of the original paste-as-classes feature."""

from typing import List, Tuple

from ..types import PrimitiveKind
from ..utils.naming import NamingContext, sanitize_identifier
from .base import BaseEmitter

CSHARP_KEYWORDS = frozenset({
    "abstract", "as", "base", "bool", "break", "byte", "case", "catch", "char",
    "checked", "class", "const", "continue", "decimal", "default", "delegate",
    "do", "double", "else", "enum", "event", "explicit", "extern", "false",
    "finally", "fixed", "float", "for", "foreach", "goto", "if", "implicit",
    "in", "int", "interface", "internal", "is", "lock", "long", "namespace",
    "new", "null", "object", "operator", "out", "override", "params",
    "private", "protected", "public", "readonly", "ref", "return", "sbyte",
    "sealed", "short", "sizeof", "stackalloc", "static", "string", "struct",
    "switch", "this", "throw", "true", "try", "typeof", "uint", "ulong",
    "unchecked", "unsafe", "ushort", "using", "virtual", "void", "volatile",
    "while",
})


class CSharpEmitter(BaseEmitter):
    """Emits ``public class`` declarations with auto-properties."""

    PRIMITIVE_NAMES = {
        PrimitiveKind.BOOL: "bool",
        PrimitiveKind.INTEGER: "int",
        PrimitiveKind.FLOAT: "float",
        PrimitiveKind.STRING: "string",
    }
    OPEN_TYPE = "object"

    def member_context(self, class_name: str) -> NamingContext:
        # a property may not share its enclosing class's name
        return NamingContext([class_name])

    def member_name(self, key: str) -> str:
        # property names are the lower-cased JSON key
        name = sanitize_identifier(key.lower())
        if name in CSHARP_KEYWORDS:
            name = "@" + name
        return name

    def render_nullable(self, inner: str) -> str:
        return f"{inner}?"

    def render_array(self, element: str) -> str:
        return f"{element}[]"

    def render_declaration(self, name: str, fields: List[Tuple[str, str]]) -> str:
        lines = [f"public class {name}", "{"]
        for member, type_name in fields:
            lines.append(f"    public {type_name} {member} {{ get; set; }}")
        lines.append("}")
        return "\n".join(lines)
