"""Data models for inferred schemas."""

from .field_type import (
    FieldType, Primitive, Nullable, ArrayOf, ClassRef, Unknown, Dynamic, make_nullable
)
from .class_node import ClassNode, ClassForest

__all__ = [
    "FieldType", "Primitive", "Nullable", "ArrayOf", "ClassRef", "Unknown",
    "Dynamic", "make_nullable", "ClassNode", "ClassForest",
]
