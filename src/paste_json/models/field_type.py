"""Field type variants inferred from JSON values."""

from dataclasses import dataclass
from typing import Iterator

from ..types import PrimitiveKind


class FieldType:
    """Base class of every inferred field type."""

    @property
    def is_nullable(self) -> bool:
        return False

    def strip_nullable(self) -> 'FieldType':
        """Return the type without its outer Nullable wrapper."""
        return self

    def class_refs(self) -> Iterator['ClassRef']:
        """Yield every ClassRef nested inside this type."""
        return iter(())


@dataclass(frozen=True)
class Primitive(FieldType):
    """A scalar JSON value."""
    kind: PrimitiveKind

    def __repr__(self) -> str:
        return f"Primitive({self.kind.value})"


@dataclass(frozen=True)
class Nullable(FieldType):
    """A type that is null or absent in at least one observed instance."""
    inner: FieldType

    def __post_init__(self):
        if isinstance(self.inner, Nullable):
            raise ValueError("Nullable types cannot be nested")

    @property
    def is_nullable(self) -> bool:
        return True

    def strip_nullable(self) -> FieldType:
        return self.inner

    def class_refs(self) -> Iterator['ClassRef']:
        return self.inner.class_refs()


@dataclass(frozen=True)
class ArrayOf(FieldType):
    """A JSON array whose elements unify to ``element``."""
    element: FieldType

    def class_refs(self) -> Iterator['ClassRef']:
        return self.element.class_refs()


@dataclass(frozen=True)
class ClassRef(FieldType):
    """Reference to a class node of the forest by id."""
    class_id: int

    def class_refs(self) -> Iterator['ClassRef']:
        yield self


@dataclass(frozen=True)
class Unknown(FieldType):
    """Placeholder for a type with no observed evidence (empty array, lone null)."""


@dataclass(frozen=True)
class Dynamic(FieldType):
    """Fallback for observations that cannot be unified."""


def make_nullable(field_type: FieldType) -> Nullable:
    """Wrap a type in Nullable without double wrapping."""
    if isinstance(field_type, Nullable):
        return field_type
    return Nullable(field_type)

