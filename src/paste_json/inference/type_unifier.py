"""Unification of field types observed for the same logical field."""

import logging
from typing import Iterable, Optional

from ..models import (
    ArrayOf, ClassForest, ClassRef, Dynamic, FieldType, Primitive, Unknown, make_nullable
)
from ..types import PrimitiveKind

_NUMERIC_KINDS = {PrimitiveKind.INTEGER, PrimitiveKind.FLOAT}


class TypeUnifier:
    """
    Merge two observed field types into one consistent type.

    Rules, in priority order:

    1. identical types unify to themselves and ``Unknown`` is the identity;
    2. if either side is nullable, the inner types are unified and the
       result is wrapped in a single ``Nullable``;
    3. ``Integer`` and ``Float`` widen to ``Float``;
    4. two class references are merged over the union of their keys, keys
       seen on one side only become nullable;
    5. two arrays unify their element types;
    6. anything else falls back to ``Dynamic``.

    Class merges rewrite the forest in place: the left node survives and
    the right node is discarded. Nodes that end up hidden behind a
    ``Dynamic`` fallback are discarded as well.
    """

    def __init__(self, forest: ClassForest, logger: Optional[logging.Logger] = None):
        self.forest = forest
        self.logger = logger or logging.getLogger(__name__)

    def unify(self, left: FieldType, right: FieldType) -> FieldType:
        if left == right:
            return left
        if isinstance(left, Unknown):
            return right
        if isinstance(right, Unknown):
            return left

        if left.is_nullable or right.is_nullable:
            return make_nullable(self.unify(left.strip_nullable(), right.strip_nullable()))

        if isinstance(left, Dynamic) or isinstance(right, Dynamic):
            return self._fallback(left, right)

        if isinstance(left, Primitive) and isinstance(right, Primitive):
            if left.kind in _NUMERIC_KINDS and right.kind in _NUMERIC_KINDS:
                return Primitive(PrimitiveKind.FLOAT)
            return self._fallback(left, right)

        if isinstance(left, ClassRef) and isinstance(right, ClassRef):
            return self.merge_classes(left.class_id, right.class_id)

        if isinstance(left, ArrayOf) and isinstance(right, ArrayOf):
            return ArrayOf(self.unify(left.element, right.element))

        return self._fallback(left, right)

    def unify_all(self, field_types: Iterable[FieldType]) -> FieldType:
        """Fold every observed type into one; no observations yield ``Unknown``."""
        result: FieldType = Unknown()
        for field_type in field_types:
            result = self.unify(result, field_type)
        return result

    def merge_classes(self, left_id: int, right_id: int) -> ClassRef:
        """Merge the right class node into the left one and discard the right node."""
        left = self.forest.get(left_id)
        right = self.forest.get(right_id)

        for key, left_type in left.items():
            if key in right.fields:
                left.set_field(key, self.unify(left_type, right.fields[key]))
            else:
                left.set_field(key, make_nullable(left_type))

        for key, right_type in right.items():
            if key not in left.fields:
                left.add_field(key, make_nullable(right_type))

        self.forest.discard(right_id)
        self.logger.debug(f"Merged class node {right_id} into {left_id}")
        return ClassRef(left_id)

    def _fallback(self, left: FieldType, right: FieldType) -> Dynamic:
        self.logger.debug(f"Cannot unify {left!r} with {right!r}, falling back to dynamic")
        self.forest.discard_type(left)
        self.forest.discard_type(right)
        return Dynamic()
