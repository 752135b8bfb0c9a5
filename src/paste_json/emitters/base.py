"""Shared emitter behaviour."""

import logging
from typing import Dict, FrozenSet, List, Optional, Tuple

from ..models import ArrayOf, ClassForest, ClassNode, ClassRef, Dynamic, FieldType, Nullable, Primitive, Unknown
from ..types import EmitterInterface, PrimitiveKind
from ..utils.naming import NamingContext


class BaseEmitter(EmitterInterface):
    """
    Base class for declaration emitters.

    Subclasses provide the scalar name table, the open type used for
    unknown and dynamic types, the member name derived from a JSON key,
    and the text of nullable, array and declaration forms. Member names
    are unique within a declaration; a collision gets a numeric suffix.
    """

    PRIMITIVE_NAMES: Dict[PrimitiveKind, str] = {}
    OPEN_TYPE = "object"
    # class names the target cannot declare
    RESERVED_CLASS_NAMES: FrozenSet[str] = frozenset()

    def __init__(self, logger: Optional[logging.Logger] = None):
        self.logger = logger or logging.getLogger(__name__)

    def preamble(self) -> Optional[str]:
        """Text that must precede the declarations, if any."""
        return None

    def emit(self, forest: ClassForest) -> List[str]:
        """Render the root declaration first, then every other node in creation order."""
        root = forest.root
        nodes = [root] + [node for node in forest if node.id != root.id]
        declarations = [self._emit_node(node, forest) for node in nodes]
        self.logger.info(f"Emitted {len(declarations)} declarations")
        return declarations

    def render_type(self, field_type: FieldType, forest: ClassForest) -> str:
        if isinstance(field_type, Primitive):
            return self.PRIMITIVE_NAMES[field_type.kind]
        if isinstance(field_type, Nullable):
            if isinstance(field_type.inner, (Unknown, Dynamic)):
                return self.OPEN_TYPE
            return self.render_nullable(self.render_type(field_type.inner, forest))
        if isinstance(field_type, ArrayOf):
            return self.render_array(self.render_type(field_type.element, forest))
        if isinstance(field_type, ClassRef):
            return forest.get(field_type.class_id).declared_name
        if isinstance(field_type, (Unknown, Dynamic)):
            return self.OPEN_TYPE
        raise TypeError(f"Unsupported field type: {field_type!r}")

    def _emit_node(self, node: ClassNode, forest: ClassForest) -> str:
        if node.declared_name is None:
            raise ValueError(f"Class node {node.id} has not been named")
        members = self.member_context(node.declared_name)
        fields = []
        for key, field_type in node.items():
            base_name = self.member_name(key)
            member = members.claim(base_name)
            if member != base_name:
                self.logger.debug(f"Member '{base_name}' of {node.declared_name} "
                                  f"already taken, using '{member}'")
            fields.append((member, self.render_type(field_type, forest)))
        return self.render_declaration(node.declared_name, fields)

    def member_context(self, class_name: str) -> NamingContext:
        return NamingContext()

    def member_name(self, key: str) -> str:
        raise NotImplementedError

    def render_nullable(self, inner: str) -> str:
        raise NotImplementedError

    def render_array(self, element: str) -> str:
        raise NotImplementedError

    def render_declaration(self, name: str, fields: List[Tuple[str, str]]) -> str:
        raise NotImplementedError
