"""Class node and class forest models."""

import logging
from dataclasses import dataclass, field
from typing import Callable, Dict, Iterator, List, Optional, Tuple

from .field_type import ArrayOf, ClassRef, FieldType, Nullable


@dataclass
class ClassNode:
    """
    A candidate class derived from one observed JSON object.

    Fields keep the key order in which they were first encountered.
    """

    id: int
    origin_key: Optional[str]
    fields: Dict[str, FieldType] = field(default_factory=dict)
    declared_name: Optional[str] = None

    def add_field(self, key: str, field_type: FieldType) -> None:
        """Append a new field; keys must be unique within a node."""
        if key in self.fields:
            raise ValueError(f"Duplicate field key '{key}' in class node {self.id}")
        self.fields[key] = field_type

    def set_field(self, key: str, field_type: FieldType) -> None:
        """Replace the type of an existing field, keeping its position."""
        if key not in self.fields:
            raise KeyError(key)
        self.fields[key] = field_type

    def items(self) -> List[Tuple[str, FieldType]]:
        return list(self.fields.items())

    def is_root(self) -> bool:
        return self.origin_key is None

    def referenced_ids(self) -> List[int]:
        """Ids of every class referenced by this node's fields, in field order."""
        return [ref.class_id for field_type in self.fields.values()
                for ref in field_type.class_refs()]


class ClassForest:
    """
    Registry of class nodes produced for one document.

    Nodes are kept in creation order, which is the pre-order traversal
    order of the source document. ClassRef ids are lookup keys into the
    registry.
    """

    def __init__(self, logger: Optional[logging.Logger] = None):
        self.logger = logger or logging.getLogger(__name__)
        self._nodes: Dict[int, ClassNode] = {}
        self._next_id = 0
        self.root_id: Optional[int] = None

    def create_node(self, origin_key: Optional[str]) -> ClassNode:
        """Create and register a node; the first node without a key is the root."""
        node = ClassNode(id=self._next_id, origin_key=origin_key)
        self._next_id += 1
        self._nodes[node.id] = node
        if origin_key is None:
            if self.root_id is not None:
                raise ValueError("Class forest already has a root node")
            self.root_id = node.id
        return node

    @property
    def root(self) -> ClassNode:
        if self.root_id is None:
            raise ValueError("Class forest has no root node")
        return self._nodes[self.root_id]

    def get(self, class_id: int) -> ClassNode:
        return self._nodes[class_id]

    def __contains__(self, class_id: int) -> bool:
        return class_id in self._nodes

    def __iter__(self) -> Iterator[ClassNode]:
        return iter(list(self._nodes.values()))

    def __len__(self) -> int:
        return len(self._nodes)

    def discard(self, class_id: int) -> None:
        """Remove a single node from the registry."""
        if class_id == self.root_id:
            raise ValueError("The root class node cannot be discarded")
        del self._nodes[class_id]

    def discard_type(self, field_type: FieldType) -> None:
        """Remove every node reachable from a field type."""
        pending = [ref.class_id for ref in field_type.class_refs()]
        while pending:
            class_id = pending.pop()
            if class_id not in self._nodes:
                continue
            pending.extend(self._nodes[class_id].referenced_ids())
            self.logger.debug(f"Discarding unreachable class node {class_id}")
            self.discard(class_id)

    def map_types(self, transform: Callable[[FieldType], FieldType]) -> None:
        """Apply ``transform`` to every field type of every node."""
        for node in self._nodes.values():
            for key, field_type in node.items():
                node.set_field(key, transform(field_type))

    def rewrite_refs(self, mapping: Dict[int, int]) -> None:
        """Point every ClassRef whose id appears in ``mapping`` at its new id."""
        if not mapping:
            return

        def rewrite(field_type: FieldType) -> FieldType:
            if isinstance(field_type, ClassRef):
                return ClassRef(mapping.get(field_type.class_id, field_type.class_id))
            if isinstance(field_type, Nullable):
                return Nullable(rewrite(field_type.inner))
            if isinstance(field_type, ArrayOf):
                return ArrayOf(rewrite(field_type.element))
            return field_type

        self.map_types(rewrite)
