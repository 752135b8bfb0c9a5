"""Collapse structurally identical class nodes into one canonical node."""

import logging
from typing import Dict, Hashable, Optional, Tuple

from ..models import ArrayOf, ClassForest, ClassRef, Dynamic, FieldType, Nullable, Primitive, Unknown
from ..types import ForestStageInterface

Signature = Tuple[Hashable, ...]


class Deduplicator(ForestStageInterface):
    """
    Structural deduplication of a class forest.

    Every node gets a signature built from its ordered (key, type) pairs,
    where a class reference contributes the signature of the referenced
    node. Nodes sharing a signature collapse into the first one created.
    The root node is never merged, in either direction.
    """

    def __init__(self, logger: Optional[logging.Logger] = None):
        self.logger = logger or logging.getLogger(__name__)

    def run(self, forest: ClassForest) -> ClassForest:
        return self.deduplicate(forest)

    def deduplicate(self, forest: ClassForest) -> ClassForest:
        signatures = self.compute_signatures(forest)

        canonical_ids: Dict[Signature, int] = {}
        superseded: Dict[int, int] = {}
        for node in forest:
            if node.id == forest.root_id:
                continue
            canonical_id = canonical_ids.setdefault(signatures[node.id], node.id)
            if canonical_id != node.id:
                superseded[node.id] = canonical_id

        for class_id, canonical_id in superseded.items():
            self.logger.debug(f"Class node {class_id} is identical to {canonical_id}")
            forest.discard(class_id)
        forest.rewrite_refs(superseded)

        self.logger.info(f"Deduplication kept {len(forest)} class nodes, "
                         f"removed {len(superseded)}")
        return forest

    def compute_signatures(self, forest: ClassForest) -> Dict[int, Signature]:
        """
        Compute the structural signature of every node.

        A node's signature is computed on first demand, after those of the
        nodes it references, so any node order and any forest whose
        references have been rewritten are handled.
        """
        signatures: Dict[int, Signature] = {}
        for node in forest:
            self.node_signature(node.id, forest, signatures)
        return signatures

    def node_signature(self, class_id: int, forest: ClassForest,
                       signatures: Dict[int, Signature]) -> Signature:
        if class_id not in signatures:
            signatures[class_id] = tuple(
                (key, self.type_signature(field_type, forest, signatures))
                for key, field_type in forest.get(class_id).items()
            )
        return signatures[class_id]

    def type_signature(self, field_type: FieldType, forest: ClassForest,
                       signatures: Dict[int, Signature]) -> Signature:
        if isinstance(field_type, Primitive):
            return ("primitive", field_type.kind.value)
        if isinstance(field_type, Nullable):
            return ("nullable", self.type_signature(field_type.inner, forest, signatures))
        if isinstance(field_type, ArrayOf):
            return ("array", self.type_signature(field_type.element, forest, signatures))
        if isinstance(field_type, ClassRef):
            return ("class", self.node_signature(field_type.class_id, forest, signatures))
        if isinstance(field_type, Unknown):
            return ("unknown",)
        if isinstance(field_type, Dynamic):
            return ("dynamic",)
        raise TypeError(f"Unsupported field type: {field_type!r}")
