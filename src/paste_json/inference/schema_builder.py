"""Schema builder: walks a JSON value tree and produces a class forest."""

import logging
from typing import Any, Dict, List, Optional

from ..models import (
    ArrayOf, ClassForest, ClassRef, FieldType, Nullable, Primitive, Unknown
)
from ..types import (
    PrimitiveKind, StackDepthExceededError, UnsupportedRootError, UnsupportedValueError
)
from .type_unifier import TypeUnifier

DEFAULT_MAX_DEPTH = 128


def json_type_name(value: Any) -> str:
    """Name of the JSON type of a decoded value, for messages."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, list):
        return "array"
    if isinstance(value, dict):
        return "object"
    return type(value).__name__


class SchemaBuilder:
    """
    Recursive builder turning a decoded JSON document into class nodes.

    One class node is created per object encountered, in pre-order. Objects
    found inside the same array are unified into a single node as they are
    visited, so the forest only ever holds one node per array of objects.
    """

    def __init__(self, max_depth: int = DEFAULT_MAX_DEPTH,
                 logger: Optional[logging.Logger] = None):
        """
        Initialize the schema builder.

        Args:
            max_depth: Maximum nesting depth of objects and arrays
            logger: Optional logger instance
        """
        if max_depth < 1:
            raise ValueError("max_depth must be at least 1")
        self.max_depth = max_depth
        self.logger = logger or logging.getLogger(__name__)

    def build(self, value: Any) -> ClassForest:
        """
        Build the class forest for a document.

        Args:
            value: Decoded JSON document

        Returns:
            ClassForest whose root node describes the top-level object

        Raises:
            UnsupportedRootError: If the document is not an object
            StackDepthExceededError: If nesting exceeds ``max_depth``
        """
        if not isinstance(value, dict):
            raise UnsupportedRootError(
                f"Unsupported root data type: {json_type_name(value)}; "
                "the top-level JSON value must be an object",
                context={"root_type": json_type_name(value)}
            )

        forest = ClassForest(self.logger)
        unifier = TypeUnifier(forest, self.logger)
        self._build_object(value, None, [], 1, forest, unifier)
        forest.map_types(self._resolve_lone_nulls)

        self.logger.info(f"Built {len(forest)} candidate class nodes")
        return forest

    def _build_object(self, data: Dict[str, Any], key: Optional[str], path: List[str],
                      depth: int, forest: ClassForest, unifier: TypeUnifier) -> ClassRef:
        self._check_depth(depth, path)
        node = forest.create_node(key)
        for child_key, child_value in data.items():
            field_type = self._infer_type(
                child_key, child_value, path + [child_key], depth, forest, unifier
            )
            node.add_field(child_key, field_type)
        return ClassRef(node.id)

    def _build_array(self, data: List[Any], key: str, path: List[str],
                     depth: int, forest: ClassForest, unifier: TypeUnifier) -> ArrayOf:
        self._check_depth(depth, path)
        return ArrayOf(unifier.unify_all(
            self._infer_type(key, item, path + [f"[{index}]"], depth, forest, unifier)
            for index, item in enumerate(data)
        ))

    def _infer_type(self, key: str, value: Any, path: List[str], depth: int,
                    forest: ClassForest, unifier: TypeUnifier) -> FieldType:
        if value is None:
            return Nullable(Unknown())
        if isinstance(value, bool):
            return Primitive(PrimitiveKind.BOOL)
        if isinstance(value, int):
            return Primitive(PrimitiveKind.INTEGER)
        if isinstance(value, float):
            return Primitive(PrimitiveKind.FLOAT)
        if isinstance(value, str):
            return Primitive(PrimitiveKind.STRING)
        if isinstance(value, dict):
            return self._build_object(value, key, path, depth + 1, forest, unifier)
        if isinstance(value, list):
            return self._build_array(value, key, path, depth + 1, forest, unifier)
        raise UnsupportedValueError(
            f"Value of type {type(value).__name__} at {self._format_path(path)} "
            "is not a JSON value",
            context={"path": path}
        )

    def _check_depth(self, depth: int, path: List[str]) -> None:
        if depth > self.max_depth:
            raise StackDepthExceededError(
                f"Nesting depth exceeds the limit of {self.max_depth} "
                f"at {self._format_path(path)}",
                context={"path": path, "max_depth": self.max_depth}
            )

    def _resolve_lone_nulls(self, field_type: FieldType) -> FieldType:
        """A null never unified with a concrete observation becomes a nullable string."""
        if isinstance(field_type, Nullable):
            if isinstance(field_type.inner, Unknown):
                return Nullable(Primitive(PrimitiveKind.STRING))
            return Nullable(self._resolve_lone_nulls(field_type.inner))
        if isinstance(field_type, ArrayOf):
            return ArrayOf(self._resolve_lone_nulls(field_type.element))
        return field_type

    @staticmethod
    def _format_path(path: List[str]) -> str:
        return ".".join(path) if path else "root"
