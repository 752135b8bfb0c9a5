"""Schema inference pipeline stages."""

from .type_unifier import TypeUnifier
from .schema_builder import SchemaBuilder, DEFAULT_MAX_DEPTH
from .deduplicator import Deduplicator
from .namer import Namer, NamingContext, ROOT_CLASS_NAME

__all__ = [
    "TypeUnifier", "SchemaBuilder", "DEFAULT_MAX_DEPTH", "Deduplicator",
    "Namer", "NamingContext", "ROOT_CLASS_NAME",
]
