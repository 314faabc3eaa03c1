"""Semantic type vocabulary utilities."""

from fieldmeta.schema.semantic_types import (
    FK_TYPE,
    ROOT_TYPE,
    SemanticTypeHierarchy,
    get_type_hierarchy,
    normalize_semantic_type,
)

__all__ = [
    "FK_TYPE",
    "ROOT_TYPE",
    "SemanticTypeHierarchy",
    "get_type_hierarchy",
    "normalize_semantic_type",
]
