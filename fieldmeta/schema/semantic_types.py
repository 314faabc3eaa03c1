"""Hierarchical semantic type vocabulary for fields."""

from __future__ import annotations

import json
from collections.abc import Iterable, Mapping
from functools import lru_cache
from pathlib import Path

from fieldmeta.config import get_settings

ROOT_TYPE = "type/*"
FK_TYPE = "type/FK"

# Each tag maps to its direct parents. A tag may have several parents.
DEFAULT_SEMANTIC_TYPE_PARENTS: dict[str, tuple[str, ...]] = {
    ROOT_TYPE: (),
    "type/Number": (ROOT_TYPE,),
    "type/Integer": ("type/Number",),
    "type/BigInteger": ("type/Integer",),
    "type/Float": ("type/Number",),
    "type/Decimal": ("type/Float",),
    "type/Text": (ROOT_TYPE,),
    "type/Boolean": (ROOT_TYPE,),
    "type/DateTime": (ROOT_TYPE,),
    "type/Date": ("type/DateTime",),
    "type/Time": ("type/DateTime",),
    "type/UNIXTimestamp": ("type/Integer", "type/DateTime"),
    "type/Special": (ROOT_TYPE,),
    "type/PK": ("type/Special",),
    FK_TYPE: ("type/Special",),
    "type/Category": ("type/Special",),
    "type/Enum": ("type/Category",),
    "type/Name": ("type/Category", "type/Text"),
    "type/Description": ("type/Text",),
    "type/Email": ("type/Text",),
    "type/URL": ("type/Text",),
    "type/ImageURL": ("type/URL",),
    "type/AvatarURL": ("type/ImageURL",),
    "type/Address": (ROOT_TYPE,),
    "type/City": ("type/Address", "type/Category", "type/Text"),
    "type/State": ("type/Address", "type/Category", "type/Text"),
    "type/Country": ("type/Address", "type/Category", "type/Text"),
    "type/ZipCode": ("type/Address", "type/Text"),
    "type/Coordinate": ("type/Float",),
    "type/Latitude": ("type/Coordinate",),
    "type/Longitude": ("type/Coordinate",),
    "type/Quantity": ("type/Integer",),
    "type/Score": ("type/Number",),
}


class SemanticTypeHierarchy:
    """Directed acyclic graph of semantic type tags with ancestor lookups."""

    def __init__(self, parents: Mapping[str, Iterable[str]]) -> None:
        self._parents = {tag: tuple(direct) for tag, direct in parents.items()}
        unknown = sorted(
            {parent for direct in self._parents.values() for parent in direct} - set(self._parents)
        )
        if unknown:
            raise ValueError(f"Unknown parent semantic types: {', '.join(unknown)}")
        self._ancestors: dict[str, frozenset[str]] = {}
        for tag in self._parents:
            self._resolve_ancestors(tag, ())

    @classmethod
    def from_json_file(cls, path: str | Path) -> "SemanticTypeHierarchy":
        """Load a `{tag: [parent, ...]}` mapping from a JSON file."""

        payload = json.loads(Path(path).read_text(encoding="utf-8"))
        if not isinstance(payload, dict):
            raise ValueError("Semantic type hierarchy file must contain a JSON object.")
        return cls(payload)

    @property
    def tags(self) -> tuple[str, ...]:
        return tuple(self._parents)

    def is_known(self, tag: str | None) -> bool:
        return tag is not None and tag in self._parents

    def isa(self, tag: str | None, ancestor: str) -> bool:
        """Return True when `tag` equals or descends from `ancestor`."""

        if tag is None:
            return False
        if tag == ancestor:
            return True
        return ancestor in self._ancestors.get(tag, frozenset())

    def is_foreign_key(self, tag: str | None) -> bool:
        return self.isa(tag, FK_TYPE)

    def descendants(self, ancestor: str) -> tuple[str, ...]:
        return tuple(tag for tag in self._parents if tag != ancestor and self.isa(tag, ancestor))

    def _resolve_ancestors(self, tag: str, path: tuple[str, ...]) -> frozenset[str]:
        cached = self._ancestors.get(tag)
        if cached is not None:
            return cached
        if tag in path:
            cycle = " -> ".join((*path[path.index(tag):], tag))
            raise ValueError(f"Semantic type hierarchy contains a cycle: {cycle}")
        resolved: set[str] = set()
        for parent in self._parents[tag]:
            resolved.add(parent)
            resolved.update(self._resolve_ancestors(parent, (*path, tag)))
        self._ancestors[tag] = frozenset(resolved)
        return self._ancestors[tag]


def normalize_semantic_type(raw_type: str | None) -> str | None:
    """Normalize a stored or requested tag; blank values mean no type."""

    if raw_type is None:
        return None
    cleaned = raw_type.strip().lstrip(":")
    return cleaned or None


@lru_cache
def get_type_hierarchy() -> SemanticTypeHierarchy:
    """Build the process-wide hierarchy from configuration once."""

    path = get_settings().semantic_type_hierarchy_path
    if path:
        return SemanticTypeHierarchy.from_json_file(path)
    return SemanticTypeHierarchy(DEFAULT_SEMANTIC_TYPE_PARENTS)
