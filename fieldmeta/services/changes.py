"""Three-state partial update values for field rows."""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any, Final


class _Unset:
    __slots__ = ()

    def __repr__(self) -> str:
        return "UNSET"

    def __bool__(self) -> bool:
        return False


UNSET: Final = _Unset()


@dataclass(slots=True)
class FieldChanges:
    """Requested field attributes: `UNSET` when absent, `None` when explicitly null."""

    caveats: str | None | _Unset = UNSET
    description: str | None | _Unset = UNSET
    display_name: str | None | _Unset = UNSET
    fk_target_field_id: int | None | _Unset = UNSET
    points_of_interest: str | None | _Unset = UNSET
    special_type: str | None | _Unset = UNSET
    visibility_type: str | None | _Unset = UNSET

    def is_set(self, name: str) -> bool:
        return getattr(self, name) is not UNSET

    def present(self) -> dict[str, Any]:
        """Return only the attributes that were supplied, nulls included."""

        return {item.name: getattr(self, item.name) for item in fields(self) if self.is_set(item.name)}
