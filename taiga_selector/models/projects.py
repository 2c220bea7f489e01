"""Project records returned by the Taiga project search."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any


@dataclass(frozen=True)
class ProjectInSearch:
    """A project as listed in search results."""

    id: int
    name: str
    slug: str = ""
    is_member: bool = False
    is_admin: bool = False
    is_owner: bool = False

    @classmethod
    def from_api(cls, payload: dict[str, Any]) -> ProjectInSearch:
        """Build from a ``/projects`` list entry.

        Raises:
            KeyError: if ``id`` or ``name`` is missing
        """
        return cls(
            id=int(payload["id"]),
            name=str(payload["name"]),
            slug=payload.get("slug") or "",
            is_member=bool(payload.get("i_am_member", False)),
            is_admin=bool(payload.get("i_am_admin", False)),
            is_owner=bool(payload.get("i_am_owner", False)),
        )

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)
