"""Persisted session state: the project the user is working in."""

import json
import logging
import os
from pathlib import Path
from typing import Any

from ..config import get_session_path
from ..exceptions import SessionError

logger = logging.getLogger(__name__)


class Session:
    """Current project selection, stored as JSON.

    A missing or unreadable file loads as an empty session.
    """

    def __init__(self, path: Path | None = None):
        self.path = path or get_session_path()
        self._data: dict[str, Any] = self._load()

    def _load(self) -> dict[str, Any]:
        if not self.path.exists():
            return {}

        try:
            with open(self.path, encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            logger.warning(f"session: failed to load {self.path}: {e}")
            return {}

        if not isinstance(data, dict):
            logger.warning(f"session: {self.path} does not hold an object, ignoring")
            return {}
        return data

    def _save(self) -> None:
        tmp_path = self.path.with_suffix(".tmp")
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(tmp_path, "w", encoding="utf-8") as f:
                json.dump(self._data, f, indent=2)
            os.replace(tmp_path, self.path)
        except OSError as e:
            raise SessionError(path=str(self.path), reason=str(e)) from e

    @property
    def current_project_id(self) -> int | None:
        return self._data.get("current_project_id")

    @property
    def current_project_name(self) -> str | None:
        return self._data.get("current_project_name")

    @property
    def has_project(self) -> bool:
        return self.current_project_id is not None

    def record_selection(self, id: Any, name: str) -> None:
        """Make the given project current and persist it."""
        self._data["current_project_id"] = id
        self._data["current_project_name"] = name
        self._save()
        logger.debug(f"session: current project set to {name} ({id})")

    def clear(self) -> None:
        """Forget the current project."""
        self._data = {}
        try:
            self.path.unlink(missing_ok=True)
        except OSError as e:
            raise SessionError("Failed to remove session", path=str(self.path), reason=str(e)) from e

    def to_dict(self) -> dict[str, Any]:
        return {
            "current_project_id": self.current_project_id,
            "current_project_name": self.current_project_name,
        }
