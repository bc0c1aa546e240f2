"""
Change records produced by the structural diff engine.

Change Types:
    - added: Path exists in the new value but not in the old one
    - removed: Path exists in the old value but not in the new one
    - modified: Path exists in both, with different values
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, ClassVar

from flexdiff.values import format_path


class ChangeType(Enum):
    """Classification of a single difference."""

    ADDED = "added"
    REMOVED = "removed"
    MODIFIED = "modified"


@dataclass(frozen=True)
class ChangeRecord:
    """Base class for one classified difference at a path.

    Attributes:
        path: Object keys and stringified array indices from the root.
              An empty tuple addresses the root value itself.
    """

    change_type: ClassVar[ChangeType]

    path: tuple[str, ...]

    @property
    def path_text(self) -> str:
        """The path rendered as dotted text ('root' for the empty path)."""
        return format_path(self.path)

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-serializable representation of the record."""
        return {"type": self.change_type.value, "path": list(self.path)}


@dataclass(frozen=True)
class Added(ChangeRecord):
    """A value present only in the new tree."""

    change_type: ClassVar[ChangeType] = ChangeType.ADDED

    new_value: Any

    def to_dict(self) -> dict[str, Any]:
        data = super().to_dict()
        data["newValue"] = self.new_value
        return data


@dataclass(frozen=True)
class Removed(ChangeRecord):
    """A value present only in the old tree."""

    change_type: ClassVar[ChangeType] = ChangeType.REMOVED

    old_value: Any

    def to_dict(self) -> dict[str, Any]:
        data = super().to_dict()
        data["oldValue"] = self.old_value
        return data


@dataclass(frozen=True)
class Modified(ChangeRecord):
    """A value present in both trees that differs between them."""

    change_type: ClassVar[ChangeType] = ChangeType.MODIFIED

    old_value: Any
    new_value: Any

    def to_dict(self) -> dict[str, Any]:
        data = super().to_dict()
        data["oldValue"] = self.old_value
        data["newValue"] = self.new_value
        return data
