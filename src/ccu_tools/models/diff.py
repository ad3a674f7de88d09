from __future__ import annotations

from enum import Enum

from pydantic import BaseModel


class FileStatus(str, Enum):
    ADDED = "added"
    REMOVED = "removed"
    MODIFIED = "modified"
    RENAMED = "renamed"
    COPIED = "copied"
    CHANGED = "changed"
    UNCHANGED = "unchanged"


class FileChange(BaseModel):
    """A single file entry of a compare between two revisions."""

    filename: str
    # kept as str, GitHub may add statuses
    status: str

    @property
    def is_modified(self) -> bool:
        return self.status == FileStatus.MODIFIED.value
