"""Diff-related data models"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class LineType(str, Enum):
    INSERT = "insert"
    DELETE = "delete"
    CONTEXT = "context"


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class DiffLine(_CamelModel):
    """A single line of a hunk, content includes its +/-/space prefix"""

    type: LineType
    content: str
    old_number: int | None = None  # 1-indexed, None for insertions
    new_number: int | None = None  # 1-indexed, None for deletions


class DiffBlock(_CamelModel):
    """A hunk introduced by an @@ header"""

    header: str
    old_start_line: int
    new_start_line: int
    lines: list[DiffLine] = []


class DiffFile(_CamelModel):
    """Parsed changes for one file"""

    old_name: str
    new_name: str
    language: str = ""
    added_lines: int = 0
    deleted_lines: int = 0
    is_new: bool = False
    is_deleted: bool = False
    is_rename: bool = False
    is_binary: bool = False
    is_too_big: bool = False
    blocks: list[DiffBlock] = []

    @property
    def display_name(self) -> str:
        if self.is_rename and self.old_name != self.new_name:
            return f"{self.old_name} → {self.new_name}"
        return self.new_name if not self.is_deleted else self.old_name
