"""Diff-related data models"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, model_validator


class ChangeType(str, Enum):
    """Kind of an edit run, a line record or a character run"""

    EQUAL = "equal"
    DELETE = "delete"
    INSERT = "insert"


class RowKind(str, Enum):
    """Kind of a side-by-side row"""

    EQUAL = "equal"
    DELETE = "delete"
    INSERT = "insert"
    EMPTY = "empty"


class ViewMode(str, Enum):
    """Available diff views"""

    UNIFIED = "unified"
    SIDE_BY_SIDE = "side-by-side"
    INLINE = "inline"


LEFT_ROW_KINDS = (RowKind.EQUAL, RowKind.DELETE, RowKind.EMPTY)
RIGHT_ROW_KINDS = (RowKind.EQUAL, RowKind.INSERT, RowKind.EMPTY)


class CharDiff(BaseModel):
    """Character-level run between one deleted and one inserted line"""

    model_config = ConfigDict(frozen=True)

    kind: ChangeType
    text: str


class DiffLine(BaseModel):
    """A single line of a unified or inline diff"""

    model_config = ConfigDict(frozen=True)

    kind: ChangeType
    content: str
    old_line_number: int | None = Field(default=None, ge=1)  # 1-indexed
    new_line_number: int | None = Field(default=None, ge=1)  # 1-indexed
    char_diffs: list[CharDiff] | None = None

    @model_validator(mode="after")
    def _check_line_numbers(self) -> DiffLine:
        has_old = self.kind in (ChangeType.EQUAL, ChangeType.DELETE)
        has_new = self.kind in (ChangeType.EQUAL, ChangeType.INSERT)
        if has_old != (self.old_line_number is not None):
            raise ValueError(f"old_line_number does not match kind '{self.kind.value}'")
        if has_new != (self.new_line_number is not None):
            raise ValueError(f"new_line_number does not match kind '{self.kind.value}'")
        return self


class DiffResult(BaseModel):
    """Complete line diff of two texts"""

    model_config = ConfigDict(frozen=True)

    lines: list[DiffLine]
    old_text: str
    new_text: str


class SideBySideRow(BaseModel):
    """One half of a side-by-side row.

    Rows of kind ``empty`` pad against a line on the other side; their
    content is empty and ``line_number`` repeats the next number of the
    padded side.
    """

    model_config = ConfigDict(frozen=True)

    line_number: int = Field(ge=1)
    content: str
    kind: RowKind
    char_diffs: list[CharDiff] | None = None


class SideBySideResult(BaseModel):
    """Two parallel, gap-padded columns"""

    model_config = ConfigDict(frozen=True)

    left: list[SideBySideRow]
    right: list[SideBySideRow]

    @model_validator(mode="after")
    def _check_columns(self) -> SideBySideResult:
        if len(self.left) != len(self.right):
            raise ValueError("left and right columns must have the same length")
        for row in self.left:
            if row.kind not in LEFT_ROW_KINDS:
                raise ValueError(f"left row cannot be '{row.kind.value}'")
        for row in self.right:
            if row.kind not in RIGHT_ROW_KINDS:
                raise ValueError(f"right row cannot be '{row.kind.value}'")
        return self


class DiffRequest(BaseModel):
    """Request to diff two texts"""

    old_text: str = ""
    new_text: str = ""


class PatchRequest(DiffRequest):
    """Request for a unified patch"""

    from_file: str = "a"
    to_file: str = "b"
    context_lines: int = Field(default=3, ge=0)
