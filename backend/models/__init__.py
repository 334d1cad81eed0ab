"""Models module - Pydantic data models"""

from .diff import (
    ChangeType,
    CharDiff,
    DiffLine,
    DiffRequest,
    DiffResult,
    PatchRequest,
    RowKind,
    SideBySideResult,
    SideBySideRow,
    ViewMode,
)

__all__ = [
    "ChangeType",
    "CharDiff",
    "DiffLine",
    "DiffRequest",
    "DiffResult",
    "PatchRequest",
    "RowKind",
    "SideBySideResult",
    "SideBySideRow",
    "ViewMode",
]
