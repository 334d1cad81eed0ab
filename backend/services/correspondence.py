"""
Correspondence Matcher - Pair deleted and inserted lines for char-level diffs
"""

from __future__ import annotations

from typing import NamedTuple, Union

from models.diff import ChangeType, CharDiff

from .diff_reconstructor import LineRun
from .sequence_differ import SequenceDiffer


class ChangeBlock(NamedTuple):
    """A delete run, the insert run right after it, or both"""

    deleted: LineRun | None
    inserted: LineRun | None
    char_diffs: list[CharDiff] | None = None

    @property
    def is_modification(self) -> bool:
        return self.char_diffs is not None


Block = Union[LineRun, ChangeBlock]


def is_one_to_one(deleted: LineRun | None, inserted: LineRun | None) -> bool:
    """A change is a modification only when exactly one line is replaced by one line"""
    return (
        deleted is not None
        and inserted is not None
        and len(deleted.lines) == 1
        and len(inserted.lines) == 1
    )


def match_changes(runs: list[LineRun], differ: SequenceDiffer) -> list[Block]:
    """Group line runs into equal runs and change blocks.

    A delete run is paired with the insert run that immediately follows
    it. Character diffs are computed only for strict 1:1 pairs; every
    other shape keeps its lines as independent deletions and insertions.
    """
    blocks: list[Block] = []
    index = 0

    while index < len(runs):
        run = runs[index]
        index += 1

        if run.kind is ChangeType.EQUAL:
            blocks.append(run)
            continue

        deleted = inserted = None
        if run.kind is ChangeType.DELETE:
            deleted = run
            if index < len(runs) and runs[index].kind is ChangeType.INSERT:
                inserted = runs[index]
                index += 1
        else:
            inserted = run

        char_diffs = None
        if is_one_to_one(deleted, inserted):
            char_diffs = differ.char_diff(deleted.lines[0], inserted.lines[0])
        blocks.append(ChangeBlock(deleted, inserted, char_diffs))

    return blocks
