"""
Sequence Differ - Thin adapter around diff-match-patch
"""

from __future__ import annotations

import logging
import time
from typing import Callable, NamedTuple

from diff_match_patch import diff_match_patch

from models.diff import ChangeType, CharDiff

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 0.2  # Seconds; keeps very large inputs from stalling a caller

_KINDS = {
    diff_match_patch.DIFF_DELETE: ChangeType.DELETE,
    diff_match_patch.DIFF_INSERT: ChangeType.INSERT,
    diff_match_patch.DIFF_EQUAL: ChangeType.EQUAL,
}


class Operation(NamedTuple):
    """A run of symbols or characters tagged equal, delete or insert"""

    kind: ChangeType
    payload: str


class SequenceDiffer:
    """Edit scripts over symbol strings or plain characters.

    Every script is passed through cleanup, so adjacent runs of the same
    kind are merged and edit boundaries are shifted to readable
    positions. With a positive ``timeout`` the underlying search may stop
    early and return a coarser script; it still reproduces both inputs.
    """

    def __init__(self, timeout: float = DEFAULT_TIMEOUT):
        self.timeout = timeout

    def _engine(self) -> diff_match_patch:
        dmp = diff_match_patch()
        dmp.Diff_Timeout = self.timeout
        return dmp

    def _diff_main(self, dmp: diff_match_patch, a: str, b: str) -> list[tuple[int, str]]:
        started = time.monotonic()
        diffs = dmp.diff_main(a, b, False)
        elapsed = time.monotonic() - started
        if self.timeout > 0 and elapsed >= self.timeout:
            logger.debug(
                "Diff budget of %.3fs exhausted (%d vs %d items), result may not be minimal",
                self.timeout,
                len(a),
                len(b),
            )
        return diffs

    def diff(self, a: str, b: str) -> list[Operation]:
        """Diff two sequences and apply semantic cleanup"""
        diffs = self._diff_main(self._engine(), a, b)
        return self.cleanup([Operation(_KINDS[op], text) for op, text in diffs])

    def diff_lines(self, old_symbols: str, new_symbols: str, line_array: list[str]) -> list[Operation]:
        """Diff two strings of line symbols.

        A symbol stands for a whole line, so character-based semantic
        cleanup would weigh every line as 1. Instead an equal run is folded
        into the surrounding edits only when its text is strictly lighter
        than the edits on both sides, counting each line's text plus its
        newline.
        """

        def weight(symbols: str) -> int:
            return sum(len(line_array[ord(symbol)]) + 1 for symbol in symbols)

        dmp = self._engine()
        diffs = self._diff_main(dmp, old_symbols, new_symbols)
        dmp.diff_cleanupMerge(diffs)
        diffs = fold_light_equalities(diffs, weight)
        dmp.diff_cleanupMerge(diffs)
        return [Operation(_KINDS[op], text) for op, text in diffs if text]

    def cleanup(self, ops: list[Operation]) -> list[Operation]:
        """Semantic cleanup of an edit script"""
        diffs = [(_op_code(op.kind), op.payload) for op in ops]
        dmp = self._engine()
        dmp.diff_cleanupMerge(diffs)
        dmp.diff_cleanupSemantic(diffs)
        return [Operation(_KINDS[op], text) for op, text in diffs if text]

    def char_diff(self, old_line: str, new_line: str) -> list[CharDiff]:
        """Character-level diff between a deleted and an inserted line"""
        return [CharDiff(kind=op.kind, text=op.payload) for op in self.diff(old_line, new_line)]


def fold_light_equalities(
    diffs: list[tuple[int, str]],
    weight: Callable[[str], int],
) -> list[tuple[int, str]]:
    """Turn equalities lighter than the edits on both sides into delete+insert.

    Repeats until nothing folds; a fold only makes the neighbouring edit
    groups heavier. Between two equalities the result holds at most one
    delete followed by one insert.
    """
    while True:
        folded = False
        result: list[tuple[int, str]] = []
        deleted = inserted = ""
        deleted_weight = inserted_weight = 0

        for index, (op, text) in enumerate(diffs):
            if op == diff_match_patch.DIFF_DELETE:
                deleted += text
                deleted_weight += weight(text)
                continue
            if op == diff_match_patch.DIFF_INSERT:
                inserted += text
                inserted_weight += weight(text)
                continue

            size = weight(text)
            if size < max(deleted_weight, inserted_weight) and size < _edit_weight_after(diffs, index, weight):
                deleted += text
                inserted += text
                deleted_weight += size
                inserted_weight += size
                folded = True
                continue

            _flush_edits(result, deleted, inserted)
            deleted = inserted = ""
            deleted_weight = inserted_weight = 0
            result.append((op, text))

        _flush_edits(result, deleted, inserted)
        diffs = result
        if not folded:
            return diffs


def _edit_weight_after(diffs: list[tuple[int, str]], index: int, weight: Callable[[str], int]) -> int:
    deleted_weight = inserted_weight = 0
    for op, text in diffs[index + 1:]:
        if op == diff_match_patch.DIFF_EQUAL:
            break
        if op == diff_match_patch.DIFF_DELETE:
            deleted_weight += weight(text)
        else:
            inserted_weight += weight(text)
    return max(deleted_weight, inserted_weight)


def _flush_edits(result: list[tuple[int, str]], deleted: str, inserted: str):
    if deleted:
        result.append((diff_match_patch.DIFF_DELETE, deleted))
    if inserted:
        result.append((diff_match_patch.DIFF_INSERT, inserted))


def _op_code(kind: ChangeType) -> int:
    if kind is ChangeType.DELETE:
        return diff_match_patch.DIFF_DELETE
    if kind is ChangeType.INSERT:
        return diff_match_patch.DIFF_INSERT
    return diff_match_patch.DIFF_EQUAL
