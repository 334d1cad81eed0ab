"""
Diff Engine - Unified, side-by-side and inline views of two texts
"""

from __future__ import annotations

import logging
from difflib import unified_diff
from typing import Any

from models.diff import (
    ChangeType,
    DiffLine,
    DiffResult,
    RowKind,
    SideBySideResult,
    SideBySideRow,
    ViewMode,
)

from .correspondence import Block, ChangeBlock, match_changes
from .diff_reconstructor import reconstruct
from .line_encoder import encode_lines
from .sequence_differ import DEFAULT_TIMEOUT, SequenceDiffer

logger = logging.getLogger(__name__)

LINE_PREFIXES = {
    ChangeType.DELETE: "-",
    ChangeType.INSERT: "+",
    ChangeType.EQUAL: " ",
}


def compute_blocks(old_text: str, new_text: str, differ: SequenceDiffer) -> list[Block]:
    """Line pass shared by every view: encode, diff, decode, match"""
    encoded = encode_lines(old_text, new_text)
    ops = differ.diff_lines(encoded.old_symbols, encoded.new_symbols, encoded.line_array)
    runs = reconstruct(ops, encoded.line_array)
    return match_changes(runs, differ)


def calculate_unified_diff(
    old_text: str,
    new_text: str,
    differ: SequenceDiffer | None = None,
) -> DiffResult:
    """Single ordered list of lines with old and new line numbers"""
    differ = differ or SequenceDiffer()
    lines: list[DiffLine] = []

    for block in compute_blocks(old_text, new_text, differ):
        if isinstance(block, ChangeBlock):
            if block.deleted:
                for number, line in zip(block.deleted.old_numbers, block.deleted.lines):
                    lines.append(
                        DiffLine(
                            kind=ChangeType.DELETE,
                            content=line,
                            old_line_number=number,
                            char_diffs=block.char_diffs,
                        )
                    )
            if block.inserted:
                for number, line in zip(block.inserted.new_numbers, block.inserted.lines):
                    lines.append(
                        DiffLine(
                            kind=ChangeType.INSERT,
                            content=line,
                            new_line_number=number,
                            char_diffs=block.char_diffs,
                        )
                    )
        else:
            lines.extend(_equal_lines(block))

    logger.debug("Unified diff produced %d lines", len(lines))
    return DiffResult(lines=lines, old_text=old_text, new_text=new_text)


def calculate_side_by_side_diff(
    old_text: str,
    new_text: str,
    differ: SequenceDiffer | None = None,
) -> SideBySideResult:
    """Two parallel columns padded with empty rows"""
    differ = differ or SequenceDiffer()
    left: list[SideBySideRow] = []
    right: list[SideBySideRow] = []

    for block in compute_blocks(old_text, new_text, differ):
        if isinstance(block, ChangeBlock):
            if block.deleted:
                for number, line in zip(block.deleted.old_numbers, block.deleted.lines):
                    left.append(
                        SideBySideRow(
                            line_number=number,
                            content=line,
                            kind=RowKind.DELETE,
                            char_diffs=block.char_diffs,
                        )
                    )
                    right.append(_empty_row(block.deleted.new_start))
            if block.inserted:
                for number, line in zip(block.inserted.new_numbers, block.inserted.lines):
                    left.append(_empty_row(block.inserted.old_start))
                    right.append(
                        SideBySideRow(
                            line_number=number,
                            content=line,
                            kind=RowKind.INSERT,
                            char_diffs=block.char_diffs,
                        )
                    )
        else:
            for old_number, new_number, line in zip(block.old_numbers, block.new_numbers, block.lines):
                left.append(SideBySideRow(line_number=old_number, content=line, kind=RowKind.EQUAL))
                right.append(SideBySideRow(line_number=new_number, content=line, kind=RowKind.EQUAL))

    logger.debug("Side-by-side diff produced %d rows", len(left))
    return SideBySideResult(left=left, right=right)


def calculate_inline_diff(
    old_text: str,
    new_text: str,
    differ: SequenceDiffer | None = None,
) -> DiffResult:
    """Like the unified view, but a modified line is one annotated equal line"""
    differ = differ or SequenceDiffer()
    lines: list[DiffLine] = []

    for block in compute_blocks(old_text, new_text, differ):
        if isinstance(block, ChangeBlock):
            if block.is_modification:
                lines.append(
                    DiffLine(
                        kind=ChangeType.EQUAL,
                        content=block.inserted.lines[0],
                        old_line_number=block.deleted.old_start,
                        new_line_number=block.inserted.new_start,
                        char_diffs=block.char_diffs,
                    )
                )
                continue
            if block.deleted:
                for number, line in zip(block.deleted.old_numbers, block.deleted.lines):
                    lines.append(DiffLine(kind=ChangeType.DELETE, content=line, old_line_number=number))
            if block.inserted:
                for number, line in zip(block.inserted.new_numbers, block.inserted.lines):
                    lines.append(DiffLine(kind=ChangeType.INSERT, content=line, new_line_number=number))
        else:
            lines.extend(_equal_lines(block))

    logger.debug("Inline diff produced %d lines", len(lines))
    return DiffResult(lines=lines, old_text=old_text, new_text=new_text)


def _equal_lines(run) -> list[DiffLine]:
    return [
        DiffLine(
            kind=ChangeType.EQUAL,
            content=line,
            old_line_number=old_number,
            new_line_number=new_number,
        )
        for old_number, new_number, line in zip(run.old_numbers, run.new_numbers, run.lines)
    ]


def _empty_row(line_number: int) -> SideBySideRow:
    return SideBySideRow(line_number=line_number, content="", kind=RowKind.EMPTY)


def render_unified_text(result: DiffResult) -> str:
    """Render a diff result as '-', '+' and ' ' prefixed lines"""
    return "\n".join(f"{LINE_PREFIXES[line.kind]}{line.content}" for line in result.lines)


def generate_patch(
    old_text: str,
    new_text: str,
    from_file: str = "a",
    to_file: str = "b",
    context_lines: int = 3,
) -> str:
    """Generate a standard unified patch"""
    old_lines = old_text.splitlines(keepends=True)
    new_lines = new_text.splitlines(keepends=True)

    # Ensure last lines have newlines for proper diff
    if old_lines and not old_lines[-1].endswith("\n"):
        old_lines[-1] += "\n"
    if new_lines and not new_lines[-1].endswith("\n"):
        new_lines[-1] += "\n"

    return "".join(
        unified_diff(
            old_lines,
            new_lines,
            fromfile=from_file,
            tofile=to_file,
            n=context_lines,
        )
    )


class DiffEngine:
    """Compute diff views with one configured sequence differ"""

    def __init__(self, timeout: float = DEFAULT_TIMEOUT):
        self.differ = SequenceDiffer(timeout)

    @classmethod
    def from_settings(cls, settings: dict[str, Any]) -> "DiffEngine":
        """Build an engine from the "diff" config section"""
        return cls(timeout=float(settings.get("timeout", DEFAULT_TIMEOUT)))

    def unified(self, old_text: str, new_text: str) -> DiffResult:
        return calculate_unified_diff(old_text, new_text, self.differ)

    def side_by_side(self, old_text: str, new_text: str) -> SideBySideResult:
        return calculate_side_by_side_diff(old_text, new_text, self.differ)

    def inline(self, old_text: str, new_text: str) -> DiffResult:
        return calculate_inline_diff(old_text, new_text, self.differ)

    def compute(self, view: ViewMode, old_text: str, new_text: str) -> DiffResult | SideBySideResult:
        """Dispatch to the builder for ``view``"""
        if view is ViewMode.SIDE_BY_SIDE:
            return self.side_by_side(old_text, new_text)
        if view is ViewMode.INLINE:
            return self.inline(old_text, new_text)
        return self.unified(old_text, new_text)
