"""
Diff Reconstructor - Decode symbol runs back into numbered lines
"""

from __future__ import annotations

from typing import NamedTuple

from models.diff import ChangeType

from .sequence_differ import Operation


class LineRun(NamedTuple):
    """Consecutive decoded lines of one kind.

    ``old_start``/``new_start`` are the 1-based numbers the first line of
    the run takes on each side; a side the run does not touch keeps the
    number of its next line.
    """

    kind: ChangeType
    lines: list[str]
    old_start: int
    new_start: int

    @property
    def old_numbers(self) -> range:
        if self.kind is ChangeType.INSERT:
            return range(0)
        return range(self.old_start, self.old_start + len(self.lines))

    @property
    def new_numbers(self) -> range:
        if self.kind is ChangeType.DELETE:
            return range(0)
        return range(self.new_start, self.new_start + len(self.lines))


def decode_symbols(payload: str, line_array: list[str]) -> list[str]:
    """Map each symbol of a run back to its line text"""
    return [line_array[ord(symbol)] for symbol in payload]


def reconstruct(ops: list[Operation], line_array: list[str]) -> list[LineRun]:
    """Decode an operation list into numbered line runs.

    Old and new counters start at 1 and advance once per decoded line on
    the side(s) the run belongs to. Runs that decode to no lines are not
    emitted.
    """
    runs: list[LineRun] = []
    old_number = 1
    new_number = 1

    for op in ops:
        lines = decode_symbols(op.payload, line_array)
        if not lines:
            continue

        if runs and runs[-1].kind is op.kind:
            # Same-kind neighbours are one run
            previous = runs.pop()
            run = LineRun(op.kind, previous.lines + lines, previous.old_start, previous.new_start)
        else:
            run = LineRun(op.kind, lines, old_number, new_number)

        runs.append(run)
        old_number = run.old_start + len(run.old_numbers)
        new_number = run.new_start + len(run.new_numbers)

    return runs
