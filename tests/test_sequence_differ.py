"""Tests for the diff-match-patch adapter."""

from models.diff import ChangeType, CharDiff
from services.line_encoder import encode_lines
from services.sequence_differ import DEFAULT_TIMEOUT, Operation, SequenceDiffer, fold_light_equalities


def rebuild(ops):
    old = "".join(op.payload for op in ops if op.kind is not ChangeType.INSERT)
    new = "".join(op.payload for op in ops if op.kind is not ChangeType.DELETE)
    return old, new


class TestSequenceDiffer:
    def test_default_timeout(self):
        assert SequenceDiffer().timeout == DEFAULT_TIMEOUT

    def test_identical_sequences(self, differ):
        assert differ.diff("abc", "abc") == [Operation(ChangeType.EQUAL, "abc")]

    def test_empty_sequences(self, differ):
        assert differ.diff("", "") == []

    def test_insert_into_empty(self, differ):
        assert differ.diff("", "abc") == [Operation(ChangeType.INSERT, "abc")]

    def test_script_reproduces_both_inputs(self, differ):
        a = "The quick brown fox jumps over the lazy dog."
        b = "That quick brown cat jumped over a lazy dog!"
        assert rebuild(differ.diff(a, b)) == (a, b)

    def test_budgeted_script_still_reproduces_inputs(self):
        a = "abcdefghij" * 300
        b = "jihgfedcba" * 300
        ops = SequenceDiffer(timeout=0.001).diff(a, b)
        assert rebuild(ops) == (a, b)

    def test_cleanup_merges_same_kind_runs(self, differ):
        ops = [
            Operation(ChangeType.DELETE, "a"),
            Operation(ChangeType.DELETE, "b"),
            Operation(ChangeType.INSERT, "c"),
        ]
        assert differ.cleanup(ops) == [
            Operation(ChangeType.DELETE, "ab"),
            Operation(ChangeType.INSERT, "c"),
        ]

    def test_semantic_cleanup_keeps_word_replacement_whole(self, differ):
        ops = differ.diff("value = compute(total)", "value = measure(total)")
        assert [op.kind for op in ops] == [
            ChangeType.EQUAL,
            ChangeType.DELETE,
            ChangeType.INSERT,
            ChangeType.EQUAL,
        ]
        assert ops[0].payload == "value = "
        assert ops[-1].payload.endswith("(total)")

    def test_char_diff(self, differ):
        assert differ.char_diff("foo", "fob") == [
            CharDiff(kind=ChangeType.EQUAL, text="fo"),
            CharDiff(kind=ChangeType.DELETE, text="o"),
            CharDiff(kind=ChangeType.INSERT, text="b"),
        ]


class TestDiffLines:
    def test_unchanged_line_between_edits_is_kept(self, differ):
        encoded = encode_lines(
            "x = 1\nthis line is unchanged\ny = 1",
            "x = 2\nthis line is unchanged\ny = 2",
        )
        ops = differ.diff_lines(*encoded)
        assert [op.kind for op in ops] == [
            ChangeType.DELETE,
            ChangeType.INSERT,
            ChangeType.EQUAL,
            ChangeType.DELETE,
            ChangeType.INSERT,
        ]
        assert encoded.line_array[ord(ops[2].payload)] == "this line is unchanged"

    def test_blank_line_between_long_edits_is_folded(self, differ):
        encoded = encode_lines(
            "the first paragraph before\n\nthe second paragraph before",
            "the first paragraph after it\n\nthe second paragraph after it",
        )
        ops = differ.diff_lines(*encoded)
        assert [op.kind for op in ops] == [ChangeType.DELETE, ChangeType.INSERT]
        assert len(ops[0].payload) == 3
        assert len(ops[1].payload) == 3


class TestFoldLightEqualities:
    def test_light_equality_is_folded(self):
        diffs = [(0, "ab"), (-1, "xx"), (1, "yy"), (0, "c"), (-1, "zz"), (1, "ww"), (0, "d")]
        assert fold_light_equalities(diffs, len) == [
            (0, "ab"),
            (-1, "xxczz"),
            (1, "yycww"),
            (0, "d"),
        ]

    def test_tie_is_kept(self):
        diffs = [(-1, "x"), (0, "y"), (1, "x")]
        assert fold_light_equalities(diffs, len) == diffs

    def test_equalities_at_the_edges_are_kept(self):
        diffs = [(0, "a"), (-1, "long edit"), (0, "b")]
        assert fold_light_equalities(diffs, len) == diffs
