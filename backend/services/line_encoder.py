"""
Line Encoder - Map each distinct line to a one-character symbol
"""

from __future__ import annotations

from typing import NamedTuple

EMPTY_LINE_SYMBOL = 0
MAX_SYMBOL = 0x10FFFF  # Highest code point usable as a symbol


class EncodedLines(NamedTuple):
    """Symbol strings for both texts plus the symbol -> line table"""

    old_symbols: str
    new_symbols: str
    line_array: list[str]


def split_lines(text: str) -> list[str]:
    """Split text on newlines; the empty text has no lines"""
    if not text:
        return []
    return text.split("\n")


def encode_lines(old_text: str, new_text: str) -> EncodedLines:
    """Encode both texts as strings of line symbols.

    Symbols are handed out in first-occurrence order, old text first.
    The same line text maps to the same symbol in both texts, and
    symbol 0 is always the empty line.
    """
    line_array = [""]
    line_hash = {"": EMPTY_LINE_SYMBOL}

    def lines_to_symbols(lines: list[str]) -> str:
        symbols = []
        for index, line in enumerate(lines):
            symbol = line_hash.get(line)
            if symbol is None:
                if len(line_array) >= MAX_SYMBOL - 1:
                    # Out of symbols: fold the remainder into one final line,
                    # the last two code points are kept for the two folds
                    line = "\n".join(lines[index:])
                    symbol = line_hash.get(line)
                    if symbol is None:
                        symbol = len(line_array)
                        line_array.append(line)
                        line_hash[line] = symbol
                    symbols.append(chr(symbol))
                    break
                symbol = len(line_array)
                line_array.append(line)
                line_hash[line] = symbol
            symbols.append(chr(symbol))
        return "".join(symbols)

    old_symbols = lines_to_symbols(split_lines(old_text))
    new_symbols = lines_to_symbols(split_lines(new_text))
    return EncodedLines(old_symbols, new_symbols, line_array)
