"""
Recognition of hexadecimal integer literals within a line of text.

A token is an optional lowercase ``0x`` prefix followed by at least two hex
digits, bounded on both sides by ASCII word boundaries. ``0X`` is not a prefix
and, being a word character, the ``X`` also keeps ``0X12`` from matching;
``0X 12`` still converts ``12``.
"""
import re
from typing import Iterator, NamedTuple

HEX_TOKEN = re.compile(r"\b(0x)?([0-9a-fA-F]{2,})\b", re.ASCII)


class Match(NamedTuple):
    """Half-open character offsets of a token and of its digits."""

    outer_start: int
    outer_end: int
    inner_start: int
    inner_end: int

    @property
    def width(self) -> int:
        """Return the field width reserved for the substitution."""
        return self.outer_end - self.outer_start

    @property
    def has_prefix(self) -> bool:
        return self.inner_start != self.outer_start

    def outer(self, line: str) -> str:
        return line[self.outer_start : self.outer_end]

    def inner(self, line: str) -> str:
        return line[self.inner_start : self.inner_end]

    @classmethod
    def from_re(cls, m):
        return cls(m.start(0), m.end(0), m.start(2), m.end(2))


def find_tokens(line: str, pattern: re.Pattern = HEX_TOKEN) -> Iterator[Match]:
    """
    Yield the hex tokens of the line from left to right.

    Args:
        line: text to scan
        pattern: compiled pattern whose group 2 holds the digits

    Returns:
        non-overlapping Match objects, scanning resumes at each outer_end
    """
    for m in pattern.finditer(line):
        yield Match.from_re(m)
