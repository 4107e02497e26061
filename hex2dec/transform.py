"""
Width preserving hex to decimal substitution on a single line.

Each token found by the matcher is replaced by the decimal rendering of its
digits, right justified with spaces into a field as wide as the token itself
(``0x`` prefix included). A rendering that is wider than the field is emitted
in full and the line grows.

Example:
    >>> hex2dec_line("        Entry point address:               0x5a200")
    '        Entry point address:                369152'
"""
import re
from typing import Callable

from hex2dec.exceptions import ParseOverflowError
from hex2dec.matcher import HEX_TOKEN, Match, find_tokens
from utility.log import Log

log = Log(__name__)

MAX_VALUE = 2**128 - 1


def parse_hex(digits: str) -> int:
    """
    Convert a run of hex digits into an unsigned 128-bit value.

    Args:
        digits: hex digits without any prefix, case insensitive

    Returns:
        the integer value

    Raises:
        ParseOverflowError when the value does not fit in 128 bits
    """
    value = int(digits, 16)
    if value > MAX_VALUE:
        raise ParseOverflowError(digits)

    return value


def format_field(value: int, width: int) -> str:
    """Right justify the decimal form of value in width columns."""
    return f"{value:>{width}d}"


def replace_all(
    pattern: re.Pattern, haystack: str, replacement: Callable[[Match, str], str]
) -> str:
    """
    Substitute every match of pattern in haystack.

    Unlike re.sub, the replacement callable may raise. The exception propagates
    to the caller and the partially built output is discarded.

    Args:
        pattern: compiled pattern whose group 2 holds the digits
        haystack: the text to scan
        replacement: called with the Match and the haystack, returns the text
                     to emit in place of the outer span
    """
    parts = []
    last = 0
    for token in find_tokens(haystack, pattern):
        parts.append(haystack[last : token.outer_start])
        parts.append(replacement(token, haystack))
        last = token.outer_end

    parts.append(haystack[last:])
    return "".join(parts)


def hex2dec_line(line: str, skip_error: bool = False) -> str:
    """
    Convert the hex values within a line to decimal notation.

    Args:
        line: the input line, any trailing newline is kept as is
        skip_error: leave tokens that fail to parse in place instead of raising

    Returns:
        the rewritten line

    Raises:
        ParseOverflowError for the first token that fails to parse, unless
        skip_error is set
    """

    def _substitute(token: Match, haystack: str) -> str:
        try:
            value = parse_hex(token.inner(haystack))
        except ParseOverflowError as e:
            if not skip_error:
                raise

            log.debug(f"Keeping {token.outer(haystack)} unchanged: {e}")
            return token.outer(haystack)

        return format_field(value, token.width)

    return replace_all(HEX_TOKEN, line, _substitute)
