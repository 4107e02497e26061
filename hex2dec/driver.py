"""
Stream driver reading standard input line by line.

The driver owns the input stream for the duration of a run. Lines are read as
bytes, split on ``\\n`` only and decoded as UTF-8, so a ``\\r\\n`` ending
reaches the transformer and the output untouched.

Two interfaces are provided:

    iter_stdin      pull style, yields a LineResult per line
    parse_stdin     push style, hands results to the given callbacks

parse_ci wraps parse_stdin for use in pipelines and reports failures on
standard error.
"""
import os
import sys
from typing import BinaryIO, Callable, Iterator, NamedTuple, Optional

from hex2dec.exceptions import (
    InputReadError,
    ParseOverflowError,
    TransformError,
)
from hex2dec.transform import hex2dec_line
from utility.log import Log

log = Log(__name__)

NEWLINE = "\r\n" if os.name == "nt" else "\n"


class LineResult(NamedTuple):
    """Outcome of a single line, exactly one of the fields is set."""

    line: Optional[str] = None
    error: Optional[ParseOverflowError] = None


def read_lines(stream: BinaryIO) -> Iterator[str]:
    """
    Yield the lines of a binary stream, newline included.

    Args:
        stream: binary file object opened for reading

    Raises:
        InputReadError when the stream fails or a line is not valid UTF-8
    """
    lineno = 0
    while True:
        try:
            raw = stream.readline()
        except OSError as e:
            raise InputReadError(f"failed to read line {lineno + 1}: {e}") from e

        if not raw:
            log.debug(f"Reached end of input after {lineno} lines")
            return

        lineno += 1
        try:
            line = raw.decode("utf-8")
        except UnicodeDecodeError as e:
            raise InputReadError(
                f"stream did not contain valid UTF-8 at line {lineno}: {e}"
            ) from e

        yield line


def iter_stdin(
    skip_parse_errors: bool = False,
    break_on_blank: bool = False,
    stream: Optional[BinaryIO] = None,
) -> Iterator[LineResult]:
    """
    Transform the standard input lazily.

    The next line is not read until the caller asks for the next result, so
    abandoning the generator stops reading.

    Args:
        skip_parse_errors: keep tokens that fail to parse instead of reporting them
        break_on_blank: stop at the first line equal to the platform newline
        stream: binary stream to read, defaults to the standard input

    Returns:
        LineResult objects in input order

    Raises:
        InputReadError when the input cannot be read
    """
    if stream is None:
        stream = sys.stdin.buffer

    for line in read_lines(stream):
        if break_on_blank and line == NEWLINE:
            log.debug("Blank line received, stopping")
            return

        try:
            result = LineResult(line=hex2dec_line(line, skip_error=skip_parse_errors))
        except ParseOverflowError as e:
            log.debug(f"Failed to convert line: {e}")
            result = LineResult(error=e)

        yield result


def parse_stdin(
    ok_callback: Callable[[str], None],
    error_callback: Callable[[ParseOverflowError], Exception],
    skip_parse_errors: bool = False,
    stop_on_error: bool = True,
    break_on_blank: bool = False,
    stream: Optional[BinaryIO] = None,
) -> None:
    """
    Read and convert the standard input, one line at a time.

    Args:
        ok_callback: receives every converted line
        error_callback: receives every parse error and returns the exception
                        to raise when stop_on_error is set
        skip_parse_errors: keep tokens that fail to parse, stop_on_error then
                           has no effect
        stop_on_error: stop at the first parse error
        break_on_blank: return at the first line equal to the platform newline
        stream: binary stream to read, defaults to the standard input

    Raises:
        InputReadError when the input cannot be read
        the exception returned by error_callback when stop_on_error trips
    """
    for result in iter_stdin(skip_parse_errors, break_on_blank, stream):
        if result.error is None:
            ok_callback(result.line)
            continue

        error = error_callback(result.error)
        if stop_on_error:
            raise error from result.error


def to_transform_error(e: ParseOverflowError) -> TransformError:
    """Default error callback, wraps the parse error for the driver."""
    return TransformError(str(e))


def parse_ci(
    ok_callback: Callable[[str], None],
    error_callback: Callable[[ParseOverflowError], Exception] = to_transform_error,
    skip_parse_errors: bool = False,
    stop_on_error: bool = True,
    break_on_blank: bool = False,
    stream: Optional[BinaryIO] = None,
) -> int:
    """
    Wrapper of parse_stdin for use in CI pipelines.

    Failures are written to the standard error as a single line naming the
    layer that failed. The exception returned by error_callback may be of any
    type, it is told apart from sink failures by its ParseOverflowError cause.
    Errors raised by ok_callback propagate.

    Returns:
        0 on success or 1 for failures
    """
    try:
        parse_stdin(
            ok_callback,
            error_callback,
            skip_parse_errors,
            stop_on_error,
            break_on_blank,
            stream,
        )
    except InputReadError as e:
        sys.stderr.write(f"An error occurred in parse_stdin. {e}\n")
        return 1
    except Exception as e:
        if not isinstance(e.__cause__, ParseOverflowError):
            raise

        sys.stderr.write(f"An error occurred in hex2dec_line. {e}\n")
        return 1

    return 0
