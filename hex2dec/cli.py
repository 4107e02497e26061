import sys
from typing import Dict, List, Optional

from docopt import docopt

from hex2dec import __version__
from hex2dec.driver import parse_ci, to_transform_error
from hex2dec.exceptions import ConfigError, ParseOverflowError, TransformError
from utility.config import build_config
from utility.log import Log, LoggerInitializationException

log = Log(__name__)

doc = """
Rewrite hexadecimal values read from stdin as decimal, keeping column widths.

 Usage:
  hex2dec [--skip-parse-errors]
          [--continue-on-error]
          [--break-on-blank]
          [--config <file>]
          [--log-level <LEVEL>]
          [--log-dir <directory>]
  hex2dec (-h | --help)
  hex2dec --version

Options:
  -h --help                 show this screen
  --version                 show the version
  --skip-parse-errors       leave values that do not fit in 128 bits unchanged
  --continue-on-error       report values that do not fit and carry on
                            with the next line
  --break-on-blank          stop reading at the first blank line
  --config <file>           YAML file with default settings
  --log-level <LEVEL>       Set logging level
  --log-dir <directory>     Write logs to files in this directory
"""


def write_line(line: str) -> None:
    """Success sink, writes the line back as UTF-8 with its newline untouched."""
    sys.stdout.buffer.write(line.encode("utf-8"))


def report_error(e: ParseOverflowError) -> TransformError:
    """Error sink, reports the parse error and converts it for the driver."""
    log.debug(f"Parse error routed to the error sink: {e}")
    sys.stderr.write(f"Failed to convert {e.digits}: {e}\n")
    return TransformError(str(e))


def run(args: Dict) -> int:
    """
    Converts the standard input as configured by the user.

    Arguments:
        args: Dict - containing the key/value pairs passed by the user

    Returns:
        0 on success or 1 for failures
    """
    try:
        config = build_config(args)
        log.set_level(config.log_level)
    except (ConfigError, LoggerInitializationException) as e:
        sys.stderr.write(f"An error occurred in the configuration. {e}\n")
        return 1

    if config.log_dir:
        log.configure_logger("hex2dec", config.log_dir)

    log.debug(f"Run configuration: {dict(config)}")

    # parse_ci reports the error that stops the run
    error_callback = to_transform_error if config.stop_on_error else report_error
    try:
        rc = parse_ci(
            write_line,
            error_callback,
            skip_parse_errors=config.skip_parse_errors,
            stop_on_error=config.stop_on_error,
            break_on_blank=config.break_on_blank,
        )
    finally:
        sys.stdout.buffer.flush()
        log.close_and_remove_filehandlers()

    return rc


def main(argv: Optional[List[str]] = None) -> int:
    args = docopt(doc, argv=argv, version=__version__)
    return run(args)


if __name__ == "__main__":
    sys.exit(main())
