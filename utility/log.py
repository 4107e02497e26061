import logging
import logging.handlers
import os

LOG_FORMAT = (
    "%(asctime)s - %(name)s - %(module)s:%(lineno)d - %(levelname)s - %(message)s"
)


class LoggerInitializationException(Exception):
    """Exception raised for logger initialization errors."""

    pass


class Log(logging.Logger):
    """hex2dec Logger object to help streamline logging."""

    def __init__(self, name=None) -> None:
        """
        Initializes the logging mechanism.
        Args:
            name (str): Logger name (module name or other identifier).
        """
        super().__init__(name)
        logging.basicConfig(format=LOG_FORMAT, level=logging.WARNING)
        self._logger = logging.getLogger("hex2dec")

        # Set logger name
        if name:
            self.name = f"hex2dec.{name}"

        self._log_dir = None
        self.log_format = LOG_FORMAT
        self.info = self._logger.info
        self.debug = self._logger.debug
        self.warning = self._logger.warning
        self.error = self._logger.error
        self.exception = self._logger.exception

    @property
    def log_dir(self) -> str:
        """Return the absolute path to the logging folder."""
        return self._log_dir

    @property
    def log_level(self) -> int:
        """Return the logging level."""
        return self._logger.getEffectiveLevel()

    @property
    def logger(self) -> logging.Logger:
        """Return the logger."""
        return self._logger

    def set_level(self, level) -> None:
        """Sets the level of the package logger.

        Args:
            level (str|int): level name such as "debug" or a logging constant.

        Raises:
            LoggerInitializationException when the level is not known.
        """
        if isinstance(level, str):
            level = level.upper()

        try:
            self._logger.setLevel(level)
        except (TypeError, ValueError) as e:
            raise LoggerInitializationException(f"Invalid log level: {level}") from e

    def configure_logger(self, name, log_dir):
        """Configures a new FileHandler for the package logger.

        Args:
            name: used for naming the logfile
            log_dir: directory where logs are being placed
        Returns:
            path of the log file or None if the log_dir does not exist
        """
        if not os.path.isdir(log_dir):
            self._logger.error(
                f"Log directory '{log_dir}' does not exist, logs will not output to file."
            )
            return None

        self.close_and_remove_filehandlers()
        self._log_dir = os.path.abspath(log_dir)

        log_format = logging.Formatter(self.log_format)
        logfile = os.path.join(self._log_dir, f"{name}.log")

        _handler = logging.handlers.RotatingFileHandler(
            logfile,
            maxBytes=10 * 1024 * 1024,
            backupCount=5,
        )
        _handler.setFormatter(log_format)
        self._logger.addHandler(_handler)

        # error file handler
        err_logfile = os.path.join(self._log_dir, f"{name}.err")
        _err_handler = logging.FileHandler(err_logfile)
        _err_handler.setFormatter(log_format)
        _err_handler.setLevel(logging.ERROR)
        self._logger.addHandler(_err_handler)

        self._logger.debug(f"Logfile: {logfile}")
        return logfile

    def close_and_remove_filehandlers(self):
        """Close FileHandlers and then remove them from the logger's handlers list."""
        handlers = self._logger.handlers[:]
        for handler in handlers:
            if isinstance(handler, logging.FileHandler):
                handler.close()
                self._logger.removeHandler(handler)
