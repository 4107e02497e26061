"""
hex2dec run configuration model.

Settings are resolved from three layers, each overriding the previous one:

    built-in defaults
    an optional YAML file passed with --config
    command line flags
"""
import os
from typing import Dict, Optional

import yaml

from hex2dec.exceptions import ConfigError

DEFAULTS = {
    "skip_parse_errors": False,
    "stop_on_error": True,
    "break_on_blank": False,
    "log_level": "WARNING",
    "log_dir": None,
}

FLAGS = ("skip_parse_errors", "stop_on_error", "break_on_blank")


class RunConfig(dict):
    """hex2dec run configuration object."""

    def __init__(self, *arg, **kw):
        super(RunConfig, self).__init__(DEFAULTS)
        self.update(*arg, **kw)

    def __getattr__(self, key):
        try:
            return self[key]
        except KeyError:
            raise AttributeError(key)

    def validate(self) -> "RunConfig":
        """Raise ConfigError when a key is unknown or a flag is not a boolean."""
        unknown = sorted(set(self.keys()) - set(DEFAULTS.keys()))
        if unknown:
            raise ConfigError(f"Unknown configuration keys: {', '.join(unknown)}")

        for flag in FLAGS:
            if not isinstance(self[flag], bool):
                raise ConfigError(f"'{flag}' must be true or false, got {self[flag]!r}")

        if not isinstance(self["log_level"], str):
            raise ConfigError(f"'log_level' must be a string, got {self['log_level']!r}")

        return self


def load_file(file_name: str) -> Dict:
    """Retrieve yaml data content from file."""
    file_path = os.path.abspath(file_name)
    try:
        with open(file_path, "r") as conf_:
            content = yaml.safe_load(conf_)
    except OSError as e:
        raise ConfigError(f"Unable to read config file {file_path}: {e}") from e
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in config file {file_path}: {e}") from e

    if content is None:
        return dict()

    if not isinstance(content, dict):
        raise ConfigError(f"Config file {file_path} must contain a mapping")

    return content


def build_config(args: Dict, file_name: Optional[str] = None) -> RunConfig:
    """
    Builds the run configuration from the docopt arguments.

    Arguments:
        args: Dict - containing the key/value pairs passed by the user
        file_name: YAML file overriding the defaults, defaults to args["--config"]

    Returns:
        the validated RunConfig
    """
    file_name = file_name or args.get("--config")
    config = RunConfig(load_file(file_name) if file_name else dict())

    # Flags can only switch the defaults, never back
    if args.get("--skip-parse-errors"):
        config["skip_parse_errors"] = True

    if args.get("--continue-on-error"):
        config["stop_on_error"] = False

    if args.get("--break-on-blank"):
        config["break_on_blank"] = True

    if args.get("--log-level"):
        config["log_level"] = args["--log-level"]

    if args.get("--log-dir"):
        config["log_dir"] = args["--log-dir"]

    return config.validate()
