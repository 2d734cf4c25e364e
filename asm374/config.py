"""
Front-end configuration.

Parses and validates YAML configuration files for the line-oriented front
end, for example:

    hex_case: lower
    echo_errors: true
    explain: false
    verbose: false
"""

from dataclasses import dataclass, fields, replace
from typing import Any, Optional

import yaml

from .errors import ConfigError

VALID_HEX_CASES = {"upper", "lower"}


@dataclass(frozen=True)
class FrontendConfig:
    """
    Options for the line-oriented front end.

    Attributes:
        hex_case: "upper" or "lower" hex digits in assembled output
        echo_errors: Echo failing input lines to the output; None means
            only when the input isn't interactive
        explain: Explain hex input instead of disassembling it
        verbose: Print progress messages
    """

    hex_case: str = "upper"
    echo_errors: Optional[bool] = None
    explain: bool = False
    verbose: bool = False

    def override(self, **options: Any) -> "FrontendConfig":
        """Return a copy with the options that aren't None replaced."""
        return replace(self, **{k: v for k, v in options.items() if v is not None})


def parse_config(yaml_content: str) -> FrontendConfig:
    """
    Parse and validate a YAML configuration.

    An empty document gives the defaults.

    Raises:
        ConfigError: If the YAML is invalid or an option is unknown or has
            the wrong type
    """
    try:
        data = yaml.safe_load(yaml_content)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML syntax: {e}")

    if data is None:
        return FrontendConfig()
    if not isinstance(data, dict):
        raise ConfigError("Configuration must be a YAML mapping/dictionary")

    _validate_config(data)
    return FrontendConfig(**data)


def _validate_config(data: dict) -> None:
    """Validate configuration keys and values."""
    known = {f.name for f in fields(FrontendConfig)}
    for key in data:
        if key not in known:
            raise ConfigError(f"Unknown option '{key}'")

    if "hex_case" in data and data["hex_case"] not in VALID_HEX_CASES:
        raise ConfigError(
            f"'hex_case' must be one of {sorted(VALID_HEX_CASES)}, got {data['hex_case']!r}"
        )
    if "echo_errors" in data and data["echo_errors"] is not None:
        if not isinstance(data["echo_errors"], bool):
            raise ConfigError("'echo_errors' must be a boolean")
    for key in ("explain", "verbose"):
        if key in data and not isinstance(data[key], bool):
            raise ConfigError(f"'{key}' must be a boolean")


def load_config(path: str) -> FrontendConfig:
    """
    Load a configuration file.

    Raises:
        ConfigError: If the file can't be read or is invalid
    """
    try:
        with open(path, "r") as f:
            content = f.read()
    except OSError as e:
        raise ConfigError(f"Cannot read {path}: {e.strerror}")
    return parse_config(content)
