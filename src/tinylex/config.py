"""
tlex Configuration
==================

Defaults for the token dump command. Configuration can come from:
- Default values (defined here)
- Environment variables
- Command-line options (applied by the command, highest priority)

The scanner itself has no configuration.
"""

from dataclasses import dataclass
import logging
import os
from typing import Final

logger = logging.getLogger(__name__)

OUTPUT_FORMATS: Final[tuple[str, ...]] = ("text", "json")

_TRUE_VALUES = ("1", "true", "yes", "on")
_FALSE_VALUES = ("0", "false", "no", "off", "")


def _parse_bool(var: str, value: str, default: bool) -> bool:
    lowered = value.strip().lower()
    if lowered in _TRUE_VALUES:
        return True
    if lowered in _FALSE_VALUES:
        return False
    logger.warning(f"Ignoring invalid {var}={value!r}, expected a boolean")
    return default


@dataclass
class DumpConfig:
    """
    Settings for dumping a token stream.

    Attributes:
        output_format: "text" (one token per line) or "json"
        strict: Fail with a build error if any ILLEGAL token is seen
        include_eof: Print the terminating EOF token
    """

    output_format: str = "text"
    strict: bool = False
    include_eof: bool = True

    @classmethod
    def from_env(cls) -> "DumpConfig":
        """
        Create DumpConfig from environment variables.

        Environment variables (all optional):
            TINYLEX_FORMAT: Output format ("text" or "json")
            TINYLEX_STRICT: Treat ILLEGAL tokens as errors (boolean)
            TINYLEX_NO_EOF: Omit the EOF token (boolean)

        Returns:
            DumpConfig with values from environment variables
        """
        config = cls()

        if output_format := os.environ.get("TINYLEX_FORMAT"):
            output_format = output_format.strip().lower()
            if output_format in OUTPUT_FORMATS:
                config.output_format = output_format
            else:
                logger.warning(
                    f"Ignoring invalid TINYLEX_FORMAT={output_format!r}, "
                    f"expected one of {', '.join(OUTPUT_FORMATS)}"
                )

        if (strict := os.environ.get("TINYLEX_STRICT")) is not None:
            config.strict = _parse_bool("TINYLEX_STRICT", strict, config.strict)

        if (no_eof := os.environ.get("TINYLEX_NO_EOF")) is not None:
            config.include_eof = not _parse_bool(
                "TINYLEX_NO_EOF", no_eof, not config.include_eof
            )

        return config
