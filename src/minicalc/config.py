"""
minicalc Configuration
======================

Settings for the calculator and its REPL. Configuration can come from:
- Default values (defined here)
- Environment variables
- Command-line options (applied by the CLI on top of the above)

Environment Variables
---------------------
| Variable                  | Field           | Example  |
|---------------------------|-----------------|----------|
| MINICALC_PROMPT           | prompt          | "calc> " |
| MINICALC_SHOW_TREE        | show_tree       | "0"      |
| MINICALC_COLOR            | color           | "false"  |
| MINICALC_STRICT_LITERALS  | strict_literals | "1"      |
| MINICALC_LOG_LEVEL        | log_level       | "DEBUG"  |
"""

import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


def _parse_bool(value: str) -> Optional[bool]:
    """Parse a boolean environment value, None if unrecognized."""
    lowered = value.strip().lower()
    if lowered in _TRUE_VALUES:
        return True
    if lowered in _FALSE_VALUES:
        return False
    return None


@dataclass
class CalculatorConfig:
    """
    Configuration for the calculator and REPL.

    Attributes:
        prompt: Text shown before each input line
        show_tree: Print the syntax tree of every line
        color: Colour the tree (green) and errors (red)
        strict_literals: Report number literals that do not fit in 32 bits
        log_level: Logging level name for the CLI
    """

    prompt: str = "> "
    show_tree: bool = True
    color: bool = True
    strict_literals: bool = False
    log_level: str = "WARNING"

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "CalculatorConfig":
        """
        Create a CalculatorConfig from environment variables.

        Unrecognized values are ignored and the default is kept.

        Args:
            environ: Mapping to read instead of os.environ

        Returns:
            CalculatorConfig with values from the environment
        """
        env = os.environ if environ is None else environ
        config = cls()

        if (prompt := env.get("MINICALC_PROMPT")) is not None:
            config.prompt = prompt

        if (show_tree := env.get("MINICALC_SHOW_TREE")) is not None:
            if (parsed := _parse_bool(show_tree)) is not None:
                config.show_tree = parsed

        if (color := env.get("MINICALC_COLOR")) is not None:
            if (parsed := _parse_bool(color)) is not None:
                config.color = parsed

        if (strict := env.get("MINICALC_STRICT_LITERALS")) is not None:
            if (parsed := _parse_bool(strict)) is not None:
                config.strict_literals = parsed

        if level := env.get("MINICALC_LOG_LEVEL"):
            if isinstance(logging.getLevelName(level.upper()), int):
                config.log_level = level.upper()

        return config
