"""Configuration defaults, .env loading and terminal width detection.

WHY: Callers (the CLI most of all) want sensible defaults they can
override without code changes: a default width, algorithm and splitter.
Keeping them as plain module-level values makes them easy to find.

HOW: python-dotenv loads a .env file on import. Defaults are read from
REFLOW_* environment variables. load_width() validates the width value
on demand. terminal_width() asks the OS for the current terminal size.

RULES:
- REFLOW_WIDTH, REFLOW_WRAP_ALGORITHM, REFLOW_SPLITTER,
  REFLOW_HYPHENATION_LANGUAGE and REFLOW_LOG_LEVEL are recognized
- Invalid REFLOW_WIDTH raises ValueError with a clear message
- Nothing here is consulted by the core engine; only WrapOptions.from_env
  and the CLI read it
"""

from __future__ import annotations

import os
import shutil

from dotenv import load_dotenv

# Load .env from the working directory (where the command is run from)
load_dotenv()

FALLBACK_WIDTH = 79
"""Width used when neither REFLOW_WIDTH nor a terminal size is available."""

DEFAULT_WRAP_ALGORITHM = os.getenv("REFLOW_WRAP_ALGORITHM", "optimal-fit")
DEFAULT_SPLITTER = os.getenv("REFLOW_SPLITTER", "none")
DEFAULT_HYPHENATION_LANGUAGE = os.getenv("REFLOW_HYPHENATION_LANGUAGE", "en_US")
DEFAULT_LOG_LEVEL = os.getenv("REFLOW_LOG_LEVEL", "WARNING").upper()


def load_width(default: int = FALLBACK_WIDTH) -> int:
    """Read the default wrap width from REFLOW_WIDTH.

    RULES:
    - Unset or blank falls back to default
    - Non-integer values raise ValueError

    Returns:
        The configured width.
    """
    raw = os.getenv("REFLOW_WIDTH", "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(
            "REFLOW_WIDTH must be an integer, got '{}'. "
            "Fix it in the environment or the .env file.".format(raw)
        ) from None


def terminal_width(default: int = FALLBACK_WIDTH) -> int:
    """Return the width of the attached terminal in columns.

    Falls back to default when stdout is not a terminal.
    """
    return shutil.get_terminal_size((default, 24)).columns
