"""Named option presets for common wrapping jobs.

WHY: A handful of layouts come up again and again (plain text at 70
columns, e-mail at 72, git commit bodies, narrow side panels). Naming
them lets callers and the CLI pick one without spelling out every
option.

HOW: Each preset is a plain dict of WrapOptions field values. PRESETS
maps preset names to their dicts; WrapOptions.from_preset() copies one
and applies overrides.

RULES:
- Presets are frozen constants: never mutate them at runtime.
- Keys must be WrapOptions fields accepted by OPTIONS_SCHEMA.
"""

from typing import Any, Dict

PRESET_DEFAULT: Dict[str, Any] = {
    "width": 70,
    "wrap_algorithm": "optimal-fit",
}

# Plain-text e-mail: 72 columns leaves room for "> " quoting
PRESET_EMAIL: Dict[str, Any] = {
    "width": 72,
    "wrap_algorithm": "optimal-fit",
    "splitter": "hyphen",
}

# Commit message bodies: predictable first fit, never cut identifiers
PRESET_COMMIT: Dict[str, Any] = {
    "width": 72,
    "wrap_algorithm": "greedy",
    "break_long_words": False,
}

# Narrow columns look ragged quickly; hyphenate to even them out
PRESET_NARROW: Dict[str, Any] = {
    "width": 40,
    "wrap_algorithm": "optimal-fit",
    "splitter": "hyphenation",
}

PRESETS: Dict[str, Dict[str, Any]] = {
    "default": PRESET_DEFAULT,
    "email": PRESET_EMAIL,
    "commit": PRESET_COMMIT,
    "narrow": PRESET_NARROW,
}
