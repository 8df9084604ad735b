"""Shared constants for tldrkit.

Centralizes the environment variable names, fallback language and time
units used across the package. Placing constants here avoids circular
imports and provides a single source of truth.

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Environment
    "LANG_ENV_VAR",
    "LANGUAGE_ENV_VAR",
    "NO_COLOR_ENV_VAR",
    # Languages
    "FALLBACK_LANGUAGE",
    "LANGUAGE_LIST_SEPARATOR",
    "LANGUAGE_CODE_LENGTH",
    "LANGUAGE_TAG_LENGTH",
    "LANGUAGE_TAG_SEPARATOR",
    "PAGES_DIR_PREFIX",
    # Time units
    "DAY",
    "HOUR",
    "MINUTE",
]

# ============================================================================
# ENVIRONMENT
# ============================================================================

# Primary locale, e.g. "en_US.UTF-8". Absence means "no locale configured".
LANG_ENV_VAR: str = "LANG"

# Colon-separated priority list, e.g. "de_DE.UTF-8:pl:en".
LANGUAGE_ENV_VAR: str = "LANGUAGE"

# https://no-color.org/ - any non-empty value disables colored output.
NO_COLOR_ENV_VAR: str = "NO_COLOR"

# ============================================================================
# LANGUAGES
# ============================================================================

# English pages must always be searchable.
FALLBACK_LANGUAGE: str = "en"

LANGUAGE_LIST_SEPARATOR: str = ":"

# <language> (ll)
LANGUAGE_CODE_LENGTH: int = 2

# <language>_<country> (ll_CC)
LANGUAGE_TAG_LENGTH: int = 5
LANGUAGE_TAG_SEPARATOR: str = "_"

# Page directories are named "pages.<language>" ("pages" itself is English).
PAGES_DIR_PREFIX: str = "pages."

# ============================================================================
# TIME UNITS (seconds)
# ============================================================================

DAY: int = 86400
HOUR: int = 3600
MINUTE: int = 60
