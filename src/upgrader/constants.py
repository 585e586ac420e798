"""Shared constants for upgrader.

This module provides centralized configuration constants used by the
catalog and locale detection modules. Placing constants here avoids
circular imports and provides a single source of truth.

Constants are grouped by domain:
- Languages: Default and supported language subtags
- Placeholders: Mustache-style template token names
- Locale detection: System locale handling
- Cache limits: Memory bounds for caching subsystems

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Languages
    "DEFAULT_LANGUAGE_CODE",
    "SUPPORTED_LANGUAGE_CODES",
    # Placeholders
    "PLACEHOLDER_APP_NAME",
    "PLACEHOLDER_APP_STORE_VERSION",
    "PLACEHOLDER_INSTALLED_VERSION",
    "PLACEHOLDER_NAMES",
    # Locale detection
    "IGNORED_SYSTEM_LOCALES",
    "LOCALE_ENV_VARS",
    # Cache limits
    "MAX_LOCALE_CACHE_SIZE",
]

# ============================================================================
# LANGUAGES
# ============================================================================

# Final fallback when neither a rendering context nor the process reports a locale.
DEFAULT_LANGUAGE_CODE: str = "en"

# Language subtags covered by every table in upgrader.catalog.tables, in table order.
SUPPORTED_LANGUAGE_CODES: tuple[str, ...] = ("en", "ar", "es", "fr", "pt", "pl")

# ============================================================================
# PLACEHOLDERS
# ============================================================================
#
# Tokens appear in templates as {{name}}. Substitution is left to the caller.

PLACEHOLDER_APP_NAME: str = "appName"
PLACEHOLDER_APP_STORE_VERSION: str = "currentAppStoreVersion"
PLACEHOLDER_INSTALLED_VERSION: str = "currentInstalledVersion"

PLACEHOLDER_NAMES: frozenset[str] = frozenset(
    {
        PLACEHOLDER_APP_NAME,
        PLACEHOLDER_APP_STORE_VERSION,
        PLACEHOLDER_INSTALLED_VERSION,
    }
)

# ============================================================================
# LOCALE DETECTION
# ============================================================================

# Pseudo-locales that carry no language information.
IGNORED_SYSTEM_LOCALES: tuple[str, ...] = ("C", "POSIX", "")

# Environment variables consulted in order of precedence.
LOCALE_ENV_VARS: tuple[str, ...] = ("LC_ALL", "LC_MESSAGES", "LANG")

# ============================================================================
# CACHE LIMITS
# ============================================================================

# Maximum number of parsed Babel locales kept by get_babel_locale().
MAX_LOCALE_CACHE_SIZE: int = 128
