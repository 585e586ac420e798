"""Locale utilities for language code detection.

Centralizes locale format normalization and the host locale query used to
pick a catalog language when the caller does not supply one.

Detection never fails: every path terminates with at least the default
language code.

Python 3.13+.
"""

from __future__ import annotations

import functools
import logging
import os
from typing import TYPE_CHECKING

from upgrader.constants import (
    DEFAULT_LANGUAGE_CODE,
    IGNORED_SYSTEM_LOCALES,
    LOCALE_ENV_VARS,
    MAX_LOCALE_CACHE_SIZE,
)

if TYPE_CHECKING:
    from babel import Locale

    from upgrader.catalog.types import HostLocale, LocaleProvider, RenderingContext

__all__ = [
    "clear_locale_cache",
    "detect_language_code",
    "get_babel_locale",
    "get_system_locale",
    "language_subtag",
    "normalize_locale",
]

logger = logging.getLogger(__name__)

_SUBTAG_SEPARATORS = ("_", ".", "@")


def normalize_locale(locale_code: str) -> str:
    """Convert BCP-47 locale code to POSIX format for Babel.

    BCP-47 uses hyphens (en-US), while Babel/POSIX uses underscores (en_US).

    Args:
        locale_code: BCP-47 locale code (e.g., "en-US", "pt-BR")

    Returns:
        POSIX-formatted locale code (e.g., "en_US", "pt_BR")

    Example:
        >>> normalize_locale("pt-BR")
        'pt_BR'
        >>> normalize_locale("en")  # Already normalized
        'en'
    """
    return locale_code.replace("-", "_")


@functools.lru_cache(maxsize=MAX_LOCALE_CACHE_SIZE)
def get_babel_locale(locale_code: str) -> Locale:
    """Get a Babel Locale object with caching.

    Thread-safe via lru_cache internal locking.

    Args:
        locale_code: Locale code (BCP-47 or POSIX format accepted)

    Returns:
        Babel Locale object

    Raises:
        babel.core.UnknownLocaleError: If locale is not recognized
        ValueError: If locale format is invalid
    """
    # Lazy import: Babel loads CLDR data at import time; defer until needed
    from babel import Locale  # noqa: PLC0415

    return Locale.parse(normalize_locale(locale_code))


def clear_locale_cache() -> None:
    """Clear the Babel locale parse cache."""
    get_babel_locale.cache_clear()


def get_system_locale() -> str | None:
    """Detect the process default locale from the OS and environment.

    Detection order:
    1. Python locale.getlocale() (OS-level locale)
    2. LC_ALL environment variable (overrides all)
    3. LC_MESSAGES environment variable (for message catalogs)
    4. LANG environment variable (default locale)

    Encoding suffixes are stripped and "C"/"POSIX" pseudo-locales are ignored.

    Returns:
        Detected locale code in POSIX format, or None if nothing is set.

    Example:
        >>> import os
        >>> os.environ['LANG'] = 'pl_PL.UTF-8'
        >>> get_system_locale()
        'pl_PL'
    """
    import locale as locale_module  # noqa: PLC0415

    try:
        system_locale, _ = locale_module.getlocale()
    except (ValueError, AttributeError):
        system_locale = None

    if system_locale and system_locale not in IGNORED_SYSTEM_LOCALES:
        return normalize_locale(system_locale.split(".")[0])

    for var in LOCALE_ENV_VARS:
        value = os.environ.get(var)
        if value and value not in IGNORED_SYSTEM_LOCALES:
            return normalize_locale(value.split(".")[0])

    return None


def language_subtag(locale: HostLocale) -> str | None:
    """Extract the primary language subtag of a locale.

    Accepts a locale code string or a Babel Locale. Strings are parsed with
    Babel; codes Babel does not know fall back to the lowercase text before
    the first separator, so private or unlisted languages still resolve.

    Args:
        locale: Locale code ("pt-BR", "fr_CA.UTF-8") or Babel Locale, or None

    Returns:
        Language subtag ("pt", "fr"), or None if the locale carries no language

    Example:
        >>> language_subtag("pt-BR")
        'pt'
        >>> language_subtag("POSIX") is None
        True
    """
    if locale is None:
        return None
    if not isinstance(locale, str):
        return locale.language

    code = locale.strip()
    if code in IGNORED_SYSTEM_LOCALES:
        return None

    # Lazy import: Babel loads CLDR data at import time; defer until needed
    from babel import UnknownLocaleError  # noqa: PLC0415

    try:
        return get_babel_locale(code).language
    except UnknownLocaleError:
        logger.debug("Locale '%s' not in CLDR; using textual language subtag", code)
    except ValueError as e:
        logger.warning("Invalid locale format '%s': %s", code, e)

    subtag = normalize_locale(code)
    for separator in _SUBTAG_SEPARATORS:
        subtag = subtag.split(separator, 1)[0]
    return subtag.lower() or None


def detect_language_code(
    context: RenderingContext | None = None,
    *,
    locale_provider: LocaleProvider | None = None,
) -> str:
    """Determine the current language code.

    If a rendering context is given, its resolved locale decides. Otherwise
    the process default locale is queried through locale_provider, which
    defaults to get_system_locale(). When neither yields a language, the
    default "en" is returned.

    Args:
        context: Rendering context exposing a ``locale`` attribute
        locale_provider: Zero-argument callable returning the default locale

    Returns:
        Primary language subtag, never empty
    """
    if context is not None:
        code = language_subtag(context.locale)
        source = "context"
    else:
        provider = locale_provider if locale_provider is not None else get_system_locale
        code = language_subtag(provider())
        source = "system"

    if code is None:
        logger.debug("No %s locale available, using '%s'", source, DEFAULT_LANGUAGE_CODE)
        return DEFAULT_LANGUAGE_CODE

    logger.debug("Detected language code '%s' from %s locale", code, source)
    return code
