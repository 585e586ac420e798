"""Type aliases and protocols for the catalog domain.

Provides semantic type aliases used throughout the catalog package and by
user code when annotating override resolvers and host locale accessors.

Python 3.13+.
"""

from collections.abc import Callable
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from babel import Locale

__all__ = [
    "HostLocale",
    "LanguageCode",
    "LocaleProvider",
    "MessageOverride",
    "MessageResolver",
    "RenderingContext",
    "TemplateString",
]

type LanguageCode = str
"""Primary language subtag used as lookup key (e.g., 'en', 'pt')."""

type TemplateString = str
"""Localized template that may contain {{name}} placeholder tokens."""

type HostLocale = str | Locale | None
"""Locale as reported by the host: code string, Babel Locale, or unset."""

type MessageResolver = Callable[[LanguageCode], TemplateString | None]
"""Resolves one message identifier for a language code."""

type MessageOverride = MessageResolver | TemplateString
"""Override for one identifier: a resolver, or a constant template."""

type LocaleProvider = Callable[[], HostLocale]
"""Zero-argument accessor for the process default locale."""


class RenderingContext(Protocol):
    """Host rendering context with a resolved locale."""

    @property
    def locale(self) -> HostLocale:
        """Locale resolved for this context, or None if unresolved."""
        ...  # pragma: no cover  # Protocol stub - not executable
