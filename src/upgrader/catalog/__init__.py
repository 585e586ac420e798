"""Localized message catalog for the upgrade prompt.

Submodules:
    types    - PEP 695 type aliases (LanguageCode, TemplateString, MessageResolver)
               and the RenderingContext protocol
    tables   - Built-in templates and one default resolver per identifier
    messages - UpgraderMessages (language-bound catalog with overrides)

Python 3.13+.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability

from upgrader.catalog.messages import UpgraderMessages, coerce_message_id
from upgrader.catalog.tables import (
    DEFAULT_RESOLVERS,
    TEMPLATES,
    body,
    button_title_ignore,
    button_title_later,
    button_title_update,
    prompt,
    supported_language_codes,
    title,
)
from upgrader.catalog.types import (
    HostLocale,
    LanguageCode,
    LocaleProvider,
    MessageOverride,
    MessageResolver,
    RenderingContext,
    TemplateString,
)

__all__ = [
    # Catalog
    "UpgraderMessages",
    "coerce_message_id",
    # Built-in templates and default resolvers
    "DEFAULT_RESOLVERS",
    "TEMPLATES",
    "body",
    "button_title_ignore",
    "button_title_later",
    "button_title_update",
    "prompt",
    "supported_language_codes",
    "title",
    # Type aliases for user code type annotations
    "HostLocale",
    "LanguageCode",
    "LocaleProvider",
    "MessageOverride",
    "MessageResolver",
    "RenderingContext",
    "TemplateString",
]
