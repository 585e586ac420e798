"""Localized message catalog for the upgrade prompt.

UpgraderMessages binds a single language code to the six message lookups.
Individual messages are replaced by composition: pass an override for one
identifier and every other identifier keeps its built-in template.

Example:
    >>> messages = UpgraderMessages(
    ...     "en",
    ...     overrides={UpgraderMessage.BUTTON_TITLE_IGNORE: "My Ignore"},
    ... )
    >>> messages.button_title_ignore
    'My Ignore'
    >>> messages.button_title_later
    'LATER'

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING

from upgrader.catalog.tables import DEFAULT_RESOLVERS
from upgrader.constants import SUPPORTED_LANGUAGE_CODES
from upgrader.enums import UpgraderMessage
from upgrader.errors import InvalidOverrideError, UnknownMessageError
from upgrader.locale_utils import detect_language_code

if TYPE_CHECKING:
    from upgrader.catalog.types import (
        LanguageCode,
        LocaleProvider,
        MessageOverride,
        MessageResolver,
        RenderingContext,
        TemplateString,
    )

__all__ = ["UpgraderMessages", "coerce_message_id"]

logger = logging.getLogger(__name__)


def coerce_message_id(message_id: UpgraderMessage | str) -> UpgraderMessage:
    """Convert a raw identifier to UpgraderMessage.

    Raises:
        UnknownMessageError: If message_id names no UpgraderMessage member
    """
    if isinstance(message_id, UpgraderMessage):
        return message_id
    try:
        return UpgraderMessage(message_id)
    except ValueError:
        raise UnknownMessageError(message_id) from None


def _constant(template: TemplateString) -> MessageResolver:
    def resolve(_language_code: LanguageCode) -> TemplateString:
        return template

    return resolve


def _freeze_overrides(
    overrides: Mapping[UpgraderMessage | str, MessageOverride] | None,
) -> MappingProxyType[UpgraderMessage, MessageResolver]:
    resolvers: dict[UpgraderMessage, MessageResolver] = {}
    for key, value in (overrides or {}).items():
        message_id = coerce_message_id(key)
        if isinstance(value, str):
            resolvers[message_id] = _constant(value)
        elif callable(value):
            resolvers[message_id] = value
        else:
            msg = (
                f"Override for '{message_id}' must be a string or a callable, "
                f"got {type(value).__name__}"
            )
            raise InvalidOverrideError(msg)
    return MappingProxyType(resolvers)


@dataclass(frozen=True, slots=True, init=False, eq=False)
class UpgraderMessages:
    """The localized messages used for display in the upgrade prompt.

    Immutable after construction: a new catalog is created for a new language.
    Catalogs compare by identity, since override resolvers are not values.

    The only extension point is the ``overrides`` argument. The per-message
    properties read through message(), so redefining one in a subclass does
    not change what message() returns.

    Attributes:
        language_code: The primary language subtag for the locale, which
            defaults to the host-reported locale.
        overrides: Read-only mapping of identifier to replacement resolver.
    """

    language_code: LanguageCode
    overrides: MappingProxyType[UpgraderMessage, MessageResolver] = field(repr=False)

    def __init__(
        self,
        code: LanguageCode | None = None,
        *,
        overrides: Mapping[UpgraderMessage | str, MessageOverride] | None = None,
        context: RenderingContext | None = None,
        locale_provider: LocaleProvider | None = None,
    ) -> None:
        """Create a catalog bound to one language.

        Args:
            code: Language code overriding host locale detection
            overrides: Replacement per identifier, either a resolver taking
                the language code or a constant template
            context: Rendering context consulted when code is None
            locale_provider: Default-locale accessor consulted when code and
                context are None (defaults to the process locale)

        Raises:
            UnknownMessageError: If an override key is not a message identifier
            InvalidOverrideError: If an override value is not str or callable
        """
        if code is None:
            code = detect_language_code(context, locale_provider=locale_provider)
        object.__setattr__(self, "language_code", code)
        object.__setattr__(self, "overrides", _freeze_overrides(overrides))
        logger.debug(
            "UpgraderMessages created for '%s' with %d override(s)",
            code,
            len(self.overrides),
        )

    def resolver(self, message_id: UpgraderMessage | str) -> MessageResolver:
        """Return the resolver used for an identifier."""
        message_id = coerce_message_id(message_id)
        return self.overrides.get(message_id, DEFAULT_RESOLVERS[message_id])

    def message(self, message_id: UpgraderMessage | str) -> TemplateString | None:
        """Resolve an identifier to its template for the bound language.

        Override values take precedence over the built-in templates.

        Args:
            message_id: UpgraderMessage member or its string value

        Returns:
            Template string, or None if no template exists for the language

        Raises:
            UnknownMessageError: If message_id is not a message identifier
        """
        return self.resolver(message_id)(self.language_code)

    def messages(self) -> dict[UpgraderMessage, TemplateString | None]:
        """Resolve every identifier for the bound language."""
        return {message_id: self.message(message_id) for message_id in UpgraderMessage}

    def with_overrides(
        self, overrides: Mapping[UpgraderMessage | str, MessageOverride]
    ) -> UpgraderMessages:
        """Return a catalog for the same language with overrides merged in.

        Raises:
            UnknownMessageError: If an override key is not a message identifier
            InvalidOverrideError: If an override value is not str or callable
        """
        merged: dict[UpgraderMessage | str, MessageOverride] = dict(self.overrides)
        merged.update(overrides)
        return UpgraderMessages(self.language_code, overrides=merged)

    @property
    def is_supported(self) -> bool:
        """Whether built-in templates cover the bound language for every identifier."""
        return self.language_code in SUPPORTED_LANGUAGE_CODES

    @property
    def body(self) -> TemplateString | None:
        """The body of the upgrade message."""
        return self.message(UpgraderMessage.BODY)

    @property
    def button_title_ignore(self) -> TemplateString | None:
        """The ignore button title."""
        return self.message(UpgraderMessage.BUTTON_TITLE_IGNORE)

    @property
    def button_title_later(self) -> TemplateString | None:
        """The later button title."""
        return self.message(UpgraderMessage.BUTTON_TITLE_LATER)

    @property
    def button_title_update(self) -> TemplateString | None:
        """The update button title."""
        return self.message(UpgraderMessage.BUTTON_TITLE_UPDATE)

    @property
    def prompt(self) -> TemplateString | None:
        """The call to action prompt message."""
        return self.message(UpgraderMessage.PROMPT)

    @property
    def title(self) -> TemplateString | None:
        """The alert dialog title."""
        return self.message(UpgraderMessage.TITLE)
