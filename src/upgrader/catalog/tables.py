"""Built-in localized templates, one table and resolver per identifier.

Each resolver is a pure function of the language code: an exact-match lookup
in a read-only table. Language codes without an entry resolve to None.

The body template supports mustache style template variables:
    {{appName}}
    {{currentAppStoreVersion}}
    {{currentInstalledVersion}}

Python 3.13+. Zero external dependencies.
"""

from types import MappingProxyType

from upgrader.catalog.types import LanguageCode, MessageResolver, TemplateString
from upgrader.enums import UpgraderMessage

__all__ = [
    "DEFAULT_RESOLVERS",
    "TEMPLATES",
    "body",
    "button_title_ignore",
    "button_title_later",
    "button_title_update",
    "prompt",
    "supported_language_codes",
    "title",
]

_BODY: MappingProxyType[LanguageCode, TemplateString] = MappingProxyType({
    "en": "A new version of {{appName}} is available! Version {{currentAppStoreVersion}} "
    "is now available-you have {{currentInstalledVersion}}.",
    "ar": "نسخة جديدة من {{appName}} متوفرة! النسخة {{currentAppStoreVersion}} "
    "متوفرة الآن, أنت تستخدم النسخة {{currentInstalledVersion}}.",
    "es": "¡Una nueva versión de {{appName}} está disponible! La versión "
    "{{currentAppStoreVersion}} ya está disponible-usted tiene {{currentInstalledVersion}}.",
    "fr": "Une nouvelle version de {{appName}} est disponible ! La version "
    "{{currentAppStoreVersion}} est maintenant disponible, vous avez la version "
    "{{currentInstalledVersion}}.",
    "pt": "Há uma nova versão do {{appName}} disponível! A versão "
    "{{currentAppStoreVersion}} já está disponível, você tem a {{currentInstalledVersion}}.",
    "pl": "Nowa wersja {{appName}} jest dostępna! Wersja {{currentAppStoreVersion}} "
    "jest dostępna, Ty masz {{currentInstalledVersion}}.",
})

_BUTTON_TITLE_IGNORE: MappingProxyType[LanguageCode, TemplateString] = MappingProxyType({
    "en": "IGNORE",
    "ar": "تجاهل",
    "es": "IGNORAR",
    "fr": "IGNORER",
    "pt": "IGNORAR",
    "pl": "IGNORUJ",
})

_BUTTON_TITLE_LATER: MappingProxyType[LanguageCode, TemplateString] = MappingProxyType({
    "en": "LATER",
    "ar": "لاحقاً",
    "es": "MÁS TARDE",
    "fr": "PLUS TARD",
    "pt": "MAIS TARDE",
    "pl": "PÓŹNIEJ",
})

_BUTTON_TITLE_UPDATE: MappingProxyType[LanguageCode, TemplateString] = MappingProxyType({
    "en": "UPDATE NOW",
    "ar": "حدث الآن",
    "es": "ACTUALIZAR",
    "fr": "MAINTENANT",
    "pt": "ATUALIZAR",
    "pl": "AKTUALIZUJ",
})

_PROMPT: MappingProxyType[LanguageCode, TemplateString] = MappingProxyType({
    "en": "Would you like to update it now?",
    "ar": "هل تفضل أن يتم التحديث الآن",
    "es": "¿Le gustaría actualizar ahora?",
    "fr": "Voulez-vous mettre à jour maintenant?",
    "pt": "Você quer atualizar agora?",
    "pl": "Czy chciałbyś zaktualizować teraz?",
})

_TITLE: MappingProxyType[LanguageCode, TemplateString] = MappingProxyType({
    "en": "Update App?",
    "ar": "هل تريد تحديث التطبيق؟",
    "es": "¿Actualizar la aplicación?",
    "fr": "Mettre à jour l'application?",
    "pt": "Atualizar aplicação?",
    "pl": "Czy zaktualizować aplikację?",
})

TEMPLATES: MappingProxyType[UpgraderMessage, MappingProxyType[LanguageCode, TemplateString]] = (
    MappingProxyType({
        UpgraderMessage.BODY: _BODY,
        UpgraderMessage.BUTTON_TITLE_IGNORE: _BUTTON_TITLE_IGNORE,
        UpgraderMessage.BUTTON_TITLE_LATER: _BUTTON_TITLE_LATER,
        UpgraderMessage.BUTTON_TITLE_UPDATE: _BUTTON_TITLE_UPDATE,
        UpgraderMessage.PROMPT: _PROMPT,
        UpgraderMessage.TITLE: _TITLE,
    })
)
"""Read-only view of every built-in table, keyed by identifier."""


def body(language_code: LanguageCode) -> TemplateString | None:
    """The body of the upgrade message.

    Example:
        'A new version of Upgrader is available! Version 1.2 is now available-you have 1.0.'
    """
    return _BODY.get(language_code)


def button_title_ignore(language_code: LanguageCode) -> TemplateString | None:
    """The ignore button title."""
    return _BUTTON_TITLE_IGNORE.get(language_code)


def button_title_later(language_code: LanguageCode) -> TemplateString | None:
    """The later button title."""
    return _BUTTON_TITLE_LATER.get(language_code)


def button_title_update(language_code: LanguageCode) -> TemplateString | None:
    """The update button title."""
    return _BUTTON_TITLE_UPDATE.get(language_code)


def prompt(language_code: LanguageCode) -> TemplateString | None:
    """The call to action prompt message."""
    return _PROMPT.get(language_code)


def title(language_code: LanguageCode) -> TemplateString | None:
    """The alert dialog title."""
    return _TITLE.get(language_code)


DEFAULT_RESOLVERS: MappingProxyType[UpgraderMessage, MessageResolver] = MappingProxyType({
    UpgraderMessage.BODY: body,
    UpgraderMessage.BUTTON_TITLE_IGNORE: button_title_ignore,
    UpgraderMessage.BUTTON_TITLE_LATER: button_title_later,
    UpgraderMessage.BUTTON_TITLE_UPDATE: button_title_update,
    UpgraderMessage.PROMPT: prompt,
    UpgraderMessage.TITLE: title,
})
"""Built-in resolver for every identifier."""


def supported_language_codes(
    message_id: UpgraderMessage | None = None,
) -> tuple[LanguageCode, ...]:
    """Language codes with a built-in template.

    Args:
        message_id: Restrict to one identifier. If None, only codes covered
            for every identifier are returned.

    Returns:
        Language codes in table order
    """
    if message_id is not None:
        return tuple(TEMPLATES[message_id])
    tables = list(TEMPLATES.values())
    return tuple(code for code in tables[0] if all(code in table for table in tables[1:]))
