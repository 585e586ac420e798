"""Enumerations for upgrader type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, so a member can be used anywhere
the raw message identifier is expected.

Python 3.13+.
"""

from enum import StrEnum


class UpgraderMessage(StrEnum):
    """The message identifiers used in the upgrade prompt.

    StrEnum provides automatic string conversion: str(UpgraderMessage.TITLE) == "title"
    """

    BODY = "body"
    """Body of the upgrade message"""

    BUTTON_TITLE_IGNORE = "buttonTitleIgnore"
    """Ignore button"""

    BUTTON_TITLE_LATER = "buttonTitleLater"
    """Later button"""

    BUTTON_TITLE_UPDATE = "buttonTitleUpdate"
    """Update Now button"""

    PROMPT = "prompt"
    """Prompt message"""

    TITLE = "title"
    """Alert dialog title"""


__all__ = [
    "UpgraderMessage",
]
