"""Placeholder introspection for template strings.

Reports which mustache-style {{name}} tokens a template carries. Templates
are never rendered here; substitution belongs to the caller.

Python 3.13+. Zero external dependencies.
"""

import re
from collections.abc import Iterable

from upgrader.constants import PLACEHOLDER_NAMES

__all__ = [
    "PLACEHOLDER_PATTERN",
    "extract_placeholders",
    "missing_placeholders",
]

PLACEHOLDER_PATTERN: re.Pattern[str] = re.compile(r"\{\{([A-Za-z_][A-Za-z0-9_]*)\}\}")
"""Matches a {{name}} token and captures the name."""


def extract_placeholders(template: str | None) -> frozenset[str]:
    """Return the placeholder names used in a template.

    Args:
        template: Template string, or None for an unresolved message

    Returns:
        Names of all {{name}} tokens, empty for None

    Example:
        >>> sorted(extract_placeholders("Version {{currentAppStoreVersion}} of {{appName}}"))
        ['appName', 'currentAppStoreVersion']
    """
    if not template:
        return frozenset()
    return frozenset(PLACEHOLDER_PATTERN.findall(template))


def missing_placeholders(
    template: str | None,
    required: Iterable[str] = PLACEHOLDER_NAMES,
) -> frozenset[str]:
    """Return required placeholder names absent from a template."""
    return frozenset(required) - extract_placeholders(template)
