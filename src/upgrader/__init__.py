"""upgrader - Localized messages for an "update available" prompt.

Resolves a language code and message identifier to a template string. The
templates carry mustache-style placeholders ({{appName}},
{{currentAppStoreVersion}}, {{currentInstalledVersion}}) that callers fill in.

Public API:
    UpgraderMessages - Language-bound catalog with per-message overrides
    UpgraderMessage - The six message identifiers
    detect_language_code - Host locale detection with "en" fallback
    extract_placeholders - Placeholder names used in a template

Exceptions:
    UpgraderError - Base exception class
    UnknownMessageError - Identifier is not an UpgraderMessage member
    InvalidOverrideError - Override is neither a string nor a resolver

Submodules:
    upgrader.catalog - Templates, default resolvers and type aliases
    upgrader.locale_utils - Locale normalization and system locale detection
    upgrader.constants - Supported languages and placeholder names
"""

from .catalog import UpgraderMessages
from .enums import UpgraderMessage
from .errors import InvalidOverrideError, UnknownMessageError, UpgraderError
from .introspection import extract_placeholders
from .locale_utils import detect_language_code

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("upgrader-messages")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "InvalidOverrideError",
    "UnknownMessageError",
    "UpgraderError",
    "UpgraderMessage",
    "UpgraderMessages",
    "__version__",
    "detect_language_code",
    "extract_placeholders",
]
