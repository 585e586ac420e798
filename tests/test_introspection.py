"""Tests for placeholder introspection."""

from hypothesis import given
from hypothesis import strategies as st

from upgrader.constants import PLACEHOLDER_APP_NAME, PLACEHOLDER_NAMES
from upgrader.introspection import extract_placeholders, missing_placeholders

_names = st.from_regex(r"[A-Za-z_][A-Za-z0-9_]{0,15}", fullmatch=True)


class TestExtractPlaceholders:
    """Test extract_placeholders."""

    def test_english_body(self) -> None:
        """All three tokens found in a full body template."""
        template = (
            "A new version of {{appName}} is available! Version {{currentAppStoreVersion}} "
            "is now available-you have {{currentInstalledVersion}}."
        )
        assert extract_placeholders(template) == PLACEHOLDER_NAMES

    def test_none_and_empty(self) -> None:
        """Unresolved or empty templates have no placeholders."""
        assert extract_placeholders(None) == frozenset()
        assert extract_placeholders("") == frozenset()

    def test_single_braces_ignored(self) -> None:
        """Only double-brace tokens count."""
        assert extract_placeholders("{appName} {{ appName }}") == frozenset()

    def test_repeated_token(self) -> None:
        """Repeated tokens are reported once."""
        assert extract_placeholders("{{appName}} {{appName}}") == {"appName"}

    @given(st.lists(_names, max_size=5), st.text(alphabet="abc !?.-", max_size=10))
    def test_finds_every_inserted_name(self, names: list[str], filler: str) -> None:
        """Property: every {{name}} inserted into a template is reported."""
        template = filler.join("{{" + name + "}}" for name in names)
        assert extract_placeholders(template) == frozenset(names)


class TestMissingPlaceholders:
    """Test missing_placeholders."""

    def test_complete(self) -> None:
        """Nothing missing when all required tokens are present."""
        template = "{{appName}} {{currentAppStoreVersion}} {{currentInstalledVersion}}"
        assert missing_placeholders(template) == frozenset()

    def test_partial(self) -> None:
        """Absent required tokens are reported."""
        missing = missing_placeholders("{{appName}} only")
        assert missing == PLACEHOLDER_NAMES - {PLACEHOLDER_APP_NAME}

    def test_custom_required(self) -> None:
        """Required names can be narrowed."""
        assert missing_placeholders("Update App?", required=["appName"]) == {"appName"}
