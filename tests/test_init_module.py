"""Tests for the package root: public API and version metadata."""

from importlib.metadata import PackageNotFoundError
from unittest.mock import patch

import upgrader


class TestPublicApi:
    """Names exported from the package root."""

    def test_all_exports_resolve(self) -> None:
        """Every name in __all__ is an attribute of the package."""
        for name in upgrader.__all__:
            assert hasattr(upgrader, name), name

    def test_catalog_usable_from_root(self) -> None:
        """The catalog can be used from top-level imports only."""
        messages = upgrader.UpgraderMessages("pt")
        assert messages.message(upgrader.UpgraderMessage.BUTTON_TITLE_LATER) == "MAIS TARDE"


class TestVersion:
    """Version metadata resolution."""

    def test_version_is_string(self) -> None:
        """__version__ is always a non-empty string."""
        assert isinstance(upgrader.__version__, str)
        assert upgrader.__version__

    def test_dev_fallback_when_not_installed(self) -> None:
        """Uninstalled source trees report a dev version."""
        import importlib  # noqa: PLC0415

        with patch("importlib.metadata.version", side_effect=PackageNotFoundError("upgrader")):
            reloaded = importlib.reload(upgrader)
            assert reloaded.__version__ == "0.0.0+dev"
        importlib.reload(upgrader)
