import pytest

from pairsone.domain.errors import UnknownTheme
from pairsone.themes import THEMES, ThemeCatalog


def test_default_catalog() -> None:
    catalog = ThemeCatalog()

    assert catalog.cards_available("eighties") == THEMES["eighties"]
    assert catalog.names() == sorted(THEMES)


def test_custom_catalog_is_copied() -> None:
    themes = {"tiny": 2}
    catalog = ThemeCatalog(themes)
    themes["tiny"] = 99

    assert catalog.cards_available("tiny") == 2
    with pytest.raises(UnknownTheme):
        catalog.cards_available("eighties")
