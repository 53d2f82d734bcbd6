"""Theme catalog: how many distinct card faces each theme ships."""

from typing import Dict, Optional

from pairsone.domain.errors import UnknownTheme

THEMES: Dict[str, int] = {
    "eighties": 32,
    "animals": 36,
    "food": 32,
    "space": 24,
    "robots": 50,
}


class ThemeCatalog:
    def __init__(self, themes: Optional[Dict[str, int]] = None):
        self.themes: Dict[str, int] = dict(THEMES if themes is None else themes)

    def cards_available(self, theme_name: str) -> int:
        """Get the size of the value pool of the theme

        Args:
            theme_name (str): Theme key stored on the game

        Returns:
            int: Number of distinct card values
        """
        if theme_name not in self.themes:
            raise UnknownTheme(theme_name)
        return self.themes[theme_name]

    def names(self) -> list[str]:
        return sorted(self.themes)
