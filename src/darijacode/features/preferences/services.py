from typing import Literal, Optional

from darijacode.db.store import THEME_KEY, KeyValueStore, PersistentValue

Theme = Literal["light", "dark"]


class PreferencesService:
    """Theme choice, remembered across sessions."""

    def __init__(self, store: Optional[KeyValueStore]):
        self.theme = PersistentValue(store, THEME_KEY, Theme, lambda: "light")

    @property
    def dark_mode(self) -> bool:
        return self.theme.value == "dark"

    def toggle_theme(self) -> str:
        return self.theme.update(lambda current: "light" if current == "dark" else "dark")
