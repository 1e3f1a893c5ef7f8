from darijacode.features.preferences.services import PreferencesService


def test_theme_defaults_to_light(store):
    assert PreferencesService(store).theme.value == "light"
    assert not PreferencesService(store).dark_mode


def test_theme_toggle_persists(store):
    prefs = PreferencesService(store)
    assert prefs.toggle_theme() == "dark"
    assert PreferencesService(store).dark_mode
    prefs.toggle_theme()
    assert PreferencesService(store).theme.value == "light"


def test_unknown_stored_theme_falls_back(store):
    store.set_item("theme", '"sepia"')
    assert PreferencesService(store).theme.value == "light"
