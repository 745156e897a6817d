from .settings import MarkerGlyphs, Settings, get_settings, load_settings

__all__ = [
    "MarkerGlyphs",
    "Settings",
    "get_settings",
    "load_settings",
]
