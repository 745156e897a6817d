"""
Settings: loads the YAML settings file, validates it, and exposes read-only
values.

The default settings live in ``config/data/defaults.yaml`` and are loaded
once, on the first call to get_settings(). Call load_settings(path) to build
a Settings from another file (the CLI does this for ``--config``). Nothing
writes to a Settings after construction.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from types import MappingProxyType
from typing import Any, Optional, cast

import yaml

logger = logging.getLogger(__name__)

_DEFAULTS_PATH = Path(__file__).parent / "data" / "defaults.yaml"

_SECTIONS: dict[str, frozenset[str]] = {
    "pickup": frozenset({"allow_overflow"}),
    "rendering": frozenset({"separator", "markers"}),
    "display": frozenset({"measurement_decimals", "ratio_decimals"}),
    "comparison": frozenset({"tighter_above", "looser_below", "close_within_cm"}),
}
_MARKER_KEYS = frozenset({"skip", "pickup", "multiple"})


@dataclass(frozen=True)
class MarkerGlyphs:
    """Glyphs used to draw one slot of a placement."""

    skip: str
    pickup: str
    multiple: str  # format string with a {count} field

    def for_count(self, count: int) -> str:
        if count == 0:
            return self.skip
        if count == 1:
            return self.pickup
        return self.multiple.format(count=count)


class Settings:
    """
    Read-only gaugeshift settings.

    The raw sections are kept in ``sections`` (a MappingProxyType of
    MappingProxyTypes); typed accessors cover every key.

    Instantiate directly to use a custom file (e.g. in tests); otherwise use
    get_settings() for the module singleton.
    """

    def __init__(self, path: Path = _DEFAULTS_PATH) -> None:
        self._path = Path(path)
        self.sections: MappingProxyType[str, MappingProxyType[str, Any]]

        raw = self._load_yaml()
        self._validate(raw)
        self.sections = MappingProxyType(
            {name: MappingProxyType(dict(raw[name])) for name in _SECTIONS}
        )
        logger.debug("loaded settings from %s", self._path)

    # ── Loading ────────────────────────────────────────────────────────────────

    def _load_yaml(self) -> dict[str, Any]:
        try:
            with open(self._path, encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except FileNotFoundError:
            raise FileNotFoundError(f"Settings file not found: {self._path}") from None
        except yaml.YAMLError as exc:
            raise ValueError(f"Failed to parse settings file {self._path}: {exc}") from exc
        if not isinstance(data, dict):
            raise ValueError(f"Settings file {self._path} must contain a mapping at top level")
        return cast(dict[str, Any], data)

    # ── Validation ─────────────────────────────────────────────────────────────

    def _validate(self, raw: dict[str, Any]) -> None:
        """Raise ValueError listing every problem found in the raw settings."""
        errors: list[str] = []
        for name in raw:
            if name not in _SECTIONS:
                errors.append(f"unknown section {name!r}")
        for name, keys in _SECTIONS.items():
            section = raw.get(name)
            if not isinstance(section, dict):
                errors.append(f"section {name!r} is missing or not a mapping")
                continue
            for key in sorted(keys - section.keys()):
                errors.append(f"{name}.{key} is missing")
            for key in sorted(section.keys() - keys):
                errors.append(f"{name}.{key} is not a known setting")
        if not errors:
            self._check_values(raw, errors)
        if errors:
            raise ValueError(
                f"Invalid settings file {self._path}:\n" + "\n".join(f"  • {e}" for e in errors)
            )

    def _check_values(self, raw: dict[str, Any], errors: list[str]) -> None:
        if not isinstance(raw["pickup"]["allow_overflow"], bool):
            errors.append("pickup.allow_overflow must be true or false")

        rendering = raw["rendering"]
        if not isinstance(rendering["separator"], str):
            errors.append("rendering.separator must be a string")
        markers = rendering["markers"]
        if not isinstance(markers, dict) or set(markers) != _MARKER_KEYS:
            errors.append("rendering.markers must define exactly skip, pickup and multiple")
        elif not all(isinstance(v, str) for v in markers.values()):
            errors.append("rendering.markers values must be strings")
        elif "{count}" not in markers["multiple"]:
            errors.append("rendering.markers.multiple must contain a {count} field")

        for key in ("measurement_decimals", "ratio_decimals"):
            value = raw["display"][key]
            if isinstance(value, bool) or not isinstance(value, int) or value < 0:
                errors.append(f"display.{key} must be a non-negative integer")

        comparison = raw["comparison"]
        for key in ("tighter_above", "looser_below", "close_within_cm"):
            value = comparison[key]
            if isinstance(value, bool) or not isinstance(value, (int, float)) or value < 0:
                errors.append(f"comparison.{key} must be a non-negative number")
        if not errors and comparison["looser_below"] > comparison["tighter_above"]:
            errors.append("comparison.looser_below must not exceed comparison.tighter_above")

    # ── Query API ──────────────────────────────────────────────────────────────

    @property
    def path(self) -> Path:
        return self._path

    @property
    def allow_overflow(self) -> bool:
        return bool(self.sections["pickup"]["allow_overflow"])

    @property
    def separator(self) -> str:
        return str(self.sections["rendering"]["separator"])

    @property
    def markers(self) -> MarkerGlyphs:
        m = self.sections["rendering"]["markers"]
        return MarkerGlyphs(skip=m["skip"], pickup=m["pickup"], multiple=m["multiple"])

    @property
    def measurement_decimals(self) -> int:
        return int(self.sections["display"]["measurement_decimals"])

    @property
    def ratio_decimals(self) -> int:
        return int(self.sections["display"]["ratio_decimals"])

    @property
    def tighter_above(self) -> float:
        return float(self.sections["comparison"]["tighter_above"])

    @property
    def looser_below(self) -> float:
        return float(self.sections["comparison"]["looser_below"])

    @property
    def close_within_cm(self) -> float:
        return float(self.sections["comparison"]["close_within_cm"])


_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Return the module-level settings singleton, loading the defaults on first use."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def load_settings(path: Path | str) -> Settings:
    """Build a Settings from a YAML file other than the packaged defaults."""
    return Settings(Path(path))
