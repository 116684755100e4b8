# splashgen/config.py
import os
import re
from dataclasses import dataclass, replace

import yaml

from .errors import ConfigError

DEFAULT_COLOR = "#FFFFFF"

# pubspec.yaml section used when the config lives inside the Flutter project file
PUBSPEC_SECTION = "flutter_animated_splash"

_HEX_RE = re.compile(r"^#?[0-9A-Fa-f]{6}$")


@dataclass(frozen=True)
class SplashConfig:
    color: str = DEFAULT_COLOR
    image: str | None = None
    android_animation: str | None = None
    ios_animation: str | None = None
    splash_icon_background: str | None = None
    branding_image: str | None = None

    def __post_init__(self):
        if self.splash_icon_background is None:
            object.__setattr__(self, "splash_icon_background", self.color)

    def resolve(self, project_dir: str) -> "SplashConfig":
        """Return a copy whose asset paths are joined onto ``project_dir``."""
        def _join(path):
            return os.path.join(project_dir, path) if path else path

        return replace(
            self,
            image=_join(self.image),
            android_animation=_join(self.android_animation),
            ios_animation=_join(self.ios_animation),
            branding_image=_join(self.branding_image),
        )


def normalize_color(value, field: str) -> str:
    text = str(value).strip()
    if not _HEX_RE.match(text):
        raise ConfigError(f"{field}: expected a 6-digit hex color, got {value!r}")
    return text if text.startswith("#") else "#" + text


def _optional_path(value, field: str):
    if value is None:
        return None
    if not isinstance(value, str):
        raise ConfigError(f"{field}: expected a path string, got {value!r}")
    return value or None


def _section(doc):
    if isinstance(doc, dict) and isinstance(doc.get(PUBSPEC_SECTION), dict):
        return doc[PUBSPEC_SECTION]
    return doc


def _color_field(data, raw, field):
    """
    Colors are taken from the untyped parse so unquoted hex digits keep their
    text: ``color: 000000`` would otherwise load as the int 0, and
    ``001122`` as the octal 594.
    """
    value = data.get(field)
    if value is None:
        return None
    text = raw.get(field) if isinstance(raw, dict) else None
    return normalize_color(text if isinstance(text, str) else value, field)


def load_config(path: str) -> SplashConfig:
    """
    Parse a YAML splash config into a SplashConfig.

    The settings are read from the top-level mapping, or from a
    ``flutter_animated_splash`` section when the file is a pubspec.yaml.
    A missing ``image`` is kept as None; the platform generators report it.
    """
    if not path or not os.path.isfile(path):
        raise ConfigError(f"Config file not found: {path}")

    try:
        with open(path, "r", encoding="utf-8") as f:
            text = f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigError(f"Failed to read {path}: {e}") from e

    try:
        data = yaml.safe_load(text)
        raw = yaml.load(text, Loader=yaml.BaseLoader)
    except yaml.YAMLError as e:
        raise ConfigError(f"Failed to parse {path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(f"{path} does not contain a mapping")
    data, raw = _section(data), _section(raw)

    animation = data.get("animation") or {}
    if not isinstance(animation, dict):
        raise ConfigError("animation: expected a mapping with android/ios keys")

    return SplashConfig(
        color=_color_field(data, raw, "color") or DEFAULT_COLOR,
        image=_optional_path(data.get("image"), "image"),
        android_animation=_optional_path(animation.get("android"), "animation.android"),
        ios_animation=_optional_path(animation.get("ios"), "animation.ios"),
        splash_icon_background=_color_field(data, raw, "splash_icon_background"),
        branding_image=_optional_path(data.get("branding_image"), "branding_image"),
    )
