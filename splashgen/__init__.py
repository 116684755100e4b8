# splashgen/__init__.py
from .config import SplashConfig, load_config
from .errors import (
    SplashError,
    ConfigError,
    ProjectLayoutError,
    ImageError,
    PatchAnchorNotFound,
    OutputError,
)

__version__ = "0.1.0"
