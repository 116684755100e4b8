# splashgen/errors.py


class SplashError(Exception):
    """Base class for failures that stop one platform's generation."""


class ConfigError(SplashError):
    pass


class ProjectLayoutError(SplashError):
    pass


class ImageError(SplashError):
    pass


class PatchAnchorNotFound(SplashError):
    """The structural marker needed to place an entry is missing."""


class OutputError(SplashError):
    """A generated file could not be written into the project."""
