"""Exception types raised by the ambient layers (config, files, commands).

Editing itself never raises: gestures that cannot apply are silent no-ops.
"""


class GeosketchError(Exception):
    """Base class for every error geosketch raises on purpose."""


class ConfigError(GeosketchError, ValueError):
    """The editor config file is malformed or names unknown settings."""


class DiagramFormatError(GeosketchError, ValueError):
    """A saved diagram does not have the expected structure."""


class CommandError(GeosketchError):
    """The host sent a command the editor does not understand."""
