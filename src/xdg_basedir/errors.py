# @mindmaze_header@
"""
Definition of custom errors
"""


class XdgBaseDirError(Exception):
    """Basic exception for errors raised by xdg-basedir."""
    def __init__(self, msg=None):
        if msg is None:
            msg = "xdg base directory lookup failed"
        super().__init__(msg)


class RuntimeDirectoryUnset(XdgBaseDirError):
    """
    XDG_RUNTIME_DIR is unset or empty.

    Applications should fall back to a replacement directory with similar
    capabilities and print a warning message.
    """

    def __init__(self):
        super().__init__('XDG_RUNTIME_DIR not set')


class ConfigFileError(XdgBaseDirError):
    """Exception for a configuration file that cannot be parsed."""

    def __init__(self, path: str, reason: str):
        super().__init__(f'Failed to load {path}: {reason}')
        self.path = path
        self.reason = reason
