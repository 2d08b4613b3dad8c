# @mindmaze_header@
"""
implementation of XDG basedir environment variables specs
https://specifications.freedesktop.org/basedir-spec/basedir-spec-0.6.html

 * XDG_DATA_HOME : defines the base directory relative to which user specific
                   data files should be stored
 * XDG_CONFIG_HOME : defines the base directory relative to which user specific
                     configuration files should be stored.
 * XDG_CACHE_HOME : defines the base directory relative to which user specific
                    non-essential data files should be stored.
 * XDG_RUNTIME_DIR : defines the base directory relative to which user
                     specific non-essential runtime files and other file
                     objects (sockets, named pipes, ...) should be stored.
 * XDG_DATA_DIRS : defines the preference-ordered set of base directories to
                   search for data files in addition to the XDG_DATA_HOME
                   base directory.
 * XDG_CONFIG_DIRS : defines the preference-ordered set of base directories to
                     search for configuration files in addition to the
                     XDG_CONFIG_HOME base directory.

A variable set to an empty string is handled as if it was not set. Values are
read from the environment on each call, nothing is cached.
"""

import os
from typing import Iterable, Iterator, List, Mapping, Optional, Tuple

from .common import dprint, wprint
from .errors import RuntimeDirectoryUnset


# XDG default values, relative to $HOME for the *_HOME ones
_XDG_DATA_HOME_SUFFIX = '/.local/share'
_XDG_CONFIG_HOME_SUFFIX = '/.config'
_XDG_CACHE_HOME_SUFFIX = '/.cache'
_XDG_DATA_DIRS_DEFAULT = ('/usr/local/share', '/usr/share')
_XDG_CONFIG_DIRS_DEFAULT = ('/etc/xdg',)


def _existing_paths(basedirs: Iterable[str], resource: str) -> Iterator[str]:
    for basedir in basedirs:
        # relative entries, including empty ones, must be ignored
        if not os.path.isabs(basedir):
            continue

        path = os.path.join(basedir, resource)
        if os.path.exists(path):
            yield path


class BaseDirectoryResolver:
    """
    Resolve XDG base directories from an environment mapping.

    If *environ* is None, the live process environment is used, so that
    modifications of os.environ are seen by subsequent calls.
    """

    def __init__(self, environ: Optional[Mapping[str, str]] = None):
        self._environ = environ

    @property
    def environ(self) -> Mapping[str, str]:
        'environment mapping read by the resolver'
        if self._environ is None:
            return os.environ
        return self._environ

    def _getenv(self, name: str) -> str:
        return self.environ.get(name, '')

    def _home_based(self, name: str, suffix: str) -> str:
        value = self._getenv(name)
        if value:
            return value

        # HOME is not validated: unset HOME yields a path starting at /
        value = self._getenv('HOME') + suffix
        dprint(f'{name} not set, using {value}')
        return value

    def _path_list(self, name: str, default: Tuple[str, ...]) -> List[str]:
        value = self._getenv(name)
        if value:
            return value.split(':')

        dprint(f'{name} not set, using {":".join(default)}')
        return list(default)

    def runtime_dir(self) -> str:
        """
        base directory relative to which user-specific non-essential runtime
        files and other file objects should be stored.

        The directory must be owned by the user, with access mode 0700, and
        its lifetime bound to the user login session. This is not checked
        here: the value of XDG_RUNTIME_DIR is returned as is.

        Raises:
            RuntimeDirectoryUnset: XDG_RUNTIME_DIR is unset or empty
        """
        value = self._getenv('XDG_RUNTIME_DIR')
        if not value:
            raise RuntimeDirectoryUnset()
        return value

    def runtime_dir_or(self, fallback: str) -> str:
        """
        same as runtime_dir() but return *fallback* with a warning if
        XDG_RUNTIME_DIR is not set. *fallback* is neither created nor
        validated.
        """
        try:
            return self.runtime_dir()
        except RuntimeDirectoryUnset as err:
            wprint(f'{err}, falling back to {fallback}')
            return fallback

    def cache_home(self) -> str:
        'base directory for user specific non-essential data files'
        return self._home_based('XDG_CACHE_HOME', _XDG_CACHE_HOME_SUFFIX)

    def data_home(self) -> str:
        'base directory for user specific data files'
        return self._home_based('XDG_DATA_HOME', _XDG_DATA_HOME_SUFFIX)

    def config_home(self) -> str:
        'base directory for user specific configuration files'
        return self._home_based('XDG_CONFIG_HOME', _XDG_CONFIG_HOME_SUFFIX)

    def data_dirs(self) -> List[str]:
        """
        preference-ordered set of base directories to search for data files
        in addition to data_home(). The first directory listed is the most
        important. data_home() is more important than any of them.
        """
        return self._path_list('XDG_DATA_DIRS', _XDG_DATA_DIRS_DEFAULT)

    def config_dirs(self) -> List[str]:
        """
        preference-ordered set of base directories to search for
        configuration files in addition to config_home(). The first directory
        listed is the most important. config_home() is more important than any
        of them.
        """
        return self._path_list('XDG_CONFIG_DIRS', _XDG_CONFIG_DIRS_DEFAULT)

    def data_paths(self) -> List[str]:
        'data_home() followed by data_dirs()'
        return [self.data_home()] + self.data_dirs()

    def config_paths(self) -> List[str]:
        'config_home() followed by config_dirs()'
        return [self.config_home()] + self.config_dirs()

    def load_config_paths(self, resource: str) -> Iterator[str]:
        """
        yield existing paths of *resource* in configuration base
        directories, most important first
        """
        return _existing_paths(self.config_paths(), resource)

    def load_data_paths(self, resource: str) -> Iterator[str]:
        """
        yield existing paths of *resource* in data base directories, most
        important first
        """
        return _existing_paths(self.data_paths(), resource)

    def load_first_config(self, resource: str) -> Optional[str]:
        'most important existing path of configuration *resource* or None'
        return next(self.load_config_paths(resource), None)

    def load_first_data(self, resource: str) -> Optional[str]:
        'most important existing path of data *resource* or None'
        return next(self.load_data_paths(resource), None)


# resolver reading the live process environment
_RESOLVER = BaseDirectoryResolver()

runtime_dir = _RESOLVER.runtime_dir
runtime_dir_or = _RESOLVER.runtime_dir_or
cache_home = _RESOLVER.cache_home
data_home = _RESOLVER.data_home
config_home = _RESOLVER.config_home
data_dirs = _RESOLVER.data_dirs
config_dirs = _RESOLVER.config_dirs
data_paths = _RESOLVER.data_paths
config_paths = _RESOLVER.config_paths
load_config_paths = _RESOLVER.load_config_paths
load_data_paths = _RESOLVER.load_data_paths
load_first_config = _RESOLVER.load_first_config
load_first_data = _RESOLVER.load_first_data


# explicit export of public names
__all__ = [
    'BaseDirectoryResolver',
    'runtime_dir',
    'runtime_dir_or',
    'cache_home',
    'data_home',
    'config_home',
    'data_dirs',
    'config_dirs',
    'data_paths',
    'config_paths',
    'load_config_paths',
    'load_data_paths',
    'load_first_config',
    'load_first_data',
]
