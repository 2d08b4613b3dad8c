# @mindmaze_header@
"""
The xdg_basedir python package

Resolve the base directories defined by the freedesktop.org XDG Base
Directory specification:
 * runtime_dir(), cache_home(), data_home(), config_home() return a single
   base directory
 * data_dirs(), config_dirs() return the preference-ordered search lists

The module-level functions read os.environ at each call. Use
BaseDirectoryResolver to read another environment mapping:
   >>> from xdg_basedir import BaseDirectoryResolver
   >>> BaseDirectoryResolver({'HOME': '/home/manfred'}).cache_home()
   '/home/manfred/.cache'

"""

from .config import load_config
from .errors import ConfigFileError, RuntimeDirectoryUnset, XdgBaseDirError
from .xdg import (BaseDirectoryResolver, cache_home, config_dirs,
                  config_home, config_paths, data_dirs, data_home,
                  data_paths, load_config_paths, load_data_paths,
                  load_first_config, load_first_data, runtime_dir,
                  runtime_dir_or)

__version__ = '1.0.0'
