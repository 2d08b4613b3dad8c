# @mindmaze_header@
"""
load YAML configuration files found in XDG configuration directories
"""

import os
from typing import Mapping, Optional

import yaml

from .common import dprint, yaml_load
from .errors import ConfigFileError
from .xdg import BaseDirectoryResolver


def load_config(resource: str,
                environ: Optional[Mapping[str, str]] = None):
    """
    Load the most important configuration file named *resource*.

    The file is looked up in XDG_CONFIG_HOME then in each entry of
    XDG_CONFIG_DIRS. Values are loaded as strings.

    Args:
        resource: path of the file relative to the configuration base dirs
        environ: environment to use instead of os.environ

    Returns:
        the parsed content ({} for an empty file), or None if the file is
        found in none of the configuration base directories.

    Raises:
        ConfigFileError: the path found is not a readable file or not valid
            YAML
    """
    path = BaseDirectoryResolver(environ).load_first_config(resource)
    if path is None:
        dprint(f'no {resource} found in configuration directories')
        return None

    if not os.path.isfile(path):
        raise ConfigFileError(path, 'not a regular file')

    dprint(f'loading configuration from {path}')
    try:
        content = yaml_load(path)
    except (OSError, yaml.YAMLError) as err:
        raise ConfigFileError(path, str(err)) from err

    if content is None:
        return {}
    return content
