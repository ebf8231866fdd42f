"""
Grid options from an INI style config file.

    [grid]
    direction = down
    spaces = 2
    separator = ' | '

A non-empty separator wins over spaces.  Quote the separator to keep leading
or trailing whitespace.
"""

import ast
import configparser
import logging
import os.path
from . import grid

__public__ = ['load_config', 'options_from_config']

logger = logging.getLogger(__name__)
var_dir = os.path.expanduser('~')
config_file = '.termgrid_config'
section = 'grid'


def default_config():
    return {
        section: {
            "direction": "ltr",
            "spaces": "2",
            "separator": ""
        }
    }


def load_config(filename=None):
    """ Layer the defaults with the user config file.  An explicit
    `filename` must be readable; the default one is optional. """
    config = configparser.ConfigParser(interpolation=None)
    config.read_dict(default_config())
    try:
        if filename is None:
            filename = os.path.join(var_dir, config_file)
            logger.debug("Reading config: %s", filename)
            config.read(filename, encoding='utf-8')
        else:
            logger.debug("Reading config: %s", filename)
            with open(filename, encoding='utf-8') as f:
                config.read_file(f)
    except (configparser.Error, UnicodeDecodeError) as e:
        raise grid.InvalidOption("Bad config file: %s" % e) from e
    return config


def parse_separator(raw):
    if raw[:1] in ('"', "'") and raw[-1:] == raw[:1] and len(raw) > 1:
        try:
            return ast.literal_eval(raw)
        except (SyntaxError, ValueError) as e:
            raise grid.InvalidOption("Bad separator: %s" % raw) from e
    return raw


def options_from_config(config):
    """ Build GridOptions from the `[grid]` section of a config. """
    options = config[section]
    try:
        spaces = options.getint('spaces')
    except ValueError as e:
        raise grid.InvalidOption("Bad spaces value: %s" %
                                 options['spaces']) from e
    separator = parse_separator(options['separator'])
    padding = separator if separator else spaces
    return grid.GridOptions(direction=options['direction'], padding=padding)
