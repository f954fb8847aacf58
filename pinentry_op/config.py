# pinentry-op A pinentry that reads passphrases from 1Password
# Copyright (C) 2014 Richard Mitchell
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <http://www.gnu.org/licenses/>.

"""Locating the 1Password item reference to read.

The reference lives on the first line of a configuration file which by
default sits beside the program, named like the program with a ``.cfg``
extension.
"""

import os

from pinentry_op.exceptions import ConfigurationError
from pinentry_op.providers.onepassword import DEFAULT_OP_PATH


CONFIG_EXTENSION = '.cfg'

ENV_ITEM_REF = 'PINENTRY_OP_ITEM_REF'
ENV_CONFIG = 'PINENTRY_OP_CONFIG'
ENV_OP_PATH = 'OP_BIN'
ENV_DEBUG = 'PINENTRY_OP_DEBUG'
ENV_LOG_FILE = 'PINENTRY_OP_LOG'


def default_config_path(prog):
    return os.path.splitext(os.path.abspath(prog))[0] + CONFIG_EXTENSION


def first_line(text):
    for i, char in enumerate(text):
        if char in '\r\n':
            return text[:i]
    return text


def read_item_ref(path):
    try:
        with open(path, 'r', encoding='utf-8') as fh:
            text = fh.read()
    except (IOError, OSError, UnicodeDecodeError) as e:
        raise ConfigurationError(
            'Cannot read configuration file {0}: {1}'.format(path, e)) from e
    item_ref = first_line(text).strip()
    if not item_ref:
        raise ConfigurationError(
            'Configuration file {0} does not name an item.'.format(path))
    return item_ref


def get_item_ref(prog, environ, item_ref=None, config=None):
    """Resolve the item reference.

    Precedence: an explicit ``item_ref``, the PINENTRY_OP_ITEM_REF
    environment variable, an explicit ``config`` path, the
    PINENTRY_OP_CONFIG environment variable, then the file beside
    ``prog``.
    """
    if item_ref:
        return item_ref
    if environ.get(ENV_ITEM_REF):
        return environ[ENV_ITEM_REF]
    if config is None:
        config = environ.get(ENV_CONFIG) or default_config_path(prog)
    return read_item_ref(config)


def get_op_path(environ, op_path=None):
    if op_path:
        return op_path
    return environ.get(ENV_OP_PATH) or DEFAULT_OP_PATH


def is_enabled(value):
    return (value or '').lower() in ('1', 'true', 'yes', 'on')
