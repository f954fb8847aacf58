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

# References:
# https://developer.1password.com/docs/cli/reference/commands/read
# https://developer.1password.com/docs/cli/secret-references/

import logging
import subprocess

from zope.interface import implementer

from pinentry_op.exceptions import EmptySecret
from pinentry_op.exceptions import InvalidSecretEncoding
from pinentry_op.exceptions import ProviderFailed
from pinentry_op.exceptions import ProviderUnavailable
from pinentry_op.interfaces import ISecretProvider


logger = logging.getLogger(__name__)

DEFAULT_OP_PATH = 'op'


def strip_newlines(text):
    return text.replace('\r', '').replace('\n', '')


@implementer(ISecretProvider)
class OnePasswordItem(object):
    """A secret stored in 1Password, read with ``op read``.

    ``item_ref`` is a secret reference such as
    ``op://vault/item/password``. ``runner`` has the signature of
    :func:`subprocess.run` and is replaceable for testing.
    """

    def __init__(self, item_ref, op_path=DEFAULT_OP_PATH,
                 runner=subprocess.run):
        self.item_ref = item_ref
        self.op_path = op_path
        self.runner = runner

    def __repr__(self):
        return '{0}({1!r})'.format(type(self).__name__, self.item_ref)

    def command(self):
        return [self.op_path, 'read', self.item_ref]

    def read(self):
        logger.debug('Running %s read %s', self.op_path, self.item_ref)
        try:
            result = self.runner(
                self.command(),
                stdin=subprocess.DEVNULL,
                stdout=subprocess.PIPE,
                stderr=subprocess.PIPE,
                )
        except OSError as e:
            raise ProviderUnavailable(
                'Cannot run 1Password CLI {0!r}: {1}'.format(
                    self.op_path, e)) from e

        if result.returncode != 0:
            stderr = (result.stderr or b'').decode('utf-8', 'replace')
            logger.debug('op stderr: %s', stderr.strip())
            raise ProviderFailed(
                '1Password CLI encountered an error (exit status {0})'.format(
                    result.returncode),
                returncode=result.returncode,
                stderr=stderr.strip(),
                )

        if not result.stdout:
            raise EmptySecret('1Password CLI returned empty data')

        try:
            text = result.stdout.decode('utf-8')
        except UnicodeDecodeError as e:
            raise InvalidSecretEncoding(
                '1Password CLI returned data that is not UTF-8: {0}'.format(
                    e)) from e

        return strip_newlines(text)
