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

"""Formatting of pinentry response lines.

Every function returns a single line without its terminating newline.
"""

# https://github.com/gpg/libgpg-error/blob/master/src/err-codes.h.in
GPG_ERR_SOURCE_PINENTRY = 5
GPG_ERR_CANCELED = 99


def make_error_code(code, source=GPG_ERR_SOURCE_PINENTRY):
    return (source << 24) | code


ERR_CANCELED = make_error_code(GPG_ERR_CANCELED)


def escape_data(data):
    # Line breaks cannot be carried on a data line at all.
    data = data.replace('\r', '').replace('\n', '')
    return data.replace('%', '%25')


def ok(message=None):
    if message:
        return 'OK {0}'.format(message)
    return 'OK'


def err(code, description):
    return 'ERR {0} {1}'.format(code, description)


def data(payload):
    return 'D {0}'.format(escape_data(payload))


def status(keyword, *args):
    return ' '.join(('S', keyword) + tuple(str(a) for a in args))


def comment(text):
    return '# {0}'.format(text)
