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

import argparse
from gettext import gettext as _
import sys

from pinentry_op import NAME
from pinentry_op import VERSION
from pinentry_op import config


# Options a GnuPG agent passes to every pinentry program. They are
# accepted so the agent can launch us, and otherwise ignored.
PINENTRY_OPTIONS = (
    ('--display', '-D'),
    ('--ttyname', '-T'),
    ('--ttytype', '-N'),
    ('--lc-ctype', '-C'),
    ('--lc-messages', '-M'),
    ('--timeout', '-o'),
    ('--parent-wid', '-W'),
    ('--colors', '-c'),
    ('--ttyalert', '-a'),
    )
PINENTRY_FLAGS = (
    ('--no-global-grab', '-g'),
    )


class VersionAction(argparse.Action):
    """Like argparse's version action, but writes to the parser's own
    stdout.
    """

    def __init__(self,
                 option_strings,
                 version=None,
                 dest=argparse.SUPPRESS,
                 default=argparse.SUPPRESS,
                 help='Show the version and exit.'):  # @ReservedAssignment
        super(VersionAction, self).__init__(
            option_strings=option_strings,
            dest=dest,
            default=default,
            nargs=0,
            help=help)
        self.version = version

    def __call__(self, parser, namespace, values, option_string=None):
        parser.print_version(self.version)
        parser.exit()


class ArgumentParser(argparse.ArgumentParser):
    """Customized so that stdout, stderr and exit are configurable."""

    def __init__(self, prog=None, description=None,
                 exit=sys.exit,  # @ReservedAssignment
                 stdout=sys.stdout, stderr=sys.stderr):
        self._exit = exit
        self._stdout = stdout
        self._stderr = stderr
        argparse.ArgumentParser.__init__(
            self, prog=prog, description=description)

    def print_usage(self, file=None):
        if file is None:
            file = self._stdout
        self._print_message(self.format_usage(), file)

    def print_help(self, file=None):
        if file is None:
            file = self._stdout
        self._print_message(self.format_help(), file)

    def print_version(self, version, file=None):
        if file is None:
            file = self._stdout
        self._print_message(version + '\n', file)

    def _print_message(self, message, file=None):
        if message:
            if file is None:
                file = self._stderr
            file.write(message)

    def exit(self, status=0, message=None):
        if message:
            self._print_message(message, self._stderr)
        self._exit(status)

    def error(self, message):
        self.print_usage(self._stderr)
        args = {'prog': self.prog, 'message': message}
        self.exit(2, _('%(prog)s: error: %(message)s\n') % args)


def make_argparser(prog=NAME,
                   exit=sys.exit,  # @ReservedAssignment
                   stdout=sys.stdout, stderr=sys.stderr, environ=None):
    if environ is None:
        environ = {}
    argparser = ArgumentParser(
        prog=prog,
        description='A pinentry program which answers GETPIN with a '
        'secret read from 1Password using the op command.',
        exit=exit,
        stdout=stdout,
        stderr=stderr,
        )
    argparser.add_argument(
        '--version', action=VersionAction,
        version='{0} {1}'.format(NAME, VERSION),
        )
    argparser.add_argument(
        '--config', metavar='file', default=None,
        help='Read the 1Password item reference from the first line of '
        '[file]. Defaults to ${0} or to the program path with a {1} '
        'extension.'.format(config.ENV_CONFIG, config.CONFIG_EXTENSION),
        )
    argparser.add_argument(
        '--item-ref', metavar='ref', dest='item_ref', default=None,
        help='The 1Password secret reference to read, for example '
        'op://vault/item/password. Overrides the configuration file. '
        'Defaults to ${0}.'.format(config.ENV_ITEM_REF),
        )
    argparser.add_argument(
        '--op-path', metavar='path', dest='op_path', default=None,
        help='The 1Password CLI executable. Defaults to ${0} or "op".'.format(
            config.ENV_OP_PATH),
        )
    argparser.add_argument(
        '--debug', action='store_true',
        default=config.is_enabled(environ.get(config.ENV_DEBUG)),
        help='Log the protocol exchange (without secrets) to stderr and '
        'announce the configured item reference.',
        )
    argparser.add_argument(
        '--log-file', metavar='file', dest='log_file',
        default=environ.get(config.ENV_LOG_FILE),
        help='Append log messages to [file].',
        )
    argparser.add_argument(
        '--close-on-error', action='store_true', dest='close_on_error',
        help='Close the connection when the secret cannot be read, '
        'instead of only failing the GETPIN request.',
        )

    for long_option, short_option in PINENTRY_OPTIONS:
        argparser.add_argument(
            long_option, short_option, metavar='value',
            help=argparse.SUPPRESS)
    for long_option, short_option in PINENTRY_FLAGS:
        argparser.add_argument(
            long_option, short_option, action='store_true',
            help=argparse.SUPPRESS)
    return argparser
