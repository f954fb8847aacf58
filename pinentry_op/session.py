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
# https://github.com/gpg/pinentry/blob/master/doc/pinentry.texi
# https://www.gnupg.org/documentation/manuals/assuan/
# https://www.gnupg.org/documentation/manuals/gnupg/Agent-Options.html

import logging

from pinentry_op import responses
from pinentry_op.exceptions import SecretProviderError
from pinentry_op.exceptions import SessionStateError
from pinentry_op.process_info import ProcessInfo
from pinentry_op.recognizer import Commands
from pinentry_op.recognizer import equals_ignore_case
from pinentry_op.recognizer import recognize


logger = logging.getLogger(__name__)

READY_MESSAGE = 'pinentry-op ready'
CLOSING_MESSAGE = 'closing connection'
CANCELED_DESCRIPTION = 'Operation cancelled'
ALLOW_EXTERNAL_CACHE = 'allow-external-password-cache'
PASSWORD_FROM_CACHE = 'PASSWORD_FROM_CACHE'
TTYINFO = '- - - - 0/0 -'
HELP = (
    '# BYE',
    '# GETINFO { flavor | version | pid | ttyinfo }',
    '# GETPIN',
    '# HELP',
    '# OPTION <name> [ [=] <value> ]',
    '# RESET',
    'OK',
    )


class SessionState:

    Initial = 'initial'
    Active = 'active'
    Closed = 'closed'


def strip_line_terminator(line):
    if line.endswith('\n'):
        line = line[:-1]
        if line.endswith('\r'):
            line = line[:-1]
    return line


class Session(object):
    """One pinentry connection.

    ``secret`` provides ISecretProvider and is consulted on GETPIN.
    ``out`` is a writable text stream that receives the response lines;
    it is flushed after the banner and after every request.

    When ``close_on_error`` is set a failed GETPIN closes the connection
    after reporting the error, otherwise the peer may send further
    requests.
    """

    def __init__(self, secret, out, process_info=None, debug=False,
                 close_on_error=False):
        if process_info is None:
            process_info = ProcessInfo()
        self.secret = secret
        self.out = out
        self.process_info = process_info
        self.debug = debug
        self.close_on_error = close_on_error
        self.cache_ok = False
        self.state = SessionState.Initial
        # Each handler takes the argument rest and returns
        # (response lines, whether the connection stays open).
        self._handlers = {
            Commands.Bye: self.handle_bye,
            Commands.GetInfo: self.handle_getinfo,
            Commands.GetPin: self.handle_getpin,
            Commands.Help: self.handle_help,
            Commands.Option: self.handle_option,
            Commands.Reset: self.handle_reset,
            }

    def run(self, input):
        self.announce()
        for line in input:
            if not self.handle(strip_line_terminator(line)):
                break
        self.state = SessionState.Closed

    def announce(self):
        if self.state != SessionState.Initial:
            raise SessionStateError('Session has already been announced.')
        lines = []
        if self.debug:
            lines.append(responses.comment('secret: {0!r}'.format(
                self.secret)))
        lines.append(responses.ok(READY_MESSAGE))
        self._write(lines)
        self.state = SessionState.Active

    def handle(self, line):
        if self.state != SessionState.Active:
            raise SessionStateError(
                'Cannot handle a request in state {0}.'.format(self.state))
        logger.debug('I: %s', line)
        command, rest = recognize(line)
        handler = self._handlers.get(command, self.handle_nop)
        lines, keep_open = handler(rest)
        self._write(lines)
        if not keep_open:
            self.state = SessionState.Closed
        return keep_open

    def _write(self, lines):
        for line in lines:
            if line.startswith('D '):
                logger.debug('O: D (redacted)')
            else:
                logger.debug('O: %s', line)
            self.out.write(line + '\n')
        self.out.flush()

    def handle_nop(self, arg):
        return [responses.ok()], True

    def handle_help(self, arg):
        return list(HELP), True

    def handle_getinfo(self, arg):
        lines = []
        if equals_ignore_case(arg, 'flavor'):
            lines.append(responses.data(self.process_info.flavor()))
        elif equals_ignore_case(arg, 'version'):
            lines.append(responses.data(self.process_info.version()))
        elif equals_ignore_case(arg, 'pid'):
            lines.append(responses.data(str(self.process_info.pid())))
        elif equals_ignore_case(arg, 'ttyinfo'):
            lines.append(responses.data(TTYINFO))
        lines.append(responses.ok())
        return lines, True

    def handle_option(self, arg):
        if equals_ignore_case(arg, ALLOW_EXTERNAL_CACHE):
            self.cache_ok = True
        return [responses.ok()], True

    def handle_reset(self, arg):
        self.cache_ok = False
        return [responses.ok()], True

    def handle_getpin(self, arg):
        try:
            pin = self.secret.read()
        except SecretProviderError as e:
            logger.warning('Could not read secret: %s', e)
            lines = [responses.err(responses.ERR_CANCELED,
                                   CANCELED_DESCRIPTION)]
            return lines, not self.close_on_error
        lines = []
        if self.cache_ok:
            lines.append(responses.status(PASSWORD_FROM_CACHE))
        lines.append(responses.data(pin))
        lines.append(responses.ok())
        return lines, True

    def handle_bye(self, arg):
        return [responses.ok(CLOSING_MESSAGE)], False
