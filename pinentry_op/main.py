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

import io
import logging
import logging.handlers
import os
import sys

from pinentry_op import NAME
from pinentry_op import config
from pinentry_op.arguments import make_argparser
from pinentry_op.exceptions import ConfigurationError
from pinentry_op.exceptions import FatalException
from pinentry_op.providers.onepassword import OnePasswordItem
from pinentry_op.session import Session


logger = logging.getLogger(__name__)

LOG_FORMAT = '%(asctime)s [%(levelname)s] %(name)s: %(message)s'
LOG_MAX_BYTES = 1024 * 1024
LOG_BACKUP_COUNT = 3
EXIT_CONFIGURATION_ERROR = 2


def configure_logging(debug=False, log_file=None, stderr=sys.stderr):
    """Attach log handlers to the package logger and return them.

    stdout carries the protocol, so logs only ever go to ``stderr`` or
    to ``log_file``.
    """
    package_logger = logging.getLogger('pinentry_op')
    package_logger.setLevel(logging.DEBUG if debug else logging.INFO)
    formatter = logging.Formatter(LOG_FORMAT)
    handlers = []
    if log_file:
        handler = logging.handlers.RotatingFileHandler(
            log_file, maxBytes=LOG_MAX_BYTES, backupCount=LOG_BACKUP_COUNT,
            encoding='utf-8', errors='backslashreplace')
        handler.setFormatter(formatter)
        handlers.append(handler)
    if debug:
        handler = logging.StreamHandler(stderr)
        handler.setFormatter(logging.Formatter('[{0}] %(message)s'.format(
            NAME)))
        handlers.append(handler)
    for handler in handlers:
        package_logger.addHandler(handler)
    return handlers


def protocol_input(stdin):
    """Decode requests as UTF-8 without ever failing on bad bytes.

    A peer may send setup text in another encoding; such lines must
    still be acknowledged rather than end the session.
    """
    buffer = getattr(stdin, 'buffer', None)
    if buffer is None:
        return stdin
    return io.TextIOWrapper(buffer, encoding='utf-8',
                            errors='surrogateescape')


def unconfigure_logging(handlers):
    package_logger = logging.getLogger('pinentry_op')
    for handler in handlers:
        package_logger.removeHandler(handler)
        handler.close()


def main(argv=None,
         environ=None,
         prog=None,
         exit=sys.exit,  # @ReservedAssignment
         stdin=sys.stdin,
         stdout=sys.stdout,
         stderr=sys.stderr,
         provider_factory=OnePasswordItem,
         argparser_factory=make_argparser,
         ):
    if argv is None:
        if prog is None:
            prog = sys.argv[0]
        argv = sys.argv[1:]
    if environ is None:
        environ = os.environ
    if prog is None:
        prog = NAME

    argparser = argparser_factory(
        prog=os.path.basename(prog), exit=exit, stdout=stdout,
        stderr=stderr, environ=environ)
    args, ignored = argparser.parse_known_args(argv)

    handlers = configure_logging(args.debug, args.log_file, stderr)
    if ignored:
        logger.debug('Ignoring arguments: %s', ' '.join(ignored))

    exit_code = 0
    try:
        try:
            item_ref = config.get_item_ref(
                prog, environ, item_ref=args.item_ref, config=args.config)
        except ConfigurationError as e:
            raise FatalException(EXIT_CONFIGURATION_ERROR, str(e)) from e
        secret = provider_factory(
            item_ref, op_path=config.get_op_path(environ, args.op_path))
        session = Session(secret, stdout, debug=args.debug,
                          close_on_error=args.close_on_error)
        session.run(protocol_input(stdin))
    except FatalException as e:
        logger.error('%s', e)
        exit_code = e.exit_code
    finally:
        unconfigure_logging(handlers)
    return exit(exit_code)
