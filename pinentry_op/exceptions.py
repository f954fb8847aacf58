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


class PinentryOpError(Exception):
    """Base class for errors raised by this package."""


class SecretProviderError(PinentryOpError):
    """The secret could not be obtained from the secret provider."""


class ProviderUnavailable(SecretProviderError):
    """The password manager command could not be started."""


class ProviderFailed(SecretProviderError):
    """The password manager command exited with a non-zero status."""

    def __init__(self, message, returncode=None, stderr=''):
        super().__init__(message)
        self.returncode = returncode
        self.stderr = stderr


class EmptySecret(SecretProviderError):
    """The password manager command succeeded but returned no data."""


class InvalidSecretEncoding(SecretProviderError):
    """The password manager command returned data that is not valid
    UTF-8 text.
    """


class ConfigurationError(PinentryOpError):
    """The item reference to read could not be determined."""


class SessionStateError(RuntimeError):
    """A session method was called in the wrong lifecycle state."""


class FatalException(Exception):

    def __init__(self, exit_code, message=None):
        super().__init__(message or exit_code)
        self.exit_code = exit_code
