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


from zope.interface import Interface


class ISecretProvider(Interface):

    def read():
        """Return the secret as text without line breaks.

        Raises a SecretProviderError if the secret cannot be obtained.
        """


class IProcessInfo(Interface):

    def flavor():
        """The pinentry flavor reported by GETINFO flavor."""

    def version():
        """The version string reported by GETINFO version."""

    def pid():
        """The numeric identifier of this process."""
