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

import os

from zope.interface import implementer

from pinentry_op import FLAVOR
from pinentry_op import VERSION
from pinentry_op.interfaces import IProcessInfo


@implementer(IProcessInfo)
class ProcessInfo(object):

    def flavor(self):
        return FLAVOR

    def version(self):
        return VERSION

    def pid(self):
        return os.getpid()
