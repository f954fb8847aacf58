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

import re

from setuptools import find_packages
from setuptools import setup


def read_version(path='pinentry_op/__init__.py'):
    with open(path) as fh:
        match = re.search(r"^VERSION = '([^']+)'$", fh.read(), re.M)
    return match.group(1)


version = read_version()
long_description = '\n\n'.join([open(f).read() for f in [
    'README.rst',
    'LICENSE.rst',
    'CHANGELOG.rst',
    ]])
requires = [
    'zope.interface',
    ]
tests_require = [
    'pytest',
    ]


setup(
    name='pinentry-op',
    version=version,
    description='A pinentry program that answers GnuPG with a passphrase '
                'stored in 1Password',
    long_description=long_description,
    keywords='gnupg gpg-agent pinentry assuan 1password',
    author='Richard Mitchell',
    author_email='mitch@awesomeco.de',
    license='GPL 3',
    packages=find_packages(),
    include_package_data=True,
    zip_safe=False,
    python_requires='>=3.9',
    install_requires=requires,
    tests_require=tests_require,
    extras_require={
        'test': tests_require,
        },
    entry_points="""
    [console_scripts]
    pinentry-op = pinentry_op.main:main
    """,
)
