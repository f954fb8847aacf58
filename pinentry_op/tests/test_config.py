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
import shutil
import tempfile
import unittest

from pinentry_op import config
from pinentry_op.exceptions import ConfigurationError


class ConfigTestCase(unittest.TestCase):

    def setUp(self):
        self.tempdir = tempfile.mkdtemp()
        self.addCleanup(shutil.rmtree, self.tempdir)
        self.prog = os.path.join(self.tempdir, 'pinentry-op')

    def write(self, name, text):
        path = os.path.join(self.tempdir, name)
        with open(path, 'w', encoding='utf-8') as fh:
            fh.write(text)
        return path


class DefaultConfigPathTest(ConfigTestCase):

    def test_replaces_extension(self):
        self.assertEqual(config.default_config_path(self.prog + '.py'),
                         self.prog + '.cfg')

    def test_adds_extension(self):
        self.assertEqual(config.default_config_path(self.prog),
                         self.prog + '.cfg')


class ReadItemRefTest(ConfigTestCase):

    def test_first_line(self):
        path = self.write('a.cfg', 'op://vault/item/password\nignored\n')
        self.assertEqual(config.read_item_ref(path),
                         'op://vault/item/password')

    def test_crlf(self):
        path = self.write('a.cfg', 'op://vault/item/password\r\n')
        self.assertEqual(config.read_item_ref(path),
                         'op://vault/item/password')

    def test_no_newline(self):
        path = self.write('a.cfg', 'op://vault/item/password')
        self.assertEqual(config.read_item_ref(path),
                         'op://vault/item/password')

    def test_missing(self):
        self.assertRaises(ConfigurationError, config.read_item_ref,
                          os.path.join(self.tempdir, 'missing.cfg'))

    def test_empty(self):
        path = self.write('a.cfg', '\nop://vault/item/password\n')
        self.assertRaises(ConfigurationError, config.read_item_ref, path)


class GetItemRefTest(ConfigTestCase):

    def test_beside_program(self):
        self.write('pinentry-op.cfg', 'op://a/b/c\n')
        self.assertEqual(config.get_item_ref(self.prog, {}), 'op://a/b/c')

    def test_config_environment(self):
        path = self.write('other.cfg', 'op://d/e/f\n')
        self.write('pinentry-op.cfg', 'op://a/b/c\n')
        environ = {config.ENV_CONFIG: path}
        self.assertEqual(config.get_item_ref(self.prog, environ),
                         'op://d/e/f')

    def test_config_argument(self):
        path = self.write('arg.cfg', 'op://g/h/i\n')
        environ = {config.ENV_CONFIG: self.write('other.cfg', 'op://d/e/f')}
        self.assertEqual(
            config.get_item_ref(self.prog, environ, config=path),
            'op://g/h/i')

    def test_item_ref_environment(self):
        path = self.write('arg.cfg', 'op://g/h/i\n')
        environ = {config.ENV_ITEM_REF: 'op://j/k/l'}
        self.assertEqual(
            config.get_item_ref(self.prog, environ, config=path),
            'op://j/k/l')

    def test_item_ref_argument(self):
        environ = {config.ENV_ITEM_REF: 'op://j/k/l'}
        self.assertEqual(
            config.get_item_ref(self.prog, environ, item_ref='op://m/n/o'),
            'op://m/n/o')

    def test_nothing_configured(self):
        self.assertRaises(ConfigurationError, config.get_item_ref,
                          self.prog, {})


class OptionsTest(unittest.TestCase):

    def test_op_path(self):
        self.assertEqual(config.get_op_path({}), 'op')
        self.assertEqual(config.get_op_path({'OP_BIN': '/usr/bin/op'}),
                         '/usr/bin/op')
        self.assertEqual(
            config.get_op_path({'OP_BIN': '/usr/bin/op'}, '/bin/op'),
            '/bin/op')

    def test_is_enabled(self):
        for value in ('1', 'true', 'Yes', 'ON'):
            self.assertTrue(config.is_enabled(value))
        for value in (None, '', '0', 'no'):
            self.assertFalse(config.is_enabled(value))
