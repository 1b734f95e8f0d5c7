#!/usr/bin/env python
#
# Copyright (c), 2016-2026, SISSA (International School for Advanced Studies).
# All rights reserved.
# This file is distributed under the terms of the MIT License.
# See the file 'LICENSE' in the root directory of the present
# distribution, or http://opensource.org/licenses/MIT.
#
# @author Davide Brunato <brunato@sissa.it>
#
"""Tests of console scripts."""
import unittest
from unittest.mock import patch
import io
import logging
import os
import sys

from xmllimits.cli import get_loglevel, show


class TestConsoleScripts(unittest.TestCase):
    ctx = None

    def run_show(self, *args):
        with patch.object(sys, 'argv', ['xmllimits-show'] + list(args)):
            with self.assertRaises(SystemExit) as self.ctx:
                show()

    def test_get_loglevel(self):
        self.assertEqual(get_loglevel(0), logging.ERROR)
        self.assertEqual(get_loglevel(1), logging.WARNING)
        self.assertEqual(get_loglevel(2), logging.INFO)
        self.assertEqual(get_loglevel(3), logging.DEBUG)

    @patch.dict(os.environ, {}, clear=True)
    @patch('sys.stderr', new_callable=io.StringIO)
    @patch('sys.stdout', new_callable=io.StringIO)
    def test_show_command_01(self, mock_out, mock_err):
        self.run_show()
        self.assertEqual(mock_err.getvalue(), '')
        lines = mock_out.getvalue().splitlines()
        self.assertEqual(len(lines), 9)
        self.assertTrue(lines[0].startswith('EntityExpansionLimit '))
        self.assertTrue(lines[0].endswith(' 0  (default)'))
        self.assertIn('1000  (default)', lines[7])
        self.assertEqual('0', str(self.ctx.exception))

    @patch.dict(os.environ, {'XMLLIMITS_MAX_OCCUR_LIMIT': '300'}, clear=True)
    @patch('sys.stderr', new_callable=io.StringIO)
    @patch('sys.stdout', new_callable=io.StringIO)
    def test_show_command_02(self, mock_out, mock_err):
        self.run_show('--secure')
        self.assertEqual(mock_err.getvalue(), '')
        lines = mock_out.getvalue().splitlines()
        self.assertTrue(lines[0].endswith(' 64000  (secure processing)'))
        self.assertTrue(lines[1].startswith('MaxOccurLimit '))
        self.assertTrue(lines[1].endswith(' 300  (environment variable)'))
        self.assertEqual('0', str(self.ctx.exception))

    @patch.dict(os.environ, {'XMLLIMITS_MAX_OCCUR_LIMIT': 'many'}, clear=True)
    @patch('sys.stderr', new_callable=io.StringIO)
    @patch('sys.stdout', new_callable=io.StringIO)
    def test_show_command_03(self, mock_out, mock_err):
        self.run_show()
        self.assertEqual(mock_out.getvalue(), '')
        self.assertIn("error: invalid setting 'many'", mock_err.getvalue())
        self.assertIn("XMLLIMITS_MAX_OCCUR_LIMIT", mock_err.getvalue())
        self.assertEqual('1', str(self.ctx.exception))

    @patch('sys.stderr', new_callable=io.StringIO)
    @patch('sys.stdout', new_callable=io.StringIO)
    def test_show_command_04(self, mock_out, mock_err):
        self.run_show('--unknown')
        self.assertEqual(mock_out.getvalue(), '')
        self.assertIn("unrecognized arguments: --unknown", mock_err.getvalue())
        self.assertEqual('2', str(self.ctx.exception))


if __name__ == '__main__':
    unittest.main()
