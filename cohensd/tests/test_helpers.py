import argparse
import io
import math
import os
from unittest import mock

from django.conf import settings
from django.test import SimpleTestCase

from cohensd import get_absolute_path, helpers


class HelpersTestCase(SimpleTestCase):
    def test_check_delimiter(self):
        self.assertEqual(helpers.check_delimiter(','), ',')
        self.assertEqual(helpers.check_delimiter('\t'), '\t')
        self.assertEqual(helpers.check_delimiter('\\t'), '\t')
        self.assertEqual(helpers.check_delimiter('tab'), '\t')
        self.assertRaises(
            argparse.ArgumentTypeError, helpers.check_delimiter, ',,'
        )
        self.assertRaises(
            argparse.ArgumentTypeError, helpers.check_delimiter, ''
        )

    def test_check_undefined(self):
        self.assertEqual(helpers.check_undefined('0'), 0.)
        self.assertEqual(helpers.check_undefined('-1.5'), -1.5)
        self.assertTrue(math.isnan(helpers.check_undefined('NA')))
        self.assertTrue(math.isnan(helpers.check_undefined('nan')))
        self.assertRaises(
            argparse.ArgumentTypeError, helpers.check_undefined, 'zero'
        )

    def test_debug(self):
        with mock.patch.dict(os.environ, {'DEBUG': '1'}):
            with mock.patch('sys.stdout', new_callable=io.StringIO) as out:
                helpers.debug('Loading')
        self.assertEqual(out.getvalue(), '[DEBUG] Loading\n')

        environ = dict(
            (k, v) for (k, v) in os.environ.items() if k != 'DEBUG'
        )
        with mock.patch.dict(os.environ, environ, clear=True):
            with mock.patch('sys.stdout', new_callable=io.StringIO) as out:
                helpers.debug('Loading')
        self.assertEqual(out.getvalue(), '')

    def test_get_absolute_path(self):
        self.assertEqual(
            os.path.join(settings.BASE_DIR, 'cohensd', 'tests/data/case.tsv'),
            get_absolute_path('tests/data/case.tsv')
        )
