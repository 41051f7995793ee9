import os
import tempfile

import numpy

from django.test import SimpleTestCase

from cohensd import errors, get_absolute_path, utilities
from cohensd.loaders import Matrix


class UtilitiesTestCase(SimpleTestCase):
    def setUp(self):
        self.directory = tempfile.TemporaryDirectory()
        self.output = os.path.join(self.directory.name, 'cohensd.csv')

    def matrix(self, path, row_names):
        return Matrix(
            path, ['id', 'a'], row_names,
            numpy.ones((len(row_names), 1))
        )

    def test_run(self):
        d = utilities.run(
            get_absolute_path('tests/data/case.tsv'),
            get_absolute_path('tests/data/control.tsv'),
            self.output
        )

        self.assertEqual(len(d), 4)
        self.assertAlmostEqual(d[0], 0.5)
        self.assertTrue(os.path.exists(self.output))

    def test_run_undefined(self):
        d = utilities.run(
            get_absolute_path('tests/data/case.tsv'),
            get_absolute_path('tests/data/control.tsv'),
            self.output, undefined=-1.
        )

        self.assertEqual(d[2], -1.)

    def test_check(self):
        utilities.check(
            self.matrix('case', ['a', 'b']),
            self.matrix('control', ['a', 'b'])
        )

        self.assertRaises(
            errors.RowCountMismatchError, utilities.check,
            self.matrix('case', ['a', 'b']), self.matrix('control', ['a'])
        )
        self.assertRaises(
            errors.RowNamesMismatchError, utilities.check,
            self.matrix('case', ['a', 'b']),
            self.matrix('control', ['b', 'a'])
        )

    def tearDown(self):
        self.directory.cleanup()
