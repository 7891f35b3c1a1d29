import unittest
import doctest

import test_utils  # noqa: F401 (must precede the Kivy imports)

import utils

from dsn.blocks import export as blocks_export
from dsn.blocks import structure as blocks_structure
from dsn.viewport import utils as viewport_utils

from widgets import animate
from widgets import toolbar
from widgets import utils as widgets_utils


def load_tests(loader, tests, ignore):
    # Test the docstrings inside our actual codebase
    tests.addTests(doctest.DocTestSuite(utils))
    tests.addTests(doctest.DocTestSuite(viewport_utils))
    tests.addTests(doctest.DocTestSuite(blocks_structure))
    tests.addTests(doctest.DocTestSuite(blocks_export))
    tests.addTests(doctest.DocTestSuite(animate))
    tests.addTests(doctest.DocTestSuite(toolbar))
    tests.addTests(doctest.DocTestSuite(widgets_utils))

    return tests


if __name__ == '__main__':
    unittest.main()
