"""Perform code tests.

This package contains the tests of the particle table and the functions
working on it.  Call :func:`run_tests` to check an installation of mcpid.

"""
import os
from unittest import TestSuite, TextTestRunner, defaultTestLoader


def run_tests(verbosity=1):
    """Collect and run all mcpid tests

    :param verbosity: verbosity of the test runner output.
    :return: `unittest.TextTestResult` object containing the test results.

    """
    package_path = os.path.dirname(os.path.dirname(os.path.dirname(__file__)))
    tests = defaultTestLoader.discover(start_dir=os.path.dirname(__file__),
                                       top_level_dir=package_path)
    return TextTestRunner(verbosity=verbosity).run(TestSuite(tests=tests))
