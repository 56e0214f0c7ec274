"""
Script to run all tests of the calculation engine.
"""

import os
import sys
import unittest


def run_tests():
    """Run all tests in the test suite."""
    # Repository root for the h2explorer package, tests dir for sample_data
    tests_dir = os.path.abspath(os.path.dirname(__file__))
    sys.path.insert(0, os.path.dirname(tests_dir))
    sys.path.insert(0, tests_dir)

    # Discover and run all tests
    test_loader = unittest.TestLoader()
    test_suite = test_loader.discover(tests_dir, pattern='test_*.py')

    # Run tests with verbosity
    test_runner = unittest.TextTestRunner(verbosity=2)
    result = test_runner.run(test_suite)

    # Return non-zero exit code if tests failed
    return 0 if result.wasSuccessful() else 1


if __name__ == '__main__':
    sys.exit(run_tests())
