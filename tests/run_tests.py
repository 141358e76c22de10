# File: tests/run_tests.py
#!/usr/bin/env python3
"""
Test runner for the Parking Simulator tests.

Usage:
    python tests/run_tests.py                      # all tests
    python tests/run_tests.py unit.test_reports    # one module
    python tests/run_tests.py unit.test_reports.TestLedgerSummary
"""

import unittest
import sys
from pathlib import Path

TESTS_DIR = Path(__file__).resolve().parent

# Add the src directory to the Python path
sys.path.insert(0, str(TESTS_DIR.parent / "src"))


def run_all_tests():
    """Run all test suites"""
    test_suite = unittest.TestLoader().discover(
        str(TESTS_DIR), pattern='test_*.py', top_level_dir=str(TESTS_DIR)
    )
    return unittest.TextTestRunner(verbosity=2).run(test_suite)


def run_specific_test(test_name):
    """Run a specific test module, test case or test method"""
    sys.path.insert(0, str(TESTS_DIR))
    test_suite = unittest.TestLoader().loadTestsFromName(test_name)
    return unittest.TextTestRunner(verbosity=2).run(test_suite)


if __name__ == "__main__":
    if len(sys.argv) > 1:
        result = run_specific_test(sys.argv[1])
    else:
        result = run_all_tests()

    sys.exit(0 if result.wasSuccessful() else 1)
