"""
SauceDemo UI test suite package.

The package is importable so that page objects, test data and framework
helpers can be shared between scenarios, unit tests and `run_tests.py`.
"""

__version__ = "1.0.0"
