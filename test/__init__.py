import unittest

from vimopts.exceptions import iserror

__all__ = ['TestCase']


class TestCase(unittest.TestCase):
    def assertOptionError(self, result, error_type, msg=None):
        self.assertTrue(iserror(result), msg)
        self.assertIsInstance(result, error_type, msg)

    def assertOk(self, result, msg=None):
        if iserror(result):
            self.fail(msg or 'unexpected error: {}'.format(result))
        self.assertIsNone(result, msg)
