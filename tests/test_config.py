import os
import unittest
from unittest import mock
import ffarith
from ffarith import intarith


class Configuration(unittest.TestCase):

    def test_arg_parser(self):
        parser = ffarith.get_arg_parser()
        options, rest = parser.parse_known_args(['--log-level', 'debug', '--phi-cache-size', '0', '-x'])
        self.assertEqual(options.log_level, 'debug')
        self.assertEqual(options.phi_cache_size, '0')
        self.assertFalse(options.no_log)
        self.assertEqual(rest, ['-x'])
        options = parser.parse_known_args([])[0]
        self.assertEqual(options.log_level, 'warning')
        self.assertIsNone(options.phi_cache_size)
        self.assertTrue(parser.parse_known_args(['--no-log'])[0].no_log)

    def test_phi_cache_size(self):
        with mock.patch.dict(os.environ, {'FFARITH_PHI_CACHE_SIZE': '16'}):
            self.assertEqual(intarith._phi_cache_size(), 16)
        with mock.patch.dict(os.environ, {'FFARITH_PHI_CACHE_SIZE': 'None'}):
            self.assertIsNone(intarith._phi_cache_size())
        with mock.patch.dict(os.environ, {'FFARITH_PHI_CACHE_SIZE': '-3'}):
            self.assertEqual(intarith._phi_cache_size(), 0)
        with mock.patch.dict(os.environ, {'FFARITH_PHI_CACHE_SIZE': 'lots'}):
            with self.assertLogs(level='WARNING'):
                self.assertEqual(intarith._phi_cache_size(), 1024)
        with mock.patch.dict(os.environ):
            os.environ.pop('FFARITH_PHI_CACHE_SIZE', None)
            self.assertEqual(intarith._phi_cache_size(), 1024)

    def test_version(self):
        self.assertTrue(ffarith.__version__)
        self.assertEqual(ffarith.__license__, 'MIT License')


if __name__ == "__main__":
    unittest.main()
