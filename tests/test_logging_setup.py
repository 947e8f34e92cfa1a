import logging
import unittest
from utils.logging_setup import configure_logging


class TestLoggingSetup(unittest.TestCase):
    def test_quiets_noisy_loggers(self):
        configure_logging("debug")
        self.assertEqual(logging.getLogger("werkzeug").level, logging.WARNING)
        self.assertEqual(logging.getLogger("urllib3").level, logging.WARNING)

    def test_unknown_level_name_falls_back(self):
        # Must not raise on a bad level name from the environment
        configure_logging("LOUD")


if __name__ == '__main__':
    unittest.main()
