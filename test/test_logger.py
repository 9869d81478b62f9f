"""
Tests for logger setup and debug logging of knot merges.
"""

import logging
import os
import tempfile
import unittest

from polypiece.core.ppoly import merge_knots
from polypiece.logger import setup_logger


class TestSetupLogger(unittest.TestCase):
    def tearDown(self):
        logger = logging.getLogger("polypiece.test")
        for handler in logger.handlers:
            handler.close()
        logger.handlers.clear()

    def test_no_duplicate_handlers(self):
        setup_logger("polypiece.test")
        logger = setup_logger("polypiece.test", level=logging.DEBUG)
        self.assertEqual(len(logger.handlers), 1)
        self.assertEqual(logger.level, logging.DEBUG)

    def test_file_handler(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, "logs", "polypiece.log")
            logger = setup_logger("polypiece.test", log_file=path)
            self.assertEqual(len(logger.handlers), 2)
            logger.info("hello")
            for handler in logger.handlers:
                handler.flush()
            self.assertTrue(os.path.exists(path))
            self.tearDown()


class TestMergeLogging(unittest.TestCase):
    def test_merge_logs_at_debug(self):
        with self.assertLogs("polypiece.core.ppoly", level="DEBUG") as logs:
            merge_knots([0, 1], [0, 0, 2])
        self.assertIn("merged 2 and 3 knots into 4", logs.output[0])


if __name__ == "__main__":
    unittest.main()
