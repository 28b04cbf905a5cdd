import logging
import os
import tempfile
import unittest

from shp2mongo.utils import logger


class TestLogger(unittest.TestCase):
    def test_get_logger(self):
        log = logger.get_logger()
        self.assertEqual(log.name, "shp2mongo")
        log.info("Logger test message")

    def test_child_logger_propagates_to_project_logger(self):
        log = logger.get_logger("test")
        self.assertEqual(log.name, "shp2mongo.test")
        with self.assertLogs("shp2mongo", level="INFO") as cm:
            log.info("child message")
        self.assertIn("child message", cm.output[0])

    def test_setup_logger_is_idempotent(self):
        first = logger.setup_logger()
        count = len(first.handlers)
        second = logger.setup_logger()
        self.assertIs(first, second)
        self.assertEqual(len(second.handlers), count)


class TestLineRotatingFileHandler(unittest.TestCase):
    def test_rotates_after_max_lines(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            path = os.path.join(tmpdir, "import.log")
            handler = logger.LineRotatingFileHandler(path, maxLines=3, backupCount=2, encoding="utf-8")
            handler.setFormatter(logging.Formatter("%(message)s"))
            log = logging.getLogger("shp2mongo_rotation_test")
            log.propagate = False
            log.addHandler(handler)
            try:
                for i in range(4):
                    log.warning(f"line {i}")
            finally:
                log.removeHandler(handler)
                handler.close()

            self.assertTrue(os.path.exists(path + ".1"))
            with open(path, encoding="utf-8") as f:
                self.assertEqual(f.read().splitlines(), ["line 3"])


if __name__ == "__main__":
    unittest.main()
