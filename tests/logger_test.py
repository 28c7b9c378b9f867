#logger_test.py

import io
import os
import sys
import tempfile
import unittest
from huffcodec.logger import Logger, Log, LogLevel, CodingLog, EncodingProgressStep

class TestLogger(unittest.TestCase):
    def setUp(self):
        self.logger = Logger()
        self.saved_stdout = sys.stdout
        self.captured_output = io.StringIO()
        sys.stdout = self.captured_output

    def tearDown(self):
        sys.stdout = self.saved_stdout

    def test_invalid_log(self):
        with self.assertRaises(ValueError):
            self.logger.log(123)

    def test_string_log_is_info(self):
        self.logger.log("plain message")
        self.assertEqual(len(self.logger.logs), 1)
        self.assertEqual(self.logger.logs[0].level, LogLevel.INFO)
        self.assertEqual(self.captured_output.getvalue(), "")

    def test_warning_logging(self):
        warning_log = Log("WarningTest", LogLevel.WARNING, "This is a warning")
        self.logger.log(warning_log)
        self.assertEqual(len(self.logger.logs), 1)
        printed_output = self.captured_output.getvalue()
        self.assertIn("This is a warning", printed_output)

    def test_error_logging(self):
        self.logger.error("This is an error")
        self.assertEqual(len(self.logger.logs), 1)
        self.assertEqual(self.logger.logs[0].level, LogLevel.ERROR)

        printed_output = self.captured_output.getvalue()
        self.assertIn("This is an error", printed_output)

    def test_progress_interval(self):
        self.logger.encoding_step_interval_count = 2
        for _ in range(3):
            self.logger.log(EncodingProgressStep("Encoding input", 3))
        self.assertEqual(self.logger.logs, [])
        printed_output = self.captured_output.getvalue()
        self.assertIn("Encoding input (2/3)", printed_output)
        self.assertNotIn("(1/3)", printed_output)

    def test_save(self):
        self.logger.log(CodingLog(10, 42))
        with tempfile.TemporaryDirectory() as temp_dir:
            path = os.path.join(temp_dir, "logs.txt")
            self.logger.save(path)
            with open(path) as f:
                lines = f.read().splitlines()
        self.assertEqual(len(lines), 1)
        self.assertIn("Encoded bits: 42", lines[0])

if __name__ == '__main__':
    unittest.main()
