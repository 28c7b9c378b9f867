import os
import tempfile
import unittest

from huffcodec.codecs import (
    EncodingResult,
    CompressionReport,
    HuffmanCodec,
    HuffmanCodecFile,
    get_file_size,
)
from huffcodec.models import CodeTable, FrequencyTable
from huffcodec.errors import EmptyInputError, FileOpenError
from huffcodec.logger import Logger, LogLevel, CompressionSummaryLog


class TestHuffmanCodec(unittest.TestCase):
    def setUp(self):
        self.codec = HuffmanCodec()
        self.logger = Logger()

    def test_compress_aaab(self):
        result = self.codec.compress(b"aaab", logger=self.logger)
        self.assertEqual(result.data, bytes([0xE0]))
        self.assertEqual(result.bit_count, 4)
        self.assertEqual(result.padding_bits, 4)
        self.assertEqual(result.text, "1110")
        self.assertEqual(result.frequencies.total(), 4)

    def test_single_symbol_warns(self):
        result = self.codec.compress(b"aaaa", logger=self.logger)
        self.assertEqual(result.code_table.get(ord('a')), "0")
        warnings = [log for log in self.logger.logs if log.level == LogLevel.WARNING]
        self.assertEqual(len(warnings), 1)

    def test_empty_input(self):
        with self.assertRaises(EmptyInputError):
            self.codec.compress(b"")

    def test_deterministic(self):
        data = b"Lorem ipsum dolor sit amet, consectetur adipiscing elit." * 3
        first = self.codec.compress(data)
        second = HuffmanCodec().compress(data)
        self.assertEqual(first.data, second.data)
        self.assertEqual(first.code_table, second.code_table)

    def test_round_trip(self):
        data = bytes(range(256)) + b"Testing Data" * 100
        result = self.codec.compress(data)
        self.assertLess(len(result.data), len(data))
        self.assertEqual(self.codec.decompress(result), data)

    def test_invalid_input(self):
        with self.assertRaises(ValueError):
            self.codec.compress("text")
        with self.assertRaises(ValueError):
            self.codec.decompress(b"data")

    def test_encoding_result_checks_bit_count(self):
        with self.assertRaises(ValueError):
            EncodingResult(b"\x00", 9, FrequencyTable(), CodeTable(), "")


class TestCompressionReport(unittest.TestCase):
    def test_summary_lines(self):
        report = CompressionReport(4, 1, 4, FrequencyTable.from_bytes(b"aaab"), CodeTable())
        self.assertAlmostEqual(report.reduction_percentage(), 75.0)
        self.assertEqual(report.summary_lines(), [
            "Original File Size: 4 bytes",
            "Compressed File Size: 1 bytes",
            "Compression Reduction: 75.00%",
        ])

    def test_empty_original(self):
        report = CompressionReport(0, 0, 0, FrequencyTable(), CodeTable())
        with self.assertRaises(EmptyInputError):
            report.reduction_percentage()


class TestHuffmanCodecFile(unittest.TestCase):
    def setUp(self):
        self.temp_dir = tempfile.TemporaryDirectory()
        self.input_path = os.path.join(self.temp_dir.name, "input.txt")
        self.binary_path = os.path.join(self.temp_dir.name, "compressed.bin")
        self.text_path = os.path.join(self.temp_dir.name, "compressed.txt")
        self.codec = HuffmanCodecFile()
        self.logger = Logger()

    def tearDown(self):
        self.temp_dir.cleanup()

    def write_input(self, data):
        with open(self.input_path, "wb") as f:
            f.write(data)

    def test_compress_writes_both_outputs(self):
        data = b"it was the best of times, it was the worst of times"
        self.write_input(data)
        report = self.codec.compress(self.input_path, self.binary_path, self.text_path, logger=self.logger)
        expected = HuffmanCodec().compress(data)

        with open(self.binary_path, "rb") as f:
            self.assertEqual(f.read(), expected.data)
        with open(self.text_path, "r") as f:
            self.assertEqual(f.read(), expected.text)
        self.assertEqual(report.original_size, len(data))
        self.assertEqual(report.compressed_size, len(expected.data))
        self.assertEqual(report.bit_count, expected.bit_count)
        summaries = [log for log in self.logger.logs if isinstance(log, CompressionSummaryLog)]
        self.assertEqual(len(summaries), 1)

    def test_decompress_round_trip(self):
        data = bytes(range(256)) * 4 + b"\x00" * 100
        self.write_input(data)
        report = self.codec.compress(self.input_path, self.binary_path, self.text_path)
        self.assertEqual(self.codec.decompress(self.binary_path, report), data)

    def test_aaab_file(self):
        self.write_input(b"aaab")
        report = self.codec.compress(self.input_path, self.binary_path, self.text_path)
        self.assertEqual(report.compressed_size, 1)
        self.assertEqual(report.summary_lines()[2], "Compression Reduction: 75.00%")

    def test_empty_file(self):
        self.write_input(b"")
        with self.assertRaises(EmptyInputError):
            self.codec.compress(self.input_path, self.binary_path, self.text_path)
        self.assertFalse(os.path.exists(self.binary_path))

    def test_missing_input(self):
        with self.assertRaises(FileOpenError):
            self.codec.compress(self.input_path, self.binary_path, self.text_path)

    def test_unwritable_output(self):
        self.write_input(b"abc")
        bad_path = os.path.join(self.temp_dir.name, "missing_dir", "compressed.bin")
        with self.assertRaises(FileOpenError) as cm:
            self.codec.compress(self.input_path, bad_path, self.text_path)
        self.assertEqual(cm.exception.file_path, bad_path)

    def test_get_file_size(self):
        self.write_input(b"12345")
        self.assertEqual(get_file_size(self.input_path), 5)
        self.assertEqual(get_file_size(os.path.join(self.temp_dir.name, "missing")), -1)


if __name__ == '__main__':
    unittest.main()
