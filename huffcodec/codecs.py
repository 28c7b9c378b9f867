import os
from io import BytesIO, StringIO
from typing import IO, List, Optional

from .validators import validate_type
from .errors import EmptyInputError, FileOpenError, FileStatError
from .frequency import FrequencyCounter
from .trees import HuffmanTreeBuilder
from .codes import CodeGenerator
from .coders import HuffmanEncoder, HuffmanDecoder
from .models import CodeTable, FrequencyTable
from .logger import Logger, CompressionSummaryLog
from .settings import DEFAULT_BINARY_OUTPUT, DEFAULT_TEXT_OUTPUT


def get_file_size(file_path: str) -> int:
    """
    Get the size of a file in bytes.

    Args:
        file_path (str): Path to the file.

    Returns:
        int: The size, or -1 if it could not be read.
    """
    try:
        return os.stat(file_path).st_size
    except OSError:
        return -1


class EncodingResult:
    """Represents the in-memory output of one encoding pass."""

    def __init__(
        self,
        data: bytes,
        bit_count: int,
        frequencies: FrequencyTable,
        code_table: CodeTable,
        text: str,
    ) -> None:
        validate_type(data, "Data", bytes)
        validate_type(bit_count, "Bit count", int)
        validate_type(frequencies, "Frequencies", FrequencyTable)
        validate_type(code_table, "Code table", CodeTable)
        validate_type(text, "Text", str)
        if (bit_count + 7) // 8 != len(data):
            raise ValueError("Bit count does not match the length of the data")

        self.data = data
        self.bit_count = bit_count
        self.frequencies = frequencies
        self.code_table = code_table
        self.text = text

    @property
    def padding_bits(self) -> int:
        return len(self.data) * 8 - self.bit_count


class CompressionReport:
    """Sizes and codes of a compressed file."""

    def __init__(
        self,
        original_size: int,
        compressed_size: int,
        bit_count: int,
        frequencies: FrequencyTable,
        code_table: CodeTable,
    ) -> None:
        self.original_size = original_size
        self.compressed_size = compressed_size
        self.bit_count = bit_count
        self.frequencies = frequencies
        self.code_table = code_table

    def reduction_percentage(self) -> float:
        """
        Size reduction as (original - compressed) / original * 100.

        Raises:
            EmptyInputError: If the original size is zero.
        """
        if self.original_size <= 0:
            raise EmptyInputError("Compression reduction is undefined for an empty input")
        return (self.original_size - self.compressed_size) / self.original_size * 100

    def summary_lines(self) -> List[str]:
        return [
            f"Original File Size: {self.original_size} bytes",
            f"Compressed File Size: {self.compressed_size} bytes",
            f"Compression Reduction: {self.reduction_percentage():.2f}%",
        ]


class HuffmanCodec:
    def __init__(self) -> None:
        self.counter = FrequencyCounter()
        self.tree_builder = HuffmanTreeBuilder()
        self.code_generator = CodeGenerator()
        self.encoder = HuffmanEncoder()

    def _use_logger(self, logger: Optional[Logger]) -> None:
        self.counter.logger = logger
        self.tree_builder.logger = logger
        self.code_generator.logger = logger
        self.encoder.logger = logger

    def build_code_table(self, frequencies: FrequencyTable, logger: Optional[Logger] = None) -> CodeTable:
        """
        Build the Huffman tree of the frequencies and derive the code table.

        Args:
            frequencies (FrequencyTable): Counts of the input bytes.
            logger: Logger instance for logging.

        Returns:
            CodeTable: The code of every byte value present.
        """
        self._use_logger(logger)
        root = self.tree_builder.build(frequencies)
        if root.is_leaf() and logger is not None:
            logger.warning(f"Input contains a single distinct byte ({root.symbol}), using a one bit code")
        return self.code_generator.generate(root)

    def compress(self, data: bytes, logger: Optional[Logger] = None) -> EncodingResult:
        """
        Compress the input data.

        Args:
            data (bytes): The data to compress.
            logger: Logger instance for logging.

        Returns:
            EncodingResult: The packed bits and everything needed to verify them.
        """
        validate_type(data, "Data", bytes)
        self._use_logger(logger)

        frequencies = self.counter.count_bytes(data)
        code_table = self.build_code_table(frequencies, logger)

        out_buffer = BytesIO()
        text_buffer = StringIO()
        bit_count = self.encoder.encode(BytesIO(data), code_table, out_buffer, text_buffer)
        return EncodingResult(out_buffer.getvalue(), bit_count, frequencies, code_table, text_buffer.getvalue())

    def decompress(self, result: EncodingResult) -> bytes:
        """
        Decode an encoding result with its own code table and bit count.

        Args:
            result (EncodingResult): Output of compress().

        Returns:
            bytes: The original data.
        """
        validate_type(result, "Result", EncodingResult)
        return HuffmanDecoder(result.code_table).decode(result.data, result.bit_count)


class HuffmanCodecFile(HuffmanCodec):
    def compress(
        self,
        input_path: str,
        binary_output_path: str = DEFAULT_BINARY_OUTPUT,
        text_output_path: str = DEFAULT_TEXT_OUTPUT,
        logger: Optional[Logger] = None,
    ) -> CompressionReport:
        """
        Compress the input file into a packed binary file and its '0'/'1' text twin.

        Args:
            input_path (str): Path to the input file.
            binary_output_path (str): Path to the packed output.
            text_output_path (str): Path to the text output.
            logger: Logger instance for logging.

        Returns:
            CompressionReport: Sizes and codes of the compressed file.

        Raises:
            FileOpenError: If the input cannot be read or an output cannot be written.
            FileStatError: If a file size cannot be read.
            EmptyInputError: If the input file is empty.
        """
        validate_type(input_path, "Input path", str)
        validate_type(binary_output_path, "Binary output path", str)
        validate_type(text_output_path, "Text output path", str)
        self._use_logger(logger)

        frequencies = self.counter.count_file(input_path)
        original_size = get_file_size(input_path)
        if original_size < 0:
            raise FileStatError(input_path)

        code_table = self.build_code_table(frequencies, logger)

        with _open(input_path, "rb") as inp, \
                _open(binary_output_path, "wb") as out, \
                _open(text_output_path, "w") as text_out:
            try:
                bit_count = self.encoder.encode(inp, code_table, out, text_out)
            except OSError as e:
                raise FileOpenError(e.filename or binary_output_path, e.strerror or str(e)) from e

        compressed_size = get_file_size(binary_output_path)
        if compressed_size < 0:
            raise FileStatError(binary_output_path)
        if logger is not None:
            logger.log(CompressionSummaryLog(original_size, compressed_size))

        return CompressionReport(original_size, compressed_size, bit_count, frequencies, code_table)

    def decompress(self, compressed_file_path: str, report: CompressionReport) -> bytes:
        """
        Decode a compressed file with the code table and bit count of its report.

        Args:
            compressed_file_path (str): Path to the packed output.
            report (CompressionReport): Report returned when the file was written.

        Returns:
            bytes: The original data.
        """
        validate_type(compressed_file_path, "Compressed file path", str)
        validate_type(report, "Report", CompressionReport)
        with _open(compressed_file_path, "rb") as file:
            data = file.read()
        return HuffmanDecoder(report.code_table).decode(data, report.bit_count)


def _open(file_path: str, mode: str) -> IO:
    try:
        return open(file_path, mode)
    except OSError as e:
        raise FileOpenError(file_path, e.strerror or str(e)) from e
