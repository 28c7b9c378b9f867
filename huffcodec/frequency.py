"""
frequency.py

Byte frequency analysis of the input.
"""


from typing import IO, Optional

from .errors import FileOpenError
from .logger import Logger, FrequencyCountLog, CountingProgressStep
from .models import FrequencyTable
from .settings import READ_CHUNK_SIZE
from .validators import validate_type


class FrequencyCounter:
    """
    Counts how often every byte value occurs in a binary stream.
    """

    def __init__(self, chunk_size: int = READ_CHUNK_SIZE, logger: Optional[Logger] = None) -> None:
        validate_type(chunk_size, "Chunk size", int)
        if chunk_size <= 0:
            raise ValueError("Chunk size must be positive")
        self.chunk_size: int = chunk_size
        self.logger: Optional[Logger] = logger

    def count_stream(self, inp: IO[bytes]) -> FrequencyTable:
        """
        Read the stream to its end and count every byte.

        Args:
            inp (IO[bytes]): A readable binary stream.

        Returns:
            FrequencyTable: The populated frequency table.
        """
        table = FrequencyTable()
        while True:
            chunk = inp.read(self.chunk_size)
            if not chunk:
                break
            table.update(chunk)
            if self.logger is not None:
                self.logger.log(CountingProgressStep("Counting byte frequencies"))
        if self.logger is not None:
            self.logger.log(FrequencyCountLog(table.total(), table.distinct_count()))
        return table

    def count_bytes(self, data: bytes) -> FrequencyTable:
        validate_type(data, "Data", bytes)
        table = FrequencyTable.from_bytes(data)
        if self.logger is not None:
            self.logger.log(FrequencyCountLog(table.total(), table.distinct_count()))
        return table

    def count_file(self, file_path: str) -> FrequencyTable:
        """
        Count the bytes of a file.

        Args:
            file_path (str): Path to the input file.

        Returns:
            FrequencyTable: The populated frequency table.

        Raises:
            FileOpenError: If the file cannot be opened or read.
        """
        validate_type(file_path, "File path", str)
        try:
            with open(file_path, "rb") as file:
                return self.count_stream(file)
        except OSError as e:
            raise FileOpenError(file_path, e.strerror or str(e)) from e


def count_frequencies(data: bytes, logger: Optional[Logger] = None) -> FrequencyTable:
    return FrequencyCounter(logger=logger).count_bytes(data)
