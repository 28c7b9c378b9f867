"""
errors.py

Exceptions raised by huffcodec.
"""


class HuffmanError(Exception):
    """Base class for every error raised by the compression pipeline."""


class FileOpenError(HuffmanError, IOError):
    """The input could not be read or an output could not be written."""

    def __init__(self, file_path: str, reason: str) -> None:
        self.file_path = file_path
        self.reason = reason
        super().__init__(f"Error opening file {file_path}: {reason}")


class FileStatError(HuffmanError, IOError):
    """The size of a file could not be read from the filesystem."""

    def __init__(self, file_path: str) -> None:
        self.file_path = file_path
        super().__init__(f"Could not read the size of file: {file_path}")


class DegenerateInputError(HuffmanError, ValueError):
    """The input has no valid Huffman tree."""


class EmptyInputError(DegenerateInputError):
    def __init__(self, message: str = "Input is empty, there is nothing to compress") -> None:
        super().__init__(message)


class CodeLengthError(HuffmanError, ValueError):
    """A generated code is longer than the tree depth allows."""

    def __init__(self, symbol: int, length: int, limit: int) -> None:
        self.symbol = symbol
        self.length = length
        self.limit = limit
        super().__init__(f"Code for byte {symbol} has length {length}, the limit is {limit}")


class MissingCodeError(HuffmanError, ValueError):
    """A byte of the input has no code, the input changed after it was counted."""

    def __init__(self, symbol: int) -> None:
        self.symbol = symbol
        super().__init__(f"Byte {symbol} has no code in the code table")
