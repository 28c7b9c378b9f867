"""
coders.py



"""


from io import BytesIO
from typing import Dict, IO, List, Optional, TextIO

from .errors import MissingCodeError
from .logger import Logger, CodingLog, EncodingProgressStep
from .models import CodeTable
from .settings import READ_CHUNK_SIZE
from .validators import validate_type


class BitOutputStream:
    """
    A helper class to write bits to an underlying binary stream.
    """

    def __init__(self, out: IO[bytes]) -> None:
        """
        Initialize with an underlying output stream (e.g., a file opened in binary mode).

        Args:
            out (IO[bytes]): The output stream.
        """
        self.out: IO[bytes] = out
        self.current_byte: int = 0
        self.num_bits_filled: int = 0
        self.bits_written: int = 0

    def write(self, bit: int) -> None:
        """
        Write a single bit (0 or 1) to the stream.

        Args:
            bit (int): The bit to write.

        Raises:
            ValueError: If the bit is not 0 or 1.
        """
        if bit not in (0, 1):
            raise ValueError("Bit must be 0 or 1")
        self.current_byte = (self.current_byte << 1) | bit
        self.num_bits_filled += 1
        self.bits_written += 1
        if self.num_bits_filled == 8:
            self.flush_current_byte()

    def write_code(self, code: str) -> None:
        """
        Write the bits of a code string, most significant first.

        Args:
            code (str): String of '0' and '1' characters.
        """
        for char in code:
            self.write(1 if char == "1" else 0)

    def flush_current_byte(self) -> None:
        """
        Write the current byte to the underlying stream and reset the buffer.
        """
        self.out.write(bytes((self.current_byte,)))
        self.current_byte = 0
        self.num_bits_filled = 0

    def finish(self) -> None:
        """
        Flush any remaining bits to the stream by padding with zeros.
        """
        if self.num_bits_filled > 0:
            self.current_byte = self.current_byte << (8 - self.num_bits_filled)
            self.flush_current_byte()
        self.out.flush()

    def close(self) -> None:
        """
        Finish writing and close the underlying stream.
        """
        self.finish()
        self.out.close()


class BitInputStream:
    """
    A helper class to read bits from an underlying binary stream.
    """

    def __init__(self, inp: IO[bytes]) -> None:
        """
        Initialize with an underlying input stream (e.g., a file opened in binary mode).

        Args:
            inp (IO[bytes]): The input stream.
        """
        self.inp: IO[bytes] = inp
        self.current_byte: int = 0
        self.num_bits_remaining: int = 0

    def read(self) -> int:
        """
        Read a single bit from the stream.

        Returns:
            int: 0 or 1 for a valid bit, or -1 if no more bits are available.
        """
        if self.num_bits_remaining == 0:
            byte = self.inp.read(1)
            if len(byte) == 0:
                return -1
            self.current_byte = byte[0]
            self.num_bits_remaining = 8
        self.num_bits_remaining -= 1
        return (self.current_byte >> self.num_bits_remaining) & 1

    def close(self) -> None:
        """
        Close the underlying input stream.
        """
        self.inp.close()


class HuffmanEncoder:
    """
    Packs the codes of the input bytes into a bitstream.
    """

    def __init__(self, chunk_size: int = READ_CHUNK_SIZE, logger: Optional[Logger] = None) -> None:
        validate_type(chunk_size, "Chunk size", int)
        if chunk_size <= 0:
            raise ValueError("Chunk size must be positive")
        self.chunk_size: int = chunk_size
        self.logger: Optional[Logger] = logger

    def encode(self,
               inp: IO[bytes],
               code_table: CodeTable,
               out: IO[bytes],
               text_out: Optional[TextIO] = None) -> int:
        """
        Encode every byte of inp with its code.

        Args:
            inp (IO[bytes]): The input stream, read from its current position to the end.
            code_table (CodeTable): Code of every byte value in the input.
            out (IO[bytes]): Receives the packed bits; the last byte is zero padded.
            text_out (Optional[TextIO]): Receives the same bits as '0' and '1' characters.

        Returns:
            int: Number of code bits written, padding excluded.

        Raises:
            MissingCodeError: If a byte of the input has no code.
        """
        validate_type(code_table, "Code table", CodeTable)
        bit_out = BitOutputStream(out)
        codes: Dict[int, str] = dict(code_table.codes)
        input_size = 0

        while True:
            chunk = inp.read(self.chunk_size)
            if not chunk:
                break
            input_size += len(chunk)
            for byte in chunk:
                code = codes.get(byte)
                if code is None:
                    raise MissingCodeError(byte)
                bit_out.write_code(code)
                if text_out is not None:
                    text_out.write(code)
            if self.logger is not None:
                self.logger.log(EncodingProgressStep("Encoding input"))

        bit_out.finish()
        if text_out is not None:
            text_out.flush()
        if self.logger is not None:
            self.logger.log(CodingLog(input_size, bit_out.bits_written))
        return bit_out.bits_written

    def encode_bytes(self, data: bytes, code_table: CodeTable) -> bytes:
        validate_type(data, "Data", bytes)
        out_buffer = BytesIO()
        self.encode(BytesIO(data), code_table, out_buffer)
        return out_buffer.getvalue()


class _TrieNode:
    def __init__(self) -> None:
        self.children: List[Optional['_TrieNode']] = [None, None]
        self.symbol: Optional[int] = None


class HuffmanDecoder:
    """
    Reverses HuffmanEncoder given the same code table and the number of code bits.
    """

    def __init__(self, code_table: CodeTable) -> None:
        validate_type(code_table, "Code table", CodeTable)
        if len(code_table) == 0:
            raise ValueError("Code table must not be empty")
        self.root = _TrieNode()
        for symbol, code in code_table.items():
            node = self.root
            for char in code:
                if node.symbol is not None:
                    raise ValueError("Code table is not a prefix code")
                bit = 1 if char == "1" else 0
                if node.children[bit] is None:
                    node.children[bit] = _TrieNode()
                node = node.children[bit]
            if node.symbol is not None or node.children != [None, None]:
                raise ValueError("Code table is not a prefix code")
            node.symbol = symbol

    def decode(self, data: bytes, bit_count: int) -> bytes:
        """
        Decode the first bit_count bits of data, ignoring the padding.

        Args:
            data (bytes): The packed bitstream.
            bit_count (int): Number of code bits in data.

        Returns:
            bytes: The decoded bytes.

        Raises:
            ValueError: If the bits do not match the code table.
        """
        validate_type(data, "Data", bytes)
        validate_type(bit_count, "Bit count", int)
        if bit_count < 0 or bit_count > len(data) * 8:
            raise ValueError("Bit count does not fit in the data")

        bit_in = BitInputStream(BytesIO(data))
        decoded = bytearray()
        node = self.root
        for _ in range(bit_count):
            node = node.children[bit_in.read()]
            if node is None:
                raise ValueError("Bitstream contains a sequence that matches no code")
            if node.symbol is not None:
                decoded.append(node.symbol)
                node = self.root
        if node is not self.root:
            raise ValueError("Bitstream ends in the middle of a code")
        return bytes(decoded)
