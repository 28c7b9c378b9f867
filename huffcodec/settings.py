"""
settings.py

Shared constants for huffcodec.
"""


ALPHABET_SIZE = 256

# Output artifacts are written to the current working directory by default.
DEFAULT_BINARY_OUTPUT = "compressed.bin"
DEFAULT_TEXT_OUTPUT = "compressed.txt"

READ_CHUNK_SIZE = 64 * 1024

# A tree over 256 leaves is at most 255 levels deep.
MAX_CODE_LENGTH = 256
