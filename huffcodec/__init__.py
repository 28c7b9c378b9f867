"""
huffcodec: A Python library for static Huffman compression of byte streams.
"""

from .codecs import (
    EncodingResult,
    CompressionReport,
    HuffmanCodec,
    HuffmanCodecFile,
    get_file_size,
)

from .coders import (
    BitOutputStream,
    BitInputStream,
    HuffmanEncoder,
    HuffmanDecoder,
)

from .models import (
    FrequencyTable,
    TreeNode,
    CodeTable,
)

from .frequency import FrequencyCounter, count_frequencies
from .heap import MinHeap
from .trees import HuffmanTreeBuilder, build_huffman_tree
from .codes import CodeGenerator, generate_codes

from .errors import (
    HuffmanError,
    FileOpenError,
    FileStatError,
    DegenerateInputError,
    EmptyInputError,
    CodeLengthError,
    MissingCodeError,
)

from .logger import (
    Logger,
    Log,
    LogLevel,
    FrequencyCountLog,
    TreeMergeLog,
    CodeAssignmentLog,
    CodingLog,
    CompressionSummaryLog,
    CountingProgressStep,
    EncodingProgressStep,
)

# Validators
from .validators import *

__all__ = [

    "EncodingResult",
    "CompressionReport",
    "HuffmanCodec",
    "HuffmanCodecFile",
    "get_file_size",

    "BitOutputStream",
    "BitInputStream",
    "HuffmanEncoder",
    "HuffmanDecoder",

    "FrequencyTable",
    "TreeNode",
    "CodeTable",

    "FrequencyCounter",
    "count_frequencies",
    "MinHeap",
    "HuffmanTreeBuilder",
    "build_huffman_tree",
    "CodeGenerator",
    "generate_codes",

    "HuffmanError",
    "FileOpenError",
    "FileStatError",
    "DegenerateInputError",
    "EmptyInputError",
    "CodeLengthError",
    "MissingCodeError",

    "Logger",
    "Log",
    "LogLevel",
    "FrequencyCountLog",
    "TreeMergeLog",
    "CodeAssignmentLog",
    "CodingLog",
    "CompressionSummaryLog",
    "CountingProgressStep",
    "EncodingProgressStep",
]
