"""
trees.py

Huffman tree construction.
"""


from typing import Optional

from .errors import EmptyInputError
from .heap import MinHeap
from .logger import Logger, TreeMergeLog
from .models import FrequencyTable, TreeNode
from .validators import validate_type


class HuffmanTreeBuilder:
    def __init__(self, logger: Optional[Logger] = None) -> None:
        self.logger: Optional[Logger] = logger

    def build(self, frequencies: FrequencyTable) -> TreeNode:
        """
        Build the Huffman tree of a frequency table.

        Leaves are inserted in ascending byte order. The two lightest nodes are
        merged (first extracted on the left) until a single root remains.
        Leaves enter through insert, so the lighter node always ends up on the
        left: for b"aaab", b gets code '0' and a gets code '1'.

        Args:
            frequencies (FrequencyTable): Counts of the input bytes.

        Returns:
            TreeNode: The root. A single leaf if only one byte value occurs.

        Raises:
            EmptyInputError: If every count is zero.
        """
        validate_type(frequencies, "Frequencies", FrequencyTable)
        symbols = frequencies.symbols()
        if not symbols:
            raise EmptyInputError("Cannot build a Huffman tree from an empty frequency table")

        heap = MinHeap(len(symbols))
        for symbol in symbols:
            heap.insert(TreeNode(frequencies[symbol], symbol=symbol))

        while heap.size > 1:
            left = heap.extract_min()
            right = heap.extract_min()
            if self.logger is not None:
                self.logger.log(TreeMergeLog(left.weight, right.weight))
            heap.insert(TreeNode.merge(left, right))

        return heap.extract_min()


def build_huffman_tree(frequencies: FrequencyTable, logger: Optional[Logger] = None) -> TreeNode:
    return HuffmanTreeBuilder(logger).build(frequencies)
