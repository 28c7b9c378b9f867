"""
models.py

The shared objects used in the huffcodec.

"""


import numpy as np
from typing import Optional, Iterator, List, Dict, Tuple

from .settings import ALPHABET_SIZE
from .validators import validate_byte_value


class FrequencyTable:
    """
    Occurrence count of every byte value in the data, indexed by byte value.
    """
    def __init__(self, counts: Optional[np.ndarray] = None) -> None:
        if counts is None:
            counts = np.zeros(ALPHABET_SIZE, dtype=np.int64)
        counts = np.array(counts, dtype=np.int64)
        if counts.shape != (ALPHABET_SIZE,):
            raise ValueError(f"Counts must be a one-dimensional array of {ALPHABET_SIZE} entries")
        if np.any(counts < 0):
            raise ValueError("Counts must be non-negative")
        self.counts: np.ndarray = counts

    @classmethod
    def from_bytes(cls, data: bytes) -> 'FrequencyTable':
        table = cls()
        table.update(data)
        return table

    def update(self, data: bytes) -> None:
        """
        Add the occurrences of every byte in data to the table.

        Args:
            data (bytes): A chunk of the input.
        """
        if len(data) == 0:
            return
        self.counts += np.bincount(np.frombuffer(data, dtype=np.uint8), minlength=ALPHABET_SIZE)

    def total(self) -> int:
        return int(self.counts.sum())

    def distinct_count(self) -> int:
        return int(np.count_nonzero(self.counts))

    def is_empty(self) -> bool:
        return self.distinct_count() == 0

    def symbols(self) -> List[int]:
        """
        Get the byte values that occur in the data.

        Returns:
            List[int]: Present byte values in ascending order.
        """
        return [int(i) for i in np.flatnonzero(self.counts)]

    def __getitem__(self, symbol: int) -> int:
        return int(self.counts[symbol])

    def __len__(self) -> int:
        return ALPHABET_SIZE

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FrequencyTable):
            return False
        return bool(np.array_equal(self.counts, other.counts))

    def __repr__(self) -> str:
        present = {s: self[s] for s in self.symbols()}
        return f"FrequencyTable({present})"


class TreeNode:
    """
    A node of the Huffman tree. Leaves hold a byte value, internal nodes hold None
    and own exactly two children.
    """
    def __init__(self, weight: int, symbol: Optional[int] = None,
                 left: Optional['TreeNode'] = None, right: Optional['TreeNode'] = None) -> None:
        if symbol is not None:
            validate_byte_value(symbol, "Symbol")
            if left is not None or right is not None:
                raise ValueError("A leaf node cannot have children")
        elif left is None or right is None:
            raise ValueError("An internal node must have two children")
        self.weight: int = weight
        self.symbol: Optional[int] = symbol
        self.left: Optional[TreeNode] = left
        self.right: Optional[TreeNode] = right

    @classmethod
    def merge(cls, left: 'TreeNode', right: 'TreeNode') -> 'TreeNode':
        return cls(left.weight + right.weight, left=left, right=right)

    def is_leaf(self) -> bool:
        return self.symbol is not None

    def leaves(self) -> Iterator['TreeNode']:
        stack = [self]
        while stack:
            node = stack.pop()
            if node.is_leaf():
                yield node
            else:
                stack.append(node.right)
                stack.append(node.left)

    def depth(self) -> int:
        """Number of edges on the longest root-to-leaf path."""
        deepest = 0
        stack = [(self, 0)]
        while stack:
            node, level = stack.pop()
            if node.is_leaf():
                deepest = max(deepest, level)
            else:
                stack.append((node.left, level + 1))
                stack.append((node.right, level + 1))
        return deepest

    def __repr__(self) -> str:
        if self.is_leaf():
            return f"TreeNode(symbol={self.symbol}, weight={self.weight})"
        return f"TreeNode(weight={self.weight})"


class CodeTable:
    """
    Represents the binary code assigned to each byte value.
    """
    def __init__(self) -> None:
        self.codes: Dict[int, str] = {}

    def add(self, symbol: int, code: str) -> None:
        """
        Record the code of a byte value.

        Args:
            symbol (int): The byte value.
            code (str): Non-empty string of '0' and '1' characters.
        """
        validate_byte_value(symbol, "Symbol")
        if not isinstance(code, str) or len(code) == 0:
            raise ValueError("Code must be a non-empty string")
        if code.strip("01"):
            raise ValueError("Code must contain only '0' and '1' characters")
        if symbol in self.codes:
            raise ValueError(f"Symbol {symbol} already has a code")
        self.codes[symbol] = code

    def get(self, symbol: int) -> str:
        return self.codes[symbol]

    def items(self) -> List[Tuple[int, str]]:
        return sorted(self.codes.items())

    def max_length(self) -> int:
        if not self.codes:
            return 0
        return max(len(code) for code in self.codes.values())

    def is_prefix_free(self) -> bool:
        """
        Check that no code is a prefix of another code.

        Returns:
            bool: True if the codes form a prefix code.
        """
        # In sorted order a prefix always sorts directly before its extensions.
        ordered = sorted(self.codes.values())
        for shorter, longer in zip(ordered, ordered[1:]):
            if longer.startswith(shorter):
                return False
        return True

    def encoded_bit_length(self, frequencies: FrequencyTable) -> int:
        """
        Number of bits the data described by frequencies encodes to.

        Args:
            frequencies (FrequencyTable): The frequency table of the data.

        Returns:
            int: Sum of code length times frequency over all symbols.
        """
        return sum(len(self.codes[s]) * frequencies[s] for s in frequencies.symbols())

    def __contains__(self, symbol: object) -> bool:
        return symbol in self.codes

    def __len__(self) -> int:
        return len(self.codes)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CodeTable):
            return False
        return self.codes == other.codes

    def __repr__(self) -> str:
        return f"CodeTable({dict(self.items())})"
