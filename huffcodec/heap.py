"""
heap.py

Array-backed binary min-heap of Huffman tree nodes.
"""


from typing import List, Optional

from .models import TreeNode
from .settings import ALPHABET_SIZE


class MinHeap:
    """
    Min-heap ordered by node weight with a fixed capacity.

    Children of the node at index i live at 2i + 1 and 2i + 2. Ties are never
    swapped, so the layout only depends on the insertion order and weights.
    """

    def __init__(self, capacity: int = ALPHABET_SIZE) -> None:
        if capacity <= 0:
            raise ValueError("Capacity must be positive")
        self.capacity: int = capacity
        self.array: List[TreeNode] = []

    @property
    def size(self) -> int:
        return len(self.array)

    def __len__(self) -> int:
        return len(self.array)

    def is_empty(self) -> bool:
        return len(self.array) == 0

    def peek(self) -> Optional[TreeNode]:
        return self.array[0] if self.array else None

    def insert(self, node: TreeNode) -> None:
        """
        Add a node and restore the heap property by sifting it up.

        Args:
            node (TreeNode): The node to insert.

        Raises:
            OverflowError: If the heap is already at capacity.
        """
        if len(self.array) >= self.capacity:
            raise OverflowError(f"Heap capacity of {self.capacity} exceeded")
        self.array.append(node)
        i = len(self.array) - 1
        while i > 0:
            parent = (i - 1) // 2
            if not node.weight < self.array[parent].weight:
                break
            self.array[i] = self.array[parent]
            i = parent
        self.array[i] = node

    def extract_min(self) -> TreeNode:
        """
        Remove and return the node with the smallest weight.

        Returns:
            TreeNode: The root of the heap.

        Raises:
            IndexError: If the heap is empty.
        """
        if not self.array:
            raise IndexError("extract_min from an empty heap")
        root = self.array[0]
        last = self.array.pop()
        if self.array:
            self.array[0] = last
            self._sift_down(0)
        return root

    def _sift_down(self, idx: int) -> None:
        size = len(self.array)
        while True:
            smallest = idx
            left = 2 * idx + 1
            right = 2 * idx + 2
            if left < size and self.array[left].weight < self.array[smallest].weight:
                smallest = left
            if right < size and self.array[right].weight < self.array[smallest].weight:
                smallest = right
            if smallest == idx:
                return
            self.array[smallest], self.array[idx] = self.array[idx], self.array[smallest]
            idx = smallest

    def is_valid(self) -> bool:
        """Check the heap property over the whole array."""
        for i in range(1, len(self.array)):
            if self.array[i].weight < self.array[(i - 1) // 2].weight:
                return False
        return True
