"""
codes.py

Assigns a binary code to every leaf of a Huffman tree.
"""


from typing import Optional

from .errors import CodeLengthError
from .logger import Logger, CodeAssignmentLog
from .models import CodeTable, TreeNode
from .settings import MAX_CODE_LENGTH
from .validators import validate_type


class CodeGenerator:
    def __init__(self, max_code_length: int = MAX_CODE_LENGTH, logger: Optional[Logger] = None) -> None:
        validate_type(max_code_length, "Max code length", int)
        if max_code_length < 1:
            raise ValueError("Max code length must be at least 1")
        self.max_code_length: int = max_code_length
        self.logger: Optional[Logger] = logger

    def generate(self, root: TreeNode) -> CodeTable:
        """
        Walk the tree and record the path to every leaf, '0' for left and '1' for right.

        A tree that is a single leaf gets the one bit code '0'.

        Args:
            root (TreeNode): Root of the Huffman tree.

        Returns:
            CodeTable: The code of every byte value in the tree.

        Raises:
            CodeLengthError: If a path is longer than the leaf count allows.
        """
        validate_type(root, "Root", TreeNode)
        table = CodeTable()
        if root.is_leaf():
            self._record(table, root, "0")
            return table

        leaf_count = sum(1 for _ in root.leaves())
        limit = min(leaf_count - 1, self.max_code_length)

        stack = [(root, "")]
        while stack:
            node, path = stack.pop()
            if len(path) > limit:
                raise CodeLengthError(self._first_symbol(node), len(path), limit)
            if node.is_leaf():
                self._record(table, node, path)
            else:
                # Right is pushed first so the left subtree is visited first.
                stack.append((node.right, path + "1"))
                stack.append((node.left, path + "0"))
        return table

    def _record(self, table: CodeTable, leaf: TreeNode, code: str) -> None:
        table.add(leaf.symbol, code)
        if self.logger is not None:
            self.logger.log(CodeAssignmentLog(leaf.symbol, code, leaf.weight))

    @staticmethod
    def _first_symbol(node: TreeNode) -> int:
        return next(node.leaves()).symbol


def generate_codes(root: TreeNode, logger: Optional[Logger] = None) -> CodeTable:
    return CodeGenerator(logger=logger).generate(root)
