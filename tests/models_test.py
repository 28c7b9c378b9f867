import unittest
import numpy as np
from huffcodec.models import FrequencyTable, TreeNode, CodeTable


class TestFrequencyTable(unittest.TestCase):
    def test_from_bytes_counts_every_byte(self):
        table = FrequencyTable.from_bytes(b"aaab")
        self.assertEqual(table[ord('a')], 3)
        self.assertEqual(table[ord('b')], 1)
        self.assertEqual(table.total(), 4)
        self.assertEqual(table.distinct_count(), 2)
        self.assertEqual(table.symbols(), [ord('a'), ord('b')])

    def test_high_bytes_are_unsigned(self):
        table = FrequencyTable.from_bytes(b"\xff\x80\xff")
        self.assertEqual(table[255], 2)
        self.assertEqual(table[128], 1)
        self.assertEqual(len(table), 256)

    def test_update_accumulates(self):
        table = FrequencyTable()
        self.assertTrue(table.is_empty())
        table.update(b"ab")
        table.update(b"")
        table.update(b"b")
        self.assertEqual(table, FrequencyTable.from_bytes(b"abb"))
        self.assertFalse(table.is_empty())

    def test_invalid_counts(self):
        with self.assertRaises(ValueError):
            FrequencyTable(np.zeros(10))
        counts = np.zeros(256, dtype=np.int64)
        counts[3] = -1
        with self.assertRaises(ValueError):
            FrequencyTable(counts)

    def test_counts_are_copied(self):
        counts = np.zeros(256, dtype=np.int64)
        table = FrequencyTable(counts)
        table.update(b"x")
        self.assertEqual(counts[ord('x')], 0)


class TestTreeNode(unittest.TestCase):
    def test_leaf_and_merge(self):
        left = TreeNode(1, symbol=ord('b'))
        right = TreeNode(3, symbol=ord('a'))
        parent = TreeNode.merge(left, right)
        self.assertTrue(left.is_leaf())
        self.assertFalse(parent.is_leaf())
        self.assertEqual(parent.weight, 4)
        self.assertIsNone(parent.symbol)
        self.assertEqual([leaf.symbol for leaf in parent.leaves()], [ord('b'), ord('a')])
        self.assertEqual(parent.depth(), 1)
        self.assertEqual(left.depth(), 0)

    def test_invalid_nodes(self):
        leaf = TreeNode(1, symbol=0)
        with self.assertRaises(ValueError):
            TreeNode(2)
        with self.assertRaises(ValueError):
            TreeNode(2, left=leaf)
        with self.assertRaises(ValueError):
            TreeNode(2, symbol=1, left=leaf, right=leaf)
        with self.assertRaises(ValueError):
            TreeNode(1, symbol=256)


class TestCodeTable(unittest.TestCase):
    def test_add_and_get(self):
        table = CodeTable()
        table.add(97, "0")
        table.add(98, "10")
        self.assertEqual(table.get(98), "10")
        self.assertIn(97, table)
        self.assertNotIn(99, table)
        self.assertEqual(len(table), 2)
        self.assertEqual(table.max_length(), 2)
        self.assertEqual(table.items(), [(97, "0"), (98, "10")])

    def test_rejects_invalid_codes(self):
        table = CodeTable()
        with self.assertRaises(ValueError):
            table.add(1, "")
        with self.assertRaises(ValueError):
            table.add(1, "012")
        table.add(1, "1")
        with self.assertRaises(ValueError):
            table.add(1, "0")

    def test_is_prefix_free(self):
        table = CodeTable()
        table.add(1, "0")
        table.add(2, "10")
        table.add(3, "11")
        self.assertTrue(table.is_prefix_free())
        table.add(4, "101")
        self.assertFalse(table.is_prefix_free())

    def test_encoded_bit_length(self):
        table = CodeTable()
        table.add(ord('a'), "1")
        table.add(ord('b'), "01")
        frequencies = FrequencyTable.from_bytes(b"aaabb")
        self.assertEqual(table.encoded_bit_length(frequencies), 7)


if __name__ == '__main__':
    unittest.main()
