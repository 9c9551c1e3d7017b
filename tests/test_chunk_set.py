"""Tests for chunk selection and validation."""

import unittest
import sys
import os

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from chunking.chunk_set import ChunkSet, select_chunks
from chunking.errors import MissingBaseField, NonContiguousChunks


class TestSelectChunks(unittest.TestCase):
    """Test select_chunks."""

    def test_selects_only_matching_fields(self):
        """Test that only chunk fields of the base name are collected."""
        fields = {
            "createOptions": "a",
            "createOptions01": "b",
            "createOptionsFoo": "x",
            "image": "y",
        }
        chunk_set = select_chunks(fields, "createOptions")

        self.assertEqual(dict(chunk_set.chunks), {0: "a", 1: "b"})
        self.assertEqual(chunk_set.sequence_numbers, [0, 1])
        self.assertEqual(len(chunk_set), 2)

    def test_empty_selection(self):
        """Test selecting from a document without the value."""
        chunk_set = select_chunks({"image": "y"}, "createOptions")

        self.assertTrue(chunk_set.is_empty)
        self.assertEqual(chunk_set.missing, [])
        chunk_set.validate()

    def test_records_case_variant_duplicates(self):
        """Test that case variants are recorded as duplicates."""
        fields = {"createOptions": "a", "CREATEOPTIONS": "b"}
        chunk_set = select_chunks(fields, "createOptions", case_insensitive=True)

        self.assertEqual(chunk_set.duplicates, (0,))


class TestChunkSet(unittest.TestCase):
    """Test ChunkSet validation and joining."""

    def test_missing_lists_gaps(self):
        """Test gap computation."""
        chunk_set = ChunkSet("opts", {0: "a", 2: "c", 5: "f"})
        self.assertEqual(chunk_set.missing, [1, 3, 4])

    def test_join_contiguous(self):
        """Test joining a contiguous chunk set."""
        chunk_set = ChunkSet("opts", {1: "b", 0: "a", 2: "c"})
        self.assertEqual(chunk_set.join(), "abc")

    def test_validate_missing_base(self):
        """Test that a set without chunk 0 fails validation."""
        chunk_set = ChunkSet("opts", {1: "b", 2: "c"})

        with self.assertRaises(MissingBaseField) as ctx:
            chunk_set.validate()

        self.assertEqual(ctx.exception.present, (1, 2))
        self.assertIn("'opts'", str(ctx.exception))

    def test_missing_base_takes_precedence(self):
        """Test that a missing base field is reported before gaps."""
        chunk_set = ChunkSet("opts", {2: "c"})
        with self.assertRaises(MissingBaseField):
            chunk_set.validate()

    def test_validate_duplicates(self):
        """Test that duplicates fail validation."""
        chunk_set = ChunkSet("opts", {0: "a", 1: "b"}, duplicates=(1,))

        with self.assertRaises(NonContiguousChunks) as ctx:
            chunk_set.validate()

        self.assertEqual(ctx.exception.duplicates, (1,))
        self.assertIn("duplicate sequence [1]", str(ctx.exception))

    def test_join_never_returns_partial_value(self):
        """Test that join refuses an invalid set."""
        chunk_set = ChunkSet("opts", {0: "a", 2: "c"})
        with self.assertRaises(NonContiguousChunks):
            chunk_set.join()

    def test_repr(self):
        """Test the debug representation."""
        chunk_set = ChunkSet("opts", {1: "b", 0: "a"})
        self.assertEqual(
            repr(chunk_set), "ChunkSet(base='opts', seqs=[0, 1], duplicates=[])"
        )


if __name__ == '__main__':
    unittest.main()
