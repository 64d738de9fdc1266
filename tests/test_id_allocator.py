"""
Tests for id allocation

Allocation is max(existing) + 1 and is carried across a batch.
"""

import pytest

from hoteldesk_admin.exceptions import RecordValidationError
from hoteldesk_admin.id_allocator import IdAllocator, ParseDocumentId, ParseNumericIds


def test_empty_collection_starts_at_one():
    """Test the first id of an empty collection"""
    allocator = IdAllocator([])
    assert allocator.Next() == 1
    assert allocator.Next() == 2


def test_next_id_follows_max_not_count():
    """Test gaps are never filled"""
    allocator = IdAllocator([3, 7, 5])
    assert allocator.Peek() == 8
    assert allocator.Next() == 8
    assert allocator.Next() == 9

    print("Max plus one allocation tests passed")


def test_none_values_are_ignored():
    allocator = IdAllocator([None, 2, None])
    assert allocator.Next() == 3

    allocator = IdAllocator([None])
    assert allocator.Next() == 1


def test_first_id_only_applies_to_empty_collections():
    assert IdAllocator([], first_id=100).Next() == 100
    assert IdAllocator([4], first_id=100).Next() == 5


def test_from_document_ids_skips_non_numeric():
    allocator = IdAllocator.FromDocumentIds(["1", "abc", "12", "x9"])
    assert allocator.Next() == 13

    allocator = IdAllocator.FromDocumentIds(["abc"], first_id=1000)
    assert allocator.Next() == 1000


def test_parse_numeric_ids():
    assert ParseNumericIds(["5", "five", "10"]) == [5, 10]


def test_parse_document_id():
    assert ParseDocumentId("42") == 42

    with pytest.raises(RecordValidationError):
        ParseDocumentId("Xy12")
