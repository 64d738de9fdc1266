"""
HotelDesk Admin - Id Allocation

Numeric ids for permissions, roles and sample documents are allocated as
max(existing) + 1. The allocator is seeded once per batch and then hands
out consecutive ids, so documents created in the same batch never collide.
"""

from typing import Iterable, Optional

from hoteldesk_admin.exceptions import RecordValidationError


class IdAllocator:
    """
    Monotonic id counter seeded from the ids already in a collection
    """

    def __init__(self, existing_ids: Iterable[Optional[int]] = (), first_id: int = 1):
        """
        Args:
            existing_ids: Ids currently in use (None values are ignored)
            first_id: Id handed out when the collection holds no ids yet
        """
        ids = [existing_id for existing_id in existing_ids if existing_id is not None]
        self._next_id = max(ids) + 1 if ids else first_id

    @classmethod
    def FromDocumentIds(cls, doc_ids: Iterable[str], first_id: int = 1) -> "IdAllocator":
        """
        Seed an allocator from document ids, ignoring non-numeric ones

        Args:
            doc_ids: Document ids of a collection
            first_id: Id handed out when no document id is numeric

        Returns:
            IdAllocator
        """
        return cls(ParseNumericIds(doc_ids), first_id=first_id)

    def Peek(self) -> int:
        """Id the next call to Next() will return"""
        return self._next_id

    def Next(self) -> int:
        """Allocate the next id"""
        allocated = self._next_id
        self._next_id += 1
        return allocated


def ParseNumericIds(doc_ids: Iterable[str]) -> list:
    """Integer values of the document ids that parse as integers"""
    ids = []
    for doc_id in doc_ids:
        try:
            ids.append(int(doc_id))
        except (TypeError, ValueError):
            continue
    return ids


def ParseDocumentId(doc_id: str) -> int:
    """
    Numeric id of a document whose id is expected to be an integer string

    Raises:
        RecordValidationError: The document id is not numeric
    """
    try:
        return int(doc_id)
    except (TypeError, ValueError):
        raise RecordValidationError(f"Document id '{doc_id}' is not numeric")
