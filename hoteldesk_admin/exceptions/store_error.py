"""
HotelDesk Admin - Store Error

Raised when the document store rejects a query or a batch write.
"""

from .hoteldesk_error import HotelDeskError


class StoreError(HotelDeskError):
    """Exception for document store failures (connection, query or commit)."""
    pass
