"""
HotelDesk Admin - Record Validation Error

Raised when a stored document is missing a value that cannot be derived.
"""

from .hoteldesk_error import HotelDeskError


class RecordValidationError(HotelDeskError):
    """Exception for stored documents that fail validation where the value is required."""
    pass
