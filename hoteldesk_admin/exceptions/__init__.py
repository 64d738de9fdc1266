"""
HotelDesk Admin - Exceptions Package

Contains all exception classes for the admin scripts.
"""

from .hoteldesk_error import HotelDeskError
from .not_found_error import NotFoundError
from .store_error import StoreError
from .record_validation_error import RecordValidationError

__all__ = [
    'HotelDeskError',
    'NotFoundError',
    'StoreError',
    'RecordValidationError'
]
