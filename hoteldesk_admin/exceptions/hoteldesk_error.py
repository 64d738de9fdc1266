"""
HotelDesk Admin - Base Error

Base exception class for every error the admin scripts raise on purpose.
"""


class HotelDeskError(Exception):
    """Base exception for admin script errors."""
    pass
