"""
HotelDesk Admin - Not Found Error

Raised when a role or user the script needs is absent from the store.
"""

from .hoteldesk_error import HotelDeskError


class NotFoundError(HotelDeskError):
    """Exception raised when a required role or user does not exist."""

    def __init__(self, kind: str, identifier: str):
        self.kind = kind
        self.identifier = identifier
        super().__init__(f"{kind} not found: {identifier}")
