"""
HotelDesk Admin - Permission Entry Model

Descriptive fields for a permission the caller wants in the catalog.
"""

from pydantic import BaseModel


class PermissionEntry(BaseModel):
    """A permission definition requested by a script"""
    key: str
    name: str
    category: str
    description: str = ""
