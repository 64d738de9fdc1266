"""
HotelDesk Admin - Permission Record Model

Validated view of a stored permission document.
"""

from typing import Optional
from pydantic import BaseModel, ConfigDict


class PermissionRecord(BaseModel):
    """A permission document with the fields the catalog relies on"""
    model_config = ConfigDict(from_attributes=True)

    doc_id: str
    permission_id: int
    key: str
    name: Optional[str] = None
    category: Optional[str] = None
    description: Optional[str] = None
