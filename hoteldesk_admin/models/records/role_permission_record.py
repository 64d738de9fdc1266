"""
HotelDesk Admin - RolePermission Record Model
"""

from pydantic import BaseModel, ConfigDict


class RolePermissionRecord(BaseModel):
    """An edge document linking a role to a permission"""
    model_config = ConfigDict(from_attributes=True)

    doc_id: str
    role_id: int
    permission_id: int
