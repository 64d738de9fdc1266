"""
HotelDesk Admin - RolePermission Document Model

Edge documents linking one role to one permission. No composite
uniqueness is enforced here; the reconciler owns the edge lifecycle.
"""

from sqlalchemy import Column, Integer, String, DateTime, func

from hoteldesk_admin.models.database.base import Base, NewDocumentId


class RolePermission(Base):
    """
    RolePermissions collection - maps roles to permissions by numeric id
    """
    __tablename__ = "role_permissions"

    doc_id = Column(String, primary_key=True, default=NewDocumentId)
    role_id = Column(Integer, nullable=False, index=True)
    permission_id = Column(Integer, nullable=False)
    created_at = Column(DateTime, server_default=func.now())
