"""
HotelDesk Admin - Permission Document Model

Stores the permission catalog. Documents written by the admin scripts
use str(permission_id) as their document id; older documents may carry
a store-assigned id instead.
"""

from sqlalchemy import Column, Integer, String, DateTime, func

from hoteldesk_admin.models.database.base import Base, NewDocumentId


class Permission(Base):
    """
    Permissions collection - one document per permission key
    """
    __tablename__ = "permissions"

    doc_id = Column(String, primary_key=True, default=NewDocumentId)
    permission_id = Column(Integer, unique=True, nullable=True)  # NULL only on malformed legacy documents
    key = Column(String, unique=True, nullable=True)
    name = Column(String, nullable=True)
    category = Column(String, nullable=True)
    description = Column(String, nullable=True)
    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())

    def __repr__(self):
        return f"<Permission(doc_id={self.doc_id}, permission_id={self.permission_id}, key={self.key})>"
