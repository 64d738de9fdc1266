"""
HotelDesk Admin - Role Document Model

Role documents for RBAC. Legacy documents may lack role_id, in which
case the numeric document id stands in for it.
"""

from sqlalchemy import Column, Integer, String, DateTime, Boolean, func

from hoteldesk_admin.models.database.base import Base, NewDocumentId


class Role(Base):
    """
    Roles collection - one document per role name
    """
    __tablename__ = "roles"

    doc_id = Column(String, primary_key=True, default=NewDocumentId)
    role_id = Column(Integer, unique=True, nullable=True)
    name = Column(String, nullable=False, index=True)
    description = Column(String, nullable=True)
    is_system_role = Column(Boolean, default=False)  # True for roles seeded by the admin scripts
    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())

    def __repr__(self):
        return f"<Role(doc_id={self.doc_id}, role_id={self.role_id}, name={self.name})>"
