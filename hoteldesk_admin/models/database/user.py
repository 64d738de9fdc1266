"""
HotelDesk Admin - User Document Model

Application users. The role field holds the lower-case role name the
app signs users in with (e.g. "cashier").
"""

from sqlalchemy import Column, String, DateTime, func

from hoteldesk_admin.models.database.base import Base, NewDocumentId


class User(Base):
    """
    Users collection
    """
    __tablename__ = "users"

    doc_id = Column(String, primary_key=True, default=NewDocumentId)
    email = Column(String, nullable=True, index=True)
    username = Column(String, nullable=True)
    role = Column(String, nullable=True)
    status = Column(String, nullable=True)
    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())
