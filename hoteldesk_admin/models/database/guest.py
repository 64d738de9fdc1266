"""
HotelDesk Admin - Guest Document Model
"""

from sqlalchemy import Column, String, DateTime, func

from hoteldesk_admin.models.database.base import Base


class Guest(Base):
    """
    Guests collection - document id is the numeric guest id
    """
    __tablename__ = "guests"

    doc_id = Column(String, primary_key=True)
    first_name = Column(String, nullable=False)
    last_name = Column(String, nullable=False)
    email = Column(String, nullable=True, index=True)
    phone = Column(String, nullable=True)
    id_type = Column(String, nullable=True)
    id_number = Column(String, nullable=True)
    country = Column(String, nullable=True)
    guest_type = Column(String, nullable=True)  # 'regular', 'vip' or 'corporate'
    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())
