"""
HotelDesk Admin - Room Document Model
"""

from sqlalchemy import Column, Integer, Float, String, DateTime, func

from hoteldesk_admin.models.database.base import Base


class Room(Base):
    """
    Rooms collection - document id is the numeric room id
    """
    __tablename__ = "rooms"

    doc_id = Column(String, primary_key=True)
    room_number = Column(String, nullable=False, index=True)
    floor = Column(Integer, nullable=True)
    room_type = Column(String, nullable=True)  # 'single', 'double', 'suite' or 'deluxe'
    capacity = Column(Integer, nullable=True)
    price_per_night = Column(Float, nullable=True)
    status = Column(String, nullable=True)
    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())
