"""
HotelDesk Admin - Reservation Document Model

Dates are stored as YYYY-MM-DD strings, the format the app writes.
"""

from sqlalchemy import Column, Integer, Float, String, DateTime, func

from hoteldesk_admin.models.database.base import Base


class Reservation(Base):
    """
    Reservations collection - document id is the numeric reservation id
    """
    __tablename__ = "reservations"

    doc_id = Column(String, primary_key=True)
    guest_id = Column(Integer, nullable=True)
    room_id = Column(Integer, nullable=True)
    check_in_date = Column(String, nullable=True, index=True)
    check_out_date = Column(String, nullable=True)
    status = Column(String, nullable=True)  # 'reserved', 'checked_in', 'checked_out' or 'cancelled'
    total_price = Column(Float, nullable=True)
    number_of_nights = Column(Integer, nullable=True)
    balance_due = Column(Float, nullable=True)  # NULL means the app never set it
    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())
