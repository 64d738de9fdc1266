"""
HotelDesk Admin - Category Document Model
"""

from sqlalchemy import Column, Integer, String, DateTime, func

from hoteldesk_admin.models.database.base import Base


class Category(Base):
    """
    Product categories collection - document id is the numeric category id
    """
    __tablename__ = "categories"

    doc_id = Column(String, primary_key=True)
    name = Column(String, nullable=False, index=True)
    description = Column(String, nullable=True)
    product_count = Column(Integer, default=0)
    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())
