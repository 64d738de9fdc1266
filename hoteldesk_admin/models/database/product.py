"""
HotelDesk Admin - Product Document Model

POS products. Restaurant menu items carry is_restaurant_item = 1; the
mode/type/business_mode fields appear only on some app versions.
"""

from sqlalchemy import Column, Integer, Float, String, DateTime, func

from hoteldesk_admin.models.database.base import Base


class Product(Base):
    """
    Products collection - document id is the numeric product id
    """
    __tablename__ = "products"

    doc_id = Column(String, primary_key=True)
    name = Column(String, nullable=False, index=True)
    price = Column(Float, nullable=True)
    description = Column(String, nullable=True)
    category_id = Column(Integer, nullable=True)
    is_restaurant_item = Column(Integer, default=0)
    is_available = Column(Integer, default=1)
    stock = Column(Integer, nullable=True)
    mode = Column(String, nullable=True)
    type = Column(String, nullable=True)
    business_mode = Column(String, nullable=True)
    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())
