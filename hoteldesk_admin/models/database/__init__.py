"""
HotelDesk Admin - Database Models Package

SQLAlchemy models for every document collection the admin scripts touch.
All models share a common declarative base.
"""

# Import Base first
from hoteldesk_admin.models.database.base import Base, NewDocumentId

# Import all models
from hoteldesk_admin.models.database.permission import Permission
from hoteldesk_admin.models.database.role import Role
from hoteldesk_admin.models.database.role_permission import RolePermission
from hoteldesk_admin.models.database.user import User
from hoteldesk_admin.models.database.room import Room
from hoteldesk_admin.models.database.guest import Guest
from hoteldesk_admin.models.database.reservation import Reservation
from hoteldesk_admin.models.database.category import Category
from hoteldesk_admin.models.database.product import Product

# Export all models and Base
__all__ = [
    'Base',
    'NewDocumentId',
    'Permission',
    'Role',
    'RolePermission',
    'User',
    'Room',
    'Guest',
    'Reservation',
    'Category',
    'Product',
]
