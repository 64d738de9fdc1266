"""
HotelDesk Admin - Record Models Package

Pydantic models that validate documents at the storage boundary.
"""

from hoteldesk_admin.models.records.permission_entry import PermissionEntry
from hoteldesk_admin.models.records.permission_record import PermissionRecord
from hoteldesk_admin.models.records.role_record import RoleRecord
from hoteldesk_admin.models.records.role_permission_record import RolePermissionRecord

__all__ = [
    'PermissionEntry',
    'PermissionRecord',
    'RoleRecord',
    'RolePermissionRecord',
]
