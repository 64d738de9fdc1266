"""
HotelDesk Admin - Models Package

This package contains all data models for the admin scripts:
- database: SQLAlchemy document collection models
- records: Pydantic record models validated at the storage boundary
- infrastructure: Enum and dataclass models for reconciliation
"""

# Re-export all models for convenient importing
from hoteldesk_admin.models.database import *
from hoteldesk_admin.models.records import *
from hoteldesk_admin.models.infrastructure import *
