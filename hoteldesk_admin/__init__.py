"""
HotelDesk Admin

Operator scripts that seed and patch permissions, roles and sample data
for the HotelDesk hotel-management application.
"""

__version__ = "1.0.0"
