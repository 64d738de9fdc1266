"""
HotelDesk Admin - Managers Package

This package contains manager classes for configuration and the document store.
"""

from hoteldesk_admin.managers.config_manager import ConfigManager
from hoteldesk_admin.managers.database_manager import DatabaseManager

__all__ = ['ConfigManager', 'DatabaseManager']
