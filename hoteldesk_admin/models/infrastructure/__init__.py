"""
HotelDesk Admin - Infrastructure Models Package

Enum and dataclass models used by the reconciliation components.
"""

from hoteldesk_admin.models.infrastructure.reconcile_policy import ReconcilePolicy
from hoteldesk_admin.models.infrastructure.reconcile_result import ReconcileResult

__all__ = [
    'ReconcilePolicy',
    'ReconcileResult',
]
