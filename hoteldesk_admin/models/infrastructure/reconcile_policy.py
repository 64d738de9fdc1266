"""
HotelDesk Admin - Reconcile Policy

How the reconciler treats assignments that are not in the desired set.
"""

from enum import Enum


class ReconcilePolicy(Enum):
    """Reconciliation mode for a role's permission assignments"""
    REPLACE = "replace"  # final edges == desired edges
    MERGE = "merge"  # final edges == prior edges + desired edges
