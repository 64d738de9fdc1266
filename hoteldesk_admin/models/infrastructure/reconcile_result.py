"""
HotelDesk Admin - Reconcile Result

Dataclass describing what a reconciliation run changed.
"""

from dataclasses import dataclass, field
from typing import Set

from hoteldesk_admin.models.infrastructure.reconcile_policy import ReconcilePolicy


@dataclass
class ReconcileResult:
    """
    Outcome of reconciling one role's permission assignments
    Key sets are permission keys; formatting is left to the caller
    """
    role_id: int
    policy: ReconcilePolicy
    added: Set[str] = field(default_factory=set)
    removed: Set[str] = field(default_factory=set)
    unchanged: Set[str] = field(default_factory=set)
    unresolved: Set[str] = field(default_factory=set)  # desired keys with no catalog entry
    unknown_permission_ids: Set[int] = field(default_factory=set)  # edges pointing at no known permission
    deleted_count: int = 0
    inserted_count: int = 0

    def HeldDesiredKeys(self) -> Set[str]:
        """
        Desired keys the role holds after the run

        Under REPLACE this is the role's whole key set. Under MERGE, prior
        keys outside the desired set are held too but not included.
        """
        return self.added | self.unchanged

    def HasChanges(self) -> bool:
        """Check if the run added or removed any assignment"""
        if self.added or self.removed:
            return True
        # Orphaned edges are only dropped under REPLACE
        return self.policy == ReconcilePolicy.REPLACE and bool(self.unknown_permission_ids)
