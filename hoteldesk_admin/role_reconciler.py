"""
HotelDesk Admin - Role Permission Reconciliation

Converges a role's role_permissions edges to a desired set of permission
keys, either replacing the stored set or adding to it.

REPLACE runs as two batches: all current edges are deleted in one commit,
then the desired edges are inserted in a second one. A reader between the
two commits sees the role with no permissions, and two concurrent runs for
the same role resolve as last writer wins. Re-running after a failure is
safe because REPLACE does not depend on the prior state.
"""

import logging
from typing import Dict, Iterable, List

from hoteldesk_admin.managers.database_manager import DatabaseManager
from hoteldesk_admin.models.infrastructure import ReconcilePolicy, ReconcileResult
from hoteldesk_admin.permission_catalog import PermissionCatalog

logger = logging.getLogger(__name__)


class RoleReconciler:
    """
    Applies desired permission sets to roles
    """

    def __init__(self, db_manager: DatabaseManager, catalog: PermissionCatalog = None):
        self.db_manager = db_manager
        self.catalog = catalog or PermissionCatalog(db_manager)

    def Reconcile(
        self,
        session,
        role_id: int,
        desired_keys: Iterable[str],
        key_to_permission_id: Dict[str, int],
        policy: ReconcilePolicy
    ) -> ReconcileResult:
        """
        Converge a role's permission assignments to the desired keys

        Desired keys missing from key_to_permission_id, or mapped to an id the
        catalog does not hold, are dropped with a warning and reported in the
        result's unresolved set. Edges whose permission_id is not in the
        catalog are reported as unknown; REPLACE deletes them along with every
        other current edge.

        The role itself is not validated; resolve it first.

        Args:
            session: SQLAlchemy session
            role_id: Role id whose edges are reconciled
            desired_keys: Permission keys the role should hold
            key_to_permission_id: Resolution map for the desired keys
            policy: REPLACE (exact set) or MERGE (add only)

        Returns:
            ReconcileResult: Added, removed and unchanged keys plus write counts

        Raises:
            StoreError: A batch write failed
        """
        current_edges = self.db_manager.GetRolePermissionEdges(session, role_id)
        id_to_key = self.catalog.IdToKeyMap(session)

        result = ReconcileResult(role_id=role_id, policy=policy)

        current_ids = set()
        for edge in current_edges:
            current_ids.add(edge.permission_id)
            if edge.permission_id not in id_to_key:
                result.unknown_permission_ids.add(edge.permission_id)
                logger.warning(f"Role {role_id} has an assignment to unknown permission ID {edge.permission_id}")

        resolved = self._ResolveDesired(desired_keys, key_to_permission_id, id_to_key, result)
        resolved_ids = set(resolved.values())

        for key, permission_id in resolved.items():
            if permission_id in current_ids:
                result.unchanged.add(key)
            else:
                result.added.add(key)

        if policy == ReconcilePolicy.REPLACE:
            result.removed = {
                id_to_key[permission_id]
                for permission_id in current_ids - resolved_ids
                if permission_id in id_to_key
            }
            self._Replace(session, role_id, current_edges, resolved, result)
        elif policy == ReconcilePolicy.MERGE:
            self._Merge(session, role_id, current_ids, resolved, result)
        else:
            raise ValueError(f"Unknown reconcile policy: {policy}")

        logger.info(
            f"Reconciled role {role_id} ({policy.value}): "
            f"{len(result.added)} added, {len(result.removed)} removed, {len(result.unchanged)} unchanged"
        )
        return result

    def _ResolveDesired(self, desired_keys, key_to_permission_id, id_to_key, result) -> Dict[str, int]:
        """
        Map desired keys to ids in first-seen order, recording unresolved keys

        A key whose mapped id is not in the catalog counts as unresolved, so
        no edge is ever written to a missing permission.
        """
        resolved: Dict[str, int] = {}
        for key in dict.fromkeys(desired_keys):
            permission_id = key_to_permission_id.get(key)
            if permission_id is None:
                result.unresolved.add(key)
                logger.warning(f"Permission '{key}' not found in catalog, skipping it for role {result.role_id}")
                continue
            if permission_id not in id_to_key:
                result.unresolved.add(key)
                logger.warning(
                    f"Permission '{key}' maps to ID {permission_id}, which is not in the catalog, skipping it for role {result.role_id}"
                )
                continue
            resolved[key] = permission_id
        return resolved

    def _Replace(self, session, role_id: int, current_edges, resolved: Dict[str, int], result: ReconcileResult):
        """Delete every current edge, then insert the desired ones"""
        with self.db_manager.Batch(session):
            result.deleted_count = self.db_manager.DeleteRolePermissionEdges(
                session, [edge.doc_id for edge in current_edges]
            )
        logger.debug(f"Deleted {result.deleted_count} existing permission assignments for role {role_id}")

        with self.db_manager.Batch(session):
            result.inserted_count = self._InsertEdges(session, role_id, resolved.values())
            if result.HasChanges():
                self.db_manager.TouchRole(session, role_id)

    def _Merge(self, session, role_id: int, current_ids: set, resolved: Dict[str, int], result: ReconcileResult):
        """Insert only the desired edges the role does not already have"""
        missing_ids = [permission_id for permission_id in resolved.values() if permission_id not in current_ids]
        if not missing_ids:
            return

        with self.db_manager.Batch(session):
            result.inserted_count = self._InsertEdges(session, role_id, missing_ids)
            self.db_manager.TouchRole(session, role_id)

    def _InsertEdges(self, session, role_id: int, permission_ids: Iterable[int]) -> int:
        """Stage one edge per distinct permission id"""
        inserted: List[int] = []
        for permission_id in dict.fromkeys(permission_ids):
            self.db_manager.AddRolePermissionEdge(session, role_id, permission_id)
            inserted.append(permission_id)
        return len(inserted)
