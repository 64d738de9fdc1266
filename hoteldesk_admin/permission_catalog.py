"""
HotelDesk Admin - Permission Catalog

Resolves permission keys to their numeric permission ids, creating
permission documents for keys the catalog has not seen yet.
"""

import logging
from typing import Dict, Iterable, List, Union

from hoteldesk_admin.id_allocator import IdAllocator, ParseNumericIds
from hoteldesk_admin.managers.database_manager import DatabaseManager
from hoteldesk_admin.models.database import Permission
from hoteldesk_admin.models.records import PermissionEntry

logger = logging.getLogger(__name__)


class PermissionCatalog:
    """
    Key to permission_id lookups over the permissions collection
    """

    def __init__(self, db_manager: DatabaseManager):
        self.db_manager = db_manager

    def ResolveOrCreate(self, session, entries: Iterable[Union[PermissionEntry, dict]]) -> Dict[str, int]:
        """
        Resolve permission keys, creating the ones that do not exist

        Existing permissions are reused as-is; their descriptive fields are
        never rewritten. New permissions get consecutive ids starting at
        max(existing permission_id) + 1 and are written in one batch.
        A key repeated in the input resolves to the same id.

        Args:
            session: SQLAlchemy session
            entries: PermissionEntry objects (or dicts with the same fields)

        Returns:
            dict: key -> permission_id for every requested key, in input order

        Raises:
            StoreError: The batch write failed
        """
        entries = [PermissionEntry.model_validate(entry) for entry in entries]

        key_to_id = self.KeyToIdMap(session)
        allocator = IdAllocator(self._TakenIds(session))

        resolved: Dict[str, int] = {}
        created: List[str] = []

        with self.db_manager.Batch(session):
            for entry in entries:
                if entry.key in resolved:
                    continue

                if entry.key in key_to_id:
                    resolved[entry.key] = key_to_id[entry.key]
                    logger.debug(f"Permission already exists: {entry.key} (ID: {key_to_id[entry.key]})")
                    continue

                permission_id = allocator.Next()
                self.db_manager.AddPermission(
                    session,
                    permission_id=permission_id,
                    key=entry.key,
                    name=entry.name,
                    category=entry.category,
                    description=entry.description
                )
                key_to_id[entry.key] = permission_id
                resolved[entry.key] = permission_id
                created.append(entry.key)

        for key in created:
            logger.info(f"Created permission: {key} (ID: {resolved[key]})")

        return resolved

    def KeyToIdMap(self, session) -> Dict[str, int]:
        """
        Map every permission key in the catalog to its permission_id

        Args:
            session: SQLAlchemy session

        Returns:
            dict: key -> permission_id
        """
        return {record.key: record.permission_id for record in self.db_manager.GetPermissionRecords(session)}

    def IdToKeyMap(self, session) -> Dict[int, str]:
        """
        Map every permission_id in the catalog to its key

        Args:
            session: SQLAlchemy session

        Returns:
            dict: permission_id -> key
        """
        return {record.permission_id: record.key for record in self.db_manager.GetPermissionRecords(session)}

    def _TakenIds(self, session) -> List[int]:
        """
        Ids a new permission must not take

        New permissions use str(permission_id) as document id, so numeric
        document ids of legacy documents without a permission_id are taken too.
        """
        taken = self.db_manager.GetPermissionIds(session)
        taken.extend(ParseNumericIds(self.db_manager.GetDocumentIds(session, Permission)))
        return taken
