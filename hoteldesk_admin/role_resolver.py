"""
HotelDesk Admin - Role Resolver

Resolves role names to numeric role ids, creating system roles on demand.
"""

import logging

from hoteldesk_admin.exceptions import NotFoundError, RecordValidationError
from hoteldesk_admin.id_allocator import IdAllocator, ParseNumericIds
from hoteldesk_admin.managers.database_manager import DatabaseManager
from hoteldesk_admin.models.database import Role
from hoteldesk_admin.models.records import RoleRecord

logger = logging.getLogger(__name__)


class RoleResolver:
    """
    Name to role_id lookups over the roles collection
    """

    def __init__(self, db_manager: DatabaseManager):
        self.db_manager = db_manager

    def Find(self, session, name: str) -> RoleRecord:
        """
        Find an existing role by exact name

        Args:
            session: SQLAlchemy session
            name: Role name

        Returns:
            RoleRecord: The role

        Raises:
            NotFoundError: No role has this name
        """
        role = self.db_manager.FindRoleByName(session, name)
        if role is None:
            raise NotFoundError("Role", name)
        return role

    def ResolveOrCreate(self, session, name: str, description: str) -> int:
        """
        Get a role's id, creating the role if it does not exist

        An existing role keeps its stored fields. A new role gets
        max(existing role id) + 1, is_system_role = True and the given
        description. Repeated calls never create a duplicate.

        Args:
            session: SQLAlchemy session
            name: Role name
            description: Description used only when the role is created

        Returns:
            int: Role id

        Raises:
            RecordValidationError: The matching role has no usable id
            StoreError: Creating the role failed
        """
        role = self.db_manager.FindRoleByName(session, name)
        if role is not None:
            role_id = role.EffectiveRoleId()
            if not role.HasExplicitRoleId():
                logger.info(f"Role '{name}' has no role_id field, using document id {role_id}")
            logger.debug(f"Role exists: {name} (ID: {role_id})")
            return role_id

        allocator = IdAllocator(self._ExistingRoleIds(session))
        role_id = allocator.Next()

        with self.db_manager.Batch(session):
            self.db_manager.AddRole(session, role_id=role_id, name=name, description=description, is_system_role=True)

        logger.info(f"Created role: {name} (ID: {role_id})")
        return role_id

    def _ExistingRoleIds(self, session) -> list:
        """
        Ids a new role must not take

        Legacy roles count through their numeric document id so a new role
        can never take an id that existing edges already point at. Numeric
        document ids are taken too, since a new role is stored under
        str(role_id) even when an older document's id differs from its role_id.
        """
        role_ids = []
        for role in self.db_manager.GetRoleRecords(session):
            try:
                role_ids.append(role.EffectiveRoleId())
            except RecordValidationError:
                logger.warning(f"Role '{role.name}' has no usable id, ignoring it for id allocation")
        role_ids.extend(ParseNumericIds(self.db_manager.GetDocumentIds(session, Role)))
        return role_ids
