"""
HotelDesk Admin - Shared Script Steps

Reconcile-and-report steps used by more than one permission script.
"""

import logging
from typing import List

from hoteldesk_admin.models.infrastructure import ReconcilePolicy, ReconcileResult
from hoteldesk_admin.permission_catalog import PermissionCatalog
from hoteldesk_admin.role_reconciler import RoleReconciler
from hoteldesk_admin.role_resolver import RoleResolver

logger = logging.getLogger(__name__)


def print_reconcile_result(role_name: str, result: ReconcileResult):
    """Print what a reconcile run changed for one role"""
    if result.policy == ReconcilePolicy.REPLACE:
        print(f"  Deleted {result.deleted_count} existing permission assignments")
        print(f"  Assigned {result.inserted_count} permissions to {role_name}")
    elif result.added:
        print(f"  Added permissions to '{role_name}': {', '.join(sorted(result.added))}")
    else:
        print(f"  Role '{role_name}' already has all requested permissions")

    for key in sorted(result.removed):
        print(f"    - removed {key}")
    for key in sorted(result.added):
        print(f"    + added {key}")
    for permission_id in sorted(result.unknown_permission_ids):
        print(f"    ? unknown permission (ID: {permission_id})")

    if result.unresolved:
        print("  [WARNING] Some permissions not found:")
        for key in sorted(result.unresolved):
            print(f"     Missing: {key}")


def replace_existing_role_permissions(db_manager, session, role_name: str, desired_keys: List[str]) -> ReconcileResult:
    """
    Set an existing role's permissions to exactly the desired keys

    Neither the role nor any permission is created; unknown keys are
    reported and skipped.

    Raises:
        NotFoundError: The role does not exist
    """
    catalog = PermissionCatalog(db_manager)
    role = RoleResolver(db_manager).Find(session, role_name)
    role_id = role.EffectiveRoleId()
    print(f"Found {role_name} role with ID: {role_id}")
    print()

    key_to_id = catalog.KeyToIdMap(session)
    resolved_ids = [str(key_to_id[key]) for key in desired_keys if key in key_to_id]
    print(f"Desired permissions: {', '.join(desired_keys)}")
    print(f"Permission IDs: {', '.join(resolved_ids)}")
    print()

    result = RoleReconciler(db_manager, catalog).Reconcile(
        session, role_id, desired_keys, key_to_id, ReconcilePolicy.REPLACE
    )
    print_reconcile_result(role_name, result)

    print()
    print(f"[OK] {role_name} role now has:")
    for key in desired_keys:
        if key in key_to_id:
            print(f"   - {key} (ID: {key_to_id[key]})")

    return result
