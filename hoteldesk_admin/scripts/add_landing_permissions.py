#!/usr/bin/env python3
"""
HotelDesk Admin - Add Landing Page Permissions

Adds the landing page permissions to the Owner, Admin and Manager roles
without touching any permission they already hold. Useful when roles are
already set up and a full re-initialization is not wanted.

Usage:
    hoteldesk-add-landing-permissions

Author: HotelDesk Project
"""

import argparse
import logging
import sys

from hoteldesk_admin.cli import EXIT_SUCCESS, print_header, print_section, run_script
from hoteldesk_admin.defaults import LANDING_PERMISSIONS, LANDING_ROLES
from hoteldesk_admin.inspection import GetRolePermissionKeys
from hoteldesk_admin.models.infrastructure import ReconcilePolicy
from hoteldesk_admin.permission_catalog import PermissionCatalog
from hoteldesk_admin.role_reconciler import RoleReconciler

logger = logging.getLogger(__name__)


def _run(db_manager, session, config_mgr) -> int:
    print_header("Add Landing Page Permissions")

    catalog = PermissionCatalog(db_manager)
    reconciler = RoleReconciler(db_manager, catalog)

    print_section("1. Checking/creating landing page permissions")
    existing_keys = set(catalog.KeyToIdMap(session))
    key_to_id = catalog.ResolveOrCreate(session, LANDING_PERMISSIONS)
    for key in key_to_id:
        if key in existing_keys:
            print(f"   Permission already exists: {key}")
        else:
            print(f"   Created permission: {key}")

    print_section("2. Updating roles")
    landing_keys = list(key_to_id)

    for role_name in LANDING_ROLES:
        print()
        print(f"   Processing role: {role_name}")

        role = db_manager.FindRoleByName(session, role_name)
        if role is None:
            print(f"   [WARNING] Role \"{role_name}\" not found. Skipping...")
            logger.warning(f"Role '{role_name}' not found, skipping landing permissions")
            continue

        role_id = role.EffectiveRoleId()
        result = reconciler.Reconcile(session, role_id, landing_keys, key_to_id, ReconcilePolicy.MERGE)

        if not result.added:
            print(f"   Role \"{role_name}\" already has all landing page permissions")
            continue

        total, _ = GetRolePermissionKeys(db_manager, catalog, session, role_id)
        print(f"   Added permissions to \"{role_name}\": {', '.join(sorted(result.added))}")
        print(f"   Total permissions for \"{role_name}\": {len(total)}")

    print()
    print("[OK] Successfully added landing page permissions to roles!")
    print()
    print("Note: Users may need to log out and log back in for permission changes to take effect.")
    return EXIT_SUCCESS


def main(argv=None) -> int:
    """Script entry point"""
    parser = argparse.ArgumentParser(description="Add landing page permissions to existing roles")
    parser.parse_args(argv)
    return run_script("add_landing_permissions", _run)


if __name__ == "__main__":
    sys.exit(main())
