#!/usr/bin/env python3
"""
HotelDesk Admin - Initialize Permissions and Roles

Creates every default permission and role, then sets each default role's
permissions to exactly its default set. Safe to re-run.

Usage:
    hoteldesk-init-permissions

Author: HotelDesk Project
"""

import argparse
import logging
import sys

from hoteldesk_admin.cli import (
    EXIT_SUCCESS, print_header, print_section, print_next_steps, run_script
)
from hoteldesk_admin.defaults import DEFAULT_PERMISSIONS, DEFAULT_ROLE_PERMISSIONS
from hoteldesk_admin.models.infrastructure import ReconcilePolicy
from hoteldesk_admin.permission_catalog import PermissionCatalog
from hoteldesk_admin.role_reconciler import RoleReconciler
from hoteldesk_admin.role_resolver import RoleResolver
from hoteldesk_admin.scripts.common import print_reconcile_result

logger = logging.getLogger(__name__)


def initialize_permissions(db_manager, session) -> dict:
    """
    Ensure every default permission exists

    Returns:
        dict: key -> permission_id for the default catalog
    """
    print_section("Permissions")

    catalog = PermissionCatalog(db_manager)
    existing_keys = set(catalog.KeyToIdMap(session))
    key_to_id = catalog.ResolveOrCreate(session, DEFAULT_PERMISSIONS)

    for key, permission_id in key_to_id.items():
        if key in existing_keys:
            print(f"Permission already exists: {key}")
        else:
            print(f"Created permission: {key} (ID: {permission_id})")

    print()
    print(f"Total permissions: {len(key_to_id)}")
    return key_to_id


def initialize_roles(db_manager, session, key_to_id: dict):
    """Ensure every default role exists and holds exactly its default permissions"""
    print_section("Roles")

    resolver = RoleResolver(db_manager)
    reconciler = RoleReconciler(db_manager)

    for role_name, permission_keys in DEFAULT_ROLE_PERMISSIONS.items():
        existed = db_manager.FindRoleByName(session, role_name) is not None
        role_id = resolver.ResolveOrCreate(session, role_name, f"Default {role_name} role")

        print()
        if existed:
            print(f"Role exists: {role_name} (ID: {role_id})")
        else:
            print(f"Created role: {role_name} (ID: {role_id})")

        result = reconciler.Reconcile(session, role_id, permission_keys, key_to_id, ReconcilePolicy.REPLACE)
        print_reconcile_result(role_name, result)

    print()
    print("Roles initialization complete!")


def _run(db_manager, session, config_mgr) -> int:
    print_header("Permissions and Roles Initialization")

    key_to_id = initialize_permissions(db_manager, session)
    initialize_roles(db_manager, session, key_to_id)

    print()
    print("[OK] Initialization complete!")
    print_next_steps(
        "Logout and login again in the app",
        "You should now see all menu items for Admin role",
    )
    return EXIT_SUCCESS


def main(argv=None) -> int:
    """Script entry point"""
    parser = argparse.ArgumentParser(description="Initialize default permissions and roles")
    parser.parse_args(argv)
    return run_script("init_permissions", _run)


if __name__ == "__main__":
    sys.exit(main())
