#!/usr/bin/env python3
"""
HotelDesk Admin - Verify Cashier Role Permissions

Shows what permissions the Cashier role currently has and warns when it
still holds Dashboard or Messages.

Usage:
    hoteldesk-verify-cashier-permissions

Author: HotelDesk Project
"""

import argparse
import sys

from hoteldesk_admin.cli import EXIT_SUCCESS, print_header, run_script
from hoteldesk_admin.defaults import CASHIER_ROLE_NAME
from hoteldesk_admin.permission_catalog import PermissionCatalog
from hoteldesk_admin.role_resolver import RoleResolver


def _run(db_manager, session, config_mgr) -> int:
    print_header("Verify Cashier Role Permissions")

    role = RoleResolver(db_manager).Find(session, CASHIER_ROLE_NAME)
    role_id = role.EffectiveRoleId()
    print(f"Found Cashier role with ID: {role_id}")
    print()

    id_to_key = PermissionCatalog(db_manager).IdToKeyMap(session)
    edges = db_manager.GetRolePermissionEdges(session, role_id)
    print(f"Cashier role has {len(edges)} permissions:")
    print()

    keys = []
    for edge in edges:
        key = id_to_key.get(edge.permission_id)
        if key:
            keys.append(key)
            print(f"  - {key} (ID: {edge.permission_id})")
        else:
            print(f"  - Unknown permission (ID: {edge.permission_id})")

    print()
    print(f"Total: {len(keys)} permissions")
    print(f"Permission keys: {', '.join(keys)}")

    has_dashboard = 'dashboard.view' in keys
    has_messages = 'messages.view' in keys
    has_pos = 'pos.view' in keys or 'pos.sales' in keys

    print()
    print("=== Summary ===")
    print(f"Dashboard: {'YES' if has_dashboard else 'NO'}")
    print(f"Messages: {'YES' if has_messages else 'NO'}")
    print(f"POS: {'YES' if has_pos else 'NO'}")

    if has_dashboard or has_messages:
        print()
        print("[WARNING] Cashier should NOT have Dashboard or Messages permissions!")

    return EXIT_SUCCESS


def main(argv=None) -> int:
    """Script entry point"""
    parser = argparse.ArgumentParser(description="Show the Cashier role's permissions")
    parser.parse_args(argv)
    return run_script("verify_cashier_permissions", _run)


if __name__ == "__main__":
    sys.exit(main())
