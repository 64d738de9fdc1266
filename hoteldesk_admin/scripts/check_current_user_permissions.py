#!/usr/bin/env python3
"""
HotelDesk Admin - Check a User's Role and Permissions

Looks a user up by email, resolves their role the way the app does at
sign-in and lists the permissions that role holds.

Usage:
    hoteldesk-check-user-permissions <email>
    hoteldesk-check-user-permissions admin@hotel.com

Author: HotelDesk Project
"""

import argparse
import sys

from hoteldesk_admin.cli import EXIT_SUCCESS, print_header, run_script
from hoteldesk_admin.exceptions import NotFoundError
from hoteldesk_admin.inspection import CapitalizeRoleName, GetRolePermissionKeys, KeyPermissionChecks
from hoteldesk_admin.permission_catalog import PermissionCatalog
from hoteldesk_admin.role_resolver import RoleResolver


def _run(db_manager, session, config_mgr, email) -> int:
    print_header("Check User Permissions")
    print(f"Checking permissions for: {email}")
    print()

    users = db_manager.FindUsersByEmail(session, email)
    if not users:
        raise NotFoundError("User", email)

    user = users[0]
    print("[OK] Found user:")
    print(f"   Email: {user.email}")
    print(f"   Username: {user.username or 'N/A'}")
    print(f"   Role: \"{user.role}\"")
    print(f"   Status: {user.status or 'N/A'}")
    print()

    role_name = CapitalizeRoleName(user.role)
    print(f"Looking up role: \"{role_name}\" (original: \"{user.role}\")")
    print()

    if not role_name:
        raise NotFoundError("Role", repr(user.role))
    role = RoleResolver(db_manager).Find(session, role_name)
    role_id = role.EffectiveRoleId()
    print(f"[OK] Found role: \"{role.name}\" (ID: {role_id})")
    print()

    keys, unknown_ids = GetRolePermissionKeys(db_manager, PermissionCatalog(db_manager), session, role_id)
    print(f"Permissions for {role_name} role ({len(keys) + len(unknown_ids)} total):")
    print()
    for key in keys:
        print(f"  [x] {key}")

    print()
    print("=== Key Permission Checks ===")
    for label, held in KeyPermissionChecks(keys).items():
        print(f"{label}: {'YES' if held else 'NO'}")

    print()
    print(f"Total permissions: {len(keys)}")
    print(f"All permissions: {', '.join(keys)}")
    return EXIT_SUCCESS


def main(argv=None) -> int:
    """Script entry point"""
    parser = argparse.ArgumentParser(description="Show a user's role and permissions")
    parser.add_argument("email", help="User email, e.g. admin@hotel.com")
    args = parser.parse_args(argv)
    return run_script("check_current_user_permissions", _run, args.email)


if __name__ == "__main__":
    sys.exit(main())
