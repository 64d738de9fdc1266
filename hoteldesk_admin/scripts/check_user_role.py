#!/usr/bin/env python3
"""
HotelDesk Admin - Check User Roles

Lists every user with their role, then checks the cashier user.

Usage:
    hoteldesk-check-user-role

Author: HotelDesk Project
"""

import argparse
import sys

from hoteldesk_admin.cli import EXIT_SUCCESS, print_header, run_script
from hoteldesk_admin.defaults import CASHIER_USER_ROLE


def _run(db_manager, session, config_mgr) -> int:
    print_header("Check User Roles")

    users = db_manager.GetAllUsers(session)
    print(f"Found {len(users)} users:")
    print()

    for user in users:
        print(f"Email: {user.email or 'N/A'}")
        print(f"  User ID: {user.doc_id}")
        print(f"  Role: \"{user.role}\"")
        print(f"  Username: {user.username or 'N/A'}")
        print(f"  Status: {user.status or 'N/A'}")
        print()

    cashier_users = db_manager.FindUsersByEmail(session, config_mgr.get("cashier_email"))
    if cashier_users:
        print("=== Cashier User Details ===")
        print()
        for user in cashier_users:
            print(f"Email: {user.email}")
            print(f"  User ID: {user.doc_id}")
            print(f"  Role: \"{user.role}\"")
            print(f"  Expected: \"{CASHIER_USER_ROLE}\"")
            if user.role != CASHIER_USER_ROLE:
                print(f"  [WARNING] Role is \"{user.role}\" but should be \"{CASHIER_USER_ROLE}\"!")

    return EXIT_SUCCESS


def main(argv=None) -> int:
    """Script entry point"""
    parser = argparse.ArgumentParser(description="List user roles and check the cashier user")
    parser.parse_args(argv)
    return run_script("check_user_role", _run)


if __name__ == "__main__":
    sys.exit(main())
