#!/usr/bin/env python3
"""
HotelDesk Admin - Fix Cashier User Role

Sets the cashier user's role field to "cashier".

Usage:
    hoteldesk-fix-cashier-user-role [email]

The email defaults to the cashier_email config value.

Author: HotelDesk Project
"""

import argparse
import logging
import sys

from hoteldesk_admin.cli import EXIT_SUCCESS, print_header, print_next_steps, run_script
from hoteldesk_admin.defaults import CASHIER_USER_ROLE
from hoteldesk_admin.exceptions import NotFoundError

logger = logging.getLogger(__name__)


def _run(db_manager, session, config_mgr, email) -> int:
    print_header("Fix Cashier User Role")

    email = email or config_mgr.get("cashier_email")
    users = db_manager.FindUsersByEmail(session, email)
    if not users:
        raise NotFoundError("User", email)

    user = users[0]
    current_role = user.role

    print(f"Found user: {user.email}")
    print(f"  Current role: \"{current_role}\"")
    print(f"  User ID: {user.doc_id}")
    print()

    if current_role == CASHIER_USER_ROLE:
        print(f"[OK] Role is already set to \"{CASHIER_USER_ROLE}\"")
        return EXIT_SUCCESS

    with db_manager.Batch(session):
        user.role = CASHIER_USER_ROLE
        session.add(user)

    logger.info(f"Updated role of {email} from '{current_role}' to '{CASHIER_USER_ROLE}'")
    print(f"[OK] Updated role from \"{current_role}\" to \"{CASHIER_USER_ROLE}\"")
    print_next_steps(
        f"Logout and login again as {email}",
        "You should now see only POS Management (if permissions are set correctly)",
    )
    return EXIT_SUCCESS


def main(argv=None) -> int:
    """Script entry point"""
    parser = argparse.ArgumentParser(description="Set the cashier user's role to 'cashier'")
    parser.add_argument("email", nargs="?", default=None, help="Cashier user email (default from config)")
    args = parser.parse_args(argv)
    return run_script("fix_cashier_user_role", _run, args.email)


if __name__ == "__main__":
    sys.exit(main())
