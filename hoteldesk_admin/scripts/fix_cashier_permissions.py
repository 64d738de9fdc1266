#!/usr/bin/env python3
"""
HotelDesk Admin - Fix Cashier Role Permissions

Sets the Cashier role to POS access plus Dashboard and Messages.

Usage:
    hoteldesk-fix-cashier-permissions

Author: HotelDesk Project
"""

import argparse
import sys

from hoteldesk_admin.cli import EXIT_SUCCESS, print_header, print_next_steps, run_script
from hoteldesk_admin.defaults import CASHIER_PERMISSIONS, CASHIER_ROLE_NAME
from hoteldesk_admin.scripts.common import replace_existing_role_permissions


def _run(db_manager, session, config_mgr) -> int:
    print_header("Fix Cashier Role Permissions")

    replace_existing_role_permissions(db_manager, session, CASHIER_ROLE_NAME, CASHIER_PERMISSIONS)

    print()
    print("[OK] Cashier permissions updated successfully!")
    print_next_steps(
        "Logout and login again as Cashier user",
        "You should now only see: Dashboard, POS Management, Messages",
    )
    return EXIT_SUCCESS


def main(argv=None) -> int:
    """Script entry point"""
    parser = argparse.ArgumentParser(description="Set the Cashier role to POS, Dashboard and Messages")
    parser.parse_args(argv)
    return run_script("fix_cashier_permissions", _run)


if __name__ == "__main__":
    sys.exit(main())
