#!/usr/bin/env python3
"""
HotelDesk Admin - Fix Cashier Role (POS Only)

Sets the Cashier role to ONLY the POS permissions. Dashboard and
Messages are removed.

Usage:
    hoteldesk-fix-cashier-only-pos

Author: HotelDesk Project
"""

import argparse
import sys

from hoteldesk_admin.cli import EXIT_SUCCESS, print_header, print_next_steps, run_script
from hoteldesk_admin.defaults import CASHIER_POS_ONLY_PERMISSIONS, CASHIER_ROLE_NAME
from hoteldesk_admin.scripts.common import replace_existing_role_permissions


def _run(db_manager, session, config_mgr) -> int:
    print_header("Fix Cashier Role (POS Only)")

    replace_existing_role_permissions(db_manager, session, CASHIER_ROLE_NAME, CASHIER_POS_ONLY_PERMISSIONS)

    print()
    print("[OK] Cashier permissions updated to ONLY POS!")
    print_next_steps(
        "Logout and login again as Cashier user",
        "You should now ONLY see: POS Management",
        "Dashboard and Messages should be GONE",
    )
    return EXIT_SUCCESS


def main(argv=None) -> int:
    """Script entry point"""
    parser = argparse.ArgumentParser(description="Restrict the Cashier role to POS permissions")
    parser.parse_args(argv)
    return run_script("fix_cashier_only_pos", _run)


if __name__ == "__main__":
    sys.exit(main())
