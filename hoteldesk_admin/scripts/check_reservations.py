#!/usr/bin/env python3
"""
HotelDesk Admin - Check Reservations

Shows the latest reservations with their balance_due values and whether
the POS screen will list them.

Usage:
    hoteldesk-check-reservations

Author: HotelDesk Project
"""

import argparse
import sys

from hoteldesk_admin.cli import EXIT_SUCCESS, print_header, run_script
from hoteldesk_admin.inspection import ShowsInPos, StatusBreakdown
from hoteldesk_admin.models.database import Reservation

RESERVATION_LIMIT = 20


def _run(db_manager, session, config_mgr) -> int:
    print_header("Check Reservations")

    reservations = (
        session.query(Reservation)
        .order_by(Reservation.check_in_date.desc())
        .limit(RESERVATION_LIMIT)
        .all()
    )
    print(f"Found {len(reservations)} reservations:")
    print()

    if not reservations:
        print("No reservations found!")
        return EXIT_SUCCESS

    for reservation in reservations:
        balance_due = reservation.balance_due
        print(f"Reservation ID: {reservation.doc_id}")
        print(f"  Guest ID: {reservation.guest_id}")
        print(f"  Room ID: {reservation.room_id}")
        print(f"  Status: {reservation.status or 'unknown'}")
        print(f"  Check-in: {reservation.check_in_date}")
        print(f"  Check-out: {reservation.check_out_date}")
        print(f"  Total Price: ${reservation.total_price or 0}")
        print(f"  Balance Due: {'NOT SET' if balance_due is None else f'${balance_due}'}")
        print(f"  Will show in POS: {'YES' if ShowsInPos(reservation) else 'NO'}")
        print()

    print("Status breakdown:")
    for status, count in StatusBreakdown(reservations).items():
        print(f"  {status}: {count}")

    return EXIT_SUCCESS


def main(argv=None) -> int:
    """Script entry point"""
    parser = argparse.ArgumentParser(description="Show recent reservations and their balances")
    parser.parse_args(argv)
    return run_script("check_reservations", _run)


if __name__ == "__main__":
    sys.exit(main())
