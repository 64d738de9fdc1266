#!/usr/bin/env python3
"""
HotelDesk Admin - Create Sample Data

Creates sample rooms, guests and reservations. Rooms and guests are
reused when they already exist (matched by room number / email);
reservations are always added, so every run adds another set.

Usage:
    hoteldesk-create-sample-data

Author: HotelDesk Project
"""

import argparse
import logging
import sys
from datetime import date, timedelta

from hoteldesk_admin.cli import EXIT_SUCCESS, print_header, print_section, print_next_steps, run_script
from hoteldesk_admin.defaults import SAMPLE_GUESTS, SAMPLE_RESERVATIONS, SAMPLE_ROOMS
from hoteldesk_admin.exceptions import HotelDeskError
from hoteldesk_admin.id_allocator import IdAllocator, ParseDocumentId
from hoteldesk_admin.models.database import Guest, Reservation, Room

logger = logging.getLogger(__name__)


def get_or_create(db_manager, session, model, allocator: IdAllocator, match: dict, data: dict):
    """
    Find a document by the match fields, or create it with the next id

    Returns:
        (document id as int, created flag)
    """
    existing = db_manager.FindFirst(session, model, **match)
    if existing is not None:
        return ParseDocumentId(existing.doc_id), False

    doc_id = allocator.Next()
    with db_manager.Batch(session):
        session.add(model(doc_id=str(doc_id), **data))
    return doc_id, True


def create_rooms(db_manager, session) -> list:
    """Get or create the sample rooms, returning their ids in list order"""
    print_section("Step 1: Checking/Creating rooms")

    allocator = IdAllocator.FromDocumentIds(db_manager.GetDocumentIds(session, Room))
    room_ids = []

    for room_data in SAMPLE_ROOMS:
        room_number = room_data['room_number']
        try:
            room_id, created = get_or_create(
                db_manager, session, Room, allocator, {'room_number': room_number}, room_data
            )
            if created:
                print(f"  Created room {room_number} (ID: {room_id})")
            else:
                print(f"  Room {room_number} already exists (ID: {room_id})")
            room_ids.append(room_id)
        except HotelDeskError as e:
            logger.error(f"Error with room {room_number}: {e}")
            print(f"  [ERROR] Error with room {room_number}: {e}")
            room_ids.append(None)

    print()
    print(f"Total rooms: {len([room_id for room_id in room_ids if room_id is not None])}")
    return room_ids


def create_guests(db_manager, session) -> list:
    """Get or create the sample guests, returning their ids in list order"""
    print_section("Step 2: Checking/Creating guests")

    allocator = IdAllocator.FromDocumentIds(db_manager.GetDocumentIds(session, Guest))
    guest_ids = []

    for guest_data in SAMPLE_GUESTS:
        full_name = f"{guest_data['first_name']} {guest_data['last_name']}"
        try:
            guest_id, created = get_or_create(
                db_manager, session, Guest, allocator, {'email': guest_data['email']}, guest_data
            )
            if created:
                print(f"  Created guest {full_name} (ID: {guest_id})")
            else:
                print(f"  Guest {full_name} already exists (ID: {guest_id})")
            guest_ids.append(guest_id)
        except HotelDeskError as e:
            logger.error(f"Error with guest {full_name}: {e}")
            print(f"  [ERROR] Error with guest {full_name}: {e}")
            guest_ids.append(None)

    print()
    print(f"Total guests: {len([guest_id for guest_id in guest_ids if guest_id is not None])}")
    return guest_ids


def create_reservations(db_manager, session, guest_ids: list, room_ids: list, today: date = None) -> int:
    """
    Add the sample reservations relative to today

    Returns:
        int: Number of reservations created
    """
    print_section("Step 3: Creating reservations")

    today = today or date.today()
    allocator = IdAllocator.FromDocumentIds(db_manager.GetDocumentIds(session, Reservation))
    created_count = 0

    for reservation_data in SAMPLE_RESERVATIONS:
        guest_id = guest_ids[reservation_data['guest_index']]
        room_id = room_ids[reservation_data['room_index']]
        if guest_id is None or room_id is None:
            print("  [ERROR] Skipping reservation - missing guest or room")
            continue

        check_in = today + timedelta(days=reservation_data['check_in_offset'])
        check_out = today + timedelta(days=reservation_data['check_out_offset'])
        number_of_nights = (check_out - check_in).days
        reservation_id = allocator.Next()

        try:
            with db_manager.Batch(session):
                session.add(Reservation(
                    doc_id=str(reservation_id),
                    guest_id=guest_id,
                    room_id=room_id,
                    check_in_date=check_in.isoformat(),
                    check_out_date=check_out.isoformat(),
                    status=reservation_data['status'],
                    total_price=reservation_data['total_price'],
                    number_of_nights=number_of_nights,
                    balance_due=reservation_data['total_price']
                ))
        except HotelDeskError as e:
            logger.error(f"Error creating reservation: {e}")
            print(f"  [ERROR] Error creating reservation: {e}")
            continue

        print(
            f"  Created reservation {reservation_id} ({reservation_data['status']}) - "
            f"Guest {guest_id}, Room {room_id}, {number_of_nights} nights, ${reservation_data['total_price']}"
        )
        created_count += 1

    return created_count


def _run(db_manager, session, config_mgr) -> int:
    print_header("Create Sample Data")

    room_ids = create_rooms(db_manager, session)
    guest_ids = create_guests(db_manager, session)
    created_count = create_reservations(db_manager, session, guest_ids, room_ids)

    print()
    print(f"[OK] Created {created_count} reservations")
    print_next_steps(
        "Refresh your app",
        "Go to Guests screen to see the sample guests",
        "Go to Reservations screen to see the sample reservations",
        "Go to POS Management to see the reservation counts",
    )
    return EXIT_SUCCESS


def main(argv=None) -> int:
    """Script entry point"""
    parser = argparse.ArgumentParser(description="Create sample rooms, guests and reservations")
    parser.parse_args(argv)
    return run_script("create_sample_data", _run)


if __name__ == "__main__":
    sys.exit(main())
