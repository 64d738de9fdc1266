"""
HotelDesk Admin - Inspection Helpers

Read-only summaries used by the check_* and verify_* scripts.
"""

from collections import Counter
from typing import Dict, Iterable, List, Optional, Tuple

from sqlalchemy import inspect as sqlalchemy_inspect

from hoteldesk_admin.defaults import KEY_PERMISSION_CHECKS


def CapitalizeRoleName(role: Optional[str]) -> Optional[str]:
    """
    Turn a user's role field into a role document name

    Same rule the app uses at sign-in: first letter upper case, the rest
    lower case ("cashier" -> "Cashier", "ADMIN" -> "Admin").
    """
    if not role:
        return role
    return role[0].upper() + role[1:].lower()


def GetRolePermissionKeys(db_manager, catalog, session, role_id: int) -> Tuple[List[str], List[int]]:
    """
    Keys of a role's current assignments

    Args:
        db_manager: DatabaseManager
        catalog: PermissionCatalog
        session: SQLAlchemy session
        role_id: Role id

    Returns:
        (keys in assignment order, permission ids with no catalog entry)
    """
    id_to_key = catalog.IdToKeyMap(session)
    keys = []
    unknown_ids = []
    for edge in db_manager.GetRolePermissionEdges(session, role_id):
        key = id_to_key.get(edge.permission_id)
        if key is None:
            unknown_ids.append(edge.permission_id)
        else:
            keys.append(key)
    return keys, unknown_ids


def KeyPermissionChecks(permission_keys: Iterable[str]) -> Dict[str, bool]:
    """Label -> whether the headline permission for that screen is held"""
    held = set(permission_keys)
    return {label: key in held for label, key in KEY_PERMISSION_CHECKS.items()}


def ShowsInPos(reservation) -> bool:
    """Whether the POS screen lists this reservation as chargeable"""
    balance_due = reservation.balance_due
    total_price = reservation.total_price or 0
    return (balance_due is not None and balance_due > 0) or total_price > 0


def StatusBreakdown(reservations) -> Dict[str, int]:
    """Reservation count per status, 'unknown' for missing status"""
    return dict(Counter(reservation.status or 'unknown' for reservation in reservations))


def ProductModeCounts(products) -> Tuple[Dict[str, int], Dict[str, int]]:
    """
    Count products by mode and by type

    business_mode values are counted together with mode, since app
    versions wrote one or the other.

    Returns:
        (mode counts, type counts)
    """
    mode_counts = Counter()
    type_counts = Counter()
    for product in products:
        if product.mode:
            mode_counts[product.mode] += 1
        if product.type:
            type_counts[product.type] += 1
        if product.business_mode:
            mode_counts[product.business_mode] += 1
    return dict(mode_counts), dict(type_counts)


def DocumentFields(document) -> Dict[str, object]:
    """Fields actually set on a document, as a plain dict"""
    fields = {}
    for column in sqlalchemy_inspect(document).mapper.column_attrs:
        value = getattr(document, column.key)
        if value is not None:
            fields[column.key] = value
    return fields
