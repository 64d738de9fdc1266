"""
Tests for role permission reconciliation

Covers the REPLACE and MERGE policies against a real SQLite store,
including orphaned and duplicated assignments left by older app versions.
"""

import pytest

from hoteldesk_admin.models.database import Role, RolePermission
from hoteldesk_admin.models.infrastructure import ReconcilePolicy

from conftest import make_entry

ALL_KEYS = ["dashboard.view", "pos.view", "pos.sales", "messages.view", "landing.view", "landing.manage"]


@pytest.fixture
def key_to_id(session, catalog):
    return catalog.ResolveOrCreate(session, [make_entry(key) for key in ALL_KEYS])


def edge_ids(session, role_id):
    """Sorted permission ids currently assigned to a role"""
    rows = session.query(RolePermission).filter(RolePermission.role_id == role_id).all()
    return sorted(row.permission_id for row in rows)


def ids_for(key_to_id, keys):
    return sorted(key_to_id[key] for key in keys)


def test_replace_creates_cashier_permissions(session, resolver, reconciler, key_to_id):
    """Test a fresh Cashier role gets exactly its four permissions"""
    desired = ["dashboard.view", "pos.view", "pos.sales", "messages.view"]
    role_id = resolver.ResolveOrCreate(session, "Cashier", "Default Cashier role")

    result = reconciler.Reconcile(session, role_id, desired, key_to_id, ReconcilePolicy.REPLACE)

    assert result.added == set(desired)
    assert result.removed == set()
    assert result.unchanged == set()
    assert result.deleted_count == 0
    assert result.inserted_count == 4
    assert edge_ids(session, role_id) == ids_for(key_to_id, desired)

    # Second run changes nothing but rewrites the same set
    rerun = reconciler.Reconcile(session, role_id, desired, key_to_id, ReconcilePolicy.REPLACE)
    assert rerun.added == set()
    assert rerun.removed == set()
    assert rerun.unchanged == set(desired)
    assert rerun.deleted_count == 4
    assert rerun.inserted_count == 4
    assert not rerun.HasChanges()
    assert edge_ids(session, role_id) == ids_for(key_to_id, desired)

    print("Cashier replace tests passed")


def test_replace_narrows_cashier_to_pos(session, resolver, reconciler, key_to_id):
    role_id = resolver.ResolveOrCreate(session, "Cashier", "Default Cashier role")
    reconciler.Reconcile(
        session, role_id, ["dashboard.view", "pos.view", "pos.sales", "messages.view"], key_to_id, ReconcilePolicy.REPLACE
    )

    result = reconciler.Reconcile(session, role_id, ["pos.view", "pos.sales"], key_to_id, ReconcilePolicy.REPLACE)

    assert result.removed == {"dashboard.view", "messages.view"}
    assert result.unchanged == {"pos.view", "pos.sales"}
    assert result.added == set()
    assert result.HeldDesiredKeys() == {"pos.view", "pos.sales"}
    assert edge_ids(session, role_id) == ids_for(key_to_id, ["pos.view", "pos.sales"])


def test_merge_adds_landing_permissions_to_owner(session, resolver, reconciler, key_to_id):
    role_id = resolver.ResolveOrCreate(session, "Owner", "Default Owner role")
    reconciler.Reconcile(session, role_id, ["dashboard.view", "pos.view"], key_to_id, ReconcilePolicy.REPLACE)

    result = reconciler.Reconcile(session, role_id, ["landing.view", "landing.manage"], key_to_id, ReconcilePolicy.MERGE)

    assert result.added == {"landing.view", "landing.manage"}
    assert result.removed == set()
    assert result.inserted_count == 2
    assert edge_ids(session, role_id) == ids_for(key_to_id, ["dashboard.view", "pos.view", "landing.view", "landing.manage"])

    again = reconciler.Reconcile(session, role_id, ["landing.view", "landing.manage"], key_to_id, ReconcilePolicy.MERGE)
    assert again.added == set()
    assert again.unchanged == {"landing.view", "landing.manage"}
    assert again.inserted_count == 0
    assert len(edge_ids(session, role_id)) == 4


def test_unresolved_key_is_dropped_not_fatal(session, resolver, reconciler, key_to_id):
    role_id = resolver.ResolveOrCreate(session, "Cashier", "Default Cashier role")

    result = reconciler.Reconcile(session, role_id, ["pos.view", "pos.refund"], key_to_id, ReconcilePolicy.REPLACE)

    assert result.unresolved == {"pos.refund"}
    assert result.added == {"pos.view"}
    assert edge_ids(session, role_id) == [key_to_id["pos.view"]]


def test_stale_map_entry_never_writes_a_dangling_edge(session, catalog, reconciler):
    """Test a mapped id missing from the catalog is treated as unresolved"""
    catalog.ResolveOrCreate(session, [make_entry("pos.view")])
    stale_map = {"pos.view": 1, "pos.sales": 999}

    for policy in (ReconcilePolicy.REPLACE, ReconcilePolicy.MERGE):
        result = reconciler.Reconcile(session, 90, ["pos.view", "pos.sales"], stale_map, policy)

        assert result.unresolved == {"pos.sales"}
        assert "pos.sales" not in result.added
        assert edge_ids(session, 90) == [1]


def test_owner_gains_new_landing_permissions(session, catalog, resolver, reconciler):
    """Test landing keys created on the fly are merged into an existing role"""
    prior_ids = catalog.ResolveOrCreate(session, [make_entry("guests.view")])
    role_id = resolver.ResolveOrCreate(session, "Owner", "Default Owner role")
    reconciler.Reconcile(session, role_id, ["guests.view"], prior_ids, ReconcilePolicy.REPLACE)
    assert "landing.view" not in catalog.KeyToIdMap(session)

    landing_ids = catalog.ResolveOrCreate(session, [make_entry("landing.view"), make_entry("landing.manage")])
    result = reconciler.Reconcile(session, role_id, list(landing_ids), landing_ids, ReconcilePolicy.MERGE)

    assert landing_ids == {"landing.view": 2, "landing.manage": 3}
    assert result.added == {"landing.view", "landing.manage"}
    assert result.removed == set()
    assert result.inserted_count == 2
    assert edge_ids(session, role_id) == [1, 2, 3]


def test_replace_result_does_not_depend_on_prior_state(session, reconciler, key_to_id):
    """Test REPLACE converges to the same set from different starting points"""
    desired = ["pos.view", "messages.view"]
    starting_points = {
        10: [],
        11: ["dashboard.view"],
        12: ["pos.view", "landing.view", "landing.manage"],
        13: list(ALL_KEYS),
    }
    for role_id, prior in starting_points.items():
        reconciler.Reconcile(session, role_id, prior, key_to_id, ReconcilePolicy.REPLACE)
        reconciler.Reconcile(session, role_id, desired, key_to_id, ReconcilePolicy.REPLACE)
        assert edge_ids(session, role_id) == ids_for(key_to_id, desired)


def test_merge_result_is_union(session, reconciler, key_to_id):
    prior = ["dashboard.view", "pos.view"]
    desired = ["pos.view", "pos.sales"]
    reconciler.Reconcile(session, 20, prior, key_to_id, ReconcilePolicy.REPLACE)

    result = reconciler.Reconcile(session, 20, desired, key_to_id, ReconcilePolicy.MERGE)

    assert edge_ids(session, 20) == ids_for(key_to_id, set(prior) | set(desired))
    assert result.added == {"pos.sales"}
    assert result.unchanged == {"pos.view"}


def test_merge_on_empty_role_matches_replace(session, reconciler, key_to_id):
    desired = ["dashboard.view", "landing.view"]

    reconciler.Reconcile(session, 30, desired, key_to_id, ReconcilePolicy.MERGE)
    reconciler.Reconcile(session, 31, desired, key_to_id, ReconcilePolicy.REPLACE)

    assert edge_ids(session, 30) == edge_ids(session, 31)


def test_empty_replace_clears_role(session, reconciler, key_to_id):
    reconciler.Reconcile(session, 40, ["pos.view", "pos.sales"], key_to_id, ReconcilePolicy.REPLACE)

    result = reconciler.Reconcile(session, 40, [], key_to_id, ReconcilePolicy.REPLACE)

    assert result.removed == {"pos.view", "pos.sales"}
    assert result.inserted_count == 0
    assert edge_ids(session, 40) == []


def test_duplicate_desired_keys_insert_one_edge(session, reconciler, key_to_id):
    result = reconciler.Reconcile(
        session, 50, ["pos.view", "pos.view", "pos.sales"], key_to_id, ReconcilePolicy.REPLACE
    )

    assert result.inserted_count == 2
    assert edge_ids(session, 50) == ids_for(key_to_id, ["pos.view", "pos.sales"])


def test_replace_cleans_duplicate_and_orphan_edges(session, reconciler, key_to_id):
    """Test REPLACE removes duplicated edges and edges to unknown permissions"""
    session.add(RolePermission(role_id=60, permission_id=key_to_id["pos.view"]))
    session.add(RolePermission(role_id=60, permission_id=key_to_id["pos.view"]))
    session.add(RolePermission(role_id=60, permission_id=999))
    session.commit()

    result = reconciler.Reconcile(session, 60, ["pos.view"], key_to_id, ReconcilePolicy.REPLACE)

    assert result.unknown_permission_ids == {999}
    assert result.unchanged == {"pos.view"}
    assert result.deleted_count == 3
    assert result.HasChanges()
    assert edge_ids(session, 60) == [key_to_id["pos.view"]]


def test_merge_keeps_orphan_edges(session, reconciler, key_to_id):
    session.add(RolePermission(role_id=61, permission_id=999))
    session.commit()

    result = reconciler.Reconcile(session, 61, ["pos.view"], key_to_id, ReconcilePolicy.MERGE)

    assert result.unknown_permission_ids == {999}
    assert edge_ids(session, 61) == sorted([999, key_to_id["pos.view"]])


def test_changes_refresh_role_timestamp(session, resolver, reconciler, key_to_id):
    role_id = resolver.ResolveOrCreate(session, "Staff", "Default Staff role")
    role = session.query(Role).one()
    role.updated_at = None
    session.commit()

    reconciler.Reconcile(session, role_id, ["dashboard.view"], key_to_id, ReconcilePolicy.REPLACE)

    session.expire_all()
    assert session.query(Role).one().updated_at is not None


def test_unknown_policy_is_rejected(session, reconciler, key_to_id):
    with pytest.raises(ValueError):
        reconciler.Reconcile(session, 70, ["pos.view"], key_to_id, "overwrite")
