"""
Tests for document store batches and queries
"""

import pytest

from hoteldesk_admin.exceptions import StoreError
from hoteldesk_admin.models.database import Permission, Role, User


def test_batch_commits_together(db_manager, session):
    with db_manager.Batch(session):
        db_manager.AddPermission(session, 1, "pos.view", "View POS", "pos", "")
        db_manager.AddPermission(session, 2, "pos.sales", "POS Sales", "pos", "")

    assert sorted(db_manager.GetPermissionIds(session)) == [1, 2]


def test_failed_batch_rolls_back_and_raises_store_error(db_manager, session):
    """Test a colliding id aborts the whole batch"""
    with db_manager.Batch(session):
        db_manager.AddPermission(session, 1, "pos.view", "View POS", "pos", "")

    with pytest.raises(StoreError):
        with db_manager.Batch(session):
            db_manager.AddPermission(session, 2, "pos.sales", "POS Sales", "pos", "")
            db_manager.AddPermission(session, 1, "pos.products", "POS Products", "pos", "")

    assert [p.key for p in session.query(Permission).all()] == ["pos.view"]


def test_non_store_errors_roll_back_and_propagate(db_manager, session):
    with pytest.raises(KeyError):
        with db_manager.Batch(session):
            db_manager.AddRole(session, 1, "Owner", "Default Owner role")
            session.flush()
            raise KeyError("missing")

    assert session.query(Role).count() == 0


def test_role_lookup_by_exact_name(db_manager, session):
    with db_manager.Batch(session):
        db_manager.AddRole(session, 3, "Cashier", "Default Cashier role")

    role = db_manager.FindRoleByName(session, "Cashier")
    assert role.role_id == 3
    assert role.is_system_role is True
    assert db_manager.FindRoleByName(session, "cashier") is None


def test_edges_add_and_delete(db_manager, session):
    with db_manager.Batch(session):
        db_manager.AddRolePermissionEdge(session, 1, 10)
        db_manager.AddRolePermissionEdge(session, 1, 11)
        db_manager.AddRolePermissionEdge(session, 2, 10)

    edges = db_manager.GetRolePermissionEdges(session, 1)
    assert sorted(edge.permission_id for edge in edges) == [10, 11]

    with db_manager.Batch(session):
        deleted = db_manager.DeleteRolePermissionEdges(session, [edge.doc_id for edge in edges])

    assert deleted == 2
    assert db_manager.GetRolePermissionEdges(session, 1) == []
    assert len(db_manager.GetRolePermissionEdges(session, 2)) == 1
    assert db_manager.DeleteRolePermissionEdges(session, []) == 0


def test_users_by_email(db_manager, session):
    session.add(User(email="cashier@gmail.com", role="cashier"))
    session.add(User(email="admin@hotel.com", role="admin"))
    session.commit()

    assert [user.role for user in db_manager.FindUsersByEmail(session, "cashier@gmail.com")] == ["cashier"]
    assert db_manager.FindUsersByEmail(session, "nobody@hotel.com") == []
    assert len(db_manager.GetAllUsers(session)) == 2
