"""
End-to-end tests for the operator scripts

Each script runs through its main() entry point against the database the
script_env config points at, then the store is inspected directly.
"""

import pytest

from hoteldesk_admin.cli import EXIT_FAILURE, EXIT_SUCCESS
from hoteldesk_admin.defaults import (
    CASHIER_PERMISSIONS, CASHIER_POS_ONLY_PERMISSIONS, DEFAULT_PERMISSIONS,
    DEFAULT_ROLE_PERMISSIONS, RESTAURANT_CATEGORIES, RESTAURANT_PRODUCTS
)
from hoteldesk_admin.managers import DatabaseManager
from hoteldesk_admin.models.database import (
    Category, Guest, Permission, Product, Reservation, Role, RolePermission, Room, User
)
from hoteldesk_admin.scripts import (
    add_landing_permissions, check_current_user_permissions, check_products, check_reservations,
    check_user_role, create_restaurant_products, create_sample_data, fix_cashier_only_pos,
    fix_cashier_permissions, fix_cashier_user_role, init_permissions, verify_cashier_permissions
)


@pytest.fixture
def store(script_env):
    """Session on the database the scripts write to"""
    manager = DatabaseManager(str(script_env / "scripts.db"))
    manager.InitializeDatabase()
    session = manager.GetSession()
    yield session
    session.close()
    manager.Dispose()


def role_keys(session, role_name):
    """Permission keys currently assigned to a role"""
    role = session.query(Role).filter(Role.name == role_name).one()
    id_to_key = {p.permission_id: p.key for p in session.query(Permission).all()}
    edges = session.query(RolePermission).filter(RolePermission.role_id == role.role_id).all()
    return sorted(id_to_key[edge.permission_id] for edge in edges)


def add_user(session, email, role):
    session.add(User(email=email, username=email.split("@")[0], role=role, status="active"))
    session.commit()


def test_init_permissions_seeds_catalog_and_roles(store):
    assert init_permissions.main([]) == EXIT_SUCCESS

    store.expire_all()
    assert store.query(Permission).count() == len(DEFAULT_PERMISSIONS)
    assert [role.name for role in store.query(Role).order_by(Role.role_id)] == list(DEFAULT_ROLE_PERMISSIONS)
    assert role_keys(store, "Cashier") == sorted(CASHIER_PERMISSIONS)
    assert role_keys(store, "Owner") == sorted(DEFAULT_ROLE_PERMISSIONS["Owner"])


def test_init_permissions_rerun_is_stable(store):
    assert init_permissions.main([]) == EXIT_SUCCESS
    assert init_permissions.main([]) == EXIT_SUCCESS

    store.expire_all()
    assert store.query(Permission).count() == 32
    assert store.query(Role).count() == 6
    expected_edges = sum(len(set(keys)) for keys in DEFAULT_ROLE_PERMISSIONS.values())
    assert store.query(RolePermission).count() == expected_edges


def test_fix_cashier_only_pos_needs_existing_role(store):
    assert fix_cashier_only_pos.main([]) == EXIT_FAILURE


def test_fix_cashier_only_pos_then_back(store):
    init_permissions.main([])

    assert fix_cashier_only_pos.main([]) == EXIT_SUCCESS
    store.expire_all()
    assert role_keys(store, "Cashier") == sorted(CASHIER_POS_ONLY_PERMISSIONS)

    assert fix_cashier_permissions.main([]) == EXIT_SUCCESS
    store.expire_all()
    assert role_keys(store, "Cashier") == sorted(CASHIER_PERMISSIONS)


def test_add_landing_permissions_merges(store):
    init_permissions.main([])
    before = role_keys(store, "Manager")

    assert add_landing_permissions.main([]) == EXIT_SUCCESS
    assert add_landing_permissions.main([]) == EXIT_SUCCESS

    store.expire_all()
    assert role_keys(store, "Manager") == sorted(before + ["landing.view", "landing.manage"])
    assert "landing.view" in role_keys(store, "Owner")
    assert "landing.view" not in role_keys(store, "Cashier")
    assert store.query(Permission).count() == 34


def test_add_landing_permissions_skips_missing_roles(store):
    assert add_landing_permissions.main([]) == EXIT_SUCCESS

    store.expire_all()
    assert store.query(Permission).count() == 2
    assert store.query(RolePermission).count() == 0


def test_fix_cashier_user_role(store):
    add_user(store, "cashier@gmail.com", "Cashier ")

    assert fix_cashier_user_role.main([]) == EXIT_SUCCESS

    store.expire_all()
    assert store.query(User).one().role == "cashier"
    assert fix_cashier_user_role.main([]) == EXIT_SUCCESS


def test_fix_cashier_user_role_with_email_argument(store):
    add_user(store, "till@hotel.com", "staff")

    assert fix_cashier_user_role.main(["till@hotel.com"]) == EXIT_SUCCESS

    store.expire_all()
    assert store.query(User).one().role == "cashier"


def test_missing_user_fails(store):
    assert fix_cashier_user_role.main(["nobody@hotel.com"]) == EXIT_FAILURE
    assert check_current_user_permissions.main(["nobody@hotel.com"]) == EXIT_FAILURE


def test_check_current_user_permissions(store, capsys):
    init_permissions.main([])
    add_user(store, "cashier@gmail.com", "cashier")
    capsys.readouterr()

    assert check_current_user_permissions.main(["cashier@gmail.com"]) == EXIT_SUCCESS

    output = capsys.readouterr().out
    assert "POS: YES" in output
    assert "Rooms: NO" in output


def test_user_with_unknown_role_fails(store):
    init_permissions.main([])
    add_user(store, "ghost@hotel.com", "housekeeping")

    assert check_current_user_permissions.main(["ghost@hotel.com"]) == EXIT_FAILURE


def test_verify_cashier_permissions(store, capsys):
    assert verify_cashier_permissions.main([]) == EXIT_FAILURE

    init_permissions.main([])
    fix_cashier_only_pos.main([])
    capsys.readouterr()

    assert verify_cashier_permissions.main([]) == EXIT_SUCCESS
    output = capsys.readouterr().out
    assert "Dashboard: NO" in output
    assert "POS: YES" in output


def test_check_scripts_on_empty_store(store):
    assert check_user_role.main([]) == EXIT_SUCCESS
    assert check_reservations.main([]) == EXIT_SUCCESS
    assert check_products.main([]) == EXIT_SUCCESS


def test_create_sample_data_reuses_rooms_and_guests(store):
    assert create_sample_data.main([]) == EXIT_SUCCESS
    assert create_sample_data.main([]) == EXIT_SUCCESS

    store.expire_all()
    assert store.query(Room).count() == 6
    assert store.query(Guest).count() == 6
    assert store.query(Reservation).count() == 12

    reservation = store.query(Reservation).filter(Reservation.doc_id == "1").one()
    assert reservation.balance_due == reservation.total_price
    assert reservation.number_of_nights > 0

    assert check_reservations.main([]) == EXIT_SUCCESS


def test_create_restaurant_products(store):
    assert create_restaurant_products.main([]) == EXIT_SUCCESS

    store.expire_all()
    category_ids = sorted(int(category.doc_id) for category in store.query(Category))
    assert category_ids == list(range(100, 100 + len(RESTAURANT_CATEGORIES)))

    products = store.query(Product).all()
    assert len(products) == len(RESTAURANT_PRODUCTS)
    assert min(int(product.doc_id) for product in products) == 1000
    assert all(product.is_restaurant_item == 1 for product in products)

    assert create_restaurant_products.main([]) == EXIT_SUCCESS
    store.expire_all()
    assert store.query(Product).count() == len(RESTAURANT_PRODUCTS)
    assert store.query(Category).count() == len(RESTAURANT_CATEGORIES)

    assert check_products.main([]) == EXIT_SUCCESS


def test_existing_product_becomes_restaurant_item(store):
    store.add(Product(doc_id="5", name=RESTAURANT_PRODUCTS[0]["name"], price=1.0, is_restaurant_item=0))
    store.commit()

    assert create_restaurant_products.main([]) == EXIT_SUCCESS

    store.expire_all()
    product = store.query(Product).filter(Product.doc_id == "5").one()
    assert product.is_restaurant_item == 1
    assert product.category_id is not None
    # New products continue after the existing id
    assert store.query(Product).filter(Product.doc_id == "6").count() == 1


def test_unreadable_config_fails(script_env):
    (script_env / "config.json").write_text("{not json")

    assert check_user_role.main([]) == EXIT_FAILURE
