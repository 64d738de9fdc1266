"""
Shared fixtures for HotelDesk Admin tests

Every test gets its own SQLite database under tmp_path.
"""

import json

import pytest

from hoteldesk_admin.managers import DatabaseManager
from hoteldesk_admin.permission_catalog import PermissionCatalog
from hoteldesk_admin.role_reconciler import RoleReconciler
from hoteldesk_admin.role_resolver import RoleResolver


@pytest.fixture
def db_manager(tmp_path):
    manager = DatabaseManager(str(tmp_path / "test.db"))
    manager.InitializeDatabase()
    yield manager
    manager.Dispose()


@pytest.fixture
def session(db_manager):
    db_session = db_manager.GetSession()
    yield db_session
    db_session.close()


@pytest.fixture
def catalog(db_manager):
    return PermissionCatalog(db_manager)


@pytest.fixture
def resolver(db_manager):
    return RoleResolver(db_manager)


@pytest.fixture
def reconciler(db_manager, catalog):
    return RoleReconciler(db_manager, catalog)


@pytest.fixture
def script_env(tmp_path, monkeypatch):
    """Config file pointing the scripts at a throwaway database"""
    config_file = tmp_path / "config.json"
    config_file.write_text(json.dumps({
        "database_path": "scripts.db",
        "log_to_file": False,
        "cashier_email": "cashier@gmail.com"
    }))
    monkeypatch.setenv("HOTELDESK_CONFIG", str(config_file))
    return tmp_path


def make_entry(key: str) -> dict:
    """Permission entry with descriptive fields derived from the key"""
    category = key.split(".")[0]
    return {"key": key, "name": key.replace(".", " ").title(), "category": category, "description": f"Allows {key}"}
