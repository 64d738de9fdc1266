"""
HotelDesk Admin - Database Manager

This module manages the document store connection and the reads and
batch writes the admin scripts perform. Each collection is a table keyed
by a string document id; a batch is one committed session transaction.
"""

import logging
from contextlib import contextmanager
from pathlib import Path
from typing import Iterable, List, Optional

from pydantic import ValidationError
from sqlalchemy import create_engine, func, or_, and_
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import sessionmaker

from hoteldesk_admin.exceptions import StoreError
from hoteldesk_admin.models.database import (
    Base, Permission, Role, RolePermission, User
)
from hoteldesk_admin.models.records import (
    PermissionRecord, RoleRecord, RolePermissionRecord
)

logger = logging.getLogger(__name__)


class DatabaseManager:
    """
    Manages document store connection, initialization, and operations
    """

    def __init__(self, db_path: str = "database/hoteldesk.db"):
        """
        Initialize database manager

        Args:
            db_path: Path to SQLite database file
        """
        self.db_path = db_path

        # Ensure database directory exists
        db_dir = Path(db_path).parent
        if db_dir and str(db_dir) != '.':
            db_dir.mkdir(parents=True, exist_ok=True)

        self.engine = create_engine(f"sqlite:///{db_path}", echo=False)
        self.SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=self.engine, expire_on_commit=False)

    def InitializeDatabase(self):
        """
        Create any missing collections
        Existing documents are left untouched
        """
        try:
            Base.metadata.create_all(bind=self.engine)
        except SQLAlchemyError as e:
            raise StoreError(f"Failed to initialize database at {self.db_path}: {e}") from e

    def GetSession(self):
        """
        Get a new database session

        Returns:
            Session: SQLAlchemy session
        """
        return self.SessionLocal()

    def Dispose(self):
        """Release pooled connections"""
        self.engine.dispose()

    @contextmanager
    def Batch(self, session):
        """
        Atomic multi-document write

        Everything added or deleted inside the block is committed together.
        On failure the session is rolled back and nothing is applied.

        Args:
            session: SQLAlchemy session

        Raises:
            StoreError: The commit (or a write inside the block) failed
        """
        try:
            yield session
            session.commit()
        except SQLAlchemyError as e:
            session.rollback()
            raise StoreError(f"Batch write failed: {e}") from e
        except Exception:
            session.rollback()
            raise

    # ==================== Permissions ====================

    def GetPermissionRecords(self, session) -> List[PermissionRecord]:
        """
        Get every valid permission document

        Documents missing key or permission_id cannot take part in key/id
        resolution and are skipped with a warning.

        Args:
            session: SQLAlchemy session

        Returns:
            list: PermissionRecord objects ordered by permission_id
        """
        records = []
        for row in session.query(Permission).order_by(Permission.permission_id).all():
            try:
                records.append(PermissionRecord.model_validate(row))
            except ValidationError:
                logger.warning(f"Skipping malformed permission document '{row.doc_id}' (key={row.key}, permission_id={row.permission_id})")
        return records

    def GetPermissionIds(self, session) -> List[int]:
        """
        Get every permission_id in use, including those on malformed documents

        Args:
            session: SQLAlchemy session

        Returns:
            list: Permission ids
        """
        rows = session.query(Permission.permission_id).filter(Permission.permission_id.isnot(None)).all()
        return [row[0] for row in rows]

    def AddPermission(self, session, permission_id: int, key: str, name: str, category: str, description: str):
        """
        Stage a new permission document (committed by the enclosing batch)

        Args:
            session: SQLAlchemy session
            permission_id: Newly allocated permission id, also used as document id
            key: Permission key (e.g. "pos.view")
            name: Human-readable name
            category: Menu category
            description: Description text
        """
        session.add(Permission(
            doc_id=str(permission_id),
            permission_id=permission_id,
            key=key,
            name=name,
            category=category,
            description=description
        ))

    # ==================== Roles ====================

    def GetRoleRecords(self, session) -> List[RoleRecord]:
        """
        Get all role documents

        Args:
            session: SQLAlchemy session

        Returns:
            list: RoleRecord objects
        """
        return [RoleRecord.model_validate(row) for row in session.query(Role).order_by(Role.doc_id).all()]

    def FindRoleByName(self, session, name: str) -> Optional[RoleRecord]:
        """
        Find a role by exact name

        Args:
            session: SQLAlchemy session
            name: Role name (case sensitive)

        Returns:
            RoleRecord: First matching role, or None
        """
        row = session.query(Role).filter(Role.name == name).order_by(Role.doc_id).first()
        if row is None:
            return None
        return RoleRecord.model_validate(row)

    def AddRole(self, session, role_id: int, name: str, description: str, is_system_role: bool = True):
        """
        Stage a new role document (committed by the enclosing batch)

        Args:
            session: SQLAlchemy session
            role_id: Newly allocated role id, also used as document id
            name: Role name
            description: Role description
            is_system_role: Whether the role was seeded by the admin scripts
        """
        session.add(Role(
            doc_id=str(role_id),
            role_id=role_id,
            name=name,
            description=description,
            is_system_role=is_system_role
        ))

    def TouchRole(self, session, role_id: int):
        """
        Refresh a role's updated_at marker

        Matches the explicit role_id, or the document id of legacy roles
        that have none. A missing role is not an error.

        Args:
            session: SQLAlchemy session
            role_id: Role id
        """
        session.query(Role).filter(or_(
            Role.role_id == role_id,
            and_(Role.role_id.is_(None), Role.doc_id == str(role_id))
        )).update({Role.updated_at: func.now()}, synchronize_session=False)

    # ==================== Role Permissions ====================

    def GetRolePermissionEdges(self, session, role_id: int) -> List[RolePermissionRecord]:
        """
        Get all permission assignments for a role

        Args:
            session: SQLAlchemy session
            role_id: Role id

        Returns:
            list: RolePermissionRecord objects
        """
        rows = session.query(RolePermission).filter(RolePermission.role_id == role_id).order_by(RolePermission.created_at, RolePermission.doc_id).all()
        return [RolePermissionRecord.model_validate(row) for row in rows]

    def DeleteRolePermissionEdges(self, session, doc_ids: Iterable[str]) -> int:
        """
        Stage deletion of edge documents (committed by the enclosing batch)

        Args:
            session: SQLAlchemy session
            doc_ids: Edge document ids

        Returns:
            int: Number of documents staged for deletion
        """
        doc_ids = list(doc_ids)
        if not doc_ids:
            return 0
        return session.query(RolePermission).filter(RolePermission.doc_id.in_(doc_ids)).delete(synchronize_session=False)

    def AddRolePermissionEdge(self, session, role_id: int, permission_id: int):
        """
        Stage a new edge document with a store-assigned id

        Args:
            session: SQLAlchemy session
            role_id: Role id
            permission_id: Permission id
        """
        session.add(RolePermission(role_id=role_id, permission_id=permission_id))

    # ==================== Users ====================

    def GetAllUsers(self, session) -> List[User]:
        """
        Get all users

        Args:
            session: SQLAlchemy session

        Returns:
            list: User objects
        """
        return session.query(User).order_by(User.doc_id).all()

    def FindUsersByEmail(self, session, email: str) -> List[User]:
        """
        Get users with an exact email match

        Args:
            session: SQLAlchemy session
            email: Email address

        Returns:
            list: User objects
        """
        return session.query(User).filter(User.email == email).order_by(User.doc_id).all()

    # ==================== Generic Documents ====================

    def FindFirst(self, session, model, **filters):
        """
        Find the first document of a collection matching equality filters

        Args:
            session: SQLAlchemy session
            model: Collection model class
            **filters: Field equality filters

        Returns:
            The matching document, or None
        """
        return session.query(model).filter_by(**filters).order_by(model.doc_id).first()

    def GetDocumentIds(self, session, model) -> List[str]:
        """
        Get every document id of a collection

        Args:
            session: SQLAlchemy session
            model: Collection model class

        Returns:
            list: Document ids
        """
        return [row[0] for row in session.query(model.doc_id).all()]
