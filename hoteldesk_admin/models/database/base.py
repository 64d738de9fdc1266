"""
HotelDesk Admin - Database Base

Shared declarative base for all document collections.
Every collection is a table keyed by an application-chosen string document id.
"""

import uuid

from sqlalchemy.orm import declarative_base

# Create the shared declarative base
Base = declarative_base()


def NewDocumentId() -> str:
    """Generate a store-assigned document id (used when the caller does not choose one)"""
    return uuid.uuid4().hex
