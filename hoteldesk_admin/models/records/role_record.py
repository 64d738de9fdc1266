"""
HotelDesk Admin - Role Record Model

Validated view of a stored role document, including the legacy
document-id fallback for role_id.
"""

from typing import Optional
from pydantic import BaseModel, ConfigDict

from hoteldesk_admin.exceptions import RecordValidationError


class RoleRecord(BaseModel):
    """A role document; role_id is optional on legacy documents"""
    model_config = ConfigDict(from_attributes=True)

    doc_id: str
    role_id: Optional[int] = None
    name: str
    description: Optional[str] = None
    is_system_role: Optional[bool] = False

    def EffectiveRoleId(self) -> int:
        """
        Get the role's numeric id

        Uses the explicit role_id field when present. Otherwise the document
        id is parsed as an integer, which is how legacy role documents
        (written before role_id existed) are addressed.

        Returns:
            int: Role id used by role_permissions edges

        Raises:
            RecordValidationError: Neither role_id nor a numeric document id is available
        """
        if self.role_id is not None:
            return self.role_id

        try:
            return int(self.doc_id)
        except ValueError:
            raise RecordValidationError(
                f"Role '{self.name}' has no role_id and a non-numeric document id '{self.doc_id}'"
            )

    def HasExplicitRoleId(self) -> bool:
        """Check whether role_id is stored on the document itself"""
        return self.role_id is not None
