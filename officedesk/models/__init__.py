# Import all models so SQLAlchemy metadata is populated for Alembic autogenerate
from officedesk.models.enums import OfficeCategory, PrincipalType, StaffRole
from officedesk.models.message import Message
from officedesk.models.office import Office
from officedesk.models.staff import Staff, staff_offices

__all__ = [
    "Message",
    "Office",
    "OfficeCategory",
    "PrincipalType",
    "Staff",
    "StaffRole",
    "staff_offices",
]
