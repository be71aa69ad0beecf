import enum


class StaffRole(str, enum.Enum):
    ADMIN = "Admin"
    MPRO = "Municipal Public Relations Officer"
    MA = "Municipal Administrator"
    TOSM = "Technical Office Staff Member"
    EM = "External Maintainer"


class PrincipalType(str, enum.Enum):
    CITIZEN = "CITIZEN"
    STAFF = "STAFF"


class OfficeCategory(str, enum.Enum):
    MOO = "Municipal Organization"
    WSO = "Water Supply"
    ABO = "Architectural Barriers"
    SSO = "Sewer System"
    PLO = "Public Lighting"
    WO = "Waste"
    RSTLO = "Road Signs and Traffic Lights"
    RUFO = "Roads and Urban Furnishings"
    PGAPO = "Public Green Areas and Playgrounds"
