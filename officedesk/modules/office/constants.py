"""Office module constants."""

from officedesk.models.enums import OfficeCategory

# One internal office per category, plus one external company for every
# technical category (the organization office has no external counterpart).
DEFAULT_OFFICES: list[dict] = [
    {
        "name": "Municipal Organization Office",
        "description": "Office responsible for municipal administration and management",
        "category": OfficeCategory.MOO,
    },
    {
        "name": "Water Supply Office",
        "description": "Technical office responsible for water supply and management",
        "category": OfficeCategory.WSO,
    },
    {
        "name": "Architectural Barriers Office",
        "description": "Technical office responsible for removing architectural barriers in public spaces",
        "category": OfficeCategory.ABO,
    },
    {
        "name": "Sewer System Office",
        "description": "Technical office responsible for sewer system maintenance and management",
        "category": OfficeCategory.SSO,
    },
    {
        "name": "Public Lighting Office",
        "description": "Technical office responsible for public lighting systems",
        "category": OfficeCategory.PLO,
    },
    {
        "name": "Waste Office",
        "description": "Technical office responsible for waste management and disposal",
        "category": OfficeCategory.WO,
    },
    {
        "name": "Road Signs and Traffic Lights Office",
        "description": "Technical office responsible for road signs and traffic lights maintenance",
        "category": OfficeCategory.RSTLO,
    },
    {
        "name": "Roads and Urban Furnishings Office",
        "description": "Technical office responsible for road maintenance and urban furnishings",
        "category": OfficeCategory.RUFO,
    },
    {
        "name": "Public Green Areas and Playgrounds Office",
        "description": "Technical office responsible for maintenance of public green areas and playgrounds",
        "category": OfficeCategory.PGAPO,
    },
] + [
    {
        "name": f"External Company - {category.value}",
        "description": f"External company responsible for {category.value.lower()}",
        "category": category,
        "is_external": True,
    }
    for category in OfficeCategory
    if category is not OfficeCategory.MOO
]
