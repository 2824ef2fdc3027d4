"""Global variables."""

import typing as t

OPENAPI_TAGS = [
    {
        "name": "Aid Requests",
        "description": (
            "Submit aid requests, look them up by NIC"
            " and confirm received quantities"
        ),
    },
    {
        "name": "Dashboard",
        "description": "Aggregated needs statistics for donors",
    },
    {
        "name": "Assistance",
        "description": "AI smart fill and keyword suggestions",
    },
    {
        "name": "Reference",
        "description": "Categories, units and the district/region table",
    },
    {
        "name": "Health",
        "description": "Application health check endpoints",
    },
]

UNITS: t.List[str] = [
    "units",
    "packs",
    "kg",
    "liters",
    "boxes",
    "pairs",
    "sets",
]
DEFAULT_UNIT: str = "units"

NIC_PATTERN: str = r"^([0-9]{9}[vVxX]|[0-9]{12})$"
PHONE_PATTERN: str = r"^[\d+\-\s]{9,}$"

# Dashboard ranking sizes
TOP_CATEGORIES: int = 5
TOP_LOCATIONS: int = 15
TOP_URGENT_REGIONS: int = 3
TOP_KEYWORDS: int = 20
