from app.schemas.case import (
    CaseCreate,
    CaseResponse,
    CaseSummary,
    CaseUpdate,
)
from app.schemas.preferences import (
    DensityStateResponse,
    DensityUpdate,
    ThemeStateResponse,
    ThemeUpdate,
    ViewportUpdate,
)

__all__ = [
    "CaseCreate",
    "CaseResponse",
    "CaseSummary",
    "CaseUpdate",
    "DensityStateResponse",
    "DensityUpdate",
    "ThemeStateResponse",
    "ThemeUpdate",
    "ViewportUpdate",
]
