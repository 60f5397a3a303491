"""Tally CRM shared package - models, schemas, mapping and preferences."""

from .models import Base, Case
from .utils import (
    setup_logging,
    CrmError,
    StoreUnavailable,
    NotFound,
    CaseNotFound,
    DuplicateCaseNumber,
    CaseStoreError,
    get_redis_client,
    close_redis,
)
from .mapping import (
    encode_json_array,
    decode_json_array,
    case_item_to_row,
    case_update_to_row,
    case_row_to_item,
)
from .density import DensityMode, density_from_width, get_density_css
from .preferences import (
    ObservableValue,
    ViewportStore,
    MemoryStorage,
    RedisStorage,
    DensityPreferenceStore,
    ThemeMode,
    ThemePreferenceStore,
)
from .config import Settings, settings

__version__ = "0.1.0"
__all__ = [
    "Base",
    "Case",
    "setup_logging",
    "CrmError",
    "StoreUnavailable",
    "NotFound",
    "CaseNotFound",
    "DuplicateCaseNumber",
    "CaseStoreError",
    "get_redis_client",
    "close_redis",
    "encode_json_array",
    "decode_json_array",
    "case_item_to_row",
    "case_update_to_row",
    "case_row_to_item",
    "DensityMode",
    "density_from_width",
    "get_density_css",
    "ObservableValue",
    "ViewportStore",
    "MemoryStorage",
    "RedisStorage",
    "DensityPreferenceStore",
    "ThemeMode",
    "ThemePreferenceStore",
    "Settings",
    "settings",
]
