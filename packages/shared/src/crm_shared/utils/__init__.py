from .errors import (
    CrmError,
    StoreUnavailable,
    NotFound,
    CaseNotFound,
    DuplicateCaseNumber,
    CaseStoreError,
)
from .logging import setup_logging, JSONFormatter
from .redis import get_redis_client, close_redis

__all__ = [
    "CrmError",
    "StoreUnavailable",
    "NotFound",
    "CaseNotFound",
    "DuplicateCaseNumber",
    "CaseStoreError",
    "setup_logging",
    "JSONFormatter",
    "get_redis_client",
    "close_redis",
]
