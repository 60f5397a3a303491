from .base import Base, TimestampMixin
from .case import Case

__all__ = [
    "Base",
    "TimestampMixin",
    "Case",
]
