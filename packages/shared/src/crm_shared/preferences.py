"""Observable preference stores.

Each store is an explicit object owned by whoever creates it (the backend
keeps one set per application on ``app.state``), so nothing is shared
between applications or test runs.
"""

from dataclasses import dataclass, field
from typing import Callable, Dict, Generic, List, Optional, Protocol, TypeVar
import enum
import logging

import redis

from crm_shared.density import DensityMode, density_from_width, get_density_css

logger = logging.getLogger(__name__)

T = TypeVar("T")
Listener = Callable[[], None]

DEFAULT_VIEWPORT_WIDTH = 1920


class ObservableValue(Generic[T]):
    """A value plus subscribers that are called synchronously on change.

    ``on_first_subscribe`` runs when the subscriber count goes from zero to
    one and ``on_last_unsubscribe`` when it drops back to zero, so an
    expensive upstream listener is only attached while someone is watching.
    """

    def __init__(
        self,
        initial: T,
        on_first_subscribe: Optional[Callable[[], None]] = None,
        on_last_unsubscribe: Optional[Callable[[], None]] = None,
    ):
        self._value = initial
        self._listeners: List[Listener] = []
        self._on_first_subscribe = on_first_subscribe
        self._on_last_unsubscribe = on_last_unsubscribe

    def get(self) -> T:
        return self._value

    def set(self, value: T) -> bool:
        """Store ``value``; returns True if subscribers were notified."""
        if value == self._value:
            return False
        self._value = value
        self._notify()
        return True

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        self._listeners.append(listener)
        if len(self._listeners) == 1 and self._on_first_subscribe is not None:
            self._on_first_subscribe()

        def unsubscribe():
            if listener not in self._listeners:
                return
            self._listeners.remove(listener)
            if not self._listeners and self._on_last_unsubscribe is not None:
                self._on_last_unsubscribe()

        return unsubscribe

    @property
    def subscriber_count(self) -> int:
        return len(self._listeners)

    def _notify(self):
        # copy, listeners may unsubscribe while being called
        for listener in list(self._listeners):
            listener()


class ViewportStore(ObservableValue[int]):
    """Last reported viewport width in pixels."""

    def __init__(self, width: int = DEFAULT_VIEWPORT_WIDTH, **hooks):
        super().__init__(width, **hooks)

    @property
    def width(self) -> int:
        return self.get()

    @property
    def density(self) -> DensityMode:
        return density_from_width(self.get())

    def resize(self, width: int) -> bool:
        if width < 0:
            raise ValueError("Viewport width must be non-negative")
        return self.set(width)


class PreferenceStorage(Protocol):
    """String key/value storage with browser local storage semantics."""

    def get_item(self, key: str) -> Optional[str]: ...

    def set_item(self, key: str, value: str) -> None: ...

    def remove_item(self, key: str) -> None: ...


class MemoryStorage:
    """Process-local storage."""

    def __init__(self):
        self._items: Dict[str, str] = {}

    def get_item(self, key: str) -> Optional[str]:
        return self._items.get(key)

    def set_item(self, key: str, value: str) -> None:
        self._items[key] = value

    def remove_item(self, key: str) -> None:
        self._items.pop(key, None)


class RedisStorage:
    """Storage backed by Redis string keys."""

    def __init__(self, client: redis.Redis, namespace: str = ""):
        self.client = client
        self.namespace = namespace

    def _key(self, key: str) -> str:
        return f"{self.namespace}:{key}" if self.namespace else key

    def get_item(self, key: str) -> Optional[str]:
        value = self.client.get(self._key(key))
        if isinstance(value, bytes):
            value = value.decode()
        return value

    def set_item(self, key: str, value: str) -> None:
        self.client.set(self._key(key), value)

    def remove_item(self, key: str) -> None:
        self.client.delete(self._key(key))


@dataclass
class DensityState:
    """Effective density for a viewport, with the override that produced it."""

    density: DensityMode
    auto_detected: DensityMode
    override: Optional[DensityMode]
    width: int
    css: Dict[str, str] = field(default_factory=dict)

    @property
    def is_auto_detect(self) -> bool:
        return self.override is None


class DensityPreferenceStore:
    """User-pinned density mode, persisted in ``storage``.

    The stored value is read lazily on first access; anything that is not a
    known mode is ignored.
    """

    def __init__(self, storage: PreferenceStorage, key: str = "tally-density-preference"):
        self.storage = storage
        self.key = key
        self._override: ObservableValue[Optional[DensityMode]] = ObservableValue(None)
        self._initialised = False

    def _init(self):
        if self._initialised:
            return
        self._initialised = True
        stored = self.storage.get_item(self.key)
        if stored is None:
            return
        try:
            self._override.set(DensityMode(stored))
        except ValueError:
            logger.warning(f"[preferences] Ignoring invalid stored density: {stored!r}")

    @property
    def override(self) -> Optional[DensityMode]:
        self._init()
        return self._override.get()

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        self._init()
        return self._override.subscribe(listener)

    def set_density(self, mode: DensityMode):
        """Pin ``mode`` for every consumer of this store."""
        self._init()
        mode = DensityMode(mode)
        self.storage.set_item(self.key, mode.value)
        self._override.set(mode)
        logger.info(f"[preferences] Density pinned to {mode.value}")

    def reset_to_auto(self):
        """Clear the pinned mode and go back to width-based detection."""
        self._init()
        self.storage.remove_item(self.key)
        self._override.set(None)
        logger.info("[preferences] Density reset to auto-detect")

    def state(self, width: int) -> DensityState:
        auto_detected = density_from_width(width)
        override = self.override
        density = override if override is not None else auto_detected
        return DensityState(
            density=density,
            auto_detected=auto_detected,
            override=override,
            width=width,
            css=get_density_css(density),
        )


class ThemeMode(str, enum.Enum):
    SYSTEM = "system"
    LIGHT = "light"
    DARK = "dark"


@dataclass
class ThemeState:
    mode: ThemeMode
    resolved: ThemeMode


class ThemePreferenceStore:
    """Colour theme chosen by the user, persisted in ``storage``.

    A missing or unrecognised stored value reads as ``system``.
    """

    def __init__(self, storage: PreferenceStorage, key: str = "theme-mode"):
        self.storage = storage
        self.key = key
        self._mode: ObservableValue[ThemeMode] = ObservableValue(ThemeMode.SYSTEM)
        self._initialised = False

    def _init(self):
        if self._initialised:
            return
        self._initialised = True
        stored = self.storage.get_item(self.key)
        if stored is None:
            return
        try:
            self._mode.set(ThemeMode(stored))
        except ValueError:
            logger.warning(f"[preferences] Ignoring invalid stored theme: {stored!r}")

    @property
    def mode(self) -> ThemeMode:
        self._init()
        return self._mode.get()

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        self._init()
        return self._mode.subscribe(listener)

    def set_mode(self, mode: ThemeMode):
        self._init()
        mode = ThemeMode(mode)
        self.storage.set_item(self.key, mode.value)
        self._mode.set(mode)
        logger.info(f"[preferences] Theme set to {mode.value}")

    def state(self, prefers_dark: bool = False) -> ThemeState:
        """Stored mode plus the theme it resolves to for the client."""
        mode = self.mode
        if mode is ThemeMode.SYSTEM:
            resolved = ThemeMode.DARK if prefers_dark else ThemeMode.LIGHT
        else:
            resolved = mode
        return ThemeState(mode=mode, resolved=resolved)


__all__ = [
    "ObservableValue",
    "ThemeMode",
    "ThemeState",
    "ThemePreferenceStore",
    "ViewportStore",
    "PreferenceStorage",
    "MemoryStorage",
    "RedisStorage",
    "DensityState",
    "DensityPreferenceStore",
    "DEFAULT_VIEWPORT_WIDTH",
]
