"""Tests for density tokens and the observable preference stores."""

import pytest
from unittest.mock import MagicMock

from crm_shared import database
from crm_shared.density import (
    DENSITY_TOKENS,
    DensityMode,
    density_from_width,
    get_density_classes,
    get_density_css,
)
from crm_shared.preferences import (
    DensityPreferenceStore,
    MemoryStorage,
    ObservableValue,
    RedisStorage,
    ThemeMode,
    ThemePreferenceStore,
    ViewportStore,
)
from crm_shared.utils.errors import StoreUnavailable

KEY = "tally-density-preference"


@pytest.mark.parametrize(
    "width,expected",
    [
        (0, DensityMode.COMPACT),
        (1535, DensityMode.COMPACT),
        (1536, DensityMode.NORMAL),
        (2559, DensityMode.NORMAL),
        (2560, DensityMode.COMFORTABLE),
        (3840, DensityMode.COMFORTABLE),
    ],
)
def test_density_from_width_breakpoints(width, expected):
    assert density_from_width(width) == expected


def test_density_css_covers_every_token():
    for mode, tokens in DENSITY_TOKENS.items():
        css = get_density_css(mode)
        assert len(css) == sum(len(group) for group in tokens.values())
        assert all(name.startswith("--tally-") for name in css)
    assert get_density_css(DensityMode.COMPACT)["--tally-radius-lg"] == "8px"


def test_density_classes_lookup():
    classes = {DensityMode.COMFORTABLE: "p-6", DensityMode.NORMAL: "p-4", DensityMode.COMPACT: "p-2"}
    assert get_density_classes("compact", classes) == "p-2"


def test_observable_notifies_only_on_change():
    value = ObservableValue(1)
    calls = []
    value.subscribe(lambda: calls.append(value.get()))

    assert value.set(1) is False
    assert value.set(2) is True
    assert calls == [2]


def test_observable_lazy_hooks_and_idempotent_unsubscribe():
    events = []
    value = ObservableValue(
        0,
        on_first_subscribe=lambda: events.append("attach"),
        on_last_unsubscribe=lambda: events.append("detach"),
    )
    first = value.subscribe(lambda: None)
    second = value.subscribe(lambda: None)
    assert events == ["attach"]

    first()
    first()
    assert value.subscriber_count == 1
    second()
    assert events == ["attach", "detach"]


def test_viewport_store_resize():
    viewport = ViewportStore()
    assert viewport.width == 1920
    assert viewport.density == DensityMode.NORMAL

    calls = []
    viewport.subscribe(lambda: calls.append(viewport.width))
    assert viewport.resize(1024) is True
    assert viewport.density == DensityMode.COMPACT
    assert calls == [1024]

    with pytest.raises(ValueError):
        viewport.resize(-5)


def test_density_store_defaults_to_auto():
    store = DensityPreferenceStore(MemoryStorage())
    state = store.state(2600)
    assert state.density == DensityMode.COMFORTABLE
    assert state.is_auto_detect


def test_density_store_reads_stored_value_lazily():
    storage = MemoryStorage()
    storage.set_item(KEY, "compact")
    store = DensityPreferenceStore(storage)
    state = store.state(2600)
    assert state.density == DensityMode.COMPACT
    assert state.auto_detected == DensityMode.COMFORTABLE
    assert not state.is_auto_detect


def test_density_store_ignores_invalid_stored_value():
    storage = MemoryStorage()
    storage.set_item(KEY, "huge")
    store = DensityPreferenceStore(storage)
    assert store.override is None
    assert store.state(1920).density == DensityMode.NORMAL


def test_density_store_set_and_reset():
    storage = MemoryStorage()
    store = DensityPreferenceStore(storage)
    notified = []
    store.subscribe(lambda: notified.append(store.override))

    store.set_density(DensityMode.COMFORTABLE)
    assert storage.get_item(KEY) == "comfortable"
    assert store.state(800).density == DensityMode.COMFORTABLE

    store.reset_to_auto()
    assert storage.get_item(KEY) is None
    assert store.state(800).density == DensityMode.COMPACT
    assert notified == [DensityMode.COMFORTABLE, None]


def test_density_store_rejects_unknown_mode():
    store = DensityPreferenceStore(MemoryStorage())
    with pytest.raises(ValueError):
        store.set_density("spacious")


def test_redis_storage_uses_namespaced_keys():
    client = MagicMock()
    client.get.return_value = b"normal"
    storage = RedisStorage(client, namespace="crm")

    assert storage.get_item(KEY) == "normal"
    client.get.assert_called_once_with(f"crm:{KEY}")

    storage.set_item(KEY, "compact")
    client.set.assert_called_once_with(f"crm:{KEY}", "compact")

    storage.remove_item(KEY)
    client.delete.assert_called_once_with(f"crm:{KEY}")


def test_density_store_with_redis_storage():
    client = MagicMock()
    client.get.return_value = "comfortable"
    store = DensityPreferenceStore(RedisStorage(client))
    assert store.override == DensityMode.COMFORTABLE


@pytest.mark.parametrize("stored", [None, "", "sepia", "DARK"])
def test_theme_store_falls_back_to_system(stored):
    storage = MemoryStorage()
    if stored is not None:
        storage.set_item("theme-mode", stored)
    store = ThemePreferenceStore(storage)
    assert store.mode == ThemeMode.SYSTEM
    assert store.state().resolved == ThemeMode.LIGHT
    assert store.state(prefers_dark=True).resolved == ThemeMode.DARK


def test_theme_store_reads_stored_mode():
    storage = MemoryStorage()
    storage.set_item("theme-mode", "dark")
    state = ThemePreferenceStore(storage).state(prefers_dark=False)
    assert state.mode == ThemeMode.DARK
    assert state.resolved == ThemeMode.DARK


def test_theme_store_set_mode_persists_and_notifies():
    storage = MemoryStorage()
    store = ThemePreferenceStore(storage)
    notified = []
    store.subscribe(lambda: notified.append(store.mode))

    store.set_mode("light")
    store.set_mode(ThemeMode.LIGHT)
    assert storage.get_item("theme-mode") == "light"
    assert notified == [ThemeMode.LIGHT]

    with pytest.raises(ValueError):
        store.set_mode("sepia")


@pytest.mark.asyncio
async def test_get_db_without_engine_raises_store_unavailable():
    await database.dispose_engine()
    with pytest.raises(StoreUnavailable):
        async for _ in database.get_db():
            pass
