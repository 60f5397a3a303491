"""Tests for density, viewport and theme preference endpoints."""

import inspect

from app.api.preferences import router


def test_density_auto_detected_from_default_viewport(unconfigured_client):
    state = unconfigured_client.get("/api/preferences/density").json()
    assert state["width"] == 1920
    assert state["density"] == "normal"
    assert state["autoDetected"] == "normal"
    assert state["isAutoDetect"] is True
    assert state["override"] is None
    assert state["css"]["--tally-spacing-md"] == "12px"


def test_density_for_explicit_width(unconfigured_client):
    state = unconfigured_client.get("/api/preferences/density", params={"width": 2560}).json()
    assert state["density"] == "comfortable"
    assert state["css"]["--tally-font-size-base"] == "16px"


def test_viewport_resize_changes_auto_density(unconfigured_client):
    state = unconfigured_client.put("/api/preferences/viewport", json={"width": 1280}).json()
    assert state["width"] == 1280
    assert state["density"] == "compact"

    assert unconfigured_client.get("/api/preferences/density").json()["density"] == "compact"


def test_viewport_rejects_negative_width(unconfigured_client):
    response = unconfigured_client.put("/api/preferences/viewport", json={"width": -1})
    assert response.status_code == 422


def test_pinned_density_overrides_width(unconfigured_client):
    state = unconfigured_client.put("/api/preferences/density", json={"mode": "comfortable"}).json()
    assert state["density"] == "comfortable"
    assert state["autoDetected"] == "normal"
    assert state["override"] == "comfortable"
    assert state["isAutoDetect"] is False

    state = unconfigured_client.put("/api/preferences/viewport", json={"width": 800}).json()
    assert state["density"] == "comfortable"
    assert state["autoDetected"] == "compact"


def test_reset_density_returns_to_auto(unconfigured_client):
    unconfigured_client.put("/api/preferences/density", json={"mode": "compact"})

    state = unconfigured_client.delete("/api/preferences/density").json()
    assert state["isAutoDetect"] is True
    assert state["density"] == "normal"


def test_set_density_rejects_unknown_mode(unconfigured_client):
    response = unconfigured_client.put("/api/preferences/density", json={"mode": "spacious"})
    assert response.status_code == 422


def test_theme_defaults_to_system(unconfigured_client):
    state = unconfigured_client.get("/api/preferences/theme").json()
    assert state == {"mode": "system", "resolved": "light"}

    dark = unconfigured_client.get("/api/preferences/theme", params={"prefersDark": "true"}).json()
    assert dark == {"mode": "system", "resolved": "dark"}


def test_set_theme_persists_mode(unconfigured_client):
    state = unconfigured_client.put("/api/preferences/theme", json={"mode": "dark"}).json()
    assert state == {"mode": "dark", "resolved": "dark"}

    state = unconfigured_client.get("/api/preferences/theme", params={"prefersDark": "false"}).json()
    assert state == {"mode": "dark", "resolved": "dark"}

    storage = unconfigured_client.app.state.theme_store.storage
    assert storage.get_item("theme-mode") == "dark"


def test_set_theme_rejects_unknown_mode(unconfigured_client):
    response = unconfigured_client.put("/api/preferences/theme", json={"mode": "sepia"})
    assert response.status_code == 422


def test_theme_and_density_share_storage(unconfigured_client):
    unconfigured_client.put("/api/preferences/theme", json={"mode": "light"})
    unconfigured_client.put("/api/preferences/density", json={"mode": "compact"})

    state = unconfigured_client.app.state
    assert state.theme_store.storage is state.density_store.storage
    assert state.density_store.storage.get_item("tally-density-preference") == "compact"


def test_preference_handlers_run_on_event_loop():
    for route in router.routes:
        assert inspect.iscoroutinefunction(route.endpoint), route.path
