"""Request-scoped access to the stores owned by the application."""

from fastapi import Request

from crm_shared.preferences import DensityPreferenceStore, ThemePreferenceStore, ViewportStore


def get_viewport_store(request: Request) -> ViewportStore:
    return request.app.state.viewport_store


def get_density_store(request: Request) -> DensityPreferenceStore:
    return request.app.state.density_store


def get_theme_store(request: Request) -> ThemePreferenceStore:
    return request.app.state.theme_store
