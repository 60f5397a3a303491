from fastapi import APIRouter, Depends, Query
from typing import Optional
import logging

from app.api.deps import get_density_store, get_theme_store, get_viewport_store
from app.schemas.preferences import (
    DensityStateResponse,
    DensityUpdate,
    ThemeStateResponse,
    ThemeUpdate,
    ViewportUpdate,
)
from crm_shared.preferences import DensityPreferenceStore, ThemePreferenceStore, ViewportStore

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/preferences", tags=["preferences"])

# Handlers are coroutines: the stores are not thread-safe and must only be
# touched from the event loop.


@router.get("/density", response_model=DensityStateResponse)
async def get_density(
    width: Optional[int] = Query(None, ge=0),
    density_store: DensityPreferenceStore = Depends(get_density_store),
    viewport_store: ViewportStore = Depends(get_viewport_store),
):
    """Effective density for ``width`` (defaults to the last reported viewport)"""
    width = viewport_store.width if width is None else width
    return DensityStateResponse.from_state(density_store.state(width))


@router.put("/density", response_model=DensityStateResponse)
async def set_density(
    density_update: DensityUpdate,
    density_store: DensityPreferenceStore = Depends(get_density_store),
    viewport_store: ViewportStore = Depends(get_viewport_store),
):
    """Pin a density mode"""
    density_store.set_density(density_update.mode)
    return DensityStateResponse.from_state(density_store.state(viewport_store.width))


@router.delete("/density", response_model=DensityStateResponse)
async def reset_density(
    density_store: DensityPreferenceStore = Depends(get_density_store),
    viewport_store: ViewportStore = Depends(get_viewport_store),
):
    """Return to width-based density detection"""
    density_store.reset_to_auto()
    return DensityStateResponse.from_state(density_store.state(viewport_store.width))


@router.put("/viewport", response_model=DensityStateResponse)
async def report_viewport(
    viewport_update: ViewportUpdate,
    density_store: DensityPreferenceStore = Depends(get_density_store),
    viewport_store: ViewportStore = Depends(get_viewport_store),
):
    """Record the client's viewport width"""
    if viewport_store.resize(viewport_update.width):
        logger.debug(f"[preferences] Viewport resized to {viewport_update.width}px")
    return DensityStateResponse.from_state(density_store.state(viewport_store.width))


@router.get("/theme", response_model=ThemeStateResponse)
async def get_theme(
    prefers_dark: bool = Query(False, alias="prefersDark"),
    theme_store: ThemePreferenceStore = Depends(get_theme_store),
):
    """Stored theme mode and what it resolves to for this client"""
    return ThemeStateResponse.from_state(theme_store.state(prefers_dark))


@router.put("/theme", response_model=ThemeStateResponse)
async def set_theme(
    theme_update: ThemeUpdate,
    prefers_dark: bool = Query(False, alias="prefersDark"),
    theme_store: ThemePreferenceStore = Depends(get_theme_store),
):
    theme_store.set_mode(theme_update.mode)
    return ThemeStateResponse.from_state(theme_store.state(prefers_dark))
