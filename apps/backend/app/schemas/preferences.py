from pydantic import Field
from typing import Dict, Optional

from crm_shared.density import DensityMode
from crm_shared.preferences import DensityState, ThemeMode, ThemeState
from crm_shared.schemas import CamelModel


class DensityUpdate(CamelModel):
    mode: DensityMode


class ViewportUpdate(CamelModel):
    width: int = Field(ge=0)


class DensityStateResponse(CamelModel):
    density: DensityMode
    auto_detected: DensityMode
    is_auto_detect: bool
    override: Optional[DensityMode] = None
    width: int
    css: Dict[str, str]

    @classmethod
    def from_state(cls, state: DensityState) -> "DensityStateResponse":
        return cls(
            density=state.density,
            auto_detected=state.auto_detected,
            is_auto_detect=state.is_auto_detect,
            override=state.override,
            width=state.width,
            css=state.css,
        )


class ThemeUpdate(CamelModel):
    mode: ThemeMode


class ThemeStateResponse(CamelModel):
    mode: ThemeMode
    resolved: ThemeMode

    @classmethod
    def from_state(cls, state: ThemeState) -> "ThemeStateResponse":
        return cls(mode=state.mode, resolved=state.resolved)
