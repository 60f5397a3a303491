"""Density tokens, breakpoints and pure helpers.

A density mode is a UI scale preset. The effective mode comes from the
viewport width unless the user pinned one (see ``crm_shared.preferences``).
"""

from typing import Dict, Mapping, TypeVar
import enum

T = TypeVar("T")


class DensityMode(str, enum.Enum):
    COMFORTABLE = "comfortable"
    NORMAL = "normal"
    COMPACT = "compact"


# Minimum viewport width (px) for each mode, checked from largest to smallest.
DENSITY_BREAKPOINTS: Dict[DensityMode, int] = {
    DensityMode.COMFORTABLE: 2560,
    DensityMode.NORMAL: 1536,
    DensityMode.COMPACT: 0,
}

DENSITY_TOKENS: Dict[DensityMode, Dict[str, Dict[str, str]]] = {
    DensityMode.COMFORTABLE: {
        "spacing": {"xs": "4px", "sm": "8px", "md": "16px", "lg": "24px", "xl": "32px", "xxl": "48px"},
        "fontSize": {
            "xs": "12px", "sm": "14px", "base": "16px", "lg": "18px",
            "xl": "20px", "xxl": "24px", "3xl": "30px", "4xl": "36px",
        },
        "lineHeight": {"tight": "1.25", "normal": "1.5", "relaxed": "1.75"},
        "iconSize": {"sm": "16px", "md": "20px", "lg": "24px", "xl": "32px"},
        "borderRadius": {"sm": "4px", "md": "8px", "lg": "12px"},
    },
    DensityMode.NORMAL: {
        "spacing": {"xs": "3px", "sm": "6px", "md": "12px", "lg": "16px", "xl": "24px", "xxl": "32px"},
        "fontSize": {
            "xs": "11px", "sm": "13px", "base": "14px", "lg": "16px",
            "xl": "18px", "xxl": "20px", "3xl": "24px", "4xl": "30px",
        },
        "lineHeight": {"tight": "1.2", "normal": "1.4", "relaxed": "1.6"},
        "iconSize": {"sm": "14px", "md": "18px", "lg": "20px", "xl": "28px"},
        "borderRadius": {"sm": "3px", "md": "6px", "lg": "10px"},
    },
    DensityMode.COMPACT: {
        "spacing": {"xs": "2px", "sm": "4px", "md": "8px", "lg": "12px", "xl": "16px", "xxl": "24px"},
        "fontSize": {
            "xs": "10px", "sm": "12px", "base": "13px", "lg": "14px",
            "xl": "16px", "xxl": "18px", "3xl": "20px", "4xl": "24px",
        },
        "lineHeight": {"tight": "1.15", "normal": "1.35", "relaxed": "1.5"},
        "iconSize": {"sm": "12px", "md": "16px", "lg": "18px", "xl": "24px"},
        "borderRadius": {"sm": "2px", "md": "4px", "lg": "8px"},
    },
}

# token group -> CSS custom property stem
_CSS_PREFIXES = {
    "spacing": "--tally-spacing",
    "fontSize": "--tally-font-size",
    "lineHeight": "--tally-line-height",
    "iconSize": "--tally-icon-size",
    "borderRadius": "--tally-radius",
}


def density_from_width(width: int) -> DensityMode:
    """Determine density mode from a pixel width.

    >>> density_from_width(2600).value
    'comfortable'
    >>> density_from_width(1920).value
    'normal'
    >>> density_from_width(1400).value
    'compact'
    """
    if width >= DENSITY_BREAKPOINTS[DensityMode.COMFORTABLE]:
        return DensityMode.COMFORTABLE
    if width >= DENSITY_BREAKPOINTS[DensityMode.NORMAL]:
        return DensityMode.NORMAL
    return DensityMode.COMPACT


def get_density_classes(density: DensityMode, classes: Mapping[DensityMode, T]) -> T:
    """Pick a value from a per-density map."""
    return classes[DensityMode(density)]


def get_density_css(density: DensityMode) -> Dict[str, str]:
    """Flat map of ``--tally-*`` custom properties for ``density``."""
    tokens = DENSITY_TOKENS[DensityMode(density)]
    css: Dict[str, str] = {}
    for group, prefix in _CSS_PREFIXES.items():
        for name, value in tokens[group].items():
            css[f"{prefix}-{name}"] = value
    return css


__all__ = [
    "DensityMode",
    "DENSITY_BREAKPOINTS",
    "DENSITY_TOKENS",
    "density_from_width",
    "get_density_classes",
    "get_density_css",
]
