"""Decorative 3D viewport selection per breakpoint class."""

from typing import Dict, Optional

from portfolio.models.viewport import BREAKPOINT_ORDER, BreakpointClass, ViewportConfig

# Field of view per breakpoint.  Missing classes render no model: the
# smallest phones have no room for it and wide desktops were never given one.
FIELD_OF_VIEW: Dict[BreakpointClass, int] = {
    "mobile-large": 55,
    "tablet": 35,
    "laptop": 35,
    "laptop-large": 30,
}


def select_viewport_config(
    breakpoint: BreakpointClass, asset_url: Optional[str] = None
) -> Optional[ViewportConfig]:
    """Return the viewport config for *breakpoint*, or *None* to render nothing."""
    fov = FIELD_OF_VIEW.get(breakpoint)
    if fov is None:
        return None
    if asset_url:
        return ViewportConfig(field_of_view=fov, asset_url=asset_url)
    return ViewportConfig(field_of_view=fov)


def viewport_table(asset_url: Optional[str] = None) -> Dict[str, Optional[ViewportConfig]]:
    """Config for every breakpoint class, smallest first."""
    return {name: select_viewport_config(name, asset_url) for name in BREAKPOINT_ORDER}
