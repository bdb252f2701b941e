"""Viewport width → breakpoint class.

Breakpoint classes
------------------
``"mobile-small"``  width ≤ 375
``"mobile-large"``  width ≤ 425
``"tablet"``        width ≤ 768
``"laptop"``        width ≤ 1024
``"laptop-large"``  width ≤ 1440
``"desktop"``       anything wider

The width is always passed in by the caller (query parameter, client hint
or CLI argument), so :func:`resolve` stays a pure function.
"""

from typing import Dict, Optional, Tuple

from portfolio.models.viewport import BreakpointClass

# Inclusive upper bounds, ascending; the first bound that fits wins.
BREAKPOINT_LIMITS: Tuple[Tuple[int, BreakpointClass], ...] = (
    (375, "mobile-small"),
    (425, "mobile-large"),
    (768, "tablet"),
    (1024, "laptop"),
    (1440, "laptop-large"),
)


def resolve(width: int) -> BreakpointClass:
    """Return the breakpoint class for a viewport *width* in CSS pixels."""
    for upper, name in BREAKPOINT_LIMITS:
        if width <= upper:
            return name
    return "desktop"


def parse_width(raw: Optional[str]) -> Optional[int]:
    """Parse a ``Sec-CH-Viewport-Width`` header value; *None* when unusable."""
    if not raw:
        return None
    try:
        width = int(float(raw.strip()))
    except (ValueError, OverflowError):
        return None
    return width if width >= 0 else None


def upper_bounds() -> Dict[BreakpointClass, Optional[int]]:
    """Inclusive upper width per class, smallest first; *None* for the open-ended last class."""
    bounds: Dict[BreakpointClass, Optional[int]] = {name: upper for upper, name in BREAKPOINT_LIMITS}
    bounds["desktop"] = None
    return bounds
