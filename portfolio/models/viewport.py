from typing import Literal

from pydantic import BaseModel, Field

BreakpointClass = Literal[
    "mobile-small",
    "mobile-large",
    "tablet",
    "laptop",
    "laptop-large",
    "desktop",
]

# Smallest to largest.
BREAKPOINT_ORDER: tuple[BreakpointClass, ...] = (
    "mobile-small",
    "mobile-large",
    "tablet",
    "laptop",
    "laptop-large",
    "desktop",
)


class ViewportConfig(BaseModel):
    """Presentation parameters handed to the client-side 3D viewport."""

    model_config = {"frozen": True}

    field_of_view: int = Field(..., gt=0, lt=180, description="Camera field of view in degrees.")
    asset_url: str = "/plato.glb"
    decoder_path: str = "/draco-gltf/"
    tilt: float = Field(default=-0.05, description="Fixed rotation about the x axis (radians).")
    spin_step: float = Field(
        default=0.002, description="Rotation added about the y axis on every frame (radians)."
    )
