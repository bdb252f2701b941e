"""Tests for portfolio.services.viewport."""

import pytest

from portfolio.models.viewport import BREAKPOINT_ORDER
from portfolio.services.viewport import select_viewport_config, viewport_table


class TestSelectViewportConfig:
    def test_mobile_small_renders_nothing(self):
        assert select_viewport_config("mobile-small") is None

    def test_desktop_renders_nothing(self):
        assert select_viewport_config("desktop") is None

    @pytest.mark.parametrize(
        "breakpoint, fov",
        [("mobile-large", 55), ("tablet", 35), ("laptop", 35), ("laptop-large", 30)],
    )
    def test_field_of_view(self, breakpoint, fov):
        assert select_viewport_config(breakpoint).field_of_view == fov

    def test_model_presentation_defaults(self):
        config = select_viewport_config("tablet")
        assert config.asset_url == "/plato.glb"
        assert config.decoder_path == "/draco-gltf/"
        assert config.tilt == pytest.approx(-0.05)
        assert config.spin_step == pytest.approx(0.002)

    def test_custom_asset_url(self):
        assert select_viewport_config("laptop", "/bust.glb").asset_url == "/bust.glb"


class TestViewportTable:
    def test_covers_every_breakpoint_in_order(self):
        assert list(viewport_table()) == list(BREAKPOINT_ORDER)

    def test_matches_selector(self):
        table = viewport_table()
        for name in BREAKPOINT_ORDER:
            assert table[name] == select_viewport_config(name)
