"""Tests for SVG badge rendering."""

import re
import xml.etree.ElementTree as ET

import pytest

from hitbadge.core.modules.badge.models import BadgeOptions, BadgeStyle
from hitbadge.core.modules.badge.renderer import STYLE_METRICS, render_badge

SVG_NS = "{http://www.w3.org/2000/svg}"


def visible_texts(svg: str) -> list[str]:
    """Return the text of <text> elements that are not hidden shadows."""
    root = ET.fromstring(svg)
    return [el.text or "" for el in root.iter(f"{SVG_NS}text") if el.get("aria-hidden") != "true"]


def rect_fills(svg: str) -> list[str]:
    root = ET.fromstring(svg)
    return [el.get("fill", "") for el in root.iter(f"{SVG_NS}rect")]


class TestRenderBadge:
    """Tests for render_badge."""

    def test_is_well_formed_svg(self):
        svg = render_badge("42", BadgeOptions())
        root = ET.fromstring(svg)

        assert root.tag == f"{SVG_NS}svg"
        assert root.get("aria-label") == "visitors: 42"

    def test_default_label_and_message(self):
        assert visible_texts(render_badge("42", BadgeOptions())) == ["visitors", "42"]

    def test_deterministic(self):
        """Test that identical arguments give byte-identical output."""
        options = BadgeOptions(style=BadgeStyle.FLAT, label="visitors")

        assert render_badge("42", options) == render_badge("42", options)

    def test_bogus_style_renders_as_flat(self):
        """Test that an unknown style renders exactly like flat."""
        bogus = BadgeOptions.from_query({"style": "bogus", "label": "hits"})
        flat = BadgeOptions.from_query({"style": "flat", "label": "hits"})

        assert render_badge("7", bogus) == render_badge("7", flat)

    def test_color_alias_gives_same_message_color(self):
        via_color = render_badge("3", BadgeOptions.from_query({"color": "red"}))
        via_alias = render_badge("3", BadgeOptions.from_query({"messageColor": "red"}))

        assert via_color == via_alias
        assert "#e05d44" in rect_fills(via_color)

    def test_color_wins_over_alias(self):
        both = render_badge("3", BadgeOptions.from_query({"color": "blue", "messageColor": "red"}))

        assert "#007ec6" in rect_fills(both)
        assert "#e05d44" not in rect_fills(both)

    def test_default_colors(self):
        fills = rect_fills(render_badge("1", BadgeOptions()))

        assert "#555" in fills
        assert "#4c1" in fills

    def test_label_color(self):
        assert "#97ca00" in rect_fills(render_badge("1", BadgeOptions(label_color="green")))

    def test_invalid_color_passes_through_escaped(self):
        """Test that garbage colours are not rejected but cannot break the markup."""
        svg = render_badge("1", BadgeOptions(color='"><script>'))

        ET.fromstring(svg)
        assert '"><script>' in rect_fills(svg)

    def test_label_is_escaped(self):
        svg = render_badge("1", BadgeOptions(label="<b>&co</b>"))

        assert visible_texts(svg) == ["<b>&co</b>", "1"]

    def test_wider_message_widens_badge(self):
        narrow = ET.fromstring(render_badge("1", BadgeOptions()))
        wide = ET.fromstring(render_badge("1000000", BadgeOptions()))

        assert int(wide.get("width")) > int(narrow.get("width"))

    def test_empty_label_renders_message_only(self):
        svg = render_badge("5", BadgeOptions(label=""))

        assert visible_texts(svg) == ["5"]
        assert ET.fromstring(svg).get("aria-label") == "5"

    @pytest.mark.parametrize("style", list(BadgeStyle))
    def test_every_style_renders(self, style):
        svg = render_badge("12", BadgeOptions(style=style))
        root = ET.fromstring(svg)

        assert int(root.get("height")) == STYLE_METRICS[style].height
        assert visible_texts(svg)[-1] == "12"

    def test_styles_differ(self):
        outputs = {render_badge("12", BadgeOptions(style=style)) for style in BadgeStyle}

        assert len(outputs) == len(BadgeStyle)

    def test_for_the_badge_uppercases(self):
        svg = render_badge("12", BadgeOptions(style=BadgeStyle.FOR_THE_BADGE, label="Visitors"))

        assert visible_texts(svg) == ["VISITORS", "12"]

    def test_named_logo(self):
        svg = render_badge("1", BadgeOptions(logo="github", logo_color="white"), "https://icons.test")

        assert 'xlink:href="https://icons.test/github/white"' in svg

    def test_logo_widens_label(self):
        plain = ET.fromstring(render_badge("1", BadgeOptions()))
        with_logo = ET.fromstring(render_badge("1", BadgeOptions(logo="github")))

        assert int(with_logo.get("width")) == int(plain.get("width")) + 17

    def test_no_logo_no_image(self):
        assert "<image" not in render_badge("1", BadgeOptions())

    def test_text_positions_are_integers(self):
        svg = render_badge("42", BadgeOptions())

        assert all(re.fullmatch(r"\d+", x) for x in re.findall(r'<text[^>]* x="([^"]+)"', svg))
