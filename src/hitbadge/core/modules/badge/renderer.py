"""SVG badge rendering in the shields.io static badge conventions."""

from dataclasses import dataclass
from typing import Any

from hitbadge.core.modules.badge.models import BadgeOptions, BadgeStyle
from hitbadge.core.modules.badge.templates import TEMPLATES
from hitbadge.core.modules.badge.utils import (
    DEFAULT_LABEL_COLOR,
    DEFAULT_MESSAGE_COLOR,
    logo_href,
    normalize_color,
    text_colors,
    text_width,
)

DEFAULT_LOGO_BASE_URL = "https://cdn.simpleicons.org"
LOGO_SIZE = 14
LOGO_GAP = 3
SOCIAL_ARROW_GAP = 6


@dataclass(frozen=True)
class StyleMetrics:
    height: int
    font_size: int
    padding: int
    text_y: int  # baseline, in tenths of a pixel
    shadow_y: int
    bold: bool = False
    uppercase: bool = False
    letter_spacing: float = 0.0


STYLE_METRICS: dict[BadgeStyle, StyleMetrics] = {
    BadgeStyle.FLAT: StyleMetrics(height=20, font_size=11, padding=5, text_y=140, shadow_y=150),
    BadgeStyle.FLAT_SQUARE: StyleMetrics(height=20, font_size=11, padding=5, text_y=140, shadow_y=150),
    BadgeStyle.PLASTIC: StyleMetrics(height=18, font_size=11, padding=5, text_y=130, shadow_y=140),
    BadgeStyle.FOR_THE_BADGE: StyleMetrics(
        height=28, font_size=10, padding=9, text_y=175, shadow_y=175, bold=True, uppercase=True, letter_spacing=1.25
    ),
    BadgeStyle.SOCIAL: StyleMetrics(height=20, font_size=11, padding=6, text_y=140, shadow_y=150, bold=True),
}

# Social badges keep GitHub's light button look unless colours are requested
SOCIAL_LABEL_COLOR = "#fcfcfc"
SOCIAL_MESSAGE_COLOR = "#fafafa"


def render_badge(message: str, options: BadgeOptions, logo_base_url: str = DEFAULT_LOGO_BASE_URL) -> str:
    """Render a badge as an SVG document.

    Pure and deterministic: equal arguments always give byte-identical output.
    Colour and logo values are not validated, only XML-escaped.

    Args:
        message: Right-hand text, e.g. the current visitor count
        options: Style, label and colour overrides
        logo_base_url: Where named logos are resolved

    Returns:
        Complete SVG document
    """
    context = _layout(message, options, logo_base_url)
    return TEMPLATES[options.style].render(**context)


def _layout(message: str, options: BadgeOptions, logo_base_url: str) -> dict[str, Any]:
    metrics = STYLE_METRICS[options.style]
    label = options.label
    if metrics.uppercase:
        label = label.upper()
        message = message.upper()

    has_label = bool(label)
    has_logo = bool(options.logo)
    pad = metrics.padding

    def measure(text: str) -> int:
        return text_width(text, metrics.font_size, bold=metrics.bold, letter_spacing=metrics.letter_spacing)

    label_text_width = measure(label) if has_label else 0
    message_text_width = measure(message)

    logo_width = LOGO_SIZE if has_logo else 0
    logo_gap = LOGO_GAP if has_logo and has_label else 0
    if has_label or has_logo:
        label_width = pad + logo_width + logo_gap + label_text_width + pad
    else:
        label_width = 0
    message_width = pad + message_text_width + pad

    message_offset = label_width
    if options.style == BadgeStyle.SOCIAL:
        message_offset += SOCIAL_ARROW_GAP
    width = message_offset + message_width

    if options.style == BadgeStyle.SOCIAL:
        label_color = normalize_color(options.label_color, SOCIAL_LABEL_COLOR)
        message_color = normalize_color(options.color, SOCIAL_MESSAGE_COLOR)
    else:
        label_color = normalize_color(options.label_color, DEFAULT_LABEL_COLOR)
        message_color = normalize_color(options.color, DEFAULT_MESSAGE_COLOR)
    label_text, label_shadow = text_colors(label_color)
    message_text, message_shadow = text_colors(message_color)

    label_center = pad + logo_width + logo_gap + label_text_width / 2
    message_center = message_offset + message_width / 2

    return {
        "title": f"{label}: {message}" if has_label else message,
        "width": width,
        "height": metrics.height,
        "inner_height": metrics.height - 1,
        "has_label": has_label,
        "label": label,
        "message": message,
        "label_width": label_width,
        "label_inner_width": max(label_width - 1, 0),
        "message_width": message_width,
        "bubble_x": message_offset + 0.5,
        "arrow_x": message_offset,
        "label_color": label_color,
        "message_color": message_color,
        "label_text": label_text,
        "label_shadow": label_shadow,
        "message_text": message_text,
        "message_shadow": message_shadow,
        "label_x": round(label_center * 10),
        "message_x": round(message_center * 10),
        "label_length": label_text_width * 10,
        "message_length": message_text_width * 10,
        "text_y": metrics.text_y,
        "shadow_y": metrics.shadow_y,
        "logo_href": logo_href(options.logo, options.logo_color, logo_base_url) if options.logo else None,
        "logo_x": pad,
        "logo_y": (metrics.height - LOGO_SIZE) // 2,
    }
