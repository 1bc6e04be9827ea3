"""Text measurement and colour helpers for badge layout."""

import math
import re
from urllib.parse import quote

# Verdana advance widths in font units (2048 per em) for printable ASCII, starting at the space character.
_VERDANA_WIDTHS = (
    720, 806, 940, 1676, 1302, 2204, 1488, 550, 902, 902, 1302, 1676, 720, 902, 720, 902,
    1302, 1302, 1302, 1302, 1302, 1302, 1302, 1302, 1302, 1302,
    902, 902, 1676, 1676, 1676, 1117, 2048,
    1401, 1405, 1430, 1577, 1294, 1178, 1587, 1540, 862, 918, 1424, 1142, 1726,
    1535, 1647, 1213, 1647, 1439, 1399, 1234, 1500, 1401, 2011, 1402, 1238, 1400,
    902, 902, 902, 1676, 1302, 1302,
    1255, 1292, 1100, 1292, 1227, 720, 1292, 1296, 562, 690, 1197, 562, 1992,
    1296, 1243, 1292, 1292, 874, 1064, 807, 1296, 1197, 1681, 1197, 1197, 1058,
    1300, 902, 1300, 1676,
)
CHAR_WIDTHS: dict[str, int] = {chr(32 + i): width for i, width in enumerate(_VERDANA_WIDTHS)}
FALLBACK_WIDTH = 1302
UNITS_PER_EM = 2048
BOLD_FACTOR = 1.1

DEFAULT_LABEL_COLOR = "#555"
DEFAULT_MESSAGE_COLOR = "#4c1"

NAMED_COLORS: dict[str, str] = {
    "brightgreen": "#4c1",
    "green": "#97ca00",
    "yellow": "#dfb317",
    "yellowgreen": "#a4a61d",
    "orange": "#fe7d37",
    "red": "#e05d44",
    "blue": "#007ec6",
    "grey": "#555",
    "gray": "#555",
    "lightgrey": "#9f9f9f",
    "lightgray": "#9f9f9f",
    "success": "#4c1",
    "important": "#fe7d37",
    "critical": "#e05d44",
    "informational": "#007ec6",
    "inactive": "#9f9f9f",
}

HEX_COLOR_RE = re.compile(r"^#?([0-9a-fA-F]{3}|[0-9a-fA-F]{4}|[0-9a-fA-F]{6}|[0-9a-fA-F]{8})$")


def text_width(text: str, font_size: int, bold: bool = False, letter_spacing: float = 0.0) -> int:
    """Return the rendered width of text in pixels, rounded up."""
    units = sum(CHAR_WIDTHS.get(char, FALLBACK_WIDTH) for char in text)
    width = units * font_size / UNITS_PER_EM
    if bold:
        width *= BOLD_FACTOR
    width += letter_spacing * len(text)
    return math.ceil(width)


def normalize_color(value: str | None, default: str) -> str:
    """Resolve a named or bare hex colour; anything else is returned unchanged.

    Examples:
        "red" -> "#e05d44", "ff0000" -> "#ff0000", "rgb(1,2,3)" -> "rgb(1,2,3)"
    """
    if not value:
        return default
    named = NAMED_COLORS.get(value.lower())
    if named is not None:
        return named
    match = HEX_COLOR_RE.match(value)
    if match:
        return f"#{match.group(1).lower()}"
    return value


def _brightness(color: str) -> float | None:
    match = HEX_COLOR_RE.match(color)
    if not match:
        return None
    digits = match.group(1)
    if len(digits) in (3, 4):
        digits = "".join(c * 2 for c in digits)
    red, green, blue = (int(digits[i : i + 2], 16) for i in (0, 2, 4))
    return (red * 299 + green * 587 + blue * 114) / 255000


def text_colors(background: str) -> tuple[str, str]:
    """Return (text, shadow) colours readable on the given background."""
    brightness = _brightness(background)
    if brightness is not None and brightness > 0.69:
        return "#333", "#ccc"
    return "#fff", "#010101"


def logo_href(logo: str, logo_color: str | None, base_url: str) -> str:
    """Resolve a logo parameter to an image href.

    Data URIs are used as given; anything else is treated as a Simple Icons
    slug below base_url, optionally tinted with logo_color.
    """
    if logo.startswith("data:"):
        return logo
    slug = logo.strip().lower().replace(" ", "")
    href = f"{base_url.rstrip('/')}/{quote(slug, safe='')}"
    if logo_color:
        color = normalize_color(logo_color, logo_color).lstrip("#")
        href = f"{href}/{quote(color, safe='')}"
    return href
