"""Liquid templates for each badge style.

Text coordinates are multiplied by ten and drawn under `scale(.1)` so that
sub-pixel positions survive integer formatting, as shields.io does.
"""

from liquid import BoundTemplate, Environment

from hitbadge.core.modules.badge.models import BadgeStyle

_HEADER = (
    '<svg xmlns="http://www.w3.org/2000/svg" xmlns:xlink="http://www.w3.org/1999/xlink"'
    ' width="{{ width }}" height="{{ height }}" role="img" aria-label="{{ title | escape }}">'
    "<title>{{ title | escape }}</title>"
)

_LOGO = (
    "{% if logo_href %}"
    '<image x="{{ logo_x }}" y="{{ logo_y }}" width="14" height="14" xlink:href="{{ logo_href | escape }}"/>'
    "{% endif %}"
)

_SHADOWED_TEXT = (
    "{% if has_label %}"
    '<text aria-hidden="true" x="{{ label_x }}" y="{{ shadow_y }}" fill="{{ label_shadow }}" fill-opacity=".3"'
    ' transform="scale(.1)" textLength="{{ label_length }}">{{ label | escape }}</text>'
    '<text x="{{ label_x }}" y="{{ text_y }}" transform="scale(.1)" fill="{{ label_text }}"'
    ' textLength="{{ label_length }}">{{ label | escape }}</text>'
    "{% endif %}"
    '<text aria-hidden="true" x="{{ message_x }}" y="{{ shadow_y }}" fill="{{ message_shadow }}" fill-opacity=".3"'
    ' transform="scale(.1)" textLength="{{ message_length }}">{{ message | escape }}</text>'
    '<text x="{{ message_x }}" y="{{ text_y }}" transform="scale(.1)" fill="{{ message_text }}"'
    ' textLength="{{ message_length }}">{{ message | escape }}</text>'
)

_FONT = 'font-family="Verdana,Geneva,DejaVu Sans,sans-serif" text-rendering="geometricPrecision"'

FLAT = (
    _HEADER
    + '<linearGradient id="s" x2="0" y2="100%"><stop offset="0" stop-color="#bbb" stop-opacity=".1"/>'
    '<stop offset="1" stop-opacity=".1"/></linearGradient>'
    '<clipPath id="r"><rect width="{{ width }}" height="{{ height }}" rx="3" fill="#fff"/></clipPath>'
    '<g clip-path="url(#r)"><rect width="{{ label_width }}" height="{{ height }}" fill="{{ label_color | escape }}"/>'
    '<rect x="{{ label_width }}" width="{{ message_width }}" height="{{ height }}" fill="{{ message_color | escape }}"/>'
    '<rect width="{{ width }}" height="{{ height }}" fill="url(#s)"/></g>'
    '<g fill="#fff" text-anchor="middle" ' + _FONT + ' font-size="110">'
    + _LOGO
    + _SHADOWED_TEXT
    + "</g></svg>"
)

FLAT_SQUARE = (
    _HEADER
    + '<g shape-rendering="crispEdges"><rect width="{{ label_width }}" height="{{ height }}"'
    ' fill="{{ label_color | escape }}"/>'
    '<rect x="{{ label_width }}" width="{{ message_width }}" height="{{ height }}" fill="{{ message_color | escape }}"/></g>'
    '<g fill="#fff" text-anchor="middle" ' + _FONT + ' font-size="110">'
    + _LOGO
    + "{% if has_label %}"
    '<text x="{{ label_x }}" y="{{ text_y }}" transform="scale(.1)" fill="{{ label_text }}"'
    ' textLength="{{ label_length }}">{{ label | escape }}</text>'
    "{% endif %}"
    '<text x="{{ message_x }}" y="{{ text_y }}" transform="scale(.1)" fill="{{ message_text }}"'
    ' textLength="{{ message_length }}">{{ message | escape }}</text>'
    "</g></svg>"
)

PLASTIC = (
    _HEADER
    + '<linearGradient id="s" x2="0" y2="100%"><stop offset="0" stop-color="#fff" stop-opacity=".7"/>'
    '<stop offset=".1" stop-color="#aaa" stop-opacity=".1"/><stop offset=".9" stop-color="#000" stop-opacity=".3"/>'
    '<stop offset="1" stop-color="#000" stop-opacity=".5"/></linearGradient>'
    '<clipPath id="r"><rect width="{{ width }}" height="{{ height }}" rx="4" fill="#fff"/></clipPath>'
    '<g clip-path="url(#r)"><rect width="{{ label_width }}" height="{{ height }}" fill="{{ label_color | escape }}"/>'
    '<rect x="{{ label_width }}" width="{{ message_width }}" height="{{ height }}" fill="{{ message_color | escape }}"/>'
    '<rect width="{{ width }}" height="{{ height }}" fill="url(#s)"/></g>'
    '<g fill="#fff" text-anchor="middle" ' + _FONT + ' font-size="110">'
    + _LOGO
    + _SHADOWED_TEXT
    + "</g></svg>"
)

FOR_THE_BADGE = (
    _HEADER
    + '<g shape-rendering="crispEdges"><rect width="{{ label_width }}" height="{{ height }}"'
    ' fill="{{ label_color | escape }}"/>'
    '<rect x="{{ label_width }}" width="{{ message_width }}" height="{{ height }}" fill="{{ message_color | escape }}"/></g>'
    '<g fill="#fff" text-anchor="middle" ' + _FONT + ' font-size="100">'
    + _LOGO
    + "{% if has_label %}"
    '<text transform="scale(.1)" x="{{ label_x }}" y="{{ text_y }}" textLength="{{ label_length }}"'
    ' fill="{{ label_text }}">{{ label | escape }}</text>'
    "{% endif %}"
    '<text transform="scale(.1)" x="{{ message_x }}" y="{{ text_y }}" textLength="{{ message_length }}"'
    ' fill="{{ message_text }}" font-weight="bold">{{ message | escape }}</text>'
    "</g></svg>"
)

SOCIAL = (
    _HEADER
    + '<style>a:hover #llink{fill:url(#b);stroke:#ccc}a:hover #rlink{fill:#4183c4}</style>'
    '<linearGradient id="a" x2="0" y2="100%"><stop offset="0" stop-color="#fcfcfc" stop-opacity="0"/>'
    '<stop offset="1" stop-opacity=".1"/></linearGradient>'
    '<linearGradient id="b" x2="0" y2="100%"><stop offset="0" stop-color="#ccc" stop-opacity=".1"/>'
    '<stop offset="1" stop-opacity=".1"/></linearGradient>'
    '<g stroke="#d5d5d5">'
    '<rect stroke="none" fill="{{ label_color | escape }}" x="0.5" y="0.5" width="{{ label_inner_width }}"'
    ' height="{{ inner_height }}" rx="2"/>'
    '<rect x="{{ bubble_x }}" y="0.5" width="{{ message_width }}" height="{{ inner_height }}" rx="2"'
    ' fill="{{ message_color | escape }}"/>'
    '<rect x="{{ arrow_x }}" y="7.5" width="0.5" height="5" stroke="{{ message_color | escape }}"/>'
    '<path d="M{{ bubble_x }} 6.5 l-3 3v1 l3 3" stroke="#d5d5d5" fill="{{ message_color | escape }}"/>'
    "</g>"
    + _LOGO
    + '<g aria-hidden="true" fill="#333" text-anchor="middle"'
    ' font-family="Helvetica Neue,Helvetica,Arial,sans-serif" text-rendering="geometricPrecision"'
    ' font-weight="700" font-size="110px" line-height="14px">'
    '<rect id="llink" stroke="#d5d5d5" fill="url(#a)" x=".5" y=".5" width="{{ label_inner_width }}"'
    ' height="{{ inner_height }}" rx="2"/>'
    "{% if has_label %}"
    '<text aria-hidden="true" x="{{ label_x }}" y="{{ shadow_y }}" fill="#fff" transform="scale(.1)"'
    ' textLength="{{ label_length }}">{{ label | escape }}</text>'
    '<text x="{{ label_x }}" y="{{ text_y }}" transform="scale(.1)" textLength="{{ label_length }}">'
    "{{ label | escape }}</text>"
    "{% endif %}"
    '<text aria-hidden="true" x="{{ message_x }}" y="{{ shadow_y }}" fill="#fff" transform="scale(.1)"'
    ' textLength="{{ message_length }}">{{ message | escape }}</text>'
    '<text id="rlink" x="{{ message_x }}" y="{{ text_y }}" transform="scale(.1)"'
    ' textLength="{{ message_length }}">{{ message | escape }}</text>'
    "</g></svg>"
)

_env = Environment()

TEMPLATES: dict[BadgeStyle, BoundTemplate] = {
    BadgeStyle.FLAT: _env.from_string(FLAT),
    BadgeStyle.FLAT_SQUARE: _env.from_string(FLAT_SQUARE),
    BadgeStyle.PLASTIC: _env.from_string(PLASTIC),
    BadgeStyle.FOR_THE_BADGE: _env.from_string(FOR_THE_BADGE),
    BadgeStyle.SOCIAL: _env.from_string(SOCIAL),
}
