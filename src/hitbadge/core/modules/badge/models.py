"""Badge styles and per-request rendering options."""

from collections.abc import Mapping
from enum import StrEnum
from typing import Self

from pydantic import BaseModel, ConfigDict

DEFAULT_LABEL = "visitors"


class BadgeStyle(StrEnum):
    """Visual layouts following the shields.io static badge styles."""

    FLAT = "flat"
    FLAT_SQUARE = "flat-square"
    PLASTIC = "plastic"
    FOR_THE_BADGE = "for-the-badge"
    SOCIAL = "social"

    @classmethod
    def parse(cls, value: str | None) -> "BadgeStyle":
        """Return the style named by value, falling back to FLAT for missing or unknown names."""
        if value is None:
            return cls.FLAT
        try:
            return cls(value)
        except ValueError:
            return cls.FLAT


class BadgeOptions(BaseModel):
    """Everything that shapes a badge except the message itself.

    Colour and logo values are kept as given; they are not validated.
    """

    model_config = ConfigDict(frozen=True)

    style: BadgeStyle = BadgeStyle.FLAT
    label: str = DEFAULT_LABEL
    logo: str | None = None
    logo_color: str | None = None
    label_color: str | None = None
    color: str | None = None

    @classmethod
    def from_query(cls, params: Mapping[str, str]) -> Self:
        """Build options from request query parameters.

        `color` takes precedence over its alias `messageColor`. Unknown
        parameters are ignored.
        """
        color = params.get("color")
        if color is None:
            color = params.get("messageColor")
        return cls(
            style=BadgeStyle.parse(params.get("style")),
            label=params.get("label", DEFAULT_LABEL),
            logo=params.get("logo"),
            logo_color=params.get("logoColor"),
            label_color=params.get("labelColor"),
            color=color,
        )
