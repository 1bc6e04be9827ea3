from collections.abc import AsyncGenerator, Mapping
from contextlib import asynccontextmanager
from uuid import UUID

from hitbadge.config import Config
from hitbadge.core.core import Core
from hitbadge.core.modules.badge.models import BadgeOptions
from hitbadge.core.modules.badge.renderer import render_badge
from hitbadge.errors import NotFoundError

WELCOME_MESSAGE = """Welcome! This is a simple API for generating visitor count badges in the shields.io style.

Your new unique ID is: {counter_id}
To begin tracking, visit: /{counter_id}

You can customize the badge appearance with these query parameters of shields.io static badges:
https://shields.io/badges/static-badge

  style       flat (default), flat-square, plastic, for-the-badge, social
  label       left-hand text, "visitors" by default
  logo        Simple Icons slug or data: URI
  logoColor   colour of a named logo
  labelColor  left-hand background colour
  color       right-hand background colour (alias: messageColor)

Note: Only query parameters are supported.
      `logoSize`, `cacheSeconds`, and `link` are not supported."""


class App:
    """Facade for all application operations used by the web layer."""

    def __init__(self, config: Config) -> None:
        self._core = Core(config)

    @asynccontextmanager
    async def lifespan(self) -> AsyncGenerator[None]:
        """Application lifespan management - delegates to Core."""
        async with self._core.lifespan():
            yield

    async def create_counter(self) -> UUID:
        """Allocate a new counter starting at zero."""
        return await self._core.services.counter.create_counter()

    async def welcome(self) -> str:
        """Create a counter and return the onboarding text that announces it."""
        counter_id = await self.create_counter()
        return WELCOME_MESSAGE.format(counter_id=counter_id)

    async def hit(self, counter_id: UUID) -> int:
        """Count one visit. Raises NotFoundError for unknown ids."""
        count = await self._core.services.counter.increment_and_get(counter_id)
        if count is None:
            raise NotFoundError("UUID not found")
        return count

    async def hit_badge(self, counter_id: UUID, params: Mapping[str, str]) -> str:
        """Count one visit and render the new count as an SVG badge."""
        count = await self.hit(counter_id)
        return render_badge(str(count), BadgeOptions.from_query(params), self._core.config.logo_base_url)
