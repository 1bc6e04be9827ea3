from hitbadge.web.routers.counters import router as counters_router

__all__ = [
    "counters_router",
]
