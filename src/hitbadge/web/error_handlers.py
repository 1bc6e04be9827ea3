import structlog
from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import PlainTextResponse, Response

from hitbadge.errors import NotFoundError

logger = structlog.get_logger(__name__)


async def user_error_handler(_: Request, exc: Exception) -> Response:
    """Handle all UserError subclasses with appropriate status codes."""
    status_code = 404 if isinstance(exc, NotFoundError) else 400

    return PlainTextResponse(str(exc), status_code=status_code)


async def request_validation_handler(_: Request, exc: Exception) -> Response:
    """Reject malformed paths, such as ids that are not UUIDs, before they reach the app."""
    errors = exc.errors() if isinstance(exc, RequestValidationError) else []
    details = "; ".join(str(error.get("msg", "")) for error in errors) or str(exc)
    return PlainTextResponse(f"Invalid URL: {details}", status_code=400)


async def storage_error_handler(_: Request, exc: Exception) -> Response:
    """Report database failures as 500 with the driver's message."""
    logger.error("storage_unavailable", error=str(exc))
    return PlainTextResponse(str(exc), status_code=500)


async def general_exception_handler(_: Request, exc: Exception) -> Response:
    """Handle unexpected errors (500)."""
    logger.exception("unexpected_error", error=str(exc))
    return PlainTextResponse("An unexpected error occurred.", status_code=500)
