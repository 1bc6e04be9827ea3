from uuid import UUID

from fastapi import APIRouter, Request
from fastapi.responses import PlainTextResponse, Response

from hitbadge.web.deps import AppDep

router = APIRouter(tags=["counters"])

SVG_MEDIA_TYPE = "image/svg+xml"


@router.get(
    "/",
    summary="Create counter",
    description="Allocate a new visitor counter and return instructions for embedding its badge.",
    operation_id="createCounter",
    response_class=PlainTextResponse,
    responses={
        200: {"description": "Onboarding message containing the new counter id"},
        500: {"description": "Database unavailable"},
    },
)
async def create_counter(app: AppDep) -> PlainTextResponse:
    return PlainTextResponse(await app.welcome())


@router.get(
    "/{counter_id}",
    summary="Count a visit",
    description=(
        "Increment the counter and return its new value as an SVG badge. "
        "Supports the style, label, logo, logoColor, labelColor and color (alias messageColor) query parameters."
    ),
    operation_id="hitCounter",
    response_class=Response,
    responses={
        200: {"content": {SVG_MEDIA_TYPE: {}}, "description": "Badge showing the new count"},
        400: {"description": "Counter id is not a UUID"},
        404: {"description": "UUID not found"},
        500: {"description": "Database unavailable"},
    },
)
async def hit_counter(counter_id: UUID, request: Request, app: AppDep) -> Response:
    svg = await app.hit_badge(counter_id, request.query_params)
    return Response(content=svg, media_type=SVG_MEDIA_TYPE, headers={"Cache-Control": "no-cache"})
