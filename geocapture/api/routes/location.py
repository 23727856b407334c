from fastapi import APIRouter, Depends, Header, Request
from loguru import logger
from pydantic import ValidationError

from geocapture.core.db import LocationStore, get_store
from geocapture.core.errors import BODY_MESSAGE, InternalError, InvalidArgument, validation_message
from geocapture.schemas.location import ErrorResponse, LocationCreateRequest, LocationCreateResponse

router = APIRouter()


# The body is parsed as JSON whatever Content-Type the client declared
# (navigator.sendBeacon, for one, posts strings as text/plain).
async def read_location_payload(request: Request) -> LocationCreateRequest:
    try:
        body = await request.json()
    except ValueError:
        logger.warning(f"Rejected {request.method} {request.url.path}: {BODY_MESSAGE}")
        raise InvalidArgument(BODY_MESSAGE)

    try:
        return LocationCreateRequest.model_validate(body)
    except ValidationError as exc:
        message = validation_message(exc.errors())
        logger.warning(f"Rejected {request.method} {request.url.path}: {message}")
        raise InvalidArgument(message)


@router.post(
    "/location",
    response_model=LocationCreateResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
    openapi_extra={
        "requestBody": {
            "required": True,
            "content": {"application/json": {"schema": LocationCreateRequest.model_json_schema()}},
        }
    },
)
def create_location(
    payload: LocationCreateRequest = Depends(read_location_payload),
    user_agent: str | None = Header(default=None),
    store: LocationStore = Depends(get_store),
):
    try:
        location = store.create_location(
            lat=payload.lat,
            lng=payload.lng,
            accuracy=payload.accuracy,
            user_agent=user_agent,
        )
    except Exception as exc:
        logger.opt(exception=exc).error("Error saving location")
        raise InternalError()

    logger.info(
        f"Saved location id={location.id} lat={location.lat} lng={location.lng} "
        f"accuracy={location.accuracy}"
    )
    return {"success": True, "id": location.id}
