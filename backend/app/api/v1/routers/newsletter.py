# backend/app/api/v1/routers/newsletter.py
"""
Newsletter subscription endpoint.

Endpoints:
    POST /newsletter - Subscribe an email address
        200 {"message": "Subscription successful"}
        409 {"message": "Email already subscribed"}
        422 missing or malformed email (nothing is stored)
        500 {"message": "Failed to subscribe"}

The address may be sent as a JSON body, a form field or a query parameter.
"""

import logging
from typing import Any, Dict

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from ....core.errors import ConflictError, StorageError
from ....models.content_models import MessageResponse, SubscriptionRequest
from ....services.database_service import database_service
from ....services.newsletter_service import newsletter_service

router = APIRouter(tags=["Newsletter"])

logger = logging.getLogger("zaryab.api.newsletter")


async def _submitted_fields(request: Request) -> Dict[str, Any]:
    """Collect submitted parameters: query string, then form or JSON body."""
    fields: Dict[str, Any] = dict(request.query_params)
    content_type = request.headers.get("content-type", "")
    if content_type.startswith("application/json"):
        try:
            body = await request.json()
        except ValueError:
            body = None
        if isinstance(body, dict):
            fields.update(body)
    elif content_type.startswith(("application/x-www-form-urlencoded", "multipart/form-data")):
        form = await request.form()
        fields.update({key: value for key, value in form.items() if isinstance(value, str)})
    return fields


@router.post(
    "/newsletter",
    response_model=MessageResponse,
    responses={409: {"model": MessageResponse}, 500: {"model": MessageResponse}},
)
async def subscribe(request: Request):
    """Subscribe to the newsletter."""
    # Raises a ValidationError (rendered as 422) before touching the database
    payload = SubscriptionRequest.model_validate(await _submitted_fields(request))

    try:
        async with database_service.get_session() as session:
            await newsletter_service.subscribe(session, payload.email)
    except (ConflictError, StorageError) as e:
        return JSONResponse(status_code=e.status_code, content={"message": e.message})
    except SQLAlchemyError:
        logger.exception("Newsletter subscription could not be committed")
        return JSONResponse(status_code=500, content={"message": newsletter_service.FAILURE_MESSAGE})

    return MessageResponse(message=newsletter_service.SUCCESS_MESSAGE)
