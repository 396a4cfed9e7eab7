# app/routers/contacts.py
import json
from typing import Any, Dict, List

from fastapi import APIRouter, Depends, Request
from starlette.exceptions import HTTPException
from pydantic import ValidationError

from app.core.exceptions import ContactValidationError
from app.schemas.contacts import ContactCreate, ContactResponse, ErrorResponse, MessageResponse
from app.utils.contact_service import ContactService, get_contact_service

router = APIRouter()

REQUIRED_FIELDS_MESSAGE = "All fields (name, email, and message) are required."
SAVED_MESSAGE = "Your message has been received and saved to the database!"

FORM_CONTENT_TYPES = ("application/x-www-form-urlencoded", "multipart/form-data")


async def read_contact_payload(request: Request) -> Dict[str, Any]:
    """Body as a dict, from either a submitted form or a JSON object"""
    content_type = request.headers.get("content-type", "").lower()
    if content_type.startswith(FORM_CONTENT_TYPES):
        # A multipart body Starlette cannot parse counts as missing fields
        try:
            async with request.form() as form:
                return dict(form)
        except HTTPException:
            return {}

    body = await request.body()
    if not body:
        return {}
    try:
        payload = json.loads(body)
    except ValueError:
        return {}
    return payload if isinstance(payload, dict) else {}


# Anyone can post a contact message
@router.post(
    "/api/contact",
    response_model=MessageResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def submit_contact(
    request: Request,
    service: ContactService = Depends(get_contact_service),
):
    payload = await read_contact_payload(request)
    try:
        data = ContactCreate(**{key: payload.get(key) for key in ("name", "email", "message")})
    except ValidationError:
        raise ContactValidationError(REQUIRED_FIELDS_MESSAGE)

    await service.create_contact(data)
    return MessageResponse(message=SAVED_MESSAGE)


# Every stored message, in insertion order
@router.get(
    "/admin/fetch",
    response_model=List[ContactResponse],
    responses={500: {"model": ErrorResponse}},
)
async def fetch_contacts(service: ContactService = Depends(get_contact_service)):
    return await service.list_contacts()
