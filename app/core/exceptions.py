# app/core/exceptions.py

from fastapi import Request
from fastapi.responses import JSONResponse


class ContactAPIError(Exception):
    """Base error rendered to the caller as {"error": message}"""
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ContactValidationError(ContactAPIError):
    """A required field is missing or empty"""
    status_code = 400


class StoreError(ContactAPIError):
    """Connecting to, querying or releasing the store failed"""
    status_code = 500


async def contact_api_error_handler(request: Request, exc: ContactAPIError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})
