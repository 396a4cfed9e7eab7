# app/schemas/contacts.py
from pydantic import BaseModel, ConfigDict, Field
from datetime import datetime

class ContactCreate(BaseModel):
    name: str = Field(..., min_length=1)
    email: str = Field(..., min_length=1)
    message: str = Field(..., min_length=1)

# Stored rows are returned as they are, the store does not enforce non-empty text
class ContactResponse(BaseModel):
    id: int
    name: str
    email: str
    message: str
    created_at: datetime | None = None

    model_config = ConfigDict(from_attributes=True)

class MessageResponse(BaseModel):
    message: str

class ErrorResponse(BaseModel):
    error: str
