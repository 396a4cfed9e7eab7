# app/models/contacts.py
from sqlalchemy import Column, DateTime, Integer, String, Text
from sqlalchemy.sql import func
from app.database.database import Base

TEXT_FIELD_LENGTH = 255


class Contact(Base):
    """A contact-form submission. Rows are only ever inserted and listed."""
    __tablename__ = "contacts"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(TEXT_FIELD_LENGTH), nullable=False)
    email = Column(String(TEXT_FIELD_LENGTH), nullable=False)
    message = Column(Text, nullable=False)
    # Assigned by the store on insert
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())

    def __repr__(self):
        return f"<Contact id={self.id} email={self.email!r}>"
