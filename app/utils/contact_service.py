# app/utils/contact_service.py

import logging
from typing import List

from fastapi import Depends
from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError

from app.core.exceptions import StoreError
from app.database.database import Database, get_database
from app.models.contacts import Contact
from app.schemas.contacts import ContactCreate

logger = logging.getLogger(__name__)

SAVE_FAILED_MESSAGE = "Failed to save the message."
FETCH_FAILED_MESSAGE = "Failed to fetch contacts."


class ContactService:
    """Reads and writes Contact records through the shared connection pool"""

    def __init__(self, database: Database):
        self.database = database

    async def create_contact(self, data: ContactCreate) -> Contact:
        """
        Insert one contact row. Nothing is retried; a failure anywhere
        between checkout and release leaves the table untouched.
        """
        contact = Contact(name=data.name, email=data.email, message=data.message)
        try:
            async with self.database.session() as db:
                async with db.begin():
                    db.add(contact)
        except (SQLAlchemyError, OSError) as e:
            logger.error(f"Database error saving contact message: {str(e)}")
            raise StoreError(SAVE_FAILED_MESSAGE) from e

        logger.info(f"Saved contact message {contact.id}")
        return contact

    async def list_contacts(self) -> List[Contact]:
        try:
            async with self.database.session() as db:
                result = await db.execute(select(Contact).order_by(Contact.id))
                return list(result.scalars().all())
        except (SQLAlchemyError, OSError) as e:
            logger.error(f"Database error fetching contacts: {str(e)}")
            raise StoreError(FETCH_FAILED_MESSAGE) from e


def get_contact_service(database: Database = Depends(get_database)) -> ContactService:
    return ContactService(database)
