import logging
from typing import List

from sqlalchemy.orm import Session

from folio.core.exceptions import NotFoundError
from folio.crud.crud_contact import contact
from folio.models.contact import ContactMessage
from folio.schemas.contact import ContactMessageCreate

logger = logging.getLogger(__name__)


class ContactService:
    """
    Contact inbox. Messages are append-only apart from the read flag.
    """

    def __init__(self, db: Session):
        self.db = db

    def submit(self, message_in: ContactMessageCreate) -> ContactMessage:
        message = contact.create_message(self.db, message_in)
        logger.info(f"Contact message received: {message.subject!r}")
        return message

    def list_all(self) -> List[ContactMessage]:
        return contact.get_messages(self.db)

    def get_by_id(self, message_id: str) -> ContactMessage:
        message = contact.get_message(self.db, message_id)
        if message is None:
            raise NotFoundError("Message not found")
        return message

    def mark_read(self, message_id: str) -> ContactMessage:
        return contact.mark_read(self.db, self.get_by_id(message_id))

    def delete(self, message_id: str) -> None:
        contact.delete_message(self.db, message_id)
