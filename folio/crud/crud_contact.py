from typing import List, Optional

from sqlalchemy import desc
from sqlalchemy.orm import Session

from folio.crud.base import commit
from folio.models.contact import ContactMessage
from folio.schemas.contact import ContactMessageCreate


class CRUDContact:
    def get_messages(self, db: Session) -> List[ContactMessage]:
        """
        Inbox, newest first.
        """
        return db.query(ContactMessage).order_by(desc(ContactMessage.created_at)).all()

    def get_message(self, db: Session, message_id: str) -> Optional[ContactMessage]:
        return db.query(ContactMessage).filter(ContactMessage.id == message_id).first()

    def create_message(self, db: Session, message: ContactMessageCreate) -> ContactMessage:
        db_obj = ContactMessage(**message.model_dump(), read=False)
        db.add(db_obj)
        commit(db, "create_contact_message")
        db.refresh(db_obj)
        return db_obj

    def mark_read(self, db: Session, db_obj: ContactMessage) -> ContactMessage:
        db_obj.read = True
        db.add(db_obj)
        commit(db, "mark_contact_message_read")
        db.refresh(db_obj)
        return db_obj

    def delete_message(self, db: Session, message_id: str) -> int:
        deleted = (
            db.query(ContactMessage)
            .filter(ContactMessage.id == message_id)
            .delete()
        )
        commit(db, "delete_contact_message")
        return deleted


contact = CRUDContact()
