from typing import List, Optional

from sqlalchemy import desc
from sqlalchemy.orm import Session

from folio.crud.base import commit
from folio.models.image import Image


def get_images(db: Session) -> List[Image]:
    return db.query(Image).order_by(desc(Image.created_at)).all()


def get_image(db: Session, image_id: str) -> Optional[Image]:
    return db.query(Image).filter(Image.id == image_id).first()


def create_image(db: Session, filename: str, mime_type: str, data: str,
                 uploaded_by: Optional[str] = None) -> Image:
    db_image = Image(filename=filename, mime_type=mime_type, data=data, uploaded_by=uploaded_by)
    db.add(db_image)
    commit(db, "create_image")
    db.refresh(db_image)
    return db_image


def delete_image(db: Session, image_id: str) -> int:
    deleted = db.query(Image).filter(Image.id == image_id).delete()
    commit(db, "delete_image")
    return deleted
