from typing import List

from fastapi import APIRouter, Depends, Response, status

from folio.core.deps import get_contact_service, get_current_user
from folio.models.blog import User
from folio.schemas.contact import ContactMessage, ContactMessageCreate, ContactSubmitted
from folio.services.contact_service import ContactService

router = APIRouter()


@router.post("", response_model=ContactSubmitted, status_code=status.HTTP_201_CREATED)
def submit_contact_message(
    message: ContactMessageCreate,
    inbox: ContactService = Depends(get_contact_service),
):
    """
    Formulario de contacto (público).
    """
    saved = inbox.submit(message)
    return {"message": "Message sent successfully", "id": saved.id}


@router.get("", response_model=List[ContactMessage])
def read_contact_messages(
    inbox: ContactService = Depends(get_contact_service),
    current_user: User = Depends(get_current_user),
):
    return inbox.list_all()


@router.get("/{message_id}", response_model=ContactMessage)
def read_contact_message(
    message_id: str,
    inbox: ContactService = Depends(get_contact_service),
    current_user: User = Depends(get_current_user),
):
    return inbox.get_by_id(message_id)


@router.patch("/{message_id}/read", response_model=ContactMessage)
def mark_contact_message_read(
    message_id: str,
    inbox: ContactService = Depends(get_contact_service),
    current_user: User = Depends(get_current_user),
):
    return inbox.mark_read(message_id)


@router.delete("/{message_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_contact_message(
    message_id: str,
    inbox: ContactService = Depends(get_contact_service),
    current_user: User = Depends(get_current_user),
):
    inbox.delete(message_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
