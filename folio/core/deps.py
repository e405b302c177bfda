from typing import Optional

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from folio.core.config import Settings
from folio.core.exceptions import AuthenticationError
from folio.core.security import decode_access_token
from folio.crud import crud_user
from folio.db.session import get_db
from folio.models.blog import User
from folio.schemas.user import UserIdentity
from folio.services.contact_service import ContactService
from folio.services.image_service import ImageService
from folio.services.post_service import PostService
from folio.services.profile_service import ProfileService

bearer_scheme = HTTPBearer(auto_error=False)


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_current_user(
    request: Request,
    db: Session = Depends(get_db),
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
) -> User:
    """
    Dependencia para obtener el usuario actual desde el token JWT.

    La copia local del usuario se crea a partir de los claims del token la
    primera vez que aparece un subject desconocido.
    """
    if credentials is None or credentials.scheme.lower() != "bearer":
        raise AuthenticationError()
    payload = decode_access_token(request.app.state.settings, credentials.credentials)

    user = crud_user.get_user(db, payload["sub"])
    if user is None:
        user = crud_user.upsert_user(db, identity_from_claims(payload))
    request.state.user_id = user.id
    return user


def identity_from_claims(claims: dict) -> UserIdentity:
    return UserIdentity(
        id=claims["sub"],
        email=claims.get("email"),
        first_name=claims.get("first_name"),
        last_name=claims.get("last_name"),
        profile_image_url=claims.get("profile_image_url"),
    )


def get_post_service(db: Session = Depends(get_db)) -> PostService:
    return PostService(db)


def get_profile_service(db: Session = Depends(get_db)) -> ProfileService:
    return ProfileService(db)


def get_image_service(db: Session = Depends(get_db)) -> ImageService:
    return ImageService(db)


def get_contact_service(db: Session = Depends(get_db)) -> ContactService:
    return ContactService(db)
