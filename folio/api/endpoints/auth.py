# folio/api/endpoints/auth.py
import logging

from authlib.integrations.starlette_client import OAuth, OAuthError
from fastapi import APIRouter, Depends, HTTPException, Request, status
from sqlalchemy.orm import Session

from folio.core.config import Settings
from folio.core.deps import get_current_user, get_app_settings
from folio.core.security import create_access_token
from folio.crud import crud_user
from folio.db.session import get_db
from folio.models.blog import User as UserModel
from folio.schemas.token import Token
from folio.schemas.user import User, UserIdentity

logger = logging.getLogger(__name__)

router = APIRouter()


def build_oauth(settings: Settings) -> OAuth:
    """
    Registers the OpenID Connect provider when it is configured.
    """
    oauth = OAuth()
    if settings.oidc_enabled:
        oauth.register(
            name="oidc",
            client_id=settings.OIDC_CLIENT_ID,
            client_secret=settings.OIDC_CLIENT_SECRET,
            server_metadata_url=f"{settings.OIDC_ISSUER_URL.rstrip('/')}/.well-known/openid-configuration",
            client_kwargs={"scope": "openid email profile"},
        )
    return oauth


def _oidc_client(request: Request):
    client = request.app.state.oauth.create_client("oidc")
    if client is None:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Login provider is not configured",
        )
    return client


@router.get("/login", summary="Iniciar login con el proveedor de identidad")
async def login(request: Request):
    client = _oidc_client(request)
    redirect_uri = request.url_for("auth_callback")
    return await client.authorize_redirect(request, str(redirect_uri))


@router.get("/callback", response_model=Token, summary="Callback del proveedor de identidad")
async def auth_callback(
    request: Request,
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_app_settings),
):
    client = _oidc_client(request)
    try:
        token = await client.authorize_access_token(request)
    except OAuthError as exc:
        logger.warning(f"Identity provider rejected the login: {exc.error}")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Login failed",
            headers={"WWW-Authenticate": "Bearer"},
        )

    userinfo = token.get("userinfo")
    if not userinfo or not userinfo.get("sub"):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Identity provider returned no user information",
        )

    identity = UserIdentity(
        id=userinfo["sub"],
        email=userinfo.get("email"),
        first_name=userinfo.get("given_name") or userinfo.get("first_name"),
        last_name=userinfo.get("family_name") or userinfo.get("last_name"),
        profile_image_url=userinfo.get("picture") or userinfo.get("profile_image_url"),
    )
    user = crud_user.upsert_user(db, identity)
    logger.info("User logged in", extra={"user_id": user.id})

    access_token = create_access_token(
        settings, subject=user.id, claims=identity.model_dump(exclude={"id"})
    )
    return {"access_token": access_token, "token_type": "bearer"}


@router.get("/auth/user", response_model=User, summary="Usuario autenticado actual")
def read_current_user(current_user: UserModel = Depends(get_current_user)):
    return current_user
