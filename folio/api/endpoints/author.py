from typing import Optional

from fastapi import APIRouter, Depends

from folio.core.deps import get_current_user, get_profile_service
from folio.models.blog import User
from folio.schemas.author import AuthorProfile, AuthorProfileUpsert
from folio.services.profile_service import ProfileService

router = APIRouter()


@router.get("", response_model=Optional[AuthorProfile])
def read_author_profile(profiles: ProfileService = Depends(get_profile_service)):
    """
    Public author profile, or null when none has been saved yet.
    """
    return profiles.get()


@router.put("", response_model=AuthorProfile)
def upsert_author_profile(
    profile: AuthorProfileUpsert,
    profiles: ProfileService = Depends(get_profile_service),
    current_user: User = Depends(get_current_user),
):
    return profiles.upsert(profile, user_id=current_user.id)
