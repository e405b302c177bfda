from typing import List

from fastapi import APIRouter, Depends, Response, status

from folio.core.deps import get_current_user, get_image_service
from folio.models.blog import User
from folio.schemas.image import Image, ImageCreate
from folio.services.image_service import ImageService

router = APIRouter()

IMAGE_CACHE_CONTROL = "public, max-age=31536000"


@router.get("", response_model=List[Image])
def read_images(
    images: ImageService = Depends(get_image_service),
    current_user: User = Depends(get_current_user),
):
    return images.list_all()


@router.get("/{image_id}", response_class=Response)
def read_image(image_id: str, images: ImageService = Depends(get_image_service)):
    """
    Sirve la imagen decodificada (público) para incrustarla directamente en las páginas.
    """
    content, mime_type = images.get_content(image_id)
    return Response(
        content=content,
        media_type=mime_type,
        headers={"Cache-Control": IMAGE_CACHE_CONTROL},
    )


@router.post("", response_model=Image, status_code=status.HTTP_201_CREATED)
def upload_image(
    image: ImageCreate,
    images: ImageService = Depends(get_image_service),
    current_user: User = Depends(get_current_user),
):
    return images.create(image, uploaded_by=current_user.id)


@router.delete("/{image_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_image(
    image_id: str,
    images: ImageService = Depends(get_image_service),
    current_user: User = Depends(get_current_user),
):
    images.delete(image_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
