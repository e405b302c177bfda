from typing import List

from fastapi import APIRouter, Depends, Response, status

from folio.core.deps import get_current_user, get_post_service
from folio.models.blog import User
from folio.schemas.post import Post, PostCreate, PostPublish, PostUpdate
from folio.services.post_service import PostService

router = APIRouter()


@router.get("/published", response_model=List[Post])
def read_published_posts(posts: PostService = Depends(get_post_service)):
    """
    Posts publicados, del más reciente al más antiguo (público).
    """
    return posts.list_published()


@router.get("/slug/{slug}", response_model=Post)
def read_post_by_slug(slug: str, posts: PostService = Depends(get_post_service)):
    """
    Obtiene un post publicado por su slug (público). Los borradores responden 404.
    """
    return posts.get_by_slug(slug)


@router.get("", response_model=List[Post])
def read_posts(
    posts: PostService = Depends(get_post_service),
    current_user: User = Depends(get_current_user),
):
    """
    Every post, drafts included (requires authentication).
    """
    return posts.list_all()


@router.get("/{post_id}", response_model=Post)
def read_post_by_id(
    post_id: str,
    posts: PostService = Depends(get_post_service),
    current_user: User = Depends(get_current_user),
):
    """
    Obtiene un post específico por su ID (usado por el editor).
    """
    return posts.get_by_id(post_id)


@router.post("", response_model=Post, status_code=status.HTTP_201_CREATED)
def create_post(
    post: PostCreate,
    posts: PostService = Depends(get_post_service),
    current_user: User = Depends(get_current_user),
):
    """
    Crea un nuevo post (protegido - requiere autenticación).
    """
    return posts.create(post, author_id=current_user.id)


@router.put("/{post_id}", response_model=Post)
def update_post(
    post_id: str,
    post_update: PostUpdate,
    posts: PostService = Depends(get_post_service),
    current_user: User = Depends(get_current_user),
):
    """
    Actualiza un post existente. Solo cambian las claves enviadas.
    """
    return posts.update(post_id, post_update)


@router.patch("/{post_id}", response_model=Post)
def toggle_publish(
    post_id: str,
    body: PostPublish,
    posts: PostService = Depends(get_post_service),
    current_user: User = Depends(get_current_user),
):
    """
    Publish or unpublish a post.
    """
    return posts.set_published(post_id, body.published)


@router.delete("/{post_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_post(
    post_id: str,
    posts: PostService = Depends(get_post_service),
    current_user: User = Depends(get_current_user),
):
    """
    Elimina un post. Un ID inexistente también responde 204.
    """
    posts.delete(post_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
