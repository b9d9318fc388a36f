import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy.orm import Session

from app.api.common import CamelModel, PartialModel, UTCDateTime
from app.database import get_db
from app.errors import StorageError
from app.services import blog as storage

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/blog", tags=["blog"])


class BlogPostCreate(CamelModel):
    title: str
    slug: str
    excerpt: str
    content: str
    cover_image: str
    author: str = "Team"
    category: str
    tags: List[str]
    published: bool = True
    read_time: int


class BlogPostUpdate(PartialModel):
    title: Optional[str] = None
    slug: Optional[str] = None
    excerpt: Optional[str] = None
    content: Optional[str] = None
    cover_image: Optional[str] = None
    author: Optional[str] = None
    category: Optional[str] = None
    tags: Optional[List[str]] = None
    published: Optional[bool] = None
    read_time: Optional[int] = None


class BlogPostResponse(CamelModel):
    id: str
    title: str
    slug: str
    excerpt: str
    content: str
    cover_image: str
    author: str
    category: str
    tags: List[str]
    published: bool
    read_time: int
    created_at: UTCDateTime
    updated_at: UTCDateTime


@router.get("", response_model=List[BlogPostResponse])
def get_blog_posts(published: Optional[bool] = None, db: Session = Depends(get_db)):
    """Newest first. `?published=true|false` filters, no parameter returns everything"""
    try:
        return storage.get_all_blog_posts(db, published)
    except StorageError:
        logger.exception("Error in get_blog_posts")
        raise HTTPException(status_code=500, detail="Failed to fetch blog posts")


@router.get("/slug/{slug}", response_model=BlogPostResponse)
def get_blog_post_by_slug(slug: str, db: Session = Depends(get_db)):
    try:
        post = storage.get_blog_post_by_slug(db, slug)
    except StorageError:
        logger.exception("Error in get_blog_post_by_slug")
        raise HTTPException(status_code=500, detail="Failed to fetch blog post")

    if not post:
        raise HTTPException(status_code=404, detail="Blog post not found")
    return post


@router.get("/{post_id}", response_model=BlogPostResponse)
def get_blog_post(post_id: str, db: Session = Depends(get_db)):
    try:
        post = storage.get_blog_post_by_id(db, post_id)
    except StorageError:
        logger.exception("Error in get_blog_post")
        raise HTTPException(status_code=500, detail="Failed to fetch blog post")

    if not post:
        raise HTTPException(status_code=404, detail="Blog post not found")
    return post


@router.post("", response_model=BlogPostResponse, status_code=status.HTTP_201_CREATED)
def create_blog_post(data: BlogPostCreate, db: Session = Depends(get_db)):
    try:
        return storage.create_blog_post(db, data.model_dump())
    except StorageError:
        # Also covers a duplicate slug
        logger.exception("Error in create_blog_post")
        raise HTTPException(status_code=500, detail="Failed to create blog post")


@router.put("/{post_id}", response_model=BlogPostResponse)
def update_blog_post(post_id: str, data: BlogPostUpdate, db: Session = Depends(get_db)):
    try:
        post = storage.update_blog_post(db, post_id, data.changes())
    except StorageError:
        logger.exception("Error in update_blog_post")
        raise HTTPException(status_code=500, detail="Failed to update blog post")

    if not post:
        raise HTTPException(status_code=404, detail="Blog post not found")
    return post


@router.delete("/{post_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_blog_post(post_id: str, db: Session = Depends(get_db)):
    try:
        deleted = storage.delete_blog_post(db, post_id)
    except StorageError:
        logger.exception("Error in delete_blog_post")
        raise HTTPException(status_code=500, detail="Failed to delete blog post")

    if not deleted:
        raise HTTPException(status_code=404, detail="Blog post not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
