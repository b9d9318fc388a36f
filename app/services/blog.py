import logging

from sqlalchemy.orm import Session

from app.models.blog import BlogPost
from app.services.common import apply_fields, delete_row, get_row, storage_errors, writable

logger = logging.getLogger(__name__)


def get_all_blog_posts(db: Session, published: bool | None = None) -> list[BlogPost]:
    """
    Newest posts first.

    `published=None` returns every post, True/False restricts to that status.
    """
    with storage_errors(db, "fetch blog posts"):
        query = db.query(BlogPost)
        if published is not None:
            query = query.filter(BlogPost.published == published)
        return query.order_by(BlogPost.created_at.desc()).all()


def get_blog_post_by_id(db: Session, post_id: str) -> BlogPost | None:
    return get_row(db, BlogPost, post_id, "fetch blog post")


def get_blog_post_by_slug(db: Session, slug: str) -> BlogPost | None:
    with storage_errors(db, "fetch blog post"):
        return db.query(BlogPost).filter(BlogPost.slug == slug).first()


def create_blog_post(db: Session, fields: dict) -> BlogPost:
    post = BlogPost(**writable(fields))
    with storage_errors(db, "create blog post"):
        db.add(post)
        db.commit()
        db.refresh(post)
    logger.info("created blog post id=%s slug=%s", post.id, post.slug)
    return post


def update_blog_post(db: Session, post_id: str, fields: dict) -> BlogPost | None:
    with storage_errors(db, "update blog post"):
        post = db.query(BlogPost).filter(BlogPost.id == post_id).first()
        if not post:
            return None
        apply_fields(post, fields)
        db.commit()
        db.refresh(post)
    logger.info("updated blog post id=%s fields=%s", post_id, sorted(fields))
    return post


def delete_blog_post(db: Session, post_id: str) -> bool:
    return delete_row(db, BlogPost, post_id, "delete blog post")
