"""
Post service: drafting, editing and deleting post content.
"""
from datetime import datetime, timezone
from typing import List

from sqlalchemy.orm import Session

from ..errors import NotFound, require
from ..logging_config import get_logger
from ..models.post import Post
from ..schemas.posts import PostCreate, PostUpdate
from .store import commit

logger = get_logger("posts")


def list_posts(db: Session) -> List[Post]:
    return db.query(Post).order_by(Post.created_at.desc()).all()


def get_post(db: Session, post_id: str) -> Post:
    post = db.get(Post, post_id)
    if not post:
        raise NotFound("Post", post_id)
    return post


def create_post(db: Session, data: PostCreate) -> Post:
    """Create a post from non-blank content; ``created_at`` equals ``updated_at``."""
    content = require(data.content, "Content").strip()
    now = datetime.now(timezone.utc)
    post = Post(
        content=content,
        media_url=data.media_url or None,
        created_at=now,
        updated_at=now,
    )
    db.add(post)
    commit(db, post)
    logger.info("Post created", post_id=post.id)
    return post


def update_post(db: Session, post_id: str, data: PostUpdate) -> Post:
    """
    Apply a partial edit.

    Blank content is treated like omitted content and the stored text is kept,
    so a post can never end up empty. ``media_url`` is only touched when the
    field was sent; sending null or "" clears it.
    """
    post = get_post(db, post_id)

    if data.content is not None and data.content.strip():
        post.content = data.content.strip()
    if "media_url" in data.model_fields_set:
        post.media_url = data.media_url or None
    post.updated_at = datetime.now(timezone.utc)

    commit(db, post)
    logger.info("Post updated", post_id=post.id)
    return post


def delete_post(db: Session, post_id: str) -> None:
    """Delete a post; its schedules and their analytics go with it."""
    post = get_post(db, post_id)
    db.delete(post)
    commit(db)
    logger.info("Post deleted", post_id=post_id)
