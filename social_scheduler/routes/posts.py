"""
Posts routes for CRUD operations on drafted posts.
"""
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from typing import List

from ..database import get_db
from ..schemas.posts import PostCreate, PostUpdate
from ..services import posts as post_service
from .serializers import post_to_dict

router = APIRouter(prefix="/api/posts", tags=["posts"])


@router.get("", response_model=List[dict])
def get_posts(db: Session = Depends(get_db)):
    """Get all posts, newest first."""
    return [post_to_dict(p) for p in post_service.list_posts(db)]


@router.get("/{post_id}", response_model=dict)
def get_post(post_id: str, db: Session = Depends(get_db)):
    """Get a single post by ID."""
    return post_to_dict(post_service.get_post(db, post_id))


@router.post("", response_model=dict, status_code=201)
def create_post(post_data: PostCreate, db: Session = Depends(get_db)):
    """Create a new post."""
    return post_to_dict(post_service.create_post(db, post_data))


@router.put("/{post_id}", response_model=dict)
def update_post(post_id: str, post_update: PostUpdate, db: Session = Depends(get_db)):
    """Update a post's content and/or media URL."""
    return post_to_dict(post_service.update_post(db, post_id, post_update))


@router.delete("/{post_id}")
def delete_post(post_id: str, db: Session = Depends(get_db)):
    """Delete a post along with its schedules and analytics."""
    post_service.delete_post(db, post_id)
    return {"message": "Post deleted successfully"}
