from pydantic import BaseModel
from typing import Optional


class PostCreate(BaseModel):
    content: Optional[str] = None
    media_url: Optional[str] = None


class PostUpdate(BaseModel):
    """Omitted fields keep their stored value; see ``model_fields_set``."""
    content: Optional[str] = None
    media_url: Optional[str] = None
