"""
Comment model for per-photo discussion threads.
"""
from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass
class Comment:
    """
    Comment on a photo.
    A reply points at a top-level comment through parent_id; replies to replies do not exist.
    """

    id: str
    photo_id: str
    project_id: str
    author_id: str
    author_name: str
    content: str
    created_at: datetime
    parent_id: Optional[str] = None

    @property
    def is_reply(self) -> bool:
        return self.parent_id is not None
