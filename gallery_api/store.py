"""
In-memory entity store.

Owns every record as keyed maps (id -> record). Lifetime is the process
lifetime; nothing is persisted.

동시성:
- 모든 read-modify-write 구간은 ``async with store.lock`` 안에서 실행
- 락 안에서는 await 하지 않음 (이벤트 루프 기준 원자적)
"""
import asyncio
import logging
import uuid
from datetime import datetime, timezone
from typing import Dict, Iterator, List, Optional, Set, Tuple

from fastapi import Request

from gallery_api.models import Comment, Folder, Photo, Project, Selection, User

_logger = logging.getLogger("gallery_api.store")


def utcnow() -> datetime:
    """Timezone-aware current UTC time."""
    return datetime.now(timezone.utc)


def new_id(prefix: str) -> str:
    """새 레코드 ID 생성. 짧고 읽기 쉬운 형식 (예: sel-1a2b3c4d5e6f)."""
    return f"{prefix}-{uuid.uuid4().hex[:12]}"


class EntityStore:
    """
    Keyed collections for users, projects, folders, photos, selections and comments.

    Selections are additionally indexed by (project_id, photo_id) so that the
    one-selection-per-photo invariant holds by construction.
    """

    def __init__(self):
        self.users: Dict[str, User] = {}
        self.projects: Dict[str, Project] = {}
        self.folders: Dict[str, Folder] = {}
        self.photos: Dict[str, Photo] = {}
        self.selections: Dict[str, Selection] = {}
        self.comments: Dict[str, Comment] = {}
        self.revoked_tokens: Set[str] = set()
        self._selection_index: Dict[Tuple[str, str], str] = {}
        self.lock = asyncio.Lock()

    # ============== Users ==============

    def add_user(self, user: User) -> User:
        self.users[user.id] = user
        return user

    def get_user(self, user_id: str) -> Optional[User]:
        return self.users.get(user_id)

    def find_user_by_email(self, email: str) -> Optional[User]:
        email = email.lower()
        for user in self.users.values():
            if user.email.lower() == email:
                return user
        return None

    # ============== Projects & Folders ==============

    def add_project(self, project: Project) -> Project:
        self.projects[project.id] = project
        return project

    def get_project(self, project_id: str) -> Optional[Project]:
        return self.projects.get(project_id)

    def find_project_by_share_token(self, share_token: str) -> Optional[Project]:
        for project in self.projects.values():
            if project.share_token == share_token:
                return project
        return None

    def add_folder(self, folder: Folder) -> Folder:
        if folder.project_id not in self.projects:
            raise KeyError(f"Unknown project {folder.project_id}")
        self.folders[folder.id] = folder
        return folder

    def get_folder(self, folder_id: str) -> Optional[Folder]:
        return self.folders.get(folder_id)

    def project_folders(self, project_id: str) -> List[Folder]:
        return [f for f in self.folders.values() if f.project_id == project_id]

    # ============== Photos ==============

    def add_photo(self, photo: Photo) -> Photo:
        folder = self.folders.get(photo.folder_id)
        if folder is None or folder.project_id != photo.project_id:
            raise KeyError(f"Folder {photo.folder_id} is not part of project {photo.project_id}")
        self.photos[photo.id] = photo
        return photo

    def get_photo(self, photo_id: str) -> Optional[Photo]:
        return self.photos.get(photo_id)

    def project_photos(self, project_id: str) -> List[Photo]:
        return [p for p in self.photos.values() if p.project_id == project_id]

    # ============== Selections ==============

    def find_selection(self, project_id: str, photo_id: str) -> Optional[Selection]:
        selection_id = self._selection_index.get((project_id, photo_id))
        if selection_id is None:
            return None
        return self.selections[selection_id]

    def add_selection(self, selection: Selection) -> Selection:
        key = (selection.project_id, selection.photo_id)
        if key in self._selection_index:
            raise KeyError(f"Selection already exists for photo {selection.photo_id}")
        self.selections[selection.id] = selection
        self._selection_index[key] = selection.id
        return selection

    def remove_selection(self, selection: Selection) -> None:
        self._selection_index.pop((selection.project_id, selection.photo_id), None)
        self.selections.pop(selection.id, None)

    def project_selections(self, project_id: str) -> Iterator[Selection]:
        return (s for s in self.selections.values() if s.project_id == project_id)

    # ============== Comments ==============

    def add_comment(self, comment: Comment) -> Comment:
        self.comments[comment.id] = comment
        return comment

    def get_comment(self, comment_id: str) -> Optional[Comment]:
        return self.comments.get(comment_id)

    def remove_comment(self, comment_id: str) -> None:
        self.comments.pop(comment_id, None)

    def stats(self) -> Dict[str, int]:
        """Record counts per collection (health/monitoring)."""
        return {
            "users": len(self.users),
            "projects": len(self.projects),
            "folders": len(self.folders),
            "photos": len(self.photos),
            "selections": len(self.selections),
            "comments": len(self.comments),
        }


def build_store(seed: bool = False) -> EntityStore:
    """Create a store, optionally loaded with the demo dataset."""
    store = EntityStore()
    if seed:
        from gallery_api.seed import load_demo_data
        load_demo_data(store)
        _logger.info(
            "Demo data loaded",
            extra={"event": "lifecycle", **store.stats()},
        )
    return store


def get_store(request: Request) -> EntityStore:
    """
    Dependency that returns the application's entity store.
    """
    return request.app.state.store
