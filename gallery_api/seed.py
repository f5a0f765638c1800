"""
Demo dataset: one photographer, one client, a shared wedding gallery and a
draft portrait project.

Demo login: photographer@example.com / client@example.com, password "password123".
"""
from datetime import datetime, timezone

from gallery_api.models import (
    Comment,
    Folder,
    Photo,
    PhotoMetadata,
    Project,
    ProjectStatus,
    Selection,
    SelectionStatus,
    User,
    UserRole,
)
from gallery_api.utils.security import hash_password

DEMO_PASSWORD = "password123"

WEDDING_SHARE_TOKEN = "share-wedding-smith-2024"
PORTRAIT_SHARE_TOKEN = "share-portrait-johnson-2024"


def _utc(*args) -> datetime:
    return datetime(*args, tzinfo=timezone.utc)


# (id, folder_id, filename, original_name, size)
_WEDDING_PHOTOS = [
    ("photo-1", "folder-1", "DSC_0001.jpg", "Wedding_Ceremony_001.jpg", 2_500_000),
    ("photo-2", "folder-1", "DSC_0002.jpg", "Wedding_Ceremony_002.jpg", 2_800_000),
    ("photo-3", "folder-2", "DSC_0003.jpg", "Wedding_Reception_001.jpg", 3_200_000),
    ("photo-4", "folder-1", "DSC_0004.jpg", "Wedding_Ceremony_003.jpg", 2_900_000),
    ("photo-5", "folder-2", "DSC_0005.jpg", "Wedding_Reception_002.jpg", 3_100_000),
    ("photo-6", "folder-1", "DSC_0006.jpg", "Wedding_Ceremony_004.jpg", 2_700_000),
]


def load_demo_data(store) -> None:
    """Populate an empty store with the demo dataset."""
    hashed = hash_password(DEMO_PASSWORD)

    store.add_user(User(
        id="user-1",
        email="photographer@example.com",
        name="John Photographer",
        role=UserRole.PHOTOGRAPHER,
        hashed_password=hashed,
        created_at=_utc(2024, 1, 1),
    ))
    store.add_user(User(
        id="user-2",
        email="client@example.com",
        name="Jane Client",
        role=UserRole.CLIENT,
        hashed_password=hashed,
        created_at=_utc(2024, 1, 2),
    ))

    store.add_project(Project(
        id="proj-1",
        name="Wedding Photos - Smith Family",
        description="Beautiful outdoor wedding ceremony",
        owner_id="user-1",
        share_token=WEDDING_SHARE_TOKEN,
        status=ProjectStatus.SHARED,
        created_at=_utc(2024, 1, 15),
        updated_at=_utc(2024, 1, 15),
    ))
    store.add_project(Project(
        id="proj-2",
        name="Portrait Session - Johnson",
        description="Family portrait session at the park",
        owner_id="user-1",
        share_token=PORTRAIT_SHARE_TOKEN,
        status=ProjectStatus.DRAFT,
        created_at=_utc(2024, 1, 20),
        updated_at=_utc(2024, 1, 20),
    ))

    store.add_folder(Folder(
        id="folder-1",
        project_id="proj-1",
        name="Ceremony",
        description="Wedding ceremony photos",
        created_at=_utc(2024, 1, 15),
    ))
    store.add_folder(Folder(
        id="folder-2",
        project_id="proj-1",
        name="Reception",
        description="Reception and party photos",
        created_at=_utc(2024, 1, 15),
    ))
    store.add_folder(Folder(
        id="folder-3",
        project_id="proj-2",
        name="Main Session",
        description="Primary portrait photos",
        created_at=_utc(2024, 1, 20),
    ))

    for index, (photo_id, folder_id, filename, original_name, size) in enumerate(_WEDDING_PHOTOS):
        number = index + 1
        metadata = None
        if photo_id == "photo-1":
            metadata = PhotoMetadata(
                camera="Canon EOS R5",
                lens="24-70mm f/2.8",
                iso=400,
                aperture="f/2.8",
                shutter_speed="1/200",
                taken_at=_utc(2024, 1, 15, 14, 30),
            )
        store.add_photo(Photo(
            id=photo_id,
            folder_id=folder_id,
            project_id="proj-1",
            filename=filename,
            original_name=original_name,
            url=f"https://picsum.photos/800/600?random={number}",
            thumbnail_url=f"https://picsum.photos/300/200?random={number}",
            size=size,
            width=1920,
            height=1080,
            metadata=metadata,
            uploaded_at=_utc(2024, 1, 15, 20, index),
        ))

    store.add_selection(Selection(
        id="sel-1",
        photo_id="photo-1",
        project_id="proj-1",
        client_id="user-2",
        status=SelectionStatus.SELECTED,
        created_at=_utc(2024, 1, 16, 10, 0),
        updated_at=_utc(2024, 1, 16, 10, 0),
    ))
    store.add_selection(Selection(
        id="sel-2",
        photo_id="photo-3",
        project_id="proj-1",
        client_id="user-2",
        status=SelectionStatus.REJECTED,
        created_at=_utc(2024, 1, 16, 10, 1),
        updated_at=_utc(2024, 1, 16, 10, 1),
    ))

    store.add_comment(Comment(
        id="comment-1",
        photo_id="photo-1",
        project_id="proj-1",
        author_id="user-2",
        author_name="Jane Client",
        content="This is such a beautiful shot! I love the lighting.",
        created_at=_utc(2024, 1, 16, 11, 0),
    ))
    store.add_comment(Comment(
        id="comment-2",
        photo_id="photo-1",
        project_id="proj-1",
        author_id="user-1",
        author_name="John Photographer",
        content=(
            "Thank you! I was really happy with how this one turned out. "
            "The golden hour lighting was perfect."
        ),
        parent_id="comment-1",
        created_at=_utc(2024, 1, 16, 11, 15),
    ))
    store.add_comment(Comment(
        id="comment-3",
        photo_id="photo-2",
        project_id="proj-1",
        author_id="user-2",
        author_name="Jane Client",
        content="Could we get a slightly tighter crop on this one?",
        created_at=_utc(2024, 1, 16, 11, 30),
    ))
