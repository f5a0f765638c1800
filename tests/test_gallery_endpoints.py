"""Tests for gallery endpoints."""

from gallery_api.seed import PORTRAIT_SHARE_TOKEN, WEDDING_SHARE_TOKEN

GALLERY_URL = f"/api/gallery/{WEDDING_SHARE_TOKEN}"


def test_get_gallery(client) -> None:
    response = client.get(GALLERY_URL)

    assert response.status_code == 200
    body = response.json()
    assert body["success"] is True
    data = body["data"]
    assert data["project"] == {
        "id": "proj-1",
        "name": "Wedding Photos - Smith Family",
        "description": "Beautiful outdoor wedding ceremony",
        "status": "shared",
    }
    assert len(data["photos"]) == 6
    assert data["stats"] == {"total": 6, "selected": 1, "rejected": 1, "pending": 4}

    photo = data["photos"][1]
    assert photo["thumbnailUrl"].startswith("https://")
    assert photo["selection"] == {"id": None, "status": "pending", "updatedAt": None}


def test_get_gallery_status_filter(client) -> None:
    response = client.get(GALLERY_URL, params={"status": "selected"})

    data = response.json()["data"]
    assert [p["id"] for p in data["photos"]] == ["photo-1"]
    assert data["stats"]["total"] == 6


def test_get_gallery_folder_filter(client) -> None:
    response = client.get(GALLERY_URL, params={"folder": "folder-1"})

    assert [p["id"] for p in response.json()["data"]["photos"]] == [
        "photo-1",
        "photo-2",
        "photo-4",
        "photo-6",
    ]


def test_get_gallery_invalid_status_filter(client) -> None:
    response = client.get(GALLERY_URL, params={"status": "favorite"})

    assert response.status_code == 400
    assert response.json()["success"] is False


def test_get_gallery_unknown_token(client) -> None:
    response = client.get("/api/gallery/does-not-exist")

    assert response.status_code == 404
    assert response.json() == {"success": False, "error": "Gallery not found or access denied"}


def test_get_gallery_not_shared(client) -> None:
    response = client.get(f"/api/gallery/{PORTRAIT_SHARE_TOKEN}")

    assert response.status_code == 403
    assert response.json()["success"] is False


def test_update_selection_as_guest(client, store) -> None:
    response = client.post(f"{GALLERY_URL}/selections/photo-2", json={"status": "selected"})

    assert response.status_code == 200
    data = response.json()["data"]
    assert data["photoId"] == "photo-2"
    assert data["status"] == "selected"
    assert data["updatedAt"]
    assert store.find_selection("proj-1", "photo-2").client_id == "guest"


def test_update_selection_records_authenticated_client(client, store, client_headers) -> None:
    client.post(
        f"{GALLERY_URL}/selections/photo-4",
        json={"status": "rejected"},
        headers=client_headers,
    )

    assert store.find_selection("proj-1", "photo-4").client_id == "user-2"


def test_update_selection_pending_clears_record(client, store) -> None:
    response = client.post(f"{GALLERY_URL}/selections/photo-1", json={"status": "pending"})

    assert response.status_code == 200
    assert response.json()["data"]["status"] == "pending"
    assert store.find_selection("proj-1", "photo-1") is None


def test_update_selection_invalid_status(client) -> None:
    response = client.post(f"{GALLERY_URL}/selections/photo-2", json={"status": "maybe"})

    assert response.status_code == 400


def test_update_selection_unknown_photo(client) -> None:
    response = client.post(f"{GALLERY_URL}/selections/photo-404", json={"status": "selected"})

    assert response.status_code == 404
    assert response.json()["error"] == "Photo not found"


def test_update_selection_unknown_token(client) -> None:
    response = client.post("/api/gallery/nope/selections/photo-1", json={"status": "selected"})

    assert response.status_code == 404


def test_bulk_selection(client) -> None:
    response = client.post(
        f"{GALLERY_URL}/bulk-selection",
        json={"photoIds": ["photo-1", "photo-404"], "status": "selected"},
    )

    assert response.status_code == 200
    data = response.json()["data"]
    assert data["updated"] == 1
    assert data["failed"] == 1
    assert data["results"][0] == {
        "photoId": "photo-1",
        "success": True,
        "status": "selected",
        "error": None,
    }
    assert data["results"][1]["photoId"] == "photo-404"
    assert data["results"][1]["success"] is False
    assert data["results"][1]["error"] == "Photo not found"


def test_bulk_selection_requires_photo_ids(client) -> None:
    missing = client.post(f"{GALLERY_URL}/bulk-selection", json={"status": "selected"})
    empty = client.post(f"{GALLERY_URL}/bulk-selection", json={"photoIds": [], "status": "selected"})

    assert missing.status_code == 400
    assert empty.status_code == 400


def test_complete_gallery(client, store) -> None:
    response = client.post(f"{GALLERY_URL}/complete")

    assert response.status_code == 200
    body = response.json()
    assert body["data"]["projectId"] == "proj-1"
    assert body["data"]["completedAt"]
    assert body["message"]
    assert store.get_project("proj-1").status.value == "completed"

    # completed galleries are no longer viewable
    assert client.get(GALLERY_URL).status_code == 403


def test_complete_gallery_unknown_token(client) -> None:
    assert client.post("/api/gallery/nope/complete").status_code == 404
