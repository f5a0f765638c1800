"""Tests for project endpoints."""


def test_projects_require_auth(client) -> None:
    assert client.get("/api/projects").status_code == 401


def test_projects_forbidden_for_clients(client, client_headers) -> None:
    response = client.get("/api/projects", headers=client_headers)

    assert response.status_code == 403


def test_list_projects(client, photographer_headers) -> None:
    response = client.get("/api/projects", headers=photographer_headers)

    assert response.status_code == 200
    projects = response.json()["data"]
    assert [p["id"] for p in projects] == ["proj-2", "proj-1"]
    assert projects[1]["photoCount"] == 6
    assert projects[1]["shareToken"] == "share-wedding-smith-2024"


def test_create_project(client, photographer_headers) -> None:
    response = client.post(
        "/api/projects",
        json={"name": "Engagement", "description": "Beach session"},
        headers=photographer_headers,
    )

    assert response.status_code == 201
    data = response.json()["data"]
    assert data["status"] == "draft"
    assert data["ownerId"] == "user-1"
    assert data["shareToken"]


def test_create_project_missing_name(client, photographer_headers) -> None:
    response = client.post("/api/projects", json={}, headers=photographer_headers)

    assert response.status_code == 400


def test_get_project_detail(client, photographer_headers) -> None:
    response = client.get("/api/projects/proj-1", headers=photographer_headers)

    assert response.status_code == 200
    data = response.json()["data"]
    assert data["stats"] == {"folderCount": 2, "photoCount": 6, "totalSize": 17200000}
    assert data["photos"][0]["metadata"]["shutterSpeed"] == "1/200"


def test_get_unknown_project(client, photographer_headers) -> None:
    assert client.get("/api/projects/proj-404", headers=photographer_headers).status_code == 404


def test_share_project_opens_gallery(client, photographer_headers) -> None:
    response = client.put(
        "/api/projects/proj-2", json={"status": "shared"}, headers=photographer_headers
    )

    assert response.status_code == 200
    assert response.json()["data"]["status"] == "shared"
    assert client.get("/api/gallery/share-portrait-johnson-2024").status_code == 200


def test_update_project_invalid_status(client, photographer_headers) -> None:
    response = client.put(
        "/api/projects/proj-2", json={"status": "archived"}, headers=photographer_headers
    )

    assert response.status_code == 400


def test_folders_and_photos(client, photographer_headers) -> None:
    folder = client.post(
        "/api/projects/proj-2/folders",
        json={"name": "Outtakes"},
        headers=photographer_headers,
    )
    assert folder.status_code == 201
    folder_id = folder.json()["data"]["id"]

    folders = client.get("/api/projects/proj-2/folders", headers=photographer_headers)
    assert [f["id"] for f in folders.json()["data"]] == ["folder-3", folder_id]

    photo = client.post(
        "/api/projects/proj-2/photos",
        json={
            "folderId": folder_id,
            "filename": "IMG_0001.jpg",
            "url": "https://cdn.example.com/IMG_0001.jpg",
            "thumbnailUrl": "https://cdn.example.com/thumbs/IMG_0001.jpg",
            "size": 1200000,
            "width": 4000,
            "height": 3000,
            "metadata": {"camera": "Nikon Z6", "iso": 100},
        },
        headers=photographer_headers,
    )
    assert photo.status_code == 201
    assert photo.json()["data"]["metadata"]["camera"] == "Nikon Z6"


def test_add_photo_folder_mismatch(client, photographer_headers) -> None:
    response = client.post(
        "/api/projects/proj-2/photos",
        json={
            "folderId": "folder-1",
            "filename": "IMG_0002.jpg",
            "url": "https://cdn.example.com/IMG_0002.jpg",
            "thumbnailUrl": "https://cdn.example.com/thumbs/IMG_0002.jpg",
            "size": 1,
            "width": 1,
            "height": 1,
        },
        headers=photographer_headers,
    )

    assert response.status_code == 400
