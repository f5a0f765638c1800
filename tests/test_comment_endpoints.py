"""Tests for comment endpoints."""


def test_list_photo_comments(client) -> None:
    response = client.get("/api/comments/photo/photo-1")

    assert response.status_code == 200
    data = response.json()["data"]
    assert data["total"] == 2
    thread = data["comments"][0]
    assert thread["id"] == "comment-1"
    assert thread["authorName"] == "Jane Client"
    assert [r["id"] for r in thread["replies"]] == ["comment-2"]
    assert thread["replies"][0]["parentId"] == "comment-1"


def test_list_comments_for_photo_without_comments(client) -> None:
    response = client.get("/api/comments/photo/photo-6")

    assert response.json()["data"] == {"comments": [], "total": 0}


def test_create_comment_requires_auth(client) -> None:
    response = client.post("/api/comments/photo/photo-1", json={"content": "Hi"})

    assert response.status_code == 401
    assert response.json()["success"] is False


def test_blank_content_is_rejected_before_auth(client) -> None:
    created = client.post("/api/comments/photo/photo-1", json={"content": "   "})
    updated = client.put("/api/comments/comment-1", json={"content": ""})

    assert created.status_code == 400
    assert created.json() == {"success": False, "error": "Comment content is required"}
    assert updated.status_code == 400


def test_create_comment(client, client_headers) -> None:
    response = client.post(
        "/api/comments/photo/photo-4",
        json={"content": "  Love this one  "},
        headers=client_headers,
    )

    assert response.status_code == 201
    data = response.json()["data"]
    assert data["content"] == "Love this one"
    assert data["photoId"] == "photo-4"
    assert data["projectId"] == "proj-1"
    assert data["authorId"] == "user-2"
    assert data["parentId"] is None


def test_create_comment_blank_content(client, client_headers) -> None:
    response = client.post(
        "/api/comments/photo/photo-1", json={"content": "   "}, headers=client_headers
    )

    assert response.status_code == 400


def test_create_comment_unknown_photo(client, client_headers) -> None:
    response = client.post(
        "/api/comments/photo/photo-404", json={"content": "Hi"}, headers=client_headers
    )

    assert response.status_code == 404


def test_reply_to_reply_is_rejected(client, client_headers) -> None:
    response = client.post(
        "/api/comments/photo/photo-1",
        json={"content": "Nested", "parentId": "comment-2"},
        headers=client_headers,
    )

    assert response.status_code == 400
    assert response.json()["error"] == "Cannot reply to a reply"


def test_reply_to_missing_parent(client, client_headers) -> None:
    response = client.post(
        "/api/comments/photo/photo-1",
        json={"content": "Reply", "parentId": "comment-404"},
        headers=client_headers,
    )

    assert response.status_code == 404


def test_update_comment(client, client_headers) -> None:
    response = client.put(
        "/api/comments/comment-1", json={"content": "Edited"}, headers=client_headers
    )

    assert response.status_code == 200
    assert response.json()["data"]["content"] == "Edited"


def test_update_comment_not_author(client, photographer_headers) -> None:
    response = client.put(
        "/api/comments/comment-1", json={"content": "Edited"}, headers=photographer_headers
    )

    assert response.status_code == 403


def test_delete_comment_cascades(client, client_headers) -> None:
    response = client.delete("/api/comments/comment-1", headers=client_headers)

    assert response.status_code == 200
    body = response.json()
    assert body["data"] == {"deletedCount": 2}
    assert body["message"] == "Comment deleted successfully"
    assert client.get("/api/comments/photo/photo-1").json()["data"]["total"] == 0


def test_delete_missing_comment(client, client_headers) -> None:
    response = client.delete("/api/comments/comment-404", headers=client_headers)

    assert response.status_code == 404


def test_list_project_comments(client) -> None:
    response = client.get("/api/comments/project/proj-1")

    data = response.json()["data"]
    assert data["total"] == 3
    assert data["photosWithComments"] == 2
    assert [c["id"] for c in data["commentsByPhoto"]["photo-1"]] == ["comment-2", "comment-1"]


def test_update_comment_requires_auth(client) -> None:
    response = client.put("/api/comments/comment-1", json={"content": "Edited"})

    assert response.status_code == 401
    assert response.headers["WWW-Authenticate"] == "Bearer"
