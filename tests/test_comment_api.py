import pytest

BASE = "/api/v1/campsites"


@pytest.fixture()
def comment_url(client, campsite, auth_headers):
    """URL of a comment written by u1."""
    response = client.post(
        f"{BASE}/{campsite.id}/comments",
        json={"text": "Great views", "rating": 5},
        headers=auth_headers["u1"],
    )
    comment_id = response.json()["comments"][0]["id"]
    return f"{BASE}/{campsite.id}/comments/{comment_id}"


def test_add_comment(client, campsite, auth_headers):
    response = client.post(
        f"{BASE}/{campsite.id}/comments",
        json={"text": "Bring bug spray", "rating": 3, "author_id": "someone-else"},
        headers=auth_headers["u2"],
    )
    assert response.status_code == 200
    comment = response.json()["comments"][-1]
    assert comment["author_id"] == "user-2"
    assert comment["text"] == "Bring bug spray"
    assert comment["rating"] == 3


def test_add_comment_requires_token_and_text(client, campsite, auth_headers):
    assert client.post(f"{BASE}/{campsite.id}/comments", json={"text": "anon"}).status_code == 401
    empty = client.post(f"{BASE}/{campsite.id}/comments", json={"text": ""}, headers=auth_headers["u1"])
    assert empty.status_code == 422


def test_add_comment_to_missing_campsite(client, auth_headers):
    response = client.post(f"{BASE}/missing/comments", json={"text": "hi"}, headers=auth_headers["u1"])
    assert response.status_code == 404


def test_reads_resolve_authors(client, campsite, comment_url):
    listed = client.get(f"{BASE}/{campsite.id}/comments")
    assert listed.status_code == 200
    author = listed.json()[0]["author"]
    assert author["username"] == "jenny"
    assert author["first_name"] == "Jenny"

    single = client.get(comment_url).json()
    assert single["text"] == "Great views"
    assert single["author"]["id"] == "user-1"

    campsite_body = client.get(f"{BASE}/{campsite.id}").json()
    assert campsite_body["comments"][0]["author"]["username"] == "jenny"


def test_get_missing_comment(client, campsite):
    response = client.get(f"{BASE}/{campsite.id}/comments/nope")
    assert response.status_code == 404
    assert response.json() == {"detail": "Comment nope not found", "error": "not_found"}


def test_author_edits_comment(client, comment_url, auth_headers):
    response = client.put(comment_url, json={"text": "Great views at dawn"}, headers=auth_headers["u1"])
    assert response.status_code == 200
    assert client.get(comment_url).json()["text"] == "Great views at dawn"


def test_edit_without_body_is_a_no_op(client, comment_url, auth_headers):
    response = client.put(comment_url, headers=auth_headers["u1"])
    assert response.status_code == 200
    assert client.get(comment_url).json()["text"] == "Great views"


@pytest.mark.parametrize("who", ["u2", "admin"])
def test_non_author_edit_gets_error_body(client, comment_url, auth_headers, who):
    response = client.put(comment_url, json={"text": "hijacked"}, headers=auth_headers[who])
    assert response.status_code == 403
    assert response.json() == {"error": "Forbidden: You can only edit your own comments"}
    assert client.get(comment_url).json()["text"] == "Great views"


def test_non_author_delete_gets_error_body(client, comment_url, auth_headers):
    response = client.delete(comment_url, headers=auth_headers["u2"])
    assert response.status_code == 403
    assert response.json() == {"error": "Forbidden: You can only delete your own comments"}
    assert client.get(comment_url).status_code == 200


def test_author_deletes_comment_once(client, comment_url, auth_headers):
    first = client.delete(comment_url, headers=auth_headers["u1"])
    assert first.status_code == 200
    assert first.json()["comments"] == []

    second = client.delete(comment_url, headers=auth_headers["u1"])
    assert second.status_code == 404


def test_clear_comments(client, campsite, comment_url, auth_headers):
    denied = client.delete(f"{BASE}/{campsite.id}/comments", headers=auth_headers["u1"])
    assert denied.status_code == 403
    assert denied.json()["error"] == "forbidden"
    assert client.get(comment_url).status_code == 200

    cleared = client.delete(f"{BASE}/{campsite.id}/comments", headers=auth_headers["admin"])
    assert cleared.status_code == 200
    assert cleared.json()["comments"] == []


def test_clear_comments_on_missing_campsite(client, auth_headers):
    assert client.delete(f"{BASE}/missing/comments", headers=auth_headers["admin"]).status_code == 404
    assert client.delete(f"{BASE}/missing/comments", headers=auth_headers["u1"]).status_code == 403


def test_unsupported_comment_verbs(client, campsite, comment_url, auth_headers):
    put_all = client.put(f"{BASE}/{campsite.id}/comments", headers=auth_headers["u1"])
    assert put_all.status_code == 403
    assert put_all.json()["detail"] == f"PUT operation not supported on /campsites/{campsite.id}/comments"

    post_one = client.post(comment_url, headers=auth_headers["u1"])
    assert post_one.status_code == 403
    assert post_one.json()["error"] == "unsupported"


def test_write_landing_mid_request_is_a_conflict(
    client, service, campsite_repository, campsite, comment_url, auth_headers, principals, monkeypatch
):
    other = service.add_comment(campsite.id, "Bring bug spray", principals["u2"]).comments[-1]
    fetch = campsite_repository.find_by_id

    def fetch_then_delete(campsite_id):
        loaded = fetch(campsite_id)
        monkeypatch.setattr(campsite_repository, "find_by_id", fetch)
        service.delete_comment(campsite_id, other.id, principals["u2"])
        return loaded

    monkeypatch.setattr(campsite_repository, "find_by_id", fetch_then_delete)

    response = client.put(comment_url, json={"text": "edited"}, headers=auth_headers["u1"])

    assert response.status_code == 409
    body = response.json()
    assert body["error"] == "conflict"
    assert body["detail"] == f"Campsite {campsite.id} was modified concurrently (expected version 2)"
    remaining = client.get(f"{BASE}/{campsite.id}/comments").json()
    assert [c["text"] for c in remaining] == ["Great views"]
