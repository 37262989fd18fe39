from __future__ import annotations

import pytest

from app.errors import AlreadyLiked, Forbidden, NotFound, NotLiked
from app.services.post_service import add_like, remove_comment, remove_like


POST_PAYLOAD = {"image": "http://i/1.png", "text": "hello"}


def _create_post(client, headers) -> dict:
    r = client.post("/api/posts/", json=POST_PAYLOAD, headers=headers)
    assert r.status_code == 200, r.text
    return r.json()["post"]


def test_create_post_snapshots_author(client, make_user) -> None:
    user_id, headers = make_user("Ann", "ann@x.com")
    post = _create_post(client, headers)
    assert post["user"] == user_id
    assert post["name"] == "Ann"
    assert post["avatar"]
    assert post["likes"] == []
    assert post["comments"] == []


def test_create_post_requires_image_and_text(client, make_user) -> None:
    _, headers = make_user("Ann", "ann@x.com")
    r = client.post("/api/posts/", json={"text": " "}, headers=headers)
    assert r.status_code == 400
    assert [e["msg"] for e in r.json()["errors"]] == ["Image Url is Required", "Text is Required"]


def test_posts_are_private(client) -> None:
    assert client.get("/api/posts/").status_code == 401


def test_list_and_get_posts(client, make_user) -> None:
    _, headers = make_user("Ann", "ann@x.com")
    first = _create_post(client, headers)
    second = _create_post(client, headers)

    listing = client.get("/api/posts/", headers=headers)
    assert listing.status_code == 200
    assert [p["id"] for p in listing.json()["posts"]] == [second["id"], first["id"]]

    one = client.get(f"/api/posts/{first['id']}", headers=headers)
    assert one.status_code == 200
    assert one.json()["post"]["text"] == "hello"

    assert client.get("/api/posts/missing", headers=headers).status_code == 404


def test_like_twice_fails_and_keeps_likes(client, make_user) -> None:
    user_id, headers = make_user("Ann", "ann@x.com")
    post = _create_post(client, headers)

    liked = client.put(f"/api/posts/like/{post['id']}", headers=headers)
    assert liked.status_code == 200
    likes = liked.json()["post"]["likes"]
    assert [like["user"] for like in likes] == [user_id]

    again = client.put(f"/api/posts/like/{post['id']}", headers=headers)
    assert again.status_code == 400
    assert again.json()["errors"][0]["msg"] == "Post has already been liked"

    current = client.get(f"/api/posts/{post['id']}", headers=headers).json()["post"]
    assert len(current["likes"]) == 1


def test_unlike_restores_likes(client, make_user) -> None:
    ann_id, ann = make_user("Ann", "ann@x.com")
    _, bob = make_user("Bob", "bob@x.com")
    post = _create_post(client, ann)

    assert client.put(f"/api/posts/like/{post['id']}", headers=ann).status_code == 200
    never = client.put(f"/api/posts/unlike/{post['id']}", headers=bob)
    assert never.status_code == 400
    assert never.json()["errors"][0]["msg"] == "Post has not been liked"

    assert client.put(f"/api/posts/like/{post['id']}", headers=bob).status_code == 200
    r = client.put(f"/api/posts/unlike/{post['id']}", headers=bob)
    assert r.status_code == 200
    assert [like["user"] for like in r.json()["post"]["likes"]] == [ann_id]


def test_like_unknown_post_is_not_found(client, make_user) -> None:
    _, headers = make_user("Ann", "ann@x.com")
    assert client.put("/api/posts/like/missing", headers=headers).status_code == 404


def test_comment_add_and_author_only_delete(client, make_user) -> None:
    ann_id, ann = make_user("Ann", "ann@x.com")
    _, bob = make_user("Bob", "bob@x.com")
    post = _create_post(client, bob)

    r = client.post(f"/api/posts/comment/{post['id']}", json={"text": "nice"}, headers=ann)
    assert r.status_code == 200
    comment = r.json()["post"]["comments"][0]
    assert comment["user"] == ann_id
    assert comment["name"] == "Ann"
    assert comment["text"] == "nice"
    assert comment["date"]

    denied = client.delete(f"/api/posts/comment/{post['id']}/{comment['id']}", headers=bob)
    assert denied.status_code == 403
    current = client.get(f"/api/posts/{post['id']}", headers=ann).json()["post"]
    assert [c["id"] for c in current["comments"]] == [comment["id"]]

    ok = client.delete(f"/api/posts/comment/{post['id']}/{comment['id']}", headers=ann)
    assert ok.status_code == 200
    assert ok.json()["post"]["comments"] == []


def test_comment_delete_removes_exactly_the_addressed_comment(client, make_user) -> None:
    _, ann = make_user("Ann", "ann@x.com")
    post = _create_post(client, ann)
    for text in ("first", "second", "third"):
        client.post(f"/api/posts/comment/{post['id']}", json={"text": text}, headers=ann)

    comments = client.get(f"/api/posts/{post['id']}", headers=ann).json()["post"]["comments"]
    assert [c["text"] for c in comments] == ["third", "second", "first"]

    target = comments[1]
    r = client.delete(f"/api/posts/comment/{post['id']}/{target['id']}", headers=ann)
    assert r.status_code == 200
    assert [c["text"] for c in r.json()["post"]["comments"]] == ["third", "first"]


def test_comment_requires_text_and_existing_targets(client, make_user) -> None:
    _, ann = make_user("Ann", "ann@x.com")
    post = _create_post(client, ann)
    blank = client.post(f"/api/posts/comment/{post['id']}", json={"text": ""}, headers=ann)
    assert blank.status_code == 400
    assert blank.json()["errors"][0]["msg"] == "Text is Required"

    assert client.post("/api/posts/comment/missing", json={"text": "x"}, headers=ann).status_code == 404
    assert client.delete(f"/api/posts/comment/{post['id']}/missing", headers=ann).status_code == 404


def test_delete_post_by_author_only(client, make_user) -> None:
    _, ann = make_user("Ann", "ann@x.com")
    _, bob = make_user("Bob", "bob@x.com")
    post = _create_post(client, ann)

    assert client.delete(f"/api/posts/{post['id']}", headers=bob).status_code == 403

    r = client.delete(f"/api/posts/{post['id']}", headers=ann)
    assert r.status_code == 200
    assert r.json()["post"]["id"] == post["id"]
    assert client.get(f"/api/posts/{post['id']}", headers=ann).status_code == 404


def test_admin_may_delete_any_post(client, make_user) -> None:
    _, ann = make_user("Ann", "ann@x.com")
    _, admin = make_user("Root", "admin@example.com")
    post = _create_post(client, ann)
    assert client.delete(f"/api/posts/{post['id']}", headers=admin).status_code == 200


def test_like_helpers_guard_membership() -> None:
    likes = add_like([], "u1")
    likes = add_like(likes, "u2")
    assert [like["user"] for like in likes] == ["u2", "u1"]
    with pytest.raises(AlreadyLiked):
        add_like(likes, "u1")
    assert [like["user"] for like in remove_like(likes, "u2")] == ["u1"]
    with pytest.raises(NotLiked):
        remove_like(likes, "u3")


def test_remove_comment_checks_author_before_removing() -> None:
    comments = [
        {"id": "c2", "user": "u1", "text": "b"},
        {"id": "c1", "user": "u1", "text": "a"},
    ]
    with pytest.raises(Forbidden):
        remove_comment(comments, "c1", "u2")
    with pytest.raises(NotFound):
        remove_comment(comments, "c3", "u1")
    assert remove_comment(comments, "c1", "u1") == [{"id": "c2", "user": "u1", "text": "b"}]
