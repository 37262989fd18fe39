from __future__ import annotations

from app.database import SessionLocal
from app.models.post import Post
from app.models.profile import ProfileModel
from app.models.user import User


PROFILE_PAYLOAD = {
    "company": "Acme",
    "website": "https://acme.example",
    "location": "Seoul",
    "designation": "Developer",
    "skills": "python",
    "bio": "bio",
    "githubUsername": "dev",
    "youtube": "y",
    "facebook": "f",
    "twitter": "t",
    "linkedin": "l",
    "instagram": "i",
}


def test_delete_own_account_cascades(client, make_user) -> None:
    ann_id, ann = make_user("Ann", "ann@x.com")
    bob_id, bob = make_user("Bob", "bob@x.com")
    assert client.post("/api/profiles/", json=PROFILE_PAYLOAD, headers=ann).status_code == 200

    ann_post = client.post("/api/posts/", json={"image": "http://i/a.png", "text": "a"}, headers=ann).json()["post"]
    bob_post = client.post("/api/posts/", json={"image": "http://i/b.png", "text": "b"}, headers=bob).json()["post"]
    client.put(f"/api/posts/like/{bob_post['id']}", headers=ann)
    client.put(f"/api/posts/like/{bob_post['id']}", headers=bob)
    client.post(f"/api/posts/comment/{bob_post['id']}", json={"text": "from ann"}, headers=ann)
    client.post(f"/api/posts/comment/{bob_post['id']}", json={"text": "from bob"}, headers=bob)

    r = client.delete(f"/api/profiles/users/{ann_id}", headers=ann)
    assert r.status_code == 200
    assert r.json()["msg"] == "Account is Deleted"

    with SessionLocal() as db:
        assert db.get(User, ann_id) is None
        assert db.query(ProfileModel).filter(ProfileModel.user_id == ann_id).count() == 0
        assert db.get(Post, ann_post["id"]) is None
        remaining = db.get(Post, bob_post["id"])
        assert [like["user"] for like in remaining.likes] == [bob_id]
        assert [c["text"] for c in remaining.comments] == ["from bob"]

    assert client.get(f"/api/profiles/users/{ann_id}").status_code == 404


def test_cannot_delete_another_users_account(client, make_user) -> None:
    ann_id, _ = make_user("Ann", "ann@x.com")
    _, bob = make_user("Bob", "bob@x.com")
    r = client.delete(f"/api/profiles/users/{ann_id}", headers=bob)
    assert r.status_code == 403
    with SessionLocal() as db:
        assert db.get(User, ann_id) is not None


def test_admin_may_delete_any_account(client, make_user) -> None:
    ann_id, _ = make_user("Ann", "ann@x.com")
    _, admin = make_user("Root", "admin@example.com")
    assert client.delete(f"/api/profiles/users/{ann_id}", headers=admin).status_code == 200
    assert client.delete(f"/api/profiles/users/{ann_id}", headers=admin).status_code == 404


def test_delete_account_requires_token(client, make_user) -> None:
    ann_id, _ = make_user("Ann", "ann@x.com")
    assert client.delete(f"/api/profiles/users/{ann_id}").status_code == 401


def test_token_of_deleted_account_cannot_like(client, make_user) -> None:
    ann_id, ann = make_user("Ann", "ann@x.com")
    _, bob = make_user("Bob", "bob@x.com")
    bob_post = client.post("/api/posts/", json={"image": "http://i/b.png", "text": "b"}, headers=bob).json()["post"]
    assert client.put(f"/api/posts/like/{bob_post['id']}", headers=ann).status_code == 200
    assert client.delete(f"/api/profiles/users/{ann_id}", headers=ann).status_code == 200

    like = client.put(f"/api/posts/like/{bob_post['id']}", headers=ann)
    assert like.status_code == 404
    assert like.json()["errors"][0]["msg"] == "User Not Found"
    unlike = client.put(f"/api/posts/unlike/{bob_post['id']}", headers=ann)
    assert unlike.status_code == 404

    with SessionLocal() as db:
        assert db.get(Post, bob_post["id"]).likes == []
