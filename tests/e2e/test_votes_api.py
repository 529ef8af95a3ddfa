"""End-to-end tests for votes and comments."""

from uuid import uuid4

from tests.harness import create_post, register_and_login


class TestVotes:
    """POST /api/post/vote and /api/post/unvote"""

    def test_vote_twice_records_once_on_both_sides(self, client):
        register_and_login(client)
        post = create_post(client, "Votable")

        first = client.post("/api/post/vote", json={"post_id": post["id"]})
        second = client.post("/api/post/vote", json={"post_id": post["id"]})

        assert first.json() == {"ok": True, "recorded": True}
        assert second.json() == {"ok": True, "recorded": False}
        stored = client.get(f"/api/post/{post['slug']}").json()["post"]
        assert stored["votes"] == [post["author_id"]]
        assert stored["author"]["score"] == [post["id"]]

    def test_unvote(self, client):
        register_and_login(client)
        post = create_post(client, "Votable")
        client.post("/api/post/vote", json={"post_id": post["id"]})

        response = client.post("/api/post/unvote", json={"post_id": post["id"]})

        assert response.json() == {"ok": True, "removed": True}
        stored = client.get(f"/api/post/{post['slug']}").json()["post"]
        assert stored["votes"] == []
        assert stored["author"]["score"] == []

    def test_unvote_without_vote_is_noop(self, client):
        register_and_login(client)
        post = create_post(client, "Votable")

        response = client.post("/api/post/unvote", json={"post_id": post["id"]})

        assert response.status_code == 200
        assert response.json()["removed"] is False

    def test_vote_on_missing_post_is_404(self, client):
        register_and_login(client)

        response = client.post("/api/post/vote", json={"post_id": str(uuid4())})

        assert response.status_code == 404
        assert response.json() == {"ok": False, "message": "Post not found."}

    def test_vote_requires_session(self, client):
        response = client.post("/api/post/vote", json={"post_id": str(uuid4())})

        assert response.status_code == 401

    def test_anonymous_invalid_body_is_401(self, client):
        """No session wins over a missing post_id."""
        for path in ("/api/post/vote", "/api/post/unvote"):
            response = client.post(path, json={})

            assert response.status_code == 401
            assert response.json() == {"ok": False, "message": "Unauthorized"}


class TestComments:
    """POST and DELETE /api/post/comment"""

    def test_comment_and_reply(self, client):
        register_and_login(client)
        post = create_post(client, "Discussed")

        parent = client.post(
            "/api/post/comment", json={"post_id": post["id"], "content": "First!"}
        ).json()["comment"]
        reply = client.post(
            "/api/post/comment",
            json={"post_id": post["id"], "content": "Second", "parent_id": parent["id"]},
        ).json()["comment"]

        detail = client.get(f"/api/post/{post['slug']}").json()
        assert detail["post"]["comments"] == [parent["id"], reply["id"]]
        assert detail["comments"][0]["child"] == [reply["id"]]
        assert detail["comments"][1]["parent_id"] == parent["id"]
        assert detail["comments"][0]["author"]["username"] == "alice"

    def test_comment_on_missing_post_is_404(self, client):
        register_and_login(client)

        response = client.post(
            "/api/post/comment", json={"post_id": str(uuid4()), "content": "Hello"}
        )

        assert response.status_code == 404
        assert response.json()["message"] == "Post not found."

    def test_reply_to_comment_on_other_post_is_400(self, client):
        register_and_login(client)
        first = create_post(client, "First")
        second = create_post(client, "Second")
        parent = client.post(
            "/api/post/comment", json={"post_id": first["id"], "content": "Hi"}
        ).json()["comment"]

        response = client.post(
            "/api/post/comment",
            json={"post_id": second["id"], "content": "Hi", "parent_id": parent["id"]},
        )

        assert response.status_code == 400

    def test_delete_comment(self, client):
        register_and_login(client)
        post = create_post(client, "Discussed")
        comment = client.post(
            "/api/post/comment", json={"post_id": post["id"], "content": "Oops"}
        ).json()["comment"]

        response = client.delete(
            "/api/post/comment", params={"comment_id": comment["id"]}
        )
        again = client.delete("/api/post/comment", params={"comment_id": comment["id"]})

        assert response.json() == {"ok": True}
        assert again.status_code == 404
        assert again.json()["message"] == "Comment not found."

    def test_comment_requires_session(self, client):
        response = client.post(
            "/api/post/comment", json={"post_id": str(uuid4()), "content": "Hello"}
        )

        assert response.status_code == 401

    def test_comment_anonymous_invalid_body_is_401(self, client):
        response = client.post("/api/post/comment", json={})

        assert response.status_code == 401
        assert response.json() == {"ok": False, "message": "Unauthorized"}

    def test_delete_comment_requires_session(self, client):
        response = client.delete("/api/post/comment")

        assert response.status_code == 401
