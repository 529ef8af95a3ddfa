"""End-to-end tests for post routes."""

from tests.harness import create_post, register_and_login


class TestListPosts:
    """GET /api/posts, /api/posts/{page} and /api/tag-posts"""

    def test_list_posts_paginates_newest_first(self, client):
        """Page one holds the five newest posts with their authors."""
        register_and_login(client)
        slugs = [create_post(client, f"Post number {i}")["slug"] for i in range(7)]

        response = client.get("/api/posts", params={"page": 1})

        assert response.status_code == 200
        page = response.json()["posts"]
        assert [doc["slug"] for doc in page["docs"]] == list(reversed(slugs[2:]))
        assert page["docs"][0]["author"]["username"] == "alice"
        assert (page["total"], page["limit"], page["page"], page["pages"]) == (
            7,
            5,
            1,
            2,
        )

    def test_page_in_path(self, client):
        register_and_login(client)
        slugs = [create_post(client, f"Post number {i}")["slug"] for i in range(7)]

        response = client.get("/api/posts/2")

        assert response.status_code == 200
        assert [doc["slug"] for doc in response.json()["posts"]["docs"]] == [
            slugs[1],
            slugs[0],
        ]

    def test_empty_listing_is_404(self, client):
        response = client.get("/api/posts")

        assert response.status_code == 404
        assert response.json() == {"ok": False, "message": "No post."}

    def test_page_zero_is_rejected(self, client):
        assert client.get("/api/posts/0").status_code == 400
        assert client.get("/api/posts", params={"page": 0}).status_code == 422

    def test_tag_posts(self, client):
        register_and_login(client)
        create_post(client, "About Python", tags=["python"])
        create_post(client, "About Rust", tags=["rust"])

        response = client.get("/api/tag-posts", params={"tag": "python"})

        assert response.status_code == 200
        docs = response.json()["posts"]["docs"]
        assert [doc["slug"] for doc in docs] == ["about-python"]

    def test_tag_posts_unknown_tag_is_404(self, client):
        register_and_login(client)
        create_post(client, "About Python", tags=["python"])

        response = client.get("/api/tag-posts", params={"tag": "cobol"})

        assert response.status_code == 404
        assert response.json()["message"] == "No post."


class TestGetPost:
    """GET /api/post/{slug}"""

    def test_each_read_adds_one_view(self, client):
        register_and_login(client)
        slug = create_post(client, "Read me")["slug"]

        first = client.get(f"/api/post/{slug}").json()
        second = client.get(f"/api/post/{slug}").json()

        assert first["post"]["views"] == 1
        assert second["post"]["views"] == 2
        assert first["post"]["author"]["username"] == "alice"
        assert first["comments"] == []

    def test_missing_post_is_404(self, client):
        response = client.get("/api/post/does-not-exist")

        assert response.status_code == 404
        assert response.json() == {"ok": False, "message": "Post not found."}

    def test_malformed_slug_is_404(self, client):
        response = client.get("/api/post/Not_A_Slug")

        assert response.status_code == 404


class TestCreatePost:
    """POST /api/post"""

    def test_create_post_requires_session(self, client):
        response = client.post("/api/post", json={"title": "Hi", "content": "There"})

        assert response.status_code == 401
        assert response.json() == {"ok": False, "message": "Unauthorized"}

    def test_anonymous_invalid_body_is_401(self, client):
        """The session check runs before the body is validated."""
        response = client.post("/api/post", json={"title": ""})

        assert response.status_code == 401
        assert response.json() == {"ok": False, "message": "Unauthorized"}

    def test_create_post_as_session_user(self, client):
        user = register_and_login(client)

        post = create_post(client, "Hello World", content="Body", tags=["intro"])

        assert post["slug"] == "hello-world"
        assert post["author_id"] == user["id"]
        assert post["tags"] == ["intro"]
        assert post["views"] == 0
        me = client.get("/api/post/hello-world").json()["post"]["author"]
        assert me["posts"] == [post["id"]]

    def test_create_post_without_title_is_422(self, client):
        register_and_login(client)

        response = client.post("/api/post", json={"content": "Body"})

        assert response.status_code == 422


class TestUpdateAndDeletePost:
    """PUT and DELETE /api/post/{slug}"""

    def test_update_post(self, client):
        register_and_login(client)
        slug = create_post(client, "Draft", content="v1")["slug"]

        response = client.put(f"/api/post/{slug}", json={"content": "v2"})

        assert response.status_code == 200
        post = response.json()["post"]
        assert post["slug"] == slug
        assert post["title"] == "Draft"
        assert post["content"] == "v2"

    def test_update_missing_post_is_404(self, client):
        register_and_login(client)

        response = client.put("/api/post/missing", json={"title": "x"})

        assert response.status_code == 404
        assert response.json()["message"] == "Post not found."

    def test_update_requires_session(self, client):
        assert client.put("/api/post/any", json={"title": "x"}).status_code == 401

    def test_update_anonymous_invalid_body_is_401(self, client):
        response = client.put("/api/post/any", json={"title": ""})

        assert response.status_code == 401

    def test_update_malformed_slug_is_404(self, client):
        """A slug no post could have answers like a missing post."""
        register_and_login(client)

        response = client.put("/api/post/Not_A_Slug", json={"title": "x"})

        assert response.status_code == 404
        assert response.json() == {"ok": False, "message": "Post not found."}

    def test_update_with_blank_tag_is_400(self, client):
        """Rejected values come back as the validator message only."""
        register_and_login(client)
        slug = create_post(client, "Tagged")["slug"]

        response = client.put(f"/api/post/{slug}", json={"tags": ["   "]})

        assert response.status_code == 400
        assert response.json() == {
            "ok": False,
            "message": "Tag must be 1-50 characters",
        }

    def test_delete_post(self, client):
        register_and_login(client)
        slug = create_post(client, "Short lived")["slug"]

        response = client.delete(f"/api/post/{slug}")

        assert response.status_code == 200
        assert response.json() == {"ok": True}
        assert client.get(f"/api/post/{slug}").status_code == 404

    def test_delete_missing_post_is_404(self, client):
        register_and_login(client)

        response = client.delete("/api/post/missing")

        assert response.status_code == 404

    def test_delete_malformed_slug_is_404(self, client):
        register_and_login(client)

        response = client.delete("/api/post/Not_A_Slug")

        assert response.status_code == 404
        assert response.json() == {"ok": False, "message": "Post not found."}

    def test_delete_requires_session(self, client):
        assert client.delete("/api/post/any").status_code == 401
