"""End-to-end tests for hot content and tags."""

from tests.harness import create_post, register_and_login


def _view(client, slug: str, times: int) -> None:
    for _ in range(times):
        assert client.get(f"/api/post/{slug}").status_code == 200


class TestHotAuthors:
    """GET /api/hot-authors"""

    def test_no_authors_is_404(self, client):
        response = client.get("/api/hot-authors")

        assert response.status_code == 404
        assert response.json() == {"ok": False, "message": "No author."}

    def test_authors_ranked_by_total_views(self, client):
        register_and_login(client, "alice")
        _view(client, create_post(client, "Alice one")["slug"], 1)
        register_and_login(client, "bob")
        _view(client, create_post(client, "Bob one")["slug"], 2)
        _view(client, create_post(client, "Bob two")["slug"], 1)

        response = client.get("/api/hot-authors")

        assert response.status_code == 200
        authors = response.json()["authors"]
        assert [(a["username"], a["views"]) for a in authors] == [
            ("bob", 3),
            ("alice", 1),
        ]
        assert "password_hash" not in authors[0]


class TestHotPosts:
    """GET /api/hot-posts"""

    def test_hot_posts_top_five_by_views(self, client):
        register_and_login(client)
        slugs = [create_post(client, f"Post {i}")["slug"] for i in range(6)]
        for i, slug in enumerate(slugs):
            _view(client, slug, i)

        response = client.get("/api/hot-posts")

        posts = response.json()["posts"]
        assert [p["slug"] for p in posts] == list(reversed(slugs[1:]))
        assert set(posts[0]) == {
            "id",
            "slug",
            "title",
            "views",
            "created_at",
            "updated_at",
        }

    def test_hot_posts_empty(self, client):
        response = client.get("/api/hot-posts")

        assert response.json() == {"ok": True, "posts": []}


class TestTags:
    """GET /api/hot-tags and /api/tags"""

    def test_hot_tags_and_all_tags(self, client):
        register_and_login(client)
        create_post(client, "One", tags=["python", "web"])
        create_post(client, "Two", tags=["python", "api"])

        hot = client.get("/api/hot-tags").json()["tags"]
        all_tags = client.get("/api/tags").json()["tags"]

        assert hot == [
            {"name": "web", "count": 1},
            {"name": "python", "count": 2},
            {"name": "api", "count": 1},
        ]
        assert [t["name"] for t in all_tags] == ["web", "python", "api"]

    def test_hot_tags_ignore_usage_count(self, client):
        register_and_login(client)
        create_post(client, "One", tags=["alpha", "zeta"])
        create_post(client, "Two", tags=["alpha"])

        hot = client.get("/api/hot-tags").json()["tags"]

        assert [t["name"] for t in hot] == ["zeta", "alpha"]
