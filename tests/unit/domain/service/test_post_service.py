"""Unit tests for PostService."""

import pytest

from inkwell.domain.error import NotFoundError, ValidationError
from inkwell.domain.repository import PostRepository
from inkwell.domain.service import PostService
from inkwell.domain.value import PostId, Slug, TagName
from tests.harness import create_env_fixture, make_post, make_user

# Unit test fixture - everything mocked, no docker needed
unit_env = create_env_fixture()


class TestCreatePost:
    """Tests for create_post method."""

    @pytest.mark.asyncio
    async def test_create_post_derives_slug_from_title(self, unit_env):
        """Slug should be the lowercased title with hyphens."""
        # Arrange
        post_service = await unit_env.get(PostService)
        author = await make_user(unit_env)

        # Act
        post = await post_service.create_post(
            author_id=author.id,
            title="Hello, World!",
            content="First post",
            tags=[TagName("intro")],
        )

        # Assert
        assert post.slug == Slug("hello-world")
        assert post.views == 0
        assert post.votes == []
        assert post.created_at == post.updated_at

    @pytest.mark.asyncio
    async def test_create_post_adds_suffix_on_slug_collision(self, unit_env):
        """Second post with the same title should get a -1 suffix."""
        post_service = await unit_env.get(PostService)
        author = await make_user(unit_env)

        first = await post_service.create_post(author.id, "Same Title", "a", [])
        second = await post_service.create_post(author.id, "Same Title", "b", [])
        third = await post_service.create_post(author.id, "Same Title", "c", [])

        assert first.slug.root == "same-title"
        assert second.slug.root == "same-title-1"
        assert third.slug.root == "same-title-2"

    @pytest.mark.asyncio
    async def test_create_post_avoids_route_names_as_slug(self, unit_env):
        """A post titled 'Vote' must not shadow the vote endpoint."""
        post_service = await unit_env.get(PostService)
        author = await make_user(unit_env)

        post = await post_service.create_post(author.id, "Vote", "content", [])

        assert post.slug.root == "vote-1"

    @pytest.mark.asyncio
    async def test_create_post_falls_back_when_title_has_no_slug_chars(self, unit_env):
        """Titles without letters or digits should use the post-<id> slug."""
        post_service = await unit_env.get(PostService)
        author = await make_user(unit_env)

        post = await post_service.create_post(author.id, "!!!", "content", [])

        assert post.slug.root == f"post-{post.id.hex[:8]}"

    @pytest.mark.asyncio
    async def test_create_post_drops_duplicate_tags(self, unit_env):
        """Repeated tags should be stored once, in first-seen order."""
        post_service = await unit_env.get(PostService)
        author = await make_user(unit_env)

        post = await post_service.create_post(
            author.id,
            "Tagged",
            "content",
            [TagName("python"), TagName("web"), TagName("python")],
        )

        assert [tag.root for tag in post.tags] == ["python", "web"]


class TestListRecent:
    """Tests for list_recent and page_count."""

    @pytest.mark.asyncio
    async def test_list_recent_pages_newest_first(self, unit_env):
        """Pages should hold at most page_size posts, newest first."""
        post_service = await unit_env.get(PostService)
        author = await make_user(unit_env)
        created = [
            await post_service.create_post(author.id, f"Post {i}", "body", [])
            for i in range(7)
        ]

        page_one, total = await post_service.list_recent(page=1)
        page_two, _ = await post_service.list_recent(page=2)

        assert total == 7
        assert [p.id for p in page_one] == [p.id for p in reversed(created[2:])]
        assert [p.id for p in page_two] == [created[1].id, created[0].id]
        assert post_service.page_count(total) == 2

    @pytest.mark.asyncio
    async def test_list_recent_filters_by_tag(self, unit_env):
        """Only posts carrying the tag should be listed and counted."""
        post_service = await unit_env.get(PostService)
        author = await make_user(unit_env)
        await make_post(unit_env, author, "tagged", tags=["python"])
        await make_post(unit_env, author, "untagged")

        posts, total = await post_service.list_recent(page=1, tag=TagName("python"))

        assert total == 1
        assert posts[0].slug.root == "tagged"

    @pytest.mark.asyncio
    async def test_list_recent_rejects_page_zero(self, unit_env):
        """Page numbers start at 1."""
        post_service = await unit_env.get(PostService)

        with pytest.raises(ValidationError):
            await post_service.list_recent(page=0)

    @pytest.mark.asyncio
    async def test_page_count_is_at_least_one(self, unit_env):
        """An empty listing still has one (empty) page."""
        post_service = await unit_env.get(PostService)

        assert post_service.page_count(0) == 1


class TestUpdateAndDelete:
    """Tests for update_post and delete_post."""

    @pytest.mark.asyncio
    async def test_update_post_keeps_slug_and_omitted_fields(self, unit_env):
        """Changing the title should not change the slug or the content."""
        post_service = await unit_env.get(PostService)
        author = await make_user(unit_env)
        post = await post_service.create_post(author.id, "Original", "body", [])

        updated = await post_service.update_post(post.slug, title="Renamed")

        assert updated.slug == post.slug
        assert updated.title == "Renamed"
        assert updated.content == "body"
        assert updated.updated_at >= post.updated_at

    @pytest.mark.asyncio
    async def test_update_missing_post_raises_not_found(self, unit_env):
        """Updating an unknown slug should raise NotFoundError."""
        post_service = await unit_env.get(PostService)

        with pytest.raises(NotFoundError) as exc_info:
            await post_service.update_post(Slug("missing"), title="x")

        assert exc_info.value.resource == "Post"

    @pytest.mark.asyncio
    async def test_delete_post_removes_it(self, unit_env):
        """Deleted posts should no longer be found."""
        post_service = await unit_env.get(PostService)
        post_repo = await unit_env.get(PostRepository)
        author = await make_user(unit_env)
        post = await make_post(unit_env, author, "doomed")

        await post_service.delete_post(post.slug)

        assert await post_repo.find_by_id(post.id) is None

    @pytest.mark.asyncio
    async def test_delete_missing_post_raises_not_found(self, unit_env):
        """Deleting an unknown slug should raise NotFoundError."""
        post_service = await unit_env.get(PostService)

        with pytest.raises(NotFoundError):
            await post_service.delete_post(Slug("missing"))


class TestRecordView:
    """Tests for record_view method."""

    @pytest.mark.asyncio
    async def test_record_view_increments_by_one(self, unit_env):
        """Each view should add exactly one and leave updated_at alone."""
        post_service = await unit_env.get(PostService)
        post_repo = await unit_env.get(PostRepository)
        author = await make_user(unit_env)
        post = await make_post(unit_env, author, "viewed", views=3)

        returned = await post_service.record_view(post)

        stored = await post_repo.find_by_id(PostId(post.id))
        assert returned.views == 4
        assert stored.views == 4
        assert stored.updated_at == post.updated_at


class TestAggregations:
    """Tests for the hot and tag aggregations."""

    @pytest.mark.asyncio
    async def test_get_top_authors_sums_views_and_limits(self, unit_env):
        """Authors should be ranked by summed views, top five only."""
        post_service = await unit_env.get(PostService)
        authors = [await make_user(unit_env, f"author{i}") for i in range(6)]
        for i, author in enumerate(authors):
            await make_post(unit_env, author, f"first-{i}", views=i * 10)
            await make_post(unit_env, author, f"second-{i}", views=1)

        ranking = await post_service.get_top_authors()

        assert len(ranking) == 5
        assert [entry.author_id for entry in ranking] == [
            a.id for a in reversed(authors[1:])
        ]
        assert ranking[0].views == 51

    @pytest.mark.asyncio
    async def test_get_most_viewed_orders_by_views(self, unit_env):
        """Most viewed posts come first."""
        post_service = await unit_env.get(PostService)
        author = await make_user(unit_env)
        await make_post(unit_env, author, "low", views=1)
        await make_post(unit_env, author, "high", views=100)
        await make_post(unit_env, author, "mid", views=50)

        posts = await post_service.get_most_viewed()

        assert [p.slug.root for p in posts] == ["high", "mid", "low"]

    @pytest.mark.asyncio
    async def test_get_hot_tags_orders_by_name_descending(self, unit_env):
        """Hot tags are ordered by tag name descending, not by count."""
        post_service = await unit_env.get(PostService)
        author = await make_user(unit_env)
        await make_post(unit_env, author, "a", tags=["web", "python"])
        await make_post(unit_env, author, "b", tags=["python", "api"])
        await make_post(unit_env, author, "c", tags=["python"])

        tags = await post_service.get_hot_tags()

        assert [(t.name, t.count) for t in tags] == [
            ("web", 1),
            ("python", 3),
            ("api", 1),
        ]

    @pytest.mark.asyncio
    async def test_get_all_tags_orders_by_name_descending(self, unit_env):
        """The tag list is ordered by name descending."""
        post_service = await unit_env.get(PostService)
        author = await make_user(unit_env)
        await make_post(unit_env, author, "a", tags=["alpha", "gamma"])
        await make_post(unit_env, author, "b", tags=["beta", "gamma"])

        tags = await post_service.get_all_tags()

        assert [(t.name, t.count) for t in tags] == [
            ("gamma", 2),
            ("beta", 1),
            ("alpha", 1),
        ]
