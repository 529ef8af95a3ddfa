"""Hot content use cases."""

from .hot_authors import HotAuthorItem, HotAuthorsResponse, HotAuthorsUseCase
from .hot_posts import HotPostItem, HotPostsResponse, HotPostsUseCase
from .hot_tags import HotTagsResponse, HotTagsUseCase

__all__ = [
    "HotAuthorItem",
    "HotAuthorsResponse",
    "HotAuthorsUseCase",
    "HotPostItem",
    "HotPostsResponse",
    "HotPostsUseCase",
    "HotTagsResponse",
    "HotTagsUseCase",
]
