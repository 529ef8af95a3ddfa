"""Domain value objects for Inkwell.

Value objects are immutable and defined by their values, not identity.
"""

import re

from pydantic import field_validator

from inkwell.domain.value.common import RootValueObject


class Username(RootValueObject[str]):
    """Login name of a user.

    1-64 characters of letters, digits, dots, dashes and underscores.
    """

    @field_validator("root")
    @classmethod
    def validate_username(cls, v: str) -> str:
        """Validate username format."""
        if not re.match(r"^[A-Za-z0-9_.-]{1,64}$", v):
            raise ValueError(
                "Username must be 1-64 characters: letters, digits, '.', '-' or '_'"
            )
        return v


class TagName(RootValueObject[str]):
    """Free-form tag attached to a post.

    Surrounding whitespace is stripped. Must be 1-50 characters.
    Examples: 'python', 'Web Development', 'nuxt'
    """

    @field_validator("root")
    @classmethod
    def validate_tag_name(cls, v: str) -> str:
        """Strip and validate tag length."""
        v = v.strip()
        if len(v) < 1 or len(v) > 50:
            raise ValueError("Tag must be 1-50 characters")
        return v


class Slug(RootValueObject[str]):
    """URL-safe slug for posts.

    Must be lowercase, alphanumeric with hyphens, 1-100 characters.
    Examples: 'hello-world', 'my-first-post-2'
    """

    @field_validator("root")
    @classmethod
    def validate_slug_format(cls, v: str) -> str:
        """Validate slug format."""
        if not re.match(r"^[a-z0-9]+(?:-[a-z0-9]+)*$", v):
            raise ValueError(
                "Slug must be lowercase alphanumeric with hyphens, "
                "no leading/trailing hyphens or consecutive hyphens"
            )
        if len(v) > 100:
            raise ValueError("Slug must be 1-100 characters")
        return v
