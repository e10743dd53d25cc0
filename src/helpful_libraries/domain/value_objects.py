"""Module including value objects used across the domain layer."""

from enum import IntEnum


class PublicationStatus(IntEnum):
    """The visibility state of a content item in content management.

    The integer values are stable and safe to persist or compare externally.
    """

    PUBLISHED = 0
    """The content is visible to the end-user, e.g. after pushing Publish."""

    DRAFT = 1
    """The content is listed but not yet published, e.g. after saving a draft."""

    DELETED = 2
    """The content is deleted but remains in the database as version history."""
