"""Document visibility."""

from enum import StrEnum


class Visibility(StrEnum):
    """Who can see a document."""

    PUBLIC = "public"
    PRIVATE = "private"
