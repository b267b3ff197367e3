"""Kinds of document artifacts."""

from enum import StrEnum


class ArtifactKind(StrEnum):
    """What a document body holds."""

    TEXT = "text"
    CODE = "code"
    IMAGE = "image"
    SHEET = "sheet"
