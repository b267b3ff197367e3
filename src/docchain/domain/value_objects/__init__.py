"""Domain value objects."""

from docchain.domain.value_objects.artifact_kind import ArtifactKind
from docchain.domain.value_objects.navigation_intent import NavigationIntent
from docchain.domain.value_objects.visibility import Visibility

__all__ = [
    "ArtifactKind",
    "NavigationIntent",
    "Visibility",
]
