"""Navigation intents over a version history."""

from enum import StrEnum


class NavigationIntent(StrEnum):
    """Moves a viewer can make through the ordered version list."""

    NEXT = "next"
    PREV = "prev"
    TOGGLE = "toggle"
    LATEST = "latest"
