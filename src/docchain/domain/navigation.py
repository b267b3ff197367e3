"""Navigation state machine over an ordered version list."""

from dataclasses import dataclass, replace

from docchain.domain.value_objects import NavigationIntent


@dataclass(frozen=True)
class NavigationState:
    """Viewed index into a version list of ``length`` items.

    ``toggle_index`` remembers the historical index left by a ``toggle`` to
    latest, so a second ``toggle`` returns to it.
    """

    index: int
    length: int
    toggle_index: int | None = None

    @classmethod
    def at_latest(cls, length: int) -> "NavigationState":
        return cls(index=length - 1, length=length)

    @property
    def latest_index(self) -> int:
        return self.length - 1

    @property
    def is_at_latest(self) -> bool:
        return self.index == self.latest_index

    def apply(self, intent: NavigationIntent) -> "NavigationState":
        """Return the state after ``intent``; indexes are clamped to the list."""
        if self.length == 0:
            return self
        if intent == NavigationIntent.NEXT:
            return replace(self, index=min(self.index + 1, self.latest_index))
        if intent == NavigationIntent.PREV:
            return replace(self, index=max(self.index - 1, 0))
        if intent == NavigationIntent.LATEST:
            return NavigationState.at_latest(self.length)
        if not self.is_at_latest:
            return replace(self, index=self.latest_index, toggle_index=self.index)
        if self.toggle_index is not None:
            return replace(self, index=self.toggle_index, toggle_index=None)
        return self

    def resized(self, length: int) -> "NavigationState":
        """Carry the state over to a reloaded list of ``length`` versions."""
        if self.is_at_latest:
            return NavigationState.at_latest(length)
        index = min(self.index, length - 1)
        toggle_index = self.toggle_index
        if toggle_index is not None and toggle_index >= length:
            toggle_index = None
        return NavigationState(index=index, length=length, toggle_index=toggle_index)
