"""Version chain - arena of a document's versions indexed by id."""

from collections.abc import Iterable
from operator import attrgetter
from uuid import UUID

from docchain.domain.entities import DocumentVersion
from docchain.domain.exceptions import ChainIntegrityError

DEFAULT_MAX_DEPTH = 10_000


class VersionChain:
    """Linear history of one document.

    Versions are held by id and linked through ``previous_version_id``.
    Walks are bounded by ``max_depth`` so a corrupted cyclic chain raises
    instead of looping.
    """

    def __init__(
        self,
        versions: Iterable[DocumentVersion],
        max_depth: int = DEFAULT_MAX_DEPTH,
    ) -> None:
        self._nodes: dict[UUID, DocumentVersion] = {}
        self._max_depth = max_depth
        for version in versions:
            if version.id in self._nodes:
                raise ChainIntegrityError(f"Duplicate version id {version.id}")
            self._nodes[version.id] = version
        document_ids = {v.document_id for v in self._nodes.values()}
        if len(document_ids) > 1:
            raise ChainIntegrityError("Versions belong to more than one document")

    def __len__(self) -> int:
        return len(self._nodes)

    def __contains__(self, version_id: object) -> bool:
        return version_id in self._nodes

    def get(self, version_id: UUID) -> DocumentVersion | None:
        """Get version by id."""
        return self._nodes.get(version_id)

    @property
    def head(self) -> DocumentVersion | None:
        """Latest version, or None for an empty history."""
        return max(self._nodes.values(), key=attrgetter("version"), default=None)

    @property
    def next_version_number(self) -> int:
        head = self.head
        return head.version + 1 if head else 1

    def ordered(self) -> list[DocumentVersion]:
        """Versions sorted by version number, oldest first."""
        return sorted(self._nodes.values(), key=attrgetter("version"))

    def walk(self, start_id: UUID) -> list[DocumentVersion]:
        """Follow previous links from ``start_id`` to the root, newest first."""
        path: list[DocumentVersion] = []
        seen: set[UUID] = set()
        current_id: UUID | None = start_id
        while current_id is not None:
            if len(path) >= self._max_depth:
                raise ChainIntegrityError(
                    f"Chain is deeper than {self._max_depth} versions"
                )
            if current_id in seen:
                raise ChainIntegrityError(f"Cycle through version {current_id}")
            node = self._nodes.get(current_id)
            if node is None:
                raise ChainIntegrityError(f"Dangling link to version {current_id}")
            seen.add(current_id)
            path.append(node)
            current_id = node.previous_version_id
        return path

    def validate(self) -> None:
        """Check numbering runs 1..N and each version links to its predecessor."""
        ordered = self.ordered()
        if not ordered:
            return
        previous: DocumentVersion | None = None
        for expected, node in enumerate(ordered, start=1):
            if node.version != expected:
                raise ChainIntegrityError(
                    f"Expected version {expected}, found {node.version}"
                )
            expected_link = previous.id if previous else None
            if node.previous_version_id != expected_link:
                raise ChainIntegrityError(
                    f"Version {node.version} does not link to version {expected - 1}"
                )
            previous = node
        path = self.walk(ordered[-1].id)
        if len(path) != len(ordered):
            raise ChainIntegrityError("Versions unreachable from head")
