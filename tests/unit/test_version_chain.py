"""Unit tests for VersionChain."""

from dataclasses import replace
from uuid import uuid4

import pytest

from docchain.domain.exceptions import ChainIntegrityError
from docchain.domain.version_chain import VersionChain

from tests.conftest import build_chain


def test_empty_chain() -> None:
    chain = VersionChain([])
    assert len(chain) == 0
    assert chain.head is None
    assert chain.next_version_number == 1
    assert chain.ordered() == []
    chain.validate()


def test_head_and_next_number() -> None:
    versions = build_chain(3)
    chain = VersionChain(reversed(versions))
    assert chain.head == versions[-1]
    assert chain.next_version_number == 4
    assert chain.ordered() == versions
    assert versions[0].id in chain
    assert chain.get(versions[1].id) == versions[1]
    assert chain.get(uuid4()) is None


def test_walk_from_head_reaches_root() -> None:
    """Walking back from the head visits every version exactly once."""
    versions = build_chain(5)
    chain = VersionChain(versions)
    path = chain.walk(versions[-1].id)
    assert [v.version for v in path] == [5, 4, 3, 2, 1]
    assert path[-1].previous_version_id is None


def test_walk_from_middle() -> None:
    versions = build_chain(4)
    path = VersionChain(versions).walk(versions[1].id)
    assert [v.version for v in path] == [2, 1]


def test_valid_chain_passes_validation() -> None:
    VersionChain(build_chain(6)).validate()


def test_duplicate_id_rejected() -> None:
    versions = build_chain(2)
    with pytest.raises(ChainIntegrityError, match="Duplicate"):
        VersionChain([versions[0], versions[0]])


def test_mixed_documents_rejected() -> None:
    with pytest.raises(ChainIntegrityError, match="more than one document"):
        VersionChain(build_chain(1) + build_chain(1))


def test_cycle_detected() -> None:
    v1, v2 = build_chain(2)
    looped = replace(v1, previous_version_id=v2.id)
    chain = VersionChain([looped, v2])
    with pytest.raises(ChainIntegrityError, match="Cycle"):
        chain.walk(v2.id)


def test_dangling_link_detected() -> None:
    v1, v2 = build_chain(2)
    chain = VersionChain([v2])
    with pytest.raises(ChainIntegrityError, match="Dangling"):
        chain.walk(v2.id)
    assert v1.id not in chain


def test_max_depth_bounds_walk() -> None:
    versions = build_chain(5)
    chain = VersionChain(versions, max_depth=3)
    with pytest.raises(ChainIntegrityError, match="deeper than 3"):
        chain.walk(versions[-1].id)


def test_gap_in_numbering_fails_validation() -> None:
    v1, v2, v3 = build_chain(3)
    chain = VersionChain([v1, replace(v3, previous_version_id=v1.id)])
    with pytest.raises(ChainIntegrityError, match="Expected version 2"):
        chain.validate()
    assert v2 not in chain.ordered()


def test_wrong_predecessor_fails_validation() -> None:
    v1, v2, v3 = build_chain(3)
    chain = VersionChain([v1, v2, replace(v3, previous_version_id=v1.id)])
    with pytest.raises(ChainIntegrityError, match="does not link"):
        chain.validate()
