"""Tests for the corosync status models."""

import pytest
from pydantic import ValidationError

from corosync.models import Member, QuorumVotes, RingInfo, Status


def _status(**overrides):
    values = {
        "node_id": "1",
        "ring_id": "1",
        "seq": 8,
        "quorate": True,
        "quorum_votes": QuorumVotes(expected_votes=2, highest_expected=2, total_votes=2, quorum=2),
    }
    values.update(overrides)
    return Status(**values)


def test_status_defaults_to_empty_sequences():
    status = _status()

    assert status.rings == ()
    assert status.members == ()
    assert status.local_member is None


def test_models_are_frozen():
    ring = RingInfo(number="0", address="10.0.0.1")

    with pytest.raises(ValidationError):
        ring.faulty = True


def test_uint64_fields_reject_out_of_range_values():
    with pytest.raises(ValidationError):
        Member(id="1", name="node1", votes=2**64)

    with pytest.raises(ValidationError):
        _status(seq=-1)


def test_status_helpers():
    rings = (
        RingInfo(number="0", address="10.0.0.1", faulty=True),
        RingInfo(number="1", address="172.16.0.1"),
    )
    members = (
        Member(id="1", name="node1", votes=1),
        Member(id="2", name="node2", local=True, votes=1),
    )

    status = _status(rings=rings, members=members)

    assert [ring.number for ring in status.faulty_rings] == ["0"]
    assert status.local_member == members[1]
