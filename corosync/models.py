"""Pydantic models for parsed corosync ring and quorum status."""

from __future__ import annotations

from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field

from corosync.constants import UINT64_MAX

Uint64 = Annotated[int, Field(ge=0, le=UINT64_MAX)]


class RingInfo(BaseModel):
    """One ``RING ID`` block reported by ``corosync-cfgtool -s``."""

    model_config = ConfigDict(frozen=True)

    number: str = Field(..., description="Ring number exactly as printed after 'RING ID'.")
    address: str = Field(default="", description="Local address bound to the ring.")
    faulty: bool = False


class QuorumVotes(BaseModel):
    """Votequorum counters."""

    model_config = ConfigDict(frozen=True)

    expected_votes: Uint64
    highest_expected: Uint64
    total_votes: Uint64
    quorum: Uint64


class Member(BaseModel):
    """A row of the membership table."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    local: bool = False
    votes: Uint64


class Status(BaseModel):
    """
    Normalized view of a node's corosync state.

    Built once per parse from the ring status and quorum status outputs.
    Ring and member order follow the order in which the tools printed them.
    """

    model_config = ConfigDict(frozen=True)

    rings: tuple[RingInfo, ...] = Field(default_factory=tuple)
    node_id: str
    ring_id: str
    seq: Uint64
    quorate: bool
    quorum_votes: QuorumVotes
    members: tuple[Member, ...] = Field(default_factory=tuple)

    @property
    def faulty_rings(self) -> list[RingInfo]:
        return [ring for ring in self.rings if ring.faulty]

    @property
    def local_member(self) -> Member | None:
        for member in self.members:
            if member.local:
                return member
        return None
